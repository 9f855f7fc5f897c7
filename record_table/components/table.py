"""Sortable table component using Streamlit dataframe display."""

from __future__ import annotations

from typing import Optional, Sequence

import streamlit as st

from record_table.config import EMPTY_STATE_MESSAGE, SORT_INDICATORS
from record_table.models import Column, Record
from record_table.services.data_loader import record_at_position, view_to_dataframe
from record_table.services.sort_service import SortState


def sort_indicator(column: Column, sort_state: SortState) -> str:
    """Return the header arrow for a column under the current sort."""
    if not column.sortable:
        return ""
    direction = sort_state.direction if sort_state.key == column.key else None
    return SORT_INDICATORS[direction]


def render_sort_header(columns: Sequence[Column], sort_state: SortState) -> Optional[Column]:
    """Render one header button per column and return the column that was clicked."""
    clicked: Optional[Column] = None
    slots = st.columns(len(columns))
    for index, (slot, column) in enumerate(zip(slots, columns)):
        with slot:
            label = f"{column.header} {sort_indicator(column, sort_state)}".strip()
            if st.button(
                label,
                key=f"sort_{index}_{column.key}",
                disabled=not column.sortable,
                width="stretch",
            ):
                clicked = column
    return clicked


def render_table(
    rows: Sequence[Record],
    columns: Sequence[Column],
    key: str = "record_table",
) -> Optional[Record]:
    """Render the current page of rows and return the record the user selected, if any."""
    if not rows:
        st.info(EMPTY_STATE_MESSAGE)
        return None

    display_df = view_to_dataframe(rows, columns)
    styler = display_df.style
    for column in columns:
        styler = styler.set_properties(
            subset=[column.header],
            **{"text-align": column.align},
        )

    event = st.dataframe(
        styler,
        key=key,
        hide_index=True,
        width="stretch",
        on_select="rerun",
        selection_mode="single-row",
        column_config={
            column.header: st.column_config.Column(column.header, width=column.width)
            for column in columns
            if column.width
        },
    )
    return record_at_position(rows, event.selection.rows)
