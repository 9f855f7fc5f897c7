"""Pagination controls component."""

from __future__ import annotations

from typing import List, Optional, Tuple

import streamlit as st

from record_table.models import ViewResult


def render_pagination_controls(
    view: ViewResult,
    page_size_options: List[int],
    key: str = "pagination",
) -> Tuple[Optional[int], Optional[int]]:
    """
    Render pagination controls for a computed view.

    Args:
        view: Current page of the table, with its clamped page number
        page_size_options: Choices for the rows-per-page selector
        key: Unique key prefix for the widgets

    Returns:
        Tuple of (new page number or None, new page size or None)
    """
    new_page = None
    new_page_size = None

    info_col, nav_col, size_col = st.columns([2, 2, 1])

    with info_col:
        st.markdown(f"**{view.display_range()}**")

    with nav_col:
        btn_cols = st.columns([1, 1, 2, 1, 1])

        with btn_cols[0]:
            if st.button("⏮", key=f"{key}_first", disabled=not view.has_previous):
                new_page = 1

        with btn_cols[1]:
            if st.button("◀", key=f"{key}_prev", disabled=not view.has_previous):
                new_page = view.page - 1

        with btn_cols[2]:
            st.markdown(
                f"<div style='text-align: center; padding-top: 8px;'>"
                f"Page {view.page} of {view.total_pages}</div>",
                unsafe_allow_html=True,
            )

        with btn_cols[3]:
            if st.button("▶", key=f"{key}_next", disabled=not view.has_next):
                new_page = view.page + 1

        with btn_cols[4]:
            if st.button("⏭", key=f"{key}_last", disabled=not view.has_next):
                new_page = view.total_pages

    with size_col:
        current_idx = page_size_options.index(view.page_size) if view.page_size in page_size_options else 0
        selected_size = st.selectbox(
            "Per page",
            options=page_size_options,
            index=current_idx,
            key=f"{key}_page_size",
            label_visibility="collapsed",
        )
        if selected_size != view.page_size:
            new_page_size = int(selected_size)

    return new_page, new_page_size
