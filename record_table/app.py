"""Streamlit app entrypoint for the record table demo."""

from __future__ import annotations

from pathlib import Path
from typing import List

import streamlit as st

from record_table.components.filters import render_filters
from record_table.components.pagination import render_pagination_controls
from record_table.components.table import render_sort_header, render_table
from record_table.config import (
    ASSETS_DIR,
    DEFAULT_PAGE_SIZE,
    FILTER_PATHS,
    LOG_FILE,
    LOG_LEVEL,
    PAGE_SIZE_OPTIONS,
    RECORDS_FILE,
    SAMPLE_COLUMNS,
)
from record_table.models import Column, PageState
from record_table.services import data_loader, filter_service, view_service
from record_table.services.sort_service import NO_SORT, toggle_sort
from record_table.utils.logging_config import setup_logging

st.set_page_config(page_title="Record Table", layout="wide")
logger = setup_logging(LOG_LEVEL, log_file=LOG_FILE)


def load_css() -> None:
    """Load app-level CSS styling from the assets directory."""
    css_path = ASSETS_DIR / "styles.css"
    if css_path.exists():
        with css_path.open("r", encoding="utf-8") as css_file:
            st.markdown(f"<style>{css_file.read()}</style>", unsafe_allow_html=True)


def init_session_state() -> None:
    """Initialize required session-state variables."""
    st.session_state.setdefault("sort_state", NO_SORT)
    st.session_state.setdefault("page", 1)
    st.session_state.setdefault("page_size", DEFAULT_PAGE_SIZE)
    st.session_state.setdefault("last_filter_signature", tuple())


@st.cache_data(show_spinner=False)
def get_records(records_path: str, file_mtime: float) -> List[dict]:
    """Load records with cache invalidation by mtime."""
    del file_mtime
    return data_loader.load_records(Path(records_path))


def main() -> None:
    """Render and run the record table."""
    load_css()
    init_session_state()

    try:
        records = get_records(str(RECORDS_FILE), RECORDS_FILE.stat().st_mtime)
    except FileNotFoundError:
        logger.error("Records file not found: %s", RECORDS_FILE)
        st.error(f"Records file not found: {RECORDS_FILE}")
        st.stop()
    except ValueError as exc:
        logger.error("Could not load records: %s", exc)
        st.error(str(exc))
        st.stop()

    columns = [Column.from_dict(payload) for payload in SAMPLE_COLUMNS]
    labels = {column.key: column.header for column in columns}

    st.markdown("### Records")
    filter_options = filter_service.get_filter_options(records, FILTER_PATHS)
    search_term, selected_filters = render_filters(filter_options, labels)

    filter_signature = filter_service.filters_signature(search_term, selected_filters)
    if filter_signature != st.session_state["last_filter_signature"]:
        st.session_state["last_filter_signature"] = filter_signature
        st.session_state["page"] = 1

    clicked = render_sort_header(columns, st.session_state["sort_state"])
    if clicked is not None:
        st.session_state["sort_state"] = toggle_sort(st.session_state["sort_state"], clicked)
        st.rerun()

    view = view_service.build_view(
        records,
        columns,
        search_term=search_term,
        sort_state=st.session_state["sort_state"],
        page_state=PageState(st.session_state["page"], st.session_state["page_size"]),
        selected_filters=selected_filters,
    )
    # Keep the stored page in step with the clamped one.
    st.session_state["page"] = view.page

    st.caption(f"Total Rows: {view.total_matched}/{len(records)}")
    selected = render_table(view.rows, columns)
    if selected is not None:
        logger.info("Row selected: %s", selected.get("id", selected))
        with st.expander("Selected row", expanded=True):
            st.json(selected)

    new_page, new_page_size = render_pagination_controls(view, PAGE_SIZE_OPTIONS)
    if new_page_size is not None:
        st.session_state["page_size"] = new_page_size
        st.session_state["page"] = 1
        st.rerun()
    if new_page is not None:
        st.session_state["page"] = new_page
        st.rerun()


if __name__ == "__main__":
    main()
