"""Search box and facet filter panel component."""

from __future__ import annotations

from typing import Dict, List, Tuple

import streamlit as st


def render_filters(
    options: Dict[str, List[str]],
    labels: Dict[str, str],
) -> Tuple[str, Dict[str, List[str]]]:
    """Render the search box and multi-select facets, returning the active values."""
    search_term = st.text_input(
        "Search",
        key="table_search",
        placeholder="Search...",
    )

    selected_filters: Dict[str, List[str]] = {}
    if not options:
        return search_term, selected_filters

    slots = st.columns(len(options))
    for slot, (path, path_options) in zip(slots, options.items()):
        label = labels.get(path, path)
        with slot:
            selected_filters[path] = st.multiselect(
                label,
                options=path_options,
                key=f"filter_{path}",
                placeholder=f"Filter {label}",
            )

    return search_term, selected_filters
