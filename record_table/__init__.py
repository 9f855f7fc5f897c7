"""In-memory data view engine for record tables: search, sort and paginate."""

from record_table.models import Column, PageState, ViewResult
from record_table.services.filter_service import apply_filters, search_filter
from record_table.services.path_resolver import resolve
from record_table.services.sort_service import (
    NO_SORT,
    Ascending,
    Descending,
    NoSort,
    SortState,
    compare,
    sort_records,
    sort_state_from_fields,
    toggle_sort,
)
from record_table.services.view_service import build_view
from record_table.utils.pagination import paginate

__all__ = [
    "NO_SORT",
    "Ascending",
    "Column",
    "Descending",
    "NoSort",
    "PageState",
    "SortState",
    "ViewResult",
    "apply_filters",
    "build_view",
    "compare",
    "paginate",
    "resolve",
    "search_filter",
    "sort_records",
    "sort_state_from_fields",
    "toggle_sort",
]
