"""Validation of caller-supplied table configuration."""

from __future__ import annotations

from typing import Iterable, Tuple

from record_table.models import Column, PageState


def validate_page_state(page_state: PageState) -> Tuple[bool, str]:
    """Validate page size; out-of-range page numbers are clamped later, not rejected."""
    page_size = page_state.page_size
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        return False, f"page_size must be an integer, got {page_size!r}."
    if page_size <= 0:
        return False, f"page_size must be at least 1, got {page_size}."
    if isinstance(page_state.page, bool) or not isinstance(page_state.page, int):
        return False, f"page must be an integer, got {page_state.page!r}."
    return True, ""


def validate_column(column: Column) -> Tuple[bool, str]:
    """Validate one column descriptor."""
    if (column.searchable or column.sortable) and not str(column.key).strip():
        return False, "Searchable or sortable columns need a non-empty key."
    return True, ""


def validate_columns(columns: Iterable[Column]) -> Tuple[bool, str]:
    """Validate a column list, reporting the first problem found."""
    for column in columns:
        valid, error_message = validate_column(column)
        if not valid:
            return False, error_message
    return True, ""
