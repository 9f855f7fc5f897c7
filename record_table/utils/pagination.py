"""Pagination helpers for in-memory table slicing."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

from record_table.models import PageState, Record, ViewResult


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """Compute the total number of pages for the provided page size."""
    if page_size <= 0:
        raise ValueError(f"page_size must be at least 1, got {page_size}.")
    return max(1, math.ceil(total_rows / page_size))


def clamp_page_number(page_number: int, total_pages: int) -> int:
    """Clamp page number to valid bounds."""
    return min(max(page_number, 1), max(total_pages, 1))


def page_slice(page_number: int, page_size: int) -> Tuple[int, int]:
    """Return start/end row offsets for the selected page."""
    start = (page_number - 1) * page_size
    end = start + page_size
    return start, end


def paginate(records: Sequence[Record], page_state: PageState) -> ViewResult:
    """Slice one page out of ``records``, clamping the requested page number.

    The clamped page is reported on the result so the caller can resync
    its stored page after filters shrink the row count.
    """
    total_matched = len(records)
    total_pages = compute_total_pages(total_matched, page_state.page_size)
    page = clamp_page_number(page_state.page, total_pages)
    start, end = page_slice(page, page_state.page_size)
    return ViewResult(
        rows=list(records[start:end]),
        total_matched=total_matched,
        total_pages=total_pages,
        page=page,
        page_size=page_state.page_size,
    )
