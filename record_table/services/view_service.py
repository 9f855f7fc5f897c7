"""Filter, sort and paginate records into one table view."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from record_table.models import Column, PageState, Record, ViewResult
from record_table.services import filter_service, sort_service, validation_service
from record_table.services.sort_service import NO_SORT, SortState
from record_table.utils.logging_config import get_logger
from record_table.utils.pagination import paginate

logger = get_logger("view_service")


def build_view(
    records: Sequence[Record],
    columns: Sequence[Column],
    search_term: str = "",
    sort_state: SortState = NO_SORT,
    page_state: Optional[PageState] = None,
    selected_filters: Optional[Mapping[str, Sequence[str]]] = None,
) -> ViewResult:
    """Compute the visible page for the current table inputs.

    Stages run in a fixed order: search and facet filters, then sort, then
    pagination. Inputs are never mutated and nothing is cached, so the host
    can call this on every state change.

    Raises:
        ValueError: for a non-positive page size or a searchable/sortable
            column without a key.
    """
    page_state = page_state or PageState()

    valid, error_message = validation_service.validate_page_state(page_state)
    if not valid:
        raise ValueError(error_message)
    valid, error_message = validation_service.validate_columns(columns)
    if not valid:
        raise ValueError(error_message)

    matched = filter_service.search_filter(records, columns, search_term)
    matched = filter_service.apply_filters(matched, selected_filters)
    ordered = sort_service.sort_records(matched, sort_state)
    view = paginate(ordered, page_state)

    logger.debug(
        "view page %d/%d: %d of %d records matched",
        view.page,
        view.total_pages,
        view.total_matched,
        len(records),
    )
    return view
