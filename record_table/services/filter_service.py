"""Filtering utilities for table records."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from record_table.models import Column, Record
from record_table.services.path_resolver import resolve
from record_table.utils.helpers import fold_text, normalize_text
from record_table.utils.logging_config import get_logger

logger = get_logger("filter_service")


def search_filter(records: Sequence[Record], columns: Sequence[Column], search_term: str) -> List[Record]:
    """Keep records where any searchable column contains the term, case-insensitively.

    A blank term returns the records unchanged.
    """
    needle = (search_term or "").strip().casefold()
    if not needle:
        return list(records)

    searchable_paths = [column.key for column in columns if column.searchable]
    matched = [
        record
        for record in records
        if any(needle in fold_text(resolve(record, path)) for path in searchable_paths)
    ]
    logger.debug("search %r matched %d of %d records", needle, len(matched), len(records))
    return matched


def get_filter_options(records: Sequence[Record], paths: List[str]) -> Dict[str, List[str]]:
    """Build sorted non-empty options for each filterable path."""
    options: Dict[str, List[str]] = {}
    for path in paths:
        values = {normalize_text(resolve(record, path)) for record in records}
        options[path] = sorted(value for value in values if value.strip())
    return options


def apply_filters(
    records: Sequence[Record],
    selected_filters: Optional[Mapping[str, Sequence[str]]],
) -> List[Record]:
    """Apply AND logic across filter paths with OR inside each path."""
    filtered = list(records)
    for path, values in (selected_filters or {}).items():
        if not values:
            continue
        allowed = {normalize_text(value) for value in values}
        filtered = [record for record in filtered if normalize_text(resolve(record, path)) in allowed]
    return filtered


def filters_signature(
    search_term: str,
    selected_filters: Optional[Mapping[str, Sequence[str]]] = None,
) -> tuple:
    """Build a hashable signature used to detect filter changes."""
    facets = tuple(
        (key, tuple(sorted(normalize_text(value) for value in values)))
        for key, values in sorted((selected_filters or {}).items())
        if values
    )
    return (search_term or "").strip().casefold(), facets
