"""Comparator-driven sorting and the tri-state sort toggle."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from functools import cmp_to_key
from numbers import Real
from typing import List, Optional, Sequence, Union

from record_table.config import SORT_ASCENDING, SORT_DESCENDING
from record_table.models import Column, Record
from record_table.services.path_resolver import resolve
from record_table.utils.helpers import is_missing, normalize_text
from record_table.utils.logging_config import get_logger

logger = get_logger("sort_service")


@dataclass(frozen=True)
class NoSort:
    """No active sort; rows keep their input order."""

    @property
    def key(self) -> None:
        return None

    @property
    def direction(self) -> None:
        return None


@dataclass(frozen=True)
class Ascending:
    key: str

    @property
    def direction(self) -> str:
        return SORT_ASCENDING


@dataclass(frozen=True)
class Descending:
    key: str

    @property
    def direction(self) -> str:
        return SORT_DESCENDING


SortState = Union[NoSort, Ascending, Descending]
NO_SORT = NoSort()


def sort_state_from_fields(key: Optional[str], direction: Optional[str]) -> SortState:
    """Build a sort state from loose ``key``/``direction`` fields.

    Both must be set or both must be ``None``.
    """
    if key is None and direction is None:
        return NO_SORT
    if key is None or direction is None:
        raise ValueError("Sort key and direction must both be set or both be None.")
    if direction == SORT_ASCENDING:
        return Ascending(key)
    if direction == SORT_DESCENDING:
        return Descending(key)
    raise ValueError(f"Unknown sort direction: {direction!r}.")


def toggle_sort(state: SortState, column: Column) -> SortState:
    """Advance the sort state after the user activates ``column``'s header.

    Same column cycles none -> asc -> desc -> none; another column starts at asc.
    Columns that are not sortable leave the state unchanged.
    """
    if not column.sortable:
        return state
    if isinstance(state, Ascending) and state.key == column.key:
        return Descending(column.key)
    if isinstance(state, Descending) and state.key == column.key:
        return NO_SORT
    return Ascending(column.key)


def _kind(value: object) -> Optional[type]:
    """Group values whose native ordering is comparable."""
    if isinstance(value, (bool, Real)):
        return Real
    if isinstance(value, str):
        return str
    # datetime subclasses date, and the two do not compare with each other.
    if isinstance(value, datetime):
        return datetime
    if isinstance(value, date):
        return date
    return None


def _sign(left, right) -> int:
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def compare(left: object, right: object) -> int:
    """Order two cell values, returning -1, 0 or 1.

    Missing values sort after everything else. Numbers (booleans as 0/1),
    strings and dates compare natively with their own kind; any other pair
    is compared by text form.
    """
    left_missing = is_missing(left)
    right_missing = is_missing(right)
    if left_missing or right_missing:
        return int(left_missing) - int(right_missing)

    kind = _kind(left)
    if kind is not None and kind is _kind(right):
        try:
            return _sign(left, right)
        except TypeError:
            # Naive vs aware datetimes.
            pass
    return _sign(normalize_text(left), normalize_text(right))


def sort_records(records: Sequence[Record], sort_state: SortState) -> List[Record]:
    """Return a stably sorted copy of ``records`` for the given sort state.

    Descending order negates the ascending comparison rather than reversing
    the sorted list, so ties keep their input order in both directions.
    """
    if isinstance(sort_state, NoSort):
        return list(records)

    sign = -1 if isinstance(sort_state, Descending) else 1

    def compare_entries(left: tuple, right: tuple) -> int:
        return sign * compare(left[0], right[0])

    keyed = [(resolve(record, sort_state.key), record) for record in records]
    keyed.sort(key=cmp_to_key(compare_entries))
    logger.debug("sorted %d records by %s %s", len(keyed), sort_state.key, sort_state.direction)
    return [record for _, record in keyed]
