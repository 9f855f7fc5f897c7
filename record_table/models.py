"""Value types shared by the view engine and the host UI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional

from record_table.config import DEFAULT_PAGE_SIZE, NO_RESULTS_MESSAGE

Record = Mapping[str, Any]
CellRenderer = Callable[[Any, Record], Any]


@dataclass(frozen=True)
class Column:
    """Describe one table column by its dotted key path.

    ``label``, ``align``, ``width`` and ``render`` belong to the presentation
    layer; the engine only reads ``key``, ``searchable`` and ``sortable``.
    """

    key: str
    searchable: bool = False
    sortable: bool = False
    label: str = ""
    align: str = "left"
    width: Optional[str] = None
    render: Optional[CellRenderer] = field(default=None, compare=False)

    @property
    def header(self) -> str:
        """Return the display label, falling back to the key path."""
        return self.label or self.key

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Column":
        """Build a column from a plain mapping such as a config entry."""
        return cls(
            key=str(payload.get("key", "")),
            searchable=bool(payload.get("searchable", False)),
            sortable=bool(payload.get("sortable", False)),
            label=str(payload.get("label", "")),
            align=str(payload.get("align", "left")),
            width=payload.get("width"),
            render=payload.get("render"),
        )


@dataclass(frozen=True)
class PageState:
    """Requested page, 1-based, and rows per page."""

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class ViewResult:
    """One computed page of the table plus its totals."""

    rows: List[Record]
    total_matched: int
    total_pages: int
    page: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def start_row(self) -> int:
        """Get 1-based start row number for display."""
        if self.total_matched == 0:
            return 0
        return self.offset + 1

    @property
    def end_row(self) -> int:
        """Get 1-based end row number for display."""
        return min(self.offset + self.page_size, self.total_matched)

    def display_range(self) -> str:
        """Get formatted display range string."""
        if self.total_matched == 0:
            return NO_RESULTS_MESSAGE
        return f"Showing {self.start_row:,} - {self.end_row:,} of {self.total_matched:,}"
