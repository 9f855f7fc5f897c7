"""Dotted key path lookup over nested records."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, List, Optional

from record_table.config import PATH_SEPARATOR


def split_path(path: object) -> List[str]:
    """Split a dotted path into segments, or return [] when it is malformed."""
    if not isinstance(path, str) or not path:
        return []
    segments = path.split(PATH_SEPARATOR)
    if any(not segment for segment in segments):
        return []
    return segments


def _step(current: Any, segment: str) -> Optional[Any]:
    """Descend one level, returning None when the segment does not apply."""
    if isinstance(current, Mapping):
        return current.get(segment)
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        if not segment.isdigit():
            return None
        index = int(segment)
        if index >= len(current):
            return None
        return current[index]
    return None


def resolve(record: object, path: str) -> Optional[Any]:
    """Read the value at ``path`` (e.g. ``"user.profile.name"``) from a record.

    Mappings are indexed by key and lists/tuples by non-negative integer
    segments. A missing field, a ``None`` along the way, a scalar that
    cannot be indexed, or a malformed path all resolve to ``None``.
    """
    segments = split_path(path)
    if not segments:
        return None

    current: Any = record
    for segment in segments:
        if current is None:
            return None
        current = _step(current, segment)
    return current
