"""Helper utilities for value coercion."""

from __future__ import annotations

from datetime import date, datetime

import pandas as pd
from pandas.api.types import is_scalar


def is_missing(value: object) -> bool:
    """Return True for None and pandas/NumPy null markers (NaN, NaT, NA)."""
    if value is None:
        return True
    if not is_scalar(value):
        return False
    return bool(pd.isna(value))


def normalize_text(value: object) -> str:
    """Normalize a value into its text form, or empty string for nulls."""
    if is_missing(value):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (pd.Timestamp, datetime, date)):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def fold_text(value: object) -> str:
    """Return the case-folded text form of a value for matching."""
    return normalize_text(value).casefold()
