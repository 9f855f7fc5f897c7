"""Record loading and display adapters for the table."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from record_table.models import Column, Record
from record_table.services.path_resolver import resolve
from record_table.utils.helpers import is_missing
from record_table.utils.logging_config import get_logger

logger = get_logger("data_loader")


def load_records_json(records_file: Path) -> List[Dict[str, object]]:
    """Load a JSON array of objects, keeping nested structures intact."""
    if not records_file.exists():
        raise FileNotFoundError(f"Missing required file: {records_file}")

    with records_file.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
        raise ValueError(f"{records_file} must contain a JSON array of objects.")

    logger.info("Loaded %d records from %s", len(payload), records_file)
    return payload


def records_from_dataframe(dataframe: pd.DataFrame) -> List[Dict[str, object]]:
    """Convert dataframe rows to records, mapping null cells to None."""
    records = dataframe.astype(object).where(dataframe.notna(), None).to_dict(orient="records")
    return [{str(key): value for key, value in record.items()} for record in records]


def load_records_csv(records_file: Path) -> List[Dict[str, object]]:
    """Load a flat CSV file; blank cells become missing values."""
    if not records_file.exists():
        raise FileNotFoundError(f"Missing required file: {records_file}")

    dataframe = pd.read_csv(records_file, dtype=str, keep_default_na=False)
    dataframe = dataframe.mask(dataframe == "")
    records = records_from_dataframe(dataframe)
    logger.info("Loaded %d records from %s", len(records), records_file)
    return records


def load_records(records_file: Path) -> List[Dict[str, object]]:
    """Load records from a .json or .csv file based on its suffix."""
    if records_file.suffix.lower() == ".csv":
        return load_records_csv(records_file)
    return load_records_json(records_file)


def _cell_value(record: Record, column: Column) -> object:
    value = resolve(record, column.key)
    if column.render is not None:
        return column.render(value, record)
    return None if is_missing(value) else value


def view_to_dataframe(rows: Sequence[Record], columns: Sequence[Column]) -> pd.DataFrame:
    """Build the display frame for one page: one column per descriptor, headed by its label."""
    headers = [column.header for column in columns]
    data = [[_cell_value(record, column) for column in columns] for record in rows]
    # Object dtype keeps None as the missing marker instead of NaN.
    return pd.DataFrame(data, columns=headers, dtype=object)


def record_at_position(rows: Sequence[Record], positions: Sequence[int]) -> Optional[Record]:
    """Map a display-frame row selection back to its record on the current page."""
    for position in positions:
        if 0 <= position < len(rows):
            return rows[position]
    return None
