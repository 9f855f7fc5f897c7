"""Application configuration constants."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
DATA_DIR = ROOT_DIR / "data"
ASSETS_DIR = ROOT_DIR / "assets"

SAMPLE_RECORDS_FILE = DATA_DIR / "sample_records.json"
RECORDS_FILE = Path(os.getenv("RECORD_TABLE_RECORDS_FILE", str(SAMPLE_RECORDS_FILE)))

LOG_LEVEL = os.getenv("RECORD_TABLE_LOG_LEVEL", "INFO")
LOG_FILE = Path(os.environ["RECORD_TABLE_LOG_FILE"]) if os.getenv("RECORD_TABLE_LOG_FILE") else None
LOGGER_NAME = "record_table"

PATH_SEPARATOR = "."
DEFAULT_PAGE_SIZE = 10
PAGE_SIZE_OPTIONS = [5, 10, 25, 50]

SORT_ASCENDING = "asc"
SORT_DESCENDING = "desc"
SORT_INDICATORS = {
    None: "↕",
    SORT_ASCENDING: "▲",
    SORT_DESCENDING: "▼",
}

EMPTY_STATE_MESSAGE = "No data available"
NO_RESULTS_MESSAGE = "No results"

SAMPLE_COLUMNS = [
    {"key": "name", "label": "Name", "searchable": True, "sortable": True},
    {"key": "role", "label": "Role", "searchable": True, "sortable": True},
    {"key": "team.name", "label": "Team", "searchable": True, "sortable": True},
    {"key": "age", "label": "Age", "sortable": True, "align": "right"},
    {"key": "joined", "label": "Joined", "sortable": True},
    {"key": "active", "label": "Active", "sortable": True, "align": "center"},
]

FILTER_PATHS = ["role", "team.name"]
