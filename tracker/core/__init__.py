"""Core building blocks for the tracker package."""
from tracker.core.config import Settings, get_config_value, load_env_file, load_settings
from tracker.core.errors import (
    ExportError,
    FileReadError,
    InsufficientDataError,
    MissingColumnsError,
    NoMatchingRowsError,
    ProcessingError,
    TrackerError,
)
from tracker.core.logging import configure_logging
from tracker.core.models import DEFAULT_STATUS, STATUSES, FilterRules, SortState, TrackingRecord

__all__ = [
    "DEFAULT_STATUS",
    "STATUSES",
    "ExportError",
    "FileReadError",
    "FilterRules",
    "InsufficientDataError",
    "MissingColumnsError",
    "NoMatchingRowsError",
    "ProcessingError",
    "Settings",
    "SortState",
    "TrackerError",
    "TrackingRecord",
    "configure_logging",
    "get_config_value",
    "load_env_file",
    "load_settings",
]
