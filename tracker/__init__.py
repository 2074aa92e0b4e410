"""Import, filter, review, and re-export carrier tracking spreadsheets."""
from tracker.core import (
    STATUSES,
    Settings,
    SortState,
    TrackerError,
    TrackingRecord,
    configure_logging,
    load_settings,
)
from tracker.export import EXPORT_HEADERS, records_to_export_rows, workbook_bytes, write_excel
from tracker.ingestion import find_column_index, normalize_row, read_rows, resolve_columns
from tracker.processing import deduplicate, filter_records, import_workbook, process_rows, sort_records
from tracker.review import (
    TrackerState,
    change_status,
    export_bytes,
    export_to_path,
    import_into,
    sort_by,
)

__all__ = [
    "EXPORT_HEADERS",
    "STATUSES",
    "Settings",
    "SortState",
    "TrackerError",
    "TrackerState",
    "TrackingRecord",
    "change_status",
    "configure_logging",
    "deduplicate",
    "export_bytes",
    "export_to_path",
    "filter_records",
    "find_column_index",
    "import_into",
    "import_workbook",
    "load_settings",
    "normalize_row",
    "process_rows",
    "read_rows",
    "records_to_export_rows",
    "resolve_columns",
    "sort_by",
    "sort_records",
    "workbook_bytes",
    "write_excel",
]
