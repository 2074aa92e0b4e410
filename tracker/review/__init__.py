"""Review session state and actions for human-in-the-loop workflows."""
from tracker.review.workflow import (
    TrackerState,
    change_status,
    export_bytes,
    export_rows,
    export_to_path,
    import_into,
    records_to_rows,
    set_days_to_show,
    sort_by,
    with_error,
)

__all__ = [
    "TrackerState",
    "change_status",
    "export_bytes",
    "export_rows",
    "export_to_path",
    "import_into",
    "records_to_rows",
    "set_days_to_show",
    "sort_by",
    "with_error",
]
