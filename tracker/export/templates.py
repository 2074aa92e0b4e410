"""Mapping from tracking records to the exported spreadsheet layout."""
from typing import Any, Dict, Iterable, List

from tracker.core.models import TrackingRecord


EXPORT_HEADERS = [
    "Reference",
    "Last Event",
    "Last Event Date",
    "Invoice Value",
    "Status",
]


def record_to_export_row(record: TrackingRecord) -> Dict[str, Any]:
    """Project a record onto the export headers without reformatting values."""

    return {
        "Reference": record.reference,
        "Last Event": record.last_event,
        "Last Event Date": record.last_event_date,
        "Invoice Value": record.invoice_value,
        "Status": record.status,
    }


def records_to_export_rows(records: Iterable[TrackingRecord]) -> List[Dict[str, Any]]:
    """Convert records into export rows, keeping their current order."""

    return [record_to_export_row(record) for record in records]
