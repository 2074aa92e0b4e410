"""Filtering, deduplication, sorting, and import orchestration."""
from tracker.processing.dedupe import deduplicate
from tracker.processing.filters import filter_records, parse_event_date, passes_filter, within_days
from tracker.processing.pipeline import import_workbook, process_rows
from tracker.processing.sorting import DATE_FIELD, SORTABLE_FIELDS, next_sort_state, sort_records

__all__ = [
    "DATE_FIELD",
    "SORTABLE_FIELDS",
    "deduplicate",
    "filter_records",
    "import_workbook",
    "next_sort_state",
    "parse_event_date",
    "passes_filter",
    "process_rows",
    "sort_records",
    "within_days",
]
