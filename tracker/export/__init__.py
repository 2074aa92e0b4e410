"""Export destinations for reviewed tracking records."""
from tracker.export.sinks import SHEET_TITLE, ensure_output_dir, workbook_bytes, write_excel
from tracker.export.templates import EXPORT_HEADERS, record_to_export_row, records_to_export_rows

__all__ = [
    "EXPORT_HEADERS",
    "SHEET_TITLE",
    "ensure_output_dir",
    "record_to_export_row",
    "records_to_export_rows",
    "workbook_bytes",
    "write_excel",
]
