"""Spreadsheet ingestion: workbook reading, column resolution, row normalization."""
from tracker.ingestion.columns import (
    COLUMN_CANDIDATES,
    NOT_FOUND,
    REQUIRED_COLUMNS,
    ColumnMap,
    find_column_index,
    resolve_columns,
)
from tracker.ingestion.normalizer import decode_date, format_brl, normalize_row, parse_amount
from tracker.ingestion.workbook import read_rows

__all__ = [
    "COLUMN_CANDIDATES",
    "NOT_FOUND",
    "REQUIRED_COLUMNS",
    "ColumnMap",
    "decode_date",
    "find_column_index",
    "format_brl",
    "normalize_row",
    "parse_amount",
    "read_rows",
    "resolve_columns",
]
