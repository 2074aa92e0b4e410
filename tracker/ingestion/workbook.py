"""Read the first worksheet of an uploaded workbook into plain value rows."""
from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path
from typing import Any, BinaryIO, List, Sequence, Union

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from tracker.core.errors import FileReadError, InsufficientDataError

logger = logging.getLogger(__name__)

WorkbookSource = Union[bytes, bytearray, Path, str, BinaryIO]


def _is_blank(row: Sequence[Any]) -> bool:
    return all(value is None or (isinstance(value, str) and not value.strip()) for value in row)


def read_rows(source: WorkbookSource) -> List[List[Any]]:
    """Return the non-blank rows of the first sheet, header row included.

    Cells keep their raw types: numbers stay numbers (date serials included
    when the cell carries no date format) and date-formatted cells arrive as
    ``datetime`` objects.
    """

    if isinstance(source, (bytes, bytearray)):
        if not source:
            raise InsufficientDataError("File is empty or invalid.")
        source = io.BytesIO(source)

    try:
        workbook = load_workbook(source, read_only=True, data_only=True)
    except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as exc:
        logger.error("Failed to open workbook: %s", exc)
        raise FileReadError(f"{FileReadError.default_message} ({exc})") from exc

    try:
        if not workbook.worksheets:
            raise InsufficientDataError()
        sheet = workbook.worksheets[0]
        rows = [list(row) for row in sheet.iter_rows(values_only=True) if not _is_blank(row)]
    finally:
        workbook.close()

    logger.info("Read %d non-blank rows from sheet '%s'", len(rows), sheet.title)
    return rows
