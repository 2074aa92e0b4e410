"""Spreadsheet sinks for the reviewed record set."""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, Dict, Iterable

from openpyxl import Workbook
from openpyxl.utils.exceptions import IllegalCharacterError

from tracker.core.errors import ExportError
from tracker.export.templates import EXPORT_HEADERS

logger = logging.getLogger(__name__)

SHEET_TITLE = "processed_records"


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def _build_workbook(rows: Iterable[Dict[str, Any]]) -> Workbook:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE
    sheet.append(EXPORT_HEADERS)
    for row in rows:
        sheet.append([row.get(header) for header in EXPORT_HEADERS])
    return workbook


def write_excel(rows: Iterable[Dict[str, Any]], output_path: Path) -> Path:
    """Write export rows to an Excel workbook on disk using openpyxl."""

    rows = list(rows)
    try:
        ensure_output_dir(output_path)
        _build_workbook(rows).save(output_path)
    except (OSError, ValueError, TypeError, IllegalCharacterError) as exc:
        logger.exception("Failed to write Excel export to %s", output_path)
        raise ExportError(f"{ExportError.default_message} ({exc})") from exc

    logger.info("Wrote %d rows to %s", len(rows), output_path)
    return output_path


def workbook_bytes(rows: Iterable[Dict[str, Any]]) -> bytes:
    """Serialize export rows to in-memory workbook bytes for downloads."""

    rows = list(rows)
    buffer = io.BytesIO()
    try:
        _build_workbook(rows).save(buffer)
    except (OSError, ValueError, TypeError, IllegalCharacterError) as exc:
        logger.exception("Failed to serialize Excel export")
        raise ExportError(f"{ExportError.default_message} ({exc})") from exc
    return buffer.getvalue()
