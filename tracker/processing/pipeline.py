"""Import orchestration: workbook rows to a filtered, deduplicated record set."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, List, Sequence

from tracker.core.config import Settings, load_settings
from tracker.core.errors import InsufficientDataError, NoMatchingRowsError
from tracker.core.models import TrackingRecord
from tracker.ingestion.columns import resolve_columns
from tracker.ingestion.normalizer import normalize_row
from tracker.ingestion.workbook import WorkbookSource, read_rows
from tracker.processing.dedupe import deduplicate
from tracker.processing.filters import filter_records

logger = logging.getLogger(__name__)


def process_rows(
    rows: Sequence[Sequence[Any]],
    settings: Settings | None = None,
    days_to_show: int | None = None,
    now: datetime | None = None,
) -> List[TrackingRecord]:
    """Resolve columns, normalize, filter, and deduplicate raw sheet rows."""

    settings = settings or load_settings()
    if len(rows) < 2:
        raise InsufficientDataError()

    columns = resolve_columns(rows[0], settings.column_candidates)
    if columns.invoice_value is None:
        logger.warning("Value column not found; invoice values default to zero")

    records = [normalize_row(row, columns, settings.tz) for row in rows[1:]]
    logger.info("Normalized %d data rows", len(records))

    kept = filter_records(records, settings.rules(), days_to_show=days_to_show, now=now)
    unique = deduplicate(kept)
    if not unique:
        raise NoMatchingRowsError()

    logger.info("Kept %d unique records out of %d rows", len(unique), len(records))
    return unique


def import_workbook(
    source: WorkbookSource,
    settings: Settings | None = None,
    days_to_show: int | None = None,
    now: datetime | None = None,
) -> List[TrackingRecord]:
    """Read a workbook and return the records that qualify for review."""

    logger.info("Import starting")
    rows = read_rows(source)
    return process_rows(rows, settings=settings, days_to_show=days_to_show, now=now)
