"""Session state and reviewer actions shared by the dashboard and the CLI.

Every action takes the current ``TrackerState`` and returns a new one, so the
whole import, sort, edit, and export flow can run without a rendering surface.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from tracker.core.config import Settings
from tracker.core.errors import ProcessingError, TrackerError
from tracker.core.models import STATUSES, SortState, TrackingRecord
from tracker.export.sinks import workbook_bytes, write_excel
from tracker.export.templates import records_to_export_rows
from tracker.ingestion.workbook import WorkbookSource
from tracker.processing.pipeline import import_workbook
from tracker.processing.sorting import next_sort_state, sort_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackerState:
    """Everything a review session holds between user actions."""

    records: Tuple[TrackingRecord, ...] = ()
    error: Optional[str] = None
    sort: Optional[SortState] = None
    days_to_show: Optional[int] = None
    source_name: Optional[str] = None

    @property
    def can_export(self) -> bool:
        return bool(self.records)


def import_into(
    state: TrackerState,
    source: WorkbookSource,
    source_name: str | None = None,
    settings: Settings | None = None,
    now: datetime | None = None,
) -> TrackerState:
    """Replace the record set with a fresh import, or keep it and report why not."""

    try:
        records = import_workbook(source, settings=settings, days_to_show=state.days_to_show, now=now)
    except TrackerError as exc:
        logger.warning("Import of %s rejected: %s", source_name or "workbook", exc)
        return replace(state, error=str(exc))
    except Exception:
        logger.exception("Unexpected failure while processing %s", source_name or "workbook")
        return replace(state, error=ProcessingError.default_message)

    return TrackerState(
        records=tuple(records),
        error=None,
        sort=None,
        days_to_show=state.days_to_show,
        source_name=source_name,
    )


def set_days_to_show(state: TrackerState, days: int | None) -> TrackerState:
    """Record the day window applied to the next import."""

    return replace(state, days_to_show=days)


def change_status(state: TrackerState, reference: str, status: str) -> TrackerState:
    """Set the reviewer status on the record with the given reference."""

    if status not in STATUSES:
        raise ValueError(f"Unknown status {status!r}; expected one of {', '.join(STATUSES)}")
    records = tuple(
        replace(record, status=status) if record.reference == reference else record
        for record in state.records
    )
    return replace(state, records=records)


def sort_by(state: TrackerState, field: str) -> TrackerState:
    """Sort by ``field``, toggling direction when the same column is chosen again."""

    sort = next_sort_state(state.sort, field)
    records = sort_records(state.records, sort.field, descending=sort.descending)
    return replace(state, records=tuple(records), sort=sort)


def with_error(state: TrackerState, message: str | None) -> TrackerState:
    return replace(state, error=message)


def export_rows(state: TrackerState) -> List[Dict[str, Any]]:
    """Return the export projection of the current record set."""

    return records_to_export_rows(state.records)


def export_bytes(state: TrackerState) -> bytes:
    """Serialize the current record set to workbook bytes."""

    return workbook_bytes(export_rows(state))


def export_to_path(state: TrackerState, output_path: Path) -> Path:
    """Write the current record set to ``output_path``."""

    return write_excel(export_rows(state), output_path)


def records_to_rows(records: Tuple[TrackingRecord, ...] | List[TrackingRecord]) -> List[Dict[str, Any]]:
    """Convert records to dictionaries for tabular rendering."""

    def _sanitize(value: Any) -> Any:
        if isinstance(value, str):
            return " ".join(value.split())
        return value

    return [{key: _sanitize(value) for key, value in record.to_dict().items()} for record in records]
