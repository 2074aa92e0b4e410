"""Ordering helpers behind the sortable review table."""
from __future__ import annotations

from typing import Any, Iterable, List, Optional

from tracker.core.models import SortState, TrackingRecord
from tracker.processing.filters import parse_event_date

DATE_FIELD = "last_event_date"
SORTABLE_FIELDS = ("reference", "last_event", DATE_FIELD, "invoice_value", "status")


def _sort_key(field: str):
    if field == DATE_FIELD:

        def _instant(record: TrackingRecord) -> float:
            moment = parse_event_date(record.last_event_date)
            return moment.timestamp() if moment else 0.0

        return _instant

    def _text(record: TrackingRecord) -> Any:
        return str(getattr(record, field))

    return _text


def sort_records(records: Iterable[TrackingRecord], field: str, descending: bool = False) -> List[TrackingRecord]:
    """Return records ordered by ``field``; ties keep their current order.

    Dates compare by instant with missing values treated as the epoch; every
    other field compares as text.
    """

    if field not in SORTABLE_FIELDS:
        raise ValueError(f"Cannot sort by {field!r}; choose one of {', '.join(SORTABLE_FIELDS)}")
    return sorted(records, key=_sort_key(field), reverse=descending)


def next_sort_state(current: Optional[SortState], field: str) -> SortState:
    """Flip to descending on a repeat click of an ascending column, else ascending."""

    if current and current.field == field and current.direction == "asc":
        return SortState(field=field, direction="desc")
    return SortState(field=field, direction="asc")
