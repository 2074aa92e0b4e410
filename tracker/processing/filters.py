"""Business-rule filtering for normalized tracking records."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from tracker.core.models import FilterRules, TrackingRecord

logger = logging.getLogger(__name__)


def parse_event_date(value: Optional[str]) -> Optional[datetime]:
    """Parse a stored ISO timestamp back into an aware datetime."""

    if not value:
        return None
    try:
        moment = datetime.fromisoformat(value)
    except ValueError:
        return None
    return moment if moment.tzinfo else moment.astimezone()


def passes_filter(record: TrackingRecord, rules: FilterRules = FilterRules()) -> bool:
    """Return True when a record satisfies every import rule."""

    return bool(
        record.reference
        and record.last_event_date is not None
        and record.service_type == rules.service_type
        and record.last_event in rules.allowed_events
    )


def within_days(record: TrackingRecord, days: int, now: datetime | None = None) -> bool:
    """Return True when the record's event happened in the last ``days`` days."""

    moment = parse_event_date(record.last_event_date)
    if moment is None:
        return False
    reference_time = now or datetime.now(timezone.utc)
    if reference_time.tzinfo is None:
        reference_time = reference_time.astimezone()
    return moment >= reference_time - timedelta(days=days)


def filter_records(
    records: Iterable[TrackingRecord],
    rules: FilterRules = FilterRules(),
    days_to_show: int | None = None,
    now: datetime | None = None,
) -> List[TrackingRecord]:
    """Keep the records passing the import rules and the optional day window."""

    records = list(records)
    kept = [record for record in records if passes_filter(record, rules)]
    if days_to_show is not None:
        kept = [record for record in kept if within_days(record, days_to_show, now)]

    logger.debug("Filter kept %d of %d records", len(kept), len(records))
    return kept
