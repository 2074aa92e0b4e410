"""Turn raw spreadsheet rows into typed tracking records.

All of the loosely-typed cell handling lives here: text coercion, date
serial and free-text date decoding, and pt-BR currency formatting.
"""
from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime, time, tzinfo
from typing import Any, Optional, Sequence

from openpyxl.utils.datetime import WINDOWS_EPOCH, from_excel

from tracker.core.models import DEFAULT_STATUS, TrackingRecord
from tracker.ingestion.columns import ColumnMap

logger = logging.getLogger(__name__)

# Day-first, as exported by Brazilian carriers.
TEXT_DATE_FORMATS = [
    "%d/%m/%Y %H:%M:%S",
    "%d/%m/%Y %H:%M",
    "%d/%m/%Y",
    "%d-%m-%Y %H:%M:%S",
    "%d-%m-%Y %H:%M",
    "%d-%m-%Y",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
]


def cell_at(row: Sequence[Any], index: Optional[int]) -> Any:
    """Return the cell at ``index`` or ``None`` when the row is too short."""

    if index is None or index < 0 or index >= len(row):
        return None
    return row[index]


def cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _parse_text_date(text: str) -> datetime:
    iso_text = text[:-1] + "+00:00" if text.endswith("Z") else text
    try:
        return datetime.fromisoformat(iso_text)
    except ValueError:
        pass
    for fmt in TEXT_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise ValueError(f"unrecognized date text {text!r}")


def _to_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, time):
        return datetime.combine(WINDOWS_EPOCH.date(), value)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if not value > 0:
            # Serials start at 1; zero, negatives and NaN carry no date.
            return None
        decoded = from_excel(value)
        if isinstance(decoded, time):
            # Serials below one carry only a time of day.
            decoded = datetime.combine(WINDOWS_EPOCH.date(), decoded)
        return decoded.replace(microsecond=0)
    if isinstance(value, str):
        text = value.strip()
        return _parse_text_date(text) if text else None
    return None


def _localize(moment: datetime, tz: Optional[tzinfo]) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz) if tz else moment.astimezone()
    return moment.astimezone(tz)


def decode_date(value: Any, tz: Optional[tzinfo] = None) -> Optional[str]:
    """Return an ISO-8601 timestamp for a date cell, or ``None`` if undecodable.

    Numeric cells are spreadsheet date serials, text cells are parsed as ISO
    or day-first dates. Naive results are placed in ``tz`` (host local time
    when omitted).
    """

    try:
        moment = _to_datetime(value)
        if moment is None:
            return None
        return _localize(moment, tz).isoformat(timespec="seconds")
    except (ValueError, TypeError, OverflowError) as exc:
        logger.debug("Could not decode date cell %r: %s", value, exc)
        return None


def parse_amount(value: Any) -> float:
    """Convert a comma-decimal money cell into a float, falling back to zero."""

    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        amount = float(value)
    else:
        normalized = re.sub(r"R\$|\s", "", cell_text(value))
        if "," in normalized:
            normalized = normalized.replace(".", "").replace(",", ".")
        try:
            amount = float(normalized)
        except ValueError:
            return 0.0
    return amount if math.isfinite(amount) else 0.0


def format_brl(amount: float) -> str:
    """Render an amount as Brazilian real display text, e.g. ``R$ 1.234,56``."""

    grouped = f"{abs(amount):,.2f}"
    localized = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if round(amount, 2) < 0 else ""
    return f"{sign}R$ {localized}"


def normalize_row(row: Sequence[Any], columns: ColumnMap, tz: Optional[tzinfo] = None) -> TrackingRecord:
    """Build a ``TrackingRecord`` from one data row using resolved column positions."""

    return TrackingRecord(
        reference=cell_text(cell_at(row, columns.reference)),
        last_event=cell_text(cell_at(row, columns.last_event)),
        last_event_date=decode_date(cell_at(row, columns.last_event_date), tz),
        service_type=cell_text(cell_at(row, columns.service_type)),
        invoice_value=format_brl(parse_amount(cell_at(row, columns.invoice_value))),
        status=DEFAULT_STATUS,
    )
