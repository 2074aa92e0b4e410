"""Locate the tracking columns in a header row by fuzzy label match."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from tracker.core.errors import MissingColumnsError

NOT_FOUND = -1

# Accent variants are listed explicitly; matching does no accent folding.
COLUMN_CANDIDATES: Dict[str, Tuple[str, ...]] = {
    "reference": ("referência", "referencia"),
    "last_event": ("última ocorrência", "ultima ocorrencia"),
    "last_event_date": ("dt. últ. ocorrência", "dt. ult. ocorrencia", "data ultima ocorrencia"),
    "service_type": ("serviço", "servico"),
    "invoice_value": ("vlr mercadoria",),
}
REQUIRED_COLUMNS = ("reference", "last_event", "last_event_date", "service_type")


@dataclass(frozen=True)
class ColumnMap:
    """Resolved positions of each tracking column within a row."""

    reference: int
    last_event: int
    last_event_date: int
    service_type: int
    invoice_value: Optional[int] = None


def find_column_index(headers: Sequence[Any], candidates: Sequence[str]) -> int:
    """Return the first header containing any candidate, case-insensitively."""

    lowered = [candidate.lower() for candidate in candidates]
    for index, header in enumerate(headers):
        text = "" if header is None else str(header).lower()
        if any(candidate in text for candidate in lowered):
            return index
    return NOT_FOUND


def resolve_columns(
    headers: Sequence[Any],
    candidates: Mapping[str, Sequence[str]] = COLUMN_CANDIDATES,
) -> ColumnMap:
    """Resolve every known column, failing when a required one is absent."""

    positions = {key: find_column_index(headers, labels) for key, labels in candidates.items()}
    missing = [key for key in REQUIRED_COLUMNS if positions.get(key, NOT_FOUND) == NOT_FOUND]
    if missing:
        raise MissingColumnsError(missing)

    value_index = positions.get("invoice_value", NOT_FOUND)
    return ColumnMap(
        reference=positions["reference"],
        last_event=positions["last_event"],
        last_event_date=positions["last_event_date"],
        service_type=positions["service_type"],
        invoice_value=None if value_index == NOT_FOUND else value_index,
    )
