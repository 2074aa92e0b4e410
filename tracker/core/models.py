"""Data models for carrier tracking rows imported from spreadsheets."""
from dataclasses import dataclass, asdict
from typing import Any, Dict, FrozenSet, Optional

DEFAULT_STATUS = "Pending"
STATUSES = ("Pending", "Resolved", "Lost")


@dataclass(frozen=True)
class TrackingRecord:
    """Represents a single normalized shipment row from a carrier export."""

    reference: str
    last_event: str
    last_event_date: Optional[str]
    service_type: str
    invoice_value: str
    status: str = DEFAULT_STATUS

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain dictionary representation for tabular rendering."""

        return asdict(self)


@dataclass(frozen=True)
class SortState:
    """Column and direction of the last sort the reviewer applied."""

    field: str
    direction: str = "asc"

    @property
    def descending(self) -> bool:
        return self.direction == "desc"


DEFAULT_SERVICE_TYPE = "MR Coleta"
DEFAULT_ALLOWED_EVENTS = ("Recebido na Base", "Coletado", "Romaneio em Transferencia")


@dataclass(frozen=True)
class FilterRules:
    """Business rules a normalized row must satisfy to stay in the working set."""

    service_type: str = DEFAULT_SERVICE_TYPE
    allowed_events: FrozenSet[str] = frozenset(DEFAULT_ALLOWED_EVENTS)
