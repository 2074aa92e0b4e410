"""Collapse records that share a reference."""
from __future__ import annotations

from typing import Dict, Iterable, List

from tracker.core.models import TrackingRecord


def deduplicate(records: Iterable[TrackingRecord]) -> List[TrackingRecord]:
    """Keep one record per reference.

    The first occurrence fixes the position and the last occurrence supplies
    the content, so ``[A1, B1, A2]`` becomes ``[A2, B1]``.
    """

    unique: List[TrackingRecord] = []
    positions: Dict[str, int] = {}
    for record in records:
        index = positions.get(record.reference)
        if index is None:
            positions[record.reference] = len(unique)
            unique.append(record)
        else:
            unique[index] = record
    return unique
