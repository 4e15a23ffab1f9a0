from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from .model import Transaction


def conflicts_with(start: date, end: date, existing_start: date, existing_end: date) -> bool:
    """Date-collision test applied to a new loan against one stored loan.

    A candidate collides when its start or its end falls strictly inside the
    existing period, or when both start on the same day.

    Note: ending on the same day as an existing loan, or fully enclosing it,
    is not treated as a collision. Accepted/rejected behaviour of stored data
    depends on this exact rule, so keep it as is.
    """

    return (
        (existing_start < start < existing_end)
        or (existing_start < end < existing_end)
        or start == existing_start
    )


def first_conflict(candidate: Transaction, existing: Iterable[Transaction]) -> Optional[Transaction]:
    for other in existing:
        if conflicts_with(candidate.start_date, candidate.end_date, other.start_date, other.end_date):
            return other
    return None
