from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..core.constants import ART_VALIDITY_DAYS


def expiry_for(date_of_test: date) -> date:
    return date_of_test + timedelta(days=ART_VALIDITY_DAYS)


@dataclass(frozen=True)
class ArtRecord:
    """One antigen rapid test result for an employee."""

    art_id: int
    date_of_test: date
    expiry_date: date
    result: bool
    employee_id: str
    company_uen: str
    employee_name: Optional[str] = None
