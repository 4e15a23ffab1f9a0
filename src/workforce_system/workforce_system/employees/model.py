from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: a foreign worker identified by work permit number."""

    work_permit_number: str
    name: str
    passport_number: str
    work_id: str
    employee_role: str
    levy: int
    work_permit_date_of_issue: date
    work_permit_expiry_date: date
    work_contact_number: str
    work_site_location: str
    singapore_address: str
    company_uen: str
    vacc_status: bool = False
    for_sharing: bool = False
    shared: bool = False
    description: Optional[str] = None
