from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import today
from ..common.logging import get_logger
from ..common.validators import require_present
from ..companies.service import CompanyService
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.service import EmployeeService
from .model import ArtRecord, expiry_for
from .repository import ArtRepository

log = get_logger(__name__)

ENTITY = "Art"


class ArtService:
    def __init__(
        self,
        arts: ArtRepository,
        employees: EmployeeService,
        companies: CompanyService,
        *,
        clock: Callable[[], date] = today,
    ):
        self._arts = arts
        self._employees = employees
        self._companies = companies
        self._clock = clock

    def list_arts(self) -> Sequence[ArtRecord]:
        return self._arts.list_all()

    def list_latest_arts(self) -> Sequence[ArtRecord]:
        return self._arts.list_latest_per_employee()

    def list_arts_by_company(self, company_uen: Optional[str]) -> Sequence[ArtRecord]:
        company = self._companies.get_company(company_uen)
        return self._arts.list_by_company(company.uen)

    def list_latest_arts_by_company(self, company_uen: Optional[str]) -> Sequence[ArtRecord]:
        company = self._companies.get_company(company_uen)
        return self._arts.list_latest_per_employee(company_uen=company.uen)

    def add_art(
        self,
        *,
        employee_id: Optional[str],
        company_uen: Optional[str],
        date_of_test: Optional[date],
        result: Optional[bool],
    ) -> ArtRecord:
        require_present(date_of_test, "ART's Date Of Test")
        require_present(result, "ART's Result")
        if date_of_test > self._clock():
            raise ValidationError("ART's Date Of Test cannot be in the future")

        employee = self._employees.get_employee(employee_id)
        company = self._companies.get_company(company_uen)

        expiry_date = expiry_for(date_of_test)
        art_id = self._arts.create(
            employee_id=employee.work_permit_number,
            company_uen=company.uen,
            date_of_test=date_of_test,
            expiry_date=expiry_date,
            result=bool(result),
        )
        log.info(
            "art recorded",
            extra={"art_id": art_id, "employee_id": employee.work_permit_number, "result": bool(result)},
        )
        return ArtRecord(
            art_id=art_id,
            date_of_test=date_of_test,
            expiry_date=expiry_date,
            result=bool(result),
            employee_id=employee.work_permit_number,
            company_uen=company.uen,
            employee_name=employee.name,
        )

    def delete_art(self, art_id: Optional[int]) -> None:
        require_present(art_id, f"{ENTITY}'s id")
        if not self._arts.get_by_id(int(art_id)):
            raise NotFoundError(ENTITY, art_id)
        self._arts.delete_by_id(int(art_id))
        log.info("art deleted", extra={"art_id": art_id})
