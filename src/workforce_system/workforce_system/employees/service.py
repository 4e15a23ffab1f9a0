from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..common.logging import get_logger
from ..common.validators import require_length, require_non_empty, require_present
from ..companies.service import CompanyService
from ..core.constants import CONTACT_NUMBER_LENGTH, WORK_PERMIT_MIN_LENGTH
from ..core.exceptions import DuplicateKeyError, NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

log = get_logger(__name__)

ENTITY = "Employee"


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, companies: CompanyService):
        self._employees = employees
        self._companies = companies

    def _validate(self, employee: Optional[Employee]) -> Employee:
        require_present(employee, ENTITY)
        wp = require_non_empty(employee.work_permit_number, "Employee's Work Permit Number")
        require_length(wp, "Employee's Work Permit Number", min_len=WORK_PERMIT_MIN_LENGTH)
        require_non_empty(employee.name, "Employee's Name")
        require_non_empty(employee.passport_number, "Employee's Passport Number")
        contact = require_non_empty(employee.work_contact_number, "Employee's Work Contact Number")
        require_length(
            contact,
            "Employee's Work Contact Number",
            min_len=CONTACT_NUMBER_LENGTH,
            max_len=CONTACT_NUMBER_LENGTH,
        )
        require_present(employee.work_permit_date_of_issue, "Employee's Work Permit Date Of Issue")
        require_present(employee.work_permit_expiry_date, "Employee's Work Permit Expiry Date")
        if employee.work_permit_expiry_date <= employee.work_permit_date_of_issue:
            raise ValidationError("Employee's Work Permit Expiry Date must be after its Date Of Issue")
        if int(employee.levy) < 0:
            raise ValidationError("Employee's Levy must not be negative")
        # Resolves the owning company or raises NotFoundError.
        self._companies.get_company(employee.company_uen)
        return replace(employee, work_permit_number=wp)

    def list_employees_by_company(self, company_uen: Optional[str]) -> Sequence[Employee]:
        company = self._companies.get_company(company_uen)
        return self._employees.list_by_company(company.uen)

    def get_employee(self, work_permit_number: Optional[str]) -> Employee:
        require_present(work_permit_number, f"{ENTITY}'s id")
        employee = self._employees.get_by_id(work_permit_number)
        if not employee:
            raise NotFoundError(ENTITY, work_permit_number)
        return employee

    def add_employee(self, employee: Optional[Employee]) -> Employee:
        employee = self._validate(employee)
        if self._employees.get_by_id(employee.work_permit_number):
            raise DuplicateKeyError(ENTITY, employee.work_permit_number)
        saved = self._employees.insert(employee)
        log.info(
            "employee added",
            extra={"employee_id": saved.work_permit_number, "company_uen": saved.company_uen},
        )
        return saved

    def update_employee(self, work_permit_number: Optional[str], employee: Optional[Employee]) -> Employee:
        require_present(work_permit_number, f"{ENTITY}'s id")
        employee = self._validate(employee)
        if employee.work_permit_number != work_permit_number:
            raise ValidationError("Employee's Work Permit Number cannot be changed")
        self.get_employee(work_permit_number)
        return self._employees.update(employee)

    def delete_employee(self, work_permit_number: Optional[str]) -> None:
        self.get_employee(work_permit_number)
        self._employees.delete_by_id(work_permit_number)
        log.info("employee deleted", extra={"employee_id": work_permit_number})
