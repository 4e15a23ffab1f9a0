from __future__ import annotations

from datetime import date

import pytest

from src.workforce_system.workforce_system.arts.model import ArtRecord
from src.workforce_system.workforce_system.arts.service import ArtService
from src.workforce_system.workforce_system.companies.model import Company
from src.workforce_system.workforce_system.companies.service import CompanyService
from src.workforce_system.workforce_system.core.exceptions import MissingValueError, NotFoundError, ValidationError
from src.workforce_system.workforce_system.employees.service import EmployeeService


class FakeCompaniesRepo:
    def __init__(self, *companies):
        self._by_uen = {c.uen: c for c in companies}

    def get_by_uen(self, uen):
        return self._by_uen.get(uen)


class FakeEmployee:
    def __init__(self, work_permit_number, name):
        self.work_permit_number = work_permit_number
        self.name = name


class FakeEmployeesRepo:
    def __init__(self, *employees):
        self._by_id = {e.work_permit_number: e for e in employees}

    def get_by_id(self, work_permit_number):
        return self._by_id.get(work_permit_number)


class FakeArtsRepo:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[int, ArtRecord] = {}
        self.latest_args = None

    def list_all(self):
        return list(self.rows.values())

    def list_by_company(self, company_uen):
        return [a for a in self.rows.values() if a.company_uen == company_uen]

    def list_latest_per_employee(self, *, company_uen=None):
        self.latest_args = {"company_uen": company_uen}
        return []

    def get_by_id(self, art_id):
        return self.rows.get(art_id)

    def create(self, *, employee_id, company_uen, date_of_test, expiry_date, result):
        art_id = self._next_id
        self._next_id += 1
        self.rows[art_id] = ArtRecord(
            art_id=art_id,
            date_of_test=date_of_test,
            expiry_date=expiry_date,
            result=result,
            employee_id=employee_id,
            company_uen=company_uen,
        )
        return art_id

    def delete_by_id(self, art_id):
        return self.rows.pop(art_id, None) is not None


ACME = Company(uen="201912345K", name="Acme Builders")
TODAY = date(2024, 3, 10)


@pytest.fixture
def arts():
    return FakeArtsRepo()


@pytest.fixture
def svc(arts):
    companies = CompanyService(FakeCompaniesRepo(ACME))
    employees = EmployeeService(FakeEmployeesRepo(FakeEmployee("WP00012345", "Rahim")), companies)
    return ArtService(arts, employees, companies, clock=lambda: TODAY)


def test_add_art_sets_expiry_seven_days_after_test(svc, arts):
    art = svc.add_art(employee_id="WP00012345", company_uen=ACME.uen, date_of_test=date(2024, 3, 8), result=False)

    assert art.expiry_date == date(2024, 3, 15)
    assert art.employee_name == "Rahim"
    assert arts.get_by_id(art.art_id).expiry_date == date(2024, 3, 15)


def test_add_art_in_future_rejected(svc):
    with pytest.raises(ValidationError):
        svc.add_art(employee_id="WP00012345", company_uen=ACME.uen, date_of_test=date(2024, 3, 11), result=False)


def test_add_art_requires_result(svc):
    with pytest.raises(MissingValueError):
        svc.add_art(employee_id="WP00012345", company_uen=ACME.uen, date_of_test=TODAY, result=None)


def test_add_art_for_unknown_employee_not_found(svc):
    with pytest.raises(NotFoundError):
        svc.add_art(employee_id="WP99999999", company_uen=ACME.uen, date_of_test=TODAY, result=True)


def test_latest_by_company_forwards_filter(svc, arts):
    svc.list_latest_arts_by_company(ACME.uen)
    assert arts.latest_args == {"company_uen": ACME.uen}

    svc.list_latest_arts()
    assert arts.latest_args == {"company_uen": None}


def test_delete_art(svc):
    art = svc.add_art(employee_id="WP00012345", company_uen=ACME.uen, date_of_test=TODAY, result=True)
    svc.delete_art(art.art_id)
    assert svc.list_arts() == []

    with pytest.raises(NotFoundError):
        svc.delete_art(art.art_id)
