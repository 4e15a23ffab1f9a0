from __future__ import annotations

import pytest

from src.workforce_system.workforce_system.companies.model import Company
from src.workforce_system.workforce_system.companies.service import CompanyService
from src.workforce_system.workforce_system.core.exceptions import (
    DuplicateKeyError,
    MissingValueError,
    NotFoundError,
    ValidationError,
)


class FakeCompaniesRepo:
    def __init__(self, *companies: Company):
        self._by_uen = {c.uen: c for c in companies}
        self.deleted: list[str] = []

    def list_all(self):
        return sorted(self._by_uen.values(), key=lambda c: c.name)

    def get_by_uen(self, uen):
        return self._by_uen.get(uen)

    def get_by_name(self, name):
        return next((c for c in self._by_uen.values() if c.name == name), None)

    def insert(self, company):
        self._by_uen[company.uen] = company
        return company

    def update(self, company):
        self._by_uen[company.uen] = company
        return company

    def delete_by_uen(self, uen):
        self.deleted.append(uen)
        return self._by_uen.pop(uen, None) is not None


ACME = Company(uen="201912345K", name="Acme Builders")


def test_add_company_trims_and_saves():
    repo = FakeCompaniesRepo()
    saved = CompanyService(repo).add_company(Company(uen=" 201912345K ", name=" Acme Builders "))

    assert saved == ACME
    assert repo.get_by_uen("201912345K") == ACME


def test_add_existing_uen_is_duplicate():
    svc = CompanyService(FakeCompaniesRepo(ACME))
    with pytest.raises(DuplicateKeyError):
        svc.add_company(Company(uen="201912345K", name="Other"))


@pytest.mark.parametrize("uen", ["12345678", "12345678901"])
def test_uen_length_is_checked(uen):
    with pytest.raises(ValidationError):
        CompanyService(FakeCompaniesRepo()).add_company(Company(uen=uen, name="X"))


def test_add_none_is_missing_value():
    with pytest.raises(MissingValueError):
        CompanyService(FakeCompaniesRepo()).add_company(None)


def test_get_unknown_company_not_found():
    with pytest.raises(NotFoundError):
        CompanyService(FakeCompaniesRepo()).get_company("201900000A")


def test_get_company_by_name():
    svc = CompanyService(FakeCompaniesRepo(ACME))
    assert svc.get_company_by_name("Acme Builders") == ACME
    with pytest.raises(NotFoundError):
        svc.get_company_by_name("Nope")


def test_update_requires_existing_company_and_same_uen():
    repo = FakeCompaniesRepo(ACME)
    svc = CompanyService(repo)

    renamed = svc.update_company("201912345K", Company(uen="201912345K", name="Acme Pte Ltd"))
    assert repo.get_by_uen("201912345K").name == "Acme Pte Ltd"
    assert renamed.name == "Acme Pte Ltd"

    with pytest.raises(ValidationError):
        svc.update_company("201912345K", Company(uen="201900000A", name="X"))
    with pytest.raises(NotFoundError):
        svc.update_company("201900000A", Company(uen="201900000A", name="X"))


def test_delete_unknown_company_not_found():
    repo = FakeCompaniesRepo()
    with pytest.raises(NotFoundError):
        CompanyService(repo).delete_company("201900000A")
    assert repo.deleted == []
