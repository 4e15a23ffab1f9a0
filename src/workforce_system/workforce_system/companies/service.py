from __future__ import annotations

from typing import Optional, Sequence

from ..common.logging import get_logger
from ..common.validators import require_length, require_non_empty, require_present
from ..core.constants import COMPANY_NAME_MAX_LENGTH, UEN_MAX_LENGTH, UEN_MIN_LENGTH
from ..core.exceptions import DuplicateKeyError, NotFoundError, ValidationError
from .model import Company
from .repository import CompanyRepository

log = get_logger(__name__)

ENTITY = "Company"


class CompanyService:
    def __init__(self, companies: CompanyRepository):
        self._companies = companies

    @staticmethod
    def _validate(company: Optional[Company]) -> Company:
        require_present(company, ENTITY)
        uen = require_non_empty(company.uen, "Company's UEN")
        require_length(uen, "Company's UEN", min_len=UEN_MIN_LENGTH, max_len=UEN_MAX_LENGTH)
        name = require_non_empty(company.name, "Company's Name")
        require_length(name, "Company's Name", max_len=COMPANY_NAME_MAX_LENGTH)
        return Company(uen=uen, name=name)

    def list_companies(self) -> Sequence[Company]:
        return self._companies.list_all()

    def get_company(self, uen: Optional[str]) -> Company:
        require_present(uen, f"{ENTITY}'s id")
        company = self._companies.get_by_uen(uen)
        if not company:
            raise NotFoundError(ENTITY, uen)
        return company

    def get_company_by_name(self, name: Optional[str]) -> Company:
        require_present(name, f"{ENTITY}'s name")
        company = self._companies.get_by_name(name)
        if not company:
            raise NotFoundError(ENTITY, name)
        return company

    def add_company(self, company: Optional[Company]) -> Company:
        company = self._validate(company)
        if self._companies.get_by_uen(company.uen):
            raise DuplicateKeyError(ENTITY, company.uen)
        saved = self._companies.insert(company)
        log.info("company added", extra={"uen": saved.uen})
        return saved

    def update_company(self, uen: Optional[str], company: Optional[Company]) -> Company:
        require_present(uen, f"{ENTITY}'s id")
        company = self._validate(company)
        if company.uen != uen:
            raise ValidationError("Company's UEN cannot be changed")
        self.get_company(uen)
        return self._companies.update(company)

    def delete_company(self, uen: Optional[str]) -> None:
        self.get_company(uen)
        self._companies.delete_by_uen(uen)
        log.info("company deleted", extra={"uen": uen})
