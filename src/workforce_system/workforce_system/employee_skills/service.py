"""Employee skill profiles and the cross-company skill marketplace views."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Optional, Sequence

from ..common.logging import get_logger
from ..common.validators import require_decimal, require_non_empty, require_present
from ..companies.service import CompanyService
from ..core.constants import SKILL_RATING_MAX, SKILL_RATING_MIN
from ..core.exceptions import DuplicateKeyError, NotFoundError, ValidationError
from ..employees.service import EmployeeService
from ..skills.service import SkillService
from .model import EmployeeSkill, EmployeeSkillKey, SkillSummary
from .repository import EmployeeSkillRepository

log = get_logger(__name__)

ENTITY = "EmployeeSkill"


class EmployeeSkillService:
    def __init__(
        self,
        employee_skills: EmployeeSkillRepository,
        employees: EmployeeService,
        skills: SkillService,
        companies: CompanyService,
    ):
        self._employee_skills = employee_skills
        self._employees = employees
        self._skills = skills
        self._companies = companies

    def _validate(self, employee_skill: Optional[EmployeeSkill]) -> EmployeeSkill:
        require_present(employee_skill, ENTITY)
        employee_id = require_non_empty(employee_skill.employee_id, "Employee's Id")
        skill = require_non_empty(employee_skill.skill, "Skill's Id")

        try:
            experience = int(employee_skill.experience)
        except (TypeError, ValueError):
            raise ValidationError("experience must be a whole number of years")
        if experience < 0:
            raise ValidationError("experience: positive number, min 0 is required")

        rating = require_decimal(employee_skill.rating, "rating", min_value=Decimal(SKILL_RATING_MIN))
        if rating > SKILL_RATING_MAX:
            raise ValidationError(f"rating: maximum rating is {SKILL_RATING_MAX} stars")
        cost = require_decimal(employee_skill.cost, "cost", min_value=Decimal(0))

        # Each reference must exist; these raise NotFoundError otherwise.
        self._employees.get_employee(employee_id)
        self._skills.get_skill(skill)
        company = self._companies.get_company(employee_skill.company_uen)

        return replace(
            employee_skill,
            employee_id=employee_id,
            skill=skill,
            company_uen=company.uen,
            experience=experience,
            rating=float(rating),
            cost=cost,
        )

    def list_employee_skills(self) -> Sequence[EmployeeSkill]:
        return self._employee_skills.list_all()

    def list_by_company(self, company_uen: Optional[str]) -> Sequence[EmployeeSkill]:
        company = self._companies.get_company(company_uen)
        return self._employee_skills.list_by_company(company.uen)

    def list_available_to(self, company_uen: Optional[str]) -> Sequence[EmployeeSkill]:
        """Employee skills offered by every company other than ``company_uen``."""
        require_present(company_uen, "Company's id")
        return [es for es in self._employee_skills.list_all() if es.company_uen != company_uen]

    def list_by_employee(self, employee_id: Optional[str]) -> Sequence[EmployeeSkill]:
        require_present(employee_id, "Employee's Id")
        return self._employee_skills.list_by_employee(employee_id)

    def list_by_skill(
        self,
        skill: Optional[str],
        *,
        exclude_company_uen: Optional[str] = None,
    ) -> Sequence[EmployeeSkill]:
        require_present(skill, "Skill's Id")
        items = self._employee_skills.list_by_skill(skill)
        if exclude_company_uen is None:
            return items
        return [es for es in items if es.company_uen != exclude_company_uen]

    def get_employee_skill(self, employee_id: Optional[str], skill: Optional[str]) -> EmployeeSkill:
        require_present(employee_id, "Employee's Id")
        require_present(skill, "Skill's Id")
        key = EmployeeSkillKey(employee_id=employee_id, skill=skill)
        found = self._employee_skills.get_by_key(key)
        if found is None:
            raise NotFoundError(ENTITY, key)
        return found

    def add_employee_skill(self, employee_skill: Optional[EmployeeSkill]) -> EmployeeSkill:
        employee_skill = self._validate(employee_skill)
        if self._employee_skills.get_by_key(employee_skill.key) is not None:
            raise DuplicateKeyError(ENTITY, employee_skill.key)
        saved = self._employee_skills.insert(employee_skill)
        log.info("employee skill added", extra={"key": str(saved.key), "company_uen": saved.company_uen})
        return saved

    def update_employee_skill(
        self,
        employee_id: Optional[str],
        skill: Optional[str],
        employee_skill: Optional[EmployeeSkill],
    ) -> EmployeeSkill:
        current = self.get_employee_skill(employee_id, skill)
        require_present(employee_skill, ENTITY)
        # The key comes from the stored record, not the request body.
        updated = self._validate(
            replace(employee_skill, employee_id=current.employee_id, skill=current.skill)
        )
        return self._employee_skills.update(updated)

    def delete_employee_skill(self, employee_id: Optional[str], skill: Optional[str]) -> None:
        current = self.get_employee_skill(employee_id, skill)
        self._employee_skills.delete_by_key(current.key)
        log.info("employee skill deleted", extra={"key": str(current.key)})

    def collate(self, company_uen: Optional[str]) -> Sequence[SkillSummary]:
        require_present(company_uen, "Company's id")
        return self._employee_skills.summarize_excluding_company(company_uen)
