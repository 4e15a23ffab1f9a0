from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EmployeeSkill, EmployeeSkillKey, SkillSummary


class EmployeeSkillRepository(Protocol):
    def list_all(self) -> Sequence[EmployeeSkill]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[EmployeeSkill]:
        raise NotImplementedError

    def list_by_skill(self, skill: str) -> Sequence[EmployeeSkill]:
        raise NotImplementedError

    def list_by_company(self, company_uen: str) -> Sequence[EmployeeSkill]:
        raise NotImplementedError

    def get_by_key(self, key: EmployeeSkillKey) -> Optional[EmployeeSkill]:
        raise NotImplementedError

    def insert(self, employee_skill: EmployeeSkill) -> EmployeeSkill:
        raise NotImplementedError

    def update(self, employee_skill: EmployeeSkill) -> EmployeeSkill:
        raise NotImplementedError

    def delete_by_key(self, key: EmployeeSkillKey) -> bool:
        raise NotImplementedError

    def summarize_excluding_company(self, company_uen: str) -> Sequence[SkillSummary]:
        """Per skill: how many employee skills other companies hold and their lowest cost."""
        raise NotImplementedError
