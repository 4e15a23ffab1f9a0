from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class EmployeeSkillKey:
    employee_id: str
    skill: str

    def __str__(self) -> str:
        return f"(Employee's Id: {self.employee_id}, Skill's Id: {self.skill})"


@dataclass(frozen=True)
class EmployeeSkill:
    """A skill held by an employee, with the rate their company charges for it.

    ``employee_name``, ``employee_role``, ``description`` and ``company_name``
    are filled in on reads only.
    """

    employee_id: str
    skill: str
    company_uen: str
    experience: int = 0
    rating: float = 0.0
    cost: Decimal = Decimal(0)
    employee_name: Optional[str] = None
    employee_role: Optional[str] = None
    description: Optional[str] = None
    company_name: Optional[str] = None

    @property
    def key(self) -> EmployeeSkillKey:
        return EmployeeSkillKey(employee_id=self.employee_id, skill=self.skill)


@dataclass(frozen=True)
class SkillSummary:
    """Workers available for a skill outside one company, and the cheapest rate."""

    skill: str
    headcount: int
    min_cost: Decimal
