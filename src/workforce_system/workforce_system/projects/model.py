from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple


@dataclass(frozen=True)
class ProjectMember:
    work_permit_number: str
    name: Optional[str] = None


@dataclass(frozen=True)
class ProjectCompany:
    uen: str
    name: str


@dataclass(frozen=True)
class Project:
    """A construction project and the employees staffed on it.

    ``companies`` is derived from the members' employers and only set on reads.
    """

    project_id: Optional[int]
    name: str
    start_date: date
    completion_date: Optional[date] = None
    budget: Optional[str] = None
    progress: float = 0.0
    members: Tuple[ProjectMember, ...] = ()
    companies: Tuple[ProjectCompany, ...] = ()

    @property
    def member_ids(self) -> Tuple[str, ...]:
        return tuple(m.work_permit_number for m in self.members)
