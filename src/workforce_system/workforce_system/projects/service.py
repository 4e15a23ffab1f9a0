from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Optional, Sequence

from ..common.logging import get_logger
from ..common.validators import require_decimal, require_non_empty, require_present
from ..companies.service import CompanyService
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.service import EmployeeService
from .model import Project, ProjectMember
from .repository import ProjectRepository

log = get_logger(__name__)

ENTITY = "Project"

PROGRESS_MAX = Decimal(100)


class ProjectService:
    def __init__(self, projects: ProjectRepository, employees: EmployeeService, companies: CompanyService):
        self._projects = projects
        self._employees = employees
        self._companies = companies

    def _validate(self, project: Optional[Project]) -> Project:
        require_present(project, ENTITY)
        name = require_non_empty(project.name, "Project's name")
        require_present(project.start_date, "Project's start date")
        if project.completion_date is not None and project.completion_date < project.start_date:
            raise ValidationError("Project's completion date must not be before its start date")
        progress = require_decimal(project.progress, "Project's progress", min_value=Decimal(0))
        if progress > PROGRESS_MAX:
            raise ValidationError(f"Project's progress must be at most {PROGRESS_MAX}")

        members = []
        seen = set()
        for member in project.members:
            employee = self._employees.get_employee(member.work_permit_number)
            if employee.work_permit_number in seen:
                continue
            seen.add(employee.work_permit_number)
            members.append(ProjectMember(work_permit_number=employee.work_permit_number, name=employee.name))

        return replace(project, name=name, progress=float(progress), members=tuple(members), companies=())

    def list_projects(self) -> Sequence[Project]:
        return self._projects.list_all()

    def list_company_projects(self, company_uen: Optional[str]) -> Sequence[Project]:
        company = self._companies.get_company(company_uen)
        return self._projects.list_by_company(company.uen)

    def get_project(self, project_id: Optional[int]) -> Project:
        require_present(project_id, f"{ENTITY}'s id")
        project = self._projects.get_by_id(project_id)
        if project is None:
            raise NotFoundError(ENTITY, project_id)
        return project

    def add_project(self, project: Optional[Project]) -> Project:
        project = self._validate(project)
        project_id = self._projects.insert(project)
        self._projects.replace_members(project_id, project.member_ids)
        log.info("project added", extra={"project_id": project_id, "members": len(project.members)})
        return self.get_project(project_id)

    def update_project(self, project_id: Optional[int], project: Optional[Project]) -> Project:
        self.get_project(project_id)
        project = replace(self._validate(project), project_id=project_id)
        self._projects.update(project)
        self._projects.replace_members(project_id, project.member_ids)
        log.info("project updated", extra={"project_id": project_id, "members": len(project.members)})
        return self.get_project(project_id)

    def delete_project(self, project_id: Optional[int]) -> None:
        self.get_project(project_id)
        self._projects.delete_by_id(project_id)
        log.info("project deleted", extra={"project_id": project_id})
