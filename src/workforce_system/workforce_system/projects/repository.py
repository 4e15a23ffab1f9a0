from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Project


class ProjectRepository(Protocol):
    """Repository interface for Project.

    Note: reads return projects with ``members`` and ``companies`` filled in.
    """

    def list_all(self) -> Sequence[Project]:
        raise NotImplementedError

    def list_by_company(self, company_uen: str) -> Sequence[Project]:
        """Projects staffing at least one employee of ``company_uen``."""
        raise NotImplementedError

    def get_by_id(self, project_id: int) -> Optional[Project]:
        raise NotImplementedError

    def insert(self, project: Project) -> int:
        raise NotImplementedError

    def update(self, project: Project) -> None:
        raise NotImplementedError

    def replace_members(self, project_id: int, employee_ids: Sequence[str]) -> None:
        raise NotImplementedError

    def delete_by_id(self, project_id: int) -> bool:
        raise NotImplementedError
