from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Project, ProjectCompany, ProjectMember
from .repository import ProjectRepository

_SELECT = """
    SELECT p.id, p.project_name, p.start_date, p.completion_date, p.budget, p.progress
    FROM projects p
"""


def _load(cur, row: dict) -> Project:
    project_id = int(row["id"])

    cur.execute(
        """
        SELECT e.work_permit_number, e.employee_name
        FROM project_employee pe
        JOIN employee e ON e.work_permit_number = pe.employee_id
        WHERE pe.project_id=%s
        ORDER BY e.employee_name
        """,
        (project_id,),
    )
    members = tuple(
        ProjectMember(work_permit_number=r["work_permit_number"], name=r["employee_name"])
        for r in fetchall(cur)
    )

    cur.execute(
        """
        SELECT DISTINCT c.uen, c.company_name
        FROM project_employee pe
        JOIN employee e ON e.work_permit_number = pe.employee_id
        JOIN company c ON c.uen = e.company_id
        WHERE pe.project_id=%s
        ORDER BY c.company_name
        """,
        (project_id,),
    )
    companies = tuple(ProjectCompany(uen=r["uen"], name=r["company_name"]) for r in fetchall(cur))

    return Project(
        project_id=project_id,
        name=row["project_name"],
        start_date=row["start_date"],
        completion_date=row.get("completion_date"),
        budget=row.get("budget"),
        progress=float(row["progress"] or 0),
        members=members,
        companies=companies,
    )


class MySQLProjectRepository(ProjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select_many(self, sql: str, params: tuple = ()) -> Sequence[Project]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            rows = fetchall(cur)
            return [_load(cur, r) for r in rows]

    def list_all(self) -> Sequence[Project]:
        return self._select_many(_SELECT + " ORDER BY p.start_date, p.id")

    def list_by_company(self, company_uen: str) -> Sequence[Project]:
        return self._select_many(
            _SELECT
            + """
            WHERE p.id IN (
                SELECT pe.project_id
                FROM project_employee pe
                JOIN employee e ON e.work_permit_number = pe.employee_id
                WHERE e.company_id=%s
            )
            ORDER BY p.start_date, p.id
            """,
            (company_uen,),
        )

    def get_by_id(self, project_id: int) -> Optional[Project]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE p.id=%s", (int(project_id),))
            row = fetchone(cur)
            return _load(cur, row) if row else None

    def insert(self, project: Project) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO projects(project_name, start_date, completion_date, budget, progress)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (project.name, project.start_date, project.completion_date, project.budget, project.progress),
            )
            return int(cur.lastrowid)

    def update(self, project: Project) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE projects
                SET project_name=%s, start_date=%s, completion_date=%s, budget=%s, progress=%s
                WHERE id=%s
                """,
                (
                    project.name,
                    project.start_date,
                    project.completion_date,
                    project.budget,
                    project.progress,
                    int(project.project_id),
                ),
            )

    def replace_members(self, project_id: int, employee_ids: Sequence[str]) -> None:
        # Delete and inserts share one commit.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM project_employee WHERE project_id=%s", (int(project_id),))
            for employee_id in employee_ids:
                cur.execute(
                    "INSERT INTO project_employee(project_id, employee_id) VALUES(%s,%s)",
                    (int(project_id), employee_id),
                )

    def delete_by_id(self, project_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM project_employee WHERE project_id=%s", (int(project_id),))
            cur.execute("DELETE FROM projects WHERE id=%s", (int(project_id),))
            return cur.rowcount > 0
