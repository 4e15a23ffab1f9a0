from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.exceptions import DuplicateKeyError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_entry
from .model import EmployeeSkill, EmployeeSkillKey, SkillSummary
from .repository import EmployeeSkillRepository

_SELECT = """
    SELECT es.employee_id, es.skill_id, es.company_uen, es.experience, es.rating, es.cost,
           e.employee_name, e.employee_role, e.description, c.company_name
    FROM employee_skill es
    LEFT JOIN employee e ON e.work_permit_number = es.employee_id
    LEFT JOIN company c ON c.uen = es.company_uen
"""


def _to_employee_skill(r: dict) -> EmployeeSkill:
    return EmployeeSkill(
        employee_id=r["employee_id"],
        skill=r["skill_id"],
        company_uen=r["company_uen"],
        experience=int(r["experience"]),
        rating=float(r["rating"]),
        cost=Decimal(str(r["cost"])),
        employee_name=r.get("employee_name"),
        employee_role=r.get("employee_role"),
        description=r.get("description"),
        company_name=r.get("company_name"),
    )


class MySQLEmployeeSkillRepository(EmployeeSkillRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select_many(self, where: str = "1=1", params: tuple = ()) -> Sequence[EmployeeSkill]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + f" WHERE {where} ORDER BY es.skill_id, es.employee_id", params)
            return [_to_employee_skill(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[EmployeeSkill]:
        return self._select_many()

    def list_by_employee(self, employee_id: str) -> Sequence[EmployeeSkill]:
        return self._select_many("es.employee_id=%s", (employee_id,))

    def list_by_skill(self, skill: str) -> Sequence[EmployeeSkill]:
        return self._select_many("es.skill_id=%s", (skill,))

    def list_by_company(self, company_uen: str) -> Sequence[EmployeeSkill]:
        return self._select_many("es.company_uen=%s", (company_uen,))

    def get_by_key(self, key: EmployeeSkillKey) -> Optional[EmployeeSkill]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE es.employee_id=%s AND es.skill_id=%s",
                (key.employee_id, key.skill),
            )
            row = fetchone(cur)
            return _to_employee_skill(row) if row else None

    def insert(self, employee_skill: EmployeeSkill) -> EmployeeSkill:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employee_skill(employee_id, skill_id, company_uen, experience, rating, cost)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        employee_skill.employee_id,
                        employee_skill.skill,
                        employee_skill.company_uen,
                        employee_skill.experience,
                        employee_skill.rating,
                        employee_skill.cost,
                    ),
                )
        except IntegrityError as exc:
            if is_duplicate_entry(exc):
                raise DuplicateKeyError("EmployeeSkill", employee_skill.key) from exc
            raise
        return employee_skill

    def update(self, employee_skill: EmployeeSkill) -> EmployeeSkill:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employee_skill
                SET company_uen=%s, experience=%s, rating=%s, cost=%s
                WHERE employee_id=%s AND skill_id=%s
                """,
                (
                    employee_skill.company_uen,
                    employee_skill.experience,
                    employee_skill.rating,
                    employee_skill.cost,
                    employee_skill.employee_id,
                    employee_skill.skill,
                ),
            )
        return employee_skill

    def delete_by_key(self, key: EmployeeSkillKey) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM employee_skill WHERE employee_id=%s AND skill_id=%s",
                (key.employee_id, key.skill),
            )
            return cur.rowcount > 0

    def summarize_excluding_company(self, company_uen: str) -> Sequence[SkillSummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT skill_id, COUNT(*) AS headcount, MIN(cost) AS min_cost
                FROM employee_skill
                WHERE company_uen <> %s
                GROUP BY skill_id
                ORDER BY skill_id
                """,
                (company_uen,),
            )
            return [
                SkillSummary(
                    skill=r["skill_id"],
                    headcount=int(r["headcount"]),
                    min_cost=Decimal(str(r["min_cost"])),
                )
                for r in fetchall(cur)
            ]
