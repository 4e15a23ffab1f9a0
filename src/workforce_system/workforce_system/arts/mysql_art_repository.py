from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ArtRecord
from .repository import ArtRepository

_SELECT = """
    SELECT c.id, c.date_of_test, c.expiry_date, c.result, c.employee_id, c.company_uen,
           e.employee_name
    FROM covidtest c
    LEFT JOIN employee e ON e.work_permit_number = c.employee_id
"""


def _to_art(r: dict) -> ArtRecord:
    return ArtRecord(
        art_id=int(r["id"]),
        date_of_test=r["date_of_test"],
        expiry_date=r["expiry_date"],
        result=bool(r["result"]),
        employee_id=r["employee_id"],
        company_uen=r["company_uen"],
        employee_name=r.get("employee_name"),
    )


class MySQLArtRepository(ArtRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[ArtRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY c.date_of_test DESC, c.id DESC")
            return [_to_art(r) for r in fetchall(cur)]

    def list_by_company(self, company_uen: str) -> Sequence[ArtRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE c.company_uen=%s ORDER BY c.date_of_test DESC, c.id DESC",
                (company_uen,),
            )
            return [_to_art(r) for r in fetchall(cur)]

    def list_latest_per_employee(self, *, company_uen: Optional[str] = None) -> Sequence[ArtRecord]:
        clauses = ["1=1"]
        params: list[object] = []
        if company_uen is not None:
            clauses.append("c.company_uen=%s")
            params.append(company_uen)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT
                + f"""
                JOIN (
                    SELECT employee_id, MAX(date_of_test) AS latest
                    FROM covidtest
                    GROUP BY employee_id
                ) m ON m.employee_id = c.employee_id AND m.latest = c.date_of_test
                WHERE {where}
                ORDER BY c.employee_id, c.id
                """,
                tuple(params),
            )
            return [_to_art(r) for r in fetchall(cur)]

    def get_by_id(self, art_id: int) -> Optional[ArtRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE c.id=%s", (int(art_id),))
            row = fetchone(cur)
            return _to_art(row) if row else None

    def create(
        self,
        *,
        employee_id: str,
        company_uen: str,
        date_of_test: date,
        expiry_date: date,
        result: bool,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO covidtest(date_of_test, expiry_date, result, employee_id, company_uen)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (date_of_test, expiry_date, int(bool(result)), employee_id, company_uen),
            )
            return int(cur.lastrowid)

    def delete_by_id(self, art_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM covidtest WHERE id=%s", (int(art_id),))
            return cur.rowcount > 0
