from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.exceptions import DuplicateKeyError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_entry
from .model import Company
from .repository import CompanyRepository


def _to_company(row: dict) -> Company:
    return Company(uen=row["uen"], name=row["company_name"])


class MySQLCompanyRepository(CompanyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Company]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT uen, company_name FROM company ORDER BY company_name")
            return [_to_company(r) for r in fetchall(cur)]

    def get_by_uen(self, uen: str) -> Optional[Company]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT uen, company_name FROM company WHERE uen=%s", (uen,))
            row = fetchone(cur)
            return _to_company(row) if row else None

    def get_by_name(self, name: str) -> Optional[Company]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT uen, company_name FROM company WHERE company_name=%s LIMIT 1", (name,))
            row = fetchone(cur)
            return _to_company(row) if row else None

    def insert(self, company: Company) -> Company:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO company(uen, company_name) VALUES(%s,%s)",
                    (company.uen, company.name),
                )
        except IntegrityError as exc:
            if is_duplicate_entry(exc):
                raise DuplicateKeyError("Company", company.uen) from exc
            raise
        return company

    def update(self, company: Company) -> Company:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE company SET company_name=%s WHERE uen=%s",
                (company.name, company.uen),
            )
        return company

    def delete_by_uen(self, uen: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM company WHERE uen=%s", (uen,))
            return cur.rowcount > 0
