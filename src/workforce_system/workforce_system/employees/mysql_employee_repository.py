from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.exceptions import DuplicateKeyError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_entry
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = """
    work_permit_number, employee_name, passport_number, work_id, employee_role, levy,
    work_permit_date_of_issue, work_permit_expiry_date, work_contact_number,
    work_site_location, singapore_address, vacc_status, for_sharing, shared,
    description, company_id
"""


def _to_employee(r: dict) -> Employee:
    return Employee(
        work_permit_number=r["work_permit_number"],
        name=r["employee_name"],
        passport_number=r["passport_number"],
        work_id=r["work_id"],
        employee_role=r["employee_role"],
        levy=int(r["levy"]),
        work_permit_date_of_issue=r["work_permit_date_of_issue"],
        work_permit_expiry_date=r["work_permit_expiry_date"],
        work_contact_number=r["work_contact_number"],
        work_site_location=r["work_site_location"],
        singapore_address=r["singapore_address"],
        company_uen=r["company_id"],
        vacc_status=bool(r.get("vacc_status")),
        for_sharing=bool(r.get("for_sharing")),
        shared=bool(r.get("shared")),
        description=r.get("description"),
    )


def _params(e: Employee) -> tuple:
    return (
        e.name,
        e.passport_number,
        e.work_id,
        e.employee_role,
        int(e.levy),
        e.work_permit_date_of_issue,
        e.work_permit_expiry_date,
        e.work_contact_number,
        e.work_site_location,
        e.singapore_address,
        int(e.vacc_status),
        int(e.for_sharing),
        int(e.shared),
        e.description,
        e.company_uen,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, work_permit_number: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employee WHERE work_permit_number=%s",
                (work_permit_number,),
            )
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_by_company(self, company_uen: str) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employee WHERE company_id=%s ORDER BY employee_name",
                (company_uen,),
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def insert(self, employee: Employee) -> Employee:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO employee({_COLUMNS})
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (employee.work_permit_number,) + _params(employee),
                )
        except IntegrityError as exc:
            if is_duplicate_entry(exc):
                raise DuplicateKeyError("Employee", employee.work_permit_number) from exc
            raise
        return employee

    def update(self, employee: Employee) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employee
                SET employee_name=%s, passport_number=%s, work_id=%s, employee_role=%s, levy=%s,
                    work_permit_date_of_issue=%s, work_permit_expiry_date=%s, work_contact_number=%s,
                    work_site_location=%s, singapore_address=%s, vacc_status=%s, for_sharing=%s,
                    shared=%s, description=%s, company_id=%s
                WHERE work_permit_number=%s
                """,
                _params(employee) + (employee.work_permit_number,),
            )
        return employee

    def delete_by_id(self, work_permit_number: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employee WHERE work_permit_number=%s", (work_permit_number,))
            return cur.rowcount > 0
