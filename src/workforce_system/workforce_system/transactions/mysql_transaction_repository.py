from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.enums import TransactionStatus
from ..core.exceptions import DuplicateKeyError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_entry
from .model import Transaction, TransactionKey
from .repository import TransactionRepository

_SELECT = """
    SELECT loan_company_id, borrowing_company_id, employee_id,
           loan_start_date, loan_end_date, total_cost, loan_status
    FROM transactions
"""


def _to_transaction(r: dict) -> Transaction:
    return Transaction(
        loan_company_uen=r["loan_company_id"],
        borrowing_company_uen=r["borrowing_company_id"],
        employee_id=r["employee_id"],
        start_date=r["loan_start_date"],
        end_date=r["loan_end_date"],
        total_cost=Decimal(str(r["total_cost"])),
        status=TransactionStatus(r["loan_status"]),
    )


def _key_params(key: TransactionKey) -> tuple:
    return (key.loan_company_uen, key.borrowing_company_uen, key.employee_id, key.start_date)


_KEY_WHERE = "loan_company_id=%s AND borrowing_company_id=%s AND employee_id=%s AND loan_start_date=%s"


class MySQLTransactionRepository(TransactionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select_many(self, where: str = "1=1", params: tuple = ()) -> Sequence[Transaction]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + f" WHERE {where} ORDER BY loan_start_date, employee_id",
                params,
            )
            return [_to_transaction(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Transaction]:
        return self._select_many()

    def list_by_employee(self, employee_id: str) -> Sequence[Transaction]:
        return self._select_many("employee_id=%s", (employee_id,))

    def list_by_loan_company(self, company_uen: str) -> Sequence[Transaction]:
        return self._select_many("loan_company_id=%s", (company_uen,))

    def list_by_borrowing_company(self, company_uen: str) -> Sequence[Transaction]:
        return self._select_many("borrowing_company_id=%s", (company_uen,))

    def get_by_employee_and_start_date(self, *, employee_id: str, start_date: date) -> Optional[Transaction]:
        # uq_transactions_employee_start keeps this lookup to at most one row.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE employee_id=%s AND loan_start_date=%s",
                (employee_id, start_date),
            )
            row = fetchone(cur)
            return _to_transaction(row) if row else None

    def get_by_key(self, key: TransactionKey) -> Optional[Transaction]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + f" WHERE {_KEY_WHERE}", _key_params(key))
            row = fetchone(cur)
            return _to_transaction(row) if row else None

    def insert(self, transaction: Transaction) -> Transaction:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO transactions(
                        loan_company_id, borrowing_company_id, employee_id,
                        loan_start_date, loan_end_date, total_cost, loan_status
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    _key_params(transaction.key)
                    + (transaction.end_date, transaction.total_cost, transaction.status.value),
                )
        except IntegrityError as exc:
            # Also raised by uq_transactions_employee_start for a racing same-start loan.
            if is_duplicate_entry(exc):
                raise DuplicateKeyError("Transaction", transaction.key) from exc
            raise
        return transaction

    def update_status(self, key: TransactionKey, status: TransactionStatus) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE transactions SET loan_status=%s WHERE {_KEY_WHERE}",
                (status.value,) + _key_params(key),
            )

    def delete_by_key(self, key: TransactionKey) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM transactions WHERE {_KEY_WHERE}", _key_params(key))
            return cur.rowcount > 0
