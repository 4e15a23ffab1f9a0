from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import TransactionStatus
from .model import Transaction, TransactionKey


class TransactionRepository(Protocol):
    """Storage contract used by the transaction service.

    ``insert`` raises DuplicateKeyError when storage already holds the full
    key or another loan for the same employee and start date.
    ``update_status`` rewrites only the status of the row with the full key.
    """

    def list_all(self) -> Sequence[Transaction]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[Transaction]:
        raise NotImplementedError

    def get_by_employee_and_start_date(self, *, employee_id: str, start_date: date) -> Optional[Transaction]:
        raise NotImplementedError

    def get_by_key(self, key: TransactionKey) -> Optional[Transaction]:
        raise NotImplementedError

    def insert(self, transaction: Transaction) -> Transaction:
        raise NotImplementedError

    def update_status(self, key: TransactionKey, status: TransactionStatus) -> None:
        raise NotImplementedError

    def delete_by_key(self, key: TransactionKey) -> bool:
        raise NotImplementedError

    def list_by_loan_company(self, company_uen: str) -> Sequence[Transaction]:
        raise NotImplementedError

    def list_by_borrowing_company(self, company_uen: str) -> Sequence[Transaction]:
        raise NotImplementedError
