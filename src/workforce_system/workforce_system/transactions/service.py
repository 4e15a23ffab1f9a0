"""Worker-loan transactions: date-collision checks and status changes.

Each operation is a read-check-write sequence over short-lived connections.
Two submissions for the same employee racing each other can both pass the
collision check; the unique (employee_id, loan_start_date) index only stops the
exact same-start case, where the insert fails with DuplicateKeyError.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence, Union

from ..common.logging import get_logger
from ..common.validators import require_decimal, require_non_empty, require_present
from ..core.enums import TransactionStatus
from ..core.exceptions import DateConflictError, DuplicateKeyError, NotFoundError, ValidationError
from .model import Transaction, TransactionKey
from .repository import TransactionRepository
from .rules import first_conflict

log = get_logger(__name__)

ENTITY = "Transaction"


def parse_status(value: Union[str, TransactionStatus, None]) -> TransactionStatus:
    require_present(value, "Transaction's status")
    if isinstance(value, TransactionStatus):
        return value
    wanted = str(value).strip().lower()
    for status in TransactionStatus:
        if status.value.lower() == wanted or status.name.lower() == wanted:
            return status
    allowed = ", ".join(s.value for s in TransactionStatus)
    raise ValidationError(f"Transaction's status must be one of: {allowed}")


class TransactionService:
    def __init__(self, transactions: TransactionRepository):
        self._transactions = transactions

    @staticmethod
    def _validate(transaction: Optional[Transaction]) -> Transaction:
        require_present(transaction, ENTITY)
        require_non_empty(transaction.employee_id, "Employee's Id")
        require_non_empty(transaction.loan_company_uen, "Loan Company's Id")
        require_non_empty(transaction.borrowing_company_uen, "Borrowing Company's Id")
        require_present(transaction.start_date, "Transaction's start date")
        require_present(transaction.end_date, "Transaction's end date")
        require_present(transaction.total_cost, "Transaction's total cost")
        if transaction.end_date <= transaction.start_date:
            raise ValidationError("Transaction's end date must be after its start date")
        total_cost = require_decimal(transaction.total_cost, "Transaction's total cost", min_value=Decimal(0))
        return replace(transaction, total_cost=total_cost, status=parse_status(transaction.status))

    def list_transactions(self) -> Sequence[Transaction]:
        return self._transactions.list_all()

    def submit(self, transaction: Optional[Transaction]) -> Transaction:
        transaction = self._validate(transaction)

        existing = self._transactions.list_by_employee(transaction.employee_id)
        clash = first_conflict(transaction, existing)
        if clash is not None:
            log.info(
                "transaction rejected: dates unavailable",
                extra={
                    "employee_id": transaction.employee_id,
                    "start_date": str(transaction.start_date),
                    "end_date": str(transaction.end_date),
                    "existing_start_date": str(clash.start_date),
                    "existing_end_date": str(clash.end_date),
                },
            )
            raise DateConflictError(
                start_date=transaction.start_date,
                end_date=transaction.end_date,
                existing_start_date=clash.start_date,
                existing_end_date=clash.end_date,
            )

        if self._transactions.get_by_key(transaction.key) is not None:
            raise DuplicateKeyError(ENTITY, transaction.key)

        # A racing submit that passed both checks is still refused by storage.
        saved = self._transactions.insert(transaction)
        log.info(
            "transaction submitted",
            extra={"key": str(saved.key), "status": saved.status.value},
        )
        return saved

    def get_by_employee_and_start_date(self, employee_id: Optional[str], start_date: Optional[date]) -> Transaction:
        require_present(employee_id, "Employee's Id")
        require_present(start_date, "Transaction's start date")
        found = self._transactions.get_by_employee_and_start_date(employee_id=employee_id, start_date=start_date)
        if found is None:
            raise NotFoundError(ENTITY, f"(Employee's Id: {employee_id}, date: {start_date})")
        return found

    def change_status(
        self,
        *,
        employee_id: Optional[str],
        start_date: Optional[date],
        status: Union[str, TransactionStatus, None],
    ) -> Transaction:
        """Set the status of the loan identified by (employee, start date).

        Only ``status`` changes; the stored companies, end date and cost are
        kept. Any status may move to any other.
        """

        new_status = parse_status(status)
        current = self.get_by_employee_and_start_date(employee_id, start_date)
        updated = replace(current, status=new_status)
        self._transactions.update_status(updated.key, new_status)
        log.info(
            "transaction status changed",
            extra={"key": str(updated.key), "from": current.status.value, "to": new_status.value},
        )
        return updated

    def update_transaction(self, transaction: Optional[Transaction]) -> Transaction:
        require_present(transaction, ENTITY)
        return self.change_status(
            employee_id=transaction.employee_id,
            start_date=transaction.start_date,
            status=transaction.status,
        )

    def remove(self, key: Optional[TransactionKey]) -> None:
        require_present(key, f"{ENTITY}'s id")
        if self._transactions.get_by_key(key) is None:
            raise NotFoundError(ENTITY, key)
        self._transactions.delete_by_key(key)
        log.info("transaction removed", extra={"key": str(key)})

    def remove_by_employee_and_start_date(self, employee_id: Optional[str], start_date: Optional[date]) -> None:
        self.remove(self.get_by_employee_and_start_date(employee_id, start_date).key)

    def list_by_loaning_company(self, company_uen: Optional[str]) -> Sequence[Transaction]:
        require_present(company_uen, "Loan Company's Id")
        return self._transactions.list_by_loan_company(company_uen)

    def list_by_borrowing_company(self, company_uen: Optional[str]) -> Sequence[Transaction]:
        require_present(company_uen, "Borrowing Company's Id")
        return self._transactions.list_by_borrowing_company(company_uen)
