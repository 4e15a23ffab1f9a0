from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..core.enums import TransactionStatus


@dataclass(frozen=True)
class TransactionKey:
    """Composite identity of a worker loan; immutable once stored."""

    loan_company_uen: str
    borrowing_company_uen: str
    employee_id: str
    start_date: date

    def __str__(self) -> str:
        return (
            f"(loan={self.loan_company_uen}, borrowing={self.borrowing_company_uen}, "
            f"employee={self.employee_id}, start={self.start_date})"
        )


@dataclass(frozen=True)
class Transaction:
    """A worker loaned by ``loan_company_uen`` to ``borrowing_company_uen``."""

    loan_company_uen: str
    borrowing_company_uen: str
    employee_id: str
    start_date: date
    end_date: date
    total_cost: Decimal
    status: TransactionStatus = TransactionStatus.PENDING

    @property
    def key(self) -> TransactionKey:
        return TransactionKey(
            loan_company_uen=self.loan_company_uen,
            borrowing_company_uen=self.borrowing_company_uen,
            employee_id=self.employee_id,
            start_date=self.start_date,
        )
