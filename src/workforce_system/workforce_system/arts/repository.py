from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import ArtRecord


class ArtRepository(Protocol):
    def list_all(self) -> Sequence[ArtRecord]:
        raise NotImplementedError

    def list_by_company(self, company_uen: str) -> Sequence[ArtRecord]:
        raise NotImplementedError

    def list_latest_per_employee(self, *, company_uen: Optional[str] = None) -> Sequence[ArtRecord]:
        """Each employee's record(s) on their most recent test date."""

        raise NotImplementedError

    def get_by_id(self, art_id: int) -> Optional[ArtRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: str,
        company_uen: str,
        date_of_test: date,
        expiry_date: date,
        result: bool,
    ) -> int:
        raise NotImplementedError

    def delete_by_id(self, art_id: int) -> bool:
        raise NotImplementedError
