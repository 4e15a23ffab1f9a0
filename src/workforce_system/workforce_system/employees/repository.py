from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, work_permit_number: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_by_company(self, company_uen: str) -> Sequence[Employee]:
        raise NotImplementedError

    def insert(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def update(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def delete_by_id(self, work_permit_number: str) -> bool:
        raise NotImplementedError
