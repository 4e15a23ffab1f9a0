from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Company


class CompanyRepository(Protocol):
    """Repository interface for Company.

    Note: services depend on this interface, never on a concrete database.
    """

    def list_all(self) -> Sequence[Company]:
        raise NotImplementedError

    def get_by_uen(self, uen: str) -> Optional[Company]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Company]:
        raise NotImplementedError

    def insert(self, company: Company) -> Company:
        raise NotImplementedError

    def update(self, company: Company) -> Company:
        raise NotImplementedError

    def delete_by_uen(self, uen: str) -> bool:
        raise NotImplementedError
