from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Company:
    """Domain entity: a company identified by its UEN.

    Note: Plain data object (no DB access code).
    """

    uen: str
    name: str
