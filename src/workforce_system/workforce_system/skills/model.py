from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Skill:
    """A trade skill; ``name`` is also its id."""

    name: str
    task: str
