from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Skill


class SkillRepository(Protocol):
    def list_all(self) -> Sequence[Skill]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Skill]:
        raise NotImplementedError

    def insert(self, skill: Skill) -> Skill:
        raise NotImplementedError

    def update(self, skill: Skill) -> Skill:
        raise NotImplementedError

    def delete_by_name(self, name: str) -> bool:
        raise NotImplementedError
