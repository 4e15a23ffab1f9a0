from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.exceptions import DuplicateKeyError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_entry
from .model import Skill
from .repository import SkillRepository


def _to_skill(row: dict) -> Skill:
    return Skill(name=row["skill"], task=row["task"])


class MySQLSkillRepository(SkillRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Skill]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT skill, task FROM skill ORDER BY skill")
            return [_to_skill(r) for r in fetchall(cur)]

    def get_by_name(self, name: str) -> Optional[Skill]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT skill, task FROM skill WHERE skill=%s", (name,))
            row = fetchone(cur)
            return _to_skill(row) if row else None

    def insert(self, skill: Skill) -> Skill:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("INSERT INTO skill(skill, task) VALUES(%s,%s)", (skill.name, skill.task))
        except IntegrityError as exc:
            if is_duplicate_entry(exc):
                raise DuplicateKeyError("Skill", skill.name) from exc
            raise
        return skill

    def update(self, skill: Skill) -> Skill:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE skill SET task=%s WHERE skill=%s", (skill.task, skill.name))
        return skill

    def delete_by_name(self, name: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM skill WHERE skill=%s", (name,))
            return cur.rowcount > 0
