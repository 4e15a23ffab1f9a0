from __future__ import annotations

from typing import Optional, Sequence

from ..common.logging import get_logger
from ..common.validators import require_length, require_non_empty, require_present
from ..core.constants import SKILL_NAME_MAX_LENGTH, SKILL_TASK_MAX_LENGTH
from ..core.exceptions import DuplicateKeyError, NotFoundError, ValidationError
from .model import Skill
from .repository import SkillRepository

log = get_logger(__name__)

ENTITY = "Skill"


class SkillService:
    def __init__(self, skills: SkillRepository):
        self._skills = skills

    @staticmethod
    def _validate(skill: Optional[Skill]) -> Skill:
        require_present(skill, ENTITY)
        name = require_non_empty(skill.name, f"{ENTITY}'s id")
        require_length(name, f"{ENTITY}'s id", max_len=SKILL_NAME_MAX_LENGTH)
        task = require_non_empty(skill.task, "Task Description")
        require_length(task, "Task Description", max_len=SKILL_TASK_MAX_LENGTH)
        return Skill(name=name, task=task)

    def list_skills(self) -> Sequence[Skill]:
        return self._skills.list_all()

    def get_skill(self, name: Optional[str]) -> Skill:
        require_present(name, f"{ENTITY}'s id")
        skill = self._skills.get_by_name(name)
        if not skill:
            raise NotFoundError(ENTITY, name)
        return skill

    def add_skill(self, skill: Optional[Skill]) -> Skill:
        skill = self._validate(skill)
        if self._skills.get_by_name(skill.name):
            raise DuplicateKeyError(ENTITY, skill.name)
        saved = self._skills.insert(skill)
        log.info("skill added", extra={"skill": saved.name})
        return saved

    def update_skill(self, name: Optional[str], skill: Optional[Skill]) -> Skill:
        require_present(name, f"{ENTITY}'s id")
        skill = self._validate(skill)
        if skill.name != name:
            raise ValidationError("Skill's id cannot be changed")
        self.get_skill(name)
        return self._skills.update(skill)

    def delete_skill(self, name: Optional[str]) -> None:
        self.get_skill(name)
        self._skills.delete_by_name(name)
        log.info("skill deleted", extra={"skill": name})
