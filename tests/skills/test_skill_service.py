from __future__ import annotations

import pytest

from src.workforce_system.workforce_system.core.exceptions import (
    DuplicateKeyError,
    MissingValueError,
    NotFoundError,
    ValidationError,
)
from src.workforce_system.workforce_system.skills.model import Skill
from src.workforce_system.workforce_system.skills.service import SkillService


class FakeSkillsRepo:
    def __init__(self, *skills: Skill):
        self._by_name = {s.name: s for s in skills}

    def list_all(self):
        return sorted(self._by_name.values(), key=lambda s: s.name)

    def get_by_name(self, name):
        return self._by_name.get(name)

    def insert(self, skill):
        self._by_name[skill.name] = skill
        return skill

    def update(self, skill):
        self._by_name[skill.name] = skill
        return skill

    def delete_by_name(self, name):
        return self._by_name.pop(name, None) is not None


WELDING = Skill(name="Welding", task="Structural steel welding")


def test_add_skill_trims_and_saves():
    repo = FakeSkillsRepo()
    saved = SkillService(repo).add_skill(Skill(name=" Welding ", task=" Structural steel welding "))

    assert saved == WELDING
    assert repo.get_by_name("Welding") == WELDING


def test_add_existing_skill_is_duplicate():
    with pytest.raises(DuplicateKeyError):
        SkillService(FakeSkillsRepo(WELDING)).add_skill(WELDING)


def test_task_is_required():
    with pytest.raises(MissingValueError):
        SkillService(FakeSkillsRepo()).add_skill(Skill(name="Rigging", task=None))


def test_task_longer_than_255_rejected():
    with pytest.raises(ValidationError):
        SkillService(FakeSkillsRepo()).add_skill(Skill(name="Rigging", task="x" * 256))


def test_update_keeps_id_and_requires_existing_skill():
    svc = SkillService(FakeSkillsRepo(WELDING))

    updated = svc.update_skill("Welding", Skill(name="Welding", task="Pipe welding"))
    assert svc.get_skill("Welding") == updated

    with pytest.raises(ValidationError):
        svc.update_skill("Welding", Skill(name="Plumbing", task="Pipes"))
    with pytest.raises(NotFoundError):
        svc.update_skill("Plumbing", Skill(name="Plumbing", task="Pipes"))


def test_delete_unknown_skill_not_found():
    svc = SkillService(FakeSkillsRepo(WELDING))
    svc.delete_skill("Welding")

    assert svc.list_skills() == []
    with pytest.raises(NotFoundError):
        svc.delete_skill("Welding")
