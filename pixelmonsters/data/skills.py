"""Skill catalog loader.

Provides cached access to the packaged skills.json and a small lookup object
the battle engine consumes.
"""
from __future__ import annotations
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional

from pixelmonsters.battle.models import Skill, SkillCategory, SkillTarget
from pixelmonsters.core.errors import DataLoadError
from pixelmonsters.core.paths import SKILLS


def skill_from_dict(raw: Mapping[str, Any]) -> Skill:
    accuracy = raw.get("accuracy", 100)
    return Skill(
        id=str(raw["id"]),
        name=str(raw.get("name") or raw["id"].replace("_", " ").title()),
        category=SkillCategory(raw.get("category", "physical")),
        target=SkillTarget(raw.get("target", "single_enemy")),
        mp_cost=int(raw.get("mp_cost", 0) or 0),
        power=int(raw.get("power", 0) or 0),
        accuracy=None if accuracy is None else int(accuracy),
        priority=int(raw.get("priority", 0) or 0),
        description=str(raw.get("description", "")),
    )


class SkillCatalog:
    def __init__(self, skills: Iterable[Skill] = ()):
        self._skills: Dict[str, Skill] = {s.id: s for s in skills}

    @classmethod
    def from_file(cls, path: Path) -> "SkillCatalog":
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise DataLoadError(str(path), "file not found") from None
        except json.JSONDecodeError as e:
            raise DataLoadError(str(path), f"invalid JSON ({e.msg} at line {e.lineno})") from e
        if not isinstance(raw, list):
            raise DataLoadError(str(path), "expected a list of skills")
        try:
            return cls(skill_from_dict(entry) for entry in raw)
        except (KeyError, ValueError, TypeError) as e:
            raise DataLoadError(str(path), f"bad skill entry: {e}") from e

    def lookup(self, skill_id: str) -> Optional[Skill]:
        return self._skills.get(skill_id)

    def __contains__(self, skill_id: object) -> bool:
        return skill_id in self._skills

    def __iter__(self) -> Iterator[Skill]:
        return iter(self._skills.values())

    def __len__(self) -> int:
        return len(self._skills)


@lru_cache(maxsize=None)
def default_catalog() -> SkillCatalog:
    return SkillCatalog.from_file(SKILLS)


def get_skill(skill_id: str) -> Skill:
    skill = default_catalog().lookup(skill_id)
    if skill is None:
        raise KeyError(f"Skill not found: {skill_id}")
    return skill

__all__ = ["SkillCatalog","skill_from_dict","default_catalog","get_skill"]
