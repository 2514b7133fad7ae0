"""Starter species used by the terminal demo and the tests.

Stats grow 8% per level from the species base, like the main game.
"""
from __future__ import annotations
import itertools
from typing import Dict, List, Optional

from pixelmonsters.battle.models import Monster, Stats
from pixelmonsters.core.types import MonsterType

SPECIES: Dict[str, dict] = {
    "starter_slime": {
        "name": "Gel Slime", "types": (MonsterType.NORMAL, None), "capture_rate": 200,
        "base_stats": {"attack": 30, "defense": 25, "agility": 35, "magic": 20, "wisdom": 30, "max_hp": 120, "max_mp": 40},
    },
    "fire_sprite": {
        "name": "Flame Sprite", "types": (MonsterType.FIRE, None), "capture_rate": 150,
        "base_stats": {"attack": 45, "defense": 20, "agility": 50, "magic": 60, "wisdom": 40, "max_hp": 90, "max_mp": 80},
    },
    "forest_beast": {
        "name": "Moss Wolf", "types": (MonsterType.GRASS, MonsterType.NORMAL), "capture_rate": 120,
        "base_stats": {"attack": 55, "defense": 45, "agility": 40, "magic": 25, "wisdom": 35, "max_hp": 140, "max_mp": 50},
    },
    "sky_bird": {
        "name": "Wind Falcon", "types": (MonsterType.FLYING, MonsterType.NORMAL), "capture_rate": 100,
        "base_stats": {"attack": 40, "defense": 30, "agility": 70, "magic": 35, "wisdom": 45, "max_hp": 100, "max_mp": 60},
    },
}

# level -> skill ids learned at that level
LEARNSETS: Dict[str, Dict[int, List[str]]] = {
    "starter_slime": {1: ["tackle"], 3: ["heal"], 7: ["focus"]},
    "fire_sprite": {1: ["tackle"], 5: ["fireball"], 10: ["focus"]},
    "forest_beast": {1: ["bite"], 4: ["tackle"], 8: ["mend"]},
    "sky_bird": {1: ["quick_strike"], 6: ["gust"], 11: ["blizzard"]},
}

_ids = itertools.count(1)

def stats_for_level(base: Dict[str, int], level: int) -> Stats:
    growth = 1.0 + (level - 1) * 0.08
    return Stats(**{k: int(v * growth) for k, v in base.items()})

def known_skills(species: str, level: int) -> List[str]:
    learned: List[str] = []
    for lvl, skills in sorted(LEARNSETS.get(species, {}).items()):
        if lvl <= level:
            learned.extend(skills)
    return learned

def make_monster(species: str, level: int, nickname: Optional[str] = None,
                 monster_id: Optional[str] = None) -> Monster:
    sp = SPECIES[species]
    level = max(1, min(int(level), 100))
    primary, secondary = sp["types"]
    return Monster(
        id=monster_id or f"{species}-{next(_ids)}",
        name=nickname or sp["name"],
        level=level,
        type1=primary,
        type2=secondary,
        stats=stats_for_level(sp["base_stats"], level),
        skills=tuple(known_skills(species, level)),
        capture_rate=sp["capture_rate"],
    )

__all__ = ["SPECIES","LEARNSETS","make_monster","stats_for_level","known_skills"]
