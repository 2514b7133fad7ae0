"""Attacking-type x defending-type damage multipliers.

Only the listed pairs deviate from neutral; every other pair is 1.0.
"""
from __future__ import annotations
from typing import Dict, Iterator, Tuple

from pixelmonsters.core.types import MonsterType

SUPER_EFFECTIVE = 1.5
RESISTED = 0.5
NEUTRAL = 1.0

T = MonsterType

TYPE_EFFECTIVENESS: Dict[Tuple[MonsterType, MonsterType], float] = {
    (T.FIRE, T.GRASS): SUPER_EFFECTIVE,
    (T.WATER, T.FIRE): SUPER_EFFECTIVE,
    (T.GRASS, T.WATER): SUPER_EFFECTIVE,
    (T.ELECTRIC, T.FLYING): SUPER_EFFECTIVE,
    (T.FIGHTING, T.NORMAL): SUPER_EFFECTIVE,
    (T.FIRE, T.WATER): RESISTED,
    (T.WATER, T.GRASS): RESISTED,
    (T.GRASS, T.FIRE): RESISTED,
    (T.ELECTRIC, T.GROUND): RESISTED,
}

def effectiveness(attacking: MonsterType, defending: MonsterType) -> float:
    return TYPE_EFFECTIVENESS.get((attacking, defending), NEUTRAL)

def all_pairs() -> Iterator[Tuple[MonsterType, MonsterType, float]]:
    """Every (attacking, defending, multiplier) triple across the type set."""
    for a in MonsterType:
        for d in MonsterType:
            yield a, d, effectiveness(a, d)

__all__ = ["TYPE_EFFECTIVENESS","SUPER_EFFECTIVE","RESISTED","NEUTRAL","effectiveness","all_pairs"]
