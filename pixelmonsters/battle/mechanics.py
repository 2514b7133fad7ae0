from __future__ import annotations
import math
import random
from dataclasses import dataclass
from typing import Optional

from .models import Monster, Skill
from .typechart import effectiveness

CRIT_CHANCE = 0.05
CRIT_MULTIPLIER = 1.5
VARIANCE = (0.85, 1.15)
LEVEL_STEP = 0.05
ESCAPE_BASE = 0.5
ESCAPE_PER_AGILITY = 0.01
ESCAPE_BOUNDS = (0.1, 0.9)

@dataclass(frozen=True)
class DamageRoll:
    amount: int
    critical: bool
    type_modifier: float

def is_critical(rng: random.Random) -> bool:
    return rng.random() < CRIT_CHANCE

def roll_damage(attacker: Monster, defender: Monster, skill: Skill, is_physical: bool,
                rng: Optional[random.Random] = None) -> DamageRoll:
    rng = rng or random.Random()
    # Defense/wisdom pair with attack/magic but do not enter the product
    atk_stat = attacker.stats.attack if is_physical else attacker.stats.magic
    base = (atk_stat * skill.power) // 100
    level_mod = 1 + LEVEL_STEP * (attacker.level - defender.level)
    # Secondary types are not consulted
    type_mod = effectiveness(attacker.type1, defender.type1)
    crit = is_critical(rng)
    crit_mod = CRIT_MULTIPLIER if crit else 1.0
    variance = rng.uniform(*VARIANCE)
    dmg = math.floor(base * level_mod * type_mod * crit_mod * variance)
    return DamageRoll(max(1, dmg), crit, type_mod)

def compute_damage(attacker: Monster, defender: Monster, skill: Skill, is_physical: bool,
                   rng: Optional[random.Random] = None) -> int:
    return roll_damage(attacker, defender, skill, is_physical, rng).amount

def guarded(amount: int) -> int:
    return max(1, amount // 2)

def heal_amount(caster: Monster, skill: Skill) -> int:
    return max(1, (caster.stats.magic * skill.power) // 100)

def escape_chance(fleeing_agility: int, opposing_agility: int) -> float:
    lo, hi = ESCAPE_BOUNDS
    raw = ESCAPE_BASE + ESCAPE_PER_AGILITY * (fleeing_agility - opposing_agility)
    return max(lo, min(hi, raw))

__all__ = [
    "DamageRoll","roll_damage","compute_damage","is_critical",
    "guarded","heal_amount","escape_chance",
]
