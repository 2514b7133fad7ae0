"""Opponent decision heuristic.

Rules are checked in order; the first whose predicate holds produces the
action. Predicates may draw from the RNG, so their order is part of the
behavior (a later rule only draws when every earlier one declined).
"""
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from pixelmonsters.core.logging import logger
from pixelmonsters.data.skills import SkillCatalog
from .models import Action, Attack, BattleState, Defend, Monster, Side, Skill, Slot, UseSkill

SKILL_MP_THRESHOLD = 8
SKILL_CHANCE = 0.4
LOW_HP_RATIO = 0.3
DEFEND_CHANCE = 0.3


@dataclass(frozen=True)
class DecisionContext:
    state: BattleState
    slot: Slot
    monster: Monster
    catalog: SkillCatalog
    rng: random.Random


@dataclass(frozen=True)
class Rule:
    name: str
    applies: Callable[[DecisionContext], bool]
    produce: Callable[[DecisionContext], Action]


def affordable_skills(monster: Monster, catalog: SkillCatalog) -> List[Skill]:
    found = []
    for skill_id in monster.skills:
        skill = catalog.lookup(skill_id)
        if skill is not None and skill.mp_cost <= monster.current_mp:
            found.append(skill)
    return found


def _wants_skill(ctx: DecisionContext) -> bool:
    return ctx.monster.current_mp > SKILL_MP_THRESHOLD and ctx.rng.random() < SKILL_CHANCE

def _cast_skill(ctx: DecisionContext) -> Action:
    options = affordable_skills(ctx.monster, ctx.catalog)
    if not options:
        return Attack(ctx.slot)
    skill = ctx.rng.choice(options)
    return UseSkill(ctx.slot, skill.id, priority=skill.priority)

def _is_cornered(ctx: DecisionContext) -> bool:
    return (ctx.monster.current_hp < ctx.monster.stats.max_hp * LOW_HP_RATIO
            and ctx.rng.random() < DEFEND_CHANCE)

def _defend(ctx: DecisionContext) -> Action:
    return Defend(ctx.slot)

def _attack(ctx: DecisionContext) -> Action:
    return Attack(ctx.slot)


DEFAULT_RULES: Sequence[Rule] = (
    Rule("cast", _wants_skill, _cast_skill),
    Rule("guard", _is_cornered, _defend),
    Rule("attack", lambda ctx: True, _attack),
)


class EnemyPolicy:
    def __init__(self, catalog: SkillCatalog, rng: Optional[random.Random] = None,
                 rules: Optional[Sequence[Rule]] = None, side: Side = Side.ENEMY):
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.rules = list(rules) if rules is not None else list(DEFAULT_RULES)
        self.side = side

    def decide(self, state: BattleState) -> Action:
        slot = state.active_slot(self.side)
        ctx = DecisionContext(state, slot, state.monster_at(slot), self.catalog, self.rng)
        for rule in self.rules:
            if rule.applies(ctx):
                action = rule.produce(ctx)
                logger.debug("EnemyDecision", rule=rule.name, action=type(action).__name__)
                return action
        return Attack(slot)


def decide_enemy_action(state: BattleState, catalog: SkillCatalog,
                        rng: Optional[random.Random] = None) -> Action:
    return EnemyPolicy(catalog, rng).decide(state)

__all__ = ["EnemyPolicy","Rule","DecisionContext","DEFAULT_RULES","affordable_skills","decide_enemy_action"]
