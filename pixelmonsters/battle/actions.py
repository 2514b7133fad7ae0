"""Action executor: applies exactly one action to a battle state.

Each call returns a ``StepResult`` holding the new state and the event lines the
step produced. Infeasible actions (unknown skill, not enough MP, bad target,
fainted actor, enemy-side flee or capture) come back with the state untouched
and no events; flee/capture attempts that the battle mode forbids come back
unchanged apart from a short explanatory event.
"""
from __future__ import annotations
import random
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, Tuple

from pixelmonsters.core.logging import logger
from pixelmonsters.data.skills import SkillCatalog
from .capture import CaptureResolver
from .mechanics import escape_chance, guarded, heal_amount, roll_damage
from .models import (
    BASIC_ATTACK, Action, Attack, BattleState, Capture, Defend, Flee, Monster, Side, Skill,
    SkillCategory, SkillTarget, Slot, UseSkill,
)


@dataclass(frozen=True)
class StepResult:
    state: BattleState
    events: Tuple[str, ...] = ()
    captured: bool = False
    escaped: bool = False


def _effect_note(type_modifier: float) -> str:
    if type_modifier > 1.0:
        return " It's super effective!"
    if type_modifier < 1.0:
        return " It's not very effective..."
    return ""


class ActionExecutor:
    def __init__(self, catalog: SkillCatalog, capture_resolver: CaptureResolver,
                 rng: Optional[random.Random] = None):
        self.catalog = catalog
        self.capture_resolver = capture_resolver
        self.rng = rng or random.Random()
        self._handlers: Dict[type, Callable[[BattleState, Action, Monster], StepResult]] = {
            Attack: self._attack,
            UseSkill: self._use_skill,
            Defend: self._defend,
            Flee: self._flee,
            Capture: self._capture,
        }

    def apply(self, state: BattleState, action: Action) -> StepResult:
        actor = state.monster_at(action.actor)
        if actor is None:
            return self._skip(state, "actor_out_of_range", action)
        if actor.is_fainted():
            return self._skip(state, "actor_fainted", action)
        return self._handlers[type(action)](state, action, actor)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _skip(self, state: BattleState, reason: str, action: Action) -> StepResult:
        logger.debug("ActionSkipped", reason=reason, action=type(action).__name__,
                     side=action.actor.side.value, slot=action.actor.index)
        return StepResult(state)

    @staticmethod
    def _done(state: BattleState, events: List[str], **flags: bool) -> StepResult:
        if events:
            state = replace(state, last_event=events[-1])
        return StepResult(state, tuple(events), **flags)

    @staticmethod
    def _spend_mp(state: BattleState, slot: Slot, cost: int) -> BattleState:
        actor = state.monster_at(slot)
        return state.replace_monster(slot, actor.with_mp(actor.current_mp - cost))

    @staticmethod
    def _pick_single(state: BattleState, side: Side, index: Optional[int]) -> Optional[List[Slot]]:
        slot = state.active_slot(side) if index is None else Slot(side, index)
        target = state.monster_at(slot)
        if target is None or target.is_fainted():
            return None
        return [slot]

    @staticmethod
    def _conscious(state: BattleState, side: Side) -> List[Slot]:
        return [Slot(side, i) for i, m in enumerate(state.party(side)) if not m.is_fainted()]

    def _enemy_targets(self, state: BattleState, actor: Slot, skill: Skill,
                       index: Optional[int]) -> Optional[List[Slot]]:
        foe = actor.side.opponent
        if skill.target in (SkillTarget.ALL_ENEMIES, SkillTarget.ALL):
            return self._conscious(state, foe) or None
        return self._pick_single(state, foe, index)

    def _ally_targets(self, state: BattleState, actor: Slot, skill: Skill,
                      index: Optional[int]) -> Optional[List[Slot]]:
        if skill.target in (SkillTarget.ALL_ALLIES, SkillTarget.ALL):
            return self._conscious(state, actor.side) or None
        if skill.target == SkillTarget.SINGLE_ALLY and index is not None:
            return self._pick_single(state, actor.side, index)
        return [actor]

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def _attack(self, state: BattleState, action: Attack, actor: Monster) -> StepResult:
        return self._strike(state, action, actor, BASIC_ATTACK, action.target)

    def _use_skill(self, state: BattleState, action: UseSkill, actor: Monster) -> StepResult:
        skill = self.catalog.lookup(action.skill_id)
        if skill is None:
            return self._skip(state, "unknown_skill", action)
        if actor.current_mp < skill.mp_cost:
            return self._skip(state, "insufficient_mp", action)
        if skill.is_damaging:
            return self._strike(state, action, actor, skill, action.target)
        if skill.category == SkillCategory.HEALING and skill.power > 0:
            return self._heal(state, action, actor, skill, action.target)
        # Support and power-0 skills never reach the damage formula
        state = self._spend_mp(state, action.actor, skill.mp_cost)
        return self._done(state, [f"{actor.name} used {skill.name}!"])

    def _strike(self, state: BattleState, action: Action, actor: Monster, skill: Skill,
                index: Optional[int]) -> StepResult:
        targets = self._enemy_targets(state, action.actor, skill, index)
        if targets is None:
            return self._skip(state, "no_target", action)
        state = self._spend_mp(state, action.actor, skill.mp_cost)
        events: List[str] = []
        single = len(targets) == 1
        if not single:
            events.append(f"{actor.name} used {skill.name}!")
        fainted: List[str] = []
        for slot in targets:
            target = state.monster_at(slot)
            roll = roll_damage(actor, target, skill, skill.is_physical, self.rng)
            amount = guarded(roll.amount) if target.guarding else roll.amount
            hit = target.with_hp(target.current_hp - amount)
            state = state.replace_monster(slot, hit)
            head = (f"{actor.name} used {skill.name}! Dealt {amount} damage!" if single
                    else f"{target.name} took {amount} damage!")
            notes = (" A critical hit!" if roll.critical else "") + _effect_note(roll.type_modifier)
            if target.guarding:
                notes += f" {target.name} braced for the blow."
            events.append(head + notes)
            if hit.is_fainted():
                fainted.append(hit.name)
        events.extend(f"{name} fainted!" for name in fainted)
        return self._done(state, events)

    def _heal(self, state: BattleState, action: UseSkill, actor: Monster, skill: Skill,
              index: Optional[int]) -> StepResult:
        targets = self._ally_targets(state, action.actor, skill, index)
        if targets is None:
            return self._skip(state, "no_target", action)
        state = self._spend_mp(state, action.actor, skill.mp_cost)
        amount = heal_amount(actor, skill)
        events = [f"{actor.name} used {skill.name}!"]
        for slot in targets:
            target = state.monster_at(slot)
            healed = target.with_hp(target.current_hp + amount)
            state = state.replace_monster(slot, healed)
            events.append(f"{target.name} recovered {healed.current_hp - target.current_hp} HP!")
        return self._done(state, events)

    def _defend(self, state: BattleState, action: Defend, actor: Monster) -> StepResult:
        state = state.replace_monster(action.actor, replace(actor, guarding=True))
        return self._done(state, [f"{actor.name} is defending and takes a defensive stance!"])

    def _flee(self, state: BattleState, action: Flee, actor: Monster) -> StepResult:
        if action.actor.side is not Side.PLAYER:
            return self._skip(state, "flee_by_enemy", action)
        if not state.can_flee:
            return self._done(state, ["Can't escape from this battle!"])
        foe = state.active(action.actor.side.opponent)
        chance = escape_chance(actor.stats.agility, foe.stats.agility)
        if self.rng.random() < chance:
            return self._done(state, [f"{actor.name} got away safely!"], escaped=True)
        return self._done(state, [f"{actor.name} couldn't get away!"])

    def _capture(self, state: BattleState, action: Capture, actor: Monster) -> StepResult:
        if action.actor.side is not Side.PLAYER:
            return self._skip(state, "capture_by_enemy", action)
        if not (state.is_wild_encounter and state.can_capture):
            return self._done(state, ["This monster can't be captured!"])
        target = state.active(Side.ENEMY)
        chance = max(0.0, min(1.0, self.capture_resolver.probability(target, action.item_id)))
        if self.rng.random() < chance:
            return self._done(state, [f"{target.name} was captured!"], captured=True)
        return self._done(state, [f"{target.name} broke free!"])

__all__ = ["ActionExecutor","StepResult"]
