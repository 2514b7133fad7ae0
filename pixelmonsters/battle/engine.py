"""Battle lifecycle: start a battle, resolve whole turns, detect the outcome.

Phases run ``SELECTING -> RESOLVING -> SELECTING`` until one of the terminal
phases (VICTORY, DEFEAT, CAPTURED, ESCAPED) is reached. ``resolve_turn`` never
mutates its input; it hands back a fresh state plus the turn's event lines.

Mutual knockout (both sides out of conscious monsters after the same action)
resolves to DEFEAT: player-side exhaustion is checked first.
"""
from __future__ import annotations
import random
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from pixelmonsters.core.errors import ValidationError
from pixelmonsters.core.logging import logger
from pixelmonsters.data.skills import SkillCatalog, default_catalog
from .actions import ActionExecutor
from .ai import EnemyPolicy
from .capture import CaptureResolver, RateCaptureResolver
from .models import Action, BattleState, BattleType, Monster, Phase, Side
from .pacing import DEFAULT_INTERVAL, NullScheduler, Scheduler
from .turn_order import order_actions

OUTCOME_MESSAGES = {
    Phase.VICTORY: "You won the battle!",
    Phase.DEFEAT: "You have no monsters left to fight...",
}


def _first_conscious(party: Sequence[Monster]) -> Optional[int]:
    for i, m in enumerate(party):
        if not m.is_fainted():
            return i
    return None


class BattleEngine:
    def __init__(self, catalog: Optional[SkillCatalog] = None,
                 capture_resolver: Optional[CaptureResolver] = None,
                 rng: Optional[random.Random] = None,
                 scheduler: Optional[Scheduler] = None,
                 policy: Optional[EnemyPolicy] = None,
                 pacing: float = DEFAULT_INTERVAL):
        self.rng = rng or random.Random()
        self.catalog = catalog if catalog is not None else default_catalog()
        self.capture_resolver = capture_resolver or RateCaptureResolver()
        self.scheduler = scheduler or NullScheduler()
        self.pacing = pacing
        self.executor = ActionExecutor(self.catalog, self.capture_resolver, self.rng)
        self.policy = policy or EnemyPolicy(self.catalog, self.rng)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start_battle(self, player_party: Sequence[Monster], enemy_party: Sequence[Monster],
                     battle_type: BattleType = BattleType.WILD_ENCOUNTER) -> BattleState:
        if not player_party:
            raise ValidationError("Player party cannot be empty")
        if not enemy_party:
            raise ValidationError("Enemy party cannot be empty")
        lead = _first_conscious(player_party)
        foe = _first_conscious(enemy_party)
        if lead is None:
            raise ValidationError("Player party has no monster able to fight")
        if foe is None:
            raise ValidationError("Enemy party has no monster able to fight")
        wild = battle_type == BattleType.WILD_ENCOUNTER
        if wild:
            opening = f"A wild {enemy_party[foe].name} appeared!"
        else:
            opening = "Battle started!"
        state = BattleState(
            player_party=tuple(player_party),
            enemy_party=tuple(enemy_party),
            active_player=lead,
            active_enemy=foe,
            phase=Phase.SELECTING,
            turn=1,
            last_event=opening,
            is_wild_encounter=wild,
            can_flee=battle_type in (BattleType.WILD_ENCOUNTER, BattleType.TRAINER_BATTLE),
            can_capture=wild,
        )
        logger.debug("BattleStarted", type=battle_type.value,
                     player=len(state.player_party), enemy=len(state.enemy_party))
        return state

    def decide_enemy_action(self, state: BattleState) -> Action:
        return self.policy.decide(state)

    def play_turn(self, state: BattleState, player_action: Action) -> Tuple[BattleState, List[str]]:
        return self.resolve_turn(state, player_action, self.decide_enemy_action(state))

    def resolve_turn(self, state: BattleState, player_action: Action,
                     enemy_action: Action) -> Tuple[BattleState, List[str]]:
        if state.phase.is_terminal:
            return state, []
        state = replace(state, phase=Phase.RESOLVING)
        events: List[str] = []
        for action in order_actions(state, (player_action, enemy_action)):
            step = self.executor.apply(state, action)
            state = step.state
            events.extend(step.events)
            self.scheduler.pause(self.pacing)
            if step.captured:
                return self._finish(state, Phase.CAPTURED, events)
            if step.escaped:
                return self._finish(state, Phase.ESCAPED, events)
            outcome = self.outcome(state)
            if outcome is not None:
                return self._finish(state, outcome, events)
        state = self._end_of_turn(state, events)
        logger.debug("TurnResolved", turn=state.turn, events=len(events))
        return replace(state, phase=Phase.SELECTING, turn=state.turn + 1), events

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    @staticmethod
    def outcome(state: BattleState) -> Optional[Phase]:
        if state.side_defeated(Side.PLAYER):
            return Phase.DEFEAT
        if state.side_defeated(Side.ENEMY):
            return Phase.VICTORY
        return None

    def _finish(self, state: BattleState, phase: Phase, events: List[str]) -> Tuple[BattleState, List[str]]:
        closing = OUTCOME_MESSAGES.get(phase)
        if closing:
            events.append(closing)
        last = events[-1] if events else state.last_event
        logger.info("BattleEnded", outcome=phase.value, turn=state.turn)
        return replace(state, phase=phase, last_event=last), events

    def _end_of_turn(self, state: BattleState, events: List[str]) -> BattleState:
        # Defensive stances last for the turn they were taken in
        state = replace(
            state,
            player_party=tuple(replace(m, guarding=False) for m in state.player_party),
            enemy_party=tuple(replace(m, guarding=False) for m in state.enemy_party),
        )
        for side in (Side.PLAYER, Side.ENEMY):
            if not state.active(side).is_fainted():
                continue
            nxt = _first_conscious(state.party(side))
            if nxt is None:
                continue
            incoming = state.party(side)[nxt]
            if side is Side.PLAYER:
                state = replace(state, active_player=nxt)
                events.append(f"Go, {incoming.name}!")
            else:
                state = replace(state, active_enemy=nxt)
                events.append(f"The enemy sends out {incoming.name}!")
        if events:
            state = replace(state, last_event=events[-1])
        return state


def resolve_turn(state: BattleState, player_action: Action, enemy_action: Action, *,
                 rng: Optional[random.Random] = None,
                 catalog: Optional[SkillCatalog] = None,
                 capture_resolver: Optional[CaptureResolver] = None) -> Tuple[BattleState, List[str]]:
    """One-shot turn resolution without keeping an engine around."""
    engine = BattleEngine(catalog=catalog, capture_resolver=capture_resolver, rng=rng)
    return engine.resolve_turn(state, player_action, enemy_action)

__all__ = ["BattleEngine","resolve_turn","OUTCOME_MESSAGES"]
