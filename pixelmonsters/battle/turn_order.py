"""Action ordering: priority first, then the acting combatant's agility."""
from __future__ import annotations
from typing import List, Sequence

from .models import Action, BattleState

PRIORITY_WEIGHT = 1000

def order_key(state: BattleState, action: Action) -> int:
    actor = state.monster_at(action.actor)
    agility = actor.stats.agility if actor is not None else 0
    return action.priority * PRIORITY_WEIGHT + agility

def order_actions(state: BattleState, actions: Sequence[Action]) -> List[Action]:
    # sorted() is stable under reverse=True, so equal keys keep submission order
    return sorted(actions, key=lambda a: order_key(state, a), reverse=True)

__all__ = ["order_key","order_actions","PRIORITY_WEIGHT"]
