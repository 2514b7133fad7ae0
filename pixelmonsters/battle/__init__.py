"""
Battle system package.
Modules:
- models.py (Monster, Skill, actions, BattleState)
- typechart.py (type matchups)
- mechanics.py (damage, crits, variance, escape odds)
- turn_order.py (priority/agility ordering)
- actions.py (single-action executor)
- engine.py (turn resolution pipeline & lifecycle)
- ai.py (opponent decision logic)
- capture.py (capture probability)
- pacing.py (presentation pauses)
- render.py (HP bars, rich panels)
"""
from .engine import BattleEngine, resolve_turn
from .mechanics import compute_damage
from .ai import decide_enemy_action
__all__ = ["BattleEngine", "resolve_turn", "compute_damage", "decide_enemy_action"]
