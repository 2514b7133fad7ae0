"""Capture probability for wild monsters.

The engine only needs ``probability(target, item_id)``; ``RateCaptureResolver``
is the stock rule (species rate, remaining HP, item strength).
"""
from __future__ import annotations
from typing import Protocol

from .models import Monster

# Capture item modifiers
ITEM_MODIFIERS = {
    'basic_capture': 1.0,
    'great_capture': 1.5,
    'ultra_capture': 2.0,
    'master_capture': 3.0,
}

MAX_CAPTURE_CHANCE = 0.95


class CaptureResolver(Protocol):
    def probability(self, target: Monster, item_id: str) -> float: ...


def capture_chance(capture_rate: int, max_hp: int, current_hp: int, item_id: str) -> float:
    base = capture_rate / 255.0
    hp_ratio = current_hp / max_hp if max_hp > 0 else 0.0
    # Lower HP raises the odds, from x0.5 at full health to x1.0 at zero
    hp_mod = (1.0 - hp_ratio) * 0.5 + 0.5
    item_mod = ITEM_MODIFIERS.get(item_id, 1.0)
    return max(0.0, min(base * hp_mod * item_mod, MAX_CAPTURE_CHANCE))


class RateCaptureResolver:
    def probability(self, target: Monster, item_id: str) -> float:
        return capture_chance(target.capture_rate, target.stats.max_hp, target.current_hp, item_id)


class FixedCaptureResolver:
    """Always reports the same probability. Handy for scripted encounters."""

    def __init__(self, chance: float):
        self.chance = max(0.0, min(1.0, chance))

    def probability(self, target: Monster, item_id: str) -> float:
        return self.chance

__all__ = ["CaptureResolver","RateCaptureResolver","FixedCaptureResolver","capture_chance","ITEM_MODIFIERS"]
