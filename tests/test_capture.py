import pytest

from pixelmonsters.battle.capture import (
    MAX_CAPTURE_CHANCE, FixedCaptureResolver, RateCaptureResolver, capture_chance,
)
from pixelmonsters.battle.models import Monster, Stats
from pixelmonsters.core.types import MonsterType


def test_full_health_halves_the_odds():
    assert capture_chance(255, 100, 100, "basic_capture") == pytest.approx(0.5)


def test_chance_is_capped():
    assert capture_chance(255, 100, 0, "master_capture") == MAX_CAPTURE_CHANCE


def test_better_items_help():
    basic = capture_chance(100, 100, 50, "basic_capture")
    great = capture_chance(100, 100, 50, "great_capture")
    ultra = capture_chance(100, 100, 50, "ultra_capture")
    assert basic < great < ultra
    assert great == pytest.approx(basic * 1.5)


def test_unknown_item_counts_as_basic():
    assert capture_chance(120, 80, 40, "mystery") == capture_chance(120, 80, 40, "basic_capture")


def test_resolvers():
    wild = Monster(id="w", name="Wild", level=3, type1=MonsterType.BUG, capture_rate=255,
                   stats=Stats(attack=5, defense=5, agility=5, magic=5, wisdom=5, max_hp=40, max_mp=0),
                   current_hp=20)
    assert RateCaptureResolver().probability(wild, "basic_capture") == pytest.approx(0.75)
    assert FixedCaptureResolver(2.0).probability(wild, "basic_capture") == 1.0
