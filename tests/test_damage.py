import random
import pytest
from pixelmonsters.battle.mechanics import (
    compute_damage, roll_damage, is_critical, escape_chance, heal_amount, guarded,
)
from pixelmonsters.battle.models import Monster, Stats, Skill, SkillCategory
from pixelmonsters.core.types import MonsterType


class FixedRng:
    """First draw decides the crit; variance is pinned."""
    def __init__(self, draw=0.5, variance=1.0):
        self.draw = draw
        self.variance = variance
    def random(self): return self.draw
    def uniform(self, a, b): return self.variance


def make(level, attack=10, defense=10, magic=10, wisdom=10, t1=MonsterType.NORMAL, t2=None):
    return Monster(id=f"m{level}", name="Mon", level=level, type1=t1, type2=t2,
                   stats=Stats(attack=attack, defense=defense, agility=10, magic=magic, wisdom=wisdom, max_hp=100, max_mp=20))


SLAM = Skill(id="slam", name="Slam", category=SkillCategory.PHYSICAL, power=80)


def test_reference_physical_hit():
    attacker = make(10, attack=60)
    defender = make(8, defense=40)
    # base 48, level modifier 1.10
    assert compute_damage(attacker, defender, SLAM, True, FixedRng()) == 52


def test_reference_super_effective_hit():
    attacker = make(10, attack=60, t1=MonsterType.FIRE)
    defender = make(8, defense=40, t1=MonsterType.GRASS)
    assert compute_damage(attacker, defender, SLAM, True, FixedRng()) == 79


def test_critical_hit_multiplies_and_is_reported():
    attacker = make(10, attack=100)
    defender = make(10)
    roll = roll_damage(attacker, defender, SLAM, True, FixedRng(draw=0.01))
    assert roll.critical
    assert roll.amount == 120  # 80 * 1.5


def test_magical_uses_magic_stat():
    attacker = make(10, attack=5, magic=100)
    defender = make(10)
    spell = Skill(id="bolt", name="Bolt", category=SkillCategory.MAGICAL, power=50)
    assert compute_damage(attacker, defender, spell, False, FixedRng()) == 50
    assert compute_damage(attacker, defender, spell, True, FixedRng()) == 2


def test_secondary_type_is_ignored():
    attacker = make(10, attack=100, t1=MonsterType.FIRE)
    defender = make(10, t1=MonsterType.NORMAL, t2=MonsterType.GRASS)
    roll = roll_damage(attacker, defender, SLAM, True, FixedRng())
    assert roll.type_modifier == 1.0
    assert roll.amount == 80


def test_damage_never_below_one():
    weak = make(1, attack=1)
    tank = make(50, defense=999)
    jab = Skill(id="jab", name="Jab", category=SkillCategory.PHYSICAL, power=10)
    rng = random.Random(99)
    for _ in range(200):
        assert compute_damage(weak, tank, jab, True, rng) >= 1


def test_variance_stays_in_band():
    attacker = make(10, attack=100)
    defender = make(10)
    rng = random.Random(5)
    seen = set()
    for _ in range(300):
        roll = roll_damage(attacker, defender, SLAM, True, rng)
        if not roll.critical:
            assert 67 <= roll.amount <= 92
            seen.add(roll.amount)
    assert len(seen) > 5


def test_critical_hit_rate():
    rng = random.Random(12345)
    crits = sum(1 for _ in range(4000) if is_critical(rng))
    assert 0.03 <= crits / 4000 <= 0.07


@pytest.mark.parametrize("mine,theirs,expected", [
    (200, 0, 0.9),
    (0, 200, 0.1),
    (50, 50, 0.5),
    (70, 50, 0.7),
])
def test_escape_chance_is_clamped(mine, theirs, expected):
    assert escape_chance(mine, theirs) == pytest.approx(expected)


def test_heal_and_guard_helpers():
    caster = make(10, magic=30)
    heal = Skill(id="heal", name="Heal", category=SkillCategory.HEALING, power=40)
    assert heal_amount(caster, heal) == 12
    assert guarded(25) == 12
    assert guarded(1) == 1
