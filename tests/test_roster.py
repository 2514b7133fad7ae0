from pixelmonsters.data.roster import SPECIES, known_skills, make_monster, stats_for_level
from pixelmonsters.data.skills import default_catalog


def test_level_one_uses_base_stats():
    base = SPECIES["fire_sprite"]["base_stats"]
    assert stats_for_level(base, 1).attack == base["attack"]
    assert stats_for_level(base, 11).attack > base["attack"]


def test_skills_unlock_by_level():
    assert known_skills("fire_sprite", 1) == ["tackle"]
    assert known_skills("fire_sprite", 5) == ["tackle", "fireball"]


def test_every_learnable_skill_exists():
    catalog = default_catalog()
    for species in SPECIES:
        for skill_id in known_skills(species, 100):
            assert skill_id in catalog


def test_make_monster():
    m = make_monster("sky_bird", 150, nickname="Zephyr")
    assert m.level == 100
    assert m.name == "Zephyr"
    assert m.current_hp == m.stats.max_hp
    assert m.capture_rate == SPECIES["sky_bird"]["capture_rate"]
    other = make_monster("sky_bird", 5)
    assert other.id != m.id
