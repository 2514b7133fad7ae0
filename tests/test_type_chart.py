import pytest
from pixelmonsters.battle.typechart import TYPE_EFFECTIVENESS, effectiveness, all_pairs
from pixelmonsters.core.types import MonsterType as T


def test_every_pair_has_a_known_multiplier():
    pairs = list(all_pairs())
    assert len(pairs) == len(T) * len(T)
    for _, _, mult in pairs:
        assert mult in {0.5, 1.0, 1.5}


@pytest.mark.parametrize("pair,mult", sorted(TYPE_EFFECTIVENESS.items(), key=lambda kv: (kv[0][0].value, kv[0][1].value)))
def test_defined_pairs(pair, mult):
    assert effectiveness(*pair) == mult


def test_undefined_pairs_are_neutral():
    for a, d, mult in all_pairs():
        if (a, d) not in TYPE_EFFECTIVENESS:
            assert mult == 1.0


def test_known_matchups():
    assert effectiveness(T.FIRE, T.GRASS) == 1.5
    assert effectiveness(T.GRASS, T.FIRE) == 0.5
    assert effectiveness(T.ELECTRIC, T.GROUND) == 0.5
    assert effectiveness(T.FIGHTING, T.NORMAL) == 1.5
    # Not symmetric
    assert effectiveness(T.NORMAL, T.FIGHTING) == 1.0
    assert effectiveness(T.DRAGON, T.DRAGON) == 1.0
