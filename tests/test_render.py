from rich.console import Console

from pixelmonsters.battle.models import BattleState
from pixelmonsters.battle.render import bar_color, battle_view, draw_bar, format_events
from pixelmonsters.data.roster import make_monster


def test_draw_bar_proportions():
    assert draw_bar(50, 100, width=10).plain == "█" * 5 + "░" * 5
    assert draw_bar(0, 100, width=4).plain == "░" * 4
    assert draw_bar(7, 0, width=3).plain == "███"


def test_bar_colors():
    assert bar_color(0.9) == "green"
    assert bar_color(0.3) == "yellow"
    assert bar_color(0.1) == "red"


def test_battle_view_renders_both_sides():
    state = BattleState(player_party=(make_monster("fire_sprite", 5),),
                        enemy_party=(make_monster("forest_beast", 4),))
    console = Console(record=True, width=100)
    console.print(battle_view(state))
    text = console.export_text()
    assert "Flame Sprite" in text and "Moss Wolf" in text
    assert "Turn 1" in text


def test_format_events_one_line_each():
    out = format_events(["A used Attack!", "B fainted!"])
    assert out.plain.count("\n") == 2
