from __future__ import annotations
from typing import Iterable

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.box import ROUNDED

from pixelmonsters.core.types import format_types
from .models import BattleState, Monster, Side


def bar_color(ratio: float) -> str:
    if ratio > 0.5:
        return "green"
    if ratio > 0.2:
        return "yellow"
    return "red"


def draw_bar(current: int, maximum: int, width: int = 20, color: str | None = None) -> Text:
    if maximum <= 0:
        return Text("█" * width, style=color or "green")
    ratio = max(0.0, min(1.0, current / maximum))
    filled = int(ratio * width)
    bar = Text("█" * filled, style=color or bar_color(ratio))
    bar.append("░" * (width - filled), style="grey37")
    return bar


def monster_row(monster: Monster, active: bool) -> Table:
    grid = Table.grid(padding=(0, 1))
    grid.add_column(width=2)
    grid.add_column()
    marker = "▶" if active else " "
    title = Text.from_markup(f"[bold]{monster.name}[/] Lv{monster.level} {format_types(monster.type1, monster.type2)}")
    if monster.is_fainted():
        title.append("  (fainted)", style="dim")
    elif monster.guarding:
        title.append("  [guarding]", style="cyan")
    hp = draw_bar(monster.current_hp, monster.stats.max_hp)
    hp.append(f" {monster.current_hp}/{monster.stats.max_hp} HP")
    mp = draw_bar(monster.current_mp, monster.stats.max_mp, color="blue")
    mp.append(f" {monster.current_mp}/{monster.stats.max_mp} MP")
    grid.add_row(marker, title)
    grid.add_row("", hp)
    grid.add_row("", mp)
    return grid


def side_panel(state: BattleState, side: Side, title: str) -> Panel:
    active = state.active_index(side)
    rows = [monster_row(m, i == active) for i, m in enumerate(state.party(side))]
    return Panel(Group(*rows), title=title, box=ROUNDED, expand=True)


def battle_view(state: BattleState) -> Group:
    header = Text(f"Turn {state.turn} · {state.phase.value.title()}", style="bold magenta")
    return Group(
        header,
        side_panel(state, Side.ENEMY, "Enemy"),
        side_panel(state, Side.PLAYER, "Your party"),
    )


def format_events(events: Iterable[str]) -> Text:
    out = Text()
    for line in events:
        style = "bold red" if "fainted" in line else "white"
        out.append(f"» {line}\n", style=style)
    return out

__all__ = ["draw_bar","bar_color","monster_row","side_panel","battle_view","format_events"]
