from __future__ import annotations
import argparse
import random
from typing import Optional, Sequence

from rich.console import Console
from rich.prompt import Prompt

from pixelmonsters.battle.ai import EnemyPolicy, affordable_skills
from pixelmonsters.battle.engine import BattleEngine
from pixelmonsters.battle.models import (
    Action, Attack, BattleState, BattleType, Capture, Defend, Flee, Phase, Side, UseSkill,
)
from pixelmonsters.battle.pacing import NullScheduler, SleepScheduler
from pixelmonsters.battle.render import battle_view, format_events
from pixelmonsters.core.logging import logger
from pixelmonsters.data.roster import make_monster
from pixelmonsters.system.settings import Settings

console = Console()

ENDINGS = {
    Phase.VICTORY: "[bold green]Victory![/]",
    Phase.DEFEAT: "[bold red]Defeat...[/]",
    Phase.CAPTURED: "[bold cyan]Captured![/]",
    Phase.ESCAPED: "[bold yellow]Got away safely.[/]",
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pixelmonsters", description="Play a demo monster battle in the terminal.")
    p.add_argument("--seed", type=int, default=None, help="fix the RNG seed for a reproducible battle")
    p.add_argument("--auto", action="store_true", help="let the heuristic pick your actions too")
    p.add_argument("--fast", action="store_true", help="skip pacing pauses between actions")
    p.add_argument("--trainer", action="store_true", help="fight a trainer team instead of a wild monster")
    p.add_argument("--level", type=int, default=8, help="level of the monsters involved")
    return p


def demo_parties(level: int, trainer: bool):
    player = [make_monster("fire_sprite", level), make_monster("starter_slime", level)]
    if trainer:
        enemy = [make_monster("forest_beast", level), make_monster("sky_bird", level)]
    else:
        enemy = [make_monster("forest_beast", max(1, level - 1))]
    return player, enemy


def prompt_action(engine: BattleEngine, state: BattleState) -> Action:
    slot = state.active_slot(Side.PLAYER)
    me = state.monster_at(slot)
    choices = ["attack", "skill", "defend"]
    if state.can_flee:
        choices.append("flee")
    if state.is_wild_encounter and state.can_capture:
        choices.append("capture")
    while True:
        choice = Prompt.ask("What will you do?", choices=choices, default="attack", console=console)
        if choice == "attack":
            return Attack(slot)
        if choice == "defend":
            return Defend(slot)
        if choice == "flee":
            return Flee(slot)
        if choice == "capture":
            return Capture(slot)
        usable = affordable_skills(me, engine.catalog)
        if not usable:
            console.print("[yellow]No skills available with the current MP.[/]")
            continue
        for s in usable:
            console.print(f"  [bold]{s.id}[/] {s.name} ({s.mp_cost} MP) {s.description}")
        picked = Prompt.ask("Skill", choices=[s.id for s in usable] + ["back"], default="back", console=console)
        if picked == "back":
            continue
        skill = engine.catalog.lookup(picked)
        return UseSkill(slot, skill.id, priority=skill.priority)


def run(argv: Optional[Sequence[str]] = None) -> Phase:
    args = build_parser().parse_args(argv)
    settings = Settings.load()
    settings.apply_log_level()
    seed = args.seed if args.seed is not None else settings.data.seed
    rng = random.Random(seed)
    scheduler = NullScheduler() if args.fast else SleepScheduler()
    engine = BattleEngine(rng=rng, scheduler=scheduler, pacing=settings.pacing_seconds)
    autopilot = EnemyPolicy(engine.catalog, rng, side=Side.PLAYER) if args.auto else None

    player, enemy = demo_parties(args.level, args.trainer)
    kind = BattleType.TRAINER_BATTLE if args.trainer else BattleType.WILD_ENCOUNTER
    state = engine.start_battle(player, enemy, kind)
    logger.debug("DemoStarted", seed=seed, auto=args.auto, trainer=args.trainer)
    console.print(f"[bold]{state.last_event}[/]")

    while not state.is_over:
        console.print(battle_view(state))
        action = autopilot.decide(state) if autopilot else prompt_action(engine, state)
        state, events = engine.play_turn(state, action)
        console.print(format_events(events))
    console.print(battle_view(state))
    console.print(ENDINGS[state.phase])
    settings.save()
    return state.phase


if __name__ == "__main__":
    run()
