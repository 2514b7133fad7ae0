"""Elemental monster types plus their display metadata.

Provides:
  MonsterType: the closed set of elemental categories
  TYPE_COLORS_HEX: mapping type -> hex color string (#RRGGBB)
  TYPE_ABBREVIATIONS: mapping type -> 3-letter abbreviation (upper)
  helpers producing rich markup tags for terminal output.
"""
from __future__ import annotations
from enum import Enum
from typing import Dict, Optional


class MonsterType(str, Enum):
    NORMAL = "normal"
    FIRE = "fire"
    WATER = "water"
    GRASS = "grass"
    ELECTRIC = "electric"
    ICE = "ice"
    FIGHTING = "fighting"
    POISON = "poison"
    GROUND = "ground"
    FLYING = "flying"
    PSYCHIC = "psychic"
    BUG = "bug"
    ROCK = "rock"
    GHOST = "ghost"
    DRAGON = "dragon"
    DARK = "dark"
    STEEL = "steel"

    @classmethod
    def parse(cls, raw: str) -> "MonsterType":
        return cls(raw.strip().lower())


TYPE_COLORS_HEX: Dict[MonsterType, str] = {
    MonsterType.NORMAL: "#A8A77A",
    MonsterType.FIRE: "#EE8130",
    MonsterType.WATER: "#6390F0",
    MonsterType.ELECTRIC: "#F7D02C",
    MonsterType.GRASS: "#7AC74C",
    MonsterType.ICE: "#96D9D6",
    MonsterType.FIGHTING: "#C22E28",
    MonsterType.POISON: "#A33EA1",
    MonsterType.GROUND: "#E2BF65",
    MonsterType.FLYING: "#A98FF3",
    MonsterType.PSYCHIC: "#F95587",
    MonsterType.BUG: "#A6B91A",
    MonsterType.ROCK: "#B6A136",
    MonsterType.GHOST: "#735797",
    MonsterType.DRAGON: "#6F35FC",
    MonsterType.DARK: "#705746",
    MonsterType.STEEL: "#B7B7CE",
}

TYPE_ABBREVIATIONS: Dict[MonsterType, str] = {
    MonsterType.NORMAL: "NRM",
    MonsterType.FIRE: "FIR",
    MonsterType.WATER: "WTR",
    MonsterType.GRASS: "GRS",
    MonsterType.ELECTRIC: "ELE",
    MonsterType.ICE: "ICE",
    MonsterType.FIGHTING: "FGT",
    MonsterType.POISON: "PSN",
    MonsterType.GROUND: "GRN",
    MonsterType.FLYING: "FLY",
    MonsterType.PSYCHIC: "PSY",
    MonsterType.BUG: "BUG",
    MonsterType.ROCK: "RCK",
    MonsterType.GHOST: "GHO",
    MonsterType.DRAGON: "DRA",
    MonsterType.DARK: "DRK",
    MonsterType.STEEL: "STL",
}

ABBREVIATION_TYPES: Dict[str, MonsterType] = {abbr: t for t, abbr in TYPE_ABBREVIATIONS.items()}


def type_abbreviation(t: MonsterType) -> str:
    return TYPE_ABBREVIATIONS.get(t, t.value[:3].upper())


def type_markup(t: MonsterType) -> str:
    """Rich markup for a colored type tag, e.g. ``[#EE8130]FIR[/]``."""
    return f"[{TYPE_COLORS_HEX[t]}]{type_abbreviation(t)}[/]"


def format_types(primary: MonsterType, secondary: Optional[MonsterType] = None) -> str:
    parts = [type_markup(primary)]
    if secondary is not None:
        parts.append(type_markup(secondary))
    return '/'.join(parts)

__all__ = [
    'MonsterType','TYPE_COLORS_HEX','TYPE_ABBREVIATIONS','ABBREVIATION_TYPES',
    'type_abbreviation','type_markup','format_types'
]
