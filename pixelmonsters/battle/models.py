"""Immutable battle data model.

Every value here is a frozen dataclass; battle steps produce new values with
``dataclasses.replace`` instead of mutating the caller's copy.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from pixelmonsters.core.types import MonsterType

# ---------------------------------------------------------------------------
# Combatants
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Stats:
    attack: int
    defense: int
    agility: int
    magic: int
    wisdom: int
    max_hp: int
    max_mp: int

@dataclass(frozen=True)
class Monster:
    id: str
    name: str
    level: int
    type1: MonsterType
    stats: Stats
    current_hp: Optional[int] = None  # None -> full HP
    current_mp: Optional[int] = None  # None -> full MP
    type2: Optional[MonsterType] = None
    skills: Tuple[str, ...] = ()
    capture_rate: int = 100
    # Defend stance; halves incoming damage until the turn ends
    guarding: bool = False

    def __post_init__(self):
        hp = self.stats.max_hp if self.current_hp is None else self.current_hp
        mp = self.stats.max_mp if self.current_mp is None else self.current_mp
        object.__setattr__(self, "current_hp", max(0, min(int(hp), self.stats.max_hp)))
        object.__setattr__(self, "current_mp", max(0, min(int(mp), self.stats.max_mp)))
        object.__setattr__(self, "skills", tuple(self.skills))

    def is_fainted(self) -> bool:
        return self.current_hp <= 0

    def hp_ratio(self) -> float:
        if self.stats.max_hp <= 0:
            return 0.0
        return self.current_hp / self.stats.max_hp

    def with_hp(self, hp: int) -> "Monster":
        return replace(self, current_hp=max(0, min(int(hp), self.stats.max_hp)))

    def with_mp(self, mp: int) -> "Monster":
        return replace(self, current_mp=max(0, min(int(mp), self.stats.max_mp)))

# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------
class SkillCategory(str, Enum):
    PHYSICAL = "physical"
    MAGICAL = "magical"
    HEALING = "healing"
    SUPPORT = "support"

class SkillTarget(str, Enum):
    SELF = "self"
    SINGLE_ENEMY = "single_enemy"
    ALL_ENEMIES = "all_enemies"
    SINGLE_ALLY = "single_ally"
    ALL_ALLIES = "all_allies"
    ALL = "all"

@dataclass(frozen=True)
class Skill:
    id: str
    name: str
    category: SkillCategory
    target: SkillTarget = SkillTarget.SINGLE_ENEMY
    mp_cost: int = 0
    power: int = 0
    accuracy: Optional[int] = 100  # catalog data only; hits always land
    priority: int = 0
    description: str = ""

    @property
    def is_damaging(self) -> bool:
        return self.category in (SkillCategory.PHYSICAL, SkillCategory.MAGICAL) and self.power > 0

    @property
    def is_physical(self) -> bool:
        return self.category == SkillCategory.PHYSICAL

# Used by the plain Attack action
BASIC_ATTACK = Skill(
    id="basic_attack",
    name="Attack",
    category=SkillCategory.PHYSICAL,
    target=SkillTarget.SINGLE_ENEMY,
    mp_cost=0,
    power=50,
    accuracy=95,
    description="Basic physical attack",
)

# ---------------------------------------------------------------------------
# Slots & actions
# ---------------------------------------------------------------------------
class Side(str, Enum):
    PLAYER = "player"
    ENEMY = "enemy"

    @property
    def opponent(self) -> "Side":
        return Side.ENEMY if self is Side.PLAYER else Side.PLAYER

@dataclass(frozen=True)
class Slot:
    side: Side
    index: int

@dataclass(frozen=True)
class Attack:
    actor: Slot
    target: Optional[int] = None
    priority: int = 0

@dataclass(frozen=True)
class UseSkill:
    actor: Slot
    skill_id: str
    target: Optional[int] = None
    priority: int = 0

@dataclass(frozen=True)
class Defend:
    actor: Slot
    priority: int = 0

@dataclass(frozen=True)
class Flee:
    actor: Slot
    priority: int = 0

@dataclass(frozen=True)
class Capture:
    actor: Slot
    item_id: str = "basic_capture"
    priority: int = 0

Action = Union[Attack, UseSkill, Defend, Flee, Capture]

# ---------------------------------------------------------------------------
# Battle state
# ---------------------------------------------------------------------------
class Phase(str, Enum):
    SELECTING = "selecting"
    RESOLVING = "resolving"
    VICTORY = "victory"
    DEFEAT = "defeat"
    CAPTURED = "captured"
    ESCAPED = "escaped"

    @property
    def is_terminal(self) -> bool:
        return self in (Phase.VICTORY, Phase.DEFEAT, Phase.CAPTURED, Phase.ESCAPED)

class BattleType(str, Enum):
    WILD_ENCOUNTER = "wild"
    TRAINER_BATTLE = "trainer"
    BOSS_BATTLE = "boss"

@dataclass(frozen=True)
class BattleState:
    player_party: Tuple[Monster, ...]
    enemy_party: Tuple[Monster, ...]
    active_player: int = 0
    active_enemy: int = 0
    phase: Phase = Phase.SELECTING
    turn: int = 1
    last_event: str = ""
    is_wild_encounter: bool = False
    can_flee: bool = True
    can_capture: bool = False

    def __post_init__(self):
        object.__setattr__(self, "player_party", tuple(self.player_party))
        object.__setattr__(self, "enemy_party", tuple(self.enemy_party))

    def party(self, side: Side) -> Tuple[Monster, ...]:
        return self.player_party if side is Side.PLAYER else self.enemy_party

    def active_index(self, side: Side) -> int:
        return self.active_player if side is Side.PLAYER else self.active_enemy

    def active_slot(self, side: Side) -> Slot:
        return Slot(side, self.active_index(side))

    def active(self, side: Side) -> Monster:
        return self.party(side)[self.active_index(side)]

    def has_slot(self, slot: Slot) -> bool:
        return 0 <= slot.index < len(self.party(slot.side))

    def monster_at(self, slot: Slot) -> Optional[Monster]:
        if not self.has_slot(slot):
            return None
        return self.party(slot.side)[slot.index]

    def replace_monster(self, slot: Slot, monster: Monster) -> "BattleState":
        members = list(self.party(slot.side))
        members[slot.index] = monster
        if slot.side is Side.PLAYER:
            return replace(self, player_party=tuple(members))
        return replace(self, enemy_party=tuple(members))

    def side_defeated(self, side: Side) -> bool:
        return all(m.is_fainted() for m in self.party(side))

    @property
    def is_over(self) -> bool:
        return self.phase.is_terminal

__all__ = [
    "MonsterType","Stats","Monster","SkillCategory","SkillTarget","Skill","BASIC_ATTACK",
    "Side","Slot","Attack","UseSkill","Defend","Flee","Capture","Action",
    "Phase","BattleType","BattleState",
]
