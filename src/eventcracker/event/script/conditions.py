from dataclasses import dataclass
from enum import IntEnum

from eventcracker.kernel.types import MaybeRef


class ConditionalBranchKind(IntEnum):
    SWITCH = 0
    VARIABLE = 1
    SELF_SWITCH = 2
    TIMER = 3
    ACTOR = 4
    ENEMY = 5
    CHARACTER = 6
    GOLD = 7
    ITEM = 8
    WEAPON = 9
    ARMOR = 10
    BUTTON = 11
    SCRIPT = 12


class ActorCheck(IntEnum):
    IN_PARTY = 0
    NAME = 1
    CLASS = 2
    SKILL = 3
    WEAPON = 4
    ARMOR = 5
    STATE = 6


class EnemyCheck(IntEnum):
    APPEARED = 0
    STATE = 1


class GoldCheck(IntEnum):
    GTE = 0
    LTE = 1
    LT = 2

    @property
    def symbol(self) -> str:
        return ('>=', '<=', '<')[self]


class VariableCompare(IntEnum):
    EQ = 0
    GTE = 1
    LTE = 2
    GT = 3
    LT = 4
    NEQ = 5

    @property
    def symbol(self) -> str:
        return ('==', '>=', '<=', '>', '<', '!=')[self]


class Condition(object):
    """Condition tested by a conditional branch."""


@dataclass(frozen=True)
class Switch(Condition):
    id: int
    check_true: bool


@dataclass(frozen=True)
class Variable(Condition):
    lhs_id: int
    rhs_id: MaybeRef[int]
    operation: VariableCompare


@dataclass(frozen=True)
class SelfSwitch(Condition):
    name: str
    check_true: bool


@dataclass(frozen=True)
class Timer(Condition):
    value: int
    is_gte: bool


@dataclass(frozen=True)
class ActorInParty(Condition):
    actor_id: int


@dataclass(frozen=True)
class ActorSkill(Condition):
    actor_id: int
    skill_id: int


@dataclass(frozen=True)
class ActorArmor(Condition):
    actor_id: int
    armor_id: int


@dataclass(frozen=True)
class ActorState(Condition):
    actor_id: int
    state_id: int


@dataclass(frozen=True)
class EnemyState(Condition):
    enemy_index: int
    state_id: int


@dataclass(frozen=True)
class Character(Condition):
    # negative ids address the player
    character_id: int
    direction: int


@dataclass(frozen=True)
class Gold(Condition):
    value: int
    check: GoldCheck


@dataclass(frozen=True)
class Item(Condition):
    item_id: int


@dataclass(frozen=True)
class Button(Condition):
    key_name: str


@dataclass(frozen=True)
class Script(Condition):
    value: str
