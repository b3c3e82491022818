from dataclasses import dataclass
from enum import IntEnum


class VariableOperation(IntEnum):
    SET = 0
    ADD = 1
    SUB = 2
    MUL = 3
    DIV = 4

    @property
    def symbol(self) -> str:
        return ('=', '+=', '-=', '*=', '/=')[self]


class OperandKind(IntEnum):
    CONSTANT = 0
    VARIABLE = 1
    RANDOM = 2
    GAME_DATA = 3
    SCRIPT = 4


class GameDataKind(IntEnum):
    ITEM = 0
    WEAPON = 1
    ARMOR = 2
    ACTOR = 3
    ENEMY = 4
    CHARACTER = 5
    PARTY = 6
    OTHER = 7


class ActorDataCheck(IntEnum):
    LEVEL = 0
    EXP = 1
    HP = 2
    MP = 3
    # actor parameters, in order
    PARAM_0 = 4
    PARAM_1 = 5
    PARAM_2 = 6
    PARAM_3 = 7
    PARAM_4 = 8
    PARAM_5 = 9
    PARAM_6 = 10
    PARAM_7 = 11


class CharacterDataCheck(IntEnum):
    MAP_X = 0
    MAP_Y = 1
    DIRECTION = 2
    SCREEN_X = 3
    SCREEN_Y = 4


class OtherDataCheck(IntEnum):
    MAP_ID = 0
    PARTY_MEMBERS = 1
    GOLD = 2
    STEPS = 3
    PLAY_TIME = 4
    TIMER = 5
    SAVE_COUNT = 6
    BATTLE_COUNT = 7
    WIN_COUNT = 8
    ESCAPE_COUNT = 9


class Operand(object):
    """Right hand side of a control variables command."""


@dataclass(frozen=True)
class Constant(Operand):
    value: int


@dataclass(frozen=True)
class Variable(Operand):
    id: int


@dataclass(frozen=True)
class Random(Operand):
    start: int
    stop: int


@dataclass(frozen=True)
class NumItems(Operand):
    item_id: int


@dataclass(frozen=True)
class ActorLevel(Operand):
    actor_id: int


@dataclass(frozen=True)
class ActorHp(Operand):
    actor_id: int


@dataclass(frozen=True)
class ActorMp(Operand):
    actor_id: int


@dataclass(frozen=True)
class ActorParam(Operand):
    actor_id: int
    param_index: int


@dataclass(frozen=True)
class CharacterMapX(Operand):
    character_id: int


@dataclass(frozen=True)
class CharacterMapY(Operand):
    character_id: int


@dataclass(frozen=True)
class MapId(Operand):
    pass


@dataclass(frozen=True)
class Gold(Operand):
    pass


@dataclass(frozen=True)
class Steps(Operand):
    pass
