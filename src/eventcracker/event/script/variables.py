from eventcracker.kernel.errors import RangeError, UnsupportedVariant, field_context
from eventcracker.kernel.params import ParamReader, as_enum, as_i32, as_u32

from . import operands as op
from .commands import ControlVariables
from .operands import (
    ActorDataCheck,
    CharacterDataCheck,
    GameDataKind,
    Operand,
    OperandKind,
    OtherDataCheck,
    VariableOperation,
)


def read_actor_data(reader: ParamReader, extended: bool) -> Operand:
    actor_id = reader.read_at(5, 'actor_id', as_u32)
    check = reader.read_at(6, 'check', as_enum(ActorDataCheck))
    if not extended and check > ActorDataCheck.EXP:
        # only level and exp are known to the older engine
        with field_context('check', 6):
            raise RangeError(int(check), 'ActorDataCheck')
    if check == ActorDataCheck.LEVEL:
        return op.ActorLevel(actor_id)
    if check == ActorDataCheck.HP:
        return op.ActorHp(actor_id)
    if check == ActorDataCheck.MP:
        return op.ActorMp(actor_id)
    if check >= ActorDataCheck.PARAM_0:
        return op.ActorParam(actor_id, check - ActorDataCheck.PARAM_0)
    raise UnsupportedVariant('ActorDataCheck', check)


def read_character_data(reader: ParamReader, extended: bool) -> Operand:
    character_id = reader.read_at(5, 'character_id', as_i32)
    check = reader.read_at(6, 'check', as_enum(CharacterDataCheck))
    if extended and check == CharacterDataCheck.MAP_X:
        return op.CharacterMapX(character_id)
    if extended and check == CharacterDataCheck.MAP_Y:
        return op.CharacterMapY(character_id)
    raise UnsupportedVariant('CharacterDataCheck', check)


def read_other_data(reader: ParamReader, extended: bool) -> Operand:
    check = reader.read_at(5, 'check', as_enum(OtherDataCheck))
    if check == OtherDataCheck.MAP_ID:
        return op.MapId()
    if check == OtherDataCheck.GOLD:
        return op.Gold()
    if extended and check == OtherDataCheck.STEPS:
        return op.Steps()
    raise UnsupportedVariant('OtherDataCheck', check)


def read_game_data(reader: ParamReader, extended: bool) -> Operand:
    reader.ensure_len_is(7)
    kind = reader.read_at(4, 'kind', as_enum(GameDataKind))
    reader.read_at(5, 'param1', as_i32)
    reader.read_at(6, 'param2', as_i32)

    if kind == GameDataKind.ITEM:
        return op.NumItems(reader.read_at(5, 'item_id', as_u32))
    if kind == GameDataKind.ACTOR:
        return read_actor_data(reader, extended)
    if kind == GameDataKind.CHARACTER:
        return read_character_data(reader, extended)
    if kind == GameDataKind.OTHER:
        return read_other_data(reader, extended)
    raise UnsupportedVariant('GameDataKind', kind)


def read_operand(reader: ParamReader, kind: OperandKind, extended: bool) -> Operand:
    if kind == OperandKind.CONSTANT:
        reader.ensure_len_is(5)
        return op.Constant(reader.read_at(4, 'value', as_i32))
    if kind == OperandKind.VARIABLE:
        reader.ensure_len_is(5)
        return op.Variable(reader.read_at(4, 'id', as_u32))
    if kind == OperandKind.RANDOM:
        reader.ensure_len_is(6)
        return op.Random(
            start=reader.read_at(4, 'start', as_i32),
            stop=reader.read_at(5, 'stop', as_i32),
        )
    if kind == OperandKind.GAME_DATA:
        return read_game_data(reader, extended)
    raise UnsupportedVariant('OperandKind', kind)


def decode_control_variables(reader: ParamReader, extended: bool = False) -> ControlVariables:
    """Decode control variables command.

    extended enables the actor, character and step count operands of the newer engine.
    """
    reader.ensure_len_is_at_least(4)
    start_id = reader.read_at(0, 'start_id', as_u32)
    end_id = reader.read_at(1, 'end_id', as_u32)
    operation = reader.read_at(2, 'operation', as_enum(VariableOperation))
    kind = reader.read_at(3, 'operand_kind', as_enum(OperandKind))
    return ControlVariables(
        start_id=start_id,
        end_id=end_id,
        operation=operation,
        value=read_operand(reader, kind, extended),
    )
