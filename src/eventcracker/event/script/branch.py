from eventcracker.kernel.errors import UnsupportedVariant
from eventcracker.kernel.params import ParamReader, as_enum, as_i32, as_str, as_u8, as_u32, int_bool
from eventcracker.kernel.types import maybe_ref

from . import conditions as cond
from .commands import ConditionalBranch
from .conditions import (
    ActorCheck,
    Condition,
    ConditionalBranchKind,
    EnemyCheck,
    GoldCheck,
    VariableCompare,
)

EXTENDED_KINDS = frozenset({
    ConditionalBranchKind.SELF_SWITCH,
    ConditionalBranchKind.TIMER,
    ConditionalBranchKind.BUTTON,
})


def read_actor_condition(reader: ParamReader, extended: bool) -> Condition:
    reader.ensure_len_is_at_least(3)
    actor_id = reader.read_at(1, 'actor_id', as_u32)
    check = reader.read_at(2, 'check', as_enum(ActorCheck))
    if check == ActorCheck.IN_PARTY:
        reader.ensure_len_is(3)
        return cond.ActorInParty(actor_id)
    if check == ActorCheck.SKILL and extended:
        reader.ensure_len_is(4)
        return cond.ActorSkill(actor_id, reader.read_at(3, 'skill_id', as_u32))
    if check == ActorCheck.ARMOR:
        reader.ensure_len_is(4)
        return cond.ActorArmor(actor_id, reader.read_at(3, 'armor_id', as_u32))
    if check == ActorCheck.STATE:
        reader.ensure_len_is(4)
        return cond.ActorState(actor_id, reader.read_at(3, 'state_id', as_u32))
    raise UnsupportedVariant('ActorCheck', check)


def read_enemy_condition(reader: ParamReader) -> Condition:
    reader.ensure_len_is_at_least(3)
    enemy_index = reader.read_at(1, 'enemy_index', as_u32)
    check = reader.read_at(2, 'check', as_enum(EnemyCheck))
    if check == EnemyCheck.STATE:
        reader.ensure_len_is(4)
        return cond.EnemyState(enemy_index, reader.read_at(3, 'state_id', as_u32))
    raise UnsupportedVariant('EnemyCheck', check)


def read_condition(reader: ParamReader, kind: ConditionalBranchKind, extended: bool) -> Condition:
    if kind in EXTENDED_KINDS and not extended:
        raise UnsupportedVariant('ConditionalBranchKind', kind)
    if kind == ConditionalBranchKind.SWITCH:
        reader.ensure_len_is(3)
        return cond.Switch(
            id=reader.read_at(1, 'id', as_u32),
            check_true=reader.read_at(2, 'check_true', int_bool),
        )
    if kind == ConditionalBranchKind.VARIABLE:
        reader.ensure_len_is(5)
        lhs_id = reader.read_at(1, 'lhs_id', as_u32)
        is_constant = reader.read_at(2, 'is_constant', int_bool)
        rhs_id = reader.read_at(3, 'rhs_id', as_u32)
        return cond.Variable(
            lhs_id=lhs_id,
            rhs_id=maybe_ref(is_constant, rhs_id),
            operation=reader.read_at(4, 'operation', as_enum(VariableCompare)),
        )
    if kind == ConditionalBranchKind.SELF_SWITCH:
        reader.ensure_len_is(3)
        return cond.SelfSwitch(
            name=reader.read_at(1, 'name', as_str),
            check_true=reader.read_at(2, 'check_true', int_bool),
        )
    if kind == ConditionalBranchKind.TIMER:
        reader.ensure_len_is(3)
        return cond.Timer(
            value=reader.read_at(1, 'value', as_u32),
            is_gte=reader.read_at(2, 'is_gte', int_bool),
        )
    if kind == ConditionalBranchKind.ACTOR:
        return read_actor_condition(reader, extended)
    if kind == ConditionalBranchKind.ENEMY:
        return read_enemy_condition(reader)
    if kind == ConditionalBranchKind.CHARACTER:
        reader.ensure_len_is(3)
        return cond.Character(
            character_id=reader.read_at(1, 'character_id', as_i32),
            direction=reader.read_at(2, 'direction', as_u8),
        )
    if kind == ConditionalBranchKind.GOLD:
        reader.ensure_len_is(3)
        return cond.Gold(
            value=reader.read_at(1, 'value', as_u32),
            check=reader.read_at(2, 'check', as_enum(GoldCheck)),
        )
    if kind == ConditionalBranchKind.ITEM:
        reader.ensure_len_is(2)
        return cond.Item(reader.read_at(1, 'item_id', as_u32))
    if kind == ConditionalBranchKind.BUTTON:
        reader.ensure_len_is(2)
        return cond.Button(reader.read_at(1, 'key_name', as_str))
    if kind == ConditionalBranchKind.SCRIPT:
        reader.ensure_len_is(2)
        return cond.Script(reader.read_at(1, 'value', as_str))
    raise UnsupportedVariant('ConditionalBranchKind', kind)


def decode_conditional_branch(reader: ParamReader, extended: bool = False) -> ConditionalBranch:
    """Decode conditional branch command.

    extended enables the self switch, timer, actor skill and button conditions.
    """
    reader.ensure_len_is_at_least(1)
    kind = reader.read_at(0, 'kind', as_enum(ConditionalBranchKind))
    return ConditionalBranch(read_condition(reader, kind, extended))
