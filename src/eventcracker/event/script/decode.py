from typing import Any, Callable, Dict, Type

from eventcracker.kernel.errors import RangeError, TypeMismatch, UnsupportedVariant
from eventcracker.kernel.params import (
    Converter,
    ParamReader,
    as_array,
    as_bool,
    as_enum,
    as_i32,
    as_i64,
    as_move_command,
    as_move_route,
    as_optional,
    as_str,
    as_str_list,
    as_u8,
    as_u32,
    int_bool,
)
from eventcracker.kernel.types import Constant, MoveCommand, Ref, maybe_ref

from . import commands as cmd
from .commands import Command, PendingCommand

Decoder = Callable[[ParamReader], Command]


def decode_marker(command_type: Type[Command], reader: ParamReader) -> Command:
    reader.ensure_len_is(0)
    return command_type()


def decode_single(
    command_type: Type[Command], name: str, convert: Converter[Any], reader: ParamReader
) -> Command:
    reader.ensure_len_is(1)
    return command_type(reader.read_at(0, name, convert))  # type: ignore


def decode_lines(command_type: Type[Command], reader: ParamReader) -> Command:
    reader.ensure_len_is(1)
    return command_type(lines=[reader.read_at(0, 'line', as_str)])  # type: ignore


def decode_show_text(reader: ParamReader, speaker: bool = False) -> Command:
    if speaker:
        reader.ensure_len_is_at_least(4)
        if len(reader) > 4:
            reader.ensure_len_is(5)
    else:
        reader.ensure_len_is(4)
    return cmd.ShowText(
        face_name=reader.read_at(0, 'face_name', as_str),
        face_index=reader.read_at(1, 'face_index', as_u32),
        background=reader.read_at(2, 'background', as_u32),
        position_type=reader.read_at(3, 'position_type', as_u32),
        speaker_name=reader.read_at(4, 'speaker_name', as_str) if len(reader) > 4 else None,
    )


def decode_show_choices(reader: ParamReader) -> Command:
    reader.ensure_len_is(5)
    return cmd.ShowChoices(
        choices=reader.read_at(0, 'choices', as_str_list),
        cancel_type=reader.read_at(1, 'cancel_type', as_i32),
        default_type=reader.read_at(2, 'default_type', as_i64),
        position_type=reader.read_at(3, 'position_type', as_u32),
        background=reader.read_at(4, 'background', as_u32),
    )


def decode_show_scrolling_text(reader: ParamReader) -> Command:
    reader.ensure_len_is(2)
    return cmd.ShowScrollingText(
        speed=reader.read_at(0, 'speed', as_u32),
        no_fast=reader.read_at(1, 'no_fast', as_bool),
    )


def decode_control_switches(reader: ParamReader) -> Command:
    reader.ensure_len_is(3)
    return cmd.ControlSwitches(
        start_id=reader.read_at(0, 'start_id', as_u32),
        end_id=reader.read_at(1, 'end_id', as_u32),
        value=reader.read_at(2, 'value', int_bool),
    )


def decode_control_self_switch(reader: ParamReader) -> Command:
    reader.ensure_len_is(2)
    return cmd.ControlSelfSwitch(
        key=reader.read_at(0, 'key', as_str),
        value=reader.read_at(1, 'value', int_bool),
    )


def decode_control_timer(reader: ParamReader) -> Command:
    reader.ensure_len_is(2)
    is_start = reader.read_at(0, 'is_start', int_bool)
    seconds = reader.read_at(1, 'seconds', as_u32)
    return cmd.ControlTimer(start_seconds=seconds if is_start else None)


def decode_change_gold(reader: ParamReader) -> Command:
    reader.ensure_len_is(3)
    is_add = reader.read_at(0, 'is_add', int_bool)
    is_constant = reader.read_at(1, 'is_constant', int_bool)
    value = reader.read_at(2, 'value', as_u32)
    return cmd.ChangeGold(is_add=is_add, value=maybe_ref(is_constant, value))


def decode_change_items(reader: ParamReader) -> Command:
    reader.ensure_len_is(4)
    item_id = reader.read_at(0, 'item_id', as_u32)
    is_add = reader.read_at(1, 'is_add', int_bool)
    is_constant = reader.read_at(2, 'is_constant', int_bool)
    value = reader.read_at(3, 'value', as_u32)
    return cmd.ChangeItems(item_id=item_id, is_add=is_add, value=maybe_ref(is_constant, value))


def decode_change_armors(reader: ParamReader) -> Command:
    reader.ensure_len_is(5)
    armor_id = reader.read_at(0, 'armor_id', as_u32)
    is_add = reader.read_at(1, 'is_add', int_bool)
    is_constant = reader.read_at(2, 'is_constant', int_bool)
    value = reader.read_at(3, 'value', as_u32)
    include_equipped = reader.read_at(4, 'include_equipped', as_bool)
    return cmd.ChangeArmors(
        armor_id=armor_id,
        is_add=is_add,
        value=maybe_ref(is_constant, value),
        include_equipped=include_equipped,
    )


def decode_change_party_member(reader: ParamReader) -> Command:
    reader.ensure_len_is(3)
    return cmd.ChangePartyMember(
        actor_id=reader.read_at(0, 'actor_id', as_u32),
        is_add=reader.read_at(1, 'is_add', int_bool),
        initialize=reader.read_at(2, 'initialize', as_bool),
    )


def decode_transfer_player(reader: ParamReader) -> Command:
    reader.ensure_len_is(6)
    is_constant = reader.read_at(0, 'is_constant', int_bool)
    return cmd.TransferPlayer(
        map_id=maybe_ref(is_constant, reader.read_at(1, 'map_id', as_u32)),
        x=maybe_ref(is_constant, reader.read_at(2, 'x', as_u32)),
        y=maybe_ref(is_constant, reader.read_at(3, 'y', as_u32)),
        direction=reader.read_at(4, 'direction', as_u8),
        fade_type=reader.read_at(5, 'fade_type', as_u8),
    )


def decode_set_event_location(reader: ParamReader) -> Command:
    reader.ensure_len_is(5)
    character_id = reader.read_at(0, 'character_id', as_i32)
    is_constant = reader.read_at(1, 'is_constant', int_bool)
    x = reader.read_at(2, 'x', as_u32)
    y = reader.read_at(3, 'y', as_u32)
    direction = reader.read_at(4, 'direction', as_u8)
    return cmd.SetEventLocation(
        character_id=character_id,
        x=maybe_ref(is_constant, x),
        y=maybe_ref(is_constant, y),
        direction=direction or None,
    )


def decode_set_movement_route(reader: ParamReader) -> Command:
    reader.ensure_len_is(2)
    return cmd.SetMovementRoute(
        character_id=reader.read_at(0, 'character_id', as_i32),
        route=reader.read_at(1, 'route', as_move_route),
    )


def decode_character_effect(command_type: Type[Command], name: str, reader: ParamReader) -> Command:
    reader.ensure_len_is(3)
    return command_type(  # type: ignore
        reader.read_at(0, 'character_id', as_i32),
        reader.read_at(1, name, as_u32),
        reader.read_at(2, 'wait', as_bool),
    )


def decode_screen_color(
    command_type: Type[Command], name: str, convert: Converter[int], reader: ParamReader
) -> Command:
    reader.ensure_len_is(3)
    return command_type(  # type: ignore
        reader.read_at(0, name, as_array(convert, 4)),
        reader.read_at(1, 'duration', as_u32),
        reader.read_at(2, 'wait', as_bool),
    )


def decode_shake_screen(reader: ParamReader) -> Command:
    reader.ensure_len_is(4)
    return cmd.ShakeScreen(
        power=reader.read_at(0, 'power', as_u32),
        speed=reader.read_at(1, 'speed', as_u32),
        duration=reader.read_at(2, 'duration', as_u32),
        wait=reader.read_at(3, 'wait', as_bool),
    )


def decode_show_picture(reader: ParamReader) -> Command:
    reader.ensure_len_is(10)
    is_constant = reader.read_at(3, 'is_constant', int_bool)
    # constant positions are signed, variable ids are not
    position = as_i32 if is_constant else as_u32
    return cmd.ShowPicture(
        picture_id=reader.read_at(0, 'picture_id', as_u32),
        picture_name=reader.read_at(1, 'picture_name', as_str),
        origin=reader.read_at(2, 'origin', as_u32),
        x=maybe_ref(is_constant, reader.read_at(4, 'x', position)),
        y=maybe_ref(is_constant, reader.read_at(5, 'y', position)),
        scale_x=reader.read_at(6, 'scale_x', as_u32),
        scale_y=reader.read_at(7, 'scale_y', as_u32),
        opacity=reader.read_at(8, 'opacity', as_u8),
        blend_mode=reader.read_at(9, 'blend_mode', as_u8),
    )


def decode_get_location_info(reader: ParamReader) -> Command:
    reader.ensure_len_is(5)
    variable_id = reader.read_at(0, 'variable_id', as_u32)
    kind = reader.read_at(1, 'kind', as_enum(cmd.LocationInfoKind))
    if kind not in {cmd.LocationInfoKind.TERRAIN_TAG, cmd.LocationInfoKind.EVENT_ID}:
        raise UnsupportedVariant('LocationInfoKind', kind)
    is_constant = reader.read_at(2, 'is_constant', int_bool)
    return cmd.GetLocationInfo(
        variable_id=variable_id,
        kind=kind,
        x=maybe_ref(is_constant, reader.read_at(3, 'x', as_u32)),
        y=maybe_ref(is_constant, reader.read_at(4, 'y', as_u32)),
    )


def decode_battle_processing(reader: ParamReader) -> Command:
    reader.ensure_len_is(4)
    kind = reader.read_at(0, 'kind', as_u8)
    troop_id = reader.read_at(1, 'troop_id', as_u32)
    if kind == 0:
        troop = Constant(troop_id)
    elif kind == 1:
        troop = Ref(troop_id)
    else:
        troop = None
    return cmd.BattleProcessing(
        troop_id=troop,
        can_escape=reader.read_at(2, 'can_escape', as_bool),
        can_lose=reader.read_at(3, 'can_lose', as_bool),
    )


def decode_name_input_processing(reader: ParamReader) -> Command:
    reader.ensure_len_is(2)
    return cmd.NameInputProcessing(
        actor_id=reader.read_at(0, 'actor_id', as_u32),
        max_len=reader.read_at(1, 'max_len', as_u32),
    )


def decode_change_hp(reader: ParamReader) -> Command:
    reader.ensure_len_is(6)
    return cmd.ChangeHp(
        actor_id=maybe_ref(
            reader.read_at(0, 'is_actor_constant', int_bool),
            reader.read_at(1, 'actor_id', as_u32),
        ),
        is_add=reader.read_at(2, 'is_add', int_bool),
        value=maybe_ref(
            reader.read_at(3, 'is_constant', int_bool),
            reader.read_at(4, 'value', as_u32),
        ),
        allow_death=reader.read_at(5, 'allow_death', as_bool),
    )


def decode_change_mp(reader: ParamReader) -> Command:
    reader.ensure_len_is(5)
    return cmd.ChangeMp(
        actor_id=maybe_ref(
            reader.read_at(0, 'is_actor_constant', int_bool),
            reader.read_at(1, 'actor_id', as_u32),
        ),
        is_add=reader.read_at(2, 'is_add', int_bool),
        value=maybe_ref(
            reader.read_at(3, 'is_constant', int_bool),
            reader.read_at(4, 'value', as_u32),
        ),
    )


def decode_change_state(reader: ParamReader) -> Command:
    reader.ensure_len_is(4)
    return cmd.ChangeState(
        actor_id=maybe_ref(
            reader.read_at(0, 'is_constant', int_bool),
            reader.read_at(1, 'actor_id', as_u32),
        ),
        is_add=reader.read_at(2, 'is_add', int_bool),
        state_id=reader.read_at(3, 'state_id', as_u32),
    )


def decode_change_level(reader: ParamReader) -> Command:
    reader.ensure_len_is(6)
    return cmd.ChangeLevel(
        actor_id=maybe_ref(
            reader.read_at(0, 'is_actor_constant', int_bool),
            reader.read_at(1, 'actor_id', as_u32),
        ),
        is_add=reader.read_at(2, 'is_add', int_bool),
        value=maybe_ref(
            reader.read_at(3, 'is_constant', int_bool),
            reader.read_at(4, 'value', as_u32),
        ),
        show_level_up=reader.read_at(5, 'show_level_up', as_bool),
    )


def decode_change_skill(reader: ParamReader) -> Command:
    reader.ensure_len_is(4)
    return cmd.ChangeSkill(
        actor_id=maybe_ref(
            reader.read_at(0, 'is_constant', int_bool),
            reader.read_at(1, 'actor_id', as_u32),
        ),
        is_learn=reader.read_at(2, 'is_learn', int_bool),
        skill_id=reader.read_at(3, 'skill_id', as_u32),
    )


def decode_change_class(reader: ParamReader) -> Command:
    reader.ensure_len_is(3)
    return cmd.ChangeClass(
        actor_id=reader.read_at(0, 'actor_id', as_u32),
        class_id=reader.read_at(1, 'class_id', as_u32),
        keep_exp=reader.read_at(2, 'keep_exp', as_bool),
    )


def decode_change_actor_images(reader: ParamReader) -> Command:
    reader.ensure_len_is(6)
    return cmd.ChangeActorImages(
        actor_id=reader.read_at(0, 'actor_id', as_u32),
        character_name=reader.read_at(1, 'character_name', as_str),
        character_index=reader.read_at(2, 'character_index', as_u32),
        face_name=reader.read_at(3, 'face_name', as_str),
        face_index=reader.read_at(4, 'face_index', as_u32),
        battler_name=reader.read_at(5, 'battler_name', as_str),
    )


def decode_force_action(reader: ParamReader) -> Command:
    reader.ensure_len_is(4)
    return cmd.ForceAction(
        is_enemy=reader.read_at(0, 'is_enemy', int_bool),
        id=reader.read_at(1, 'id', as_u32),
        skill_id=reader.read_at(2, 'skill_id', as_u32),
        target_index=reader.read_at(3, 'target_index', as_i32),
    )


def decode_plugin_command_line(reader: ParamReader) -> Command:
    reader.ensure_len_is(1)
    return cmd.PluginCommandLine(params=reader.read_at(0, 'command', as_str).split())


def as_args(value: Any) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeMismatch('object', value)
    return value


def decode_plugin_command(reader: ParamReader) -> Command:
    reader.ensure_len_is(4)
    return cmd.PluginCommand(
        plugin_name=reader.read_at(0, 'plugin_name', as_str),
        command_name=reader.read_at(1, 'command_name', as_str),
        comment=reader.read_at(2, 'comment', as_str),
        args=reader.read_at(3, 'args', as_args),
    )


def decode_when(reader: ParamReader) -> Command:
    reader.ensure_len_is(2)
    return cmd.When(
        choice_index=reader.read_at(0, 'choice_index', as_u32),
        choice_name=reader.read_at(1, 'choice_name', as_str),
    )


def decode_when_cancel(reader: ParamReader) -> Command:
    reader.ensure_len_is(2)
    return cmd.WhenCancel(
        choice_index=reader.read_at(0, 'choice_index', as_u32),
        choice_name=reader.read_at(1, 'choice_name', as_optional(as_str)),
    )


# continuation records


def extend_lines(owner_type: Type[Command], pending: PendingCommand, reader: ParamReader) -> bool:
    if type(pending.command) is not owner_type:
        return False
    reader.ensure_len_is(1)
    pending.command.lines.append(reader.read_at(0, 'line', as_str))  # type: ignore
    return True


def as_route_step(expected: MoveCommand) -> Converter[MoveCommand]:
    def converter(value: Any) -> MoveCommand:
        step = as_move_command(value)
        if step != expected:
            raise RangeError(value, f'copy of movement step {expected}')
        return step

    return converter


def extend_move_route(pending: PendingCommand, reader: ParamReader) -> bool:
    command = pending.command
    if type(command) is not cmd.SetMovementRoute:
        return False
    steps = command.route.commands  # type: ignore
    if pending.cursor >= len(steps):
        return False
    reader.ensure_len_is(1)
    reader.read_at(0, 'command', as_route_step(steps[pending.cursor]))
    pending.cursor += 1
    return True


def extend_plugin_command(pending: PendingCommand, reader: ParamReader) -> bool:
    # argument format is not known, absorbed as is
    return type(pending.command) is cmd.PluginCommand


