from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, Mapping, Type

from eventcracker.kernel.params import ParamReader, as_audio_file, as_i16, as_str, as_u8, as_u32, int_bool

from . import commands as cmd
from .branch import decode_conditional_branch
from .codes import COMMAND_NAMES_mv, COMMAND_NAMES_mz, CodeNames, CommandCode, make_table, resolve
from .commands import PendingCommand
from .decode import (
    Decoder,
    decode_battle_processing,
    decode_change_actor_images,
    decode_change_armors,
    decode_change_class,
    decode_change_gold,
    decode_change_hp,
    decode_change_items,
    decode_change_level,
    decode_change_mp,
    decode_change_party_member,
    decode_change_skill,
    decode_change_state,
    decode_character_effect,
    decode_control_self_switch,
    decode_control_switches,
    decode_control_timer,
    decode_force_action,
    decode_get_location_info,
    decode_lines,
    decode_marker,
    decode_name_input_processing,
    decode_plugin_command,
    decode_plugin_command_line,
    decode_screen_color,
    decode_set_event_location,
    decode_set_movement_route,
    decode_shake_screen,
    decode_show_choices,
    decode_show_picture,
    decode_show_scrolling_text,
    decode_show_text,
    decode_single,
    decode_transfer_player,
    decode_when,
    decode_when_cancel,
    extend_lines,
    extend_move_route,
    extend_plugin_command,
)
from .variables import decode_control_variables

OpTable = Mapping[int, Decoder]
Extender = Callable[[PendingCommand, ParamReader], bool]
ExtendTable = Mapping[int, Extender]


def marker(command_type: Type[cmd.Command]) -> Decoder:
    return partial(decode_marker, command_type)


OPCODES: OpTable = make_table([
    (0, marker(cmd.Nop)),
    (102, decode_show_choices),
    (103, None),  # INPUT_NUMBER
    (105, decode_show_scrolling_text),
    (108, partial(decode_lines, cmd.Comment)),
    (112, marker(cmd.Loop)),
    (113, None),  # BREAK_LOOP
    (115, marker(cmd.ExitEventProcessing)),
    (117, partial(decode_single, cmd.CommonEvent, 'id', as_u32)),
    (118, partial(decode_single, cmd.Label, 'name', as_str)),
    (119, partial(decode_single, cmd.JumpToLabel, 'name', as_str)),
    (121, decode_control_switches),
    (123, decode_control_self_switch),
    (124, decode_control_timer),
    (125, decode_change_gold),
    (126, decode_change_items),
    (127, None),  # CHANGE_WEAPONS
    (128, decode_change_armors),
    (129, decode_change_party_member),
    (134, partial(decode_single, cmd.ChangeSaveAccess, 'disable', int_bool)),
    (201, decode_transfer_player),
    (203, decode_set_event_location),
    (205, decode_set_movement_route),
    (211, partial(decode_single, cmd.ChangeTransparency, 'set_transparent', int_bool)),
    (212, partial(decode_character_effect, cmd.ShowAnimation, 'animation_id')),
    (213, partial(decode_character_effect, cmd.ShowBalloonIcon, 'balloon_id')),
    (216, partial(decode_single, cmd.ChangePlayerFollowers, 'is_show', int_bool)),
    (221, marker(cmd.FadeoutScreen)),
    (222, marker(cmd.FadeinScreen)),
    (223, partial(decode_screen_color, cmd.TintScreen, 'tone', as_i16)),
    (224, partial(decode_screen_color, cmd.FlashScreen, 'color', as_u8)),
    (225, decode_shake_screen),
    (230, partial(decode_single, cmd.Wait, 'duration', as_u32)),
    (231, decode_show_picture),
    (232, None),  # MOVE_PICTURE
    (235, partial(decode_single, cmd.ErasePicture, 'picture_id', as_u32)),
    (241, partial(decode_single, cmd.PlayBgm, 'audio', as_audio_file)),
    (242, partial(decode_single, cmd.FadeoutBgm, 'duration', as_u32)),
    (243, marker(cmd.SaveBgm)),
    (244, marker(cmd.ResumeBgm)),
    (245, partial(decode_single, cmd.PlayBgs, 'audio', as_audio_file)),
    (246, partial(decode_single, cmd.FadeoutBgs, 'duration', as_u32)),
    (250, partial(decode_single, cmd.PlaySe, 'audio', as_audio_file)),
    (285, decode_get_location_info),
    (301, decode_battle_processing),
    (303, decode_name_input_processing),
    (311, decode_change_hp),
    (312, decode_change_mp),
    (313, decode_change_state),
    (316, decode_change_level),
    (318, decode_change_skill),
    (319, None),  # CHANGE_EQUIPMENT
    (321, decode_change_class),
    (322, decode_change_actor_images),
    (339, decode_force_action),
    (340, marker(cmd.AbortBattle)),
    (353, marker(cmd.GameOver)),
    (354, marker(cmd.ReturnToTitleScreen)),
    (355, partial(decode_lines, cmd.Script)),
    (402, decode_when),
    (403, decode_when_cancel),
    (404, marker(cmd.WhenEnd)),
    (411, marker(cmd.Else)),
    (412, marker(cmd.ConditionalBranchEnd)),
    (413, marker(cmd.RepeatAbove)),
    (601, marker(cmd.IfWin)),
    (602, marker(cmd.IfEscape)),
    (603, marker(cmd.IfLose)),
    (604, marker(cmd.BattleResultEnd)),
])

OPCODES_mv: OpTable = make_table([
    *OPCODES.items(),
    (101, decode_show_text),
    (111, decode_conditional_branch),
    (122, decode_control_variables),
    (356, decode_plugin_command_line),
])

OPCODES_mz: OpTable = make_table([
    *OPCODES.items(),
    (101, partial(decode_show_text, speaker=True)),
    (111, partial(decode_conditional_branch, extended=True)),
    (122, partial(decode_control_variables, extended=True)),
    (357, decode_plugin_command),
])

EXTENDS: ExtendTable = make_table([
    (401, partial(extend_lines, cmd.ShowText)),
    (405, partial(extend_lines, cmd.ShowScrollingText)),
    (408, partial(extend_lines, cmd.Comment)),
    (505, extend_move_route),
    (655, partial(extend_lines, cmd.Script)),
])

EXTENDS_mv: ExtendTable = EXTENDS

EXTENDS_mz: ExtendTable = make_table([
    *EXTENDS.items(),
    (657, extend_plugin_command),
])


@dataclass(frozen=True)
class Dialect(object):
    """Command tables of a single engine version

    names: code -> symbolic name

    opcodes: code -> decode routine

    extends: continuation code -> merge routine into previous command
    """

    name: str
    names: CodeNames
    opcodes: OpTable
    extends: ExtendTable

    def resolve(self, raw: int) -> CommandCode:
        return resolve(raw, self.names)

    def validate(self) -> None:
        unnamed = set(self.opcodes) - set(self.names)
        if unnamed:
            raise ValueError(f'{self.name}: decode routines for unnamed codes {sorted(unnamed)}')
        unnamed = set(self.extends) - set(self.names)
        if unnamed:
            raise ValueError(f'{self.name}: continuations for unnamed codes {sorted(unnamed)}')
        overlap = set(self.opcodes) & set(self.extends)
        if overlap:
            raise ValueError(f'{self.name}: continuation codes with decode routines {sorted(overlap)}')


DIALECT_mv = Dialect('mv', COMMAND_NAMES_mv, OPCODES_mv, EXTENDS_mv)
DIALECT_mz = Dialect('mz', COMMAND_NAMES_mz, OPCODES_mz, EXTENDS_mz)

DIALECTS: Dict[str, Dialect] = {
    dialect.name: dialect for dialect in (DIALECT_mv, DIALECT_mz)
}

for _dialect in DIALECTS.values():
    _dialect.validate()


def get_dialect(name: str) -> Dialect:
    try:
        return DIALECTS[name]
    except KeyError:
        raise ValueError(f'unsupported dialect: {name}') from None
