from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional, Tuple, TypeVar

import deal

T = TypeVar('T')

CodeNames = Mapping[int, str]


@dataclass(frozen=True, repr=False)
class CommandCode(object):
    value: int
    name: Optional[str] = field(default=None, compare=False)

    def __repr__(self) -> str:
        return self.name or f'Unknown({self.value})'


def make_table(entries: Iterable[Tuple[int, Optional[T]]]) -> Dict[int, T]:
    """Build code table from pairs, entries set to None are skipped."""
    table: Dict[int, T] = {}
    seen = set()
    for code, value in entries:
        if code in seen:
            raise ValueError(f'duplicate command code {code}')
        seen.add(code)
        if value is not None:
            table[code] = value
    return table


COMMAND_NAMES: CodeNames = make_table([
    (0, 'NOP'),
    (101, 'SHOW_TEXT'),
    (102, 'SHOW_CHOICES'),
    (103, 'INPUT_NUMBER'),
    (105, 'SHOW_SCROLLING_TEXT'),
    (108, 'COMMENT'),
    (111, 'CONDITIONAL_BRANCH'),
    (112, 'LOOP'),
    (113, 'BREAK_LOOP'),
    (115, 'EXIT_EVENT_PROCESSING'),
    (117, 'COMMON_EVENT'),
    (118, 'LABEL'),
    (119, 'JUMP_TO_LABEL'),
    (121, 'CONTROL_SWITCHES'),
    (122, 'CONTROL_VARIABLES'),
    (123, 'CONTROL_SELF_SWITCH'),
    (124, 'CONTROL_TIMER'),
    (125, 'CHANGE_GOLD'),
    (126, 'CHANGE_ITEMS'),
    (127, 'CHANGE_WEAPONS'),
    (128, 'CHANGE_ARMORS'),
    (129, 'CHANGE_PARTY_MEMBER'),
    (134, 'CHANGE_SAVE_ACCESS'),
    (201, 'TRANSFER_PLAYER'),
    (203, 'SET_EVENT_LOCATION'),
    (205, 'SET_MOVEMENT_ROUTE'),
    (211, 'CHANGE_TRANSPARENCY'),
    (212, 'SHOW_ANIMATION'),
    (213, 'SHOW_BALLOON_ICON'),
    (216, 'CHANGE_PLAYER_FOLLOWERS'),
    (221, 'FADEOUT_SCREEN'),
    (222, 'FADEIN_SCREEN'),
    (223, 'TINT_SCREEN'),
    (224, 'FLASH_SCREEN'),
    (225, 'SHAKE_SCREEN'),
    (230, 'WAIT'),
    (231, 'SHOW_PICTURE'),
    (232, 'MOVE_PICTURE'),
    (235, 'ERASE_PICTURE'),
    (241, 'PLAY_BGM'),
    (242, 'FADEOUT_BGM'),
    (243, 'SAVE_BGM'),
    (244, 'RESUME_BGM'),
    (245, 'PLAY_BGS'),
    (246, 'FADEOUT_BGS'),
    (250, 'PLAY_SE'),
    (285, 'GET_LOCATION_INFO'),
    (301, 'BATTLE_PROCESSING'),
    (303, 'NAME_INPUT_PROCESSING'),
    (311, 'CHANGE_HP'),
    (312, 'CHANGE_MP'),
    (313, 'CHANGE_STATE'),
    (316, 'CHANGE_LEVEL'),
    (318, 'CHANGE_SKILL'),
    (319, 'CHANGE_EQUIPMENT'),
    (321, 'CHANGE_CLASS'),
    (322, 'CHANGE_ACTOR_IMAGES'),
    (339, 'FORCE_ACTION'),
    (340, 'ABORT_BATTLE'),
    (353, 'GAME_OVER'),
    (354, 'RETURN_TO_TITLE_SCREEN'),
    (355, 'SCRIPT'),
    (401, 'TEXT_DATA'),
    (402, 'WHEN'),
    (403, 'WHEN_CANCEL'),
    (404, 'WHEN_END'),
    (405, 'SHOW_SCROLLING_TEXT_EXTRA'),
    (408, 'COMMENT_EXTRA'),
    (411, 'ELSE'),
    (412, 'CONDITIONAL_BRANCH_END'),
    (413, 'REPEAT_ABOVE'),
    (505, 'SET_MOVEMENT_ROUTE_EXTRA'),
    (601, 'IF_WIN'),
    (602, 'IF_ESCAPE'),
    (603, 'IF_LOSE'),
    (604, 'BATTLE_RESULT_END'),
    (655, 'SCRIPT_EXTRA'),
])

COMMAND_NAMES_mv: CodeNames = make_table([
    *COMMAND_NAMES.items(),
    (356, 'PLUGIN_COMMAND'),
])

COMMAND_NAMES_mz: CodeNames = make_table([
    *COMMAND_NAMES.items(),
    (357, 'PLUGIN_COMMAND'),
    (657, 'PLUGIN_COMMAND_EXTRA'),
])


@deal.chain(deal.pre(lambda _: _.raw >= 0), deal.has())
def resolve(raw: int, names: CodeNames) -> CommandCode:
    return CommandCode(raw, names.get(raw))


def debug_name(code: CommandCode) -> Optional[str]:
    return code.name
