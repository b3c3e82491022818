from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional

from eventcracker.kernel.types import AudioFile, MaybeRef, MoveRoute

from .codes import CommandCode
from .conditions import Condition
from .operands import Operand, VariableOperation


class LocationInfoKind(IntEnum):
    TERRAIN_TAG = 0
    EVENT_ID = 1
    TILE_1 = 2
    TILE_2 = 3
    TILE_3 = 4
    TILE_4 = 5
    REGION_ID = 6


@dataclass(frozen=True)
class Command(object):
    """Decoded event command.

    Commands are immutable once decoded, except for the `lines` of the
    multi-line commands which are extended by continuation records.
    """


@dataclass(frozen=True)
class Nop(Command):
    pass


@dataclass(frozen=True)
class ShowText(Command):
    face_name: str
    face_index: int
    background: int
    position_type: int
    speaker_name: Optional[str] = None
    lines: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ShowChoices(Command):
    choices: List[str]
    cancel_type: int
    default_type: int
    position_type: int
    background: int


@dataclass(frozen=True)
class ShowScrollingText(Command):
    speed: int
    no_fast: bool
    lines: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Comment(Command):
    lines: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ConditionalBranch(Command):
    condition: Condition


@dataclass(frozen=True)
class Loop(Command):
    pass


@dataclass(frozen=True)
class ExitEventProcessing(Command):
    pass


@dataclass(frozen=True)
class CommonEvent(Command):
    id: int


@dataclass(frozen=True)
class Label(Command):
    name: str


@dataclass(frozen=True)
class JumpToLabel(Command):
    name: str


@dataclass(frozen=True)
class ControlSwitches(Command):
    start_id: int
    end_id: int
    value: bool


@dataclass(frozen=True)
class ControlVariables(Command):
    start_id: int
    end_id: int
    operation: VariableOperation
    value: Operand


@dataclass(frozen=True)
class ControlSelfSwitch(Command):
    key: str
    value: bool


@dataclass(frozen=True)
class ControlTimer(Command):
    start_seconds: Optional[int]


@dataclass(frozen=True)
class ChangeGold(Command):
    is_add: bool
    value: MaybeRef[int]


@dataclass(frozen=True)
class ChangeItems(Command):
    item_id: int
    is_add: bool
    value: MaybeRef[int]


@dataclass(frozen=True)
class ChangeArmors(Command):
    armor_id: int
    is_add: bool
    value: MaybeRef[int]
    include_equipped: bool


@dataclass(frozen=True)
class ChangePartyMember(Command):
    actor_id: int
    is_add: bool
    initialize: bool


@dataclass(frozen=True)
class ChangeSaveAccess(Command):
    disable: bool


@dataclass(frozen=True)
class TransferPlayer(Command):
    map_id: MaybeRef[int]
    x: MaybeRef[int]
    y: MaybeRef[int]
    direction: int
    fade_type: int


@dataclass(frozen=True)
class SetEventLocation(Command):
    character_id: int
    x: MaybeRef[int]
    y: MaybeRef[int]
    direction: Optional[int]


@dataclass(frozen=True)
class SetMovementRoute(Command):
    character_id: int
    route: MoveRoute


@dataclass(frozen=True)
class ChangeTransparency(Command):
    set_transparent: bool


@dataclass(frozen=True)
class ShowAnimation(Command):
    character_id: int
    animation_id: int
    wait: bool


@dataclass(frozen=True)
class ShowBalloonIcon(Command):
    character_id: int
    balloon_id: int
    wait: bool


@dataclass(frozen=True)
class ChangePlayerFollowers(Command):
    is_show: bool


@dataclass(frozen=True)
class FadeoutScreen(Command):
    pass


@dataclass(frozen=True)
class FadeinScreen(Command):
    pass


@dataclass(frozen=True)
class TintScreen(Command):
    tone: List[int]
    duration: int
    wait: bool


@dataclass(frozen=True)
class FlashScreen(Command):
    color: List[int]
    duration: int
    wait: bool


@dataclass(frozen=True)
class ShakeScreen(Command):
    power: int
    speed: int
    duration: int
    wait: bool


@dataclass(frozen=True)
class Wait(Command):
    duration: int


@dataclass(frozen=True)
class ShowPicture(Command):
    picture_id: int
    picture_name: str
    origin: int
    x: MaybeRef[int]
    y: MaybeRef[int]
    scale_x: int
    scale_y: int
    opacity: int
    blend_mode: int


@dataclass(frozen=True)
class ErasePicture(Command):
    picture_id: int


@dataclass(frozen=True)
class PlayBgm(Command):
    audio: AudioFile


@dataclass(frozen=True)
class FadeoutBgm(Command):
    duration: int


@dataclass(frozen=True)
class SaveBgm(Command):
    pass


@dataclass(frozen=True)
class ResumeBgm(Command):
    pass


@dataclass(frozen=True)
class PlayBgs(Command):
    audio: AudioFile


@dataclass(frozen=True)
class FadeoutBgs(Command):
    duration: int


@dataclass(frozen=True)
class PlaySe(Command):
    audio: AudioFile


@dataclass(frozen=True)
class GetLocationInfo(Command):
    variable_id: int
    kind: LocationInfoKind
    x: MaybeRef[int]
    y: MaybeRef[int]


@dataclass(frozen=True)
class BattleProcessing(Command):
    # None for a random encounter
    troop_id: Optional[MaybeRef[int]]
    can_escape: bool
    can_lose: bool


@dataclass(frozen=True)
class NameInputProcessing(Command):
    actor_id: int
    max_len: int


@dataclass(frozen=True)
class ChangeHp(Command):
    actor_id: MaybeRef[int]
    is_add: bool
    value: MaybeRef[int]
    allow_death: bool


@dataclass(frozen=True)
class ChangeMp(Command):
    actor_id: MaybeRef[int]
    is_add: bool
    value: MaybeRef[int]


@dataclass(frozen=True)
class ChangeState(Command):
    actor_id: MaybeRef[int]
    is_add: bool
    state_id: int


@dataclass(frozen=True)
class ChangeLevel(Command):
    actor_id: MaybeRef[int]
    is_add: bool
    value: MaybeRef[int]
    show_level_up: bool


@dataclass(frozen=True)
class ChangeSkill(Command):
    actor_id: MaybeRef[int]
    is_learn: bool
    skill_id: int


@dataclass(frozen=True)
class ChangeClass(Command):
    actor_id: int
    class_id: int
    keep_exp: bool


@dataclass(frozen=True)
class ChangeActorImages(Command):
    actor_id: int
    character_name: str
    character_index: int
    face_name: str
    face_index: int
    battler_name: str


@dataclass(frozen=True)
class ForceAction(Command):
    is_enemy: bool
    id: int
    skill_id: int
    target_index: int


@dataclass(frozen=True)
class AbortBattle(Command):
    pass


@dataclass(frozen=True)
class GameOver(Command):
    pass


@dataclass(frozen=True)
class ReturnToTitleScreen(Command):
    pass


@dataclass(frozen=True)
class Script(Command):
    lines: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PluginCommandLine(Command):
    params: List[str]


@dataclass(frozen=True)
class PluginCommand(Command):
    plugin_name: str
    command_name: str
    comment: str
    args: Dict[str, Any]


@dataclass(frozen=True)
class When(Command):
    choice_index: int
    choice_name: str


@dataclass(frozen=True)
class WhenCancel(Command):
    choice_index: int
    choice_name: Optional[str]


@dataclass(frozen=True)
class WhenEnd(Command):
    pass


@dataclass(frozen=True)
class Else(Command):
    pass


@dataclass(frozen=True)
class ConditionalBranchEnd(Command):
    pass


@dataclass(frozen=True)
class RepeatAbove(Command):
    pass


@dataclass(frozen=True)
class IfWin(Command):
    pass


@dataclass(frozen=True)
class IfEscape(Command):
    pass


@dataclass(frozen=True)
class IfLose(Command):
    pass


@dataclass(frozen=True)
class BattleResultEnd(Command):
    pass


@dataclass(frozen=True)
class Unknown(Command):
    code: CommandCode
    parameters: List[Any]


@dataclass
class PendingCommand(object):
    """Most recently decoded command, open for continuation records.

    cursor counts the movement route steps already matched.
    """

    command: Command
    cursor: int = 0
