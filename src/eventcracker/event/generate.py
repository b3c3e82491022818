import json
from typing import Any, Callable, Dict, Iterable, Iterator, List, Tuple, Type

from eventcracker.kernel.types import AudioFile, Constant, MaybeRef, MoveCommand, MoveRoute

from .script import commands as cmd
from .script import conditions as cond
from .script import operands as op
from .script.commands import Command, LocationInfoKind
from .script.conditions import Condition
from .script.operands import Operand
from .symbols import SymbolTable

INDENT = '\t'

Renderer = Callable[[Any, int, SymbolTable], str]


class Ident(str):
    """Text written as is, without quoting."""


def escape_string(text: str) -> str:
    return text.replace("'", "\\'")


def stringify_bool(value: bool) -> str:
    return 'True' if value else 'False'


def format_constructor(name: str, fields: Iterable[Tuple[str, Any]], indent: int) -> str:
    lines = [f'{name}(']
    for key, value in fields:
        lines.append(f'{INDENT * (indent + 1)}{key}={format_value(value, indent + 1)},')
    lines.append(f'{INDENT * indent})')
    return '\n'.join(lines)


def format_block(start: str, end: str, entries: Iterable[str], indent: int) -> str:
    lines = [start]
    lines.extend(f'{INDENT * (indent + 1)}{entry},' for entry in entries)
    lines.append(f'{INDENT * indent}{end}')
    return '\n'.join(lines)


def format_value(value: Any, indent: int) -> str:
    if isinstance(value, Ident):
        return str(value)
    if isinstance(value, bool):
        return stringify_bool(value)
    if value is None:
        return 'None'
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if isinstance(value, str):
        return f"'{escape_string(value)}'"
    if isinstance(value, list):
        return format_block(
            '[', ']', (format_value(item, indent + 1) for item in value), indent
        )
    if isinstance(value, dict):
        return format_block(
            '{',
            '}',
            (
                f"'{escape_string(str(key))}': {format_value(item, indent + 1)}"
                for key, item in value.items()
            ),
            indent,
        )
    if isinstance(value, AudioFile):
        return format_constructor(
            'AudioFile',
            (
                ('name', value.name),
                ('pan', value.pan),
                ('pitch', value.pitch),
                ('volume', value.volume),
            ),
            indent,
        )
    if isinstance(value, MoveRoute):
        return format_constructor(
            'MoveRoute',
            (
                ('repeat', value.repeat),
                ('skippable', value.skippable),
                ('wait', value.wait),
                ('list', value.commands),
            ),
            indent,
        )
    if isinstance(value, MoveCommand):
        return format_constructor(
            'MoveCommand',
            (
                ('code', value.code),
                ('indent', value.indent),
                ('parameters', value.parameters),
            ),
            indent,
        )
    raise TypeError(f'cannot format value of type {type(value).__name__}')


class FunctionCallWriter(object):
    """Write function call expression, one argument per line when multiline."""

    def __init__(self, indent: int, name: str, multiline: bool = True) -> None:
        self.indent = indent
        self.multiline = multiline
        self.has_params = False
        self.parts: List[str] = [INDENT * indent, name, '(']

    def write_param(self, name: str, value: Any) -> None:
        if self.has_params:
            self.parts.append(',' if self.multiline else ', ')
        if self.multiline:
            self.parts.append('\n' + INDENT * (self.indent + 1))
        self.parts.append(f'{name}={format_value(value, self.indent + 1)}')
        self.has_params = True

    def finish(self) -> str:
        if self.has_params and self.multiline:
            self.parts.append(',\n' + INDENT * self.indent)
        self.parts.append(')\n')
        return ''.join(self.parts)


def call(indent: int, name: str, *params: Tuple[str, Any], multiline: bool = True) -> str:
    writer = FunctionCallWriter(indent, name, multiline=multiline)
    for key, value in params:
        writer.write_param(key, value)
    return writer.finish()


def inline(indent: int, name: str, *params: Tuple[str, Any]) -> str:
    return call(indent, name, *params, multiline=False)


def statement(indent: int, text: str) -> str:
    return f'{INDENT * indent}{text}\n'


def ref_value(value: MaybeRef[int], symbols: SymbolTable) -> Ident:
    if isinstance(value, Constant):
        return Ident(str(value.value))
    return Ident(symbols.variable(value.id))


def signed_value(is_add: bool, value: MaybeRef[int], symbols: SymbolTable) -> Ident:
    return Ident(f'{"" if is_add else "-"}{ref_value(value, symbols)}')


def actor_param(actor_id: MaybeRef[int], symbols: SymbolTable) -> Tuple[str, Ident]:
    if isinstance(actor_id, Constant):
        return 'actor', Ident(symbols.actor(actor_id.value))
    return 'actor_id', Ident(symbols.variable(actor_id.id))


def character_name(character_id: int) -> str:
    return 'game_player' if character_id < 0 else f'game_character_{character_id}'


# ## CONDITIONS

CONDITIONS: Dict[Type[Condition], Callable[[Any, SymbolTable], str]] = {
    cond.Switch: lambda c, symbols: (
        f'{"" if c.check_true else "not "}{symbols.switch(c.id)}'
    ),
    cond.Variable: lambda c, symbols: (
        f'{symbols.variable(c.lhs_id)} {c.operation.symbol} {ref_value(c.rhs_id, symbols)}'
    ),
    cond.SelfSwitch: lambda c, symbols: (
        f'{"" if c.check_true else "not "}game_self_switches.get('
        f"map_id=self.map_id, event_id=self.event_id, name='{escape_string(c.name)}')"
    ),
    cond.Timer: lambda c, symbols: (
        f'game_timer.seconds() {">=" if c.is_gte else "<="} {c.value}'
    ),
    cond.ActorInParty: lambda c, symbols: (
        f'game_party.members.contains(actor={symbols.actor(c.actor_id)})'
    ),
    cond.ActorSkill: lambda c, symbols: (
        f'{symbols.actor(c.actor_id)}.has_skill(skill={symbols.skill(c.skill_id)})'
    ),
    cond.ActorArmor: lambda c, symbols: (
        f'{symbols.actor(c.actor_id)}.has_armor(armor={symbols.armor(c.armor_id)})'
    ),
    cond.ActorState: lambda c, symbols: (
        f'{symbols.actor(c.actor_id)}.has_state(state={symbols.state(c.state_id)})'
    ),
    cond.EnemyState: lambda c, symbols: (
        f'game_troop.members[{c.enemy_index}].is_state_affected(state={symbols.state(c.state_id)})'
    ),
    cond.Character: lambda c, symbols: (
        f'{character_name(c.character_id)}.direction == {c.direction}'
    ),
    cond.Gold: lambda c, symbols: f'game_party.gold {c.check.symbol} {c.value}',
    cond.Item: lambda c, symbols: f'game_party.has_item(item={symbols.item(c.item_id)})',
    cond.Button: lambda c, symbols: (
        f"game_input.is_pressed(key_name='{escape_string(c.key_name)}')"
    ),
    cond.Script: lambda c, symbols: f"execute_script('{escape_string(c.value)}')",
}


# ## OPERANDS

OPERANDS: Dict[Type[Operand], Callable[[Any, SymbolTable], str]] = {
    op.Constant: lambda o, symbols: str(o.value),
    op.Variable: lambda o, symbols: symbols.variable(o.id),
    op.Random: lambda o, symbols: f'random.randrange(start={o.start}, stop={o.stop})',
    op.NumItems: lambda o, symbols: f'game_party.get_num_items(item={symbols.item(o.item_id)})',
    op.ActorLevel: lambda o, symbols: f'{symbols.actor(o.actor_id)}.level',
    op.ActorHp: lambda o, symbols: f'{symbols.actor(o.actor_id)}.hp',
    op.ActorMp: lambda o, symbols: f'{symbols.actor(o.actor_id)}.mp',
    op.ActorParam: lambda o, symbols: f'{symbols.actor(o.actor_id)}.params[{o.param_index}]',
    op.CharacterMapX: lambda o, symbols: f'game.get_character(id={o.character_id}).map_x',
    op.CharacterMapY: lambda o, symbols: f'game.get_character(id={o.character_id}).map_y',
    op.MapId: lambda o, symbols: 'game_map.map_id()',
    op.Gold: lambda o, symbols: 'game_party.gold',
    op.Steps: lambda o, symbols: 'game_party.steps',
}


# ## COMMANDS

RENDERERS: Dict[Type[Command], Renderer] = {}


def regcmd(*command_types: Type[Command]) -> Callable[[Renderer], Renderer]:
    def wrap(func: Renderer) -> Renderer:
        for command_type in command_types:
            RENDERERS[command_type] = func
        return func

    return wrap


@regcmd(cmd.Nop, cmd.WhenEnd, cmd.ConditionalBranchEnd, cmd.RepeatAbove, cmd.BattleResultEnd)
def render_nothing(command: Command, indent: int, symbols: SymbolTable) -> str:
    # block ends are implied by indentation
    return ''


@regcmd(cmd.ShowText)
def render_show_text(command: cmd.ShowText, indent: int, symbols: SymbolTable) -> str:
    writer = FunctionCallWriter(indent, 'show_text')
    writer.write_param('face_name', command.face_name)
    writer.write_param('face_index', command.face_index)
    writer.write_param('background', command.background)
    writer.write_param('position_type', command.position_type)
    if command.speaker_name is not None:
        writer.write_param('speaker_name', command.speaker_name)
    writer.write_param('lines', command.lines)
    return writer.finish()


@regcmd(cmd.ShowChoices)
def render_show_choices(command: cmd.ShowChoices, indent: int, symbols: SymbolTable) -> str:
    return call(
        indent,
        'show_choices',
        ('choices', command.choices),
        ('cancel_type', command.cancel_type),
        ('default_type', command.default_type),
        ('position_type', command.position_type),
        ('background', command.background),
    )


@regcmd(cmd.ShowScrollingText)
def render_show_scrolling_text(
    command: cmd.ShowScrollingText, indent: int, symbols: SymbolTable
) -> str:
    return call(
        indent,
        'show_scrolling_text',
        ('speed', command.speed),
        ('no_fast', command.no_fast),
        ('lines', command.lines),
    )


@regcmd(cmd.Comment)
def render_comment(command: cmd.Comment, indent: int, symbols: SymbolTable) -> str:
    return ''.join(statement(indent, f'# {line}') for line in command.lines)


@regcmd(cmd.ConditionalBranch)
def render_conditional_branch(
    command: cmd.ConditionalBranch, indent: int, symbols: SymbolTable
) -> str:
    condition = CONDITIONS[type(command.condition)](command.condition, symbols)
    return statement(indent, f'if {condition}:')


@regcmd(cmd.Loop)
def render_loop(command: cmd.Loop, indent: int, symbols: SymbolTable) -> str:
    return statement(indent, 'while True:')


@regcmd(cmd.ExitEventProcessing)
def render_exit_event_processing(
    command: cmd.ExitEventProcessing, indent: int, symbols: SymbolTable
) -> str:
    return statement(indent, 'exit_event_processing()')


@regcmd(cmd.CommonEvent)
def render_common_event(command: cmd.CommonEvent, indent: int, symbols: SymbolTable) -> str:
    return call(indent, symbols.common_event(command.id))


@regcmd(cmd.Label)
def render_label(command: cmd.Label, indent: int, symbols: SymbolTable) -> str:
    return inline(indent, 'set_label', ('name', command.name))


@regcmd(cmd.JumpToLabel)
def render_jump_to_label(command: cmd.JumpToLabel, indent: int, symbols: SymbolTable) -> str:
    return inline(indent, 'jump_to_label', ('name', command.name))


@regcmd(cmd.ControlSwitches)
def render_control_switches(
    command: cmd.ControlSwitches, indent: int, symbols: SymbolTable
) -> str:
    value = stringify_bool(command.value)
    return ''.join(
        statement(indent, f'{symbols.switch(id)} = {value}')
        for id in range(command.start_id, command.end_id + 1)
    )


@regcmd(cmd.ControlVariables)
def render_control_variables(
    command: cmd.ControlVariables, indent: int, symbols: SymbolTable
) -> str:
    value = OPERANDS[type(command.value)](command.value, symbols)
    operation = command.operation.symbol
    return ''.join(
        statement(indent, f'{symbols.variable(id)} {operation} {value}')
        for id in range(command.start_id, command.end_id + 1)
    )


@regcmd(cmd.ControlSelfSwitch)
def render_control_self_switch(
    command: cmd.ControlSelfSwitch, indent: int, symbols: SymbolTable
) -> str:
    key = escape_string(command.key)
    return statement(indent, f"game_self_switches['{key}'] = {stringify_bool(command.value)}")


@regcmd(cmd.ControlTimer)
def render_control_timer(command: cmd.ControlTimer, indent: int, symbols: SymbolTable) -> str:
    if command.start_seconds is None:
        return statement(indent, 'game_timer.stop()')
    return statement(indent, f'game_timer.start(seconds={command.start_seconds})')


@regcmd(cmd.ChangeGold)
def render_change_gold(command: cmd.ChangeGold, indent: int, symbols: SymbolTable) -> str:
    operation = '+=' if command.is_add else '-='
    return statement(indent, f'game_party.gold {operation} {ref_value(command.value, symbols)}')


@regcmd(cmd.ChangeItems)
def render_change_items(command: cmd.ChangeItems, indent: int, symbols: SymbolTable) -> str:
    return inline(
        indent,
        'gain_item',
        ('item', Ident(symbols.item(command.item_id))),
        ('value', signed_value(command.is_add, command.value, symbols)),
    )


@regcmd(cmd.ChangeArmors)
def render_change_armors(command: cmd.ChangeArmors, indent: int, symbols: SymbolTable) -> str:
    return inline(
        indent,
        'gain_armor',
        ('armor', Ident(symbols.armor(command.armor_id))),
        ('value', signed_value(command.is_add, command.value, symbols)),
        ('include_equipped', command.include_equipped),
    )


@regcmd(cmd.ChangePartyMember)
def render_change_party_member(
    command: cmd.ChangePartyMember, indent: int, symbols: SymbolTable
) -> str:
    actor = ('actor', Ident(symbols.actor(command.actor_id)))
    if not command.is_add:
        # initialize is stored for removals too, but has no effect
        return inline(indent, 'remove_party_member', actor)
    return inline(indent, 'add_party_member', actor, ('initialize', command.initialize))


@regcmd(cmd.ChangeSaveAccess)
def render_change_save_access(
    command: cmd.ChangeSaveAccess, indent: int, symbols: SymbolTable
) -> str:
    return call(indent, 'disable_saving' if command.disable else 'enable_saving')


@regcmd(cmd.TransferPlayer)
def render_transfer_player(
    command: cmd.TransferPlayer, indent: int, symbols: SymbolTable
) -> str:
    if isinstance(command.map_id, Constant):
        map_param = ('map', Ident(f'game_map_{command.map_id.value}'))
    else:
        map_param = ('map_id', Ident(symbols.variable(command.map_id.id)))
    return call(
        indent,
        'transfer_player',
        map_param,
        ('x', ref_value(command.x, symbols)),
        ('y', ref_value(command.y, symbols)),
        ('direction', command.direction),
        ('fade_type', command.fade_type),
    )


@regcmd(cmd.SetEventLocation)
def render_set_event_location(
    command: cmd.SetEventLocation, indent: int, symbols: SymbolTable
) -> str:
    writer = FunctionCallWriter(indent, 'set_event_location')
    writer.write_param('character_id', command.character_id)
    writer.write_param('x', ref_value(command.x, symbols))
    writer.write_param('y', ref_value(command.y, symbols))
    if command.direction is not None:
        writer.write_param('direction', command.direction)
    return writer.finish()


@regcmd(cmd.SetMovementRoute)
def render_set_movement_route(
    command: cmd.SetMovementRoute, indent: int, symbols: SymbolTable
) -> str:
    return call(
        indent,
        'set_movement_route',
        ('character_id', command.character_id),
        ('route', command.route),
    )


@regcmd(cmd.ChangeTransparency)
def render_change_transparency(
    command: cmd.ChangeTransparency, indent: int, symbols: SymbolTable
) -> str:
    return inline(indent, 'change_transparency', ('set_transparent', command.set_transparent))


@regcmd(cmd.ShowAnimation)
def render_show_animation(command: cmd.ShowAnimation, indent: int, symbols: SymbolTable) -> str:
    return inline(
        indent,
        'show_animation',
        ('character_id', command.character_id),
        ('animation_id', command.animation_id),
        ('wait', command.wait),
    )


@regcmd(cmd.ShowBalloonIcon)
def render_show_balloon_icon(
    command: cmd.ShowBalloonIcon, indent: int, symbols: SymbolTable
) -> str:
    return inline(
        indent,
        'show_balloon_icon',
        ('character_id', command.character_id),
        ('balloon_id', command.balloon_id),
        ('wait', command.wait),
    )


@regcmd(cmd.ChangePlayerFollowers)
def render_change_player_followers(
    command: cmd.ChangePlayerFollowers, indent: int, symbols: SymbolTable
) -> str:
    return call(indent, 'show_player_followers' if command.is_show else 'hide_player_followers')


def render_screen_color(name: str, field: str) -> Renderer:
    def render(command: Any, indent: int, symbols: SymbolTable) -> str:
        values = ', '.join(str(value) for value in getattr(command, field))
        return inline(
            indent,
            name,
            (field, Ident(f'[{values}]')),
            ('duration', command.duration),
            ('wait', command.wait),
        )

    return render


regcmd(cmd.TintScreen)(render_screen_color('tint_screen', 'tone'))
regcmd(cmd.FlashScreen)(render_screen_color('flash_screen', 'color'))


@regcmd(cmd.ShakeScreen)
def render_shake_screen(command: cmd.ShakeScreen, indent: int, symbols: SymbolTable) -> str:
    return inline(
        indent,
        'shake_screen',
        ('power', command.power),
        ('speed', command.speed),
        ('duration', command.duration),
        ('wait', command.wait),
    )


@regcmd(cmd.Wait)
def render_wait(command: cmd.Wait, indent: int, symbols: SymbolTable) -> str:
    return inline(indent, 'wait', ('duration', command.duration))


@regcmd(cmd.ShowPicture)
def render_show_picture(command: cmd.ShowPicture, indent: int, symbols: SymbolTable) -> str:
    return call(
        indent,
        'show_picture',
        ('picture_id', command.picture_id),
        ('picture_name', command.picture_name),
        ('origin', command.origin),
        ('x', ref_value(command.x, symbols)),
        ('y', ref_value(command.y, symbols)),
        ('scale_x', command.scale_x),
        ('scale_y', command.scale_y),
        ('opacity', command.opacity),
        ('blend_mode', command.blend_mode),
    )


@regcmd(cmd.ErasePicture)
def render_erase_picture(command: cmd.ErasePicture, indent: int, symbols: SymbolTable) -> str:
    return inline(indent, 'erase_picture', ('picture_id', command.picture_id))


def render_audio(name: str) -> Renderer:
    def render(command: Any, indent: int, symbols: SymbolTable) -> str:
        return call(indent, name, ('audio', command.audio))

    return render


regcmd(cmd.PlayBgm)(render_audio('play_bgm'))
regcmd(cmd.PlayBgs)(render_audio('play_bgs'))
regcmd(cmd.PlaySe)(render_audio('play_se'))


def render_fadeout(name: str) -> Renderer:
    def render(command: Any, indent: int, symbols: SymbolTable) -> str:
        return inline(indent, name, ('duration', command.duration))

    return render


regcmd(cmd.FadeoutBgm)(render_fadeout('fadeout_bgm'))
regcmd(cmd.FadeoutBgs)(render_fadeout('fadeout_bgs'))


def render_call(name: str) -> Renderer:
    def render(command: Any, indent: int, symbols: SymbolTable) -> str:
        return call(indent, name)

    return render


regcmd(cmd.FadeoutScreen)(render_call('fadeout_screen'))
regcmd(cmd.FadeinScreen)(render_call('fadein_screen'))
regcmd(cmd.SaveBgm)(render_call('save_bgm'))
regcmd(cmd.ResumeBgm)(render_call('resume_bgm'))
regcmd(cmd.AbortBattle)(render_call('abort_battle'))
regcmd(cmd.GameOver)(render_call('game_over'))
regcmd(cmd.ReturnToTitleScreen)(render_call('return_to_title_screen'))


@regcmd(cmd.GetLocationInfo)
def render_get_location_info(
    command: cmd.GetLocationInfo, indent: int, symbols: SymbolTable
) -> str:
    getter = {
        LocationInfoKind.TERRAIN_TAG: 'get_terrain_tag',
        LocationInfoKind.EVENT_ID: 'get_event_id',
    }[command.kind]
    x = ref_value(command.x, symbols)
    y = ref_value(command.y, symbols)
    variable = symbols.variable(command.variable_id)
    return statement(indent, f'{variable} = game_map.{getter}(x={x}, y={y})')


@regcmd(cmd.BattleProcessing)
def render_battle_processing(
    command: cmd.BattleProcessing, indent: int, symbols: SymbolTable
) -> str:
    if command.troop_id is None:
        troop = ('troop_id', Ident('game.random_encounter_troop_id()'))
    elif isinstance(command.troop_id, Constant):
        troop = ('troop', Ident(symbols.troop(command.troop_id.value)))
    else:
        troop = ('troop_id', Ident(symbols.variable(command.troop_id.id)))
    return call(
        indent,
        'battle_processing',
        troop,
        ('can_escape', command.can_escape),
        ('can_lose', command.can_lose),
    )


@regcmd(cmd.NameInputProcessing)
def render_name_input_processing(
    command: cmd.NameInputProcessing, indent: int, symbols: SymbolTable
) -> str:
    return inline(
        indent,
        'name_input_processing',
        ('actor', Ident(symbols.actor(command.actor_id))),
        ('max_len', command.max_len),
    )


@regcmd(cmd.ChangeHp)
def render_change_hp(command: cmd.ChangeHp, indent: int, symbols: SymbolTable) -> str:
    return inline(
        indent,
        'gain_hp',
        actor_param(command.actor_id, symbols),
        ('value', signed_value(command.is_add, command.value, symbols)),
        ('allow_death', command.allow_death),
    )


@regcmd(cmd.ChangeMp)
def render_change_mp(command: cmd.ChangeMp, indent: int, symbols: SymbolTable) -> str:
    return inline(
        indent,
        'gain_mp',
        actor_param(command.actor_id, symbols),
        ('value', signed_value(command.is_add, command.value, symbols)),
    )


@regcmd(cmd.ChangeState)
def render_change_state(command: cmd.ChangeState, indent: int, symbols: SymbolTable) -> str:
    if command.actor_id == Constant(0):
        # actor 0 is the whole party
        actor = ('actors', Ident('game_party'))
    else:
        actor = actor_param(command.actor_id, symbols)
    return inline(
        indent,
        'add_state' if command.is_add else 'remove_state',
        actor,
        ('state', Ident(symbols.state(command.state_id))),
    )


@regcmd(cmd.ChangeLevel)
def render_change_level(command: cmd.ChangeLevel, indent: int, symbols: SymbolTable) -> str:
    return inline(
        indent,
        'gain_level',
        actor_param(command.actor_id, symbols),
        ('value', signed_value(command.is_add, command.value, symbols)),
        ('show_level_up', command.show_level_up),
    )


@regcmd(cmd.ChangeSkill)
def render_change_skill(command: cmd.ChangeSkill, indent: int, symbols: SymbolTable) -> str:
    return inline(
        indent,
        'learn_skill' if command.is_learn else 'forget_skill',
        actor_param(command.actor_id, symbols),
        ('skill', Ident(symbols.skill(command.skill_id))),
    )


@regcmd(cmd.ChangeClass)
def render_change_class(command: cmd.ChangeClass, indent: int, symbols: SymbolTable) -> str:
    return inline(
        indent,
        'change_class',
        ('actor', Ident(symbols.actor(command.actor_id))),
        ('klass', Ident(symbols.klass(command.class_id))),
        ('keep_exp', command.keep_exp),
    )


@regcmd(cmd.ChangeActorImages)
def render_change_actor_images(
    command: cmd.ChangeActorImages, indent: int, symbols: SymbolTable
) -> str:
    return call(
        indent,
        'change_actor_images',
        ('actor', Ident(symbols.actor(command.actor_id))),
        ('character_name', command.character_name),
        ('character_index', command.character_index),
        ('face_name', command.face_name),
        ('face_index', command.face_index),
        ('battler_name', command.battler_name),
    )


@regcmd(cmd.ForceAction)
def render_force_action(command: cmd.ForceAction, indent: int, symbols: SymbolTable) -> str:
    if command.is_enemy:
        subject = ('enemy_index', command.id)
    else:
        subject = ('actor', Ident(symbols.actor(command.id)))
    return inline(
        indent,
        'force_action',
        subject,
        ('skill', Ident(symbols.skill(command.skill_id))),
        ('target_index', command.target_index),
    )


@regcmd(cmd.Script)
def render_script(command: cmd.Script, indent: int, symbols: SymbolTable) -> str:
    return call(indent, 'script', ('lines', command.lines))


@regcmd(cmd.PluginCommandLine)
def render_plugin_command_line(
    command: cmd.PluginCommandLine, indent: int, symbols: SymbolTable
) -> str:
    params = ', '.join(format_value(param, indent) for param in command.params)
    return statement(indent, f'plugin_command({params})')


@regcmd(cmd.PluginCommand)
def render_plugin_command(command: cmd.PluginCommand, indent: int, symbols: SymbolTable) -> str:
    return call(
        indent,
        'plugin_command',
        ('plugin_name', command.plugin_name),
        ('command_name', command.command_name),
        ('comment', command.comment),
        ('args', command.args),
    )


@regcmd(cmd.When)
def render_when(command: cmd.When, indent: int, symbols: SymbolTable) -> str:
    return statement(
        indent, f'if get_choice_index() == {command.choice_index}: # {command.choice_name}'
    )


@regcmd(cmd.WhenCancel)
def render_when_cancel(command: cmd.WhenCancel, indent: int, symbols: SymbolTable) -> str:
    return statement(
        indent, f'if get_choice_index() == -1: # Cancel, index={command.choice_index}'
    )


@regcmd(cmd.Else)
def render_else(command: cmd.Else, indent: int, symbols: SymbolTable) -> str:
    return statement(indent, 'else:')


def render_battle_result(result: str) -> Renderer:
    def render(command: Any, indent: int, symbols: SymbolTable) -> str:
        return statement(indent, f'if game_battle_result.is_{result}():')

    return render


regcmd(cmd.IfWin)(render_battle_result('win'))
regcmd(cmd.IfEscape)(render_battle_result('escape'))
regcmd(cmd.IfLose)(render_battle_result('lose'))


@regcmd(cmd.Unknown)
def render_unknown(command: cmd.Unknown, indent: int, symbols: SymbolTable) -> str:
    parameters = json.dumps(command.parameters, ensure_ascii=False)
    return statement(indent, f'# Unknown Command Code {command.code!r}, parameters: {parameters}')


def decompile_commands(
    commands: Iterable[Tuple[int, Command]], symbols: SymbolTable
) -> Iterator[str]:
    for indent, command in commands:
        yield RENDERERS[type(command)](command, indent, symbols)


def render(commands: Iterable[Tuple[int, Command]], symbols: SymbolTable) -> str:
    return ''.join(decompile_commands(commands, symbols))
