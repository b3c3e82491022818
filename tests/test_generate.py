import pytest

from eventcracker.event.generate import RENDERERS, FunctionCallWriter, format_value, render
from eventcracker.event.preset import rpgmv
from eventcracker.event.script import commands as cmd
from eventcracker.event.script import conditions as cond
from eventcracker.event.script import operands as op
from eventcracker.event.script.codes import CommandCode
from eventcracker.event.script.conditions import VariableCompare
from eventcracker.event.script.operands import VariableOperation
from eventcracker.event.symbols import Category, SymbolTable
from eventcracker.kernel.types import AudioFile, Constant, EventCommand, Ref

NO_SYMBOLS = SymbolTable()


def render_one(command, indent=0, symbols=NO_SYMBOLS):
    return render([(indent, command)], symbols)


def test_change_transparency():
    assert render_one(cmd.ChangeTransparency(True)) == 'change_transparency(set_transparent=True)\n'


def test_wait_is_indented_with_tabs():
    assert render_one(cmd.Wait(60), indent=1) == '\twait(duration=60)\n'


def test_show_text_is_multiline():
    command = cmd.ShowText('', 0, 0, 2, lines=['Hello', 'World'])
    assert render_one(command) == (
        'show_text(\n'
        "\tface_name='',\n"
        '\tface_index=0,\n'
        '\tbackground=0,\n'
        '\tposition_type=2,\n'
        '\tlines=[\n'
        "\t\t'Hello',\n"
        "\t\t'World',\n"
        '\t],\n'
        ')\n'
    )


def test_show_text_speaker_name():
    command = cmd.ShowText('Actor1', 1, 0, 2, speaker_name='Harold', lines=[])
    text = render_one(command)
    assert "\tspeaker_name='Harold',\n" in text
    assert '\tlines=[\n\t],\n' in text


def test_control_variables_random_uses_symbols():
    symbols = SymbolTable({Category.VARIABLE: {1: 'variable_1'}})
    command = cmd.ControlVariables(1, 1, VariableOperation.SET, op.Random(1, 10))
    assert render_one(command, symbols=symbols) == (
        'variable_1 = random.randrange(start=1, stop=10)\n'
    )


def test_control_variables_span_is_inclusive():
    command = cmd.ControlVariables(2, 3, VariableOperation.ADD, op.Variable(7))
    assert render_one(command) == (
        'game_variable_2 += game_variable_7\n'
        'game_variable_3 += game_variable_7\n'
    )


def test_control_switches_span_is_inclusive():
    assert render_one(cmd.ControlSwitches(1, 3, False), indent=1) == (
        '\tgame_switch_1 = False\n'
        '\tgame_switch_2 = False\n'
        '\tgame_switch_3 = False\n'
    )


def test_unknown_keeps_parameters():
    command = cmd.Unknown(CommandCode(9999), [1, 2])
    assert render_one(command) == '# Unknown Command Code Unknown(9999), parameters: [1, 2]\n'


def test_unknown_uses_registered_name():
    command = cmd.Unknown(CommandCode(232, 'MOVE_PICTURE'), ['a', {'b': None}])
    assert render_one(command) == (
        '# Unknown Command Code MOVE_PICTURE, parameters: ["a", {"b": null}]\n'
    )


@pytest.mark.parametrize(
    'condition,text',
    [
        (cond.Switch(5, False), 'if not game_switch_5:\n'),
        (cond.Switch(5, True), 'if game_switch_5:\n'),
        (
            cond.Variable(2, Ref(3), VariableCompare.GTE),
            'if game_variable_2 >= game_variable_3:\n',
        ),
        (cond.Variable(2, Constant(7), VariableCompare.NEQ), 'if game_variable_2 != 7:\n'),
        (cond.Character(-1, 2), 'if game_player.direction == 2:\n'),
        (cond.Item(3), 'if game_party.has_item(item=game_item_3):\n'),
        (cond.Script("a == 'b'"), "if execute_script('a == \\'b\\''):\n"),
    ],
)
def test_conditional_branch(condition, text):
    assert render_one(cmd.ConditionalBranch(condition)) == text


def test_block_markers():
    commands = [
        (0, cmd.Loop()),
        (1, cmd.Wait(1)),
        (1, cmd.RepeatAbove()),
        (0, cmd.Else()),
        (0, cmd.ConditionalBranchEnd()),
        (0, cmd.Nop()),
    ]
    assert render(commands, NO_SYMBOLS) == 'while True:\n\twait(duration=1)\nelse:\n'


def test_strings_escape_single_quotes():
    assert render_one(cmd.Label("it's")) == "set_label(name='it\\'s')\n"
    assert render_one(cmd.Comment(["it's", 'two'])) == "# it's\n# two\n"


def test_gold_and_items():
    assert render_one(cmd.ChangeGold(True, Constant(100))) == 'game_party.gold += 100\n'
    assert render_one(cmd.ChangeItems(3, False, Ref(4))) == (
        'gain_item(item=game_item_3, value=-game_variable_4)\n'
    )


def test_change_state_for_whole_party():
    assert render_one(cmd.ChangeState(Constant(0), True, 4)) == (
        'add_state(actors=game_party, state=game_state_4)\n'
    )
    assert render_one(cmd.ChangeState(Ref(2), False, 4)) == (
        'remove_state(actor_id=game_variable_2, state=game_state_4)\n'
    )


def test_audio_file_block():
    command = cmd.PlayBgm(AudioFile('Battle1', 0, 100, 90))
    assert render_one(command) == (
        'play_bgm(\n'
        '\taudio=AudioFile(\n'
        "\t\tname='Battle1',\n"
        '\t\tpan=0,\n'
        '\t\tpitch=100,\n'
        '\t\tvolume=90,\n'
        '\t),\n'
        ')\n'
    )


def test_plugin_commands():
    assert render_one(cmd.PluginCommandLine(['Quest', 'add', '3'])) == (
        "plugin_command('Quest', 'add', '3')\n"
    )
    command = cmd.PluginCommand('Quest', 'add', '', {'id': '3'})
    assert render_one(command) == (
        'plugin_command(\n'
        "\tplugin_name='Quest',\n"
        "\tcommand_name='add',\n"
        "\tcomment='',\n"
        '\targs={\n'
        "\t\t'id': '3',\n"
        '\t},\n'
        ')\n'
    )


def test_choices():
    assert render_one(cmd.When(0, 'Yes')) == 'if get_choice_index() == 0: # Yes\n'
    assert render_one(cmd.WhenCancel(1, None)) == (
        'if get_choice_index() == -1: # Cancel, index=1\n'
    )


def test_tint_screen():
    assert render_one(cmd.TintScreen([-68, -68, 0, 68], 60, True)) == (
        'tint_screen(tone=[-68, -68, 0, 68], duration=60, wait=True)\n'
    )


def test_function_call_writer_without_arguments():
    writer = FunctionCallWriter(2, 'game_over')
    assert writer.finish() == '\t\tgame_over()\n'


def test_format_value_rejects_unknown_types():
    with pytest.raises(TypeError):
        format_value(object(), 0)


def test_every_command_type_has_renderer():
    command_types = {
        value
        for value in vars(cmd).values()
        if isinstance(value, type) and issubclass(value, cmd.Command) and value is not cmd.Command
    }
    assert command_types <= set(RENDERERS)


def test_rendering_is_deterministic():
    records = [
        EventCommand(101, 0, ['', 0, 0, 2]),
        EventCommand(401, 0, ['Hello']),
        EventCommand(111, 0, [0, 1, 0]),
        EventCommand(122, 1, [1, 2, 0, 2, 1, 10]),
        EventCommand(412, 0, []),
        EventCommand(9999, 0, [1, 2]),
    ]
    first = render(rpgmv.assemble(records), NO_SYMBOLS)
    second = render(rpgmv.assemble(records), NO_SYMBOLS)
    assert first == second
    assert first.endswith('# Unknown Command Code Unknown(9999), parameters: [1, 2]\n')
