from pathlib import Path

import pytest

from eventcracker.event.symbols import (
    Category,
    SymbolTable,
    SymbolTableError,
    load_symbols,
    parse_symbols,
)


def test_fallback_names_are_total():
    symbols = SymbolTable()
    assert symbols.switch(1) == 'game_switch_1'
    assert symbols.variable(4) == 'game_variable_4'
    assert symbols.common_event(2) == 'common_event_2'
    assert symbols.actor(1) == 'game_actor_1'
    assert symbols.skill(3) == 'game_skill_3'
    assert symbols.item(5) == 'game_item_5'
    assert symbols.state(6) == 'game_state_6'
    assert symbols.troop(7) == 'game_troop_7'
    assert symbols.armor(8) == 'game_armor_8'
    assert symbols.klass(9) == 'game_class_9'


def test_name_for_prefers_table_entries():
    symbols = SymbolTable({Category.SWITCH: {1: 'door_open'}})
    assert symbols.name_for(Category.SWITCH, 1) == 'door_open'
    assert symbols.name_for(Category.SWITCH, 2) == 'game_switch_2'
    assert symbols.name_for(Category.VARIABLE, 1) == 'game_variable_1'


def test_load_symbols(tmp_path: Path) -> None:
    path = tmp_path / 'names.yml'
    path.write_text(
        'switches:\n'
        '  1: door_open\n'
        'common-events:\n'
        '  "12": shop\n'
        'classes:\n',
        encoding='utf-8',
    )
    symbols = load_symbols(str(path))
    assert symbols.switch(1) == 'door_open'
    assert symbols.common_event(12) == 'shop'
    assert symbols.klass(1) == 'game_class_1'


def test_empty_file_is_empty_table(tmp_path: Path) -> None:
    path = tmp_path / 'names.yml'
    path.write_text('', encoding='utf-8')
    assert load_symbols(str(path)).variable(1) == 'game_variable_1'


@pytest.mark.parametrize(
    'data',
    [
        {'weapons': {1: 'sword'}},
        {'switches': {'one': 'door_open'}},
        {'switches': {True: 'door_open'}},
        {'switches': ['door_open']},
        ['switches'],
    ],
)
def test_invalid_tables(data):
    with pytest.raises(SymbolTableError):
        parse_symbols(data, 'names.yml')


def test_empty_name_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / 'names.yml'
    path.write_text('switches:\n  1:\n', encoding='utf-8')
    with pytest.raises(SymbolTableError, match='has no name'):
        load_symbols(str(path))
