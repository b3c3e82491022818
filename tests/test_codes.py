import pytest

from eventcracker.event.script.codes import CommandCode, debug_name, make_table, resolve
from eventcracker.event.script.opcodes import DIALECT_mv, DIALECT_mz, DIALECTS, get_dialect


def test_resolve_registered_code():
    code = DIALECT_mv.resolve(101)
    assert code == CommandCode(101)
    assert debug_name(code) == 'SHOW_TEXT'
    assert repr(code) == 'SHOW_TEXT'


def test_resolve_unregistered_code_is_not_an_error():
    code = resolve(9999, DIALECT_mv.names)
    assert debug_name(code) is None
    assert repr(code) == 'Unknown(9999)'


def test_code_equality_ignores_name():
    assert CommandCode(401, 'TEXT_DATA') == CommandCode(401)
    assert hash(CommandCode(401, 'TEXT_DATA')) == hash(CommandCode(401))


def test_plugin_command_codes_differ_by_dialect():
    assert debug_name(DIALECT_mv.resolve(356)) == 'PLUGIN_COMMAND'
    assert debug_name(DIALECT_mv.resolve(357)) is None
    assert debug_name(DIALECT_mz.resolve(357)) == 'PLUGIN_COMMAND'
    assert debug_name(DIALECT_mz.resolve(356)) is None
    assert debug_name(DIALECT_mz.resolve(657)) == 'PLUGIN_COMMAND_EXTRA'


def test_name_only_codes_have_no_decoder():
    for code in (103, 113, 127, 232, 319):
        for dialect in DIALECTS.values():
            assert code in dialect.names
            assert code not in dialect.opcodes


def test_continuations_are_not_decoded_standalone():
    for dialect in DIALECTS.values():
        assert not set(dialect.opcodes) & set(dialect.extends)
        dialect.validate()


def test_make_table_rejects_duplicates():
    with pytest.raises(ValueError, match='duplicate command code 1'):
        make_table([(1, 'A'), (2, 'B'), (1, 'C')])


def test_get_dialect():
    assert get_dialect('mz') is DIALECT_mz
    with pytest.raises(ValueError):
        get_dialect('xp')
