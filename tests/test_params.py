import pytest

from eventcracker.kernel.errors import ArityMismatch, RangeError, TypeMismatch
from eventcracker.kernel.params import (
    ParamReader,
    as_audio_file,
    as_bool,
    as_enum,
    as_i16,
    as_i32,
    as_move_command,
    as_move_route,
    as_optional,
    as_str,
    as_u8,
    as_u32,
    int_bool,
)
from eventcracker.kernel.types import AudioFile, MoveCommand
from eventcracker.event.script.conditions import GoldCheck


def test_int_bool_zero_is_true():
    assert int_bool(0) is True
    assert int_bool(1) is False


@pytest.mark.parametrize('value', [2, -1, 100])
def test_int_bool_rejects_other_integers(value):
    with pytest.raises(RangeError):
        int_bool(value)


@pytest.mark.parametrize('value', [True, 1.0, '0', None])
def test_int_bool_rejects_non_integers(value):
    with pytest.raises(TypeMismatch):
        int_bool(value)


def test_integers_reject_booleans_and_floats():
    with pytest.raises(TypeMismatch):
        as_u32(True)
    with pytest.raises(TypeMismatch):
        as_i32(3.0)


@pytest.mark.parametrize(
    'convert,value',
    [
        (as_u32, -1),
        (as_u32, 1 << 32),
        (as_i32, 1 << 31),
        (as_i16, -(1 << 15) - 1),
        (as_u8, 256),
    ],
)
def test_integer_overflow_is_type_mismatch(convert, value):
    with pytest.raises(TypeMismatch):
        convert(value)


def test_integer_limits_are_accepted():
    assert as_u32((1 << 32) - 1) == (1 << 32) - 1
    assert as_i32(-(1 << 31)) == -(1 << 31)
    assert as_u8(255) == 255


def test_bool_accepts_only_json_booleans():
    assert as_bool(False) is False
    with pytest.raises(TypeMismatch):
        as_bool(0)


def test_optional_passes_null():
    assert as_optional(as_str)(None) is None
    assert as_optional(as_str)('a') == 'a'


def test_enum_rejects_unknown_discriminant():
    assert as_enum(GoldCheck)(2) == GoldCheck.LT
    with pytest.raises(RangeError, match='GoldCheck'):
        as_enum(GoldCheck)(3)


def test_audio_file_rejects_unknown_keys():
    audio = {'name': 'Town1', 'pan': 0, 'pitch': 100, 'volume': 90}
    assert as_audio_file(audio) == AudioFile('Town1', 0, 100, 90)
    with pytest.raises(TypeMismatch):
        as_audio_file({**audio, 'extra': 1})


def test_move_command_optional_fields():
    assert as_move_command({'code': 0}) == MoveCommand(code=0)
    assert as_move_command({'code': 1, 'indent': None}) == MoveCommand(code=1)
    assert as_move_command({'code': 14, 'parameters': [1, 0], 'indent': 0}) == MoveCommand(
        code=14, parameters=[1, 0], indent=0
    )


def test_move_route_reads_list_key():
    route = as_move_route(
        {'list': [{'code': 0}], 'repeat': False, 'skippable': True, 'wait': True}
    )
    assert route.commands == [MoveCommand(code=0)]
    assert route.skippable
    with pytest.raises(TypeMismatch):
        as_move_route({'list': [], 'repeat': False, 'skippable': True})


def test_ensure_len_is():
    reader = ParamReader([1, 2])
    reader.ensure_len_is(2)
    with pytest.raises(ArityMismatch, match='expected 3 parameters, but got 2'):
        reader.ensure_len_is(3)
    with pytest.raises(ArityMismatch):
        reader.ensure_len_is(1)


def test_ensure_len_is_at_least():
    reader = ParamReader([1, 2])
    reader.ensure_len_is_at_least(1)
    reader.ensure_len_is_at_least(2)
    with pytest.raises(ArityMismatch, match='at least 3'):
        reader.ensure_len_is_at_least(3)


def test_read_at_attaches_field_context():
    reader = ParamReader(['face', 'oops'])
    with pytest.raises(TypeMismatch) as info:
        reader.read_at(1, 'face_index', as_u32)
    assert info.value.field == 'face_index'
    assert info.value.index == 1
    assert 'failed to read parameter "face_index" at index 1' in str(info.value)


def test_read_at_out_of_range_is_arity_mismatch():
    reader = ParamReader([])
    with pytest.raises(ArityMismatch) as info:
        reader.read_at(0, 'line', as_str)
    assert info.value.field == 'line'
    assert len(reader) == 0


@pytest.mark.parametrize(
    'parameters,convert,error',
    [
        ([], as_str, ArityMismatch),
        (['oops'], as_u32, TypeMismatch),
        ([2], int_bool, RangeError),
    ],
)
def test_read_at_keeps_error_kind(parameters, convert, error):
    with pytest.raises(error) as info:
        ParamReader(parameters).read_at(0, 'value', convert)
    assert type(info.value) is error
    assert not isinstance(info.value, AssertionError)
