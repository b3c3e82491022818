import pytest

from eventcracker.event.files import (
    FileKind,
    InvalidRecord,
    get_event_commands,
    read_records,
)
from eventcracker.kernel.types import EventCommand

COMMANDS = [{'code': 0, 'indent': 0, 'parameters': []}]


def page(commands=COMMANDS):
    return {'conditions': {}, 'list': commands}


@pytest.mark.parametrize(
    'path,kind',
    [
        ('data/Map001.json', FileKind.MAP),
        ('Map12.json', FileKind.MAP),
        ('data/CommonEvents.json', FileKind.COMMON_EVENTS),
        ('Troops.json', FileKind.TROOPS),
    ],
)
def test_file_kind_from_path(path, kind):
    assert FileKind.from_path(path) == kind


@pytest.mark.parametrize('path', ['Actors.json', 'MapInfos.json', 'Map.json'])
def test_file_kind_rejects_other_files(path):
    with pytest.raises(ValueError):
        FileKind.from_path(path)


def test_map_single_page_is_default():
    data = {'events': [None, {'id': 1, 'pages': [page()]}]}
    assert get_event_commands(data, FileKind.MAP, 1) == COMMANDS


def test_map_multiple_pages_need_selection():
    other = [{'code': 230, 'indent': 0, 'parameters': [60]}]
    data = {'events': [None, {'id': 1, 'pages': [page(), page(other)]}]}
    with pytest.raises(LookupError, match='--event-page'):
        get_event_commands(data, FileKind.MAP, 1)
    assert get_event_commands(data, FileKind.MAP, 1, 1) == other
    with pytest.raises(LookupError, match='no event page with index 2'):
        get_event_commands(data, FileKind.MAP, 1, 2)


def test_missing_event():
    data = {'events': [None, {'id': 1, 'pages': [page()]}]}
    with pytest.raises(LookupError, match='no event with id 0'):
        get_event_commands(data, FileKind.MAP, 0)
    with pytest.raises(LookupError, match='no event with id 5'):
        get_event_commands(data, FileKind.MAP, 5)


def test_event_id_must_match():
    data = {'events': [None, {'id': 2, 'pages': [page()]}]}
    with pytest.raises(LookupError):
        get_event_commands(data, FileKind.MAP, 1)


def test_common_events_have_no_pages():
    data = [None, {'id': 1, 'name': 'shop', 'list': COMMANDS}]
    assert get_event_commands(data, FileKind.COMMON_EVENTS, 1) == COMMANDS
    with pytest.raises(LookupError, match='common events do not have pages'):
        get_event_commands(data, FileKind.COMMON_EVENTS, 1, 0)


def test_troops():
    data = [None, {'id': 1, 'members': [], 'pages': [page()]}]
    assert get_event_commands(data, FileKind.TROOPS, 1) == COMMANDS


def test_read_records():
    assert read_records(COMMANDS + [{'code': 230, 'indent': 1, 'parameters': [60]}]) == [
        EventCommand(0, 0, []),
        EventCommand(230, 1, [60]),
    ]


@pytest.mark.parametrize(
    'entry',
    [
        None,
        {'code': '0', 'indent': 0, 'parameters': []},
        {'code': 0, 'indent': -1, 'parameters': []},
        {'code': 0, 'indent': 0},
    ],
)
def test_read_records_rejects_malformed_entries(entry):
    with pytest.raises(InvalidRecord):
        read_records([entry])
