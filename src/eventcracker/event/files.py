import os
from enum import Enum
from typing import Any, Iterable, Iterator, List, Optional

from parse import parse

from eventcracker.kernel.types import EventCommand


class FileKind(Enum):
    MAP = 'map'
    COMMON_EVENTS = 'common-events'
    TROOPS = 'troops'

    @classmethod
    def from_path(cls, path: str) -> 'FileKind':
        name = os.path.basename(os.fspath(path))
        if name == 'CommonEvents.json':
            return cls.COMMON_EVENTS
        if name == 'Troops.json':
            return cls.TROOPS
        if parse('Map{:d}.json', name):
            return cls.MAP
        raise ValueError(f'failed to determine file kind for "{path}"')


class InvalidRecord(ValueError):
    def __init__(self, index: int, entry: Any) -> None:
        super().__init__(f'record {index} is not a valid event command: {entry!r}')
        self.index = index
        self.entry = entry


def select_object(objects: Any, event_id: int) -> Any:
    if not isinstance(objects, list) or not 0 <= event_id < len(objects):
        raise LookupError(f'no event with id {event_id}')
    obj = objects[event_id]
    if not isinstance(obj, dict):
        raise LookupError(f'no event with id {event_id}')
    if obj.get('id') != event_id:
        raise LookupError(f'event at index {event_id} has mismatching id {obj.get("id")!r}')
    return obj


def select_page(obj: Any, event_page: Optional[int]) -> Any:
    pages = obj.get('pages')
    if not isinstance(pages, list):
        raise LookupError(f'event {obj["id"]} has no pages')
    if event_page is None:
        if len(pages) != 1:
            raise LookupError(
                'found multiple event pages. specify which one with the --event-page option'
            )
        event_page = 0
    if not 0 <= event_page < len(pages):
        raise LookupError(f'no event page with index {event_page}')
    return pages[event_page]


def get_event_commands(
    data: Any, kind: FileKind, event_id: int, event_page: Optional[int] = None
) -> List[Any]:
    """Select raw command list of single event page from parsed game data."""
    if kind == FileKind.COMMON_EVENTS:
        if event_page is not None:
            raise LookupError(
                'common events do not have pages, remove the --event-page option'
            )
        page = select_object(data, event_id)
    else:
        events = data.get('events') if kind == FileKind.MAP and isinstance(data, dict) else data
        page = select_page(select_object(events, event_id), event_page)

    commands = page.get('list') if isinstance(page, dict) else None
    if not isinstance(commands, list):
        raise LookupError(f'event {event_id} has no command list')
    return commands


def iter_records(entries: Iterable[Any]) -> Iterator[EventCommand]:
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise InvalidRecord(index, entry)
        code = entry.get('code')
        indent = entry.get('indent')
        parameters = entry.get('parameters')
        if (
            isinstance(code, bool)
            or not isinstance(code, int)
            or code < 0
            or isinstance(indent, bool)
            or not isinstance(indent, int)
            or indent < 0
            or not isinstance(parameters, list)
        ):
            raise InvalidRecord(index, entry)
        yield EventCommand(code, indent, parameters)


def read_records(entries: Iterable[Any]) -> List[EventCommand]:
    return list(iter_records(entries))
