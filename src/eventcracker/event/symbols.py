import os
from enum import Enum
from functools import partialmethod
from typing import Any, Dict, Mapping, Optional

import yaml


class SymbolTableError(ValueError):
    def __init__(self, path: Optional[str], reason: str) -> None:
        super().__init__(f'invalid symbol table {path}: {reason}')
        self.path = path
        self.reason = reason


class Category(Enum):
    SWITCH = ('switches', 'game_switch')
    VARIABLE = ('variables', 'game_variable')
    COMMON_EVENT = ('common-events', 'common_event')
    ACTOR = ('actors', 'game_actor')
    SKILL = ('skills', 'game_skill')
    ITEM = ('items', 'game_item')
    STATE = ('states', 'game_state')
    TROOP = ('troops', 'game_troop')
    ARMOR = ('armors', 'game_armor')
    CLASS = ('classes', 'game_class')

    def __init__(self, key: str, prefix: str) -> None:
        self.key = key
        self.prefix = prefix

    @classmethod
    def from_key(cls, key: str) -> 'Category':
        for category in cls:
            if category.key == key:
                return category
        raise KeyError(key)


class SymbolTable(object):
    """Display names of game objects, by category and id.

    Ids missing from the table get a generated name, so lookups never fail.
    """

    def __init__(self, names: Optional[Mapping[Category, Mapping[int, str]]] = None) -> None:
        self.names: Dict[Category, Dict[int, str]] = {
            category: dict(entries) for category, entries in (names or {}).items()
        }

    def name_for(self, category: Category, id: int) -> str:
        name = self.names.get(category, {}).get(id)
        return name if name is not None else f'{category.prefix}_{id}'

    switch = partialmethod(name_for, Category.SWITCH)
    variable = partialmethod(name_for, Category.VARIABLE)
    common_event = partialmethod(name_for, Category.COMMON_EVENT)
    actor = partialmethod(name_for, Category.ACTOR)
    skill = partialmethod(name_for, Category.SKILL)
    item = partialmethod(name_for, Category.ITEM)
    state = partialmethod(name_for, Category.STATE)
    troop = partialmethod(name_for, Category.TROOP)
    armor = partialmethod(name_for, Category.ARMOR)
    klass = partialmethod(name_for, Category.CLASS)


def parse_symbols(data: Any, path: Optional[str] = None) -> SymbolTable:
    if data is None:
        return SymbolTable()
    if not isinstance(data, dict):
        raise SymbolTableError(path, 'expected mapping of categories')
    names: Dict[Category, Dict[int, str]] = {}
    for key, entries in data.items():
        try:
            category = Category.from_key(key)
        except KeyError:
            raise SymbolTableError(path, f'unknown category {key!r}') from None
        if entries is None:
            entries = {}
        if not isinstance(entries, dict):
            raise SymbolTableError(path, f'expected mapping of ids to names in {key!r}')
        names[category] = {}
        for id, name in entries.items():
            if isinstance(id, bool) or not isinstance(id, (int, str)):
                raise SymbolTableError(path, f'{id!r} in {key!r} is not an integer id')
            if name is None or name == '':
                raise SymbolTableError(path, f'{id!r} in {key!r} has no name')
            try:
                names[category][int(id)] = str(name)
            except ValueError:
                raise SymbolTableError(path, f'{id!r} in {key!r} is not an integer id') from None
    return SymbolTable(names)


def load_symbols(path: str) -> SymbolTable:
    with open(path, 'r', encoding='utf-8') as stream:
        return parse_symbols(yaml.safe_load(stream), os.fspath(path))
