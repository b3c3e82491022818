from dataclasses import dataclass, replace
from typing import Any, TypeVar

from . import settings
from .script.opcodes import DIALECT_mv, DIALECT_mz

_SettingT = TypeVar('_SettingT', bound='_DefaultOverride')


@dataclass(frozen=True)
class _DefaultOverride(object):
    def __call__(self: _SettingT, **kwargs: Any) -> _SettingT:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class _EventPreset(settings._AssembleSetting, _DefaultOverride):

    # isort: off
    from .script.assembler import (
        assemble,
    )
    # isort: on


rpgmv = _EventPreset(dialect=DIALECT_mv)
rpgmz = _EventPreset(dialect=DIALECT_mz)

PRESETS = {
    'mv': rpgmv,
    'mz': rpgmz,
}
