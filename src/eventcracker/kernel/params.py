from enum import IntEnum
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Sequence, Type, TypeVar

import deal

from .errors import ArityMismatch, RangeError, TypeMismatch, field_context
from .types import AudioFile, MoveCommand, MoveRoute

T = TypeVar('T')
E = TypeVar('E', bound=IntEnum)
Converter = Callable[[Any], T]


def as_value(value: Any) -> Any:
    return value


def as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeMismatch('string', value)
    return value


def as_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeMismatch('boolean', value)
    return value


def as_int(value: Any, bits: int = 64, signed: bool = True) -> int:
    kind = f'{"i" if signed else "u"}{bits}'
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatch(kind, value)
    low, high = (-(1 << (bits - 1)), (1 << (bits - 1)) - 1) if signed else (0, (1 << bits) - 1)
    if not low <= value <= high:
        raise TypeMismatch(kind, value)
    return value


as_i64 = partial(as_int, bits=64, signed=True)
as_i32 = partial(as_int, bits=32, signed=True)
as_i16 = partial(as_int, bits=16, signed=True)
as_u32 = partial(as_int, bits=32, signed=False)
as_u8 = partial(as_int, bits=8, signed=False)


def int_bool(value: Any) -> bool:
    # stored as 0/1 where 0 is the affirmative case
    value = as_i64(value)
    if value not in {0, 1}:
        raise RangeError(value, 'IntBool')
    return value == 0


def as_str_list(value: Any) -> List[str]:
    return as_array(as_str)(value)


def as_optional(convert: Converter[T]) -> Converter[Optional[T]]:
    def converter(value: Any) -> Optional[T]:
        return None if value is None else convert(value)

    return converter


def as_array(convert: Converter[T], length: Optional[int] = None) -> Converter[List[T]]:
    def converter(value: Any) -> List[T]:
        if not isinstance(value, list):
            raise TypeMismatch('array', value)
        if length is not None and len(value) != length:
            raise TypeMismatch(f'array of length {length}', value)
        return [convert(item) for item in value]

    return converter


def as_enum(enum_type: Type[E]) -> Converter[E]:
    def converter(value: Any) -> E:
        value = as_i64(value)
        try:
            return enum_type(value)
        except ValueError:
            raise RangeError(value, enum_type.__name__) from None

    return converter


def as_object(value: Any, required: Sequence[str], optional: Sequence[str] = ()) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeMismatch('object', value)
    missing = [key for key in required if key not in value]
    unknown = [key for key in value if key not in {*required, *optional}]
    if missing or unknown:
        raise TypeMismatch(f'object with keys {list(required)}', value)
    return value


def as_move_command(value: Any) -> MoveCommand:
    obj = as_object(value, ('code',), ('indent', 'parameters'))
    return MoveCommand(
        code=as_u32(obj['code']),
        parameters=as_optional(as_array(as_value))(obj.get('parameters')),
        indent=as_optional(as_u32)(obj.get('indent')),
    )


def as_move_route(value: Any) -> MoveRoute:
    obj = as_object(value, ('list', 'repeat', 'skippable', 'wait'))
    return MoveRoute(
        commands=as_array(as_move_command)(obj['list']),
        repeat=as_bool(obj['repeat']),
        skippable=as_bool(obj['skippable']),
        wait=as_bool(obj['wait']),
    )


def as_audio_file(value: Any) -> AudioFile:
    obj = as_object(value, ('name', 'pan', 'pitch', 'volume'))
    return AudioFile(
        name=as_str(obj['name']),
        pan=as_i32(obj['pan']),
        pitch=as_u32(obj['pitch']),
        volume=as_u32(obj['volume']),
    )


class ParamReader(object):
    """Checked view over the parameters of a single record."""

    def __init__(self, parameters: Sequence[Any]) -> None:
        self.parameters = parameters

    def __len__(self) -> int:
        return len(self.parameters)

    @deal.chain(
        deal.pre(lambda _: _.expected >= 0),
        deal.raises(ArityMismatch),
        deal.reason(ArityMismatch, lambda _: len(_.self) != _.expected),
        deal.has(),
    )
    def ensure_len_is(self, expected: int) -> None:
        if len(self.parameters) != expected:
            raise ArityMismatch(expected, len(self.parameters))

    @deal.chain(
        deal.pre(lambda _: _.expected >= 0),
        deal.raises(ArityMismatch),
        deal.reason(ArityMismatch, lambda _: len(_.self) < _.expected),
        deal.has(),
    )
    def ensure_len_is_at_least(self, expected: int) -> None:
        if len(self.parameters) < expected:
            raise ArityMismatch(expected, len(self.parameters), at_least=True)

    @deal.chain(
        deal.pre(lambda _: _.index >= 0),
        deal.raises(ArityMismatch, TypeMismatch, RangeError),
    )
    def read_at(self, index: int, name: str, convert: Converter[T] = as_value) -> T:
        with field_context(name, index):
            if index >= len(self.parameters):
                raise ArityMismatch(index + 1, len(self.parameters), at_least=True)
            return convert(self.parameters[index])
