from dataclasses import dataclass
from typing import Any, Generic, List, NamedTuple, Optional, Sequence, TypeVar, Union

T = TypeVar('T')


class EventCommand(NamedTuple):
    """Raw event command record as stored in game data files

    code: int -
        numeric command code, meaning depends on the dialect

    indent: int -
        nesting level of the command inside its list

    parameters: sequence -
        untyped JSON parameters, shape depends on the code
    """

    code: int
    indent: int
    parameters: Sequence[Any]


@dataclass(frozen=True)
class Constant(Generic[T]):
    value: T


@dataclass(frozen=True)
class Ref(object):
    """Reference to the current value of a game variable."""

    id: int


MaybeRef = Union[Constant[T], Ref]


def maybe_ref(is_constant: bool, value: T) -> 'MaybeRef[T]':
    return Constant(value) if is_constant else Ref(value)  # type: ignore


@dataclass(frozen=True)
class MoveCommand(object):
    """Single step of a movement route, kept verbatim

    code: int -
        movement command code

    parameters: optional list -
        raw movement parameters

    indent: optional int
    """

    code: int
    parameters: Optional[List[Any]] = None
    indent: Optional[int] = None


@dataclass(frozen=True)
class MoveRoute(object):
    commands: List[MoveCommand]
    repeat: bool
    skippable: bool
    wait: bool


@dataclass(frozen=True)
class AudioFile(object):
    name: str
    pan: int
    pitch: int
    volume: int
