from contextlib import contextmanager
from typing import Any, Iterator, Optional


class DecodeError(ValueError):
    """Failure to decode a single event command record.

    field, index -
        name and position of the offending parameter, when known

    record_index, code, indent -
        position, command code and indent of the offending record,
        attached by the assembler
    """

    field: Optional[str] = None
    index: Optional[int] = None
    record_index: Optional[int] = None
    code: Any = None
    indent: Optional[int] = None

    def __str__(self) -> str:
        message = super().__str__()
        if self.field is not None:
            message = f'failed to read parameter "{self.field}" at index {self.index}: {message}'
        if self.record_index is not None:
            message = f'failed to parse {self.code!r} command at record {self.record_index}: {message}'
        return message


class ArityMismatch(DecodeError):
    def __init__(self, expected: int, actual: int, at_least: bool = False) -> None:
        qualifier = 'at least ' if at_least else ''
        super().__init__(f'expected {qualifier}{expected} parameters, but got {actual}')
        self.expected = expected
        self.actual = actual
        self.at_least = at_least


class TypeMismatch(DecodeError):
    def __init__(self, expected: str, value: Any) -> None:
        super().__init__(f'expected {expected}, got {value!r}')
        self.expected = expected
        self.value = value


class RangeError(DecodeError):
    def __init__(self, value: Any, domain: str) -> None:
        super().__init__(f'{value!r} is not a valid {domain}')
        self.value = value
        self.domain = domain


class UnsupportedVariant(DecodeError):
    def __init__(self, kind: str, variant: Any) -> None:
        name = getattr(variant, 'name', variant)
        super().__init__(f'{kind} {name} is not supported')
        self.kind = kind
        self.variant = variant


@contextmanager
def field_context(field: str, index: int) -> Iterator[None]:
    try:
        yield
    except DecodeError as exc:
        if exc.field is None:
            exc.field = field
            exc.index = index
        raise


@contextmanager
def record_context(record_index: int, code: Any, indent: int) -> Iterator[None]:
    try:
        yield
    except DecodeError as exc:
        if exc.record_index is None:
            exc.record_index = record_index
            exc.code = code
            exc.indent = indent
        raise
