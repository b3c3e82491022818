import copy
from typing import Iterable, List, Optional, Tuple

from eventcracker.kernel.errors import record_context
from eventcracker.kernel.params import ParamReader
from eventcracker.kernel.types import EventCommand

from ..settings import _AssembleSetting
from .codes import CommandCode
from .commands import Command, PendingCommand, Unknown

Assembled = List[Tuple[int, Command]]


def decode_command(
    cfg: _AssembleSetting, index: int, code: CommandCode, record: EventCommand
) -> Command:
    decode = cfg.dialect.opcodes.get(code.value)
    if not decode:
        cfg.logger.warning(
            f'record {index}: no decoder for command {code!r}, keeping raw parameters'
        )
        return Unknown(code, copy.deepcopy(list(record.parameters)))
    return decode(ParamReader(record.parameters))


def assemble(cfg: _AssembleSetting, records: Iterable[EventCommand]) -> Assembled:
    """Decode event command records into (indent, command) pairs.

    Continuation records are merged into the command right before them
    and do not produce an entry of their own.
    Raises DecodeError on the first malformed record.
    """
    commands: Assembled = []
    pending: Optional[PendingCommand] = None
    for index, record in enumerate(records):
        code = cfg.dialect.resolve(record.code)
        with record_context(index, code, record.indent):
            extend = cfg.dialect.extends.get(code.value)
            if pending and extend and extend(pending, ParamReader(record.parameters)):
                cfg.logger.debug(f'record {index}: {code!r} merged into previous command')
                continue
            command = decode_command(cfg, index, code, record)
        cfg.logger.debug(f'record {index}: {code!r} -> {command}')
        commands.append((record.indent, command))
        pending = PendingCommand(command)
    return commands
