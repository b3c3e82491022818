import logging
from dataclasses import dataclass

from .script.opcodes import DIALECT_mv, Dialect


@dataclass(frozen=True)
class _AssembleSetting(object):
    """Setting for assembling event commands

    dialect: Dialect (default DIALECT_mv) -
        command names and decode routines of the engine version

    logger: logging.Logger (default logging.root) -
        receives warnings for undecoded records and per record tracing
    """

    dialect: Dialect = DIALECT_mv
    logger: logging.Logger = logging.root
