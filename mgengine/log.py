"""Coloured console logging and the engine's safety-check levels."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any

RESET_COLOR = "\x1b[0m"
INFO_COLOR = "\x1b[1;34m"
DEBUG_COLOR = "\x1b[1;30m"
WARNING_COLOR = "\x1b[1;33m"
ERROR_COLOR = "\x1b[31m"

ENGINE_PREFIX = "[ENGINE]"

# Debug runs check everything, optimised runs only fatal conditions.
SECURITY_CHECKS = 3 if __debug__ else 1
SC_NONE = SECURITY_CHECKS == 0
SC_FATAL_ON = SECURITY_CHECKS >= 1
SC_ERROR_ON = SECURITY_CHECKS >= 2
SC_WARNING_ON = SECURITY_CHECKS >= 3


class Level(Enum):
    """A log level with its tag and terminal colour."""

    LOG = ("[LOG]", RESET_COLOR)
    TRACE = ("[TRACE]", RESET_COLOR)
    TEST = ("[TEST]", WARNING_COLOR)
    INFO = ("[INFO]", INFO_COLOR)
    DEBUG = ("[DEBUG]", DEBUG_COLOR)
    WARNING = ("[WARNING]", WARNING_COLOR)
    ERROR = ("[ERROR]", ERROR_COLOR)
    FATAL = ("[FATAL ERROR]", ERROR_COLOR)

    def __init__(self, label: str, color: str) -> None:
        self.label = label
        self.color = color


class EngineFatalError(RuntimeError):
    """Raised when the engine meets a condition it cannot continue from."""


def _format(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _message(args: tuple) -> str:
    return "".join(_format(arg) for arg in args)


def log(level: Level, *args: Any, engine: bool = False) -> str:
    """Write one coloured line to standard output and return it."""
    tag = f"{ENGINE_PREFIX} {level.label}" if engine else level.label
    line = f"{level.color}{tag} {_message(args)}{RESET_COLOR}"
    sys.stdout.write(line + "\n")
    return line


def fatal(*args: Any) -> None:
    """Log a fatal engine error and raise :class:`EngineFatalError`."""
    log(Level.FATAL, *args, engine=True)
    raise EngineFatalError(_message(args))