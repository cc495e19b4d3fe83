"""Category-tagged, coloured logging to one or more text streams."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO

__all__ = [
    "ANSI_RESET",
    "ANSI_FG_BLACK",
    "ANSI_FG_RED",
    "ANSI_FG_GREEN",
    "ANSI_FG_YELLOW",
    "ANSI_FG_BLUE",
    "ANSI_FG_MAGENTA",
    "ANSI_FG_CYAN",
    "ANSI_FG_WHITE",
    "LogLevel",
    "Logger",
    "get_logger",
]

ANSI_RESET = "\x1b[1;0m"
ANSI_FG_BLACK = "\x1b[1;30m"
ANSI_FG_RED = "\x1b[1;31m"
ANSI_FG_GREEN = "\x1b[1;32m"
ANSI_FG_YELLOW = "\x1b[1;33m"
ANSI_FG_BLUE = "\x1b[1;34m"
ANSI_FG_MAGENTA = "\x1b[1;35m"
ANSI_FG_CYAN = "\x1b[1;36m"
ANSI_FG_WHITE = "\x1b[1;37m"


class LogLevel(Enum):
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    @property
    def color(self) -> str:
        return _LEVEL_COLORS[self]


_LEVEL_COLORS = {
    LogLevel.DEBUG: ANSI_FG_MAGENTA,
    LogLevel.INFO: ANSI_FG_BLUE,
    LogLevel.WARNING: ANSI_FG_YELLOW,
    LogLevel.ERROR: ANSI_FG_RED,
}


class Logger:
    """Writes each message to the given stream and to every subscribed one."""

    def __init__(self) -> None:
        self._subscribed: list[TextIO] = []

    def subscribe(self, stream: TextIO) -> None:
        """Duplicate every later message to this stream."""
        if any(s is stream for s in self._subscribed):
            self.log(
                "Logger subscription",
                LogLevel.WARNING,
                "Registering an already subscribed stream",
            )
        self._subscribed.append(stream)

    def log(
        self,
        category: str,
        level: LogLevel,
        message: str,
        stream: TextIO | None = None,
    ) -> None:
        """Write '[category] message' with the level's colour on the tag."""
        target = sys.stdout if stream is None else stream
        line = f"{level.color}[{category}] {ANSI_RESET}{message}\n"
        for current in [*self._subscribed, target]:
            current.write(line)


_default_logger = Logger()


def get_logger() -> Logger:
    """Return the process-wide logger."""
    return _default_logger