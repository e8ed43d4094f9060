"""Levelled, coloured console logging."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import TextIO

from ezstore.paths import join


class LogLevel(IntEnum):
    """How much the application prints."""

    QUIET = 1
    """No output at all."""
    MINIMAL = 2
    """Only success and error messages."""
    NORMAL = 3
    """Minimal plus info and warning messages."""
    DETAILED = 4
    """Normal plus debug messages and tracing of network errors to a file."""


_LEVELS = {
    "q": LogLevel.QUIET,
    "m": LogLevel.MINIMAL,
    "n": LogLevel.NORMAL,
    "d": LogLevel.DETAILED,
}

_GRAY = "90;1"
_BLUE = "34;1"
_GREEN = "32;1"
_YELLOW = "33;1"
_RED = "31;1"


def parse_level(value: str) -> LogLevel:
    """Return the log level named by a one-letter code."""
    try:
        return _LEVELS[value]
    except KeyError:
        raise ValueError(f"{value} is invalid log level") from None


def _default_trace_file() -> str:
    program = sys.argv[0] if sys.argv and sys.argv[0] else ""
    directory = Path(program).resolve().parent if program else Path.cwd()
    name = f"{datetime.now():%y%m%d%H%M%S}.log"
    return join(str(directory).replace("\\", "/"), name)


def _supports_color(stream: TextIO) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


@dataclass
class Logger:
    """Writes marked messages to stdout or stderr depending on the level."""

    level: LogLevel = LogLevel.NORMAL
    stdout: TextIO | None = None
    stderr: TextIO | None = None
    color: bool | None = None
    trace_file: str = field(default_factory=_default_trace_file)

    def _emit(self, to_stderr: bool, style: str, mark: str, message: str, args: tuple) -> None:
        if to_stderr:
            stream = self.stderr if self.stderr is not None else sys.stderr
        else:
            stream = self.stdout if self.stdout is not None else sys.stdout
        text = message % args if args else message
        use_color = self.color if self.color is not None else _supports_color(stream)
        prefix = f"\x1b[{style}m{mark}\x1b[0m" if use_color else mark
        print(prefix, text, file=stream)

    def debug(self, message: str, *args: object) -> None:
        """Print a "[DEB]" message to stdout when the level is DETAILED."""
        if self.level == LogLevel.DETAILED:
            self._emit(False, _GRAY, "[DEB]", message, args)

    def info(self, message: str, *args: object) -> None:
        """Print an "[INF]" message to stdout when the level is NORMAL or above."""
        if self.level >= LogLevel.NORMAL:
            self._emit(False, _BLUE, "[INF]", message, args)

    def warning(self, message: str, *args: object) -> None:
        """Print a "[WRN]" message to stderr when the level is NORMAL or above."""
        if self.level >= LogLevel.NORMAL:
            self._emit(True, _YELLOW, "[WRN]", message, args)

    def success(self, message: str, *args: object) -> None:
        """Print an "[SCC]" message to stdout when the level is MINIMAL or above."""
        if self.level >= LogLevel.MINIMAL:
            self._emit(False, _GREEN, "[SCC]", message, args)

    def error(self, message: str, *args: object) -> None:
        """Print an "[ERR]" message to stderr when the level is MINIMAL or above."""
        if self.level >= LogLevel.MINIMAL:
            self._emit(True, _RED, "[ERR]", message, args)