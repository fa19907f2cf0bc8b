"""Small leveled logger writing to stderr and registered callbacks."""

from __future__ import annotations

import contextlib
import sys
import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, ContextManager, Optional, TextIO

MAX_CALLBACKS = 32


class LogLevel(IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5


def level_string(level: int) -> str:
    """Return the upper-case name of a log level."""
    return LogLevel(level).name


@dataclass
class LogEvent:
    """A single log record handed to callbacks."""

    level: int
    file: str
    line: int
    message: str
    time: time.struct_time


def _format_line(event: LogEvent, time_format: str) -> str:
    stamp = time.strftime(time_format, event.time)
    return (
        f"{stamp} {level_string(event.level):<5} "
        f"{event.file}:{event.line}: {event.message}\n"
    )


class Logger:
    """Dispatches messages to stderr and to up to 32 callbacks."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._lock: Optional[ContextManager] = None
        self.level = int(LogLevel.TRACE)
        self.quiet = False
        self._callbacks: list[tuple[Callable[[LogEvent], None], int]] = []

    def set_lock(self, lock: Optional[ContextManager]) -> None:
        """Use ``lock`` (a context manager) around every dispatch."""
        self._lock = lock

    def set_level(self, level: int) -> None:
        """Set the minimum level written to the console stream."""
        self.level = int(level)

    def set_quiet(self, enable: bool) -> None:
        """Silence or restore the console stream."""
        self.quiet = bool(enable)

    def add_callback(self, fn: Callable[[LogEvent], None], level: int) -> None:
        """Register a callback for events at ``level`` or above."""
        if len(self._callbacks) >= MAX_CALLBACKS:
            raise RuntimeError("too many log callbacks")
        self._callbacks.append((fn, int(level)))

    def add_stream(self, stream: TextIO, level: int) -> None:
        """Write events at ``level`` or above to ``stream`` with full dates."""

        def write(event: LogEvent) -> None:
            stream.write(_format_line(event, "%Y-%m-%d %H:%M:%S"))
            stream.flush()

        self.add_callback(write, level)

    def log(self, level: int, file: str, line: int, message: str, *args) -> None:
        """Emit a message; ``args`` are %-formatted into it. FATAL exits."""
        text = message % args if args else message
        event = LogEvent(int(level), file, line, text, time.localtime())
        with self._lock if self._lock is not None else contextlib.nullcontext():
            if not self.quiet and level >= self.level:
                out = self._stream if self._stream is not None else sys.stderr
                out.write(_format_line(event, "%H:%M:%S"))
                out.flush()
            for fn, cb_level in self._callbacks:
                if level >= cb_level:
                    fn(event)
        if level == LogLevel.FATAL:
            raise SystemExit(1)