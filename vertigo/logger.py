"""Levelled logging with pluggable output backends."""

from __future__ import annotations

import enum
import inspect
import os
import re
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol, TextIO


class LogLevel(enum.IntEnum):
    """Severity levels, from most to least verbose."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5
    NONE = 6


class _Backend(Protocol):
    def write(self, prefix: str, name: str, msg: str) -> None: ...

    def close(self) -> None: ...


_DIRECTIVE = re.compile(r"%([%v])")


def _timestamp(now: datetime | None = None) -> str:
    """Format a time as 'Jan _2 15:04:05.000000'."""
    now = now or datetime.now()
    return f"{now:%b} {now.day:>2} {now:%H:%M:%S}.{now.microsecond:06d}"


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    converted = _DIRECTIVE.sub(lambda m: "%%" if m.group(1) == "%" else "%s", fmt)
    if not args:
        return converted.replace("%%", "%")
    try:
        return converted % args
    except (TypeError, ValueError):
        return " ".join([fmt, *map(str, args)])


def _line(prefix: str, name: str, msg: str) -> str:
    return f"{_timestamp()} {prefix} {name}: {msg}\n"


class StdioLogger:
    """Backend that writes log lines to standard output."""

    def write(self, prefix: str, name: str, msg: str) -> None:
        sys.stdout.write(_line(prefix, name, msg))

    def close(self) -> None:
        """Flush pending output; standard output itself stays open."""
        sys.stdout.flush()


class FileLogger:
    """Backend that appends log lines to a file created with mode 0600."""

    def __init__(self, filename: str | os.PathLike[str]) -> None:
        fd = os.open(filename, os.O_CREAT | os.O_APPEND | os.O_WRONLY, 0o600)
        self._fp: TextIO | None = os.fdopen(fd, "a", encoding="utf-8")

    def write(self, prefix: str, name: str, msg: str) -> None:
        if self._fp is None:
            raise ValueError("write to a closed file logger")
        self._fp.write(_line(prefix, name, msg))
        self._fp.flush()

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    def __enter__(self) -> FileLogger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass
class _Settings:
    level: LogLevel
    backend: _Backend


_settings = _Settings(level=LogLevel.WARN, backend=StdioLogger())


class Logger:
    """A named logger that writes through the shared backend."""

    def __init__(self, name: str) -> None:
        self.name = name

    def _emit(self, level: LogLevel, fmt: str, args: tuple[Any, ...]) -> None:
        if _settings.level <= level:
            _settings.backend.write(level.name, self.name, _format(fmt, args))

    def line_trace(self) -> None:
        """Log the caller's file and line at TRACE level."""
        if _settings.level != LogLevel.TRACE:
            return
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        if caller is None:
            self.warn("unable to determine stack frame in line_trace()")
        else:
            self.trace("%s(%d)", caller.f_code.co_filename, caller.f_lineno)

    def trace(self, fmt: str, *args: Any) -> None:
        self._emit(LogLevel.TRACE, fmt, args)

    def debug(self, fmt: str, *args: Any) -> None:
        self._emit(LogLevel.DEBUG, fmt, args)

    def info(self, fmt: str, *args: Any) -> None:
        self._emit(LogLevel.INFO, fmt, args)

    def warn(self, fmt: str, *args: Any) -> None:
        self._emit(LogLevel.WARN, fmt, args)

    def error(self, fmt: str, *args: Any) -> None:
        self._emit(LogLevel.ERROR, fmt, args)

    def fatal(self, fmt: str, *args: Any) -> None:
        """Log at FATAL level and exit with status 1."""
        if _settings.level <= LogLevel.FATAL:
            self._emit(LogLevel.FATAL, fmt, args)
            sys.exit(1)


def set_log_level(level: LogLevel) -> None:
    _settings.level = LogLevel(level)


def get_log_level() -> LogLevel:
    return _settings.level


def set_logger(backend: _Backend) -> None:
    """Replace the shared backend, closing the previous one."""
    if backend is not _settings.backend:
        _settings.backend.close()
        _settings.backend = backend


def get_logger() -> _Backend:
    return _settings.backend