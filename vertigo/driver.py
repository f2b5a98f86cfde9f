"""Driver-wide logging setup read from the environment."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping

from .logger import FileLogger, Logger, LogLevel, set_log_level, set_logger

LOG_LEVEL_VARIABLE = "VERTIGO_LOG_LEVEL"
LOG_FILE_VARIABLE = "VERTIGO_LOG_FILE"

_log = Logger("driver")

_UNSIGNED = re.compile(r"[0-9]+")
_MAX_UINT32 = 2**32 - 1


def log_level_from_value(value: str) -> LogLevel:
    """Map a numeric level string ('0' for TRACE up to '6' for NONE) to a LogLevel."""
    if not _UNSIGNED.fullmatch(value) or int(value) > _MAX_UINT32:
        raise ValueError(f"invalid syntax for log level: {value!r}")
    number = int(value)
    if number > LogLevel.NONE:
        raise ValueError(f"invalid {LOG_LEVEL_VARIABLE} value; should be 0-6")
    return LogLevel(number)


def configure_logging(environ: Mapping[str, str] | None = None) -> LogLevel:
    """Set the log level and backend from the environment; return the level set.

    The level defaults to WARN. An invalid level is reported and WARN kept;
    a log file that cannot be opened is reported and the backend kept.
    """
    if environ is None:
        environ = os.environ

    set_log_level(LogLevel.WARN)
    level = LogLevel.WARN

    raw_level = environ.get(LOG_LEVEL_VARIABLE, "")
    if raw_level:
        try:
            level = log_level_from_value(raw_level)
        except ValueError as exc:
            _log.error("%s", str(exc))
        set_log_level(level)

    log_file = environ.get(LOG_FILE_VARIABLE, "")
    if log_file:
        try:
            backend = FileLogger(log_file)
        except OSError as exc:
            _log.error("unable to create file logger: %v", exc)
        else:
            set_logger(backend)

    return level


configure_logging()