"""File and call-site helpers."""

from __future__ import annotations

import inspect
import os
from collections.abc import Iterable


def get_readable_file_sizes(file_list: Iterable[str | os.PathLike[str]]) -> list[int]:
    """Return the size in bytes of each file; raises OSError if one cannot be read."""
    return [os.stat(name).st_size for name in file_list]


def _caller_frame():
    frame = inspect.currentframe()
    # Skip this helper and the public function that called it.
    caller = frame.f_back.f_back if frame is not None and frame.f_back is not None else None
    if caller is None:
        raise RuntimeError("unable to determine the calling frame")
    return caller


def current_line() -> int:
    """Return the line number of the caller."""
    return _caller_frame().f_lineno


def current_file() -> str:
    """Return the source file name of the caller."""
    return _caller_frame().f_code.co_filename