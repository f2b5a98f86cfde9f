"""Per-call settings for COPY input and in-memory result limits."""

from __future__ import annotations

import sys
from typing import BinaryIO

MIN_COPY_BLOCK_SIZE = 16384
STDIN_DEFAULT_COPY_BLOCK_SIZE = 65536


def _default_input_stream() -> BinaryIO:
    return getattr(sys.stdin, "buffer", sys.stdin)


class VerticaContext:
    """Settings used when copying from standard input and when buffering results.

    The input stream defaults to standard input, the copy block size to 64 KiB
    and the in-memory row limit to 0 (no limit).
    """

    def __init__(
        self,
        input_stream: BinaryIO | None = None,
        block_size: int = STDIN_DEFAULT_COPY_BLOCK_SIZE,
        row_limit: int = 0,
    ) -> None:
        self.input_stream = _default_input_stream() if input_stream is None else input_stream
        self.block_size = block_size
        self.row_limit = row_limit

    @property
    def input_stream(self) -> BinaryIO:
        """Stream read from when copying from standard input."""
        return self._input_stream

    @input_stream.setter
    def input_stream(self, stream: BinaryIO) -> None:
        if stream is None:
            raise ValueError("cannot set the copy input stream to None")
        self._input_stream = stream

    @property
    def block_size(self) -> int:
        """Size in bytes of each block sent from the input stream."""
        return self._block_size

    @block_size.setter
    def block_size(self, size: int) -> None:
        if size < MIN_COPY_BLOCK_SIZE:
            raise ValueError(
                f"cannot set copy block size to less than {MIN_COPY_BLOCK_SIZE}"
            )
        self._block_size = size

    @property
    def row_limit(self) -> int:
        """Largest number of result rows held in memory; 0 means no limit."""
        return self._row_limit

    @row_limit.setter
    def row_limit(self, limit: int) -> None:
        if limit < 0:
            raise ValueError("cannot set result limit to a negative number")
        self._row_limit = limit

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(input_stream={self._input_stream!r}, "
            f"block_size={self._block_size}, row_limit={self._row_limit})"
        )