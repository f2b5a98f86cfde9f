import io
import sys

import pytest

from vertigo.context import (
    MIN_COPY_BLOCK_SIZE,
    STDIN_DEFAULT_COPY_BLOCK_SIZE,
    VerticaContext,
)


def test_defaults(monkeypatch):
    raw = io.BytesIO(b"a|b\n")
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(raw))
    ctx = VerticaContext()
    assert ctx.block_size == 65536
    assert ctx.row_limit == 0
    assert ctx.input_stream is raw


def test_explicit_stream_is_kept():
    stream = io.BytesIO(b"1,2\n")
    ctx = VerticaContext(stream)
    assert ctx.input_stream is stream
    assert ctx.input_stream.read() == b"1,2\n"


def test_replace_stream():
    ctx = VerticaContext(io.BytesIO())
    other = io.BytesIO(b"x")
    ctx.input_stream = other
    assert ctx.input_stream is other


def test_none_stream_rejected():
    stream = io.BytesIO(b"keep")
    ctx = VerticaContext(stream)
    with pytest.raises(ValueError):
        ctx.input_stream = None
    assert ctx.input_stream is stream
    assert ctx.input_stream.read() == b"keep"


def test_block_size_minimum_accepted():
    ctx = VerticaContext(io.BytesIO(), block_size=MIN_COPY_BLOCK_SIZE)
    assert ctx.block_size == 16384


def test_block_size_below_minimum_rejected():
    ctx = VerticaContext(io.BytesIO())
    with pytest.raises(ValueError, match="less than 16384"):
        ctx.block_size = MIN_COPY_BLOCK_SIZE - 1
    assert ctx.block_size == STDIN_DEFAULT_COPY_BLOCK_SIZE


def test_block_size_below_minimum_rejected_in_constructor():
    with pytest.raises(ValueError):
        VerticaContext(io.BytesIO(), block_size=1024)


def test_row_limit_set_and_read_back():
    ctx = VerticaContext(io.BytesIO())
    ctx.row_limit = 500
    assert ctx.row_limit == 500


def test_negative_row_limit_rejected():
    ctx = VerticaContext(io.BytesIO(), row_limit=10)
    with pytest.raises(ValueError, match="negative"):
        ctx.row_limit = -1
    assert ctx.row_limit == 10