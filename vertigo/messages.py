"""Decoding of backend protocol messages."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Callable, Union

Tag = Union[str, bytes, int]


class UnknownMessageError(ValueError):
    """Raised when a backend message tag has no registered decoder."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"unknown backend message type: {tag!r}")
        self.tag = tag


class _BodyReader:
    """Sequential big-endian reader over a message body."""

    def __init__(self, body: bytes) -> None:
        self._view = memoryview(bytes(body))
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._view) - self._pos

    def _take(self, size: int) -> bytes:
        if size > self.remaining:
            raise ValueError(
                f"message body truncated: needed {size} byte(s), {self.remaining} left"
            )
        chunk = self._view[self._pos : self._pos + size].tobytes()
        self._pos += size
        return chunk

    def int32(self) -> int:
        return struct.unpack(">i", self._take(4))[0]

    def uint16(self) -> int:
        return struct.unpack(">H", self._take(2))[0]

    def rest(self) -> bytes:
        return self._take(self.remaining)

    def string(self) -> str:
        data = self._view[self._pos :].tobytes()
        end = data.find(b"\x00")
        if end < 0:
            raise ValueError("message body holds an unterminated string")
        self._pos += end + 1
        return data[:end].decode("utf-8")


_DECODERS: dict[str, Callable[[bytes], object]] = {}


def _register(tag: str):
    def decorate(cls):
        _DECODERS[tag] = cls.from_body
        return cls

    return decorate


@_register("R")
@dataclass(frozen=True)
class AuthenticationMessage:
    """Authentication request; extra_auth_data holds any salt that follows."""

    response: int
    extra_auth_data: bytes = b""

    @classmethod
    def from_body(cls, body: bytes) -> AuthenticationMessage:
        reader = _BodyReader(body)
        response = reader.int32()
        return cls(response=response, extra_auth_data=reader.rest())

    def __str__(self) -> str:
        return (
            f"Authentication: {self.response}, "
            f"extraAuthData {len(self.extra_auth_data)} byte(s)"
        )


@_register("2")
@dataclass(frozen=True)
class BindCompleteMessage:
    """Acknowledgement that a bind succeeded."""

    @classmethod
    def from_body(cls, body: bytes) -> BindCompleteMessage:
        return cls()

    def __str__(self) -> str:
        return "BindComplete"


@_register("3")
@dataclass(frozen=True)
class CloseCompleteMessage:
    """Acknowledgement that a close succeeded."""

    @classmethod
    def from_body(cls, body: bytes) -> CloseCompleteMessage:
        return cls()

    def __str__(self) -> str:
        return "CloseComplete"


@_register("C")
@dataclass(frozen=True)
class CommandCompleteMessage:
    """Completion of a command, carrying its command tag."""

    tag: str

    @classmethod
    def from_body(cls, body: bytes) -> CommandCompleteMessage:
        return cls(tag=_BodyReader(body).string())

    def __str__(self) -> str:
        return f"Cmd Completed: {self.tag}"


@_register("m")
@dataclass(frozen=True)
class CommandDescriptionMessage:
    """Description of a command, with any COPY rewrite the server proposes."""

    command_tag: str
    has_copy_rewrite: bool
    copy_rewrite: str

    @classmethod
    def from_body(cls, body: bytes) -> CommandDescriptionMessage:
        reader = _BodyReader(body)
        command_tag = reader.string()
        has_copy_rewrite = reader.uint16() == 1
        copy_rewrite = reader.string()
        return cls(
            command_tag=command_tag,
            has_copy_rewrite=has_copy_rewrite,
            copy_rewrite=copy_rewrite,
        )

    def __str__(self) -> str:
        flag = "true" if self.has_copy_rewrite else "false"
        return (
            f"Cmd Description: tag={self.command_tag}, "
            f"hasRewrite={flag}, rewrite='{self.copy_rewrite}'"
        )


def _normalise_tag(tag: Tag) -> str:
    if isinstance(tag, int):
        return chr(tag)
    if isinstance(tag, (bytes, bytearray)):
        return tag.decode("latin-1")
    return tag


def parse_backend_message(tag: Tag, body: bytes = b""):
    """Decode a backend message body according to its one-byte tag."""
    key = _normalise_tag(tag)
    try:
        decoder = _DECODERS[key]
    except KeyError:
        raise UnknownMessageError(key) from None
    return decoder(body)