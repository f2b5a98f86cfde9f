import struct

import pytest

from vertigo.coltypes import AuthResponse
from vertigo.messages import (
    AuthenticationMessage,
    BindCompleteMessage,
    CloseCompleteMessage,
    CommandCompleteMessage,
    CommandDescriptionMessage,
    UnknownMessageError,
    parse_backend_message,
)


def test_authentication_with_salt():
    salt = b"salt"
    msg = parse_backend_message("R", struct.pack(">i", AuthResponse.MD5_PASSWORD) + salt)
    assert isinstance(msg, AuthenticationMessage)
    assert msg.response == AuthResponse.MD5_PASSWORD
    assert msg.extra_auth_data == salt


def test_authentication_without_extra_data():
    msg = parse_backend_message("R", struct.pack(">i", AuthResponse.OK))
    assert msg.response == AuthResponse.OK
    assert msg.extra_auth_data == b""


def test_authentication_response_is_signed():
    msg = AuthenticationMessage.from_body(struct.pack(">i", -1))
    assert msg.response == -1


def test_authentication_large_code():
    body = struct.pack(">i", AuthResponse.SHA512_PASSWORD) + bytes(range(12))
    msg = parse_backend_message("R", body)
    assert msg.response == 66048
    assert msg.extra_auth_data == bytes(range(12))


def test_authentication_str():
    msg = AuthenticationMessage.from_body(struct.pack(">i", 5) + b"salt")
    assert str(msg) == "Authentication: 5, extraAuthData 4 byte(s)"


def test_bind_complete():
    msg = parse_backend_message("2")
    assert isinstance(msg, BindCompleteMessage)
    assert str(msg) == "BindComplete"


def test_close_complete():
    msg = parse_backend_message("3", b"")
    assert isinstance(msg, CloseCompleteMessage)
    assert str(msg) == "CloseComplete"


def test_command_complete():
    msg = parse_backend_message("C", b"SELECT 1\x00")
    assert isinstance(msg, CommandCompleteMessage)
    assert msg.tag == "SELECT 1"
    assert str(msg).startswith("Cmd Completed: ")
    assert str(msg).endswith("SELECT 1")


def test_command_description_with_rewrite():
    body = b"COPY\x00" + struct.pack(">H", 1) + b"COPY t FROM STDIN\x00"
    msg = parse_backend_message("m", body)
    assert isinstance(msg, CommandDescriptionMessage)
    assert msg.command_tag == "COPY"
    assert msg.has_copy_rewrite is True
    assert msg.copy_rewrite == "COPY t FROM STDIN"


def test_command_description_without_rewrite():
    body = b"INSERT\x00" + struct.pack(">H", 0) + b"\x00"
    msg = CommandDescriptionMessage.from_body(body)
    assert msg.has_copy_rewrite is False
    assert msg.copy_rewrite == ""


def test_command_description_str():
    body = b"COPY\x00" + struct.pack(">H", 1) + b"x\x00"
    msg = parse_backend_message("m", body)
    assert str(msg) == "Cmd Description: tag=COPY, hasRewrite=true, rewrite='x'"


@pytest.mark.parametrize("tag", ["C", b"C", ord("C")])
def test_tag_forms_are_equivalent(tag):
    assert parse_backend_message(tag, b"DROP\x00") == CommandCompleteMessage(tag="DROP")


def test_unknown_tag():
    with pytest.raises(UnknownMessageError) as info:
        parse_backend_message("~", b"")
    assert info.value.tag == "~"


def test_truncated_authentication_body():
    with pytest.raises(ValueError):
        parse_backend_message("R", b"\x00\x00")


def test_unterminated_string():
    with pytest.raises(ValueError):
        parse_backend_message("C", b"SELECT")


def test_from_body_matches_dispatch():
    body = struct.pack(">i", 3)
    assert AuthenticationMessage.from_body(body) == parse_backend_message("R", body)