"""Column type identifiers, authentication codes and type naming."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ColumnType(enum.IntEnum):
    """Type OIDs reported by the server for result columns."""

    BOOLEAN = 5
    INT64 = 6
    FLOAT64 = 7
    CHAR = 8
    VARCHAR = 9
    DATE = 10
    TIME = 11
    TIMESTAMP = 12
    TIMESTAMPTZ = 13
    INTERVAL = 14
    INTERVAL_YM = 114
    TIMETZ = 15
    NUMERIC = 16
    VARBINARY = 17
    UUID = 20
    LONG_VARCHAR = 115
    LONG_VARBINARY = 116
    BINARY = 117


class AuthResponse(enum.IntEnum):
    """Authentication request codes sent by the server."""

    OK = 0
    CLEARTEXT_PASSWORD = 3
    MD5_PASSWORD = 5
    SHA512_PASSWORD = 66048


@dataclass(frozen=True)
class ParameterType:
    """Description of a statement parameter."""

    type_oid: int
    type_name: str
    type_modifier: int
    nullable: bool


_TYPE_NAMES = {
    ColumnType.BOOLEAN: "BOOL",
    ColumnType.INT64: "INT",
    ColumnType.FLOAT64: "FLOAT",
    ColumnType.CHAR: "CHAR",
    ColumnType.VARCHAR: "VARCHAR",
    ColumnType.DATE: "DATE",
    ColumnType.TIME: "TIME",
    ColumnType.TIMESTAMP: "TIMESTAMP",
    ColumnType.TIMESTAMPTZ: "TIMESTAMPTZ",
    ColumnType.TIMETZ: "TIMETZ",
    ColumnType.NUMERIC: "NUMERIC",
    ColumnType.VARBINARY: "VARBINARY",
    ColumnType.UUID: "UUID",
    ColumnType.LONG_VARCHAR: "LONG VARCHAR",
    ColumnType.LONG_VARBINARY: "LONG VARBINARY",
    ColumnType.BINARY: "BINARY",
}

_MONTH = 1 << 17
_YEAR = 1 << 18
_DAY = 1 << 19
_HOUR = 1 << 26
_MINUTE = 1 << 27
_SECOND = 1 << 28

_YEAR_MONTH_RANGES = (
    (_YEAR | _MONTH, "YEAR TO MONTH"),
    (_YEAR, "YEAR"),
    (_MONTH, "MONTH"),
)

_DAY_SECOND_RANGES = (
    (_DAY | _HOUR | _MINUTE | _SECOND, "DAY TO SECOND"),
    (_DAY | _HOUR | _MINUTE, "DAY TO MINUTE"),
    (_DAY | _HOUR, "DAY TO HOUR"),
    (_DAY, "DAY"),
    (_HOUR | _MINUTE | _SECOND, "HOUR TO SECOND"),
    (_HOUR | _MINUTE, "HOUR TO MINUTE"),
    (_HOUR, "HOUR"),
    (_MINUTE | _SECOND, "MINUTE TO SECOND"),
    (_MINUTE, "MINUTE"),
    (_SECOND, "SECOND"),
)


def _first_match(type_modifier: int, ranges: tuple[tuple[int, str], ...], default: str) -> str:
    return next(
        (name for mask, name in ranges if type_modifier & mask == mask),
        default,
    )


def interval_range(type_oid: int, type_modifier: int) -> str:
    """Name the field range of an interval type, e.g. 'DAY TO SECOND'."""
    if type_oid == ColumnType.INTERVAL_YM:
        return _first_match(type_modifier, _YEAR_MONTH_RANGES, "YEAR TO MONTH")
    if type_oid == ColumnType.INTERVAL:
        return _first_match(type_modifier, _DAY_SECOND_RANGES, "DAY TO SECOND")
    return f"invalid column type oid: {type_oid}"


def column_type_string(type_oid: int, type_modifier: int = 0) -> str:
    """Return the SQL name of a column type."""
    if type_oid in (ColumnType.INTERVAL, ColumnType.INTERVAL_YM):
        return "INTERVAL " + interval_range(type_oid, type_modifier)
    try:
        return _TYPE_NAMES[ColumnType(type_oid)]
    except (ValueError, KeyError):
        return f"unknown column type oid: {type_oid}"