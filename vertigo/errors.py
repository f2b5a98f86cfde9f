"""Errors reported by the server."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class VError(Exception):
    """An error reported by the server, with all of its protocol fields."""

    internal_query: str = ""
    severity: str = ""
    message: str = ""
    sql_state: str = ""
    detail: str = ""
    hint: str = ""
    position: str = ""
    where: str = ""
    internal_position: str = ""
    routine: str = ""
    file: str = ""
    line: str = ""
    error_code: str = ""

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.severity} {self.error_code}: [{self.sql_state}] {self.message}"