"""Parser interfaces shared by the record grammars."""

from __future__ import annotations

from typing import Protocol, Union

from ..models import LogfileState, LogHeader, PlayerData, PlayerRanking

# A recognized line is either a state fragment or one entry of the roster fold.
Record = Union[LogfileState, PlayerData, PlayerRanking]


class RecordParser(Protocol):
    """Payload grammar: return a Record if the payload matches, else None."""

    def parse(self, header: LogHeader, payload: str) -> Record | None:
        """Parse the payload that follows a structured line header."""
        ...


class LineParser(Protocol):
    """Whole-line parser interface: return a Record if recognized, else None."""

    def parse(self, line_no: int, line: str) -> Record | None:
        """Parse one complete log line."""
        ...


def parse_int(value: str) -> int | None:
    """Parse an unsigned decimal token, returning None when malformed."""
    if not value.isascii() or not value.isdigit():
        return None
    return int(value)
