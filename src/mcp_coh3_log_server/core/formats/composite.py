"""Parser composition utilities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .base import Record, RecordParser
from .header import parse_header


@dataclass(frozen=True, slots=True)
class CompositeParser:
    """Parse the line header once, then try payload parsers in order.

    The first parser that returns a record wins. Lines without a header, or
    whose payload no parser recognizes, return None.
    """

    parsers: Sequence[RecordParser]

    def parse(self, line_no: int, line: str) -> Record | None:
        """Return the first successful parse from the configured parsers."""
        parsed = parse_header(line_no, line)
        if parsed is None:
            return None

        header, payload = parsed
        for p in self.parsers:
            out = p.parse(header, payload)
            if out is not None:
                return out
        return None
