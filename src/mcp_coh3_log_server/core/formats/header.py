"""Structured line header grammar."""

from __future__ import annotations

import re

from ..models import LogHeader

_re = re.compile(
    r"^(?P<indicator>\([IE]\))[ \t]+"
    r"\[(?P<ts>[^\]]*)\][ \t]+"
    r"\[(?P<seq>[0-9]+)\]:[ \t]+"
    r"(?P<payload>.*)$"
)


def parse_header(line_no: int, line: str) -> tuple[LogHeader, str] | None:
    """Split '(I) [ts] [seq]: payload' into a header and its payload."""
    m = _re.match(line)
    if not m:
        return None
    header = LogHeader(
        line_no=line_no,
        indicator=m.group("indicator"),
        timestamp=m.group("ts"),
        seq=int(m.group("seq")),
    )
    return header, m.group("payload")
