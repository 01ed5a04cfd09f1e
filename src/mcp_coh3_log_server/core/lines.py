"""Line segmentation for decoded log text."""

from __future__ import annotations

from collections.abc import Iterator


def iter_lines(text: str) -> Iterator[str]:
    """Yield complete lines without their terminator.

    Accepts both '\\n' and '\\r\\n'. A trailing fragment with no terminator is
    still being written by the game and is not yielded.
    """
    start = 0
    while True:
        end = text.find("\n", start)
        if end < 0:
            return
        line = text[start:end]
        if line.endswith("\r"):
            line = line[:-1]
        yield line
        start = end + 1
