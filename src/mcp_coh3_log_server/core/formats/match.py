"""Match metadata grammars: map, win condition and game-over duration."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..models import LogfileState, LogHeader

# The simulation advances eight frames per second.
FRAMES_PER_SECOND = 8


@dataclass(frozen=True, slots=True)
class ScenarioParser:
    """Parse 'GAME -- Scenario: <path>' into the map identifier (last path segment)."""

    _re = re.compile(r"^GAME -- Scenario: (?P<path>\S.*?)\s*$")

    def parse(self, header: LogHeader, payload: str) -> LogfileState | None:
        m = self._re.match(payload)
        if not m:
            return None
        segment = re.split(r"[\\/]", m.group("path"))[-1]
        if not segment:
            return None
        return LogfileState(map=segment)


@dataclass(frozen=True, slots=True)
class WinConditionParser:
    """Parse 'GAME -- Win Condition Name: <name>'."""

    _re = re.compile(r"^GAME -- Win Condition Name: (?P<name>\S.*?)\s*$")

    def parse(self, header: LogHeader, payload: str) -> LogfileState | None:
        m = self._re.match(payload)
        if not m:
            return None
        return LogfileState(win_condition=m.group("name"))


@dataclass(frozen=True, slots=True)
class GameOverParser:
    """Parse 'MOD -- Game Over at frame <n>' into a duration in seconds."""

    frames_per_second: int = FRAMES_PER_SECOND

    _re = re.compile(r"^MOD -- Game Over at frame (?P<frame>[0-9]+)")

    def parse(self, header: LogHeader, payload: str) -> LogfileState | None:
        m = self._re.match(payload)
        if not m:
            return None
        return LogfileState(duration=int(m.group("frame")) // self.frames_per_second)
