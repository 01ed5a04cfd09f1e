"""Local player identity grammars."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..models import LogfileState, LogHeader


@dataclass(frozen=True, slots=True)
class RelicIdParser:
    """Parse telemetry 'Read bytes [<n>,"<tag>",<id>]' into the local player's id."""

    _re = re.compile(r'^Read bytes \[[0-9]+,"[A-Za-z]+",(?P<id>[0-9]+)')

    def parse(self, header: LogHeader, payload: str) -> LogfileState | None:
        m = self._re.match(payload)
        if not m:
            return None
        return LogfileState(player_relic_id=int(m.group("id")))


@dataclass(frozen=True, slots=True)
class ProfileParser:
    """Parse 'Found profile: /steam/<id>' into the platform identifier."""

    _re = re.compile(r"^Found profile: /steam/(?P<steam_id>[0-9]+)")

    def parse(self, header: LogHeader, payload: str) -> LogfileState | None:
        m = self._re.match(payload)
        if not m:
            return None
        return LogfileState(player_steam_id=m.group("steam_id"))


@dataclass(frozen=True, slots=True)
class PlayerNameParser:
    """Parse 'Using player name: <name>'."""

    _re = re.compile(r"^Using player name: (?P<name>.*?)\s*$")

    def parse(self, header: LogHeader, payload: str) -> LogfileState | None:
        m = self._re.match(payload)
        if not m or not m.group("name"):
            return None
        return LogfileState(player_name=m.group("name"))


@dataclass(frozen=True, slots=True)
class LanguageParser:
    """Parse 'Current language: <code>'."""

    _re = re.compile(r"^Current language: (?P<code>[A-Za-z_-]+)")

    def parse(self, header: LogHeader, payload: str) -> LogfileState | None:
        m = self._re.match(payload)
        if not m:
            return None
        return LogfileState(language_code=m.group("code"))
