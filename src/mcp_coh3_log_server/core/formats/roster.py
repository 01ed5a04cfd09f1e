"""Match roster grammars: player entries and matchmaking rankings."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..models import LogHeader, PlayerData, PlayerRanking
from .base import parse_int

logger = logging.getLogger(__name__)

TEAM_INDICES = (0, 1)
# Named sides map onto the index: Allies are team 0 (left), Axis team 1 (right).
# "mixed" has no single index and is rejected.
SIDE_TEAMS = {"allies": 0, "axis": 1}
MAX_POSITION = 255


def parse_team(value: str) -> int | None:
    """Parse a team token: '0'/'1' or a named side, case-insensitively."""
    team = parse_int(value)
    if team is None:
        team = SIDE_TEAMS.get(value.lower())
    if team not in TEAM_INDICES:
        return None
    return team


def split_player_details(details: str) -> tuple[str, int | None, str, str] | None:
    """Split '<name> <id> <team> <faction>' where the name may contain spaces.

    The last three space-separated tokens are read right to left as faction,
    team and identifier; everything before them is the name. Returns
    (name, relic_id, team_token, faction), or None with fewer than three tokens.
    """
    if details.endswith(" "):
        details = details[:-1]
    tokens = details.split(" ")
    if len(tokens) < 3:
        return None

    name = " ".join(tokens[:-3])
    relic_id = parse_int(tokens[-3])
    return name, relic_id, tokens[-2], tokens[-1]


@dataclass(frozen=True, slots=True)
class PlayerParser:
    """Parse 'GAME -- Human Player: <pos> <name> <id> <team> <faction>' payloads.

    'AI Player: ' marks computer-controlled slots. Teams other than
    0, 1, allies or axis reject the record; the rest of the file still parses.
    """

    _re = re.compile(r"^GAME -- (?P<kind>Human|AI) Player: (?P<pos>[0-9]+)[ \t]+(?P<details>.*)$")

    def parse(self, header: LogHeader, payload: str) -> PlayerData | None:
        m = self._re.match(payload)
        if not m:
            return None

        position = int(m.group("pos"))
        if position > MAX_POSITION:
            logger.debug("line %d: player position %d out of range", header.line_no, position)
            return None

        parts = split_player_details(m.group("details"))
        if parts is None:
            return None
        name, relic_id, team_raw, faction = parts

        team = parse_team(team_raw)
        if team is None:
            logger.debug("line %d: dropping player %r with invalid team %r", header.line_no, name, team_raw)
            return None
        if not faction:
            return None

        return PlayerData(
            ai=m.group("kind") == "AI",
            faction=faction,
            relic_id=relic_id,
            name=name,
            position=position,
            team=team,
        )


@dataclass(frozen=True, slots=True)
class RankingParser:
    """Parse 'Match Started - [ <id> /steam/<steam_id> ], slot = <n>, ranking = <r>'."""

    _re = re.compile(
        r"^Match Started - \[\s*(?P<relic_id>[0-9]+)\s+/steam/(?P<steam_id>[0-9]+)\s*\],"
        r"\s*slot\s*=\s*[0-9]+,\s*ranking\s*=\s*(?P<rank>-?[0-9]+)"
    )

    def parse(self, header: LogHeader, payload: str) -> PlayerRanking | None:
        m = self._re.match(payload)
        if not m:
            return None
        return PlayerRanking(
            relic_id=int(m.group("relic_id")),
            steam_id=m.group("steam_id"),
            rank=int(m.group("rank")),
        )
