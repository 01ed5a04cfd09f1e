"""Log line grammars.

Contains the structured header grammar and the payload parsers for each
record kind (state transitions, roster entries, match metadata, identity).
"""

from __future__ import annotations

from .base import LineParser, Record, RecordParser, parse_int
from .composite import CompositeParser
from .header import parse_header
from .identity import LanguageParser, PlayerNameParser, ProfileParser, RelicIdParser
from .match import GameOverParser, ScenarioParser, WinConditionParser
from .roster import PlayerParser, RankingParser, parse_team, split_player_details
from .state import SetStateParser

__all__ = [
    "CompositeParser",
    "GameOverParser",
    "LanguageParser",
    "LineParser",
    "PlayerNameParser",
    "PlayerParser",
    "ProfileParser",
    "RankingParser",
    "Record",
    "RecordParser",
    "RelicIdParser",
    "ScenarioParser",
    "SetStateParser",
    "WinConditionParser",
    "parse_header",
    "parse_int",
    "parse_team",
    "split_player_details",
]
