"""Core data models for game log state extraction."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields, replace
from enum import Enum


class GameState(str, Enum):
    """Engine lifecycle state as reported by GameApp::SetState."""

    CLOSED = "Closed"
    MENU = "Menu"
    LOADING = "Loading"
    IN_GAME = "InGame"

    @classmethod
    def from_state(cls, state: str) -> GameState:
        """Classify a raw engine state token. Unknown tokens map to CLOSED."""
        return _STATE_TOKENS.get(state, cls.CLOSED)


_STATE_TOKENS = {
    "Frontend": GameState.MENU,
    "LoadingGame": GameState.LOADING,
    "Game": GameState.IN_GAME,
}


class MatchType(str, Enum):
    """How the current match was set up."""

    CLASSIC = "Classic"
    AI = "AI"
    CUSTOM = "Custom"


class Side(str, Enum):
    """Named side of one team grouping."""

    AXIS = "Axis"
    ALLIES = "Allies"
    MIXED = "Mixed"

    @classmethod
    def from_factions(cls, factions: Iterable[str]) -> Side:
        """Name a side from the factions of its players.

        Empty groupings and unknown or mixed factions are MIXED.
        """
        sides = {_FACTION_SIDES.get(f.lower()) for f in factions}
        if len(sides) == 1:
            only = sides.pop()
            if only is not None:
                return only
        return cls.MIXED


_FACTION_SIDES = {
    "americans": Side.ALLIES,
    "british": Side.ALLIES,
    "british_africa": Side.ALLIES,
    "germans": Side.AXIS,
    "afrika_korps": Side.AXIS,
}


@dataclass(frozen=True, slots=True)
class LogHeader:
    """Common prefix of structured lines: '(I) [timestamp] [seq]: '."""

    line_no: int
    indicator: str
    timestamp: str
    seq: int


@dataclass(frozen=True, slots=True)
class PlayerData:
    """One roster entry ('GAME -- Human Player: ...' / 'GAME -- AI Player: ...')."""

    ai: bool
    faction: str
    relic_id: int | None  # absent or non-numeric identifiers are None
    name: str
    position: int
    team: int
    rank: int | None = None
    steam_id: str | None = None  # from the matching ranking line


@dataclass(frozen=True, slots=True)
class PlayerRanking:
    """Matchmaking ranking announced by a 'Match Started' line."""

    relic_id: int
    steam_id: str
    rank: int


@dataclass(frozen=True, slots=True)
class TeamData:
    """Roster partitioned by team index: 0 is left, 1 is right."""

    left: tuple[PlayerData, ...] = ()
    right: tuple[PlayerData, ...] = ()

    @property
    def left_side(self) -> Side:
        return Side.from_factions(p.faction for p in self.left)

    @property
    def right_side(self) -> Side:
        return Side.from_factions(p.faction for p in self.right)

    @property
    def players(self) -> tuple[PlayerData, ...]:
        return self.left + self.right


@dataclass(slots=True)
class LogfileState:
    """Latest known value per field.

    Used both as the long-lived accumulator and as the fragment produced by a
    single record. ``None`` means the field has not been observed.
    """

    game_state: GameState | None = None
    match_type: MatchType | None = None
    match_timestamp: str | None = None
    duration: int | None = None  # seconds
    map: str | None = None
    win_condition: str | None = None
    teams: TeamData | None = None
    player_relic_id: int | None = None
    player_name: str | None = None
    player_steam_id: str | None = None
    language_code: str | None = None

    def merge(self, other: LogfileState) -> None:
        """Overwrite every field that ``other`` has set; keep the rest."""
        for f in fields(self):
            value = getattr(other, f.name)
            if value is not None:
                setattr(self, f.name, value)

    def copy(self) -> LogfileState:
        """Return a shallow copy. Field values are immutable."""
        return replace(self)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))
