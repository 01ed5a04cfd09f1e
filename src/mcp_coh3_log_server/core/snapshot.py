"""Display snapshot models.

The display layer consumes a JSON-serializable view of LogfileState; these
models define that view and its schema.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .models import GameState, LogfileState, MatchType, PlayerData, Side


class PlayerSnapshot(BaseModel):
    ai: bool = Field(description="True for computer-controlled slots.")
    faction: str = Field(description="Faction identifier, e.g. 'americans'.")
    relic_id: int | None = Field(default=None, description="Player id, when numeric.")
    name: str = Field(description="Display name; may contain spaces.")
    position: int = Field(ge=0, description="Lobby slot of the player.")
    rank: int | None = Field(default=None, description="Matchmaking rank, when announced.")
    steam_id: str | None = Field(default=None, description="Platform id, when announced.")


class TeamSnapshot(BaseModel):
    players: list[PlayerSnapshot] = Field(default_factory=list)
    side: Side = Field(default=Side.MIXED, description="Side named from the players' factions.")


class GameSnapshot(BaseModel):
    state: GameState | None = Field(default=None, description="Engine lifecycle state.")
    type: MatchType | None = Field(default=None, description="How the match was set up.")
    timestamp: str | None = Field(default=None, description="Log timestamp of entering the game.")
    duration: int | None = Field(default=None, ge=0, description="Match length in seconds.")
    map: str | None = None
    win_condition: str | None = None
    left: TeamSnapshot = Field(default_factory=TeamSnapshot, description="Team 0.")
    right: TeamSnapshot = Field(default_factory=TeamSnapshot, description="Team 1.")
    player_relic_id: int | None = None
    player_name: str | None = None
    player_steam_id: str | None = None
    language_code: str | None = None


def _player(p: PlayerData) -> PlayerSnapshot:
    return PlayerSnapshot(
        ai=p.ai,
        faction=p.faction,
        relic_id=p.relic_id,
        name=p.name,
        position=p.position,
        rank=p.rank,
        steam_id=p.steam_id,
    )


def to_snapshot(state: LogfileState) -> GameSnapshot:
    """Build the display snapshot for a LogfileState."""
    left = TeamSnapshot()
    right = TeamSnapshot()
    if state.teams is not None:
        left = TeamSnapshot(players=[_player(p) for p in state.teams.left], side=state.teams.left_side)
        right = TeamSnapshot(players=[_player(p) for p in state.teams.right], side=state.teams.right_side)

    return GameSnapshot(
        state=state.game_state,
        type=state.match_type,
        timestamp=state.match_timestamp,
        duration=state.duration,
        map=state.map,
        win_condition=state.win_condition,
        left=left,
        right=right,
        player_relic_id=state.player_relic_id,
        player_name=state.player_name,
        player_steam_id=state.player_steam_id,
        language_code=state.language_code,
    )
