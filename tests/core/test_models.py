from __future__ import annotations

from pathlib import Path

import pytest

from mcp_coh3_log_server.core.config import (
    ENCODING_ENV,
    LOG_PATH_ENV,
    MonitorConfig,
    default_log_path,
    resolve_monitor_config,
)
from mcp_coh3_log_server.core.lines import iter_lines
from mcp_coh3_log_server.core.models import (
    GameState,
    LogfileState,
    MatchType,
    PlayerData,
    Side,
    TeamData,
)
from mcp_coh3_log_server.core.snapshot import GameSnapshot, to_snapshot


def _player(name: str, team: int, faction: str, position: int = 0) -> PlayerData:
    return PlayerData(ai=False, faction=faction, relic_id=1, name=name, position=position, team=team)


def test_merge_last_write_wins() -> None:
    a = LogfileState(game_state=GameState.MENU, map="a_map", player_relic_id=1)
    b = LogfileState(game_state=GameState.IN_GAME, player_name="b")

    acc = LogfileState()
    acc.merge(a)
    acc.merge(b)

    assert acc.game_state is GameState.IN_GAME  # set by b
    assert acc.map == "a_map"  # only a sets it
    assert acc.player_relic_id == 1
    assert acc.player_name == "b"
    assert acc.duration is None


def test_merge_is_associative() -> None:
    a = LogfileState(game_state=GameState.MENU, map="a")
    b = LogfileState(map="b", duration=10)
    c = LogfileState(game_state=GameState.LOADING)

    left = LogfileState()
    for f in (a, b, c):
        left.merge(f)

    bc = LogfileState()
    bc.merge(b)
    bc.merge(c)
    right = LogfileState()
    right.merge(a)
    right.merge(bc)

    assert left == right


def test_copy_is_independent() -> None:
    state = LogfileState(game_state=GameState.MENU)
    snap = state.copy()
    state.merge(LogfileState(game_state=GameState.IN_GAME))
    assert snap.game_state is GameState.MENU
    assert not snap.is_empty()
    assert LogfileState().is_empty()


@pytest.mark.parametrize(
    ("factions", "expected"),
    [
        (["americans", "british"], Side.ALLIES),
        (["germans", "afrika_korps"], Side.AXIS),
        (["americans", "germans"], Side.MIXED),
        (["unknown_faction"], Side.MIXED),
        ([], Side.MIXED),
    ],
)
def test_side_from_factions(factions: list[str], expected: Side) -> None:
    assert Side.from_factions(factions) is expected


def test_team_data_sides() -> None:
    teams = TeamData(
        left=(_player("a", 0, "british_africa"),),
        right=(_player("b", 1, "germans"), _player("c", 1, "americans")),
    )
    assert teams.left_side is Side.ALLIES
    assert teams.right_side is Side.MIXED
    assert [p.name for p in teams.players] == ["a", "b", "c"]


def test_iter_lines() -> None:
    assert list(iter_lines("a\nb\r\nc")) == ["a", "b"]
    assert list(iter_lines("a\n\nb\n")) == ["a", "", "b"]
    assert list(iter_lines("")) == []
    assert list(iter_lines("partial")) == []


def test_to_snapshot_unset_fields_are_none() -> None:
    snap = to_snapshot(LogfileState())
    assert snap == GameSnapshot()
    assert snap.left.players == []
    assert snap.left.side is Side.MIXED


def test_to_snapshot_json() -> None:
    state = LogfileState(
        game_state=GameState.IN_GAME,
        match_type=MatchType.CLASSIC,
        duration=90,
        teams=TeamData(left=(_player("a", 0, "americans"),)),
    )
    out = to_snapshot(state).model_dump(mode="json")
    assert out["state"] == "InGame"
    assert out["type"] == "Classic"
    assert out["duration"] == 90
    assert out["left"]["side"] == "Allies"
    assert out["left"]["players"][0]["name"] == "a"
    assert out["right"] == {"players": [], "side": "Mixed"}


def test_snapshot_schema_describes_fields() -> None:
    schema = GameSnapshot.model_json_schema()
    assert "state" in schema["properties"]
    assert "left" in schema["properties"]


def test_resolve_monitor_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_PATH_ENV, raising=False)
    monkeypatch.delenv(ENCODING_ENV, raising=False)
    cfg = resolve_monitor_config()
    assert cfg == MonitorConfig(log_path=default_log_path())
    assert cfg.log_path.name == "warnings.log"


def test_resolve_monitor_config_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_PATH_ENV, str(tmp_path / "w.log"))
    monkeypatch.setenv(ENCODING_ENV, "latin-1")
    cfg = resolve_monitor_config()
    assert cfg.log_path == tmp_path / "w.log"
    assert cfg.encoding == "latin-1"


def test_resolve_monitor_config_invalid_encoding(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENCODING_ENV, "no-such-codec")
    with pytest.raises(ValueError, match=ENCODING_ENV):
        resolve_monitor_config()
