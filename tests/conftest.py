from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


def log_line(payload: str, *, seq: int = 1, ts: str = "12:00:00.000", indicator: str = "(I)") -> str:
    return f"{indicator} [{ts}] [{seq:06d}]: {payload}"


@pytest.fixture
def make_log() -> Callable[[list[str]], str]:
    def _make(payloads: list[str]) -> str:
        return "".join(log_line(p, seq=i) + "\n" for i, p in enumerate(payloads, start=1))

    return _make


@pytest.fixture
def write_match_log() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_text(
            "\n".join(
                [
                    "(I) [08:00:00.000] [000001]: Found profile: /steam/76561198000000001",
                    "(I) [08:00:00.100] [000002]: Using player name: Sgt Major",
                    "(I) [08:00:00.200] [000003]: Current language: en",
                    "(I) [08:00:01.000] [000004]: GameApp::SetState : new (Frontend) old (None)",
                    "(I) [08:00:02.000] [000005]: Read bytes [0,\"IDENTITY\",1054]",
                    "(I) [08:01:00.000] [000006]: GameApp::SetState : new (LoadingGame) old (Frontend)",
                    "(I) [08:01:00.100] [000007]: GAME -- Scenario: data:scenarios\\multiplayer\\twin_beach_2p\\twin_beach_2p",
                    "(I) [08:01:00.200] [000008]: GAME -- Win Condition Name: VictoryPoint",
                    "(I) [08:01:00.300] [000009]: GAME -- Human Player: 0 Sgt Major 1054 0 americans",
                    "(I) [08:01:00.400] [000010]: GAME -- AI Player: 1 CPU - Expert -1 1 germans",
                    "(I) [08:01:30.000] [000011]: GameApp::SetState : new (Game) old (LoadingGame)",
                    "(I) [08:20:00.000] [000012]: MOD -- Game Over at frame 9600",
                ]
            )
            + "\n",
            encoding="utf-8",
        )

    return _write
