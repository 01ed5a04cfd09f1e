"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_coh3_log_server.core.snapshot import GameSnapshot
from mcp_coh3_log_server.core.watcher import LogfileWatcher
from mcp_coh3_log_server.tools.state import game_state_impl

SAMPLE_LOG = (
    "(I) [12:00:00.000] [000001]: Found profile: /steam/76561198000000001\n"
    "(I) [12:00:00.100] [000002]: Using player name: Sgt Major\n"
    "(I) [12:00:01.000] [000003]: GameApp::SetState : new (Frontend) old (None)\n"
    "(I) [12:01:10.000] [000004]: GameApp::SetState : new (LoadingGame) old (Frontend)\n"
    "(I) [12:01:11.000] [000005]: GAME -- Scenario: data:scenarios\\multiplayer\\desert_village_2p\\desert_village_2p\n"
    "(I) [12:01:11.100] [000006]: GAME -- Win Condition Name: VictoryPoint\n"
    "(I) [12:01:11.200] [000007]: GAME -- Human Player: 0 Sgt Major 1054 0 americans\n"
    "(I) [12:01:11.300] [000008]: GAME -- Human Player: 1 Hans 2077 1 germans\n"
    "(I) [12:01:12.000] [000009]: Match Started - [ 1054 /steam/76561198000000001 ], slot =  0, ranking =   12\n"
    "(I) [12:01:12.100] [000010]: Match Started - [ 2077 /steam/76561198000000002 ], slot =  1, ranking =   -1\n"
    "(I) [12:02:30.000] [000011]: GameApp::SetState : new (Game) old (LoadingGame)\n"
)


def register_resources(mcp: FastMCP, get_watcher: Callable[[], LogfileWatcher]) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://coh3-log/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        watcher = get_watcher()
        return (
            "Resources:\n"
            "- app://coh3-log/help\n"
            "- app://coh3-log/state\n"
            "- app://coh3-log/schemas/game-snapshot\n"
            "- app://coh3-log/examples/sample-log\n"
            f"\nWatched log file: {watcher.log_path}\n"
        )

    @mcp.resource("app://coh3-log/state")
    def state_resource() -> dict[str, Any]:
        """Return the current merged game state."""
        return game_state_impl(get_watcher())

    @mcp.resource("app://coh3-log/schemas/game-snapshot")
    def snapshot_schema() -> dict[str, Any]:
        """Return the JSON schema for game state snapshots."""
        return GameSnapshot.model_json_schema()

    @mcp.resource("app://coh3-log/examples/sample-log")
    def sample_log() -> str:
        """Return a tiny sample warnings.log for demos and tests."""
        return SAMPLE_LOG
