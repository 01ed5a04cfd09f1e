"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: callable actions (e.g., read the current game state)
- Resources: addressable data blobs (e.g., the state snapshot via URI)
- Prompts: reusable conversation templates that clients can invoke

A LogfileWatcher keeps the parsed state of the game's warnings.log current
while the server runs.

Run locally (stdio):
    python -m mcp_coh3_log_server.server.log_server
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_coh3_log_server.core.config import resolve_monitor_config
from mcp_coh3_log_server.core.watcher import LogfileWatcher
from mcp_coh3_log_server.prompts.registry import register_prompts
from mcp_coh3_log_server.resources.registry import register_resources
from mcp_coh3_log_server.tools.state import (
    game_state_impl,
    parse_log_file_impl,
    reload_log_file_impl,
)

LOGGER = logging.getLogger(__name__)

_watcher: LogfileWatcher | None = None


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = os.getenv("COH3_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_watcher() -> LogfileWatcher:
    """Return the process-wide watcher, creating it from config on first use."""
    global _watcher
    if _watcher is None:
        cfg = resolve_monitor_config()
        _watcher = LogfileWatcher(cfg.log_path, encoding=cfg.encoding)
    return _watcher


mcp = FastMCP("coh3-log", json_response=True)

register_resources(mcp, get_watcher)
register_prompts(mcp)


@mcp.tool()
def get_game_state() -> dict[str, Any]:
    """Return the latest merged game state from the watched warnings.log.

    Returns
    -------
    dict:
        Snapshot with state, type, timestamp, duration, map, win_condition,
        left/right teams ({"players": [...], "side": ...}) and local player
        identity fields. Fields never observed in the log are null.
    """
    return game_state_impl(get_watcher())


@mcp.tool()
async def reload_log_file() -> dict[str, Any]:
    """Re-read the watched log file now and return the merged state."""
    return await reload_log_file_impl(get_watcher())


@mcp.tool()
async def parse_log_file(log_path: str, encoding: str = "utf-8") -> dict[str, Any]:
    """Parse any warnings.log once and return its extracted state.

    Parameters
    ----------
    log_path:
        Path to a local game log file.
    encoding:
        Text encoding; invalid bytes are replaced.
    """
    return await parse_log_file_impl(log_path=log_path, encoding=encoding)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    _ = argv or sys.argv[1:]
    watcher = get_watcher()
    LOGGER.debug("Starting MCP server (transport=stdio, log=%s)", watcher.log_path)
    watcher.start()
    try:
        mcp.run(transport="stdio")
    finally:
        watcher.stop()


if __name__ == "__main__":
    main()
