"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

import asyncio
from typing import Any

from mcp_coh3_log_server.core.log_service import load_logfile
from mcp_coh3_log_server.core.models import LogfileState
from mcp_coh3_log_server.core.snapshot import to_snapshot
from mcp_coh3_log_server.core.watcher import LogfileWatcher


def _state_to_dict(state: LogfileState) -> dict[str, Any]:
    """Convert a LogfileState into a JSON-serializable dict."""
    return to_snapshot(state).model_dump(mode="json")


def game_state_impl(watcher: LogfileWatcher) -> dict[str, Any]:
    """Implementation for the `get_game_state` MCP tool."""
    out = _state_to_dict(watcher.snapshot())
    out["log_path"] = str(watcher.log_path)
    return out


async def reload_log_file_impl(watcher: LogfileWatcher) -> dict[str, Any]:
    """Implementation for the `reload_log_file` MCP tool.

    Runs one reparse-and-merge pass off the event loop and returns the merged
    snapshot, with ``reloaded`` False when the file could not be read.
    """
    ok = await asyncio.to_thread(watcher.reload)
    out = game_state_impl(watcher)
    out["reloaded"] = ok
    return out


async def parse_log_file_impl(*, log_path: str, encoding: str = "utf-8") -> dict[str, Any]:
    """Implementation for the `parse_log_file` MCP tool.

    Parses the file once from the start, independent of the watched state.
    """
    if not log_path.strip():
        raise ValueError("log_path must not be empty")
    state = await load_logfile(log_path, encoding=encoding)
    out = _state_to_dict(state)
    out["log_path"] = log_path
    return out
