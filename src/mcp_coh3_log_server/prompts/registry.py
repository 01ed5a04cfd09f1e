"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP


def _format_focus(focus: str) -> str:
    """Return the focus areas as a bullet list for prompt display."""
    items = [s.strip() for s in focus.split(",") if s.strip()]
    if not items:
        return "- everything available"
    return "\n".join(f"- {item}" for item in items)


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def describe_current_match(focus: str = "teams, map, state") -> list[dict[str, Any]]:
        """Build a prompt that describes the match currently shown in the game log."""
        return [
            {
                "role": "system",
                "content": (
                    "You are a concise Company of Heroes 3 match commentator. "
                    "Describe only what the game state data shows. "
                    "Do not invent players, ranks or outcomes; if a field is null, say it is unknown."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Describe the current match. Follow this workflow:\n"
                    "- Always call get_game_state first.\n"
                    "- If state is null or Closed, say that no game is running.\n"
                    "- Name both teams with their side (Axis/Allies/Mixed), players, "
                    "factions and ranks when present.\n\n"
                    "Focus on:\n"
                    f"{_format_focus(focus)}\n"
                ),
            },
            {
                "role": "user",
                "content": [
                    {
                        "type": "text",
                        "text": "Optional: the snapshot schema explains every field:",
                    },
                    {"type": "resource", "uri": "app://coh3-log/schemas/game-snapshot"},
                ],
            },
        ]
