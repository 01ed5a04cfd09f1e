from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from mcp_coh3_log_server.core.config import resolve_monitor_config
from mcp_coh3_log_server.core.log_service import load_logfile
from mcp_coh3_log_server.core.snapshot import GameSnapshot, TeamSnapshot, to_snapshot


def _fmt(value: object) -> str:
    if value is None:
        return "-"
    return str(getattr(value, "value", value))


def _print_team(label: str, team: TeamSnapshot) -> None:
    print(f"{label} ({team.side.value}):")
    if not team.players:
        print("  -")
    for p in team.players:
        kind = "AI" if p.ai else "Human"
        extra = f" rank={p.rank}" if p.rank is not None else ""
        if p.steam_id is not None:
            extra += f" steam={p.steam_id}"
        print(f"  [{p.position}] {p.name} ({kind}, {p.faction}, id={_fmt(p.relic_id)}){extra}")


def _print_snapshot(snap: GameSnapshot) -> None:
    print(f"state:         {_fmt(snap.state)}")
    print(f"type:          {_fmt(snap.type)}")
    print(f"timestamp:     {_fmt(snap.timestamp)}")
    print(f"duration:      {_fmt(snap.duration)}")
    print(f"map:           {_fmt(snap.map)}")
    print(f"win condition: {_fmt(snap.win_condition)}")
    print(f"player:        {_fmt(snap.player_name)} (relic={_fmt(snap.player_relic_id)}, steam={_fmt(snap.player_steam_id)})")
    print(f"language:      {_fmt(snap.language_code)}")
    _print_team("left", snap.left)
    _print_team("right", snap.right)


def main() -> None:
    p = argparse.ArgumentParser(description="Summarize the current state of a Company of Heroes 3 warnings.log.")
    p.add_argument("log_path", nargs="?", default=None, help="Log file (default: COH3_LOG_PATH or the game's default location)")
    p.add_argument("--encoding", default=None, help="Text encoding (default: COH3_LOG_ENCODING or utf-8)")
    p.add_argument("--json", dest="as_json", action="store_true", help="Print the snapshot as JSON")

    args = p.parse_args()

    try:
        cfg = resolve_monitor_config()
        path = Path(args.log_path) if args.log_path else cfg.log_path
        state = asyncio.run(load_logfile(path, encoding=args.encoding or cfg.encoding))
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except (ValueError, LookupError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    snap = to_snapshot(state)
    if args.as_json:
        print(json.dumps(snap.model_dump(mode="json"), indent=2))
        return
    _print_snapshot(snap)


if __name__ == "__main__":
    main()
