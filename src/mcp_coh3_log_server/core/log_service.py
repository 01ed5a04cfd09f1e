"""Log loading and state extraction.

This module is the main integration point that reads a game log and folds its
records into a LogfileState.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path

import aiofiles

from .formats import (
    CompositeParser,
    GameOverParser,
    LanguageParser,
    LineParser,
    PlayerNameParser,
    PlayerParser,
    ProfileParser,
    RankingParser,
    Record,
    RelicIdParser,
    ScenarioParser,
    SetStateParser,
    WinConditionParser,
)
from .lines import iter_lines
from .models import LogfileState, MatchType, PlayerData, PlayerRanking, TeamData

logger = logging.getLogger(__name__)


def default_parser() -> LineParser:
    """Default parser chain (first match wins)."""
    return CompositeParser(
        parsers=[
            SetStateParser(),
            PlayerParser(),
            RankingParser(),
            ScenarioParser(),
            WinConditionParser(),
            GameOverParser(),
            RelicIdParser(),
            ProfileParser(),
            PlayerNameParser(),
            LanguageParser(),
        ]
    )


class RosterFold:
    """Collect consecutive roster and ranking records into one fragment."""

    def __init__(self) -> None:
        self._players: list[PlayerData] = []
        self._rankings: dict[int, PlayerRanking] = {}

    def __bool__(self) -> bool:
        return bool(self._players or self._rankings)

    def add(self, record: PlayerData | PlayerRanking) -> None:
        if isinstance(record, PlayerRanking):
            self._rankings[record.relic_id] = record
        else:
            self._players.append(record)

    def flush(self) -> LogfileState | None:
        """Return the teams fragment for the collected block and reset.

        A block holding only rankings produces nothing.
        """
        players, rankings = self._players, self._rankings
        self._players, self._rankings = [], {}
        if not players:
            return None

        left: list[PlayerData] = []
        right: list[PlayerData] = []
        for p in players:
            ranking = rankings.get(p.relic_id) if p.relic_id is not None else None
            if ranking is not None:
                p = replace(p, rank=ranking.rank, steam_id=ranking.steam_id)
            (left if p.team == 0 else right).append(p)

        if any(p.ai for p in players):
            match_type = MatchType.AI
        elif rankings:
            match_type = MatchType.CLASSIC
        else:
            match_type = MatchType.CUSTOM

        return LogfileState(
            teams=TeamData(left=tuple(left), right=tuple(right)),
            match_type=match_type,
        )


def iter_records(text: str, *, parser: LineParser | None = None) -> Iterable[Record]:
    """Yield recognized records in line order; other lines are skipped."""
    parser = parser or default_parser()
    for line_no, line in enumerate(iter_lines(text), start=1):
        record = parser.parse(line_no, line)
        if record is not None:
            yield record


def fold_records(records: Iterable[Record]) -> LogfileState:
    """Fold records into a fresh LogfileState, last write wins per field.

    Roster and ranking records accumulate until any other record arrives (or
    input ends) and are merged as one teams fragment at that point.
    """
    state = LogfileState()
    roster = RosterFold()
    for record in records:
        if isinstance(record, (PlayerData, PlayerRanking)):
            roster.add(record)
            continue
        if roster:
            _merge_roster(state, roster)
        state.merge(record)
    if roster:
        _merge_roster(state, roster)
    return state


def _merge_roster(state: LogfileState, roster: RosterFold) -> None:
    fragment = roster.flush()
    if fragment is not None:
        state.merge(fragment)


def parse_logfile(text: str, *, parser: LineParser | None = None) -> LogfileState:
    """Parse full log text into a fresh LogfileState."""
    return fold_records(iter_records(text, parser=parser))


def read_logfile_sync(
    log_path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> str:
    """Read and decode the whole log file (blocking)."""
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")
    return path.read_bytes().decode(encoding, errors=decode_errors)


async def read_logfile(
    log_path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> str:
    """Read and decode the whole log file."""
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")
    # newline="" keeps '\r\n' intact for the line segmenter.
    async with aiofiles.open(path, encoding=encoding, errors=decode_errors, newline="") as f:
        return await f.read()


def parse_logfile_path(
    log_path: str | Path,
    *,
    parser: LineParser | None = None,
    encoding: str = "utf-8",
) -> LogfileState:
    """Read and parse a log file from the start (blocking)."""
    text = read_logfile_sync(log_path, encoding=encoding)
    state = parse_logfile(text, parser=parser)
    logger.debug("Parsed %s (%d chars)", log_path, len(text))
    return state


async def load_logfile(
    log_path: str | Path,
    *,
    parser: LineParser | None = None,
    encoding: str = "utf-8",
) -> LogfileState:
    """Read and parse a log file from the start."""
    text = await read_logfile(log_path, encoding=encoding)
    return parse_logfile(text, parser=parser)
