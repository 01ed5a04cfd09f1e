"""Engine lifecycle transitions ('GameApp::SetState')."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..models import GameState, LogfileState, LogHeader


@dataclass(frozen=True, slots=True)
class SetStateParser:
    """Parse 'GameApp::SetState : new (<A>) old (<B>)' payloads.

    Only the new state is used. Entering the game also stamps the match with
    the header timestamp.
    """

    _re = re.compile(r"^GameApp::SetState : new \((?P<new>[^)]*)\) old \((?P<old>[^)]*)\)")

    def parse(self, header: LogHeader, payload: str) -> LogfileState | None:
        m = self._re.match(payload)
        if not m:
            return None

        state = GameState.from_state(m.group("new"))
        if state is GameState.IN_GAME:
            return LogfileState(game_state=state, match_timestamp=header.timestamp)
        return LogfileState(game_state=state)
