from __future__ import annotations

import re
from typing import Mapping

from metrodle.domain.exceptions import MissingRosterEntry
from metrodle.domain.models import MAX_ATTEMPTS, GameState, GameStatus, Station

SAME_LINES = "🟩"
OTHER_LINES = "⬛"
SOLVED = "🚆"

_SCHEME = re.compile(r"^https?://")


def build_share_text(
    state: GameState,
    stations_by_id: Mapping[str, Station],
    distances: Mapping[str, int],
    *,
    share_url: str,
    max_attempts: int = MAX_ATTEMPTS,
) -> str:
    """Spoiler-free summary of a game, one row per guess.

    `distances` is keyed by vertex id, measured from the solution.
    """

    try:
        solution = stations_by_id[state.solution_id]
        guesses = [stations_by_id[gid] for gid in state.guesses]
    except KeyError as exc:
        raise MissingRosterEntry(f"Station {exc.args[0]!r} is not in the roster") from None

    rows: list[str] = []
    for guess in guesses:
        square = SAME_LINES if guess.lines == solution.lines else OTHER_LINES
        if guess.id == solution.id:
            rows.append(f"{square} {SOLVED}")
            continue
        if guess.vertex_id not in distances:
            raise MissingRosterEntry(f"No distance for {guess.name}")
        rows.append(f"{square} a {distances[guess.vertex_id]} paradas")

    attempts = str(len(state.guesses)) if state.status is GameStatus.WON else "X"
    return "\n".join(
        [
            f"Metrodle SP {state.date_key}",
            *rows,
            f"{attempts}/{max_attempts}",
            _SCHEME.sub("", share_url),
        ]
    )
