from __future__ import annotations

from typing import Mapping

from metrodle.domain.exceptions import MissingRosterEntry
from metrodle.domain.models import GameState, Knowledge, Station


def _station(stations_by_id: Mapping[str, Station], station_id: str) -> Station:
    try:
        return stations_by_id[station_id]
    except KeyError:
        raise MissingRosterEntry(f"Station {station_id!r} is not in the roster") from None


def line_knowledge(
    state: GameState, stations_by_id: Mapping[str, Station]
) -> Knowledge:
    """Lines known to be on (confirmed) or off (eliminated) the solution."""

    solution_lines = set(_station(stations_by_id, state.solution_id).lines)
    confirmed: set[str] = set()
    eliminated: set[str] = set()

    for guess_id in state.guesses:
        for line_id in _station(stations_by_id, guess_id).lines:
            if line_id in solution_lines:
                confirmed.add(line_id)
            else:
                eliminated.add(line_id)

    return Knowledge(confirmed=frozenset(confirmed), eliminated=frozenset(eliminated))
