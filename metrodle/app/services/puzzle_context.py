from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping

from metrodle.domain.algorithms.daily import pick_daily_station
from metrodle.domain.algorithms.distances import ensure_connected, roster_distances
from metrodle.domain.algorithms.graph_builder import build_station_graph
from metrodle.domain.algorithms.text import roster_sort_key
from metrodle.domain.exceptions import (
    DataIntegrityFault,
    MissingRosterEntry,
    StationWithoutLines,
)
from metrodle.domain.models import LINES, Line, NetworkData, Station, StationGraph

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PuzzleContext:
    """Read-only puzzle data, built once at startup and passed around.

    Distances from a given station are memoized for the lifetime of the
    context; the underlying network does not change within a release.
    """

    roster: tuple[Station, ...]
    stations_by_id: dict[str, Station]
    graph: StationGraph
    lines: Mapping[str, Line] = field(default_factory=lambda: dict(LINES))
    daily_overrides: Mapping[str, str] = field(default_factory=dict)

    _distances: dict[str, dict[str, int]] = field(
        default_factory=dict, init=False, repr=False
    )

    @staticmethod
    def from_network(
        network: NetworkData,
        *,
        strict: bool = True,
        daily_overrides: Mapping[str, str] | None = None,
    ) -> "PuzzleContext":
        stations_by_id: dict[str, Station] = {}
        for station in network.stations:
            if not station.lines:
                raise StationWithoutLines(f"Station {station.name} has no lines")
            if station.id in stations_by_id:
                raise DataIntegrityFault(f"Duplicate station id {station.id!r}")
            stations_by_id[station.id] = station

        roster = tuple(sorted(network.stations, key=lambda s: roster_sort_key(s.name)))
        graph = build_station_graph(
            roster, network.hops, network.interchanges, strict=strict
        )
        ensure_connected(graph, roster)

        logger.info(
            "Loaded network: %d stations, %d hops, %d interchanges",
            len(roster),
            len(network.hops),
            len(graph.interchange_keys),
        )
        return PuzzleContext(
            roster=roster,
            stations_by_id=stations_by_id,
            graph=graph,
            daily_overrides=dict(daily_overrides or {}),
        )

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(s.name for s in self.roster)

    def station(self, station_id: str) -> Station:
        try:
            return self.stations_by_id[station_id]
        except KeyError:
            raise MissingRosterEntry(
                f"Station {station_id!r} is not in the roster"
            ) from None

    def solution_for(self, date_key: str) -> Station:
        return pick_daily_station(date_key, self.roster, self.daily_overrides)

    def distances_from(self, station: Station) -> dict[str, int]:
        cached = self._distances.get(station.id)
        if cached is None:
            cached = roster_distances(station, self.graph, self.roster)
            self._distances[station.id] = cached
        return cached
