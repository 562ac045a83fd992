from __future__ import annotations

import logging
from typing import Iterable

from metrodle.domain.exceptions import UnknownStationReference
from metrodle.domain.models import Station, StationGraph, interchange_key

logger = logging.getLogger(__name__)


def build_station_graph(
    stations: Iterable[Station],
    hops: Iterable[tuple[str, str]],
    interchanges: Iterable[tuple[str, str]],
    *,
    strict: bool = True,
) -> StationGraph:
    """Merge hop and interchange records into one undirected adjacency map.

    Every station gets a vertex, even without edges, so that a missing link
    shows up as a disconnected vertex rather than an absent one. In strict
    mode a record naming an unknown vertex raises UnknownStationReference;
    otherwise the record is skipped.
    """

    adjacency: dict[str, set[str]] = {s.vertex_id: set() for s in stations}
    keys: set[str] = set()

    def _link(a: str, b: str, kind: str) -> bool:
        missing = [v for v in (a, b) if v not in adjacency]
        if missing:
            if strict:
                raise UnknownStationReference(
                    f"{kind} record {a!r} <-> {b!r} references unknown "
                    f"station(s): {', '.join(missing)}"
                )
            logger.warning(
                "Skipping %s record %s <-> %s: unknown %s", kind, a, b, missing
            )
            return False
        if a == b:
            return False
        adjacency[a].add(b)
        adjacency[b].add(a)
        return True

    for a, b in hops:
        _link(a, b, "hop")

    for a, b in interchanges:
        if _link(a, b, "interchange"):
            keys.add(interchange_key(a, b))

    return StationGraph(
        adjacency={v: frozenset(ns) for v, ns in adjacency.items()},
        interchange_keys=frozenset(keys),
    )
