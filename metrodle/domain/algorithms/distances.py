from __future__ import annotations

from collections import deque
from typing import Iterable

import networkx as nx

from metrodle.domain.exceptions import DisconnectedNetwork
from metrodle.domain.models import Station, StationGraph


def hop_distances(start_vertex: str, graph: StationGraph) -> dict[str, int]:
    """Hop count from `start_vertex` to every reachable vertex (0-1 BFS).

    Interchange edges cost 0 and are pushed to the front of the deque; hop
    edges cost 1 and go to the back, so labels pop in non-decreasing order.
    """

    dist: dict[str, int] = {start_vertex: 0}
    frontier: deque[str] = deque([start_vertex])

    while frontier:
        u = frontier.popleft()
        du = dist[u]
        for v in sorted(graph.adjacency.get(u, ())):
            cost = graph.edge_cost(u, v)
            dv = du + cost
            if dv < dist.get(v, dv + 1):
                dist[v] = dv
                if cost == 0:
                    frontier.appendleft(v)
                else:
                    frontier.append(v)

    return dist


def roster_distances(
    start: Station, graph: StationGraph, roster: Iterable[Station]
) -> dict[str, int]:
    """Like hop_distances, but every roster station must get a distance."""

    dist = hop_distances(start.vertex_id, graph)
    unreachable = [s.name for s in roster if s.vertex_id not in dist]
    if unreachable:
        raise DisconnectedNetwork(
            f"{len(unreachable)} station(s) unreachable from {start.name}: "
            + ", ".join(sorted(unreachable)[:10])
        )
    return dist


def ensure_connected(graph: StationGraph, roster: Iterable[Station]) -> None:
    g = graph.to_networkx()
    missing = [s.vertex_id for s in roster if s.vertex_id not in g]
    if missing:
        raise DisconnectedNetwork(f"Stations missing from graph: {missing}")
    if g.number_of_nodes() == 0:
        return
    if not nx.is_connected(g):
        n = nx.number_connected_components(g)
        raise DisconnectedNetwork(f"Station graph has {n} connected components")
