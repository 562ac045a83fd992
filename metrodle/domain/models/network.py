from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from .station import Station


def interchange_key(a: str, b: str) -> str:
    """Order-independent key for a pair of vertices."""

    lo, hi = sorted((a, b))
    return f"{lo}|{hi}"


@dataclass(frozen=True, slots=True)
class NetworkData:
    """Parsed tabular records, as handed over by a data source adapter.

    Pairs hold external vertex references (WikiData ids in production).
    """

    stations: tuple[Station, ...]
    hops: tuple[tuple[str, str], ...]
    interchanges: tuple[tuple[str, str], ...]


@dataclass(frozen=True, slots=True)
class StationGraph:
    """Undirected station graph with 1-cost hop and 0-cost interchange edges.

    Both edge kinds share `adjacency`; `interchange_keys` tells them apart.
    """

    adjacency: dict[str, frozenset[str]]
    interchange_keys: frozenset[str]

    def is_interchange(self, a: str, b: str) -> bool:
        return interchange_key(a, b) in self.interchange_keys

    def edge_cost(self, a: str, b: str) -> int:
        return 0 if self.is_interchange(a, b) else 1

    def to_networkx(self) -> nx.Graph:
        g = nx.Graph()
        g.add_nodes_from(self.adjacency)
        for a, neighbors in self.adjacency.items():
            for b in neighbors:
                g.add_edge(a, b, weight=self.edge_cost(a, b))
        return g
