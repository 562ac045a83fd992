from __future__ import annotations

from dataclasses import dataclass

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Station:
    id: str
    name: str
    lines: tuple[str, ...]
    location: GeoPoint | None = None
    wikidata_id: str | None = None

    @property
    def vertex_id(self) -> str:
        """Key of this station in the adjacency graph."""

        return self.wikidata_id or self.id
