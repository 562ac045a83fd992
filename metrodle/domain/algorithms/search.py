from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from metrodle.domain.exceptions import StationNotFound
from metrodle.domain.models import Line, Station

from .text import normalize, roster_sort_key


def resolve_station(candidate: str, roster: Iterable[Station]) -> Station:
    """Resolve free text typed by the player to a single station.

    Exact name match first, then substring match; both ignore case and
    diacritics. Substring ties go to the shortest name, then alphabetical.
    """

    query = normalize(candidate.strip())
    if not query:
        raise StationNotFound()

    partial: list[Station] = []
    for station in roster:
        name = normalize(station.name)
        if name == query:
            return station
        if query in name:
            partial.append(station)

    if not partial:
        raise StationNotFound()

    return min(partial, key=lambda s: (len(s.name), roster_sort_key(s.name)))


def search_candidates(
    query: str, roster: Sequence[Station], lines: Mapping[str, Line]
) -> list[Station]:
    """Stations matching `query` by name, or lying on a line matching it."""

    qn = normalize(query.strip())
    if not qn:
        return []

    line_hits = {
        line.id
        for line in lines.values()
        if qn in normalize(line.name) or qn in normalize(line.id)
    }

    found: dict[str, Station] = {}
    for station in roster:
        if qn in normalize(station.name) or line_hits.intersection(station.lines):
            found[station.id] = station

    return sorted(found.values(), key=lambda s: roster_sort_key(s.name))
