from __future__ import annotations

import csv
import io
import logging
import re
from typing import Iterable, Mapping

from metrodle.domain.algorithms.lines import line_id_from_label, sorted_line_ids
from metrodle.domain.models import GeoPoint, NetworkData, Station

logger = logging.getLogger(__name__)

STATIONS_FILE = "stations.csv"
ADJACENCY_FILE = "adjacency.csv"
INTERCHANGES_FILE = "interchanges.csv"

_STATION_PREFIX = re.compile(r"^Estação\s+", re.IGNORECASE)
_WIKIDATA_ID = re.compile(r"(Q\d+)/?$")


def _cell(row: Mapping[str, str | None], name: str) -> str:
    return (row.get(name) or "").strip()


def wikidata_id(raw: str) -> str | None:
    """'http://www.wikidata.org/entity/Q1234' (or 'Q1234') -> 'Q1234'."""

    m = _WIKIDATA_ID.search(raw.strip())
    return m.group(1) if m else None


def parse_stations(rows: Iterable[Mapping[str, str | None]]) -> tuple[Station, ...]:
    """Aggregate one-row-per-line records into stations keyed by station code."""

    names: dict[str, str] = {}
    lines: dict[str, list[str]] = {}
    locations: dict[str, GeoPoint | None] = {}
    entities: dict[str, str | None] = {}

    for row in rows:
        code = _cell(row, "station_code")
        if not code:
            continue

        name = _STATION_PREFIX.sub("", _cell(row, "stationLabel")).strip()
        if name.startswith("Terminal Intermodal"):
            continue

        if code not in names:
            names[code] = name
            lines[code] = []
            locations[code] = GeoPoint.from_wkt(_cell(row, "coordinate_location"))
            entities[code] = wikidata_id(_cell(row, "station"))
        elif locations[code] is None:
            locations[code] = GeoPoint.from_wkt(_cell(row, "coordinate_location"))

        label = _cell(row, "connecting_lineLabel")
        if label:
            line_id = line_id_from_label(label)
            if line_id is not None:
                lines[code].append(line_id)

    return tuple(
        Station(
            id=code,
            name=name,
            lines=sorted_line_ids(lines[code]),
            location=locations[code],
            wikidata_id=entities[code],
        )
        for code, name in names.items()
    )


def parse_pairs(
    rows: Iterable[Mapping[str, str | None]], *, source: str
) -> tuple[tuple[str, str], ...]:
    pairs: list[tuple[str, str]] = []
    for row in rows:
        a = wikidata_id(_cell(row, "station_a")) or _cell(row, "station_a")
        b = wikidata_id(_cell(row, "station_b")) or _cell(row, "station_b")
        if not a or not b:
            logger.warning("Skipping incomplete %s row: %s", source, dict(row))
            continue
        pairs.append((a, b))
    return tuple(pairs)


def read_rows(text: str) -> list[dict[str, str | None]]:
    return list(csv.DictReader(io.StringIO(text)))


def parse_network(
    *, stations_csv: str, adjacency_csv: str, interchanges_csv: str
) -> NetworkData:
    return NetworkData(
        stations=parse_stations(read_rows(stations_csv)),
        hops=parse_pairs(read_rows(adjacency_csv), source=ADJACENCY_FILE),
        interchanges=parse_pairs(read_rows(interchanges_csv), source=INTERCHANGES_FILE),
    )
