from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from metrodle.domain.models import GeoPoint, Station

FIXTURE_NETWORK = Path(__file__).resolve().parent.parent / "fixtures" / "network"
DATE = "2025-10-12"


@dataclass(slots=True)
class FixedDateProvider:
    date_key: str = DATE

    def today_key(self) -> str:
        return self.date_key


def make_station(
    code: str,
    name: str,
    lines: tuple[str, ...] = ("1",),
    *,
    lat: float | None = None,
    lon: float | None = None,
) -> Station:
    location = GeoPoint(lat=lat, lon=lon) if lat is not None and lon is not None else None
    return Station(id=code, name=name, lines=lines, location=location)
