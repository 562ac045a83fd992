from __future__ import annotations

import re
from dataclasses import dataclass

_WKT_POINT = re.compile(r"^Point\(\s*(-?[\d.]+)\s+(-?[\d.]+)\s*\)$", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """WGS84 coordinate of a station entrance, used for direction hints."""

    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lon}")

    @staticmethod
    def from_wkt(raw: str) -> "GeoPoint | None":
        """Parse WKT 'Point(lon lat)'; None when blank, malformed or out of range."""

        m = _WKT_POINT.match(raw.strip())
        if m is None:
            return None
        try:
            return GeoPoint(lat=float(m.group(2)), lon=float(m.group(1)))
        except ValueError:
            return None
