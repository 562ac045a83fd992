from __future__ import annotations

import math

from metrodle.domain.models import GeoPoint

ARROWS = ("↑", "↗", "→", "↘", "↓", "↙", "←", "↖")


def initial_bearing_deg(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle initial bearing from a to b, 0 = North, clockwise."""

    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlon = math.radians(b.lon - a.lon)

    x = math.cos(lat2) * math.sin(dlon)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(
        dlon
    )
    return (math.degrees(math.atan2(x, y)) + 360.0) % 360.0


def direction_arrow(origin: GeoPoint | None, destination: GeoPoint | None) -> str:
    """8-way arrow pointing from origin to destination ("" if unknown)."""

    if origin is None or destination is None or origin == destination:
        return ""
    bearing = initial_bearing_deg(origin, destination)
    return ARROWS[round(bearing / 45.0) % 8]
