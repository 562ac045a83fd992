from __future__ import annotations

import pytest

from metrodle.domain.models.geo import GeoPoint


def test_geo_point_accepts_valid_coordinates() -> None:
    p = GeoPoint(lat=-23.5505, lon=-46.6333)
    assert p.lat == -23.5505
    assert p.lon == -46.6333


@pytest.mark.parametrize(
    ("lat", "lon"),
    [
        (-90.0001, 0.0),
        (90.0001, 0.0),
        (0.0, -180.0001),
        (0.0, 180.0001),
    ],
)
def test_geo_point_rejects_out_of_range_coordinates(lat: float, lon: float) -> None:
    with pytest.raises(ValueError):
        GeoPoint(lat=lat, lon=lon)


def test_from_wkt_reads_lon_then_lat() -> None:
    assert GeoPoint.from_wkt("Point(-46.6333 -23.5505)") == GeoPoint(
        lat=-23.5505, lon=-46.6333
    )
    assert GeoPoint.from_wkt(" point( -46.6 -23.5 ) ") == GeoPoint(lat=-23.5, lon=-46.6)


@pytest.mark.parametrize("raw", ["", "Point()", "POLYGON(1 2)", "Point(200 100)"])
def test_from_wkt_returns_none_for_unusable_values(raw: str) -> None:
    assert GeoPoint.from_wkt(raw) is None
