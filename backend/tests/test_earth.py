from __future__ import annotations

import math

import pytest

from geo.earth import (
    angle_to_meters,
    earth_radius_m,
    interpolate,
    interpolate_at_distance,
    km_to_angle,
    meters_to_angle,
)
from geo.latlng import LatLng


def test_radius_conversions():
    assert earth_radius_m() == pytest.approx(6370997.0)
    assert km_to_angle(earth_radius_m() / 1000.0) == pytest.approx(1.0)
    assert angle_to_meters(meters_to_angle(12345.0)) == pytest.approx(12345.0)


def test_interpolate_along_equator():
    mid = interpolate(LatLng.from_degrees(0, 0), LatLng.from_degrees(0, 90), 0.5)
    assert mid.lat_degrees == pytest.approx(0.0, abs=1e-9)
    assert mid.lng_degrees == pytest.approx(45.0, abs=1e-9)


def test_interpolate_at_distance_matches_haversine():
    a = LatLng.from_degrees(10, 20)
    b = LatLng.from_degrees(40, -30)
    p = interpolate_at_distance(a, b, math.radians(3))
    assert a.get_distance(p) == pytest.approx(math.radians(3), abs=1e-9)
