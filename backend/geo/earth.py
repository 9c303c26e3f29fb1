from __future__ import annotations

from functools import lru_cache

from pyproj import Geod

from geo.latlng import LatLng


@lru_cache(maxsize=1)
def spherical_geod() -> Geod:
    # PROJ's "Normal Sphere" (r=6370997 m); geodesics on it are great circles.
    return Geod(ellps="sphere")


def earth_radius_m() -> float:
    return float(spherical_geod().a)


def meters_to_angle(meters: float) -> float:
    """
    Convert a distance on the Earth's surface to an angle in radians.
    """
    return float(meters) / earth_radius_m()


def km_to_angle(km: float) -> float:
    return meters_to_angle(1000.0 * float(km))


def angle_to_meters(angle: float) -> float:
    return float(angle) * earth_radius_m()


def interpolate_at_distance(a: LatLng, b: LatLng, angle: float) -> LatLng:
    """
    Point `angle` radians from `a` along the great circle towards `b`.

    Angles past `b` keep going along the same great circle.
    """
    g = spherical_geod()
    az, _back_az, _dist = g.inv(a.lng_degrees, a.lat_degrees, b.lng_degrees, b.lat_degrees)
    lon, lat, _ = g.fwd(a.lng_degrees, a.lat_degrees, az, angle_to_meters(angle))
    return LatLng.from_degrees(float(lat), float(lon))


def interpolate(a: LatLng, b: LatLng, fraction: float) -> LatLng:
    return interpolate_at_distance(a, b, fraction * a.get_distance(b))
