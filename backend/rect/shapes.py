from __future__ import annotations

import math
import random

import shapely
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry import box as shapely_box
from shapely.geometry.base import BaseGeometry

from geo.aoi import BBox
from geo.latlng import LatLng
from rect.builder import LatLngRectBuilder
from rect.latlng_rect import LatLngRect
from rect.validation import Validation


def to_bbox(rect: LatLngRect) -> BBox | None:
    """
    Lon/lat degree bbox of a rectangle; None for the empty rectangle.

    An antimeridian-crossing rectangle comes back with min_lon > max_lon.
    """
    if rect.is_empty():
        return None
    return BBox(
        min_lon=math.degrees(rect.lng.lo),
        min_lat=math.degrees(rect.lat.lo),
        max_lon=math.degrees(rect.lng.hi),
        max_lat=math.degrees(rect.lat.hi),
    )


def from_bbox(bbox: BBox, *, validation: Validation = Validation.checked) -> LatLngRect:
    b = bbox.normalized()
    return LatLngRect.from_corners(
        LatLng.from_degrees(b.min_lat, b.min_lon),
        LatLng.from_degrees(b.max_lat, b.max_lon),
        validation=validation,
    )


def to_shapely(rect: LatLngRect) -> Polygon | MultiPolygon:
    """
    Rectangle as a shapely geometry in EPSG:4326 lon/lat degrees.

    Planar geometries cannot wrap, so a rectangle crossing the antimeridian is
    split into two boxes meeting at +/-180.
    """
    b = to_bbox(rect)
    if b is None:
        return Polygon()
    if rect.lng.is_full():
        return shapely_box(-180.0, b.min_lat, 180.0, b.max_lat)
    if rect.is_inverted():
        return MultiPolygon(
            [
                shapely_box(b.min_lon, b.min_lat, 180.0, b.max_lat),
                shapely_box(-180.0, b.min_lat, b.max_lon, b.max_lat),
            ]
        )
    return shapely_box(b.min_lon, b.min_lat, b.max_lon, b.max_lat)


def rect_bound_of_geometry(geom: BaseGeometry) -> LatLngRect:
    """
    Bounding lat/lng rectangle of every vertex of a lon/lat shapely geometry.

    Vertices are added to one builder; this is the cheap way to bound many
    points (no intermediate rectangles).
    """
    builder = LatLngRectBuilder.empty()
    if geom is None or geom.is_empty:
        return builder.build()
    for lon, lat in shapely.get_coordinates(geom).tolist():
        builder.add_point(LatLng.from_degrees(lat, lon).normalized())
    return builder.build()


def sample_point(rect: LatLngRect, rng: random.Random) -> LatLng:
    """
    Random point inside `rect`, uniform with respect to area on the sphere.
    """
    assert not rect.is_empty(), "cannot sample from the empty rectangle"
    # Uniform in sin(lat) is uniform in area.
    sin_lo = math.sin(rect.lat.lo)
    sin_hi = math.sin(rect.lat.hi)
    lat = math.asin(sin_lo + rng.random() * (sin_hi - sin_lo))
    lng = rect.lng.lo + rng.random() * rect.lng.length()
    return LatLng(lat, lng).normalized()
