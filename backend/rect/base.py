"""
Shared lat/lng rectangle state and algorithms.

Both `LatLngRect` (immutable) and `LatLngRectBuilder` (mutable) are thin
wrappers around a `RectBounds`. Every transformation is implemented once here,
as an in-place update of a `RectBounds`; the builder applies it to its own
state, the immutable rectangle applies it to a private copy.

Note on topology: lat/lng space is treated as a cylinder, so a pole has many
representations (one per longitude). `polar_close` widens longitude to the
full circle when a pole is touched.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from geo.cap import Cap, chord_length2_from_angle
from geo.intervals import CircularInterval, LinearInterval
from geo.latlng import LatLng, Point
from rect.validation import is_valid


HALF_PI = math.pi / 2


def full_lat() -> LinearInterval:
    return LinearInterval(-HALF_PI, HALF_PI)


def full_lng() -> CircularInterval:
    return CircularInterval.full()


class LatLngRectBase:
    """
    Read-only queries shared by the rectangle and its builder.

    Subclasses expose `lat` (LinearInterval) and `lng` (CircularInterval).
    """

    lat: LinearInterval
    lng: CircularInterval

    @property
    def lat_lo(self) -> float:
        return self.lat.lo

    @property
    def lat_hi(self) -> float:
        return self.lat.hi

    @property
    def lng_lo(self) -> float:
        return self.lng.lo

    @property
    def lng_hi(self) -> float:
        return self.lng.hi

    def lo(self) -> LatLng:
        return LatLng(self.lat.lo, self.lng.lo)

    def hi(self) -> LatLng:
        return LatLng(self.lat.hi, self.lng.hi)

    def is_valid(self) -> bool:
        return is_valid(self.lat, self.lng)

    def is_empty(self) -> bool:
        return self.lat.is_empty()

    def is_full(self) -> bool:
        return self.lat == full_lat() and self.lng.is_full()

    def is_point(self) -> bool:
        return self.lat.lo == self.lat.hi and self.lng.lo == self.lng.hi

    def is_inverted(self) -> bool:
        """
        True if the longitude range crosses the antimeridian.
        """
        return self.lng.is_inverted()

    def get_vertex(self, k: int) -> LatLng:
        """
        Corner k (any integer, taken mod 4) in CCW order: lower left, lower
        right, upper right, upper left.
        """
        i = (k >> 1) & 1
        return LatLng(self.lat.bound(i), self.lng.bound(i ^ (k & 1)))

    def center(self) -> LatLng:
        return LatLng(self.lat.center(), self.lng.center())

    def size(self) -> LatLng:
        """
        Width and height in radians; negative for empty rectangles.
        """
        return LatLng(self.lat.length(), self.lng.length())

    def area(self) -> float:
        """
        Surface area on the unit sphere (steradians).
        """
        if self.is_empty():
            return 0.0
        return self.lng.length() * abs(math.sin(self.lat.hi) - math.sin(self.lat.lo))

    def contains(self, other: Union[LatLng, Point, "LatLngRectBase"]) -> bool:
        if isinstance(other, LatLngRectBase):
            return self.lat.contains_interval(other.lat) and self.lng.contains_interval(other.lng)
        if isinstance(other, Point):
            other = LatLng.from_point(other)
        assert other.is_valid(), f"invalid LatLng {other}"
        return self.lat.contains(other.lat) and self.lng.contains(other.lng)

    def intersects(self, other: "LatLngRectBase") -> bool:
        return self.lat.intersects(other.lat) and self.lng.intersects(other.lng)

    def approx_equals(self, other: "LatLngRectBase", max_error: float = 1e-15) -> bool:
        return self.lat.approx_equals(other.lat, max_error) and self.lng.approx_equals(
            other.lng, max_error
        )

    def __str__(self) -> str:
        return f"[Lo={self.lo()}, Hi={self.hi()}]"


@dataclass(repr=False)
class RectBounds(LatLngRectBase):
    lat: LinearInterval
    lng: CircularInterval

    @classmethod
    def empty(cls) -> "RectBounds":
        return cls(LinearInterval.empty(), CircularInterval.empty())

    def set_empty(self) -> None:
        self.lat = LinearInterval.empty()
        self.lng = CircularInterval.empty()


# In-place algorithms. Each one mutates `b` and assumes nothing about validity.


def add_point(b: RectBounds, p: LatLng | Point) -> None:
    if isinstance(p, Point):
        p = LatLng.from_point(p)
    assert p.is_valid(), f"invalid LatLng {p}"
    b.lat = b.lat.add_point(p.lat)
    b.lng = b.lng.add_point(p.lng)


def expand(b: RectBounds, margin: LatLng) -> None:
    # Latitude is clamped at the poles, longitude wraps.
    assert margin.lat >= 0 and margin.lng >= 0, f"negative margin {margin}"
    b.lat = b.lat.expanded(margin.lat).intersection(full_lat())
    b.lng = b.lng.expanded(margin.lng)


def polar_close(b: RectBounds) -> None:
    if b.lat.lo == -HALF_PI or b.lat.hi == HALF_PI:
        b.lng = full_lng()


def union(b: RectBounds, other: LatLngRectBase) -> None:
    b.lat = b.lat.union(other.lat)
    b.lng = b.lng.union(other.lng)


def intersect(b: RectBounds, other: LatLngRectBase) -> None:
    # The true intersection may be two disjoint pieces; we keep their bound.
    b.lat = b.lat.intersection(other.lat)
    b.lng = b.lng.intersection(other.lng)
    if b.lat.is_empty() or b.lng.is_empty():
        b.set_empty()


def convolve_with_cap(b: RectBounds, angle: float) -> None:
    """
    Grow `b` to cover every point within `angle` radians of it.

    Unions in the rectangle bound of a cap centred on each corner. This is an
    approximation (exact for the corners, conservative elsewhere).
    """
    if b.lat.is_empty():
        return
    length2 = chord_length2_from_angle(angle)
    for v in [b.get_vertex(k) for k in range(4)]:
        union(b, Cap.from_axis_chord(v.to_point(), length2).rect_bound())


def expand_by_distance(b: RectBounds, distance: float) -> None:
    """
    Grow by `distance` radians on the sphere, or shrink when it is negative.

    Shrinking keeps latitude bounds that sit on a pole while longitude is full
    (there is no boundary there), and empties the rectangle when either axis
    collapses.
    """
    if distance >= 0:
        convolve_with_cap(b, distance)
        return

    margin = -distance
    lng_full = b.lng.is_full()
    lat = LinearInterval(
        b.lat.lo if b.lat.lo <= -HALF_PI and lng_full else b.lat.lo + margin,
        b.lat.hi if b.lat.hi >= HALF_PI and lng_full else b.lat.hi - margin,
    )
    if lat.is_empty():
        b.set_empty()
        return

    # At the latitude furthest from the equator the cap spans the widest
    # longitude range (law of sines); past the point where sin_a >= sin_c it
    # spans every longitude.
    max_abs_lat = max(-lat.lo, lat.hi)
    sin_a = math.sin(margin)
    sin_c = math.cos(max_abs_lat)
    lng_margin = math.asin(sin_a / sin_c) if sin_a < sin_c else HALF_PI
    lng = b.lng.expanded(-lng_margin)
    if lng.is_empty():
        b.set_empty()
        return

    b.lat = lat
    b.lng = lng
