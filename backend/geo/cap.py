from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from geo.intervals import CircularInterval, LinearInterval
from geo.latlng import LatLng, Point

if TYPE_CHECKING:
    from rect.latlng_rect import LatLngRect


# Squared chord length of a straight angle (two antipodal unit vectors).
MAX_CHORD_LENGTH2 = 4.0


def chord_length2_from_angle(angle: float) -> float:
    """
    Squared chord length subtending `angle` radians; -1 for negative angles.

    Angles beyond pi saturate at the antipodal chord.
    """
    if angle < 0:
        return -1.0
    if math.isinf(angle):
        return math.inf
    length = 2.0 * math.sin(0.5 * min(math.pi, angle))
    return length * length


def angle_from_chord_length2(length2: float) -> float:
    if length2 < 0:
        return -1.0
    if math.isinf(length2):
        return math.inf
    return 2.0 * math.asin(0.5 * math.sqrt(min(MAX_CHORD_LENGTH2, length2)))


@dataclass(frozen=True)
class Cap:
    """
    Spherical cap: all unit vectors within a chord distance of `center`.

    The radius is kept as a squared chord length; negative means empty and
    4 (the antipodal chord) means the whole sphere.
    """

    center: Point
    length2: float

    @classmethod
    def from_axis_chord(cls, center: Point, length2: float) -> "Cap":
        return cls(center, min(length2, MAX_CHORD_LENGTH2))

    @classmethod
    def from_axis_angle(cls, center: Point, angle: float) -> "Cap":
        return cls.from_axis_chord(center, chord_length2_from_angle(angle))

    @classmethod
    def empty(cls) -> "Cap":
        return cls(Point(1.0, 0.0, 0.0), -1.0)

    @classmethod
    def full(cls) -> "Cap":
        return cls(Point(1.0, 0.0, 0.0), MAX_CHORD_LENGTH2)

    def is_empty(self) -> bool:
        return self.length2 < 0

    def is_full(self) -> bool:
        return self.length2 >= MAX_CHORD_LENGTH2

    def radius(self) -> float:
        return angle_from_chord_length2(self.length2)

    def contains(self, p: Point) -> bool:
        return self.center.sub(p).norm2() <= self.length2

    def rect_bound(self) -> "LatLngRect":
        """
        Smallest lat/lng rectangle containing the cap.

        The longitude half-width follows from the law of sines on the spherical
        triangle formed by the pole, the cap centre and a tangent point.
        """
        # Imported here; rect depends on this module for distance expansion.
        from rect.latlng_rect import LatLngRect

        if self.is_empty():
            return LatLngRect.empty()

        center = LatLng.from_point(self.center)
        cap_angle = self.radius()
        all_longitudes = False

        lat_lo = center.lat - cap_angle
        if lat_lo <= -math.pi / 2:
            lat_lo = -math.pi / 2
            all_longitudes = True
        lat_hi = center.lat + cap_angle
        if lat_hi >= math.pi / 2:
            lat_hi = math.pi / 2
            all_longitudes = True

        lng = CircularInterval.full()
        if not all_longitudes:
            sin_a = math.sqrt(self.length2 * (1.0 - 0.25 * self.length2))
            sin_c = math.cos(center.lat)
            if sin_a <= sin_c:
                angle_a = math.asin(sin_a / sin_c)
                lng = CircularInterval(
                    math.remainder(center.lng - angle_a, 2 * math.pi),
                    math.remainder(center.lng + angle_a, 2 * math.pi),
                )
        return LatLngRect(LinearInterval(lat_lo, lat_hi), lng)
