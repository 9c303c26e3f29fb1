from __future__ import annotations

from dataclasses import InitVar, dataclass
from typing import TYPE_CHECKING, Callable

from geo.intervals import CircularInterval, LinearInterval
from geo.latlng import LatLng, Point
from rect import base
from rect.base import LatLngRectBase, RectBounds, full_lat, full_lng
from rect.validation import Validation, check

if TYPE_CHECKING:
    from rect.builder import LatLngRectBuilder


@dataclass(frozen=True, repr=False)
class LatLngRect(LatLngRectBase):
    """
    Closed latitude/longitude rectangle (radians), immutable.

    `lat` is a linear interval within [-pi/2, pi/2]; `lng` is a circular
    interval and may have lo > hi, meaning the rectangle crosses the
    antimeridian. Both are empty or both are non-empty.

    Every operation returns a new rectangle. For many successive changes use
    `to_builder()` and freeze the result with `build()`.

    Construction checks the invariants unless `validation=Validation.trusted`
    is passed, in which case the caller guarantees them.
    """

    lat: LinearInterval
    lng: CircularInterval
    validation: InitVar[Validation] = Validation.checked

    def __post_init__(self, validation: Validation) -> None:
        check(self.lat, self.lng, validation)

    @classmethod
    def empty(cls) -> "LatLngRect":
        return cls(LinearInterval.empty(), CircularInterval.empty())

    @classmethod
    def full(cls) -> "LatLngRect":
        return cls(full_lat(), full_lng())

    @staticmethod
    def full_lat() -> LinearInterval:
        return full_lat()

    @staticmethod
    def full_lng() -> CircularInterval:
        return full_lng()

    @classmethod
    def from_corners(
        cls, lo: LatLng, hi: LatLng, *, validation: Validation = Validation.checked
    ) -> "LatLngRect":
        """
        Rectangle with `lo` as the south-west corner and `hi` as the north-east
        corner. lo.lng > hi.lng means the rectangle spans the antimeridian.
        """
        return cls(
            LinearInterval(lo.lat, hi.lat),
            CircularInterval(lo.lng, hi.lng),
            validation=validation,
        )

    @classmethod
    def from_point(cls, p: LatLng) -> "LatLngRect":
        assert p.is_valid(), f"invalid LatLng {p}"
        return cls.from_corners(p, p)

    @classmethod
    def from_point_pair(cls, p1: LatLng, p2: LatLng) -> "LatLngRect":
        """
        Minimal rectangle containing both points.

        Unlike `from_corners`, p1 is not assumed to be the south-west corner;
        each axis independently takes the smallest interval holding both values.
        """
        assert p1.is_valid(), f"invalid LatLng {p1}"
        assert p2.is_valid(), f"invalid LatLng {p2}"
        return cls(
            LinearInterval.from_point_pair(p1.lat, p2.lat),
            CircularInterval.from_point_pair(p1.lng, p2.lng),
        )

    @classmethod
    def from_center_size(cls, center: LatLng, size: LatLng) -> "LatLngRect":
        """
        Rectangle of the given size around a normalized centre.

        Latitude is clamped to [-90, 90] degrees; longitude becomes full once the
        requested width reaches 360 degrees. For example (degrees):
        - center (80, 170), size (40, 60) -> lat [60, 90], lng [140, -160]
        - center (10, 40), size (210, 400) -> lat [-90, 90], lng full
        - center (-90, 180), size (20, 50) -> lat [-90, -80], lng [155, -155]
        """
        return cls.from_point(center).expanded(size * 0.5)

    def to_builder(self) -> "LatLngRectBuilder":
        from rect.builder import LatLngRectBuilder

        return LatLngRectBuilder.from_rect(self)

    def _derive(self, op: Callable[..., None], *args) -> "LatLngRect":
        b = RectBounds(self.lat, self.lng)
        op(b, *args)
        # Operands may be builders or trusted rects, so the result is checked.
        return LatLngRect(b.lat, b.lng)

    def add_point(self, p: LatLng | Point) -> "LatLngRect":
        """
        Smallest rectangle containing this one and `p` (a normalized LatLng or a
        unit-length Point).
        """
        return self._derive(base.add_point, p)

    def expanded(self, margin: LatLng) -> "LatLngRect":
        """
        Grow by margin.lat in latitude (clamped at the poles) and margin.lng in
        longitude (wrapped). Both margins must be non-negative; the empty
        rectangle stays empty.

        The result may contain a pole without all of its representations; call
        `polar_closure()` if that matters. For growth by a distance on the
        sphere use `expanded_by_distance` instead.
        """
        return self._derive(base.expand, margin)

    def polar_closure(self) -> "LatLngRect":
        """
        Widen longitude to full if the rectangle touches either pole.
        """
        closed = self._derive(base.polar_close)
        return self if closed == self else closed

    def union(self, other: LatLngRectBase) -> "LatLngRect":
        return self._derive(base.union, other)

    def intersection(self, other: LatLngRectBase) -> "LatLngRect":
        """
        Smallest rectangle containing the intersection.

        The intersection can be two disjoint rectangles (both longitude ranges
        wrap); a single rectangle spanning both is returned.
        """
        return self._derive(base.intersect, other)

    def expanded_by_distance(self, distance: float) -> "LatLngRect":
        """
        Expand to contain every point within `distance` radians of this
        rectangle, measured on the sphere. A negative distance shrinks instead,
        to the largest rectangle excluding all points within |distance| of the
        boundary.

        The empty and full rectangles are unchanged. A rectangle with full
        longitude has no east/west boundary, and at a pole it covers it has no
        boundary either, so nothing moves there. Growing to within `distance`
        of a pole yields full longitude.

        expanded_by_distance(x).expanded_by_distance(-x) approximately restores
        the original unless the first step made longitude full or empty or
        pulled a pole into the latitude range.
        """
        return self._derive(base.expand_by_distance, distance)

    def convolve_with_cap(self, angle: float) -> "LatLngRect":
        """
        Rectangle containing all points whose distance to this one is at most
        `angle` radians.
        """
        return self._derive(base.convolve_with_cap, angle)

    def rect_bound(self) -> "LatLngRect":
        return self

    def __repr__(self) -> str:
        return f"LatLngRect{self}"
