from __future__ import annotations

from geo.intervals import CircularInterval, LinearInterval
from geo.latlng import LatLng, Point
from rect import base
from rect.base import LatLngRectBase, RectBounds
from rect.latlng_rect import LatLngRect
from rect.validation import Validation


class LatLngRectBuilder(LatLngRectBase):
    """
    Mutable companion of `LatLngRect` for building bounds incrementally.

    Mutators update the builder in place and return it, so calls can be chained.
    Invariants are not checked until `build()`. A builder has a single owner;
    sharing one across threads needs external locking.

    Example:

        builder = LatLngRectBuilder.empty()
        for p in points:
            builder.add_point(p)
        rect = builder.build()
    """

    def __init__(
        self,
        lat: LinearInterval | None = None,
        lng: CircularInterval | None = None,
    ) -> None:
        if lat is None and lng is None:
            self._bounds = RectBounds.empty()
        else:
            self._bounds = RectBounds(
                lat if lat is not None else LinearInterval.empty(),
                lng if lng is not None else CircularInterval.empty(),
            )

    @classmethod
    def empty(cls) -> "LatLngRectBuilder":
        return cls()

    @classmethod
    def from_corners(cls, lo: LatLng, hi: LatLng) -> "LatLngRectBuilder":
        return cls(LinearInterval(lo.lat, hi.lat), CircularInterval(lo.lng, hi.lng))

    @classmethod
    def from_rect(cls, r: LatLngRectBase) -> "LatLngRectBuilder":
        return cls(r.lat, r.lng)

    # Intervals are immutable values, so handing them out never exposes the
    # builder's live state.
    @property
    def lat(self) -> LinearInterval:
        return self._bounds.lat

    @property
    def lng(self) -> CircularInterval:
        return self._bounds.lng

    def set_lat(self, lo: float, hi: float) -> "LatLngRectBuilder":
        self._bounds.lat = LinearInterval(lo, hi)
        return self

    def set_lng(self, lo: float, hi: float) -> "LatLngRectBuilder":
        self._bounds.lng = CircularInterval(lo, hi)
        return self

    def set_full(self) -> "LatLngRectBuilder":
        self._bounds.lat = base.full_lat()
        self._bounds.lng = base.full_lng()
        return self

    def clear(self) -> "LatLngRectBuilder":
        self._bounds.set_empty()
        return self

    def add_point(self, p: LatLng | Point) -> "LatLngRectBuilder":
        base.add_point(self._bounds, p)
        return self

    def expanded(self, margin: LatLng) -> "LatLngRectBuilder":
        base.expand(self._bounds, margin)
        return self

    def polar_closure(self) -> "LatLngRectBuilder":
        base.polar_close(self._bounds)
        return self

    def union(self, other: LatLngRectBase) -> "LatLngRectBuilder":
        base.union(self._bounds, other)
        return self

    def intersection(self, other: LatLngRectBase) -> "LatLngRectBuilder":
        # Per-axis intersection can leave exactly one axis empty;
        # base.intersect empties both in that case.
        base.intersect(self._bounds, other)
        return self

    def convolve_with_cap(self, angle: float) -> "LatLngRectBuilder":
        base.convolve_with_cap(self._bounds, angle)
        return self

    def expanded_by_distance(self, distance: float) -> "LatLngRectBuilder":
        base.expand_by_distance(self._bounds, distance)
        return self

    def build(self, *, validation: Validation = Validation.checked) -> LatLngRect:
        """
        Freeze the current state into a new immutable rectangle.

        The builder stays usable; later changes do not affect rectangles
        already built.
        """
        return LatLngRect(self._bounds.lat, self._bounds.lng, validation=validation)

    def rect_bound(self) -> LatLngRect:
        return self.build()

    def __repr__(self) -> str:
        return f"LatLngRectBuilder{self}"
