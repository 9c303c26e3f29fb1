from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rect.latlng_rect import LatLngRect


class RectBounded(Protocol):
    """
    Anything that can report the smallest lat/lng rectangle containing it.

    - LatLngRect: itself
    - LatLngRectBuilder: a frozen snapshot of its current state
    - Cap: bound computed from centre and radius
    """

    def rect_bound(self) -> "LatLngRect": ...


def union_of_bounds(regions: "list[RectBounded]") -> "LatLngRect":
    from rect.builder import LatLngRectBuilder

    b = LatLngRectBuilder.empty()
    for region in regions:
        b.union(region.rect_bound())
    return b.build()
