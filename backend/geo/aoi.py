from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BBox:
    """
    WGS84 bounding box in lon/lat degrees.

    Convention used throughout this repo:
    - minLon, minLat, maxLon, maxLat
    - min_lon > max_lon means the box crosses the antimeridian (180 degrees)
    """

    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float

    def crosses_antimeridian(self) -> bool:
        return self.min_lon > self.max_lon

    def normalized(self) -> "BBox":
        # Only latitude is order-free; swapping longitudes would flip the box
        # to the other side of the globe.
        min_lat = min(self.min_lat, self.max_lat)
        max_lat = max(self.min_lat, self.max_lat)
        return BBox(min_lon=self.min_lon, min_lat=min_lat, max_lon=self.max_lon, max_lat=max_lat)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_lon, self.min_lat, self.max_lon, self.max_lat)
