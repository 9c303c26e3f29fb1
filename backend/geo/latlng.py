from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """
    Point in R^3; points on the sphere are unit length.
    """

    x: float
    y: float
    z: float

    def norm2(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self) -> float:
        return math.sqrt(self.norm2())

    def sub(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def normalize(self) -> "Point":
        n = self.norm()
        if n == 0:
            return self
        return Point(self.x / n, self.y / n, self.z / n)

    def is_unit_length(self) -> bool:
        # Same tolerance as the usual "normalized vector" check (5 ulps-ish).
        return abs(self.norm2() - 1.0) <= 5e-15


@dataclass(frozen=True)
class LatLng:
    """
    Latitude/longitude pair in radians.

    Normalized (valid) values satisfy |lat| <= pi/2 and |lng| <= pi.
    """

    lat: float
    lng: float

    @classmethod
    def from_degrees(cls, lat_deg: float, lng_deg: float) -> "LatLng":
        return cls(math.radians(lat_deg), math.radians(lng_deg))

    @classmethod
    def from_point(cls, p: Point) -> "LatLng":
        return cls(
            math.atan2(p.z, math.sqrt(p.x * p.x + p.y * p.y)),
            math.atan2(p.y, p.x),
        )

    @property
    def lat_degrees(self) -> float:
        return math.degrees(self.lat)

    @property
    def lng_degrees(self) -> float:
        return math.degrees(self.lng)

    def is_valid(self) -> bool:
        return abs(self.lat) <= math.pi / 2 and abs(self.lng) <= math.pi

    def normalized(self) -> "LatLng":
        """
        Clamp latitude to [-pi/2, pi/2] and wrap longitude into [-pi, pi].
        """
        lat = max(-math.pi / 2, min(math.pi / 2, self.lat))
        return LatLng(lat, math.remainder(self.lng, 2 * math.pi))

    def to_point(self) -> Point:
        cos_lat = math.cos(self.lat)
        return Point(
            math.cos(self.lng) * cos_lat,
            math.sin(self.lng) * cos_lat,
            math.sin(self.lat),
        )

    def get_distance(self, other: "LatLng") -> float:
        """
        Great-circle angle (radians) between two valid points (haversine form).
        """
        dlat = math.sin(0.5 * (other.lat - self.lat))
        dlng = math.sin(0.5 * (other.lng - self.lng))
        x = dlat * dlat + dlng * dlng * math.cos(self.lat) * math.cos(other.lat)
        return 2 * math.asin(math.sqrt(min(1.0, x)))

    def __add__(self, other: "LatLng") -> "LatLng":
        return LatLng(self.lat + other.lat, self.lng + other.lng)

    def __sub__(self, other: "LatLng") -> "LatLng":
        return LatLng(self.lat - other.lat, self.lng - other.lng)

    def __mul__(self, k: float) -> "LatLng":
        return LatLng(self.lat * k, self.lng * k)

    def __str__(self) -> str:
        return f"({self.lat_degrees:.7f}, {self.lng_degrees:.7f})"
