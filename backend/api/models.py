from __future__ import annotations

import math

from pydantic import BaseModel, Field

from geo.intervals import CircularInterval, LinearInterval
from geo.latlng import LatLng
from rect.latlng_rect import LatLngRect


class ApiLatLng(BaseModel):
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)


class ApiMargin(BaseModel):
    lat: float = Field(ge=0.0)
    lon: float = Field(ge=0.0)


class ApiRect(BaseModel):
    """
    Lat/lng rectangle in degrees.

    lngLo > lngHi means the rectangle crosses the antimeridian. The empty
    rectangle is any latLo > latHi paired with lngLo = 180, lngHi = -180.
    """

    latLo: float = Field(ge=-90.0, le=90.0)
    latHi: float = Field(ge=-90.0, le=90.0)
    lngLo: float = Field(ge=-180.0, le=180.0)
    lngHi: float = Field(ge=-180.0, le=180.0)


class ApiRectOut(ApiRect):
    isEmpty: bool
    isFull: bool
    isInverted: bool
    areaSteradians: float


class ApiPointsBody(BaseModel):
    points: list[ApiLatLng]


class ApiPairBody(BaseModel):
    a: ApiRect
    b: ApiRect


class ApiExpandBody(BaseModel):
    rect: ApiRect
    margin: ApiMargin


class ApiDistanceBody(BaseModel):
    rect: ApiRect
    # Signed: negative shrinks.
    meters: float


class ApiEncoded(BaseModel):
    hex: str


class ApiStoredRects(BaseModel):
    ids: list[str]
    bound: ApiRectOut


def _lat_radians(deg: float) -> float:
    # Degree->radian rounding must not push +/-90 past the pole.
    return max(-math.pi / 2, min(math.pi / 2, math.radians(deg)))


def rect_from_api(r: ApiRect) -> LatLngRect:
    """
    Checked conversion; raises InvalidRectError for inconsistent input.
    """
    return LatLngRect(
        LinearInterval(_lat_radians(r.latLo), _lat_radians(r.latHi)),
        CircularInterval(math.radians(r.lngLo), math.radians(r.lngHi)),
    )


def rect_to_api(rect: LatLngRect) -> ApiRectOut:
    if rect.is_empty():
        # Degrees of the canonical empty interval [1, 0] rad would read as data.
        lat_lo, lat_hi = 1.0, 0.0
    else:
        lat_lo, lat_hi = math.degrees(rect.lat.lo), math.degrees(rect.lat.hi)
    return ApiRectOut(
        latLo=lat_lo,
        latHi=lat_hi,
        lngLo=math.degrees(rect.lng.lo),
        lngHi=math.degrees(rect.lng.hi),
        isEmpty=rect.is_empty(),
        isFull=rect.is_full(),
        isInverted=rect.is_inverted(),
        areaSteradians=rect.area(),
    )


def latlng_from_api(p: ApiLatLng) -> LatLng:
    return LatLng(_lat_radians(p.lat), math.radians(p.lon))
