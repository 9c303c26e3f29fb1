"""
Latitude/longitude rectangles on the sphere.

`LatLngRect` is the immutable value type; `LatLngRectBuilder` accumulates
bounds in place and freezes them with `build()`.
"""

from .builder import LatLngRectBuilder
from .codec import MalformedInputError, decode, encode
from .latlng_rect import LatLngRect
from .region import RectBounded
from .validation import InvalidRectError, Validation

__all__ = [
    "InvalidRectError",
    "LatLngRect",
    "LatLngRectBuilder",
    "MalformedInputError",
    "RectBounded",
    "Validation",
    "decode",
    "encode",
]
