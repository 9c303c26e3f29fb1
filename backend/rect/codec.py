"""
Lossless binary encoding of `LatLngRect`.

Layout (little-endian, 33 bytes), byte-compatible with the other S2
implementations:

    u8   version (= 1)
    f64  lat.lo
    f64  lat.hi
    f64  lng.lo
    f64  lng.hi

Decoding always validates: the bytes are untrusted input.
"""

from __future__ import annotations

import logging
import struct
from typing import BinaryIO

from geo.intervals import CircularInterval, LinearInterval
from rect.latlng_rect import LatLngRect
from rect.validation import Validation, violated_invariant

logger = logging.getLogger(__name__)

LOSSLESS_ENCODING_VERSION = 1

_LAYOUT = struct.Struct("<Bdddd")
ENCODED_SIZE = _LAYOUT.size


class MalformedInputError(ValueError):
    """
    Raised when bytes cannot be decoded into a valid rectangle.
    """


def encode(rect: LatLngRect) -> bytes:
    return _LAYOUT.pack(
        LOSSLESS_ENCODING_VERSION,
        rect.lat.lo,
        rect.lat.hi,
        rect.lng.lo,
        rect.lng.hi,
    )


def encode_to(rect: LatLngRect, out: BinaryIO) -> None:
    out.write(encode(rect))


def decode(data: bytes) -> LatLngRect:
    """
    Decode the first ENCODED_SIZE bytes of `data`; trailing bytes are ignored.
    """
    buf = bytes(data)
    if len(buf) < 1:
        raise MalformedInputError("Empty input; expected an encoded lat/lng rectangle")
    version = buf[0]
    if version != LOSSLESS_ENCODING_VERSION:
        logger.debug("rejecting rect encoding with version %s", version)
        raise MalformedInputError(f"Unsupported lat/lng rectangle encoding version {version}")
    if len(buf) < ENCODED_SIZE:
        raise MalformedInputError(
            f"Truncated lat/lng rectangle encoding: {len(buf)} of {ENCODED_SIZE} bytes"
        )

    _version, lat_lo, lat_hi, lng_lo, lng_hi = _LAYOUT.unpack_from(buf)
    lat = LinearInterval(lat_lo, lat_hi)
    lng = CircularInterval(lng_lo, lng_hi)
    problem = violated_invariant(lat, lng)
    if problem is not None:
        logger.debug("rejecting decoded rect: %s", problem)
        raise MalformedInputError(
            f"Decoded lat and lng intervals do not form a valid rectangle: {problem}"
        )
    return LatLngRect(lat, lng, validation=Validation.trusted)


def decode_from(stream: BinaryIO) -> LatLngRect:
    """
    Read exactly one encoded rectangle from a binary stream.
    """
    return decode(stream.read(ENCODED_SIZE))
