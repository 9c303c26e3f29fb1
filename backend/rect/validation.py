from __future__ import annotations

import math
from enum import Enum

from geo.intervals import CircularInterval, LinearInterval


class Validation(str, Enum):
    """
    How much a constructor trusts its inputs.

    - checked: verify the rectangle invariants and raise on violation
    - trusted: skip the check; the caller guarantees validity
    """

    checked = "checked"
    trusted = "trusted"


class InvalidRectError(ValueError):
    """
    Raised by checked construction when lat/lng intervals break an invariant.
    """


def violated_invariant(lat: LinearInterval, lng: CircularInterval) -> str | None:
    """
    Describe the first invariant the interval pair breaks, or None if valid.
    """
    if not (abs(lat.lo) <= math.pi / 2 and abs(lat.hi) <= math.pi / 2):
        return f"latitude [{lat.lo}, {lat.hi}] must lie within [-pi/2, pi/2]"
    if not lng.is_valid():
        return f"longitude [{lng.lo}, {lng.hi}] is not a valid circular interval"
    if lat.is_empty() != lng.is_empty():
        return "latitude and longitude must be both empty or both non-empty"
    return None


def is_valid(lat: LinearInterval, lng: CircularInterval) -> bool:
    return violated_invariant(lat, lng) is None


def check(lat: LinearInterval, lng: CircularInterval, validation: Validation) -> None:
    if validation == Validation.trusted:
        return
    problem = violated_invariant(lat, lng)
    if problem is not None:
        raise InvalidRectError(f"Invalid lat/lng rectangle: {problem}")
