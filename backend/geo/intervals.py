from __future__ import annotations

import math
import sys
from dataclasses import dataclass


_EPS = sys.float_info.epsilon


@dataclass(frozen=True, eq=False)
class LinearInterval:
    """
    Closed interval [lo, hi] on the real line.

    Any interval with lo > hi is empty; the canonical empty interval is [1, 0].
    """

    lo: float
    hi: float

    @classmethod
    def empty(cls) -> "LinearInterval":
        return cls(1.0, 0.0)

    @classmethod
    def from_point(cls, p: float) -> "LinearInterval":
        return cls(p, p)

    @classmethod
    def from_point_pair(cls, p1: float, p2: float) -> "LinearInterval":
        if p1 <= p2:
            return cls(p1, p2)
        return cls(p2, p1)

    def bound(self, i: int) -> float:
        return self.hi if i else self.lo

    def is_empty(self) -> bool:
        return self.lo > self.hi

    def length(self) -> float:
        return self.hi - self.lo

    def center(self) -> float:
        return 0.5 * (self.lo + self.hi)

    def contains(self, p: float) -> bool:
        return self.lo <= p <= self.hi

    def contains_interval(self, y: "LinearInterval") -> bool:
        if y.is_empty():
            return True
        return self.lo <= y.lo and y.hi <= self.hi

    def intersects(self, y: "LinearInterval") -> bool:
        if self.lo <= y.lo:
            return y.lo <= self.hi and y.lo <= y.hi
        return self.lo <= y.hi and self.lo <= self.hi

    def add_point(self, p: float) -> "LinearInterval":
        if self.is_empty():
            return LinearInterval(p, p)
        if p < self.lo:
            return LinearInterval(p, self.hi)
        if p > self.hi:
            return LinearInterval(self.lo, p)
        return self

    def expanded(self, margin: float) -> "LinearInterval":
        # A negative margin may invert the bounds, which reads as empty.
        if self.is_empty():
            return self
        return LinearInterval(self.lo - margin, self.hi + margin)

    def union(self, y: "LinearInterval") -> "LinearInterval":
        if self.is_empty():
            return y
        if y.is_empty():
            return self
        return LinearInterval(min(self.lo, y.lo), max(self.hi, y.hi))

    def intersection(self, y: "LinearInterval") -> "LinearInterval":
        return LinearInterval(max(self.lo, y.lo), min(self.hi, y.hi))

    def approx_equals(self, y: "LinearInterval", max_error: float = 1e-15) -> bool:
        if self.is_empty():
            return y.length() <= 2 * max_error
        if y.is_empty():
            return self.length() <= 2 * max_error
        return abs(y.lo - self.lo) <= max_error and abs(y.hi - self.hi) <= max_error

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinearInterval):
            return NotImplemented
        if self.is_empty() and other.is_empty():
            return True
        return self.lo == other.lo and self.hi == other.hi

    def __hash__(self) -> int:
        if self.is_empty():
            return hash((1.0, 0.0))
        return hash((self.lo, self.hi))


@dataclass(frozen=True)
class CircularInterval:
    """
    Closed interval on the unit circle, endpoints in radians within [-pi, pi].

    lo > hi means the interval wraps through the point at pi (the antimeridian)
    rather than being empty. The empty interval is [pi, -pi] and the full one
    is [-pi, pi]; apart from those two, -pi is always stored as pi.
    """

    lo: float
    hi: float

    def __post_init__(self) -> None:
        # Both tests look at the endpoints as given, before either is rewritten.
        lo, hi = self.lo, self.hi
        if lo == -math.pi and hi != math.pi:
            object.__setattr__(self, "lo", math.pi)
        if hi == -math.pi and lo != math.pi:
            object.__setattr__(self, "hi", math.pi)

    @classmethod
    def empty(cls) -> "CircularInterval":
        return cls(math.pi, -math.pi)

    @classmethod
    def full(cls) -> "CircularInterval":
        return cls(-math.pi, math.pi)

    @classmethod
    def from_point(cls, p: float) -> "CircularInterval":
        if p == -math.pi:
            p = math.pi
        return cls(p, p)

    @classmethod
    def from_point_pair(cls, p1: float, p2: float) -> "CircularInterval":
        """
        Minimal interval containing both points (the shorter way around).
        """
        if p1 == -math.pi:
            p1 = math.pi
        if p2 == -math.pi:
            p2 = math.pi
        if _positive_distance(p1, p2) <= math.pi:
            return cls(p1, p2)
        return cls(p2, p1)

    def bound(self, i: int) -> float:
        return self.hi if i else self.lo

    def is_valid(self) -> bool:
        return (
            abs(self.lo) <= math.pi
            and abs(self.hi) <= math.pi
            and not (self.lo == -math.pi and self.hi != math.pi)
            and not (self.hi == -math.pi and self.lo != math.pi)
        )

    def is_full(self) -> bool:
        return self.lo == -math.pi and self.hi == math.pi

    def is_empty(self) -> bool:
        return self.lo == math.pi and self.hi == -math.pi

    def is_inverted(self) -> bool:
        return self.lo > self.hi

    def length(self) -> float:
        """
        Arc length; -1 for the empty interval.
        """
        n = self.hi - self.lo
        if n >= 0:
            return n
        n += 2 * math.pi
        return n if n > 0 else -1.0

    def center(self) -> float:
        c = 0.5 * (self.lo + self.hi)
        if not self.is_inverted():
            return c
        return c + math.pi if c <= 0 else c - math.pi

    def _fast_contains(self, p: float) -> bool:
        if self.is_inverted():
            return (p >= self.lo or p <= self.hi) and not self.is_empty()
        return self.lo <= p <= self.hi

    def contains(self, p: float) -> bool:
        if p == -math.pi:
            p = math.pi
        return self._fast_contains(p)

    def contains_interval(self, y: "CircularInterval") -> bool:
        if self.is_inverted():
            if y.is_inverted():
                return y.lo >= self.lo and y.hi <= self.hi
            return (y.lo >= self.lo or y.hi <= self.hi) and not self.is_empty()
        if y.is_inverted():
            return self.is_full() or y.is_empty()
        return y.lo >= self.lo and y.hi <= self.hi

    def intersects(self, y: "CircularInterval") -> bool:
        if self.is_empty() or y.is_empty():
            return False
        if self.is_inverted():
            return y.is_inverted() or y.lo <= self.hi or y.hi >= self.lo
        if y.is_inverted():
            return y.lo <= self.hi or y.hi >= self.lo
        return y.lo <= self.hi and y.hi >= self.lo

    def add_point(self, p: float) -> "CircularInterval":
        if p == -math.pi:
            p = math.pi
        if self._fast_contains(p):
            return self
        if self.is_empty():
            return CircularInterval(p, p)
        # Grow whichever end is closer to p.
        dlo = _positive_distance(p, self.lo)
        dhi = _positive_distance(self.hi, p)
        if dlo < dhi:
            return CircularInterval(p, self.hi)
        return CircularInterval(self.lo, p)

    def expanded(self, margin: float) -> "CircularInterval":
        """
        Grow (margin >= 0) or shrink (margin < 0) both ends by |margin|.

        Growing an empty interval keeps it empty and shrinking a full one keeps
        it full. Results within rounding error of full/empty snap to full/empty.
        """
        if margin >= 0:
            if self.is_empty():
                return self
            if self.length() + 2 * margin + 2 * _EPS >= 2 * math.pi:
                return CircularInterval.full()
        else:
            if self.is_full():
                return self
            if self.length() + 2 * margin - 2 * _EPS <= 0:
                return CircularInterval.empty()
        lo = math.remainder(self.lo - margin, 2 * math.pi)
        hi = math.remainder(self.hi + margin, 2 * math.pi)
        if lo <= -math.pi:
            lo = math.pi
        return CircularInterval(lo, hi)

    def union(self, y: "CircularInterval") -> "CircularInterval":
        if y.is_empty():
            return self
        if self._fast_contains(y.lo):
            if self._fast_contains(y.hi):
                # Either this contains y, or together they cover the circle.
                if self.contains_interval(y):
                    return self
                return CircularInterval.full()
            return CircularInterval(self.lo, y.hi)
        if self._fast_contains(y.hi):
            return CircularInterval(y.lo, self.hi)
        if self.is_empty() or y._fast_contains(self.lo):
            return y
        dlo = _positive_distance(y.hi, self.lo)
        dhi = _positive_distance(self.hi, y.lo)
        if dlo < dhi:
            return CircularInterval(y.lo, self.hi)
        return CircularInterval(self.lo, y.hi)

    def intersection(self, y: "CircularInterval") -> "CircularInterval":
        """
        Smallest interval containing the intersection.

        The true intersection can be two disjoint arcs; then the shorter of the
        two inputs is returned since it spans both.
        """
        if y.is_empty():
            return CircularInterval.empty()
        if self._fast_contains(y.lo):
            if self._fast_contains(y.hi):
                if y.length() < self.length():
                    return y
                return self
            return CircularInterval(y.lo, self.hi)
        if self._fast_contains(y.hi):
            return CircularInterval(self.lo, y.hi)
        if y._fast_contains(self.lo):
            return self
        return CircularInterval.empty()

    def approx_equals(self, y: "CircularInterval", max_error: float = 1e-15) -> bool:
        if self.is_empty():
            return y.length() <= 2 * max_error
        if y.is_empty():
            return self.length() <= 2 * max_error
        if self.is_full():
            return y.length() >= 2 * (math.pi - max_error)
        if y.is_full():
            return self.length() >= 2 * (math.pi - max_error)
        return (
            abs(math.remainder(y.lo - self.lo, 2 * math.pi)) <= max_error
            and abs(math.remainder(y.hi - self.hi, 2 * math.pi)) <= max_error
            and abs(self.length() - y.length()) <= 2 * max_error
        )


def _positive_distance(a: float, b: float) -> float:
    # Distance from a to b going counter-clockwise, in [0, 2*pi).
    d = b - a
    if d >= 0:
        return d
    return (b + math.pi) - (a - math.pi)
