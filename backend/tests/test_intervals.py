from __future__ import annotations

import math

from geo.intervals import CircularInterval, LinearInterval


def test_linear_empty_intervals_compare_equal():
    assert LinearInterval(3.0, 2.0) == LinearInterval.empty()
    assert LinearInterval(3.0, 2.0).is_empty()
    assert hash(LinearInterval(3.0, 2.0)) == hash(LinearInterval.empty())


def test_linear_union_and_intersection():
    a = LinearInterval(0.0, 1.0)
    b = LinearInterval(0.5, 2.0)
    assert a.union(b) == LinearInterval(0.0, 2.0)
    assert a.intersection(b) == LinearInterval(0.5, 1.0)
    assert a.intersection(LinearInterval(3.0, 4.0)).is_empty()
    assert LinearInterval.empty().union(a) == a


def test_linear_add_point_and_expand():
    a = LinearInterval.empty().add_point(2.0).add_point(-1.0)
    assert a == LinearInterval(-1.0, 2.0)
    assert a.expanded(0.5) == LinearInterval(-1.5, 2.5)
    assert a.expanded(-2.0).is_empty()
    assert LinearInterval.empty().expanded(1.0).is_empty()


def test_circular_minus_pi_is_stored_as_pi():
    i = CircularInterval(-math.pi, 0.5)
    assert i.lo == math.pi
    assert i.is_inverted()
    assert CircularInterval.full().lo == -math.pi
    assert CircularInterval.empty().is_empty()
    assert not CircularInterval.full().is_empty()


def test_circular_from_point_pair_takes_short_way_round():
    i = CircularInterval.from_point_pair(math.radians(170), math.radians(-170))
    assert i.is_inverted()
    assert abs(i.length() - math.radians(20)) < 1e-12


def test_circular_add_point_grows_nearest_end():
    i = CircularInterval(0.0, 1.0)
    assert i.add_point(1.5) == CircularInterval(0.0, 1.5)
    assert i.add_point(-0.5) == CircularInterval(-0.5, 1.0)
    # Adding -pi is the same as adding pi.
    assert i.add_point(-math.pi) == i.add_point(math.pi)


def test_circular_union_covering_circle_is_full():
    a = CircularInterval(-2.0, 2.0)
    b = CircularInterval(1.5, -1.5)
    assert a.union(b).is_full()


def test_circular_intersection_of_two_wrapping_pieces_keeps_shorter():
    a = CircularInterval(math.radians(100), math.radians(-100))
    b = CircularInterval(math.radians(-120), math.radians(120))
    # True intersection is two arcs; the bound is the shorter input.
    assert a.intersection(b) == a
    assert a.intersection(CircularInterval.empty()).is_empty()


def test_circular_expanded_snaps_to_full_and_empty():
    i = CircularInterval(0.0, 1.0)
    assert i.expanded(math.pi).is_full()
    assert i.expanded(-0.5).is_empty()
    assert CircularInterval.full().expanded(-1.0).is_full()
    assert CircularInterval.empty().expanded(1.0).is_empty()

    shrunk = i.expanded(-0.25)
    assert abs(shrunk.lo - 0.25) < 1e-15
    assert abs(shrunk.hi - 0.75) < 1e-15


def test_circular_expanded_wraps_through_antimeridian():
    i = CircularInterval(math.radians(170), math.radians(175))
    out = i.expanded(math.radians(10))
    assert out.is_inverted()
    assert out.contains(math.pi)
    assert abs(out.hi - math.radians(-175)) < 1e-12


def test_circular_minus_pi_endpoints_normalize_independently():
    point = CircularInterval(-math.pi, -math.pi)
    assert (point.lo, point.hi) == (math.pi, math.pi)
    assert not point.is_empty()
    assert point.is_valid()

    left = CircularInterval(-math.pi, 1.0)
    assert (left.lo, left.hi) == (math.pi, 1.0)
    assert left.is_inverted()

    right = CircularInterval(-1.0, -math.pi)
    assert (right.lo, right.hi) == (-1.0, math.pi)
    assert not right.is_inverted()

    assert CircularInterval(math.pi, -math.pi).is_empty()
    assert CircularInterval(-math.pi, math.pi).is_full()
