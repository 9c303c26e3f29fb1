from __future__ import annotations

import math
import random

import pytest

from geo.latlng import LatLng
from rect.builder import LatLngRectBuilder
from rect.latlng_rect import LatLngRect
from rect.validation import InvalidRectError, Validation


def _points(n: int, seed: int) -> list[LatLng]:
    rng = random.Random(seed)
    return [LatLng.from_degrees(rng.uniform(-60, 60), rng.uniform(-180, 180)) for _ in range(n)]


def test_build_returns_fresh_equal_rects():
    b = LatLngRectBuilder.from_corners(LatLng.from_degrees(0, 0), LatLng.from_degrees(10, 10))
    r1 = b.build()
    r2 = b.build()
    assert r1 == r2
    assert r1 is not r2


def test_mutating_after_build_leaves_built_rect_alone():
    b = LatLngRectBuilder.from_corners(LatLng.from_degrees(0, 0), LatLng.from_degrees(10, 10))
    before = b.build()
    b.add_point(LatLng.from_degrees(40, 50)).expanded(LatLng.from_degrees(1, 1))
    assert before == LatLngRect.from_corners(LatLng.from_degrees(0, 0), LatLng.from_degrees(10, 10))
    assert b.build().contains(LatLng.from_degrees(40, 50))


def test_mutators_chain_on_same_builder():
    b = LatLngRectBuilder.empty()
    assert b.add_point(LatLng.from_degrees(1, 1)) is b
    assert b.union(LatLngRect.from_point(LatLng.from_degrees(2, 2))) is b
    assert b.expanded(LatLng.from_degrees(0.5, 0.5)) is b
    assert b.polar_closure() is b
    assert b.expanded_by_distance(0.01) is b
    assert b.intersection(LatLngRect.full()) is b


def test_bulk_add_matches_folding_immutable_add_point():
    pts = _points(100, seed=3)
    b = LatLngRectBuilder.empty()
    r = LatLngRect.empty()
    for p in pts:
        b.add_point(p)
        r = r.add_point(p)
    assert b.build() == r
    for p in pts:
        assert r.contains(p)


def test_intersection_with_disjoint_latitude_empties_both_axes():
    b = LatLngRectBuilder.from_corners(LatLng.from_degrees(0, 0), LatLng.from_degrees(10, 10))
    b.intersection(
        LatLngRect.from_corners(LatLng.from_degrees(20, 0), LatLng.from_degrees(30, 10))
    )
    assert b.lat.is_empty()
    assert b.lng.is_empty()
    assert b.build() == LatLngRect.empty()


def test_invalid_state_is_caught_at_build():
    b = LatLngRectBuilder.from_corners(LatLng.from_degrees(0, 0), LatLng.from_degrees(10, 10))
    b.set_lat(0.0, 2.0)
    with pytest.raises(InvalidRectError, match="latitude"):
        b.build()
    r = b.build(validation=Validation.trusted)
    assert not r.is_valid()


def test_clear_and_set_full():
    b = LatLngRectBuilder.from_corners(LatLng.from_degrees(0, 0), LatLng.from_degrees(10, 10))
    assert b.clear().build() == LatLngRect.empty()
    assert b.set_full().build() == LatLngRect.full()
    b.set_lat(-0.1, 0.1).set_lng(3.0, -3.0)
    assert b.is_inverted()
    assert b.build().contains(LatLng(0.0, math.pi))


def test_to_builder_round_trip():
    r = LatLngRect.from_corners(LatLng.from_degrees(-10, 170), LatLng.from_degrees(10, -170))
    b = r.to_builder()
    assert isinstance(b, LatLngRectBuilder)
    assert b.build() == r
    b.add_point(LatLng.from_degrees(0, 0))
    assert not r.contains(LatLng.from_degrees(0, 0))


def test_builder_and_rect_agree_on_distance_expansion():
    r = LatLngRect.from_corners(LatLng.from_degrees(10, 30), LatLng.from_degrees(20, 50))
    for d in (math.radians(2), -math.radians(2)):
        assert LatLngRectBuilder.from_rect(r).expanded_by_distance(d).build() == r.expanded_by_distance(d)
    d = math.radians(1)
    assert LatLngRectBuilder.from_rect(r).convolve_with_cap(d).build() == r.convolve_with_cap(d)


def test_rect_bound_is_snapshot():
    b = LatLngRectBuilder.empty().add_point(LatLng.from_degrees(5, 5))
    snap = b.rect_bound()
    b.add_point(LatLng.from_degrees(6, 6))
    assert snap.is_point()
    assert not b.is_point()


def test_union_of_bounds_accepts_any_rect_bounded_region():
    from geo.cap import Cap
    from rect.region import union_of_bounds

    rect = LatLngRect.from_corners(LatLng.from_degrees(0, 0), LatLng.from_degrees(10, 10))
    cap = Cap.from_axis_angle(LatLng.from_degrees(-20, 100).to_point(), math.radians(1))
    builder = LatLngRectBuilder.empty().add_point(LatLng.from_degrees(30, -40))

    out = union_of_bounds([rect, cap, builder])
    assert out.contains(rect)
    assert out.contains(cap.rect_bound())
    assert out.contains(LatLng.from_degrees(30, -40))
    assert union_of_bounds([]) == LatLngRect.empty()
