from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import app
from store.singleton import reset_store


client = TestClient(app)


def _rect(lat_lo: float, lng_lo: float, lat_hi: float, lng_hi: float) -> dict:
    return {"latLo": lat_lo, "latHi": lat_hi, "lngLo": lng_lo, "lngHi": lng_hi}


def test_from_points():
    res = client.post(
        "/rect/from-points",
        json={"points": [{"lat": 10, "lon": 20}, {"lat": 0, "lon": 0}]},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["latLo"] == pytest.approx(0.0)
    assert body["latHi"] == pytest.approx(10.0)
    assert body["lngLo"] == pytest.approx(0.0)
    assert body["lngHi"] == pytest.approx(20.0)
    assert body["isEmpty"] is False


def test_union_across_antimeridian():
    res = client.post(
        "/rect/union",
        json={"a": _rect(0, 170, 10, 175), "b": _rect(0, -175, 10, -170)},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["isInverted"] is True
    assert body["lngLo"] == pytest.approx(170.0)
    assert body["lngHi"] == pytest.approx(-170.0)


def test_intersection_of_disjoint_rects_is_empty():
    res = client.post(
        "/rect/intersection",
        json={"a": _rect(0, 0, 10, 10), "b": _rect(20, 0, 30, 10)},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["isEmpty"] is True
    assert body["latLo"] > body["latHi"]


def test_expand_endpoints():
    res = client.post(
        "/rect/expand",
        json={"rect": _rect(80, 0, 85, 10), "margin": {"lat": 10, "lon": 0}},
    )
    assert res.status_code == 200
    assert res.json()["latHi"] == pytest.approx(90.0)

    res = client.post(
        "/rect/expand-by-distance",
        json={"rect": _rect(10, 30, 20, 50), "meters": 100_000},
    )
    assert res.status_code == 200
    assert res.json()["latLo"] < 10.0

    res = client.post("/rect/polar-closure", json=_rect(80, 0, 90, 10))
    assert res.status_code == 200
    assert res.json()["isFull"] is False
    assert res.json()["lngLo"] == pytest.approx(-180.0)


def test_encode_decode_hex():
    r = _rect(-10, 170, 10, -170)
    res = client.post("/rect/encode", json=r)
    assert res.status_code == 200
    hex_data = res.json()["hex"]
    assert len(hex_data) == 66
    assert hex_data.startswith("01")

    res = client.post("/rect/decode", json={"hex": hex_data})
    assert res.status_code == 200
    body = res.json()
    assert body["lngLo"] == pytest.approx(170.0)
    assert body["isInverted"] is True


def test_decode_rejects_bad_payloads():
    res = client.post("/rect/decode", json={"hex": "02" + "00" * 32})
    assert res.status_code == 422
    assert "version" in res.json()["detail"]

    res = client.post("/rect/decode", json={"hex": "zz"})
    assert res.status_code == 422


def test_invalid_rect_is_rejected():
    # Non-empty latitude with the empty longitude interval.
    res = client.post("/rect/encode", json=_rect(0, 180, 10, -180))
    assert res.status_code == 422
    assert "both empty" in res.json()["detail"]


def test_store_endpoints(tmp_path, monkeypatch):
    monkeypatch.setenv("RECT_STORE", "1")
    monkeypatch.setenv("RECT_STORE_PATH", str(tmp_path / "rects.duckdb"))
    try:
        res = client.put("/rects/home", json=_rect(0, 0, 10, 10))
        assert res.status_code == 200

        res = client.get("/rects/home")
        assert res.status_code == 200
        assert res.json()["latHi"] == pytest.approx(10.0)

        assert client.get("/rects/nope").status_code == 404

        res = client.get("/rects")
        assert res.status_code == 200
        assert res.json()["ids"] == ["home"]
        assert res.json()["bound"]["lngHi"] == pytest.approx(10.0)
    finally:
        reset_store()


def test_store_disabled(monkeypatch):
    monkeypatch.setenv("RECT_STORE", "0")
    assert client.get("/rects").status_code == 503
