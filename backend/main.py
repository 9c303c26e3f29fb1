from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from api.models import (
    ApiDistanceBody,
    ApiEncoded,
    ApiExpandBody,
    ApiPairBody,
    ApiPointsBody,
    ApiRect,
    ApiRectOut,
    ApiStoredRects,
    latlng_from_api,
    rect_from_api,
    rect_to_api,
)
from geo.earth import meters_to_angle
from geo.latlng import LatLng
from rect.builder import LatLngRectBuilder
from rect.codec import MalformedInputError, decode, encode
from rect.latlng_rect import LatLngRect
from rect.validation import InvalidRectError
from store.rects import RectStore
from store.singleton import get_store

logger = logging.getLogger(__name__)

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _rect(r: ApiRect) -> LatLngRect:
    try:
        return rect_from_api(r)
    except InvalidRectError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


def _store() -> RectStore:
    store = get_store()
    if store is None:
        raise HTTPException(status_code=503, detail="Rectangle store is disabled")
    return store


@app.post("/rect/from-points")
def rect_from_points(body: ApiPointsBody) -> ApiRectOut:
    builder = LatLngRectBuilder.empty()
    for p in body.points:
        builder.add_point(latlng_from_api(p))
    return rect_to_api(builder.build())


@app.post("/rect/union")
def rect_union(body: ApiPairBody) -> ApiRectOut:
    return rect_to_api(_rect(body.a).union(_rect(body.b)))


@app.post("/rect/intersection")
def rect_intersection(body: ApiPairBody) -> ApiRectOut:
    return rect_to_api(_rect(body.a).intersection(_rect(body.b)))


@app.post("/rect/expand")
def rect_expand(body: ApiExpandBody) -> ApiRectOut:
    margin = LatLng.from_degrees(body.margin.lat, body.margin.lon)
    return rect_to_api(_rect(body.rect).expanded(margin))


@app.post("/rect/expand-by-distance")
def rect_expand_by_distance(body: ApiDistanceBody) -> ApiRectOut:
    angle = meters_to_angle(body.meters)
    return rect_to_api(_rect(body.rect).expanded_by_distance(angle))


@app.post("/rect/polar-closure")
def rect_polar_closure(body: ApiRect) -> ApiRectOut:
    return rect_to_api(_rect(body).polar_closure())


@app.post("/rect/encode")
def rect_encode(body: ApiRect) -> ApiEncoded:
    return ApiEncoded(hex=encode(_rect(body)).hex())


@app.post("/rect/decode")
def rect_decode(body: ApiEncoded) -> ApiRectOut:
    try:
        data = bytes.fromhex(body.hex)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid hex payload: {e}") from e
    try:
        return rect_to_api(decode(data))
    except MalformedInputError as e:
        logger.info("rejected encoded rect: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e


@app.put("/rects/{rect_id}")
def put_rect(rect_id: str, body: ApiRect) -> ApiRectOut:
    rect = _rect(body)
    _store().put(rect_id, rect)
    return rect_to_api(rect)


@app.get("/rects/{rect_id}")
def get_rect(rect_id: str) -> ApiRectOut:
    rect = _store().get(rect_id)
    if rect is None:
        raise HTTPException(status_code=404, detail=f"Unknown rectangle id: {rect_id}")
    return rect_to_api(rect)


@app.get("/rects")
def list_rects() -> ApiStoredRects:
    store = _store()
    return ApiStoredRects(ids=store.ids(), bound=rect_to_api(store.bound()))
