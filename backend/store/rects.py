from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from pathlib import Path

import duckdb

from rect.builder import LatLngRectBuilder
from rect.codec import decode, encode
from rect.latlng_rect import LatLngRect
from store.sql import (
    CREATE_RECTS_TABLE_SQL,
    DELETE_RECT_SQL,
    SELECT_ALL_SQL,
    SELECT_IDS_SQL,
    SELECT_RECT_SQL,
    UPSERT_RECT_SQL,
)

logger = logging.getLogger(__name__)


@dataclass
class RectStore:
    """
    Named rectangles persisted in DuckDB using the lossless 33-byte encoding.

    Rows are decoded with the checked decoder, so a corrupted row surfaces as
    `MalformedInputError` rather than as an invalid rectangle.
    """

    path: Path
    conn: duckdb.DuckDBPyConnection
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def ensure_schema(self) -> None:
        with self._lock:
            self.conn.execute(CREATE_RECTS_TABLE_SQL)

    def put(self, rect_id: str, rect: LatLngRect) -> None:
        rid = str(rect_id).strip()
        if not rid:
            raise ValueError("Rectangle id must be non-empty")
        data = encode(rect)
        with self._lock:
            self.conn.execute(UPSERT_RECT_SQL, [rid, int(time.time() * 1000), data])
        logger.debug("stored rect %s %s", rid, rect)

    def get(self, rect_id: str) -> LatLngRect | None:
        with self._lock:
            row = self.conn.execute(SELECT_RECT_SQL, [str(rect_id)]).fetchone()
        if row is None:
            return None
        return decode(row[0])

    def ids(self) -> list[str]:
        with self._lock:
            rows = self.conn.execute(SELECT_IDS_SQL).fetchall()
        return [str(r[0]) for r in rows]

    def items(self) -> list[tuple[str, LatLngRect]]:
        with self._lock:
            rows = self.conn.execute(SELECT_ALL_SQL).fetchall()
        return [(str(rid), decode(data)) for rid, data in rows]

    def delete(self, rect_id: str) -> bool:
        with self._lock:
            existed = self.conn.execute(SELECT_RECT_SQL, [str(rect_id)]).fetchone() is not None
            self.conn.execute(DELETE_RECT_SQL, [str(rect_id)])
        return existed

    def bound(self) -> LatLngRect:
        """
        Smallest rectangle containing every stored rectangle (empty if none).
        """
        builder = LatLngRectBuilder.empty()
        for _rid, rect in self.items():
            builder.union(rect)
        return builder.build()

    def reset(self) -> None:
        # Delete the database file to reclaim space.
        with self._lock:
            try:
                self.conn.close()
            except Exception:
                logger.debug("closing rect store connection failed", exc_info=True)
            self.path.unlink(missing_ok=True)
