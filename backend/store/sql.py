from __future__ import annotations

CREATE_RECTS_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS rects (
  id TEXT PRIMARY KEY,
  updated_ms BIGINT,
  data BLOB
);
"""

UPSERT_RECT_SQL = """
INSERT OR REPLACE INTO rects (id, updated_ms, data)
VALUES (?, ?, ?)
"""

SELECT_RECT_SQL = """
SELECT data FROM rects WHERE id = ?
"""

SELECT_IDS_SQL = """
SELECT id FROM rects ORDER BY id
"""

SELECT_ALL_SQL = """
SELECT id, data FROM rects ORDER BY id
"""

DELETE_RECT_SQL = """
DELETE FROM rects WHERE id = ?
"""
