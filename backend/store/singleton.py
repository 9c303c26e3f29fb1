from __future__ import annotations

import logging
import threading

import duckdb

from store.config import store_enabled, store_path
from store.rects import RectStore

logger = logging.getLogger(__name__)

_STORE: RectStore | None = None
_STORE_LOCK = threading.RLock()


def get_store() -> RectStore | None:
    global _STORE
    if not store_enabled():
        return None
    with _STORE_LOCK:
        path = store_path()
        if _STORE is not None:
            # Reopen when the configured path changes (dev sessions, tests).
            if _STORE.path.resolve() == path.resolve():
                return _STORE
            try:
                _STORE.conn.close()
            except Exception:
                logger.debug("closing previous rect store failed", exc_info=True)
            _STORE = None

        path.parent.mkdir(parents=True, exist_ok=True)
        conn = duckdb.connect(str(path))
        _STORE = RectStore(path=path, conn=conn)
        _STORE.ensure_schema()
        logger.info("opened rect store at %s", path)
        return _STORE


def reset_store() -> None:
    global _STORE
    with _STORE_LOCK:
        if _STORE is not None:
            _STORE.reset()
            _STORE = None
        else:
            store_path().unlink(missing_ok=True)
