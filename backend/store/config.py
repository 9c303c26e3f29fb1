from __future__ import annotations

import os
from pathlib import Path


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[2]


def store_path() -> Path:
    # Kept under the repo by default so it stays local.
    return Path(
        os.getenv("RECT_STORE_PATH")
        or (_repo_root() / "data" / "rects.duckdb")
    )


def store_enabled() -> bool:
    v = (os.getenv("RECT_STORE") or "1").strip().lower()
    return v not in {"0", "false", "no", "off"}
