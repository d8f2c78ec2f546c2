from __future__ import annotations

import os
from typing import Optional, Tuple

DEFAULT_ROWS = 4
DEFAULT_COLS = 4


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def default_dims(rows: Optional[int] = None, cols: Optional[int] = None) -> Tuple[int, int]:
    """Resolves board size: explicit values win, then DOTS_ROWS/DOTS_COLS, then 4x4."""
    r = rows if rows is not None else _env_int("DOTS_ROWS", DEFAULT_ROWS)
    c = cols if cols is not None else _env_int("DOTS_COLS", DEFAULT_COLS)
    return r, c


# Largest board side accepted from untrusted input (HTTP bodies, JSON states).
MAX_DIM = 50


def check_dims(rows: int, cols: int) -> Tuple[int, int]:
    if not (0 < rows <= MAX_DIM and 0 < cols <= MAX_DIM):
        raise ValueError(f"board size {rows}x{cols} outside 1..{MAX_DIM}")
    return rows, cols
