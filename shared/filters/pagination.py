from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shared.filters.normalizer import to_int

DEFAULT_LIMIT = 20
MIN_LIMIT = 1
MAX_LIMIT = 100
# offset + limit must still fit a signed 64-bit SQLite INTEGER
MAX_OFFSET = 2**63 - 1 - MAX_LIMIT


@dataclass(frozen=True)
class Page:
    limit: int
    offset: int


def _clamp(value: int, lo: int, hi: int | None = None) -> int:
    value = max(lo, value)
    return min(hi, value) if hi is not None else value


def paginate(limit: Any = None, offset: Any = None, page: Any = None) -> Page:
    """
    Turn raw ``limit``/``offset`` or ``page``/``limit`` inputs into a valid pair.

    - ``limit`` is clamped to [1, 100]; missing or non-numeric -> 20.
    - an explicit ``offset`` wins over ``page`` and is clamped to [0, MAX_OFFSET].
    - otherwise ``page`` (1-based, clamped to >= 1) gives ``(page - 1) * limit``.
    """
    lim = to_int(limit)
    lim = DEFAULT_LIMIT if lim is None else _clamp(lim, MIN_LIMIT, MAX_LIMIT)

    off = to_int(offset)
    if off is not None:
        return Page(limit=lim, offset=_clamp(off, 0, MAX_OFFSET))

    pg = to_int(page)
    pg = 1 if pg is None else _clamp(pg, 1)
    return Page(limit=lim, offset=min((pg - 1) * lim, MAX_OFFSET))
