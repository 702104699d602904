from __future__ import annotations

from typing import Any, Optional

_TRUTHY = {"1", "true", "yes", "on"}


def normalize(raw: Any) -> Optional[str]:
    """
    Trim a raw facet value. Blank or missing values come back as ``None`` (absent).

    Case is left untouched; folding happens at comparison time and only for the
    dimensions that ask for it (see ``predicates.Match.folded``).
    """
    if raw is None:
        return None
    value = str(raw).strip()
    return value or None


def normalize_month(raw: Any) -> Optional[str]:
    value = normalize(raw)
    if value is None:
        return None
    if value.isdigit() and 1 <= int(value) <= 12:
        return f"{int(value):02d}"
    return value


def normalize_flag(raw: Any) -> bool:
    value = normalize(raw)
    return value is not None and value.lower() in _TRUTHY


def to_int(raw: Any) -> Optional[int]:
    value = normalize(raw)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None
