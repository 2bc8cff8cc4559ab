"""Lenient field readers for API payload dicts.

The catalog API is trusted to return the documented shape, but records are
never validated: a missing or mistyped field reads as ``None`` (or an empty
tuple for sequences) instead of raising.
"""

from __future__ import annotations

from typing import Any


def text_field(payload: Any, key: str) -> str | None:
    if not isinstance(payload, dict):
        return None
    value = payload.get(key)
    return value if isinstance(value, str) else None


def int_field(payload: Any, key: str) -> int | None:
    if not isinstance(payload, dict):
        return None
    value = payload.get(key)
    # bool is an int subclass; it is never a valid id or count here.
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def list_field(payload: Any, key: str) -> list[Any]:
    if not isinstance(payload, dict):
        return []
    value = payload.get(key)
    return value if isinstance(value, list) else []
