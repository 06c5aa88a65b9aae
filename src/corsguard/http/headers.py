# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header lookup utilities.

HTTP header field names are case-insensitive (RFC 9110), and HttpClient implementations
hand back plain dicts, ``httpx.Headers`` or lists of pairs. CORS classification has to
tell an absent header apart from an empty one, so lookups here return ``None`` for
absence instead of a default string.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _coerce_headers_mapping(headers: Any) -> Mapping[object, object] | None:
    """Best-effort coercion of "dict-like" header containers into a Mapping."""
    if not headers:
        return None
    if isinstance(headers, Mapping):
        return headers

    items = getattr(headers, "items", None)
    if callable(items):
        try:
            return dict(items())
        except (TypeError, ValueError):
            pass

    try:
        return dict(headers)
    except (TypeError, ValueError):
        return None


def find_header(headers: Any, name: str) -> str | None:
    """
    Return the raw value of ``name`` using case-insensitive matching, or None when absent.

    The value is returned as sent; callers decide whether surrounding whitespace matters.
    """
    coerced = _coerce_headers_mapping(headers)
    if not coerced or not name:
        return None

    lower = name.lower()
    for key in (name, lower, lower.title()):
        if key in coerced:
            value = coerced[key]
            return None if value is None else str(value)

    for key, value in coerced.items():
        if key is None:
            continue
        if str(key).lower() == lower:
            return None if value is None else str(value)
    return None


__all__ = ["find_header"]
