# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response classification: what CORS posture did the server show for a given origin?"""

from __future__ import annotations

from ..models import CorsClassification, CorsResponseHeaders

WILDCARD_ORIGIN = "*"
NULL_ORIGIN = "null"


def classify_allow_origin(origin_sent: str | None, allow_origin: str | None) -> CorsClassification:
    """
    Classify an Access-Control-Allow-Origin value against the origin that was sent.

    Order matters: ``*`` and ``null`` win over reflection, so a ``null`` probe echoed back
    is reported as NULL_ORIGIN. Comparisons are exact and case-sensitive, matching how
    browsers compare serialized origins. Never raises.
    """
    if allow_origin is None:
        return CorsClassification.no_cors()
    if allow_origin == WILDCARD_ORIGIN:
        return CorsClassification.wildcard()
    if allow_origin == NULL_ORIGIN:
        return CorsClassification.null_origin()
    if origin_sent is not None and allow_origin == origin_sent:
        return CorsClassification.reflected()
    return CorsClassification.static(allow_origin)


def is_credentialed(allow_credentials: str | None) -> bool:
    """True when Access-Control-Allow-Credentials is ``true`` (trimmed, case-insensitive)."""
    if allow_credentials is None:
        return False
    return allow_credentials.strip().lower() == "true"


def classify(origin_sent: str | None, headers: CorsResponseHeaders) -> tuple[CorsClassification, bool]:
    """Return (classification, credentialed) for one probe response."""
    return (
        classify_allow_origin(origin_sent, headers.allow_origin),
        is_credentialed(headers.allow_credentials),
    )


__all__ = ["NULL_ORIGIN", "WILDCARD_ORIGIN", "classify", "classify_allow_origin", "is_credentialed"]
