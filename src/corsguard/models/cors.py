# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""CORS header and classification models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..http.headers import find_header

ACAO_HEADER = "Access-Control-Allow-Origin"
ACAC_HEADER = "Access-Control-Allow-Credentials"


@dataclass(frozen=True)
class CorsResponseHeaders:
    """The two response headers that decide a CORS posture; ``None`` means absent."""

    allow_origin: str | None = None
    allow_credentials: str | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, Any] | Any) -> CorsResponseHeaders:
        return cls(
            allow_origin=find_header(headers, ACAO_HEADER),
            allow_credentials=find_header(headers, ACAC_HEADER),
        )


class CorsPosture(str, Enum):
    NO_CORS = "NO_CORS"
    STATIC_VALUE = "STATIC_VALUE"
    REFLECTED = "REFLECTED"
    WILDCARD = "WILDCARD"
    NULL_ORIGIN = "NULL_ORIGIN"


@dataclass(frozen=True)
class CorsClassification:
    """Server CORS posture observed for one probe. ``value`` is only set for STATIC_VALUE."""

    posture: CorsPosture
    value: str | None = None

    @classmethod
    def no_cors(cls) -> CorsClassification:
        return cls(CorsPosture.NO_CORS)

    @classmethod
    def static(cls, value: str) -> CorsClassification:
        return cls(CorsPosture.STATIC_VALUE, value)

    @classmethod
    def reflected(cls) -> CorsClassification:
        return cls(CorsPosture.REFLECTED)

    @classmethod
    def wildcard(cls) -> CorsClassification:
        return cls(CorsPosture.WILDCARD)

    @classmethod
    def null_origin(cls) -> CorsClassification:
        return cls(CorsPosture.NULL_ORIGIN)

    def __str__(self) -> str:
        if self.posture is CorsPosture.STATIC_VALUE:
            return f"{self.posture.value}({self.value!r})"
        return self.posture.value
