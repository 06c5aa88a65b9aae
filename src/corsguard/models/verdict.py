# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Risk levels and per-target verdicts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from .cors import CorsClassification


class RiskLevel(IntEnum):
    # Numbered like scanner alert risks (INFO=0 .. HIGH=3); LOW is never produced here.
    NONE = -1
    INFO = 0
    MEDIUM = 2
    HIGH = 3

    @classmethod
    def parse(cls, value: str | int | RiskLevel | None, default: RiskLevel | None = None) -> RiskLevel:
        """Resolve a level from its name or number, falling back to ``default`` (or NONE)."""
        fallback = cls.NONE if default is None else default
        if isinstance(value, RiskLevel):
            return value
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return fallback
        name = str(value or "").strip().upper()
        return cls.__members__.get(name, fallback)

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class CorsEvidence:
    """What was sent and what came back for the probe a verdict is based on."""

    origin_sent: str | None = None
    allow_origin: str | None = None
    allow_credentials: str | None = None
    probe_label: str | None = None
    status_code: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "origin_sent": self.origin_sent,
            "allow_origin": self.allow_origin,
            "allow_credentials": self.allow_credentials,
            "probe_label": self.probe_label,
            "status_code": self.status_code,
        }


@dataclass(frozen=True)
class Verdict:
    url: str
    risk: RiskLevel
    classification: CorsClassification = field(default_factory=CorsClassification.no_cors)
    credentialed: bool = False
    evidence: CorsEvidence = field(default_factory=CorsEvidence)
    error_message: str | None = None

    @property
    def alert_worthy(self) -> bool:
        return self.risk > RiskLevel.NONE

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "risk": self.risk.name,
            "classification": self.classification.posture.value,
            "static_value": self.classification.value,
            "credentialed": self.credentialed,
            "evidence": self.evidence.to_dict(),
            "error_message": self.error_message,
        }
