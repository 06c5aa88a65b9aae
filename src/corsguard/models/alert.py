# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Alert handed to the alert sink for every alert-worthy verdict."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .cors import CorsClassification
from .verdict import RiskLevel


@dataclass(frozen=True)
class Alert:
    url: str
    risk: RiskLevel
    classification: CorsClassification
    name: str
    description: str
    solution: str
    origin_sent: str | None = None
    allow_origin: str | None = None
    allow_credentials: str | None = None
    evidence: str = ""
    other_info: str = ""
    references: tuple[str, ...] = field(default_factory=tuple)
    cwe_id: int = 942
    wasc_id: int = 14

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "risk": self.risk.name,
            "classification": self.classification.posture.value,
            "name": self.name,
            "description": self.description,
            "solution": self.solution,
            "attack": self.origin_sent,
            "allow_origin": self.allow_origin,
            "allow_credentials": self.allow_credentials,
            "evidence": self.evidence,
            "other_info": self.other_info,
            "references": list(self.references),
            "cwe_id": self.cwe_id,
            "wasc_id": self.wasc_id,
        }
