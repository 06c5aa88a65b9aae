# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-target scan report."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .alert import Alert
from .verdict import RiskLevel, Verdict


@dataclass
class ScanReport:
    """Verdict plus the alerts raised for one target."""

    url: str
    verdict: Verdict
    alerts: list[Alert] = field(default_factory=list)

    @property
    def risk(self) -> RiskLevel:
        return self.verdict.risk

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "risk": self.verdict.risk.name,
            "verdict": self.verdict.to_dict(),
            "alerts": [alert.to_dict() for alert in self.alerts],
        }


__all__ = ["ScanReport"]
