# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Map a CORS classification to a risk level."""

from __future__ import annotations

from ..models import CorsClassification, CorsPosture, RiskLevel

# (uncredentialed, credentialed)
_RISK_TABLE: dict[CorsPosture, tuple[RiskLevel, RiskLevel]] = {
    CorsPosture.NO_CORS: (RiskLevel.NONE, RiskLevel.NONE),
    CorsPosture.STATIC_VALUE: (RiskLevel.INFO, RiskLevel.INFO),
    # Browsers refuse credentials with a wildcard allow-origin, so this never reaches HIGH.
    CorsPosture.WILDCARD: (RiskLevel.MEDIUM, RiskLevel.MEDIUM),
    CorsPosture.REFLECTED: (RiskLevel.MEDIUM, RiskLevel.HIGH),
    CorsPosture.NULL_ORIGIN: (RiskLevel.MEDIUM, RiskLevel.HIGH),
}


def evaluate_risk(classification: CorsClassification, credentialed: bool) -> RiskLevel:
    uncredentialed_risk, credentialed_risk = _RISK_TABLE[classification.posture]
    return credentialed_risk if credentialed else uncredentialed_risk


__all__ = ["evaluate_risk"]
