# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for corsguard."""

from ..http.models import Headers, HttpRequest, HttpResponse, RetryConfig
from .alert import Alert
from .cors import ACAC_HEADER, ACAO_HEADER, CorsClassification, CorsPosture, CorsResponseHeaders
from .probe import ORIGIN_HEADER, Probe
from .report import ScanReport
from .verdict import CorsEvidence, RiskLevel, Verdict

__all__ = [
    "ACAC_HEADER",
    "ACAO_HEADER",
    "ORIGIN_HEADER",
    "Alert",
    "CorsClassification",
    "CorsEvidence",
    "CorsPosture",
    "CorsResponseHeaders",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "Probe",
    "RetryConfig",
    "RiskLevel",
    "ScanReport",
    "Verdict",
]
