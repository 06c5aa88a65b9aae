# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
corsguard package entrypoint.

This package provides an active scan rule that decides whether a web server's
Cross-Origin Resource Sharing configuration is exploitable from a browser.
HTTP behavior is abstracted behind an injectable client interface, findings are
handed to a pluggable alert sink, and domain objects are typed dataclasses.
"""

from .config import AttackStrength, HttpSettings, ScanSettings, load_http_settings, load_scan_settings
from .cors import AlertSink, CollectingAlertSink, CorsScanRule, classify, evaluate_risk
from .errors import CorsGuardError, ErrorCategory, ScanCancelled
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    ResponderHttpClient,
    RetryConfig,
    create_default_http_client,
)
from .log import setup_logging
from .models import (
    Alert,
    CorsClassification,
    CorsPosture,
    CorsResponseHeaders,
    Probe,
    RiskLevel,
    ScanReport,
    Verdict,
)
from .runtime import CorsGuard
from .scan import ScanEngine
from .version import __version__

__all__ = [
    "Alert",
    "AlertSink",
    "AttackStrength",
    "CollectingAlertSink",
    "CorsClassification",
    "CorsGuard",
    "CorsGuardError",
    "CorsPosture",
    "CorsResponseHeaders",
    "CorsScanRule",
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "Probe",
    "ResponderHttpClient",
    "RetryConfig",
    "RiskLevel",
    "ScanCancelled",
    "ScanEngine",
    "ScanReport",
    "ScanSettings",
    "Verdict",
    "classify",
    "create_default_http_client",
    "evaluate_risk",
    "load_http_settings",
    "load_scan_settings",
    "setup_logging",
    "__version__",
]
