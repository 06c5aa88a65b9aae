# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""CORS probe, classification and risk evaluation."""

from .alerts import AlertSink, CollectingAlertSink, LoggingAlertSink, build_alert
from .classifier import classify, classify_allow_origin, is_credentialed
from .probes import build_probes, random_origin_token
from .risk import evaluate_risk
from .rule import CorsScanRule

__all__ = [
    "AlertSink",
    "CollectingAlertSink",
    "CorsScanRule",
    "LoggingAlertSink",
    "build_alert",
    "build_probes",
    "classify",
    "classify_allow_origin",
    "evaluate_risk",
    "is_credentialed",
    "random_origin_token",
]
