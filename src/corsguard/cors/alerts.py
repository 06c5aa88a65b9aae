# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Alert construction and the sink boundary findings are handed to."""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from ..models import ACAC_HEADER, ACAO_HEADER, Alert, CorsPosture, RiskLevel, Verdict

logger = logging.getLogger(__name__)

REFERENCES = (
    "https://developer.mozilla.org/en-US/docs/Web/HTTP/CORS",
    "https://portswigger.net/web-security/cors",
    "https://cheatsheetseries.owasp.org/cheatsheets/HTML5_Security_Cheat_Sheet.html#cross-origin-resource-sharing",
)

_NAME_INFO = "CORS Header"
_NAME_MISCONFIG = "CORS Misconfiguration"

_DESCRIPTION_INFO = (
    "The server sends an Access-Control-Allow-Origin header with a fixed value, so it "
    "relaxes the Same-Origin Policy for at least one other origin. On its own this does "
    "not let an arbitrary site read responses."
)

_DESCRIPTIONS = {
    CorsPosture.WILDCARD: (
        "The server allows any origin to read its responses (Access-Control-Allow-Origin: *). "
        "Browsers do not send or expose credentialed responses under a wildcard, but any "
        "unauthenticated content is readable from every site."
    ),
    CorsPosture.REFLECTED: (
        "The server copies the request Origin header into Access-Control-Allow-Origin, "
        "granting read access to whatever site issues the request."
    ),
    CorsPosture.NULL_ORIGIN: (
        "The server allows the 'null' origin, which any site can obtain through sandboxed "
        "iframes or data: documents."
    ),
}

_CREDENTIALS_SUFFIX = (
    " Access-Control-Allow-Credentials is also true, so an attacker page can read "
    "responses made with the victim's cookies."
)

_SOLUTION = (
    "If the resource contains sensitive data, return Access-Control-Allow-Origin only for an "
    "explicit allow-list of trusted origins over https. Never echo the Origin header or allow "
    "'null', and do not combine permissive origins with Access-Control-Allow-Credentials: true."
)


class AlertSink(Protocol):
    """Receives alerts; deduplication, persistence and display are the sink's concern."""

    def raise_alert(self, alert: Alert) -> None: ...


class CollectingAlertSink(AlertSink):
    """Thread-safe in-memory sink."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._alerts: list[Alert] = []

    def raise_alert(self, alert: Alert) -> None:
        with self._lock:
            self._alerts.append(alert)

    @property
    def alerts(self) -> list[Alert]:
        with self._lock:
            return list(self._alerts)


class LoggingAlertSink(AlertSink):
    """Writes each alert to the ``corsguard.cors.alerts`` logger."""

    def raise_alert(self, alert: Alert) -> None:
        logger.warning("[%s] %s at %s (%s)", alert.risk.label, alert.name, alert.url, alert.evidence)


def build_alert(verdict: Verdict) -> Alert:
    """Turn an alert-worthy verdict into an Alert."""
    if not verdict.alert_worthy:
        raise ValueError(f"Verdict for {verdict.url} is not alert-worthy")

    posture = verdict.classification.posture
    if verdict.risk == RiskLevel.INFO:
        name = _NAME_INFO
        description = _DESCRIPTION_INFO
    else:
        name = _NAME_MISCONFIG
        description = _DESCRIPTIONS[posture]
        if verdict.credentialed and posture is not CorsPosture.WILDCARD:
            description += _CREDENTIALS_SUFFIX

    evidence = verdict.evidence
    other_info = ""
    if evidence.allow_credentials is not None:
        other_info = f"{ACAC_HEADER}: {evidence.allow_credentials}"

    return Alert(
        url=verdict.url,
        risk=verdict.risk,
        classification=verdict.classification,
        name=name,
        description=description,
        solution=_SOLUTION,
        origin_sent=evidence.origin_sent,
        allow_origin=evidence.allow_origin,
        allow_credentials=evidence.allow_credentials,
        evidence=f"{ACAO_HEADER}: {evidence.allow_origin}",
        other_info=other_info,
        references=REFERENCES,
    )


__all__ = ["AlertSink", "CollectingAlertSink", "LoggingAlertSink", "REFERENCES", "build_alert"]
