# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Active CORS misconfiguration rule."""

from __future__ import annotations

import logging

from ..config import ScanSettings, load_scan_settings
from ..errors import ScanCancelled, error_category_to_reason
from ..http import HttpRequest, HttpResponse, create_default_http_client, send_with_retries
from ..http.client import HttpClient
from ..models import CorsEvidence, CorsResponseHeaders, Probe, RiskLevel, Verdict
from ..utils.context import is_cancelled
from .alerts import AlertSink, build_alert
from .classifier import classify
from .probes import build_probes, random_origin_token
from .risk import evaluate_risk

logger = logging.getLogger(__name__)


class CorsScanRule:
    """
    Probes one endpoint with attacker-chosen origins and decides how exploitable its CORS
    configuration is.

    The rule keeps no state between ``evaluate`` calls, so one instance can serve many
    worker threads. Probes are sent in order; the highest-risk verdict wins and probing
    stops early once HIGH is reached. At most one alert is raised per call. The attacker
    origin token is fixed for the lifetime of the rule.
    """

    name = "cors"

    def __init__(
        self,
        http_client: HttpClient | None = None,
        alert_sink: AlertSink | None = None,
        settings: ScanSettings | None = None,
        token: str | None = None,
    ):
        self.http_client = http_client or create_default_http_client()
        self.alert_sink = alert_sink
        self.settings = settings or load_scan_settings()
        # Drawn once so repeated evaluations of an unchanged target send the same origins.
        self.token = token or random_origin_token()

    def evaluate(self, target_url: str, *, alert_sink: AlertSink | None = None) -> Verdict:
        if not target_url or not str(target_url).strip():
            raise ValueError("evaluate() requires a target URL")

        sink = alert_sink or self.alert_sink
        verdict = self._probe_target(str(target_url).strip())
        if is_cancelled():
            raise ScanCancelled(target_url)

        threshold = RiskLevel.parse(self.settings.alert_threshold, RiskLevel.INFO)
        if verdict.alert_worthy and verdict.risk >= threshold and sink is not None:
            sink.raise_alert(build_alert(verdict))
        return verdict

    def _probe_target(self, url: str) -> Verdict:
        probes = build_probes(
            url,
            strength=self.settings.attack_strength,
            include_baseline=self.settings.include_baseline,
            token=self.token,
        )

        best: Verdict | None = None
        for probe in probes:
            if is_cancelled():
                raise ScanCancelled(url)

            response = self._send(probe)
            if not response.ok:
                reason = error_category_to_reason(response.error_category) or "Probe failed"
                logger.warning(
                    "CORS probe %s against %s failed: %s (%s)",
                    probe.label,
                    url,
                    response.error_message,
                    reason,
                )
                if best is None:
                    best = Verdict(url=url, risk=RiskLevel.NONE, error_message=response.error_message or reason)
                # The endpoint is unreachable for now; stop probing it.
                break

            verdict = self._judge(probe, response)
            logger.debug(
                "CORS probe %s origin=%r -> %s credentialed=%s risk=%s",
                probe.label,
                probe.origin,
                verdict.classification,
                verdict.credentialed,
                verdict.risk.name,
            )
            if best is None or verdict.risk > best.risk:
                best = verdict
            if best.risk == RiskLevel.HIGH:
                break

        return best if best is not None else Verdict(url=url, risk=RiskLevel.NONE)

    def _send(self, probe: Probe) -> HttpResponse:
        # Redirect targets have their own CORS policy; judge the endpoint that was asked for.
        request = HttpRequest(url=probe.url, method="GET", headers=probe.headers, allow_redirects=False)
        return send_with_retries(self.http_client, request)

    @staticmethod
    def _judge(probe: Probe, response: HttpResponse) -> Verdict:
        headers = CorsResponseHeaders.from_headers(response.headers)
        classification, credentialed = classify(probe.origin, headers)
        return Verdict(
            url=probe.url,
            risk=evaluate_risk(classification, credentialed),
            classification=classification,
            credentialed=credentialed,
            evidence=CorsEvidence(
                origin_sent=probe.origin,
                allow_origin=headers.allow_origin,
                allow_credentials=headers.allow_credentials,
                probe_label=probe.label,
                status_code=response.status_code,
            ),
        )


__all__ = ["CorsScanRule"]
