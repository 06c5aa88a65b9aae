# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan engine: runs the CORS rule against one or many targets."""

from __future__ import annotations

import contextvars
import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed

from ..cors import AlertSink, CollectingAlertSink, CorsScanRule
from ..errors import ScanCancelled
from ..models import RiskLevel, ScanReport, Verdict

logger = logging.getLogger(__name__)


class ScanEngine:
    """Coordinates rule invocations and collects the alerts each one raises."""

    def __init__(self, rule: CorsScanRule | None = None):
        self.rule = rule or CorsScanRule()

    def run(self, url: str, *, alert_sink: AlertSink | None = None) -> ScanReport:
        collected = CollectingAlertSink()
        verdict = self.rule.evaluate(url, alert_sink=collected)
        alerts = collected.alerts
        if alert_sink is not None:
            for alert in alerts:
                alert_sink.raise_alert(alert)
        return ScanReport(url=verdict.url, verdict=verdict, alerts=alerts)

    def run_many(
        self,
        urls: Iterable[str],
        *,
        workers: int = 4,
        alert_sink: AlertSink | None = None,
    ) -> list[ScanReport]:
        """
        Scan independent targets concurrently and return reports in input order.

        A target that fails unexpectedly yields a NONE verdict carrying the error; cancelled
        targets produce no report at all.
        """
        targets = list(urls)
        if any(not target or not str(target).strip() for target in targets):
            raise ValueError("run_many() requires non-empty target URLs")

        results: dict[int, ScanReport] = {}
        with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
            # Each task runs in its own copy of the caller's context (client, settings, cancel event).
            futures = {
                executor.submit(contextvars.copy_context().run, self.run, target, alert_sink=alert_sink): index
                for index, target in enumerate(targets)
            }
            for future in as_completed(futures):
                index = futures[future]
                target = targets[index]
                try:
                    results[index] = future.result()
                except ScanCancelled:
                    logger.info("CORS scan of %s cancelled", target)
                except Exception as exc:  # noqa: BLE001
                    logger.exception("CORS scan of %s failed: %s", target, exc)
                    results[index] = ScanReport(
                        url=target,
                        verdict=Verdict(url=target, risk=RiskLevel.NONE, error_message=str(exc)),
                    )

        return [results[index] for index in sorted(results)]


__all__ = ["ScanEngine"]
