# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level corsguard facade."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from contextlib import suppress

from .config import HttpSettings, ScanSettings, load_http_settings, load_scan_settings
from .cors import AlertSink, CorsScanRule
from .http.client import HttpClient, create_default_http_client
from .models import ScanReport
from .scan.engine import ScanEngine
from .utils.context import scan_context


class CorsGuard:
    """
    Convenience wrapper that wires one HTTP client and one rule across every scanned target.

    Alerts raised during a scan are attached to the returned report and, when an
    ``alert_sink`` is given, forwarded to it as well.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        alert_sink: AlertSink | None = None,
        settings: ScanSettings | None = None,
        http_settings: HttpSettings | None = None,
    ):
        self.http_settings = http_settings or load_http_settings()
        self.scan_settings = settings or load_scan_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self.alert_sink = alert_sink
        self.rule = CorsScanRule(self.http_client, settings=self.scan_settings)
        self.scan_engine = ScanEngine(self.rule)

    def scan(self, url: str, *, cancel_event: threading.Event | None = None) -> ScanReport:
        """Scan one target. Raises ScanCancelled once ``cancel_event`` is set."""
        with scan_context(
            http_client=self.http_client,
            http_settings=self.http_settings,
            cancel_event=cancel_event,
        ):
            return self.scan_engine.run(url, alert_sink=self.alert_sink)

    def scan_many(
        self,
        urls: Iterable[str],
        *,
        workers: int | None = None,
        cancel_event: threading.Event | None = None,
    ) -> list[ScanReport]:
        with scan_context(
            http_client=self.http_client,
            http_settings=self.http_settings,
            cancel_event=cancel_event,
        ):
            return self.scan_engine.run_many(
                urls,
                workers=workers or self.scan_settings.workers,
                alert_sink=self.alert_sink,
            )

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> CorsGuard:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
