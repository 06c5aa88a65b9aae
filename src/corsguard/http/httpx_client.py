# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import categorize_exception
from ..utils.context import get_scan_context
from .client import HttpClient
from .models import HttpRequest, HttpResponse


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper. Thread-safe as long as the wrapped client is."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)

        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                content=request.body,
                timeout=self._timeout_for(request),
                follow_redirects=request.allow_redirects,
            ) as resp:
                # CORS lives in the headers; leaving the block closes the stream unread.
                return HttpResponse(
                    ok=True,
                    status_code=resp.status_code,
                    headers=dict(resp.headers),
                    url=str(resp.url),
                )
        except Exception as exc:  # noqa: BLE001
            return HttpResponse(
                ok=False,
                error_category=categorize_exception(exc).value,
                error_message=str(exc),
                error_type=type(exc).__name__,
            )

    def _timeout_for(self, request: HttpRequest) -> float:
        # Per-request timeout, then the ambient scan timeout, then settings.
        if request.timeout is not None:
            return request.timeout
        context_timeout = get_scan_context().timeout
        return context_timeout if context_timeout is not None else self.settings.timeout

    def close(self) -> None:
        self._client.close()
