# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Network-free HttpClient implementations."""

from __future__ import annotations

from collections.abc import Callable

from .client import HttpClient
from .models import HttpRequest, HttpResponse

Responder = Callable[[HttpRequest], HttpResponse]


class ResponderHttpClient(HttpClient):
    """
    HttpClient that answers every request by calling ``responder``.

    Used to simulate server behaviour (echoing the ``Origin`` header, returning a fixed
    allow-origin, failing) without a network stack. Requests are recorded in order.
    """

    def __init__(self, responder: Responder):
        self._responder = responder
        self.requests: list[HttpRequest] = []

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        return self._responder(request)

    def close(self) -> None:
        return None
