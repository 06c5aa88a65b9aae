# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import ResponderHttpClient
from .client import HttpClient, create_default_http_client
from .headers import find_header
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse, RetryConfig
from .retry import build_default_retry_config, send_with_retries

__all__ = [
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "ResponderHttpClient",
    "RetryConfig",
    "build_default_retry_config",
    "create_default_http_client",
    "find_header",
    "send_with_retries",
]
