# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Retry helper for HttpClient implementations."""

from __future__ import annotations

import logging
import time

from ..errors import ErrorCategory, categorize_exception
from ..utils.context import get_http_settings, get_scan_context, is_cancelled
from .client import HttpClient
from .models import HttpRequest, HttpResponse, RetryConfig

logger = logging.getLogger(__name__)

# Failures that will not improve by asking again.
NON_RETRYABLE_CATEGORIES = frozenset({ErrorCategory.SSL_ERROR.value, ErrorCategory.WAF_SUSPECTED.value})


def build_default_retry_config() -> RetryConfig:
    """Create a RetryConfig from the ambient (or environment-backed) HttpSettings."""
    return RetryConfig.from_settings(get_http_settings())


def send_with_retries(
    client: HttpClient,
    request: HttpRequest,
    *,
    retry_config: RetryConfig | None = None,
) -> HttpResponse:
    """Execute a request with basic retry/backoff semantics."""
    cfg = retry_config or build_default_retry_config()
    settings = get_http_settings()
    context = get_scan_context()

    attempt = 0
    delay = cfg.initial_delay
    last_response: HttpResponse | None = None
    base_timeout = request.timeout if request.timeout is not None else (context.timeout if context.timeout is not None else settings.timeout)
    budget = 0.0
    if base_timeout and base_timeout > 0:
        budget = settings.retry_budget_multiplier * cfg.max_attempts * base_timeout
        if settings.retry_budget_cap and settings.retry_budget_cap > 0:
            budget = min(budget, settings.retry_budget_cap)
    deadline = time.monotonic() + budget if budget > 0 else None

    while attempt < cfg.max_attempts:
        if deadline is not None and time.monotonic() >= deadline:
            break
        try:
            response = client.request(request)
        except Exception as exc:  # noqa: BLE001
            response = HttpResponse(
                ok=False,
                error_category=categorize_exception(exc).value,
                error_message=str(exc),
                error_type=exc.__class__.__name__,
            )
        last_response = response

        if response.ok:
            if attempt:
                response.meta["retry_count"] = attempt
            return response

        # Only retry transport-level failures (no status code).
        if response.status_code is not None or response.error_category in NON_RETRYABLE_CATEGORIES:
            if attempt:
                response.meta.setdefault("retry_count", attempt)
            return response

        attempt += 1
        if attempt >= cfg.max_attempts or is_cancelled():
            break
        if deadline is not None:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            delay_to_sleep = min(delay, remaining)
        else:
            delay_to_sleep = delay
        logger.debug("Retrying %s in %.2fs after %s", request.url, delay_to_sleep, response.error_message)
        time.sleep(delay_to_sleep)
        delay *= cfg.backoff_factor

    if last_response is not None:
        last_response.meta.setdefault("retry_count", attempt)
        last_response.meta.setdefault("retry_exhausted", True)
        return last_response

    return HttpResponse(
        ok=False,
        error_category=ErrorCategory.TIMEOUT.value,
        error_message="Retry budget exhausted",
        meta={"retry_count": attempt, "retry_exhausted": True},
    )
