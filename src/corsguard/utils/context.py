# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Per-scan ambient context.

This module provides a ContextVar-backed ScanContext that carries common scan
plumbing (timeout, http client, cancellation). Helpers read from this context
when explicit arguments are omitted. Work scheduled on a thread pool must run in
a copy of the caller's context to see it.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from ..config import HttpSettings, load_http_settings

if TYPE_CHECKING:
    from ..http.client import HttpClient


@dataclass(frozen=True)
class ScanContext:
    timeout: float | None = None
    http_client: HttpClient | None = None
    http_settings: HttpSettings | None = None
    cancel_event: threading.Event | None = None


_current_scan_context: ContextVar[ScanContext | None] = ContextVar("corsguard_scan_context", default=None)


def get_scan_context() -> ScanContext:
    """Return the current ambient scan context."""
    return _current_scan_context.get() or ScanContext()


def get_http_settings() -> HttpSettings:
    """Return HttpSettings from context, falling back to loading defaults."""
    context = get_scan_context()
    if context.http_settings is not None:
        return context.http_settings
    return load_http_settings()


def is_cancelled() -> bool:
    """True once the ambient cancel event has been set."""
    event = get_scan_context().cancel_event
    return event is not None and event.is_set()


@contextmanager
def scan_context(**overrides: Any) -> Iterator[ScanContext]:
    """
    Context manager that layers overrides onto the ambient ScanContext.

    None-valued overrides are ignored to preserve outer context values.
    """
    current = get_scan_context()
    filtered = {key: value for key, value in overrides.items() if value is not None}
    new_context = replace(current, **filtered) if filtered else current
    token = _current_scan_context.set(new_context)
    try:
        yield new_context
    finally:
        _current_scan_context.reset(token)


__all__ = [
    "ScanContext",
    "get_http_settings",
    "get_scan_context",
    "is_cancelled",
    "scan_context",
]
