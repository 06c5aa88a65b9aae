# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for corsguard."""

import os
from dataclasses import dataclass
from enum import Enum

from .version import __version__

DEFAULT_USER_AGENT = f"corsguard/{__version__} (CORS misconfiguration scanner)"


class AttackStrength(str, Enum):
    """How many origin payloads the active rule sends per target."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    INSANE = "INSANE"

    @classmethod
    def parse(cls, value: "str | AttackStrength | None", default: "AttackStrength") -> "AttackStrength":
        if isinstance(value, AttackStrength):
            return value
        try:
            return cls(str(value or "").strip().upper())
        except ValueError:
            return default


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    timeout: float = 10.0
    max_retries: int = 2
    backoff_factor: float = 2.0
    initial_delay: float = 1.0
    retry_budget_multiplier: float = 10.0
    retry_budget_cap: float = 200.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = False
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            timeout=_float_env("CORSGUARD_HTTP_TIMEOUT", cls.timeout),
            max_retries=_int_env("CORSGUARD_HTTP_RETRIES", cls.max_retries),
            backoff_factor=_float_env("CORSGUARD_HTTP_BACKOFF", cls.backoff_factor),
            initial_delay=_float_env("CORSGUARD_HTTP_INITIAL_DELAY", cls.initial_delay),
            retry_budget_multiplier=_float_env("CORSGUARD_HTTP_RETRY_BUDGET_MULTIPLIER", cls.retry_budget_multiplier),
            retry_budget_cap=_float_env("CORSGUARD_HTTP_RETRY_BUDGET_CAP", cls.retry_budget_cap),
            user_agent=os.getenv("CORSGUARD_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("CORSGUARD_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("CORSGUARD_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


@dataclass
class ScanSettings:
    """Active rule defaults."""

    attack_strength: AttackStrength = AttackStrength.MEDIUM
    include_baseline: bool = False
    workers: int = 4
    # Name of the lowest risk level that is still raised as an alert.
    alert_threshold: str = "INFO"

    @classmethod
    def from_env(cls) -> "ScanSettings":
        """Create settings from environment variables (evaluated at call time)."""
        workers = _int_env("CORSGUARD_WORKERS", cls.workers)
        if workers <= 0:
            workers = cls.workers
        return cls(
            attack_strength=AttackStrength.parse(os.getenv("CORSGUARD_ATTACK_STRENGTH"), cls.attack_strength),
            include_baseline=_bool_env("CORSGUARD_INCLUDE_BASELINE", cls.include_baseline),
            workers=workers,
            alert_threshold=os.getenv("CORSGUARD_ALERT_THRESHOLD", cls.alert_threshold).strip().upper(),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def load_scan_settings() -> ScanSettings:
    """Load active rule settings from environment with sensible defaults."""
    return ScanSettings.from_env()
