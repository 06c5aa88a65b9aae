# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Origin probe construction."""

from __future__ import annotations

import secrets
from urllib.parse import urlsplit

from ..config import AttackStrength
from ..models import Probe

LABEL_BASELINE = "baseline"
LABEL_ATTACKER_ORIGIN = "attacker_origin"
LABEL_NULL_ORIGIN = "null_origin"
LABEL_SUFFIX_BYPASS = "suffix_bypass"
LABEL_HTTP_DOWNGRADE = "http_downgrade"


def random_origin_token(prefix: str = "cg") -> str:
    """Return a short random DNS label used to build attacker-controlled origins."""
    return f"{prefix}{secrets.token_hex(4)}"


def _split_target(url: str) -> tuple[str, str, str]:
    """Return (scheme, host, authority) of ``url``; malformed parts degrade to empty strings."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return "http", "", ""
    scheme = (parts.scheme or "http").lower()
    host = (parts.hostname or "").lower()
    if ":" in host:
        host = f"[{host}]"
    try:
        port = parts.port
    except ValueError:
        port = None
    authority = host if port is None else f"{host}:{port}"
    return scheme, host, authority


def build_probes(
    url: str,
    *,
    strength: AttackStrength = AttackStrength.MEDIUM,
    include_baseline: bool = False,
    token: str | None = None,
) -> tuple[Probe, ...]:
    """
    Build the ordered probes for one target.

    The first origin probe is always an arbitrary third-party origin that cannot equal the
    target's own origin. Stronger attacks add the ``null`` origin, a suffix-match bypass
    (``<scheme>://<target-host>.<token>.com``) and, for https targets, the plain-http origin
    of the target itself. A port that cannot be parsed is left out of the downgrade origin.
    """
    token = token or random_origin_token()
    scheme, host, authority = _split_target(url)

    probes: list[Probe] = []
    if include_baseline:
        probes.append(Probe(url=url, origin=None, label=LABEL_BASELINE))

    probes.append(Probe(url=url, origin=f"{scheme}://{token}.com", label=LABEL_ATTACKER_ORIGIN))
    if strength is AttackStrength.LOW:
        return tuple(probes)

    probes.append(Probe(url=url, origin="null", label=LABEL_NULL_ORIGIN))
    if host:
        # An IPv6 literal cannot prefix a domain name.
        if not host.startswith("["):
            probes.append(Probe(url=url, origin=f"{scheme}://{host}.{token}.com", label=LABEL_SUFFIX_BYPASS))
        if scheme == "https":
            probes.append(Probe(url=url, origin=f"http://{authority}", label=LABEL_HTTP_DOWNGRADE))
    return tuple(probes)


__all__ = [
    "LABEL_ATTACKER_ORIGIN",
    "LABEL_BASELINE",
    "LABEL_HTTP_DOWNGRADE",
    "LABEL_NULL_ORIGIN",
    "LABEL_SUFFIX_BYPASS",
    "build_probes",
    "random_origin_token",
]
