# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe models."""

from __future__ import annotations

from dataclasses import dataclass

ORIGIN_HEADER = "Origin"


@dataclass(frozen=True)
class Probe:
    """A single request to send against a target, with or without an ``Origin`` header."""

    url: str
    origin: str | None = None
    label: str = "attacker_origin"

    @property
    def headers(self) -> dict[str, str]:
        if self.origin is None:
            return {}
        return {ORIGIN_HEADER: self.origin}
