# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan orchestration exports."""

from .engine import ScanEngine

__all__ = ["ScanEngine"]
