# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""corsguard CLI."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from ..config import AttackStrength, HttpSettings, ScanSettings, load_http_settings, load_scan_settings
from ..http import create_default_http_client
from ..log import setup_logging
from ..models import RiskLevel, ScanReport
from ..runtime import CorsGuard

# Exit non-zero when any target reaches this risk.
FAILING_RISK = RiskLevel.MEDIUM


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="corsguard CORS misconfiguration scanner")
    parser.add_argument("urls", nargs="+", metavar="url", help="Target URL(s) to scan")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument(
        "--strength",
        choices=[strength.value for strength in AttackStrength],
        type=str.upper,
        default=None,
        help="Attack strength; LOW sends a single attacker origin",
    )
    parser.add_argument(
        "--baseline",
        action="store_true",
        help="Also send a request without an Origin header",
    )
    parser.add_argument("--workers", type=int, default=None, help="Concurrent targets")
    parser.add_argument("--log-level", default=None, help="Logging level (default from CORSGUARD_LOG_LEVEL)")
    return parser


def _print_json(reports: list[ScanReport]) -> None:
    payload: list[dict[str, Any]] = [report.to_dict() for report in reports]
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pretty_print(report: ScanReport) -> None:
    verdict = report.verdict
    print(f"[corsguard] {report.url}")
    print(f"Risk: {verdict.risk.label}")
    print(f"Classification: {verdict.classification}")
    if verdict.evidence.origin_sent is not None or verdict.evidence.allow_origin is not None:
        print(f"Origin sent: {verdict.evidence.origin_sent}")
        print(f"Allow-Origin: {verdict.evidence.allow_origin}")
        print(f"Allow-Credentials: {verdict.evidence.allow_credentials}")
    if verdict.error_message:
        print(f"Error: {verdict.error_message}")
    for alert in report.alerts:
        print(f"Alert: [{alert.risk.label}] {alert.name}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    http_settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        http_settings.verify_ssl = False

    scan_settings: ScanSettings = load_scan_settings()
    if args.strength:
        scan_settings.attack_strength = AttackStrength.parse(args.strength, scan_settings.attack_strength)
    if args.baseline:
        scan_settings.include_baseline = True

    http_client = create_default_http_client(http_settings)

    with CorsGuard(http_client=http_client, settings=scan_settings, http_settings=http_settings) as guard:
        if len(args.urls) == 1:
            reports = [guard.scan(args.urls[0])]
        else:
            reports = guard.scan_many(args.urls, workers=args.workers)

    if args.json:
        _print_json(reports)
    else:
        for report in reports:
            _pretty_print(report)

    return 1 if any(report.risk >= FAILING_RISK for report in reports) else 0


if __name__ == "__main__":
    raise SystemExit(main())
