# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

import pytest

from corsguard.cors.alerts import REFERENCES, CollectingAlertSink, LoggingAlertSink, build_alert
from corsguard.models import CorsClassification, CorsEvidence, RiskLevel, Verdict

URL = "https://api.example/me"


def _verdict(classification, risk, credentialed=False, acac=None):
    return Verdict(
        url=URL,
        risk=risk,
        classification=classification,
        credentialed=credentialed,
        evidence=CorsEvidence(
            origin_sent="https://cgfeed.com",
            allow_origin="https://cgfeed.com",
            allow_credentials=acac,
            probe_label="attacker_origin",
            status_code=200,
        ),
    )


def test_high_alert_mentions_credentials():
    alert = build_alert(_verdict(CorsClassification.reflected(), RiskLevel.HIGH, True, "true"))
    assert alert.name == "CORS Misconfiguration"
    assert "cookies" in alert.description
    assert alert.other_info == "Access-Control-Allow-Credentials: true"
    assert alert.cwe_id == 942
    assert alert.wasc_id == 14
    assert alert.references == REFERENCES


def test_wildcard_alert_does_not_claim_credential_theft():
    alert = build_alert(_verdict(CorsClassification.wildcard(), RiskLevel.MEDIUM, True, "true"))
    assert "cookies" not in alert.description
    assert alert.risk == RiskLevel.MEDIUM


def test_info_alert_uses_header_name():
    alert = build_alert(_verdict(CorsClassification.static("https://trusted.example"), RiskLevel.INFO))
    assert alert.name == "CORS Header"
    assert alert.other_info == ""


def test_build_alert_rejects_none_risk():
    with pytest.raises(ValueError):
        build_alert(Verdict(url=URL, risk=RiskLevel.NONE))


def test_alert_to_dict_is_json_friendly():
    payload = build_alert(_verdict(CorsClassification.null_origin(), RiskLevel.MEDIUM)).to_dict()
    assert payload["risk"] == "MEDIUM"
    assert payload["classification"] == "NULL_ORIGIN"
    assert payload["attack"] == "https://cgfeed.com"
    assert isinstance(payload["references"], list)


def test_collecting_sink_returns_copies():
    sink = CollectingAlertSink()
    alert = build_alert(_verdict(CorsClassification.wildcard(), RiskLevel.MEDIUM))
    sink.raise_alert(alert)
    snapshot = sink.alerts
    snapshot.clear()
    assert sink.alerts == [alert]


def test_logging_sink_writes_warning(caplog):
    alert = build_alert(_verdict(CorsClassification.reflected(), RiskLevel.HIGH, True, "true"))
    with caplog.at_level(logging.WARNING, logger="corsguard.cors.alerts"):
        LoggingAlertSink().raise_alert(alert)
    assert "CORS Misconfiguration" in caplog.text
    assert URL in caplog.text
