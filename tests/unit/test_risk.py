# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from corsguard.cors.risk import evaluate_risk
from corsguard.models import CorsClassification, RiskLevel


@pytest.mark.parametrize(
    "classification, credentialed, expected",
    [
        (CorsClassification.no_cors(), False, RiskLevel.NONE),
        (CorsClassification.no_cors(), True, RiskLevel.NONE),
        (CorsClassification.static("https://trusted.example"), False, RiskLevel.INFO),
        (CorsClassification.static("https://trusted.example"), True, RiskLevel.INFO),
        (CorsClassification.wildcard(), False, RiskLevel.MEDIUM),
        (CorsClassification.wildcard(), True, RiskLevel.MEDIUM),
        (CorsClassification.reflected(), False, RiskLevel.MEDIUM),
        (CorsClassification.reflected(), True, RiskLevel.HIGH),
        (CorsClassification.null_origin(), False, RiskLevel.MEDIUM),
        (CorsClassification.null_origin(), True, RiskLevel.HIGH),
    ],
)
def test_risk_table(classification, credentialed, expected):
    assert evaluate_risk(classification, credentialed) == expected


def test_wildcard_with_credentials_is_never_high():
    assert evaluate_risk(CorsClassification.wildcard(), True) < RiskLevel.HIGH


def test_risk_levels_are_ordered():
    assert RiskLevel.NONE < RiskLevel.INFO < RiskLevel.MEDIUM < RiskLevel.HIGH


def test_risk_level_parse():
    assert RiskLevel.parse("medium") == RiskLevel.MEDIUM
    assert RiskLevel.parse(3) == RiskLevel.HIGH
    assert RiskLevel.parse(RiskLevel.INFO) == RiskLevel.INFO
    assert RiskLevel.parse("bogus") == RiskLevel.NONE
    assert RiskLevel.parse(1, RiskLevel.INFO) == RiskLevel.INFO
    assert RiskLevel.parse(None, RiskLevel.MEDIUM) == RiskLevel.MEDIUM
    assert RiskLevel.HIGH.label == "High"
