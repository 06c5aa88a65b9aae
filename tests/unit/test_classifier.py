# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest

from corsguard.cors.classifier import classify, classify_allow_origin, is_credentialed
from corsguard.models import CorsClassification, CorsPosture, CorsResponseHeaders

SENT = "https://cgfeedface.com"


def test_absent_allow_origin_is_no_cors():
    assert classify_allow_origin(SENT, None) == CorsClassification.no_cors()


def test_wildcard_and_null_are_case_sensitive():
    assert classify_allow_origin(SENT, "*").posture is CorsPosture.WILDCARD
    assert classify_allow_origin(SENT, "null").posture is CorsPosture.NULL_ORIGIN
    assert classify_allow_origin(SENT, "NULL") == CorsClassification.static("NULL")
    assert classify_allow_origin(SENT, " *") == CorsClassification.static(" *")


def test_reflection_requires_exact_match():
    assert classify_allow_origin(SENT, SENT).posture is CorsPosture.REFLECTED
    assert classify_allow_origin(SENT, SENT.upper()).posture is CorsPosture.STATIC_VALUE
    assert classify_allow_origin(SENT, SENT + "/").posture is CorsPosture.STATIC_VALUE


def test_null_probe_echoed_back_is_null_origin():
    assert classify_allow_origin("null", "null").posture is CorsPosture.NULL_ORIGIN


def test_static_value_keeps_the_observed_string():
    result = classify_allow_origin(SENT, "dummyValue")
    assert result.posture is CorsPosture.STATIC_VALUE
    assert result.value == "dummyValue"
    assert str(result) == "STATIC_VALUE('dummyValue')"


def test_empty_allow_origin_is_present_not_absent():
    assert classify_allow_origin(SENT, "") == CorsClassification.static("")


def test_no_origin_sent_never_reflects():
    assert classify_allow_origin(None, "https://trusted.example").posture is CorsPosture.STATIC_VALUE


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, False),
        ("true", True),
        ("TRUE", True),
        ("  True \t", True),
        ("false", False),
        ("", False),
        ("true, true", False),
        ("yes", False),
    ],
)
def test_is_credentialed(value, expected):
    assert is_credentialed(value) is expected


def test_response_headers_lookup_is_case_insensitive():
    headers = CorsResponseHeaders.from_headers(
        {"access-control-allow-origin": SENT, "ACCESS-CONTROL-ALLOW-CREDENTIALS": "true"}
    )
    assert headers.allow_origin == SENT
    assert headers.allow_credentials == "true"


def test_response_headers_from_httpx_headers():
    headers = CorsResponseHeaders.from_headers(httpx.Headers({"Access-Control-Allow-Origin": "*"}))
    assert headers == CorsResponseHeaders(allow_origin="*", allow_credentials=None)


def test_response_headers_missing_or_empty_mapping():
    assert CorsResponseHeaders.from_headers({}) == CorsResponseHeaders()
    assert CorsResponseHeaders.from_headers(None) == CorsResponseHeaders()
    assert CorsResponseHeaders.from_headers([("Access-Control-Allow-Origin", "null")]).allow_origin == "null"


def test_classify_returns_classification_and_credential_flag():
    classification, credentialed = classify(SENT, CorsResponseHeaders(allow_origin=SENT, allow_credentials="true"))
    assert classification.posture is CorsPosture.REFLECTED
    assert credentialed is True

    classification, credentialed = classify(SENT, CorsResponseHeaders(allow_origin=None, allow_credentials="true"))
    assert classification.posture is CorsPosture.NO_CORS
    assert credentialed is True
