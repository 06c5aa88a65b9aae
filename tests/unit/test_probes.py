# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import dataclasses

import pytest

from corsguard.config import AttackStrength
from corsguard.cors.probes import (
    LABEL_ATTACKER_ORIGIN,
    LABEL_BASELINE,
    LABEL_HTTP_DOWNGRADE,
    LABEL_NULL_ORIGIN,
    LABEL_SUFFIX_BYPASS,
    build_probes,
    random_origin_token,
)


def test_medium_strength_http_target():
    probes = build_probes("http://target.test/api", token="cgfeed")
    assert [p.origin for p in probes] == [
        "http://cgfeed.com",
        "null",
        "http://target.test.cgfeed.com",
    ]
    assert [p.label for p in probes] == [LABEL_ATTACKER_ORIGIN, LABEL_NULL_ORIGIN, LABEL_SUFFIX_BYPASS]
    assert all(p.url == "http://target.test/api" for p in probes)


def test_https_target_adds_http_downgrade_with_port():
    probes = build_probes("https://Shop.Example:8443/cart", token="cgfeed")
    assert [p.origin for p in probes] == [
        "https://cgfeed.com",
        "null",
        "https://shop.example.cgfeed.com",
        "http://shop.example:8443",
    ]
    assert probes[-1].label == LABEL_HTTP_DOWNGRADE


def test_low_strength_sends_only_attacker_origin():
    probes = build_probes("https://shop.example/", strength=AttackStrength.LOW, token="cgfeed")
    assert len(probes) == 1
    assert probes[0].origin == "https://cgfeed.com"


def test_baseline_probe_comes_first_without_origin():
    probes = build_probes("http://target.test/", include_baseline=True, token="cgfeed")
    assert probes[0].label == LABEL_BASELINE
    assert probes[0].origin is None
    assert probes[0].headers == {}
    assert probes[1].headers == {"Origin": "http://cgfeed.com"}


def test_default_attacker_origin_is_random_and_foreign():
    first = build_probes("https://target.test/")[0].origin
    second = build_probes("https://target.test/")[0].origin
    assert first != "https://target.test"
    assert first.startswith("https://cg") and first.endswith(".com")
    assert first != second


def test_random_origin_token_uses_secrets(monkeypatch):
    monkeypatch.setattr("corsguard.cors.probes.secrets.token_hex", lambda *_args, **_kwargs: "feedface")
    assert random_origin_token() == "cgfeedface"
    assert build_probes("http://target.test/")[0].origin == "http://cgfeedface.com"


def test_probes_are_immutable():
    probe = build_probes("http://target.test/", token="cgfeed")[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        probe.origin = "http://other.example"  # type: ignore[misc]


def test_ipv6_target_keeps_brackets_and_skips_suffix_bypass():
    probes = build_probes("https://[::1]:8443/", token="cgfeed")
    assert [p.origin for p in probes] == ["https://cgfeed.com", "null", "http://[::1]:8443"]


@pytest.mark.parametrize(
    "url, downgrade",
    [
        ("https://target.test:99999/", "http://target.test"),
        ("https://target.test:abc/", "http://target.test"),
    ],
)
def test_unparseable_port_is_dropped_from_downgrade_origin(url, downgrade):
    probes = build_probes(url, token="cgfeed")
    assert probes[-1].label == LABEL_HTTP_DOWNGRADE
    assert probes[-1].origin == downgrade


def test_unsplittable_url_still_yields_attacker_and_null_probes():
    probes = build_probes("https://[::1/", token="cgfeed")
    assert [p.origin for p in probes] == ["http://cgfeed.com", "null"]
