"""Tests for the grammar patterns."""

import re

import pytest

from semverfuzz.grammar import (
    ALWAYS_BUILD_METADATA_REGEX,
    ALWAYS_PRERELEASE_REGEX,
    ANY_MAJOR_MINOR_PATCH_COMPONENT,
    MAJOR_MINOR_PATCH_REGEX,
    MAX_COMPARATORS_IN_VERSION_REQ_STRING,
    SEMVER_REGEX,
    SOMETIMES_BUILD_METADATA_REGEX,
    SOMETIMES_PRERELEASE_REGEX,
    U64_MAX,
)

VALID = [
    "0.0.0",
    "1.2.3",
    "10.20.30",
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-0.3.7",
    "1.0.0-x.7.z.92",
    "1.0.0-x-y-z.-",
    "1.0.0+20130313144700",
    "1.0.0-beta+exp.sha.5114f85",
    "1.0.0+21AF26D3--117B344092BD",
    "1.2.3-0123alpha",
    "1.2.3--",
    "99999999999999999999.99999999999999999999.99999999999999999999",
]

INVALID = [
    "",
    "1",
    "1.2",
    "1.2.3.4",
    "01.2.3",
    "1.02.3",
    "1.2.03",
    "1.2.3-01",
    "1.2.3-1.01",
    "1.2.3-alpha_beta",
    "1.2.3-",
    "1.2.3+",
    "1.2.3-alpha..beta",
    "1.2.3+build.",
    "v1.2.3",
    " 1.2.3",
    "1.2.3-αlpha",
    "1.2.3+بناء",
    "١.2.3",
]


@pytest.mark.parametrize("text", VALID)
def test_semver_regex_accepts(text):
    assert re.fullmatch(SEMVER_REGEX, text)


@pytest.mark.parametrize("text", INVALID)
def test_semver_regex_rejects(text):
    assert re.fullmatch(SEMVER_REGEX, text) is None


def test_component_patterns_are_anchored():
    assert MAJOR_MINOR_PATCH_REGEX.startswith("^")
    assert ANY_MAJOR_MINOR_PATCH_COMPONENT.startswith("^")
    assert re.match(MAJOR_MINOR_PATCH_REGEX, "1.2.3-rc.1").group(0) == "1.2.3"
    assert re.match(ANY_MAJOR_MINOR_PATCH_COMPONENT, "0").group(0) == "0"


def test_sometimes_patterns_allow_absence():
    assert re.fullmatch(SOMETIMES_PRERELEASE_REGEX, "")
    assert re.fullmatch(SOMETIMES_PRERELEASE_REGEX, "-rc.1")
    assert re.fullmatch(SOMETIMES_BUILD_METADATA_REGEX, "")
    assert re.fullmatch(SOMETIMES_BUILD_METADATA_REGEX, "+001")


def test_always_patterns_have_no_prefix():
    assert re.fullmatch(ALWAYS_PRERELEASE_REGEX, "rc.1")
    assert re.fullmatch(ALWAYS_PRERELEASE_REGEX, "-rc.1")  # `-` is a legal identifier char
    assert re.fullmatch(ALWAYS_PRERELEASE_REGEX, "") is None
    assert re.fullmatch(ALWAYS_BUILD_METADATA_REGEX, "001.sha")
    assert re.fullmatch(ALWAYS_BUILD_METADATA_REGEX, "+001") is None


def test_published_limits():
    assert MAX_COMPARATORS_IN_VERSION_REQ_STRING == 32
    assert U64_MAX == 18446744073709551615
