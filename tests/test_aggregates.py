"""Tests for collections and whole requirements."""

import random

import pytest
from hypothesis import given, settings

from semverfuzz.aggregates import (
    arb_optional_semver_version_req,
    arb_optional_version_req,
    arb_semver_version_req,
    arb_vec_comparator_string,
    arb_vec_semver_comparator,
    arb_vec_semver_versions,
    arb_vec_versions,
    arb_version_req,
)
from semverfuzz.config import ComparatorVecWeights, FullComparatorWeights
from semverfuzz.grammar import MAX_COMPARATORS_IN_VERSION_REQ_STRING
from semverfuzz.oracle import OracleError, VersionReq, parse_comparator, parse_req
from semverfuzz.strategies import semver_version_reqs, semver_versions, version_reqs, versions_from_strings

ONLY_LIST = ComparatorVecWeights(wildcard=0, comparator_list=1)
# Short comparators keep the long requirements fast.
SHORT = FullComparatorWeights(plain=0, wildcard_minor=1, wildcard_patch=1)


@pytest.mark.parametrize("generate", [
    arb_vec_versions,
    arb_vec_semver_versions,
    arb_vec_comparator_string,
    arb_vec_semver_comparator,
])
def test_vec_length_excludes_max(generate):
    rng = random.Random(2)
    for _ in range(10):
        assert 1 <= len(generate(rng, 3)) <= 2
    assert len(generate(rng, 2)) == 1


@pytest.mark.parametrize("generate", [
    arb_vec_versions,
    arb_vec_semver_versions,
    arb_vec_comparator_string,
    arb_vec_semver_comparator,
    arb_semver_version_req,
])
def test_max_len_below_two_rejected(generate, rng):
    with pytest.raises(ValueError, match="max_len"):
        generate(rng, 1)


def test_comparator_strings_parse_individually(rng):
    for text in arb_vec_comparator_string(rng, 6):
        parse_comparator(text)


def test_comparator_strings_parse_joined(rng):
    parse_req(",".join(arb_vec_comparator_string(rng, MAX_COMPARATORS_IN_VERSION_REQ_STRING)))


class TestComparatorLimit:
    def test_max_comparators_is_accepted(self, rng):
        req = arb_version_req(rng, MAX_COMPARATORS_IN_VERSION_REQ_STRING, ONLY_LIST,
                              comparator_weights=SHORT)
        assert len(req.comparators) == MAX_COMPARATORS_IN_VERSION_REQ_STRING

    def test_one_more_is_rejected(self, rng):
        with pytest.raises(OracleError, match="excessive number of version comparators"):
            arb_version_req(rng, MAX_COMPARATORS_IN_VERSION_REQ_STRING + 1, ONLY_LIST,
                            comparator_weights=SHORT)

    def test_defaults_accept_max(self):
        for seed in range(3):
            req = arb_version_req(random.Random(seed), MAX_COMPARATORS_IN_VERSION_REQ_STRING)
            assert len(req.comparators) in (0, MAX_COMPARATORS_IN_VERSION_REQ_STRING)

    def test_defaults_reject_one_more(self):
        # Only the bare `*` requirement, drawn 1 time in 15, gets through.
        rejected = 0
        for seed in range(10):
            try:
                req = arb_version_req(random.Random(seed), MAX_COMPARATORS_IN_VERSION_REQ_STRING + 1)
            except OracleError as e:
                assert "excessive number of version comparators" in str(e)
                rejected += 1
            else:
                assert req == VersionReq()
        assert rejected > 0

    def test_variable_length_stays_within_max(self, rng):
        for _ in range(10):
            req = arb_version_req(rng, 6, ONLY_LIST, min_comparators=1, comparator_weights=SHORT)
            assert 1 <= len(req.comparators) <= 6


def test_version_req_wildcard(rng):
    only_wildcard = ComparatorVecWeights(wildcard=1, comparator_list=0)
    req = arb_version_req(rng, 8, only_wildcard)
    assert req == VersionReq()
    assert str(req) == "*"


def test_version_req_renders_and_reparses(rng):
    for _ in range(5):
        req = arb_version_req(rng, 8)
        assert parse_req(str(req)) == req


def test_semver_version_req_length(rng):
    for _ in range(20):
        assert 1 <= len(arb_semver_version_req(rng, 4).comparators) <= 3


def test_optional_reqs(rng):
    assert arb_optional_version_req(rng, 0.0, 8) is None
    assert arb_optional_semver_version_req(rng, 0.0, 8) is None
    assert isinstance(arb_optional_version_req(rng, 1.0, 8), VersionReq)
    assert isinstance(arb_optional_semver_version_req(rng, 1.0, 8), VersionReq)
    with pytest.raises(ValueError):
        arb_optional_version_req(rng, 1.5, 8)


def test_deterministic():
    assert arb_version_req(random.Random(4), 8) == arb_version_req(random.Random(4), 8)
    assert arb_semver_version_req(random.Random(4), 8) == arb_semver_version_req(random.Random(4), 8)


@settings(max_examples=10)
@given(version_reqs(), versions_from_strings())
def test_matching_parsed_values_never_fails(req, version):
    assert isinstance(req.matches(version), bool)


@given(semver_version_reqs(), semver_versions())
def test_matching_structured_values_never_fails(req, version):
    assert isinstance(req.matches(version), bool)


def test_vec_versions_match_against_req(rng):
    req = arb_version_req(rng, 4)
    for version in arb_vec_versions(rng, 8) + arb_vec_semver_versions(rng, 8):
        req.matches(version)
