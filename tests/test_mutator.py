"""Tests for the mutator."""

import random

import pytest

from semverfuzz.aggregates import arb_version_req
from semverfuzz.comparators import arb_comparator_string
from semverfuzz.mutator import Mutator, accepts_comparator, accepts_req, accepts_version
from semverfuzz.versions import arb_version


def test_validators():
    assert accepts_version("1.2.3-rc.1+b")
    assert accepts_version("99999999999999999999.0.0")
    assert not accepts_version("1.2")
    assert accepts_comparator(">=1.2.*")
    assert not accepts_comparator("*")
    assert accepts_req("*")
    assert not accepts_req(">=1.0.0,*")


def test_target_valid_leaves_text_alone(rng):
    mutator = Mutator(rng, accepts_version)
    assert mutator.mutate("1.2.3", target_invalid=False) == "1.2.3"


@pytest.mark.parametrize("seed", range(30))
def test_mutated_versions_are_rejected(seed):
    rng = random.Random(seed)
    mutator = Mutator(rng, accepts_version)
    assert not accepts_version(mutator.mutate(str(arb_version(rng))))


@pytest.mark.parametrize("seed", range(15))
def test_mutated_comparators_are_rejected(seed):
    rng = random.Random(seed)
    mutator = Mutator(rng, accepts_comparator)
    assert not accepts_comparator(mutator.mutate(arb_comparator_string(rng)))


@pytest.mark.parametrize("seed", range(15))
def test_mutated_reqs_are_rejected(seed):
    rng = random.Random(seed)
    mutator = Mutator(rng, accepts_req)
    assert not accepts_req(mutator.mutate(str(arb_version_req(rng, 4))))


def test_fallback_when_nothing_is_rejected(rng):
    mutator = Mutator(rng, lambda text: True, max_attempts=3)
    assert mutator.mutate("1.2.3") == "1.2.3" + Mutator.FALLBACK_SUFFIX


def test_strategies_change_the_text(rng):
    mutator = Mutator(rng, accepts_version)
    text = "1.2.3-rc.1+b"
    extended = mutator._extra_component(text)
    assert extended.startswith("1.2.3.") and extended.endswith("-rc.1+b")
    assert not accepts_version(extended)
    assert mutator._leading_zero(text) != text
    assert mutator._illegal_char(text) != text
    assert mutator._misplaced_wildcard(text) != text
    assert len(mutator._drop_component(text)) < len(text)
