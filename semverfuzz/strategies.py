"""Hypothesis strategies over the semverfuzz generators.

Each strategy draws a seeded ``random.Random`` from hypothesis and runs a
generator with it, so examples are reproducible from hypothesis' database.
The generators consume far more randomness than hypothesis' buffer holds,
so a real seeded ``Random`` is used and shrinking only changes the seed.
"""

import random
from typing import Callable, Optional, TypeVar

from hypothesis import strategies as st

from . import aggregates, comparators, operators, primitives, versions
from .config import (
    ComparatorVecWeights,
    FullComparatorWeights,
    OperatorWeights,
    VersionWeights,
)
from .grammar import MAX_COMPARATORS_IN_VERSION_REQ_STRING

T = TypeVar('T')


def from_generator(generate: Callable[[random.Random], T]) -> st.SearchStrategy[T]:
    """Wrap any ``rng -> value`` generator as a strategy."""
    return st.randoms(use_true_random=True).map(generate)


def semver_strings() -> st.SearchStrategy[str]:
    return from_generator(versions.arb_semver)


def pre_release_strings(probability_of_some: float = 1.0) -> st.SearchStrategy:
    return from_generator(
        lambda rng: primitives.arb_option_pre_release_string(rng, probability_of_some))


def build_metadata_strings(probability_of_some: float = 1.0) -> st.SearchStrategy:
    return from_generator(
        lambda rng: primitives.arb_option_build_metadata_string(rng, probability_of_some))


def ops(weights: Optional[OperatorWeights] = None) -> st.SearchStrategy:
    return from_generator(lambda rng: operators.arb_semver_op(rng, weights))


def versions_from_strings(weights: Optional[VersionWeights] = None) -> st.SearchStrategy:
    """Versions parsed by the oracle."""
    return from_generator(lambda rng: versions.arb_version(rng, weights))


def semver_versions(weights: Optional[VersionWeights] = None) -> st.SearchStrategy:
    """Versions constructed directly."""
    return from_generator(lambda rng: versions.arb_semver_version(rng, weights))


def full_comparators(weights: Optional[FullComparatorWeights] = None) -> st.SearchStrategy:
    return from_generator(lambda rng: comparators.arb_full_comparator(rng, weights))


def comparator_vecs(max_comparators: int = MAX_COMPARATORS_IN_VERSION_REQ_STRING,
                    weights: Optional[ComparatorVecWeights] = None) -> st.SearchStrategy:
    return from_generator(
        lambda rng: comparators.arb_full_comparator_vec(rng, max_comparators, weights))


def version_reqs(max_comparators: int = MAX_COMPARATORS_IN_VERSION_REQ_STRING,
                 weights: Optional[ComparatorVecWeights] = None) -> st.SearchStrategy:
    """Requirements parsed by the oracle."""
    return from_generator(
        lambda rng: aggregates.arb_version_req(rng, max_comparators, weights))


def semver_version_reqs(max_len: int = MAX_COMPARATORS_IN_VERSION_REQ_STRING) -> st.SearchStrategy:
    """Requirements constructed directly."""
    return from_generator(lambda rng: aggregates.arb_semver_version_req(rng, max_len))
