"""Bounded collections and whole requirements."""

import random
from typing import List, Optional

import semantic_version

from .combinators import vec, weighted
from .comparators import arb_comparator_string, arb_full_comparator_vec
from .config import ComparatorVecWeights, FullComparatorWeights
from .oracle import Comparator, VersionReq, parse_req
from .versions import arb_semver_comparator, arb_semver_version, arb_version


def _check_max_len(max_len: int) -> None:
    # Lengths are drawn from 1..max_len, max_len excluded.
    if max_len < 2:
        raise ValueError(f"max_len must be at least 2, got {max_len!r}")


def arb_vec_versions(rng: random.Random, max_len: int) -> List[semantic_version.Version]:
    """1 to ``max_len - 1`` versions built through strings."""
    _check_max_len(max_len)
    return vec(rng, arb_version, 1, max_len - 1)


def arb_vec_semver_versions(rng: random.Random, max_len: int) -> List[semantic_version.Version]:
    """1 to ``max_len - 1`` versions built directly."""
    _check_max_len(max_len)
    return vec(rng, arb_semver_version, 1, max_len - 1)


def arb_vec_comparator_string(rng: random.Random, max_len: int) -> List[str]:
    """1 to ``max_len - 1`` comparator strings, each valid on its own."""
    _check_max_len(max_len)
    return vec(rng, arb_comparator_string, 1, max_len - 1)


def arb_vec_semver_comparator(rng: random.Random, max_len: int) -> List[Comparator]:
    """1 to ``max_len - 1`` structured comparators."""
    _check_max_len(max_len)
    return vec(rng, arb_semver_comparator, 1, max_len - 1)


def arb_semver_version_req(rng: random.Random, max_len: int) -> VersionReq:
    """Requirement built directly from structured comparators."""
    return VersionReq(tuple(arb_vec_semver_comparator(rng, max_len)))


def arb_optional_semver_version_req(rng: random.Random, probability_of_some: float,
                                    max_comparators: int) -> Optional[VersionReq]:
    return weighted(rng, probability_of_some,
                    lambda r: arb_semver_version_req(r, max_comparators))


def arb_version_req(rng: random.Random, max_comparators: int,
                    weights: Optional[ComparatorVecWeights] = None,
                    min_comparators: Optional[int] = None,
                    comparator_weights: Optional[FullComparatorWeights] = None) -> VersionReq:
    """Requirement parsed from a rendered ``ComparatorVec``.

    A comparator list holds exactly ``max_comparators`` entries unless
    ``min_comparators`` is given.

    As generated, the requirement is rarely satisfiable and unlikely to
    match anything.

    Args:
        rng: Random source
        max_comparators: Should not exceed
            ``MAX_COMPARATORS_IN_VERSION_REQ_STRING``. A longer list is
            rejected by the oracle and its ``OracleError`` is raised here;
            only the bare ``*`` requirement escapes it.
        weights: Passed on to ``arb_full_comparator_vec``
        min_comparators: If given, the list length is drawn from
            ``min_comparators..max_comparators``
        comparator_weights: Passed on to ``arb_full_comparator``
    """
    comparators = arb_full_comparator_vec(rng, max_comparators, weights, min_comparators,
                                          comparator_weights)
    return parse_req(str(comparators))


def arb_optional_version_req(rng: random.Random, probability_of_some: float,
                             max_comparators: int) -> Optional[VersionReq]:
    """Optional requirement parsed from joined comparator strings."""
    comparators = weighted(rng, probability_of_some,
                           lambda r: arb_vec_comparator_string(r, max_comparators))
    return None if comparators is None else parse_req(",".join(comparators))
