"""Version and structured comparator generation.

Versions are built along two paths that must agree:

* the string path formats ``MAJOR.MINOR.PATCH[-PRE][+BUILD]`` and hands it
  to the oracle's parser;
* the struct path builds ``semantic_version.Version`` directly, with
  absent parts as explicit empty tuples.
"""

import logging
import random
from typing import Optional

import semantic_version

from .combinators import check_probability, weighted, xeger
from .config import OperatorWeights, VersionWeights
from .grammar import DEFAULT_PROBABILITY_OF_PRE_RELEASE, SEMVER_REGEX
from .oracle import (
    OVERFLOW_MARKER,
    BuildMetadata,
    Comparator,
    OracleError,
    Prerelease,
    parse_version,
)
from .operators import arb_semver_op
from .primitives import (
    arb_option_build_metadata_string,
    arb_option_pre_release_string,
    arb_option_semver_build_metadata,
    arb_option_semver_prerelease,
    arb_u64,
)

logger = logging.getLogger(__name__)

# Redraws allowed when the oracle rejects a numeric overflow.
MAX_OVERFLOW_RETRIES = 100


def is_overflow_error(error: Exception) -> bool:
    """True if the oracle rejected a numeric component above u64::MAX."""
    return OVERFLOW_MARKER in str(error)


def parse_version_tolerant(text: str) -> Optional[semantic_version.Version]:
    """Parse ``text``, returning None if a component overflows.

    Any other rejection propagates.
    """
    try:
        return parse_version(text)
    except OracleError as e:
        if is_overflow_error(e):
            logger.debug("Skipping overflowing version %.60s...: %s", text, e)
            return None
        raise


def format_version(major, minor, patch,
                   pre: Optional[str] = None, build: Optional[str] = None) -> str:
    text = f"{major}.{minor}.{patch}"
    if pre is not None:
        text += f"-{pre}"
    if build is not None:
        text += f"+{build}"
    return text


def arb_semver(rng: random.Random) -> str:
    """Any Semantic Versioning 2.0.0 string.

    Numeric components are not bounded, as the grammar allows; most
    implementations (the oracle included) refuse anything above
    ``u64::MAX``. Use ``arb_version`` for values seen in practice.
    """
    return xeger(rng, SEMVER_REGEX)


def arb_grammar_version(rng: random.Random) -> semantic_version.Version:
    """Parse ``arb_semver`` output, redrawing when a component overflows."""
    for _ in range(MAX_OVERFLOW_RETRIES):
        version = parse_version_tolerant(arb_semver(rng))
        if version is not None:
            return version
    raise RuntimeError(f"every one of {MAX_OVERFLOW_RETRIES} drawn versions overflowed")


def arb_version_weighted(rng: random.Random, probability_of_pre_release: float,
                         probability_of_build_metadata: float) -> semantic_version.Version:
    """Version built from a string, with explicit part probabilities."""
    check_probability(probability_of_pre_release, 'probability_of_pre_release')
    check_probability(probability_of_build_metadata, 'probability_of_build_metadata')

    for _ in range(MAX_OVERFLOW_RETRIES):
        text = format_version(
            arb_u64(rng), arb_u64(rng), arb_u64(rng),
            arb_option_pre_release_string(rng, probability_of_pre_release),
            arb_option_build_metadata_string(rng, probability_of_build_metadata),
        )
        version = parse_version_tolerant(text)
        if version is not None:
            return version
    raise RuntimeError(f"every one of {MAX_OVERFLOW_RETRIES} drawn versions overflowed")


def arb_version(rng: random.Random,
                weights: Optional[VersionWeights] = None) -> semantic_version.Version:
    """Valid version via a string."""
    weights = weights or VersionWeights()
    return arb_version_weighted(rng, weights.probability_of_pre_release,
                                weights.probability_of_build_metadata)


def arb_semver_version_weighted(rng: random.Random, probability_of_pre_release: float,
                                probability_of_build_metadata: float) -> semantic_version.Version:
    """Valid version built directly from its parts."""
    major = arb_u64(rng)
    minor = arb_u64(rng)
    patch = arb_u64(rng)
    pre = arb_option_semver_prerelease(rng, probability_of_pre_release) or Prerelease.EMPTY
    build = arb_option_semver_build_metadata(rng, probability_of_build_metadata) or BuildMetadata.EMPTY

    return semantic_version.Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=pre.identifiers,
        build=build.identifiers,
    )


def arb_semver_version(rng: random.Random,
                       weights: Optional[VersionWeights] = None) -> semantic_version.Version:
    """Valid version built directly, with default part probabilities."""
    weights = weights or VersionWeights()
    return arb_semver_version_weighted(rng, weights.probability_of_pre_release,
                                       weights.probability_of_build_metadata)


def arb_semver_comparator(rng: random.Random, op_weights: Optional[OperatorWeights] = None,
                          probability_of_pre_release: float = DEFAULT_PROBABILITY_OF_PRE_RELEASE
                          ) -> Comparator:
    """Structured comparator; minor and patch are each present half the time.

    Built directly, so the result need not be expressible as a string
    (an ``Op.WILDCARD`` with a patch, a patch without a minor).
    """
    op = arb_semver_op(rng, op_weights)
    major = arb_u64(rng)
    minor = weighted(rng, 0.5, arb_u64)
    patch = weighted(rng, 0.5, arb_u64)
    pre = arb_option_semver_prerelease(rng, probability_of_pre_release) or Prerelease.EMPTY
    return Comparator(op=op, major=major, minor=minor, patch=patch, pre=pre)
