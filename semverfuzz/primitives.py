"""Single grammar tokens: numeric components, pre-release, build metadata."""

import random
from typing import Optional

from .combinators import weighted, xeger
from .grammar import (
    ALWAYS_BUILD_METADATA_REGEX,
    ALWAYS_PRERELEASE_REGEX,
    ANY_MAJOR_MINOR_PATCH_COMPONENT,
    U64_MAX,
)
from .oracle import BuildMetadata, OracleError, Prerelease


class GrammarConsistencyError(RuntimeError):
    """The grammar produced something the oracle refuses.

    This is a defect in the grammar patterns, never an input problem.
    """


# Drawn on their own now and then so the boundaries are always covered.
U64_EDGE_VALUES = (
    0, 1, 2,
    2 ** 32 - 1, 2 ** 32,
    2 ** 63 - 1, 2 ** 63,
    U64_MAX - 1, U64_MAX,
)
EDGE_VALUE_PROBABILITY = 0.1


def arb_u64(rng: random.Random) -> int:
    """Any unsigned 64-bit integer.

    The bit length is drawn uniformly, so small values are as likely as
    values close to ``U64_MAX``.
    """
    if rng.random() < EDGE_VALUE_PROBABILITY:
        return rng.choice(U64_EDGE_VALUES)
    bits = rng.randint(0, 64)
    return rng.getrandbits(bits) if bits else 0


def arb_numeric_component(rng: random.Random) -> str:
    """A MAJOR, MINOR or PATCH component as text. Not bounded by u64."""
    return xeger(rng, ANY_MAJOR_MINOR_PATCH_COMPONENT)


def arb_pre_release_string(rng: random.Random) -> str:
    """Pre-release string, without the ``-`` prefix."""
    return xeger(rng, ALWAYS_PRERELEASE_REGEX)


def arb_option_pre_release_string(rng: random.Random,
                                  probability_of_some: float) -> Optional[str]:
    """Pre-release string present with ``probability_of_some``."""
    return weighted(rng, probability_of_some, arb_pre_release_string)


def arb_build_metadata_string(rng: random.Random) -> str:
    """Build metadata string, without the ``+`` prefix."""
    return xeger(rng, ALWAYS_BUILD_METADATA_REGEX)


def arb_option_build_metadata_string(rng: random.Random,
                                     probability_of_some: float) -> Optional[str]:
    """Build metadata string present with ``probability_of_some``."""
    return weighted(rng, probability_of_some, arb_build_metadata_string)


def _prerelease(text: str) -> Prerelease:
    try:
        return Prerelease.parse(text)
    except OracleError as e:
        raise GrammarConsistencyError(f"grammar produced an invalid pre-release {text!r}") from e


def _build_metadata(text: str) -> BuildMetadata:
    try:
        return BuildMetadata.parse(text)
    except OracleError as e:
        raise GrammarConsistencyError(f"grammar produced invalid build metadata {text!r}") from e


def arb_semver_prerelease(rng: random.Random) -> Prerelease:
    return _prerelease(arb_pre_release_string(rng))


def arb_option_semver_prerelease(rng: random.Random,
                                 probability_of_some: float) -> Optional[Prerelease]:
    text = arb_option_pre_release_string(rng, probability_of_some)
    return None if text is None else _prerelease(text)


def arb_semver_build_metadata(rng: random.Random) -> BuildMetadata:
    return _build_metadata(arb_build_metadata_string(rng))


def arb_option_semver_build_metadata(rng: random.Random,
                                     probability_of_some: float) -> Optional[BuildMetadata]:
    text = arb_option_build_metadata_string(rng, probability_of_some)
    return None if text is None else _build_metadata(text)
