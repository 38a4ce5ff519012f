"""Configuration and weight classes for semverfuzz."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from .combinators import check_probability
from .grammar import (
    DEFAULT_PROBABILITY_OF_BUILD_METADATA,
    DEFAULT_PROBABILITY_OF_PRE_RELEASE,
    MAX_COMPARATORS_IN_VERSION_REQ_STRING,
)


def _check_weights(**weights: int) -> None:
    for name, weight in weights.items():
        if weight < 0:
            raise ValueError(f"{name} must not be negative, got {weight!r}")


@dataclass(frozen=True)
class OperatorWeights:
    """Relative weights for picking an operator.

    Wildcard is rarely useful when testing requirements, so it is weak
    by default.
    """
    default_weight: int = 5  # each of the seven non-wildcard operators
    wildcard_weight: int = 1

    def __post_init__(self):
        _check_weights(default_weight=self.default_weight,
                       wildcard_weight=self.wildcard_weight)


@dataclass(frozen=True)
class VersionWeights:
    """Presence probabilities of the optional parts of a version."""
    probability_of_pre_release: float = DEFAULT_PROBABILITY_OF_PRE_RELEASE
    probability_of_build_metadata: float = DEFAULT_PROBABILITY_OF_BUILD_METADATA

    def __post_init__(self):
        check_probability(self.probability_of_pre_release, 'probability_of_pre_release')
        check_probability(self.probability_of_build_metadata, 'probability_of_build_metadata')


@dataclass(frozen=True)
class FullComparatorWeights:
    """Weights for the shapes of a single comparator string.

    Plain comparators exercise the most, so they dominate by default.
    """
    plain: int = 7
    wildcard_minor: int = 1
    wildcard_patch: int = 1
    probability_of_pre_release: float = 0.8
    probability_of_build_metadata: float = 0.8

    def __post_init__(self):
        _check_weights(plain=self.plain, wildcard_minor=self.wildcard_minor,
                       wildcard_patch=self.wildcard_patch)
        check_probability(self.probability_of_pre_release, 'probability_of_pre_release')
        check_probability(self.probability_of_build_metadata, 'probability_of_build_metadata')


@dataclass(frozen=True)
class ComparatorVecWeights:
    """Weights for a bare ``*`` requirement against a comparator list."""
    wildcard: int = 1
    comparator_list: int = 14

    def __post_init__(self):
        _check_weights(wildcard=self.wildcard, comparator_list=self.comparator_list)


@dataclass(frozen=True)
class GenerationProfile:
    """All weights and size limits used by the named generators."""
    operators: OperatorWeights = field(default_factory=OperatorWeights)
    versions: VersionWeights = field(default_factory=VersionWeights)
    comparators: FullComparatorWeights = field(default_factory=FullComparatorWeights)
    comparator_vec: ComparatorVecWeights = field(default_factory=ComparatorVecWeights)
    max_versions: int = 128
    max_comparators: int = MAX_COMPARATORS_IN_VERSION_REQ_STRING

    def __post_init__(self):
        if self.max_versions < 2:
            raise ValueError(f"max_versions must be at least 2, got {self.max_versions!r}")
        if not 1 <= self.max_comparators <= MAX_COMPARATORS_IN_VERSION_REQ_STRING:
            raise ValueError(
                f"max_comparators must be between 1 and "
                f"{MAX_COMPARATORS_IN_VERSION_REQ_STRING}, got {self.max_comparators!r}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GenerationProfile':
        """Build a profile from plain data; missing keys keep their defaults."""
        defaults = cls()
        return cls(
            operators=OperatorWeights(**data.get('operators', {})),
            versions=VersionWeights(**data.get('versions', {})),
            comparators=FullComparatorWeights(**data.get('comparators', {})),
            comparator_vec=ComparatorVecWeights(**data.get('comparator_vec', {})),
            max_versions=data.get('max_versions', defaults.max_versions),
            max_comparators=data.get('max_comparators', defaults.max_comparators),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class GenerationConfig:
    """Configuration for a corpus run"""
    num_generations: int = 100
    invalid_ratio: float = 0.0  # 0.0 = all valid, 1.0 = all invalid
    seed: Optional[int] = None
    kind: str = 'version_req'
    verbose: bool = False
