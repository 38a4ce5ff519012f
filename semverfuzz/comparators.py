"""String-level comparator shapes and the requirement lists built from them.

A requirement string can only be one of two things:

* a single bare wildcard ``*``;
* a comma-separated list of comparators, none of them a bare ``*``
  (though ``<op>MAJOR.*.*`` and ``<op>MAJOR.MINOR.*`` are fine).

``FullComparator`` and ``ComparatorVec`` encode exactly those shapes. Both
are closed: the variant is an enum tag and every consumer switches on it.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from .combinators import one_of, vec
from .config import ComparatorVecWeights, FullComparatorWeights, OperatorWeights
from .operators import arb_semver_op
from .oracle import Op
from .primitives import (
    arb_option_build_metadata_string,
    arb_option_pre_release_string,
    arb_u64,
)

# Every non-wildcard operator is equally likely inside a comparator.
_COMPARATOR_OPS = OperatorWeights(default_weight=1, wildcard_weight=0)


class FullComparatorKind(Enum):
    PLAIN = 'plain'                    # <op>MAJOR.MINOR.PATCH[-PRE][+BUILD]
    WILDCARD_MINOR = 'wildcard_minor'  # <op>MAJOR.*.*
    WILDCARD_PATCH = 'wildcard_patch'  # <op>MAJOR.MINOR.*
    WILDCARD = 'wildcard'              # *


# Fields a shape does not render, with the value they must keep so that
# equal renderings compare equal.
_UNUSED_DEFAULTS = {'major': 0, 'minor': 0, 'patch': 0, 'pre': None, 'build': None}
_UNUSED_FIELDS = {
    FullComparatorKind.PLAIN: (),
    FullComparatorKind.WILDCARD_MINOR: ('minor', 'patch', 'pre', 'build'),
    FullComparatorKind.WILDCARD_PATCH: ('patch', 'pre', 'build'),
    FullComparatorKind.WILDCARD: ('major', 'minor', 'patch', 'pre', 'build'),
}


@dataclass(frozen=True)
class FullComparator:
    """One comparator as it is written in a requirement string.

    Build metadata lives here only for rendering; the oracle's own
    ``Comparator`` has no such field and ignores it when parsing.

    A bare ``WILDCARD`` is valid alone but not next to other comparators,
    so no generator ever produces it.
    """
    kind: FullComparatorKind
    op: Optional[Op] = None
    major: int = 0
    minor: int = 0
    patch: int = 0
    pre: Optional[str] = None
    build: Optional[str] = None

    def __post_init__(self):
        if self.kind is FullComparatorKind.WILDCARD:
            if self.op is not None:
                raise ValueError("a bare wildcard comparator takes no operator")
        elif self.op is None or self.op is Op.WILDCARD:
            raise ValueError(f"{self.kind.value} comparator needs a non-wildcard operator, got {self.op!r}")

        for name in _UNUSED_FIELDS[self.kind]:
            if getattr(self, name) != _UNUSED_DEFAULTS[name]:
                raise ValueError(f"{self.kind.value} comparator takes no {name}, got {getattr(self, name)!r}")

    @classmethod
    def plain(cls, op: Op, major: int, minor: int, patch: int,
              pre: Optional[str] = None, build: Optional[str] = None) -> 'FullComparator':
        return cls(FullComparatorKind.PLAIN, op, major, minor, patch, pre, build)

    @classmethod
    def wildcard_minor(cls, op: Op, major: int) -> 'FullComparator':
        return cls(FullComparatorKind.WILDCARD_MINOR, op, major)

    @classmethod
    def wildcard_patch(cls, op: Op, major: int, minor: int) -> 'FullComparator':
        return cls(FullComparatorKind.WILDCARD_PATCH, op, major, minor)

    @classmethod
    def wildcard(cls) -> 'FullComparator':
        return cls(FullComparatorKind.WILDCARD)

    def __str__(self) -> str:
        if self.kind is FullComparatorKind.PLAIN:
            text = f"{self.op.value}{self.major}.{self.minor}.{self.patch}"
            if self.pre is not None:
                text += f"-{self.pre}"
            if self.build is not None:
                text += f"+{self.build}"
            return text
        if self.kind is FullComparatorKind.WILDCARD_MINOR:
            return f"{self.op.value}{self.major}.*.*"
        if self.kind is FullComparatorKind.WILDCARD_PATCH:
            return f"{self.op.value}{self.major}.{self.minor}.*"
        if self.kind is FullComparatorKind.WILDCARD:
            return "*"
        raise AssertionError(f"unhandled comparator kind {self.kind!r}")


class ComparatorVecKind(Enum):
    LIST = 'list'
    WILDCARD = 'wildcard'


@dataclass(frozen=True)
class ComparatorVec:
    """A whole requirement: a comparator list, or a single bare ``*``.

    Joined with ``,`` it can be fed straight to the oracle's ``parse_req``.
    """
    kind: ComparatorVecKind
    comparators: Tuple[FullComparator, ...] = ()

    def __post_init__(self):
        if self.kind is ComparatorVecKind.WILDCARD and self.comparators:
            raise ValueError("a wildcard requirement holds no comparators")
        if any(c.kind is FullComparatorKind.WILDCARD for c in self.comparators):
            raise ValueError("a bare wildcard cannot be combined with other comparators")

    @classmethod
    def list_of(cls, comparators: Sequence[FullComparator]) -> 'ComparatorVec':
        return cls(ComparatorVecKind.LIST, tuple(comparators))

    @classmethod
    def wildcard(cls) -> 'ComparatorVec':
        return cls(ComparatorVecKind.WILDCARD)

    def __len__(self) -> int:
        return len(self.comparators)

    def __str__(self) -> str:
        if self.kind is ComparatorVecKind.LIST:
            return ",".join(str(c) for c in self.comparators)
        if self.kind is ComparatorVecKind.WILDCARD:
            return "*"
        raise AssertionError(f"unhandled requirement kind {self.kind!r}")


def arb_full_comparator(rng: random.Random,
                        weights: Optional[FullComparatorWeights] = None) -> FullComparator:
    """Some comparator shape, never the bare ``WILDCARD``.

    Args:
        rng: Random source
        weights: Relative weights of ``PLAIN`` (default 7), ``WILDCARD_MINOR``
            (default 1) and ``WILDCARD_PATCH`` (default 1), plus the
            presence probabilities of pre-release and build metadata on
            a plain comparator (default 0.8 each).
    """
    weights = weights or FullComparatorWeights()

    def wildcard_minor(rng: random.Random) -> FullComparator:
        return FullComparator.wildcard_minor(arb_semver_op(rng, _COMPARATOR_OPS), arb_u64(rng))

    def wildcard_patch(rng: random.Random) -> FullComparator:
        return FullComparator.wildcard_patch(arb_semver_op(rng, _COMPARATOR_OPS),
                                             arb_u64(rng), arb_u64(rng))

    def plain(rng: random.Random) -> FullComparator:
        return FullComparator.plain(
            arb_semver_op(rng, _COMPARATOR_OPS),
            arb_u64(rng), arb_u64(rng), arb_u64(rng),
            arb_option_pre_release_string(rng, weights.probability_of_pre_release),
            arb_option_build_metadata_string(rng, weights.probability_of_build_metadata),
        )

    return one_of(rng, [
        (weights.wildcard_minor, wildcard_minor),
        (weights.wildcard_patch, wildcard_patch),
        (weights.plain, plain),
    ])


def arb_comparator_list(rng: random.Random, max_comparators: int,
                        min_comparators: Optional[int] = None,
                        weights: Optional[FullComparatorWeights] = None) -> Tuple[FullComparator, ...]:
    """Exactly ``max_comparators`` comparators.

    Pass ``min_comparators`` to draw the length from
    ``min_comparators..max_comparators`` instead. Joined with ``,`` the
    result is a valid requirement as long as ``max_comparators`` stays
    within ``MAX_COMPARATORS_IN_VERSION_REQ_STRING``.
    """
    if min_comparators is None:
        min_comparators = max_comparators
    if min_comparators < 1:
        raise ValueError(f"a comparator list needs at least one entry, got {min_comparators!r}")
    return tuple(vec(rng, lambda r: arb_full_comparator(r, weights), min_comparators, max_comparators))


def arb_full_comparator_vec(rng: random.Random, max_comparators: int,
                            weights: Optional[ComparatorVecWeights] = None,
                            min_comparators: Optional[int] = None,
                            comparator_weights: Optional[FullComparatorWeights] = None) -> ComparatorVec:
    """A requirement shape: a bare ``*`` or a comparator list.

    Args:
        rng: Random source
        max_comparators: Length of a ``LIST``
        weights: ``wildcard`` (default 1) against ``comparator_list``
            (default 14). The bare wildcard tests little and is there
            for completeness.
        min_comparators: If given, a ``LIST`` holds between this many and
            ``max_comparators``
        comparator_weights: Passed on to ``arb_full_comparator``
    """
    weights = weights or ComparatorVecWeights()
    return one_of(rng, [
        (weights.wildcard, lambda r: ComparatorVec.wildcard()),
        (weights.comparator_list, lambda r: ComparatorVec.list_of(
            arb_comparator_list(r, max_comparators, min_comparators, comparator_weights))),
    ])


def arb_comparator_string(rng: random.Random,
                          weights: Optional[FullComparatorWeights] = None) -> str:
    """A string the oracle's ``parse_comparator`` accepts."""
    return str(arb_full_comparator(rng, weights))
