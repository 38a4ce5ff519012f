"""Comparison operator generation."""

import random
from functools import partial
from typing import Optional

from .combinators import one_of
from .config import OperatorWeights
from .oracle import Op


def _just(value, rng: random.Random):
    return value


def arb_semver_op(rng: random.Random, weights: Optional[OperatorWeights] = None) -> Op:
    """Pick one of the eight operators.

    Args:
        rng: Random source
        weights: ``default_weight`` applies to each operator except
            ``Op.WILDCARD``, which uses ``wildcard_weight``. A zero weight
            never picks that branch.

    Returns:
        An ``Op``
    """
    weights = weights or OperatorWeights()
    branches = [
        (weights.wildcard_weight if op is Op.WILDCARD else weights.default_weight,
         partial(_just, op))
        for op in Op
    ]
    return one_of(rng, branches)
