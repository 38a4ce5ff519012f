"""Small combinators every generator is composed from.

A generator is any callable taking a ``random.Random`` first. The same
seed always yields the same value.
"""

import random
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

import rstr

T = TypeVar('T')

Generate = Callable[[random.Random], T]


def check_probability(probability: float, name: str = 'probability') -> float:
    """Validate a probability in [0, 1]."""
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"{name} must be between 0.0 and 1.0, got {probability!r}")
    return probability


def weighted(rng: random.Random, probability_of_some: float,
             generate: Generate[T]) -> Optional[T]:
    """Generate a value with the given probability, otherwise None."""
    check_probability(probability_of_some, 'probability_of_some')
    if rng.random() < probability_of_some:
        return generate(rng)
    return None


def one_of(rng: random.Random, branches: Sequence[Tuple[int, Generate[T]]]) -> T:
    """Pick one branch by relative weight and run it.

    A weight of zero excludes the branch. At least one weight must be
    positive.
    """
    weights = [weight for weight, _ in branches]
    if any(weight < 0 for weight in weights):
        raise ValueError(f"weights must not be negative: {weights}")
    if sum(weights) <= 0:
        raise ValueError("at least one weight must be positive")
    _, generate = rng.choices(branches, weights=weights, k=1)[0]
    return generate(rng)


def vec(rng: random.Random, generate: Generate[T],
        min_len: int, max_len: int) -> List[T]:
    """Generate a list whose length lies in [min_len, max_len]."""
    if min_len < 0 or max_len < min_len:
        raise ValueError(f"invalid length bounds: {min_len}..={max_len}")
    count = rng.randint(min_len, max_len)
    return [generate(rng) for _ in range(count)]


def xeger(rng: random.Random, pattern: str) -> str:
    """Generate a string matching ``pattern``."""
    return rstr.Rstr(_random=rng).xeger(pattern)
