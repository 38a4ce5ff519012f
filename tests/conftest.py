"""Shared fixtures and hypothesis settings."""

import random

import pytest
from hypothesis import HealthCheck, settings

# Grammar strings can run to thousands of characters, so single examples
# are slow. Fewer examples, no deadline.
settings.register_profile(
    "semverfuzz",
    max_examples=25,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile("semverfuzz")


@pytest.fixture
def rng():
    return random.Random(1234)
