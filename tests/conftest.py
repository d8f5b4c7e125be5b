"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_vectors(rng):
    """Pairs of equal-length random vectors of assorted sizes, as arrays."""
    return [
        (rng.standard_normal(n), rng.standard_normal(n))
        for n in (1, 2, 5, 17, 64)
    ]


@pytest.fixture
def random_shapes(rng):
    """(p, q, r) triples for compatible p x q and q x r products."""
    return [tuple(int(d) for d in rng.integers(1, 7, size=3)) for _ in range(10)]
