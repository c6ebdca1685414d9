"""
pytest configuration and shared fixtures.
"""

from fractions import Fraction

import pytest
import numpy as np

from fixedmatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_square(rng):
    """Factory for random float64 square matrices of a given size."""
    def make(n):
        return Matrix[float, n, n](rng.standard_normal((n, n)))
    return make


@pytest.fixture
def rational_square(rng):
    """Factory for random Fraction square matrices with small integer entries."""
    def make(n):
        ints = rng.integers(-5, 6, size=(n, n))
        return Matrix[Fraction, n, n]([[Fraction(int(x)) for x in row] for row in ints])
    return make


@pytest.fixture
def singular_2x2():
    """Row 1 is twice row 0."""
    return Matrix[float, 2, 2]([[1, 2], [2, 4]])
