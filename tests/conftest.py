"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pystructures import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exact_matrix(rng):
    """
    Factory for matrices of exact binary fractions (multiples of 1/8).

    Sums, differences and small products of these values are exactly
    representable, so equality checks need no tolerance.
    """
    def make(rows, columns):
        values = rng.integers(-64, 64, size=(rows, columns)) / 8.0
        return Matrix.from_array(values)
    return make


@pytest.fixture
def a_2x2():
    return Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def b_2x2():
    return Matrix.from_array([[5.0, 6.0], [7.0, 8.0]])
