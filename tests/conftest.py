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
def independent_3d():
    """Non-singular 3x3 system (det = -3)."""
    return [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 10.0]]


@pytest.fixture
def collinear_3d():
    """Every vector is a multiple of [1, 2, 3] (rank 1)."""
    return [[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [3.0, 6.0, 9.0]]


@pytest.fixture
def int_matrix(rng):
    """Factory for small-integer matrices (determinants are exact in float64)."""
    def make(n_rows, n_cols, low=-5, high=5):
        return rng.integers(low, high + 1, size=(n_rows, n_cols)).astype(np.float64)
    return make
