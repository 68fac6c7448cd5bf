"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_matrix(rng):
    """Well-conditioned 4x4 real matrix (diagonally dominant)."""
    A = rng.standard_normal((4, 4)) + 4.0 * np.eye(4)
    return Matrix(A)


@pytest.fixture
def tall_matrix(rng):
    """6x3 real matrix with full column rank."""
    return Matrix(rng.standard_normal((6, 3)))


@pytest.fixture
def complex_matrix(rng):
    """Well-conditioned 3x3 complex matrix."""
    A = rng.standard_normal((3, 3)) + 1j * rng.standard_normal((3, 3)) + 3.0 * np.eye(3)
    return Matrix(A)
