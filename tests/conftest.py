"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pydense.matrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_2x2():
    """The well-conditioned 2x2 matrix [[4, 7], [2, 6]] (det = 10)."""
    return Matrix([4.0, 7.0, 2.0, 6.0], 2, 2)


@pytest.fixture
def well_conditioned(rng):
    """Random 5x5 matrix made diagonally dominant so it inverts cleanly."""
    n = 5
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    return Matrix.from_rows(A)


@pytest.fixture
def singular_3x3():
    """Rank-2 matrix whose elimination hits an exact zero on the last pivot."""
    return Matrix.from_rows([
        [1.0, 2.0, 3.0],
        [2.0, 4.0, 6.0],
        [1.0, 1.0, 1.0],
    ])
