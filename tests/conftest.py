"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pydense.matrix import Matrix


def _orthogonal(rng, n):
    q, _ = np.linalg.qr(rng.standard_normal((n, n)))
    return q


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """4x4 diagonally dominated matrix, safely invertible."""
    return Matrix(rng.standard_normal((4, 4)) + 6.0 * np.eye(4))


@pytest.fixture
def spd_matrix(rng):
    """4x4 symmetric positive definite matrix."""
    b = rng.standard_normal((4, 4))
    return Matrix(b @ b.T + 4.0 * np.eye(4))


@pytest.fixture
def known_singular_values():
    return np.array([10.0, 5.0, 2.0, 1.0])


@pytest.fixture
def svd_matrix(rng, known_singular_values):
    """4x4 matrix with well separated singular values 10, 5, 2, 1."""
    u = _orthogonal(rng, 4)
    v = _orthogonal(rng, 4)
    return Matrix(u @ np.diag(known_singular_values) @ v.T)


@pytest.fixture
def known_eigenvalues():
    return np.array([6.0, 3.0, 1.0])


@pytest.fixture
def symmetric_matrix(rng, known_eigenvalues):
    """3x3 symmetric matrix with eigenvalues 6, 3, 1."""
    q = _orthogonal(rng, 3)
    a = q @ np.diag(known_eigenvalues) @ q.T
    return Matrix((a + a.T) / 2.0)


@pytest.fixture
def reference_matrix():
    """Lower-triangular matrix used as the fixed SVD reference case."""
    return Matrix([
        [14.0, 0.0, 0.0],
        [21.0, 175.0, 0.0],
        [-14.0, -70.0, 35.0],
    ])
