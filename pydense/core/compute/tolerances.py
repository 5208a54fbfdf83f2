"""
Tolerance tiers and iteration limits.

Defines the numerical thresholds every kernel shares:
- ALL_CLOSE: element-wise approximate equality (NumPy defaults)
- PIVOT_EPSILON: smallest magnitude accepted as a Gaussian pivot
- QR_ALGORITHM / SVD: convergence thresholds and iteration caps
- SVD_RECONSTRUCTION: looser tier for checking U diag(S) V^T against A

Used by the kernels, the test suite, and anyone comparing results.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Absolute and relative tolerance pair for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


@dataclass(frozen=True)
class IterationLimit:
    """Convergence threshold and iteration cap for an iterative kernel."""
    max_iter: int
    tol: float
    name: str
    description: str


# Element-wise closeness: |a - b| <= atol + rtol * |b|
ALL_CLOSE = ToleranceTier(
    rtol=1e-5,
    atol=1e-8,
    name='all_close',
    description='Element-wise approximate equality, NumPy allclose defaults',
)

# Reconstructing A from an iterative SVD
SVD_RECONSTRUCTION = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='svd_reconstruction',
    description='U diag(S) V^T against A after iterative convergence',
)

# Entries at or below this magnitude are never chosen as pivots
PIVOT_EPSILON: float = 1e-10

QR_ALGORITHM = IterationLimit(
    max_iter=500,
    tol=1e-10,
    name='qr_algorithm',
    description='Stop when max |strict lower triangle| < tol',
)

SVD = IterationLimit(
    max_iter=100,
    tol=1e-10,
    name='svd',
    description='Stop when ||offdiag(S)||_F < tol * ||A||_F',
)
