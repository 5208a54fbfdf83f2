"""
Generic result container for iterative PyDense computations.

The QR algorithm and the SVD report more than their matrices: how many
iterations ran, whether they converged, and how long each phase took.
Result carries that alongside the payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (converged, iterations, residual)
    - timing may be None for results built by hand
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The algorithm-specific payload type

    Attributes:
        params: Algorithm-specific payload (factor matrices, eigenvalues)
        info: Structured metadata (converged, iterations, off_diagonal)
        timing: Execution timing breakdown, or None if not measured
        method: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SVDParams(left=u, singular=s, right=v),
        ...     info={'converged': True, 'iterations': 23},
        ...     timing={'total_seconds': 0.01},
        ...     method='alternating_qr_svd'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    method: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
