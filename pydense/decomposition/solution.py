"""
Decomposition result types.

MatrixPair is the plain two-matrix result of QR and LU. The iterative
kernels (QR algorithm, SVD) return a parameter payload wrapped in
Result, exposed through a user-facing solution class.
"""

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING

from pydense.core.result import Result

if TYPE_CHECKING:
    from pydense.matrix.matrix import Matrix
    from pydense.vector.vector import Vector


@dataclass(frozen=True)
class MatrixPair:
    """
    Two matrices produced together: (Q, R) from QR, (L, U) from LU.

    Unpacks like a tuple:
        q, r = a.qr_decomp()
    """
    a: 'Matrix'
    b: 'Matrix'

    def __iter__(self) -> Iterator['Matrix']:
        yield self.a
        yield self.b

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int) -> 'Matrix':
        return (self.a, self.b)[index]


@dataclass(frozen=True)
class SVDParams:
    """
    Parameter payload for the singular value decomposition.

    A = left @ diag(singular) @ right^T, singular values descending.
    """
    left: 'Matrix'
    singular: 'Vector'
    right: 'Matrix'


@dataclass
class SVDSolution:
    """
    User-facing SVD results.

    Unpacks as (U, S, V):
        u, s, v = a.svd()
    """
    _result: Result[SVDParams]

    @property
    def left(self) -> 'Matrix':
        """U, the left singular vectors as columns."""
        return self._result.params.left

    @property
    def singular(self) -> 'Vector':
        """Singular values in descending order."""
        return self._result.params.singular

    @property
    def right(self) -> 'Matrix':
        """V (not transposed), the right singular vectors as columns."""
        return self._result.params.right

    @property
    def iterations(self) -> int:
        return self._result.info['iterations']

    @property
    def converged(self) -> bool:
        return self._result.info['converged']

    @property
    def off_diagonal(self) -> float:
        """Frobenius norm of the off-diagonal part of the last iterate."""
        return self._result.info['off_diagonal']

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def reconstruct(self) -> 'Matrix':
        """U @ diag(S) @ V^T"""
        return self.left.vec_mul(self.singular).mul(self.right.transpose())

    def __iter__(self) -> Iterator[Any]:
        yield self.left
        yield self.singular
        yield self.right

    def summary(self) -> str:
        status = "converged" if self.converged else "did not converge"
        lines = [
            "Singular Value Decomposition",
            "=" * 40,
            f"Shape: {self.left.rows} x {self.right.rows}",
            f"Iterations: {self.iterations} ({status})",
            f"Off-diagonal norm: {self.off_diagonal:.3e}",
            "Singular values:",
        ]
        lines.extend(f"  {s:.6g}" for s in self.singular)
        return "\n".join(lines)


@dataclass(frozen=True)
class EigenParams:
    """
    Parameter payload for the QR algorithm.

    eigenvalues is the diagonal of the converged (quasi upper-triangular)
    iterate, in the order the iteration leaves them.
    """
    eigenvalues: 'Vector'
    triangular: 'Matrix'


@dataclass
class EigenSolution:
    """User-facing QR algorithm results."""
    _result: Result[EigenParams]

    @property
    def eigenvalues(self) -> 'Vector':
        return self._result.params.eigenvalues

    @property
    def triangular(self) -> 'Matrix':
        """Final iterate of A <- R Q."""
        return self._result.params.triangular

    @property
    def iterations(self) -> int:
        return self._result.info['iterations']

    @property
    def converged(self) -> bool:
        return self._result.info['converged']

    @property
    def off_diagonal(self) -> float:
        """max |strict lower triangle| of the final iterate."""
        return self._result.info['off_diagonal']

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings
