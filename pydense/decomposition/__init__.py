"""
Matrix decompositions.

Public API:
    qr_decomp(A) -> MatrixPair          modified Gram-Schmidt, A = Q R
    lu_decomp(A) -> MatrixPair          Doolittle without pivoting, A = L U
    cholesky_decomp(A) -> Matrix        A = L L^T
    row_echelon(A), find_pivot(A, c, r), rank(A), inverse(A), solve(A, B)
    qr_algorithm(A) -> EigenSolution    unshifted A <- R Q iteration
    eigenvalues(A), eigenvectors(A)
    svd(A) -> SVDSolution               alternating QR, A = U diag(S) V^T

Every function is also reachable as a Matrix method, e.g. a.svd().
"""

from pydense.decomposition.solution import (
    MatrixPair,
    SVDParams,
    SVDSolution,
    EigenParams,
    EigenSolution,
)
from pydense.decomposition.qr import qr_decomp, orthonormalize
from pydense.decomposition.lu import lu_decomp
from pydense.decomposition.cholesky import cholesky_decomp
from pydense.decomposition.echelon import (
    find_pivot,
    row_echelon,
    rank,
    inverse,
    solve,
)
from pydense.decomposition.svd import svd
from pydense.decomposition.eigen import qr_algorithm, eigenvalues, eigenvectors

__all__ = [
    # Results
    "MatrixPair",
    "SVDParams",
    "SVDSolution",
    "EigenParams",
    "EigenSolution",
    # Direct
    "qr_decomp",
    "orthonormalize",
    "lu_decomp",
    "cholesky_decomp",
    "find_pivot",
    "row_echelon",
    "rank",
    "inverse",
    "solve",
    # Iterative
    "svd",
    "qr_algorithm",
    "eigenvalues",
    "eigenvectors",
]
