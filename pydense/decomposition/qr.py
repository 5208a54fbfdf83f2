"""
QR decomposition by modified Gram-Schmidt.

qr_decomp() is the public square, nonsingular QR. orthonormalize() is the
kernel shared with the QR algorithm and the SVD: it accepts tall or
rank-deficient input and completes Q with basis vectors wherever a
column collapses.
"""

import numpy as np

from pydense.core.compute.tolerances import PIVOT_EPSILON
from pydense.core.exceptions import SingularMatrixError
from pydense.core.preconditions import require
from pydense.core.validation import check_square
from pydense.decomposition.solution import MatrixPair
from pydense.matrix.matrix import Matrix
from pydense.vector.vector import column_length, dot_cols


def _complete_column(q: Matrix, j: int) -> None:
    """
    Replace column j of q with a unit vector orthogonal to columns 0..j-1.

    Orthogonalises every standard basis vector against the earlier
    columns and keeps the one with the largest remainder. Since j < rows
    that remainder is at least 1 / sqrt(rows).
    """
    columns = q._data
    m = q.rows
    best, best_norm = None, 0.0
    for k in range(m):
        v = np.zeros(m, dtype=q.dtype)
        v[k] = 1.0
        # second pass restores orthogonality lost to rounding
        for _ in range(2):
            for i in range(j):
                v -= np.dot(columns[:, i], v) * columns[:, i]
        norm = float(np.sqrt(np.dot(v, v)))
        if norm > best_norm:
            best, best_norm = v, norm
    columns[:, j] = best / best_norm


def orthonormalize(matrix: Matrix, complete: bool = True) -> MatrixPair:
    """
    Modified Gram-Schmidt factorisation A = Q R.

    Args:
        matrix: m x n input with m >= n
        complete: When True, a column whose remaining norm falls below
                  PIVOT_EPSILON * ||A||_F is replaced by an orthonormal
                  completion vector and gets a zero on the diagonal of R.
                  When False, collapsed columns divide by their tiny norm.

    Returns:
        MatrixPair(Q, R): Q is m x n with orthonormal columns,
        R is n x n upper triangular.
    """
    m, n = matrix.shape
    require(
        m >= n,
        f"orthonormalize: expected rows >= cols, got {m}x{n}",
    )

    q = matrix.copy()
    r = Matrix.init(n, n, dtype=matrix.dtype)
    threshold = PIVOT_EPSILON * matrix.frobenius()

    for j in range(n):
        for i in range(j):
            rij = dot_cols(q, i, q, j)
            r._data[i, j] = rij
            q.col_sub(j, q, i, rij)

        norm = column_length(q, j)
        if complete and norm <= threshold:
            r._data[j, j] = 0.0
            _complete_column(q, j)
            continue

        r._data[j, j] = norm
        q.col_div(j, norm)

    return MatrixPair(q, r)


def qr_decomp(matrix: Matrix) -> MatrixPair:
    """
    QR decomposition of a square nonsingular matrix.

    Parameters
    ----------
    matrix : Matrix
        Square input with nonzero determinant.

    Returns
    -------
    MatrixPair
        (Q, R) with Q orthogonal and R upper triangular, A = Q R.

    Raises
    ------
    DimensionError
        If the matrix is not square.
    SingularMatrixError
        If the determinant is zero.
    """
    check_square(matrix, 'qr_decomp')
    det = matrix.determinant()
    require(
        det != 0.0,
        "qr_decomp: matrix is singular (determinant is 0)",
        SingularMatrixError,
        matrix_name='matrix',
        determinant=det,
    )
    return orthonormalize(matrix, complete=False)
