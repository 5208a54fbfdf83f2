"""
LU decomposition (Doolittle, no pivoting).
"""

import numpy as np

from pydense.core.validation import check_square
from pydense.decomposition.solution import MatrixPair
from pydense.matrix.matrix import Matrix


def lu_decomp(matrix: Matrix) -> MatrixPair:
    """
    Factor a square matrix as A = L U.

    L is unit lower triangular, U upper triangular. No row exchanges are
    made, so a zero leading minor produces inf/NaN entries instead of an
    error.

    Parameters
    ----------
    matrix : Matrix
        Square input.

    Returns
    -------
    MatrixPair
        (L, U)
    """
    check_square(matrix, 'lu_decomp')
    a = matrix.data
    n = matrix.rows
    lower = np.zeros((n, n), dtype=matrix.dtype)
    upper = np.zeros((n, n), dtype=matrix.dtype)

    with np.errstate(divide='ignore', invalid='ignore'):
        for i in range(n):
            for k in range(i, n):
                upper[i, k] = a[i, k] - np.dot(lower[i, :i], upper[:i, k])
            lower[i, i] = 1.0
            for k in range(i + 1, n):
                lower[k, i] = (a[k, i] - np.dot(lower[k, :i], upper[:i, i])) / upper[i, i]

    return MatrixPair(Matrix._wrap(lower), Matrix._wrap(upper))
