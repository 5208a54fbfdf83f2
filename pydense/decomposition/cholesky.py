"""
Cholesky decomposition.
"""

import numpy as np

from pydense.core.exceptions import NotSymmetricError
from pydense.core.preconditions import require
from pydense.core.validation import check_square
from pydense.matrix.matrix import Matrix


def cholesky_decomp(matrix: Matrix) -> Matrix:
    """
    Lower-triangular L with A = L L^T.

    The matrix must be all_close to its transpose. Positive definiteness
    is not checked: a negative pivot yields NaN entries.

    Parameters
    ----------
    matrix : Matrix
        Square symmetric input.

    Returns
    -------
    Matrix
        Lower-triangular factor L.

    Raises
    ------
    DimensionError
        If the matrix is not square.
    NotSymmetricError
        If the matrix is not all_close to its transpose.
    """
    check_square(matrix, 'cholesky_decomp')
    transposed = matrix.transpose()
    asymmetry = float(np.max(np.abs(matrix.data - transposed.data), initial=0.0))
    require(
        matrix.all_close(transposed),
        f"cholesky_decomp: matrix is not symmetric (max |A - A^T| = {asymmetry:.3e})",
        NotSymmetricError,
        matrix_name='matrix',
        max_asymmetry=asymmetry,
    )

    a = matrix.data
    n = matrix.rows
    lower = np.zeros((n, n), dtype=matrix.dtype)

    with np.errstate(divide='ignore', invalid='ignore'):
        for i in range(n):
            for j in range(i + 1):
                s = np.dot(lower[i, :j], lower[j, :j])
                if i == j:
                    lower[i, i] = np.sqrt(a[i, i] - s)
                else:
                    lower[i, j] = (a[i, j] - s) / lower[j, j]

    return Matrix._wrap(lower)
