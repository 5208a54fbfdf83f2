"""
Gauss-Jordan elimination and the operations built on it.

    find_pivot   first usable pivot in a column
    row_echelon  reduced row echelon form
    rank         number of independent rows
    inverse      row-reduce [A | I]
    solve        inverse(A) @ B
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydense.core.compute.tolerances import PIVOT_EPSILON
from pydense.core.exceptions import DimensionError, SingularMatrixError
from pydense.core.preconditions import require
from pydense.core.validation import check_square
from pydense.matrix.matrix import Matrix


def _pivot_row(a: NDArray[np.floating[Any]], col: int, row: int) -> int:
    candidates = np.flatnonzero(np.abs(a[row:, col]) > PIVOT_EPSILON)
    if candidates.size == 0:
        return -1
    return row + int(candidates[0])


def find_pivot(matrix: Matrix, col: int, row: int) -> int:
    """
    Row index of the first entry below (and including) row in column col
    whose magnitude exceeds PIVOT_EPSILON, or -1 when there is none.
    """
    require(
        0 <= col < matrix.cols and 0 <= row <= matrix.rows,
        f"find_pivot: column {col} / row {row} outside "
        f"{matrix.rows}x{matrix.cols} matrix",
        DimensionError,
    )
    return _pivot_row(matrix.data, col, row)


def row_echelon(matrix: Matrix) -> Matrix:
    """
    Reduced row echelon form by Gauss-Jordan elimination.

    Each pivot is scaled to 1 and cleared from every other row. A column
    with no usable pivot is skipped without consuming a row, so
    rank-deficient input still reduces correctly.

    Parameters
    ----------
    matrix : Matrix
        Any shape.

    Returns
    -------
    Matrix
        New matrix in reduced row echelon form.
    """
    out = matrix.copy()
    a = out._data
    rows, cols = out.shape
    pivot = 0

    for col in range(cols):
        if pivot >= rows:
            break
        p = _pivot_row(a, col, pivot)
        if p < 0:
            continue
        out.swap_rows(pivot, p)
        out.multiply_row(pivot, 1.0 / a[pivot, col])
        for r in range(rows):
            if r != pivot and a[r, col] != 0.0:
                out.add_row(r, pivot, -a[r, col])
        pivot += 1

    # clear negative zeros left by the eliminations
    a[a == 0.0] = 0.0
    return out


def rank(matrix: Matrix) -> int:
    """
    Number of linearly independent rows.

    A square matrix with nonzero determinant has full rank; otherwise the
    nonzero rows of the echelon form are counted.
    """
    if matrix.is_square and matrix.determinant() != 0.0:
        return matrix.rows
    reduced = row_echelon(matrix).data
    nonzero = np.any(np.abs(reduced) > PIVOT_EPSILON, axis=1)
    return int(np.count_nonzero(nonzero))


def inverse(matrix: Matrix) -> Matrix:
    """
    Inverse of a square nonsingular matrix.

    Row-reduces the augmented matrix [A | I] and returns its right half.

    Raises
    ------
    DimensionError
        If the matrix is not square.
    SingularMatrixError
        If the determinant is zero.
    """
    check_square(matrix, 'inverse')
    det = matrix.determinant()
    require(
        det != 0.0,
        "inverse: matrix is singular (determinant is 0)",
        SingularMatrixError,
        matrix_name='matrix',
        determinant=det,
    )

    n = matrix.rows
    augmented = matrix.append(Matrix.identity(n, dtype=matrix.dtype), axis=0)
    reduced = row_echelon(augmented)
    return reduced.slice(0, n, n, 2 * n)


def solve(matrix: Matrix, subject: Matrix) -> Matrix:
    """
    X with A X = B, computed as inverse(A) @ B.

    Parameters
    ----------
    matrix : Matrix
        Square nonsingular A.
    subject : Matrix
        Right-hand side B with as many rows as A.
    """
    require(
        matrix.rows == subject.rows,
        f"solve: right-hand side has {subject.rows} rows, expected {matrix.rows}",
        DimensionError,
    )
    return inverse(matrix).mul(subject)
