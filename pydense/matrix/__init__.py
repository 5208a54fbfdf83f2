"""
Dense real matrices.

Public API:
    Matrix: row-major rows x cols matrix with arithmetic, broadcasting,
            shape utilities, statistics, element-wise maps, comparisons
            and delegating decomposition methods

Example:
    >>> from pydense.matrix import Matrix
    >>> a = Matrix.identity(3)
    >>> a.determinant(), a.trace()
    (1.0, 3.0)
"""

from pydense.matrix.matrix import Matrix

__all__ = [
    "Matrix",
]
