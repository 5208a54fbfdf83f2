"""
Dense real vectors.

Public API:
    Vector                  fixed-size vector with arithmetic, norms and maps
    column_length(m, c)     Euclidean length of a matrix column
    dot_cols(m, c1, s, c2)  dot product of two matrix columns

Example:
    >>> from pydense.vector import Vector
    >>> v = Vector([1, 2, 3, 4, 5, 6])
    >>> v.dot(v)
    91.0
"""

from pydense.vector.vector import Vector, column_length, dot_cols

__all__ = [
    "Vector",
    "column_length",
    "dot_cols",
]
