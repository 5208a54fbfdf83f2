"""
Tensor aggregator.

Public API:
    Tensor.create(dimension_size, dimensions, layers, data) -> Tensor | None

Example:
    >>> from pydense.tensor import Tensor
    >>> t = Tensor.create(2, 2, [Matrix.ones(2, 2), Matrix.identity(2)], Vector([1, 2]))
    >>> (t.add(t)).layer(1) == Matrix.identity(2).scale(2)
    True
"""

from pydense.tensor.tensor import Tensor

__all__ = [
    "Tensor",
]
