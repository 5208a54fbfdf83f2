"""
Tensor: a stack of layer matrices plus one auxiliary data vector.

Arithmetic dispatches layer by layer to the Matrix operation of the same
name and to the Vector operation on the data vector.

Two failure tiers apply:
    - Mismatched dimensions, a data vector of the wrong size and similar
      programmer errors raise PreconditionError subclasses.
    - Running out of memory while building a tensor is a resource
      failure: create() and the arithmetic methods return None, and any
      layers produced so far are discarded with the local list that
      held them.
"""

from typing import Callable, Iterator, Sequence

from pydense.core.exceptions import DimensionError
from pydense.core.preconditions import require
from pydense.matrix.matrix import Matrix
from pydense.vector.vector import Vector


class Tensor:
    """
    dimensions layer matrices and a data vector of dimension_size elements.

    Build tensors with Tensor.create(), which returns None on resource
    failure instead of raising.

    Attributes:
        dimensions: Number of layers
        dimension_size: Length of the data vector
        layers: Tuple of layer matrices
        data: The auxiliary data vector
    """

    __slots__ = ('_dimension_size', '_layers', '_data')

    def __init__(self, dimension_size: int, layers: tuple[Matrix, ...], data: Vector):
        self._dimension_size = dimension_size
        self._layers = layers
        self._data = data

    @classmethod
    def create(
        cls,
        dimension_size: int,
        dimensions: int,
        layers: Sequence[Matrix | None],
        data: Vector,
    ) -> 'Tensor | None':
        """
        Build a tensor from copies of the given layers and vector.

        Parameters
        ----------
        dimension_size : int
            Length of the data vector, must be positive.
        dimensions : int
            Number of layers, must be positive.
        layers : sequence of Matrix
            Exactly dimensions matrices. Layer shapes are not required
            to agree.
        data : Vector
            Vector of exactly dimension_size elements.

        Returns
        -------
        Tensor or None
            None when a layer is missing (None) or memory runs out.

        Raises
        ------
        PreconditionError
            If a count is not positive.
        DimensionError
            If the layer count or the vector size disagrees with the
            declared dimensions.
        """
        require(dimension_size > 0, f"tensor: dimension_size must be positive, got {dimension_size}")
        require(dimensions > 0, f"tensor: dimensions must be positive, got {dimensions}")
        require(
            len(layers) == dimensions,
            f"tensor: expected {dimensions} layers, got {len(layers)}",
            DimensionError,
        )
        require(
            data is not None and data.size == dimension_size,
            f"tensor: data vector must hold {dimension_size} elements",
            DimensionError,
        )

        copied: list[Matrix] = []
        try:
            for layer in layers:
                if layer is None:
                    return None
                copied.append(layer.copy())
            vector = data.copy()
        except MemoryError:
            return None
        return cls(dimension_size, tuple(copied), vector)

    # --- Access ---

    @property
    def dimensions(self) -> int:
        return len(self._layers)

    @property
    def dimension_size(self) -> int:
        return self._dimension_size

    @property
    def layers(self) -> tuple[Matrix, ...]:
        return self._layers

    @property
    def data(self) -> Vector:
        return self._data

    def layer(self, index: int) -> Matrix:
        require(
            0 <= index < self.dimensions,
            f"tensor: layer {index} outside [0, {self.dimensions})",
            DimensionError,
        )
        return self._layers[index]

    def __iter__(self) -> Iterator[Matrix]:
        return iter(self._layers)

    def __len__(self) -> int:
        return self.dimensions

    # --- Arithmetic ---

    def _combine(
        self,
        other: 'Tensor',
        matrix_op: Callable[[Matrix, Matrix], Matrix],
        vector_op: Callable[[Vector, Vector], Vector],
        op: str,
    ) -> 'Tensor | None':
        require(
            self.dimensions == other.dimensions,
            f"tensor {op}: dimensions differ ({self.dimensions} vs {other.dimensions})",
            DimensionError,
        )
        require(
            self.dimension_size == other.dimension_size,
            f"tensor {op}: dimension_size differs "
            f"({self.dimension_size} vs {other.dimension_size})",
            DimensionError,
        )

        try:
            layers = tuple(
                matrix_op(left, right)
                for left, right in zip(self._layers, other._layers)
            )
            data = vector_op(self._data, other._data)
        except MemoryError:
            return None
        return Tensor(self.dimension_size, layers, data)

    def add(self, other: 'Tensor') -> 'Tensor | None':
        return self._combine(other, Matrix.add, Vector.add, 'add')

    def sub(self, other: 'Tensor') -> 'Tensor | None':
        return self._combine(other, Matrix.sub, Vector.sub, 'sub')

    def mul(self, other: 'Tensor') -> 'Tensor | None':
        """Matrix product per layer, element-wise product of the data vectors."""
        return self._combine(other, Matrix.mul, Vector.mul, 'mul')

    def div(self, other: 'Tensor') -> 'Tensor | None':
        """Matrix.div per layer, element-wise quotient of the data vectors."""
        return self._combine(other, Matrix.div, Vector.div, 'div')

    # --- Comparison ---

    def equals(self, other: 'Tensor') -> bool:
        """Exact equality of every layer and the data vector."""
        if self.dimensions != other.dimensions:
            return False
        return all(
            a == b for a, b in zip(self._layers, other._layers)
        ) and self._data.equals(other._data)

    def all_close(self, other: 'Tensor') -> bool:
        if self.dimensions != other.dimensions:
            return False
        return all(
            a.all_close(b) for a, b in zip(self._layers, other._layers)
        ) and self._data.all_close(other._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self) -> str:
        shapes = ", ".join(f"{m.rows}x{m.cols}" for m in self._layers)
        return (
            f"Tensor(dimensions={self.dimensions}, "
            f"dimension_size={self.dimension_size}, layers=[{shapes}])"
        )
