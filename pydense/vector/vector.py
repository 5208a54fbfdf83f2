"""
Vector: fixed-size dense sequence of real numbers.

A Vector owns a private 1-D numpy buffer of its dtype (float64 by default,
float32 on request). The buffer is allocated once and never resized.
Every operation returns a new Vector; the only in-place mutators are
set() and set_elements().

Boundary policy:
    get(i) outside [0, size) returns 0.0
    set(i, v) outside [0, size) does nothing
Binary operations on vectors of different sizes are precondition
violations (DimensionError), not recoverable errors.
"""

from __future__ import annotations

import math
from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pydense.core.compute import elementwise
from pydense.core.compute.elementwise import ElementwiseMixin
from pydense.core.compute.precision import is_close, resolve_dtype
from pydense.core.compute.random import RandomSource
from pydense.core.compute.tolerances import ALL_CLOSE
from pydense.core.validation import (
    check_1d, check_array, check_length, check_same_size,
)
from pydense.core.exceptions import DimensionError
from pydense.core.preconditions import require

if TYPE_CHECKING:
    from pydense.matrix.matrix import Matrix


class Vector(ElementwiseMixin):
    """
    Dense real vector.

    Construction:
        Vector([1, 2, 3])
        Vector.zeros(6), Vector.ones(6), Vector.fill(6, 2.5)
        Vector.random(6, seed=42)
    """

    __slots__ = ('_data',)

    def __init__(self, values: ArrayLike, dtype: DTypeLike | str | None = None):
        data = check_array(values, 'values', dtype=resolve_dtype(dtype))
        if data.ndim == 0:
            data = data.reshape(1)
        check_1d(data, 'values')
        self._data = data

    @classmethod
    def _wrap(cls, data: NDArray[np.floating[Any]]) -> Vector:
        """Adopt a freshly computed buffer without copying it."""
        out = cls.__new__(cls)
        out._data = data
        return out

    # --- Constructors ---

    @classmethod
    def init(cls, size: int, dtype: DTypeLike | str | None = None) -> Vector:
        """Zero-initialised vector of the given size."""
        return cls._wrap(np.zeros(size, dtype=resolve_dtype(dtype)))

    @classmethod
    def zeros(cls, size: int, dtype: DTypeLike | str | None = None) -> Vector:
        return cls.init(size, dtype)

    @classmethod
    def ones(cls, size: int, dtype: DTypeLike | str | None = None) -> Vector:
        return cls._wrap(np.ones(size, dtype=resolve_dtype(dtype)))

    @classmethod
    def fill(
        cls,
        size: int,
        value: float,
        dtype: DTypeLike | str | None = None,
    ) -> Vector:
        """Vector with every element set to value."""
        return cls._wrap(np.full(size, value, dtype=resolve_dtype(dtype)))

    @classmethod
    def random(
        cls,
        size: int,
        seed: int | None = 0,
        dtype: DTypeLike | str | None = None,
    ) -> Vector:
        """
        Uniform values in [0, 1).

        Args:
            size: Number of elements
            seed: 0/None for entropy seeding, nonzero for a deterministic stream
            dtype: Precision
        """
        source = RandomSource(seed)
        return cls._wrap(source.uniform_array(size, dtype=resolve_dtype(dtype)))

    @classmethod
    def random_bound(
        cls,
        size: int,
        seed: int | None,
        low: float,
        high: float,
        dtype: DTypeLike | str | None = None,
    ) -> Vector:
        """Uniform values in [low, high)."""
        source = RandomSource(seed)
        return cls._wrap(
            source.bounded_array(size, low, high, dtype=resolve_dtype(dtype))
        )

    def copy(self) -> Vector:
        return self._wrap(self._data.copy())

    # --- Shape / access ---

    @property
    def size(self) -> int:
        return int(self._data.shape[0])

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Independent copy of the buffer."""
        return self._data.copy()

    def get(self, index: int) -> float:
        """Element at index, or 0.0 when index is out of range."""
        if index < 0 or index >= self.size:
            return 0.0
        return float(self._data[index])

    def set(self, index: int, value: float) -> None:
        """Set element in place; out-of-range indices are ignored."""
        if index < 0 or index >= self.size:
            return
        self._data[index] = value

    def set_elements(self, values: ArrayLike) -> None:
        """Overwrite all elements in place. values must hold exactly size numbers."""
        check_length(values, self.size, 'set_elements')
        self._data[:] = np.ravel(np.asarray(values, dtype=self.dtype))

    # --- Element-wise arithmetic ---

    def add(self, other: Vector) -> Vector:
        check_same_size(self, other, 'add')
        return self._wrap(self._data + other._data)

    def sub(self, other: Vector) -> Vector:
        check_same_size(self, other, 'sub')
        return self._wrap(self._data - other._data)

    def mul(self, other: Vector) -> Vector:
        """Element-wise product."""
        check_same_size(self, other, 'mul')
        return self._wrap(self._data * other._data)

    def div(self, other: Vector) -> Vector:
        """Element-wise quotient; division by zero gives inf/NaN."""
        check_same_size(self, other, 'div')
        with np.errstate(divide='ignore', invalid='ignore'):
            return self._wrap(self._data / other._data)

    def scale(self, x: float) -> Vector:
        return self._wrap(self._data * self.dtype.type(x))

    def _map(self, fn, *args) -> Vector:
        return self._wrap(elementwise.apply(fn, self._data, *args))

    # --- Reductions and geometry ---

    def sum(self) -> float:
        return float(np.sum(self._data))

    def dot(self, other: Vector) -> float:
        check_same_size(self, other, 'dot')
        return float(np.dot(self._data, other._data))

    def norm(self) -> float:
        """Euclidean norm, sqrt(sum x_i^2)."""
        return math.sqrt(float(np.dot(self._data, self._data)))

    def angle(self, other: Vector) -> float:
        """
        Angle between two vectors in radians.

        acos(a.b / (|a| |b|)). NaN when either vector has zero norm.
        """
        denominator = self.norm() * other.norm()
        with np.errstate(divide='ignore', invalid='ignore'):
            cosine = np.float64(self.dot(other)) / np.float64(denominator)
            return float(np.arccos(cosine))

    def cross(self, other: Vector) -> float:
        """
        Magnitude of the cross product, generalised to any dimension.

        |a| |b| sin(theta), theta being angle() in radians.
        """
        return self.norm() * other.norm() * math.sin(self.angle(other))

    def projection(self, other: Vector) -> float:
        """Scalar projection of self onto other, a.b / |b|."""
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(self.dot(other)) / np.float64(other.norm()))

    def normalize(self) -> Vector:
        """Unit vector in the same direction (NaN for the zero vector)."""
        with np.errstate(divide='ignore', invalid='ignore'):
            return self._wrap(self._data / self.dtype.type(self.norm()))

    def transform(self, matrix: Matrix) -> Vector:
        """
        Matrix-vector product, matrix @ self.

        Requires matrix.cols == size; the result has matrix.rows elements.
        """
        require(
            matrix.cols == self.size,
            f"transform: matrix has {matrix.cols} cols, vector has {self.size} elements",
            DimensionError,
        )
        return self._wrap(matrix.data @ self._data)

    # --- Comparison ---

    def equals(self, other: Vector) -> bool:
        """Exact element-wise equality (False when sizes differ)."""
        if self.size != other.size:
            return False
        return bool(np.array_equal(self._data, other._data))

    def all_close(self, other: Vector) -> bool:
        """
        Approximate equality: |a - b| <= 1e-8 + 1e-5 |b| for every element.

        False when sizes differ.
        """
        if self.size != other.size:
            return False
        return bool(np.all(is_close(
            self._data, other._data, rtol=ALL_CLOSE.rtol, atol=ALL_CLOSE.atol,
        )))

    # --- Python protocol ---

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[float]:
        return (float(x) for x in self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __add__(self, other: Vector) -> Vector:
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        return self.sub(other)

    def __mul__(self, other: Vector | float) -> Vector:
        if isinstance(other, Vector):
            return self.mul(other)
        return self.scale(other)

    def __rmul__(self, other: float) -> Vector:
        return self.scale(other)

    def __truediv__(self, other: Vector) -> Vector:
        return self.div(other)

    def __matmul__(self, other: Vector) -> float:
        return self.dot(other)

    def __neg__(self) -> Vector:
        return self._wrap(-self._data)

    def __repr__(self) -> str:
        return f"Vector(size={self.size}, data={np.array2string(self._data, precision=4)})"


def column_length(matrix: Matrix, col: int) -> float:
    """Euclidean length of one matrix column."""
    column = matrix.data[:, col]
    return math.sqrt(float(np.dot(column, column)))


def dot_cols(matrix: Matrix, col1: int, subject: Matrix, col2: int) -> float:
    """Dot product of matrix[:, col1] and subject[:, col2]."""
    require(
        matrix.rows == subject.rows,
        f"dot_cols: row counts differ ({matrix.rows} vs {subject.rows})",
        DimensionError,
    )
    return float(np.dot(matrix.data[:, col1], subject.data[:, col2]))
