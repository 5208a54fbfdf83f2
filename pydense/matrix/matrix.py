"""
Matrix: dense row-major rows x cols array of real numbers.

Element (r, c) lives at flat index r * cols + c. A Matrix owns its buffer:
construction copies the caller's data and every operation allocates a new
result. The in-place mutators are set_at(), set_elements(), fill(), sort(),
resize(), and the row and column operations (swap_rows(), multiply_row(),
add_row(), col_copy(), col_sub(), col_div()).

Decompositions are implemented in pydense.decomposition; the methods at
the bottom of the class delegate there so that callers can write
a.inverse() or a.svd().
"""

from __future__ import annotations

import math
from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pydense.core.compute import elementwise, scalar
from pydense.core.compute.elementwise import ElementwiseMixin
from pydense.core.compute.precision import is_close, resolve_dtype
from pydense.core.compute.random import RandomSource
from pydense.core.compute.tolerances import ALL_CLOSE
from pydense.core.exceptions import DimensionError
from pydense.core.preconditions import require
from pydense.core.validation import (
    check_2d, check_array, check_broadcastable, check_inner, check_length,
    check_same_shape, check_square,
)
from pydense.vector.vector import Vector

if TYPE_CHECKING:
    from pydense.decomposition.solution import (
        EigenSolution, MatrixPair, SVDSolution,
    )


def _cofactor_determinant(a: NDArray[np.floating[Any]]) -> float:
    """Laplace expansion along the first row."""
    n = a.shape[0]
    if n == 1:
        return float(a[0, 0])
    if n == 2:
        return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])

    total = 0.0
    for j in range(n):
        if a[0, j] == 0.0:
            continue
        minor = np.delete(a[1:], j, axis=1)
        sign = -1.0 if j % 2 else 1.0
        total += sign * float(a[0, j]) * _cofactor_determinant(minor)
    return total


class Matrix(ElementwiseMixin):
    """
    Dense real matrix.

    Construction:
        Matrix([[1, 2], [3, 4]])
        Matrix([1, 2, 3])              # 1 x 3 row
        Matrix.identity(3)
        Matrix.random(4, 4, seed=7)

    Attributes:
        rows: Number of rows
        cols: Number of columns
        data: Read-only 2-D view of the buffer
    """

    __slots__ = ('_data',)

    def __init__(self, values: ArrayLike, dtype: DTypeLike | str | None = None):
        data = check_array(values, 'values', dtype=resolve_dtype(dtype))
        if data.ndim == 0:
            data = data.reshape(1, 1)
        elif data.ndim == 1:
            data = data.reshape(1, -1)
        check_2d(data, 'values')
        self._data = data

    @classmethod
    def _wrap(cls, data: NDArray[np.floating[Any]]) -> Matrix:
        """Adopt a freshly computed 2-D buffer without copying it."""
        out = cls.__new__(cls)
        out._data = np.ascontiguousarray(data)
        return out

    # ═══════════════════════════════════════════════════════════════════
    # Constructors
    # ═══════════════════════════════════════════════════════════════════

    @classmethod
    def init(cls, rows: int, cols: int, dtype: DTypeLike | str | None = None) -> Matrix:
        """Zero-initialised rows x cols matrix."""
        return cls._wrap(np.zeros((rows, cols), dtype=resolve_dtype(dtype)))

    @classmethod
    def zeros(cls, rows: int, cols: int, dtype: DTypeLike | str | None = None) -> Matrix:
        return cls.init(rows, cols, dtype)

    @classmethod
    def zeros_like(cls, other: Matrix) -> Matrix:
        return cls._wrap(np.zeros_like(other._data))

    @classmethod
    def ones(cls, rows: int, cols: int, dtype: DTypeLike | str | None = None) -> Matrix:
        return cls._wrap(np.ones((rows, cols), dtype=resolve_dtype(dtype)))

    @classmethod
    def ones_like(cls, other: Matrix) -> Matrix:
        return cls._wrap(np.ones_like(other._data))

    @classmethod
    def full(
        cls,
        rows: int,
        cols: int,
        value: float,
        dtype: DTypeLike | str | None = None,
    ) -> Matrix:
        return cls._wrap(np.full((rows, cols), value, dtype=resolve_dtype(dtype)))

    @classmethod
    def full_like(cls, other: Matrix, value: float) -> Matrix:
        return cls._wrap(np.full_like(other._data, value))

    @classmethod
    def identity(cls, side: int, dtype: DTypeLike | str | None = None) -> Matrix:
        return cls._wrap(np.eye(side, dtype=resolve_dtype(dtype)))

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        seed: int | None = 0,
        dtype: DTypeLike | str | None = None,
    ) -> Matrix:
        """
        Uniform values in [0, 1).

        Args:
            rows: Number of rows
            cols: Number of columns
            seed: 0/None for entropy seeding, nonzero for a deterministic stream
            dtype: Precision
        """
        source = RandomSource(seed)
        values = source.uniform_array(rows * cols, dtype=resolve_dtype(dtype))
        return cls._wrap(values.reshape(rows, cols))

    @classmethod
    def random_bound(
        cls,
        rows: int,
        cols: int,
        seed: int | None,
        low: float,
        high: float,
        dtype: DTypeLike | str | None = None,
    ) -> Matrix:
        """Uniform values in [low, high)."""
        source = RandomSource(seed)
        values = source.bounded_array(rows * cols, low, high, dtype=resolve_dtype(dtype))
        return cls._wrap(values.reshape(rows, cols))

    @classmethod
    def from_vec(cls, vector: Vector) -> Matrix:
        """1 x size row matrix holding a copy of the vector."""
        return cls._wrap(vector.to_numpy().reshape(1, -1))

    @classmethod
    def a_range(
        cls,
        start: float,
        end: float,
        step: float = 1.0,
        dtype: DTypeLike | str | None = None,
    ) -> Matrix:
        """
        Evenly spaced values start, start + step, ... below end.

        Returns a 1 x ceil((end - start) / step) matrix.
        """
        require(step != 0, "a_range: step must be nonzero")
        count = math.ceil((end - start) / step)
        require(
            count > 0,
            f"a_range: empty range [{start}, {end}) with step {step}",
        )
        values = start + step * np.arange(count, dtype=np.float64)
        return cls._wrap(values.astype(resolve_dtype(dtype)).reshape(1, count))

    def copy(self) -> Matrix:
        return self._wrap(self._data.copy())

    # ═══════════════════════════════════════════════════════════════════
    # Shape and element access
    # ═══════════════════════════════════════════════════════════════════

    @property
    def rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def cols(self) -> int:
        return int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Independent copy of the buffer."""
        return self._data.copy()

    def size(self) -> int:
        """Number of elements, rows * cols."""
        return self.rows * self.cols

    def _check_index(self, row: int, col: int, op: str) -> None:
        require(
            0 <= row < self.rows and 0 <= col < self.cols,
            f"{op}: index ({row}, {col}) outside {self.rows}x{self.cols} matrix",
            DimensionError,
        )

    def get_at(self, row: int, col: int) -> float:
        self._check_index(row, col, 'get_at')
        return float(self._data[row, col])

    def set_at(self, row: int, col: int, value: float) -> None:
        self._check_index(row, col, 'set_at')
        self._data[row, col] = value

    def set_elements(self, values: ArrayLike) -> None:
        """Overwrite every element in place from a flat row-major sequence."""
        check_length(values, self.size(), 'set_elements')
        self._data[...] = np.asarray(values, dtype=self.dtype).reshape(self.shape)

    def fill(self, value: float) -> None:
        """Set every element to value in place."""
        self._data.fill(value)

    def get_row(self, row: int) -> Vector:
        self._check_index(row, 0, 'get_row')
        return Vector._wrap(self._data[row, :].copy())

    def get_col(self, col: int) -> Vector:
        self._check_index(0, col, 'get_col')
        return Vector._wrap(self._data[:, col].copy())

    def diagonal(self, k: int = 0) -> Vector:
        """
        k-th diagonal of a square matrix as a Vector.

        k > 0 selects a diagonal above the main one, k < 0 below it.
        Requires |k| < rows.
        """
        check_square(self, 'diagonal')
        require(
            abs(k) < self.rows,
            f"diagonal: offset {k} outside a {self.rows}x{self.cols} matrix",
            DimensionError,
        )
        return Vector._wrap(np.diagonal(self._data, offset=k).copy())

    # ═══════════════════════════════════════════════════════════════════
    # Arithmetic
    # ═══════════════════════════════════════════════════════════════════

    def add(self, other: Matrix) -> Matrix:
        """Element-wise sum, broadcasting any dimension of size 1."""
        check_broadcastable(self, other, 'add')
        return self._wrap(self._data + other._data)

    def sub(self, other: Matrix) -> Matrix:
        """Element-wise difference, broadcasting any dimension of size 1."""
        check_broadcastable(self, other, 'sub')
        return self._wrap(self._data - other._data)

    def mul(self, other: Matrix) -> Matrix:
        """Matrix product. Requires self.cols == other.rows."""
        check_inner(self, other, 'mul')
        return self._wrap(self._data @ other._data)

    def div(self, other: Matrix) -> Matrix:
        """
        Quotient-sum product.

        out[i, j] = sum_k self[i, k] / other[k, j]. Same shape rules as
        mul(); zero entries in other give inf/NaN.
        """
        check_inner(self, other, 'div')
        out = np.zeros((self.rows, other.cols), dtype=np.result_type(self.dtype, other.dtype))
        with np.errstate(divide='ignore', invalid='ignore'):
            for k in range(self.cols):
                out += self._data[:, k, np.newaxis] / other._data[np.newaxis, k, :]
        return self._wrap(out)

    def dot(self, other: Matrix) -> Matrix:
        """Element-wise (Hadamard) product of equally shaped matrices."""
        check_same_shape(self, other, 'dot')
        return self._wrap(self._data * other._data)

    def scale(self, x: float) -> Matrix:
        return self._wrap(self._data * self.dtype.type(x))

    def scalar_add(self, x: float) -> Matrix:
        return self._wrap(self._data + self.dtype.type(x))

    def scalar_sub(self, x: float) -> Matrix:
        return self._wrap(self._data - self.dtype.type(x))

    def scalar_mul(self, x: float) -> Matrix:
        return self.scale(x)

    def scalar_div(self, x: float) -> Matrix:
        with np.errstate(divide='ignore', invalid='ignore'):
            return self._wrap(self._data / self.dtype.type(x))

    def neg(self) -> Matrix:
        return self._wrap(-self._data)

    def vec_mul(self, vector: Vector) -> Matrix:
        """Scale each column j by vector[j]. Requires vector.size == cols."""
        require(
            vector.size == self.cols,
            f"vec_mul: vector has {vector.size} elements, matrix has {self.cols} cols",
            DimensionError,
        )
        return self._wrap(self._data * vector.data[np.newaxis, :])

    def lerp(self, other: Matrix, weight: float) -> Matrix:
        """Linear interpolation self + weight * (other - self)."""
        check_same_shape(self, other, 'lerp')
        return self._wrap(self._data + weight * (other._data - self._data))

    # ═══════════════════════════════════════════════════════════════════
    # Shape utilities
    # ═══════════════════════════════════════════════════════════════════

    def transpose(self) -> Matrix:
        return self._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def slice(self, frows: int, trows: int, fcols: int, tcols: int) -> Matrix:
        """
        Copy of rows [frows, trows) and cols [fcols, tcols).

        Both ranges must lie inside the matrix and be non-decreasing.
        """
        require(
            0 <= frows <= trows <= self.rows and 0 <= fcols <= tcols <= self.cols,
            f"slice: rows [{frows}, {trows}) cols [{fcols}, {tcols}) "
            f"outside {self.rows}x{self.cols} matrix",
            DimensionError,
        )
        return self._wrap(self._data[frows:trows, fcols:tcols].copy())

    def append(self, other: Matrix, axis: int = 0) -> Matrix:
        """
        Concatenate two matrices.

        Args:
            other: Matrix to append
            axis: 0 places other to the right (rows must match),
                  1 places other below (cols must match)
        """
        require(axis in (0, 1), f"append: axis must be 0 or 1, got {axis}")
        if axis == 0:
            require(
                self.rows == other.rows,
                f"append: row counts differ ({self.rows} vs {other.rows})",
                DimensionError,
            )
            return self._wrap(np.hstack((self._data, other._data)))
        require(
            self.cols == other.cols,
            f"append: column counts differ ({self.cols} vs {other.cols})",
            DimensionError,
        )
        return self._wrap(np.vstack((self._data, other._data)))

    def flatten(self) -> Matrix:
        """1 x (rows * cols) copy in row-major order."""
        return self._wrap(self._data.reshape(1, -1).copy())

    def reshape(self, rows: int, cols: int) -> Matrix:
        require(
            rows * cols == self.size(),
            f"reshape: cannot reshape {self.rows}x{self.cols} into {rows}x{cols}",
            DimensionError,
        )
        return self._wrap(self._data.reshape(rows, cols).copy())

    def repeat(self, rrows: int, rcols: int) -> Matrix:
        """
        Block tiling: rrows x rcols copies of the matrix.

        out[i, j] = self[i % rows, j % cols]
        """
        require(
            rrows > 0 and rcols > 0,
            f"repeat: repetition counts must be positive, got ({rrows}, {rcols})",
        )
        return self._wrap(np.tile(self._data, (rrows, rcols)))

    def tile(self, rrows: int, rcols: int) -> Matrix:
        return self.repeat(rrows, rcols)

    def tril(self, k: int = 0) -> Matrix:
        """Lower triangle (j <= i + k) of a square matrix, zeros elsewhere."""
        check_square(self, 'tril')
        return self._wrap(np.tril(self._data, k))

    def triu(self, k: int = 0) -> Matrix:
        """Upper triangle (j >= i + k) of a square matrix, zeros elsewhere."""
        check_square(self, 'triu')
        return self._wrap(np.triu(self._data, k))

    def clip(self, low: float, high: float) -> Matrix:
        """Values below low become low, values above high become high."""
        a = self._data
        clipped = np.where(a < low, low, np.where(a > high, high, a))
        return self._wrap(clipped.astype(self.dtype, copy=False))

    def get(self, indices: Matrix) -> Matrix:
        """
        Gather by flat index.

        Returns a matrix shaped like indices whose elements are
        self.flat[int(indices[i, j])].
        """
        flat_index = indices._data.astype(np.int64)
        require(
            bool(np.all((flat_index >= 0) & (flat_index < self.size()))),
            f"get: indices must lie in [0, {self.size()})",
            DimensionError,
        )
        return self._wrap(self._data.reshape(-1)[flat_index])

    def sort(self) -> None:
        """Sort the flat row-major buffer ascending, in place."""
        ordered = np.sort(self._data, axis=None, kind='quicksort')
        self._data[...] = ordered.reshape(self.shape)

    def arg_sort(self) -> Matrix:
        """
        Flat indices that would sort the buffer, shaped like the matrix.

        Ties keep their original order.
        """
        order = np.argsort(self._data, axis=None, kind='stable')
        return self._wrap(order.astype(self.dtype).reshape(self.shape))

    def resize(self, rows: int, cols: int) -> None:
        """
        Reinterpret the flat buffer as rows x cols, in place.

        The first rows * cols elements of the row-major buffer are kept.
        Elements beyond the old size are zero.
        """
        require(
            rows >= 0 and cols >= 0,
            f"resize: shape must be non-negative, got {rows}x{cols}",
            DimensionError,
        )
        flat = np.zeros(rows * cols, dtype=self.dtype)
        kept = min(flat.size, self.size())
        flat[:kept] = self._data.reshape(-1)[:kept]
        self._data = flat.reshape(rows, cols)

    def resize_as(self, other: Matrix) -> None:
        self.resize(other.rows, other.cols)

    # ═══════════════════════════════════════════════════════════════════
    # Row and column operations (in place)
    # ═══════════════════════════════════════════════════════════════════

    def swap_rows(self, row1: int, row2: int) -> None:
        self._check_index(row1, 0, 'swap_rows')
        self._check_index(row2, 0, 'swap_rows')
        if row1 != row2:
            self._data[[row1, row2]] = self._data[[row2, row1]]

    def multiply_row(self, row: int, x: float) -> None:
        """row <- x * row"""
        self._check_index(row, 0, 'multiply_row')
        with np.errstate(invalid='ignore', over='ignore'):
            self._data[row] *= x

    def add_row(self, row1: int, row2: int, x: float) -> None:
        """row1 <- row1 + x * row2"""
        self._check_index(row1, 0, 'add_row')
        self._check_index(row2, 0, 'add_row')
        with np.errstate(invalid='ignore', over='ignore'):
            self._data[row1] += x * self._data[row2]

    def col_copy(self, col: int, dst: Matrix, dst_col: int) -> None:
        """Copy column col into column dst_col of dst."""
        self._check_index(0, col, 'col_copy')
        dst._check_index(0, dst_col, 'col_copy')
        require(
            dst.rows == self.rows,
            f"col_copy: destination has {dst.rows} rows, expected {self.rows}",
            DimensionError,
        )
        dst._data[:, dst_col] = self._data[:, col]

    def col_sub(self, col: int, subject: Matrix, scol: int, x: float) -> None:
        """column col <- column col - x * subject[:, scol]"""
        self._check_index(0, col, 'col_sub')
        subject._check_index(0, scol, 'col_sub')
        require(
            subject.rows == self.rows,
            f"col_sub: subject has {subject.rows} rows, expected {self.rows}",
            DimensionError,
        )
        self._data[:, col] -= x * subject._data[:, scol]

    def col_div(self, col: int, x: float) -> None:
        """column col <- column col / x; a zero divisor gives inf/NaN."""
        self._check_index(0, col, 'col_div')
        with np.errstate(divide='ignore', invalid='ignore'):
            self._data[:, col] /= x

    # ═══════════════════════════════════════════════════════════════════
    # Norms and scalar summaries
    # ═══════════════════════════════════════════════════════════════════

    def trace(self) -> float:
        check_square(self, 'trace')
        return float(np.trace(self._data))

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion.

        Closed forms for 1x1 and 2x2. The expansion is exponential in the
        side length and meant for small matrices.
        """
        check_square(self, 'determinant')
        return _cofactor_determinant(self._data)

    def log_determinant(self) -> float:
        """Natural log of the determinant (NaN when it is negative)."""
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.log(np.float64(self.determinant())))

    def frobenius(self) -> float:
        return math.sqrt(float(np.sum(self._data * self._data)))

    def l1_norm(self) -> float:
        """Maximum absolute column sum."""
        return float(np.max(np.sum(np.abs(self._data), axis=0)))

    def infinity_norm(self) -> float:
        """Maximum absolute row sum."""
        return float(np.max(np.sum(np.abs(self._data), axis=1)))

    def normalize(self) -> Matrix:
        """Divide by the Frobenius norm. The zero matrix is returned unchanged."""
        norm = self.frobenius()
        if norm == 0.0:
            return self.copy()
        return self._wrap(self._data / self.dtype.type(norm))

    def product(self) -> float:
        return float(np.prod(self._data))

    # ═══════════════════════════════════════════════════════════════════
    # Statistics
    # ═══════════════════════════════════════════════════════════════════

    def sum(self) -> float:
        return float(np.sum(self._data))

    def mean(self) -> float:
        return float(np.mean(self._data))

    def std(self) -> float:
        """Population standard deviation of all elements."""
        return float(np.std(self._data))

    def min(self) -> float:
        return float(np.min(self._data))

    def max(self) -> float:
        return float(np.max(self._data))

    def arg_min(self) -> int:
        """Flat index of the first occurrence of the minimum."""
        return int(np.argmin(self._data))

    def arg_max(self) -> int:
        """Flat index of the first occurrence of the maximum."""
        return int(np.argmax(self._data))

    def _reduce(self, fn, dim: int, op: str) -> Matrix:
        """
        Reduce along one dimension.

        dim=0 gives one value per row (rows x 1), dim=1 one value per
        column (1 x cols).
        """
        require(dim in (0, 1), f"{op}: dim must be 0 or 1, got {dim}")
        if dim == 0:
            values = fn(self._data, axis=1).reshape(self.rows, 1)
        else:
            values = fn(self._data, axis=0).reshape(1, self.cols)
        return self._wrap(values.astype(self.dtype, copy=False))

    def sum_vals(self, dim: int) -> Matrix:
        return self._reduce(np.sum, dim, 'sum_vals')

    def mean_vals(self, dim: int) -> Matrix:
        return self._reduce(np.mean, dim, 'mean_vals')

    def std_vals(self, dim: int) -> Matrix:
        """Population standard deviation per row (dim=0) or column (dim=1)."""
        return self._reduce(np.std, dim, 'std_vals')

    def min_vals(self, dim: int) -> Matrix:
        return self._reduce(np.min, dim, 'min_vals')

    def max_vals(self, dim: int) -> Matrix:
        return self._reduce(np.max, dim, 'max_vals')

    def arg_min_vals(self, dim: int) -> Matrix:
        """Column index of each row minimum (dim=0), or row index of each column minimum (dim=1)."""
        return self._reduce(np.argmin, dim, 'arg_min_vals')

    def arg_max_vals(self, dim: int) -> Matrix:
        """Column index of each row maximum (dim=0), or row index of each column maximum (dim=1)."""
        return self._reduce(np.argmax, dim, 'arg_max_vals')

    # ═══════════════════════════════════════════════════════════════════
    # Element-wise maps
    # ═══════════════════════════════════════════════════════════════════

    def _map(self, fn, *args) -> Matrix:
        return self._wrap(elementwise.apply(fn, self._data, *args))

    def fabs(self) -> Matrix:
        return self.abs()

    def reciprocal(self) -> Matrix:
        return self._map(np.reciprocal)

    def sign(self) -> Matrix:
        """-1, 0 or 1 per element."""
        return self._map(np.sign)

    def cum_sum(self) -> Matrix:
        """Running sum over the flat row-major buffer."""
        return self._wrap(np.cumsum(self._data, dtype=self.dtype).reshape(self.shape))

    def cum_product(self) -> Matrix:
        """Running product over the flat row-major buffer."""
        return self._wrap(np.cumprod(self._data, dtype=self.dtype).reshape(self.shape))

    def log_cumsum_exp(self) -> Matrix:
        """log(cum_sum(exp(x)))"""
        return self.exp().cum_sum().log()

    def log_gamma(self) -> Matrix:
        """Natural log of |Gamma(x)| per element."""
        return self._map(scalar.log_gamma)

    # ═══════════════════════════════════════════════════════════════════
    # Comparisons
    # ═══════════════════════════════════════════════════════════════════

    def _compare(self, other: Matrix, fn, op: str) -> Matrix:
        check_same_shape(self, other, op)
        return self._wrap(fn(self._data, other._data).astype(self.dtype))

    def equals(self, other: Matrix) -> Matrix:
        """1.0 where elements are equal, 0.0 elsewhere."""
        return self._compare(other, np.equal, 'equals')

    def less_than(self, other: Matrix) -> Matrix:
        return self._compare(other, np.less, 'less_than')

    def less_than_eq(self, other: Matrix) -> Matrix:
        return self._compare(other, np.less_equal, 'less_than_eq')

    def greater_than(self, other: Matrix) -> Matrix:
        return self._compare(other, np.greater, 'greater_than')

    def greater_than_eq(self, other: Matrix) -> Matrix:
        return self._compare(other, np.greater_equal, 'greater_than_eq')

    def all_close(self, other: Matrix) -> bool:
        """
        Approximate equality: |a - b| <= 1e-8 + 1e-5 |b| for every element.

        False when shapes differ.
        """
        if self.shape != other.shape:
            return False
        return bool(np.all(is_close(
            self._data, other._data, rtol=ALL_CLOSE.rtol, atol=ALL_CLOSE.atol,
        )))

    # ═══════════════════════════════════════════════════════════════════
    # Decompositions (see pydense.decomposition)
    # ═══════════════════════════════════════════════════════════════════

    def find_pivot(self, col: int, row: int) -> int:
        from pydense.decomposition.echelon import find_pivot
        return find_pivot(self, col, row)

    def row_echelon(self) -> Matrix:
        from pydense.decomposition.echelon import row_echelon
        return row_echelon(self)

    def rank(self) -> int:
        from pydense.decomposition.echelon import rank
        return rank(self)

    def inverse(self) -> Matrix:
        from pydense.decomposition.echelon import inverse
        return inverse(self)

    def solve(self, other: Matrix) -> Matrix:
        from pydense.decomposition.echelon import solve
        return solve(self, other)

    def qr_decomp(self) -> MatrixPair:
        from pydense.decomposition.qr import qr_decomp
        return qr_decomp(self)

    def lu_decomp(self) -> MatrixPair:
        from pydense.decomposition.lu import lu_decomp
        return lu_decomp(self)

    def cholesky_decomp(self) -> Matrix:
        from pydense.decomposition.cholesky import cholesky_decomp
        return cholesky_decomp(self)

    def qr_algorithm(self, **kwargs: Any) -> EigenSolution:
        from pydense.decomposition.eigen import qr_algorithm
        return qr_algorithm(self, **kwargs)

    def eigenvalues(self, **kwargs: Any) -> Vector:
        from pydense.decomposition.eigen import eigenvalues
        return eigenvalues(self, **kwargs)

    def eigenvectors(self, **kwargs: Any) -> Matrix:
        from pydense.decomposition.eigen import eigenvectors
        return eigenvectors(self, **kwargs)

    def svd(self, **kwargs: Any) -> SVDSolution:
        from pydense.decomposition.svd import svd
        return svd(self, **kwargs)

    # ═══════════════════════════════════════════════════════════════════
    # Python protocol
    # ═══════════════════════════════════════════════════════════════════

    def __len__(self) -> int:
        return self.rows

    def __iter__(self) -> Iterator[Vector]:
        return (self.get_row(i) for i in range(self.rows))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __add__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            return self.add(other)
        return self.scalar_add(other)

    def __radd__(self, other: float) -> Matrix:
        return self.scalar_add(other)

    def __sub__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            return self.sub(other)
        return self.scalar_sub(other)

    def __rsub__(self, other: float) -> Matrix:
        return self.neg().scalar_add(other)

    def __mul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            return self.dot(other)
        return self.scalar_mul(other)

    def __rmul__(self, other: float) -> Matrix:
        return self.scalar_mul(other)

    def __truediv__(self, other: float) -> Matrix:
        if isinstance(other, Matrix):
            return NotImplemented
        return self.scalar_div(other)

    def __matmul__(self, other: Matrix) -> Matrix:
        return self.mul(other)

    def __neg__(self) -> Matrix:
        return self.neg()

    def __repr__(self) -> str:
        body = np.array2string(self._data, precision=4, prefix='Matrix(')
        return f"Matrix({self.rows}x{self.cols}, {body})"

