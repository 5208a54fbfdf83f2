"""
Input validation utilities for PyDense.

Two kinds of checks live here:
    - Conversion checks (check_array, check_ndim) turn user data into
      numpy arrays and raise ValidationError when that is impossible.
    - Shape checks (check_same_size, check_square, ...) guard operation
      preconditions. They go through pydense.core.preconditions.require,
      so they raise DimensionError after notifying the failure handler.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray
from typing import Any

from pydense.core.exceptions import DimensionError, ValidationError
from pydense.core.preconditions import require


def check_array(
    array: ArrayLike,
    name: str,
    dtype: DTypeLike = np.float64,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a fresh numpy array.

    Accepts any array-like and converts to a numpy array of the requested
    floating dtype. The result never shares memory with the input.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Target floating dtype

    Returns:
        numpy.ndarray with the requested dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.iscomplexobj(result):
        raise ValidationError(f"{name}: complex values are not supported")

    return np.array(result, dtype=dtype, copy=True)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        ValidationError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise ValidationError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_length(values: ArrayLike, expected: int, name: str) -> None:
    """
    Verify a flat sequence holds exactly the expected number of values.

    Raises:
        DimensionError: If the length differs
    """
    n = int(np.size(values))
    require(
        n == expected,
        f"{name}: expected {expected} values, got {n}",
        DimensionError,
    )


def check_same_size(a, b, op: str) -> None:
    """
    Verify two vectors have the same size.

    Raises:
        DimensionError: If the sizes differ
    """
    require(
        a.size == b.size,
        f"{op}: vector sizes differ ({a.size} vs {b.size})",
        DimensionError,
    )


def check_same_shape(a, b, op: str) -> None:
    """
    Verify two matrices have identical shapes.

    Raises:
        DimensionError: If the shapes differ
    """
    require(
        a.shape == b.shape,
        f"{op}: shapes differ ({a.rows}x{a.cols} vs {b.rows}x{b.cols})",
        DimensionError,
    )


def check_broadcastable(a, b, op: str) -> None:
    """
    Verify two matrices can be broadcast together.

    Each dimension must match, or be 1 on one of the operands.

    Raises:
        DimensionError: If a dimension is incompatible
    """
    require(
        a.rows == b.rows or a.rows == 1 or b.rows == 1,
        f"{op}: cannot broadcast rows ({a.rows} vs {b.rows})",
        DimensionError,
    )
    require(
        a.cols == b.cols or a.cols == 1 or b.cols == 1,
        f"{op}: cannot broadcast cols ({a.cols} vs {b.cols})",
        DimensionError,
    )


def check_inner(a, b, op: str) -> None:
    """
    Verify the inner dimensions of a matrix product agree.

    Raises:
        DimensionError: If a.cols != b.rows
    """
    require(
        a.cols == b.rows,
        f"{op}: inner dimensions differ ({a.rows}x{a.cols} by {b.rows}x{b.cols})",
        DimensionError,
    )


def check_square(a, op: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If rows != cols
    """
    require(
        a.rows == a.cols,
        f"{op}: requires a square matrix, got {a.rows}x{a.cols}",
        DimensionError,
    )
