"""
Numerical precision constants and utilities.

PyDense numbers are IEEE-754 doubles by default. Single precision is the
documented alternative: pass dtype='fp32' (or np.float32) to any
constructor. Both ends of a serialized stream must agree on it.
"""

import numpy as np
from numpy.typing import DTypeLike, NDArray
from typing import Any

from pydense.core.exceptions import ValidationError

DEFAULT_DTYPE = np.dtype(np.float64)

_PRECISIONS = {
    'fp64': np.dtype(np.float64),
    'fp32': np.dtype(np.float32),
}

# struct format characters for each supported dtype
_STRUCT_CODES = {
    np.dtype(np.float64): 'd',
    np.dtype(np.float32): 'f',
}


def resolve_dtype(dtype: DTypeLike | str | None = None) -> np.dtype:
    """
    Map a precision name or dtype to a supported numpy dtype.

    Args:
        dtype: 'fp64', 'fp32', a numpy floating dtype, or None (default)

    Returns:
        np.dtype('float64') or np.dtype('float32')

    Raises:
        ValidationError: If the precision is not supported
    """
    if dtype is None:
        return DEFAULT_DTYPE
    if isinstance(dtype, str) and dtype in _PRECISIONS:
        return _PRECISIONS[dtype]
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: unknown precision {dtype!r}") from e
    if resolved not in _STRUCT_CODES:
        raise ValidationError(
            f"dtype: unsupported precision {resolved}, expected float64 or float32"
        )
    return resolved


def struct_code(dtype: DTypeLike) -> str:
    """
    struct format character for a supported dtype ('d' or 'f').

    The binary codec builds its wire dtype from this code.
    """
    return _STRUCT_CODES[resolve_dtype(dtype)]


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    rtol: float,
    atol: float,
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Note the asymmetry: b is the reference value.

    Args:
        a: First value(s)
        b: Reference value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Boolean or boolean array indicating closeness
    """
    return np.abs(a - b) <= atol + rtol * np.abs(b)
