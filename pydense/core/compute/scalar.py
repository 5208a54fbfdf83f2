"""
Scalar special functions and angle conversions.

Each function accepts a float or an array and follows numpy broadcasting,
so Matrix and Vector maps can reuse them element-wise.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import special

Number = float | NDArray[np.floating[Any]]


def radian_degrees(x: Number) -> Number:
    """Radians to degrees."""
    return x * 180.0 / np.pi


def degree_radians(x: Number) -> Number:
    """Degrees to radians."""
    return x * np.pi / 180.0


def gamma(x: Number) -> Number:
    """
    Gamma function.

    Overflows to inf above x ~ 171.62; poles at zero and the negative
    integers give inf or NaN instead of raising.
    """
    return special.gamma(x)


def log_gamma(x: Number) -> Number:
    """Natural log of |Gamma(x)|, finite well past the overflow of gamma()."""
    return special.gammaln(x)
