"""
Element-wise transcendental maps shared by Vector and Matrix.

Each map allocates a new container of the same shape and dtype. Domain
errors follow IEEE-754 (log of a negative number is NaN, 1/0 is inf) and
never raise; numpy's floating-point warnings are silenced for the
duration of the map.
"""

from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray


def apply(
    fn: Callable[..., NDArray[np.floating[Any]]],
    values: NDArray[np.floating[Any]],
    *args: Any,
) -> NDArray[np.floating[Any]]:
    """Apply fn to values with floating-point errors silenced."""
    with np.errstate(all='ignore'):
        out = fn(values, *args)
    return np.asarray(out, dtype=values.dtype)


def rsqrt(values: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    return 1.0 / np.sqrt(values)


class ElementwiseMixin:
    """
    Trigonometric, hyperbolic, exponential and logarithmic maps.

    Subclasses provide _map(fn, *args), which applies fn to the raw
    buffer and wraps the result in a new instance of the subclass.
    """

    __slots__ = ()

    def _map(self, fn, *args):
        raise NotImplementedError

    # --- Exponential / logarithmic ---

    def exp(self):
        return self._map(np.exp)

    def log(self):
        """Natural logarithm."""
        return self._map(np.log)

    def log10(self):
        return self._map(np.log10)

    def log2(self):
        return self._map(np.log2)

    def log1p(self):
        """log(1 + x), accurate for small x."""
        return self._map(np.log1p)

    def pow(self, exponent: float):
        return self._map(np.power, exponent)

    def sqrt(self):
        return self._map(np.sqrt)

    def rsqrt(self):
        """Reciprocal square root, 1 / sqrt(x)."""
        return self._map(rsqrt)

    def abs(self):
        return self._map(np.abs)

    # --- Trigonometric ---

    def sin(self):
        return self._map(np.sin)

    def cos(self):
        return self._map(np.cos)

    def tan(self):
        return self._map(np.tan)

    def arc_sin(self):
        return self._map(np.arcsin)

    def arc_cos(self):
        return self._map(np.arccos)

    def arc_tan(self):
        return self._map(np.arctan)

    # --- Hyperbolic ---

    def sinh(self):
        return self._map(np.sinh)

    def cosh(self):
        return self._map(np.cosh)

    def tanh(self):
        return self._map(np.tanh)

    def arc_sinh(self):
        return self._map(np.arcsinh)

    def arc_cosh(self):
        return self._map(np.arccosh)

    def arc_tanh(self):
        return self._map(np.arctanh)
