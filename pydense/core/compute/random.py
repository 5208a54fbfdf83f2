"""
Uniform random source for the random constructors.

Seed convention:
    0 or None  -> seed from OS entropy (a fresh stream every call)
    nonzero    -> deterministic reseed; the same seed gives the same values
"""

import numpy as np
from numpy.typing import DTypeLike, NDArray
from typing import Any

from pydense.core.preconditions import require


class RandomSource:
    """
    Uniform generator over [0, 1).

    Wraps numpy.random.Generator (PCG64) so every random constructor in
    PyDense draws through a single uniform() contract.
    """

    def __init__(self, seed: int | None = 0):
        self._seed = seed
        self._rng = np.random.default_rng(None if not seed else seed)

    @property
    def seed(self) -> int | None:
        """Seed the source was created with (0/None means entropy)."""
        return self._seed

    @property
    def deterministic(self) -> bool:
        return bool(self._seed)

    def uniform(self) -> float:
        """One value in [0, 1)."""
        return float(self._rng.random())

    def uniform_array(
        self,
        n: int,
        dtype: DTypeLike = np.float64,
    ) -> NDArray[np.floating[Any]]:
        """n values in [0, 1)."""
        return self._rng.random(n).astype(dtype, copy=False)

    def bounded_array(
        self,
        n: int,
        low: float,
        high: float,
        dtype: DTypeLike = np.float64,
    ) -> NDArray[np.floating[Any]]:
        """n values in [low, high). Requires low < high."""
        require(low < high, f"random bound: expected min < max, got [{low}, {high})")
        return (low + (high - low) * self._rng.random(n)).astype(dtype, copy=False)
