"""
Shared compute infrastructure for PyDense.

Numeric configuration that every kernel reads: tolerance tiers and
iteration caps, precision (fp64 / fp32), timing, and the uniform random
source behind the random constructors.

Submodules:
    tolerances: ALL_CLOSE, PIVOT_EPSILON, QR_ALGORITHM, SVD limits
    precision: dtype selection and wire format codes
    timing: Execution timing utilities
    random: Seeded uniform source
    scalar: gamma, log_gamma and angle conversions
"""

from pydense.core.compute.timing import Timer, timed
from pydense.core.compute.random import RandomSource
from pydense.core.compute.precision import resolve_dtype
from pydense.core.compute.scalar import (
    degree_radians,
    gamma,
    log_gamma,
    radian_degrees,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Random
    "RandomSource",
    # Precision
    "resolve_dtype",
    # Scalar functions
    "gamma",
    "log_gamma",
    "radian_degrees",
    "degree_radians",
]
