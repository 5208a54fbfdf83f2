"""
Core infrastructure for PyDense.

Shared abstractions used by the vector, matrix, decomposition, tensor and
serialization sub-packages.

Key components:
    exceptions: Exception hierarchy
    preconditions: require() and the scoped failure handler
    validation: Input converters and shape checks
    result: Generic Result[P] envelope
    compute: Tolerances, precision, timing, random source
"""

from pydense.core.result import Result
from pydense.core.exceptions import (
    PyDenseError,
    PreconditionError,
    DimensionError,
    SingularMatrixError,
    NotSymmetricError,
    ValidationError,
    ConvergenceError,
)
from pydense.core.preconditions import (
    require,
    failure_handler,
    has_failure_handler,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyDenseError",
    "PreconditionError",
    "DimensionError",
    "SingularMatrixError",
    "NotSymmetricError",
    "ValidationError",
    "ConvergenceError",
    # Preconditions
    "require",
    "failure_handler",
    "has_failure_handler",
]
