"""
PyDense: dense linear algebra on numpy buffers.

Matrix, vector and tensor primitives with arithmetic, norms, statistics,
element-wise maps, and hand-written decompositions (Gram-Schmidt QR,
Doolittle LU, Cholesky, Gauss-Jordan inverse, QR-algorithm eigenvalues,
alternating-QR SVD).

Submodules:
    vector: Vector kernel
    matrix: Matrix kernel
    decomposition: QR, LU, Cholesky, echelon/inverse, eigen, SVD
    tensor: Layered tensor aggregator
    serialization: Binary wire format
"""

__version__ = "0.1.0"

from pydense.vector import Vector
from pydense.matrix import Matrix
from pydense.tensor import Tensor
from pydense import decomposition
from pydense import serialization
from pydense.core import (
    PyDenseError,
    PreconditionError,
    DimensionError,
    SingularMatrixError,
    NotSymmetricError,
    ValidationError,
    ConvergenceError,
    failure_handler,
)

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "Tensor",
    "decomposition",
    "serialization",
    "PyDenseError",
    "PreconditionError",
    "DimensionError",
    "SingularMatrixError",
    "NotSymmetricError",
    "ValidationError",
    "ConvergenceError",
    "failure_handler",
]
