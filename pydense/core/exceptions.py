"""
Exception hierarchy for PyDense.

All exceptions inherit from PyDenseError to allow catching any
library-specific error.

Two failure tiers exist and they are deliberately distinct:
    - PreconditionError and its subclasses signal programmer errors
      (shape mismatches, inverting a singular matrix, decomposing a
      non-square matrix). They are raised through
      pydense.core.preconditions.require so an installed failure handler
      sees them first. They are not meant to be recovered from.
    - Resource failures (tensor construction) are not exceptions at all;
      they surface as a None result.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDenseError(Exception):
    """Base exception for all PyDense errors."""
    pass


class PreconditionError(PyDenseError):
    """
    A caller violated an operation's precondition.

    Attributes:
        filename: Source file of the failing call site, if known
        lineno: Line number of the failing call site, if known
    """

    def __init__(
        self,
        message: str,
        filename: str | None = None,
        lineno: int | None = None,
    ):
        super().__init__(message)
        self.filename = filename
        self.lineno = lineno


class DimensionError(PreconditionError):
    """
    Operand shapes are incorrect or inconsistent.

    Raised when vector sizes differ, matrix shapes cannot be combined,
    or an index range falls outside a matrix.
    """
    pass


class SingularMatrixError(PreconditionError):
    """
    Matrix is singular.

    Raised when an operation requires a nonzero determinant (inverse,
    Gram-Schmidt QR) and the matrix does not have one.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was computed, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        filename: str | None = None,
        lineno: int | None = None,
    ):
        super().__init__(message, filename=filename, lineno=lineno)
        self.matrix_name = matrix_name
        self.determinant = determinant


class NotSymmetricError(PreconditionError):
    """
    Matrix is not symmetric.

    Raised by the Cholesky decomposition, which only accepts matrices
    that are all-close to their own transpose.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        max_asymmetry: max |A - A^T|, if computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        max_asymmetry: float | None = None,
        filename: str | None = None,
        lineno: int | None = None,
    ):
        super().__init__(message, filename=filename, lineno=lineno)
        self.matrix_name = matrix_name
        self.max_asymmetry = max_asymmetry


class ValidationError(PyDenseError):
    """
    Input validation failed.

    Raised when user-provided data cannot be turned into a vector or
    matrix, or when a byte stream does not hold a well-formed encoding.
    """
    pass


class ConvergenceError(PyDenseError):
    """
    Iterative algorithm failed to converge.

    The QR algorithm and the SVD only warn by default. This is raised
    instead when the caller asks for strict=True.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final residual (off-diagonal measure)
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
