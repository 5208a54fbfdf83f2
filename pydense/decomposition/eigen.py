"""
Eigenvalues by the unshifted QR algorithm, eigenvectors by null space.

The QR algorithm repeats A <- R Q, which drives a matrix with real
eigenvalues of distinct magnitude towards upper-triangular form. The
eigenvalues are read off the diagonal. Each eigenvector is then the
right singular vector of A - lambda I belonging to its smallest singular
value.

Complex eigenvalues never triangularise; the iteration stops at the cap
and a RuntimeWarning is emitted.
"""

import numpy as np

from pydense.core.compute.timing import Timer
from pydense.core.compute.tolerances import QR_ALGORITHM
from pydense.core.result import Result
from pydense.core.validation import check_square
from pydense.decomposition import _convergence
from pydense.decomposition.qr import orthonormalize
from pydense.decomposition.solution import EigenParams, EigenSolution
from pydense.decomposition.svd import svd
from pydense.matrix.matrix import Matrix
from pydense.vector.vector import Vector


def _lower_magnitude(a: Matrix) -> float:
    """max |a[i, j]| over the strict lower triangle."""
    if a.rows < 2:
        return 0.0
    return float(np.max(np.abs(np.tril(a.data, -1))))


def qr_algorithm(
    matrix: Matrix,
    max_iter: int | None = None,
    tol: float | None = None,
    strict: bool = False,
) -> EigenSolution:
    """
    Iterate A <- R Q until the strict lower triangle vanishes.

    Parameters
    ----------
    matrix : Matrix
        Square input.
    max_iter : int, optional
        Iteration cap. Default QR_ALGORITHM.max_iter (500).
    tol : float, optional
        Stop once max |strict lower triangle| < tol. Default 1e-10.
    strict : bool
        Raise ConvergenceError instead of warning when the cap is reached.

    Returns
    -------
    EigenSolution
        Eigenvalues (the diagonal), final iterate, iteration count and
        convergence flag.
    """
    check_square(matrix, 'qr_algorithm')
    max_iter = QR_ALGORITHM.max_iter if max_iter is None else max_iter
    tol = QR_ALGORITHM.tol if tol is None else tol

    timer = Timer()
    timer.start()

    a = matrix.copy()
    change = _lower_magnitude(a)
    converged = change < tol
    iterations = 0

    while not converged and iterations < max_iter:
        with timer.section('qr'):
            q, r = orthonormalize(a)
        with timer.section('recombine'):
            a = r.mul(q)
        iterations += 1
        change = _lower_magnitude(a)
        converged = change < tol

    timer.stop()

    warn_list = _convergence.report(
        'qr_algorithm', converged, iterations, change, tol, strict,
    )

    params = EigenParams(eigenvalues=a.diagonal(0), triangular=a)
    result = Result(
        params=params,
        info={
            'converged': converged,
            'iterations': iterations,
            'off_diagonal': change,
            'max_iter': max_iter,
            'tol': tol,
        },
        timing=timer.result(),
        method='qr_algorithm',
        warnings=warn_list,
    )
    return EigenSolution(_result=result)


def eigenvalues(
    matrix: Matrix,
    max_iter: int | None = None,
    tol: float | None = None,
    strict: bool = False,
) -> Vector:
    """Diagonal of the converged QR algorithm iterate."""
    return qr_algorithm(matrix, max_iter=max_iter, tol=tol, strict=strict).eigenvalues


def eigenvectors(
    matrix: Matrix,
    max_iter: int | None = None,
    tol: float | None = None,
    strict: bool = False,
) -> Matrix:
    """
    Unit eigenvectors as the columns of a matrix.

    Column k belongs to eigenvalues(matrix)[k]. It is the right singular
    vector of A - lambda_k I with the smallest singular value.

    Parameters
    ----------
    matrix : Matrix
        Square input.
    max_iter, tol, strict
        Passed to qr_algorithm(); strict also applies to each SVD.
    """
    values = eigenvalues(matrix, max_iter=max_iter, tol=tol, strict=strict)
    n = matrix.rows
    identity = Matrix.identity(n, dtype=matrix.dtype)
    vectors = np.zeros((n, n), dtype=matrix.dtype)

    for k, lam in enumerate(values):
        shifted = matrix.sub(identity.scale(lam))
        decomposition = svd(shifted, strict=strict)
        smallest = int(np.argmin(decomposition.singular.data))
        vectors[:, k] = decomposition.right.get_col(smallest).normalize().data

    return Matrix._wrap(vectors)
