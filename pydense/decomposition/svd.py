"""
Singular value decomposition by alternating QR factorisations.

Each iteration factors the working matrix S and then its transpose:

    S = Q1 R1        S <- R1        U <- U Q1
    S^T = Q2 R2      S <- R2^T      V <- V Q2

so that A = U S V^T holds throughout while S converges to a diagonal
matrix. The singular values are the diagonal of the converged S.

Rectangular input is handled as a thin SVD. A tall matrix (rows >= cols)
is iterated directly; a wide matrix decomposes its transpose and swaps
the roles of U and V.
"""

import numpy as np

from pydense.core.compute.timing import Timer
from pydense.core.compute.tolerances import SVD
from pydense.core.result import Result
from pydense.decomposition import _convergence
from pydense.decomposition.qr import orthonormalize
from pydense.decomposition.solution import SVDParams, SVDSolution
from pydense.matrix.matrix import Matrix
from pydense.vector.vector import Vector


def _off_diagonal(s: Matrix) -> float:
    """Frobenius norm of s with its main diagonal removed."""
    off = np.triu(s.data, 1) + np.tril(s.data, -1)
    return float(np.sqrt(np.sum(off * off)))


def _iterate(
    matrix: Matrix,
    max_iter: int,
    tol: float,
    timer: Timer,
) -> tuple[Matrix, Matrix, Matrix, int, float, bool]:
    """Alternating QR on a tall matrix. Returns U, S, V, iterations, change, converged."""
    m, n = matrix.shape
    left = Matrix.identity(m, dtype=matrix.dtype)
    right = Matrix.identity(n, dtype=matrix.dtype)
    work = matrix.copy()

    threshold = tol * matrix.frobenius()
    change = _off_diagonal(work) if m == n else float('inf')
    converged = change <= threshold
    iterations = 0

    while not converged and iterations < max_iter:
        with timer.section('qr_left'):
            q1, r1 = orthonormalize(work)
            work = r1
            left = left.mul(q1)
        with timer.section('qr_right'):
            q2, r2 = orthonormalize(work.transpose())
            work = r2.transpose()
            right = right.mul(q2)
        iterations += 1
        change = _off_diagonal(work)
        converged = change <= threshold

    if m != n and iterations == 0:
        # a tall input needs one pass to become square
        q1, r1 = orthonormalize(work)
        work, left = r1, left.mul(q1)

    return left, work, right, iterations, change, converged


def svd(
    matrix: Matrix,
    max_iter: int | None = None,
    tol: float | None = None,
    strict: bool = False,
) -> SVDSolution:
    """
    Thin singular value decomposition A = U diag(S) V^T.

    Parameters
    ----------
    matrix : Matrix
        Any m x n input.
    max_iter : int, optional
        Iteration cap. Default SVD.max_iter (100).
    tol : float, optional
        Stop once ||offdiag(S)||_F <= tol * ||A||_F. Default 1e-10.
    strict : bool
        Raise ConvergenceError instead of warning when the cap is reached.

    Returns
    -------
    SVDSolution
        U (m x k), S (k values, descending), V (n x k) with k = min(m, n).
        V is returned as is, not transposed.

    Examples
    --------
    >>> u, s, v = Matrix([[3.0, 0.0], [4.0, 5.0]]).svd()
    >>> u.vec_mul(s).mul(v.transpose()).all_close(Matrix([[3.0, 0.0], [4.0, 5.0]]))
    True
    """
    max_iter = SVD.max_iter if max_iter is None else max_iter
    tol = SVD.tol if tol is None else tol

    timer = Timer()
    timer.start()

    wide = matrix.rows < matrix.cols
    source = matrix.transpose() if wide else matrix
    left, work, right, iterations, change, converged = _iterate(
        source, max_iter, tol, timer,
    )
    if wide:
        left, right = right, left

    with timer.section('sort'):
        singular = np.diagonal(work.data).copy()
        # flip the vectors of any negative diagonal entry so S >= 0
        signs = np.where(singular < 0, -1.0, 1.0).astype(matrix.dtype)
        singular = np.abs(singular)
        order = np.argsort(-singular, kind='stable')
        u = left.data * signs[np.newaxis, :]

        left = Matrix._wrap(u[:, order])
        right = Matrix._wrap(right.data[:, order])
        singular = Vector._wrap(singular[order])

    timer.stop()

    warn_list = _convergence.report(
        'svd', converged, iterations, change, tol * matrix.frobenius(), strict,
    )

    params = SVDParams(left=left, singular=singular, right=right)
    result = Result(
        params=params,
        info={
            'converged': converged,
            'iterations': iterations,
            'off_diagonal': change,
            'max_iter': max_iter,
            'tol': tol,
            'transposed': wide,
        },
        timing=timer.result(),
        method='alternating_qr_svd',
        warnings=warn_list,
    )
    return SVDSolution(_result=result)
