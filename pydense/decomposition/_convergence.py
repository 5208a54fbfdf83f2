"""
Non-convergence reporting for the iterative kernels.
"""

import warnings

from pydense.core.exceptions import ConvergenceError


def report(
    method: str,
    converged: bool,
    iterations: int,
    change: float,
    threshold: float,
    strict: bool,
) -> tuple[str, ...]:
    """
    Warn (or raise, when strict) if an iterative kernel stopped early.

    Returns:
        The warning messages to record on the Result.
    """
    if converged:
        return ()

    message = (
        f"{method} did not converge after {iterations} iterations "
        f"(off-diagonal {change:.3e}, threshold {threshold:.3e})"
    )
    if strict:
        raise ConvergenceError(
            message,
            iterations=iterations,
            final_change=change,
            reason='max_iterations',
            threshold=threshold,
        )
    # stacklevel 3 points at the caller of the public kernel
    warnings.warn(message, RuntimeWarning, stacklevel=3)
    return (message,)
