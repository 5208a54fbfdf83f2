"""
Wall-clock bookkeeping for the iterative kernels.

The QR algorithm and the SVD split each iteration into named phases
(qr_left / qr_right, qr / recombine) and report the accumulated time per
phase in Result.timing, next to 'total_seconds'.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Overall stopwatch plus per-phase accumulators.

    A phase entered once per iteration adds up across iterations.

        timer = Timer()
        timer.start()
        while not converged:
            with timer.section('qr_left'):
                ...
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'qr_left': ...}
    """

    def __init__(self):
        self._phases: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()
        self._total = None

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the with-block to phase name."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + (time.perf_counter() - began)

    def result(self) -> dict[str, float]:
        """
        'total_seconds' followed by one key per phase.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._phases}


@contextmanager
def timed() -> Iterator[Timer]:
    """Time a with-block: the timer is started on entry and stopped on exit."""
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
