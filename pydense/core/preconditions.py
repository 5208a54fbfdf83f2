"""
Precondition checks with a pluggable failure handler.

Every fatal check in PyDense goes through require(). When the condition
fails, require() builds the exception, hands it to the active failure
handler (if one is installed) and then raises it. Handlers observe the
failure, typically to log it; they cannot cancel it.

The handler lives in a ContextVar rather than in module state, so it is
scoped to the code running inside the failure_handler() block (and to
the thread / task that installed it).

Usage:
    from pydense.core.preconditions import failure_handler

    seen = []
    with failure_handler(seen.append):
        try:
            a.add(b)          # shapes differ
        except DimensionError:
            pass
    # seen[0] is the DimensionError, with filename/lineno of the call site
"""

import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Iterator

from pydense.core.exceptions import PreconditionError

FailureHandler = Callable[[PreconditionError], None]

_handler: ContextVar[FailureHandler | None] = ContextVar(
    'pydense_failure_handler', default=None
)


def _call_site() -> tuple[str | None, int | None]:
    """File and line of the first frame outside the pydense package."""
    frame = sys._getframe(2)
    while frame is not None:
        module = frame.f_globals.get('__name__', '')
        if module != 'pydense' and not module.startswith('pydense.'):
            return frame.f_code.co_filename, frame.f_lineno
        frame = frame.f_back
    return None, None


def require(
    condition: bool,
    message: str,
    error: type[PreconditionError] = PreconditionError,
    **attributes: Any,
) -> None:
    """
    Assert a precondition.

    Args:
        condition: The precondition; nothing happens when it holds
        message: Error message, with actual vs expected values
        error: PreconditionError subclass to raise
        **attributes: Extra keyword arguments for the error constructor

    Raises:
        PreconditionError: (or the requested subclass) if condition is False
    """
    if condition:
        return

    filename, lineno = _call_site()
    exc = error(message, filename=filename, lineno=lineno, **attributes)

    handler = _handler.get()
    if handler is not None:
        handler(exc)

    raise exc


def set_failure_handler(handler: FailureHandler | None):
    """
    Install a failure handler in the current context.

    Returns:
        Token that restores the previous handler via reset_failure_handler()
    """
    return _handler.set(handler)


def reset_failure_handler(token) -> None:
    """Restore the handler that was active before set_failure_handler()."""
    _handler.reset(token)


def has_failure_handler() -> bool:
    """Check whether a failure handler is active in the current context."""
    return _handler.get() is not None


@contextmanager
def failure_handler(handler: FailureHandler | None) -> Iterator[None]:
    """
    Scope a failure handler to a block.

    Args:
        handler: Called with each PreconditionError before it is raised.
                 None disables any outer handler inside the block.
    """
    token = _handler.set(handler)
    try:
        yield
    finally:
        _handler.reset(token)
