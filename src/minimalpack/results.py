"""Run callables without letting their failures escape.

`try_result` is the primitive: it runs a callable and returns a tagged
`Result`, either ``Ok(value)`` or ``Err(error)``. The other helpers are
conveniences built on it that discard the error at the caller's request:

- `try_call` returns the value or a default;
- `try_get` returns a ``(succeeded, value_or_default)`` pair;
- `try_action` runs a side-effecting callable, optionally followed by a
  fallback, and reports success.

Warning:
    These helpers catch *every* ``Exception``, including ones that usually
    signal programming errors (``TypeError``, ``AttributeError``...). Only the
    helper's return value tells the caller something went wrong; the cause is
    kept solely in ``Err.error`` and in a DEBUG log record. Interpreter
    control-flow exceptions (``KeyboardInterrupt``, ``SystemExit``) are not
    caught.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Literal, ParamSpec, TypeVar, overload

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")
D = TypeVar("D")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome holding the callable's return value."""

    value: T

    @property
    def is_ok(self) -> Literal[True]:
        """Always True."""
        return True

    @property
    def is_err(self) -> Literal[False]:
        """Always False."""
        return False

    def unwrap_or(self, default: object) -> T:  # pylint: disable=unused-argument
        """Return the held value."""
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome holding the exception that was raised."""

    error: Exception

    @property
    def is_ok(self) -> Literal[False]:
        """Always False."""
        return False

    @property
    def is_err(self) -> Literal[True]:
        """Always True."""
        return True

    def unwrap_or(self, default: D) -> D:
        """Return ``default``."""
        return default


type Result[T] = Ok[T] | Err


def try_result(func: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Result[T]:
    """Call ``func(*args, **kwargs)`` and capture the outcome.

    Returns:
        ``Ok(return_value)`` on success, ``Err(exception)`` if ``func`` raised
        any ``Exception``.
    """
    try:
        return Ok(func(*args, **kwargs))
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.debug("Suppressed %s raised by %r", type(e).__name__, func, exc_info=e)
        return Err(e)


@overload
def try_call(func: Callable[..., T], *args: Any, **kwargs: Any) -> T | None: ...
@overload
def try_call(
    func: Callable[..., T], *args: Any, default: D, **kwargs: Any
) -> T | D: ...
def try_call(
    func: Callable[..., Any], *args: Any, default: Any = None, **kwargs: Any
) -> Any:
    """Return ``func(*args, **kwargs)``, or ``default`` if it raised.

    Example:
        ``try_call(lambda: 1 / 0, default=-1)`` returns ``-1``.
    """
    return try_result(func, *args, **kwargs).unwrap_or(default)


def try_get(
    func: Callable[..., T], *args: Any, default: D | None = None, **kwargs: Any
) -> tuple[bool, T | D | None]:
    """Call ``func`` and report success alongside the result.

    Returns:
        ``(True, return_value)`` on success, ``(False, default)`` otherwise.
    """
    result = try_result(func, *args, **kwargs)
    return result.is_ok, result.unwrap_or(default)


def try_action(
    action: Callable[..., Any],
    *args: Any,
    fallback: Callable[..., Any] | None = None,
    **kwargs: Any,
) -> bool:
    """Run a side-effecting callable, swallowing any failure.

    Args:
        action: Callable run with ``*args`` and ``**kwargs``; its return value
            is ignored.
        fallback: Called with the same arguments when ``action`` raised.
            Exceptions raised by the fallback itself propagate.

    Returns:
        True if ``action`` completed, False if it raised.
    """
    if try_result(action, *args, **kwargs).is_ok:
        return True
    if fallback is not None:
        fallback(*args, **kwargs)
    return False
