"""Walk the chain of causes attached to an exception.

An exception's cause is its explicit ``__cause__`` (``raise ... from ...``)
or, failing that, the implicit ``__context__`` unless it was suppressed with
``raise ... from None``. This is the same chain the interpreter prints in a
traceback.
"""

from __future__ import annotations

from collections.abc import Iterator


def _cause_of(exc: BaseException) -> BaseException | None:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def get_inner_exceptions(exc: BaseException | None) -> Iterator[BaseException]:
    """Yield every nested cause of ``exc``, outermost first.

    ``exc`` itself is not yielded. Iteration stops at the first exception
    without a cause, or when the chain loops back on itself.
    """
    if exc is None:
        return
    seen = {id(exc)}
    inner = _cause_of(exc)
    while inner is not None and id(inner) not in seen:
        yield inner
        seen.add(id(inner))
        inner = _cause_of(inner)


def get_innermost_exception(exc: BaseException | None) -> BaseException | None:
    """Return the deepest cause of ``exc``, or ``exc`` itself if it has none."""
    innermost = exc
    for inner in get_inner_exceptions(exc):
        innermost = inner
    return innermost
