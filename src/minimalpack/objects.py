"""Helpers applicable to any object: null checks, membership and deep copies."""

from __future__ import annotations

import copy
import logging
import pickle
from collections.abc import Callable
from typing import Any, TypeVar

from .errors import DeepCopyError, InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def is_null(obj: object) -> bool:
    """Return True if ``obj`` is None."""
    return obj is None


def is_not_null(obj: object) -> bool:
    """Return True if ``obj`` is not None."""
    return obj is not None


def if_not_null(obj: T | None, action: Callable[[T], Any]) -> None:
    """Call ``action(obj)`` only when ``obj`` is not None."""
    if obj is not None:
        action(obj)


def if_not_null_then(
    obj: T | None, func: Callable[[T], R], default: R | None = None
) -> R | None:
    """Return ``func(obj)``, or ``default`` when ``obj`` is None."""
    return func(obj) if obj is not None else default


def is_in(value: T, *candidates: T) -> bool:
    """Return True if ``value`` equals any of ``candidates``.

    Raises:
        InvalidArgumentError: If ``value`` is None; absence cannot be tested
            for membership.
    """
    if value is None:
        raise InvalidArgumentError("value", "must not be None")
    return value in candidates


def deep_copy(obj: T) -> T:
    """Return a fully independent duplicate of the object graph rooted at ``obj``.

    The graph is walked once with a memo keyed by the identity of every
    original object, so the copy keeps the graph's shape:

    - two references to one sub-object in the original point to one shared
      sub-object in the copy;
    - cycles are reproduced instead of recursing forever.

    The walk recurses once per nesting level, so graphs nested deeper than
    the interpreter recursion limit (long linked chains) cannot be copied.

    Classes can customize copying with ``__deepcopy__`` or the pickle
    protocol (``__reduce__``/``__getstate__``), as with `copy.deepcopy`.

    Raises:
        DeepCopyError: If some object in the graph cannot be duplicated
            (locks, open files, generators, sockets and the like). The original
            error is chained as ``__cause__``. Also raised, chained to the
            `RecursionError`, when the graph is nested too deeply.
    """
    try:
        return copy.deepcopy(obj)
    except (TypeError, RecursionError, copy.Error, pickle.PicklingError) as e:
        logger.debug("Deep copy of %s failed: %s", type(obj).__name__, e)
        raise DeepCopyError(type(obj).__name__) from e
