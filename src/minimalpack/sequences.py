"""Helpers for iterables, most of them lazy.

Functions returning a `LazySequence` do no work until iterated. A lazy
sequence re-runs its composition on every ``iter()`` call, so it can be
iterated again as long as the underlying source can: wrapping a list gives a
restartable sequence, wrapping a generator gives a one-shot one.
"""

from __future__ import annotations

import itertools
import random
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from .errors import InvalidArgumentError

T = TypeVar("T")


class LazySequence(Generic[T]):
    """Re-iterable view over an iterator factory.

    Each call to ``iter()`` asks the factory for a fresh iterator.
    """

    __slots__ = ("_factory",)

    def __init__(self, factory: Callable[[], Iterator[T]]) -> None:
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return self._factory()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._factory!r})"


_SENTINEL = object()


def _empty() -> Iterator[Any]:
    return iter(())


# ============================================================================
#                           Composition
# ============================================================================


def append(source: Iterable[T] | None, element: T) -> LazySequence[T]:
    """Return a lazy sequence of ``source``'s elements followed by ``element``.

    A None source contributes no elements.
    """
    return LazySequence(lambda: itertools.chain(this_or_empty(source), (element,)))


def prepend(source: Iterable[T] | None, element: T) -> LazySequence[T]:
    """Return a lazy sequence of ``element`` followed by ``source``'s elements."""
    return LazySequence(lambda: itertools.chain((element,), this_or_empty(source)))


def yield_one(item: T) -> LazySequence[T]:
    """Wrap a single value in a lazy sequence."""
    return LazySequence(lambda: iter((item,)))


def this_or_empty(iterable: Iterable[T] | None) -> Iterable[T]:
    """Return ``iterable`` unchanged, or an empty tuple if it is None."""
    return () if iterable is None else iterable


# ============================================================================
#                           Random sampling
# ============================================================================


def shuffle(
    source: Iterable[T] | None, rng: random.Random | None = None
) -> LazySequence[T]:
    """Return a lazily evaluated uniform random permutation of ``source``.

    Every iteration draws a new permutation: the source is materialized and
    shuffled in a single Fisher-Yates pass. ``None`` yields an empty sequence.

    Args:
        source: The elements to permute.
        rng: Random generator to draw from; defaults to the ``random`` module's
            shared generator. Pass a seeded ``random.Random`` for reproducible
            orderings.
    """
    if source is None:
        return LazySequence(_empty)

    def _permute() -> Iterator[T]:
        items = list(source)
        (rng or random).shuffle(items)
        return iter(items)

    return LazySequence(_permute)


def pick_random(
    source: Iterable[T] | None,
    default: T | None = None,
    rng: random.Random | None = None,
) -> T | None:
    """Return one randomly chosen element of ``source``.

    Returns:
        The chosen element, or ``default`` if ``source`` is None or empty.
    """
    if source is None:
        return default
    return next(iter(pick_random_many(source, 1, rng=rng)), default)


def pick_random_many(
    source: Iterable[T] | None, count: int, rng: random.Random | None = None
) -> LazySequence[T]:
    """Return a lazy sequence of up to ``count`` randomly chosen elements.

    Elements are drawn without replacement by position. Asking for more
    elements than available yields all of them in random order; the result is
    never padded.
    """
    if source is None or count <= 0:
        return LazySequence(_empty)
    shuffled = shuffle(source, rng=rng)
    return LazySequence(lambda: itertools.islice(shuffled, count))


# ============================================================================
#                           Inspection
# ============================================================================


def _require_iterable(iterable: object, name: str = "iterable") -> None:
    if iterable is None:
        raise InvalidArgumentError(name, "must not be None")


def are_all_same(iterable: Iterable[Any]) -> bool:
    """Return True if every element equals the first one.

    An empty iterable counts as all the same.

    Raises:
        InvalidArgumentError: If ``iterable`` is None.
    """
    _require_iterable(iterable)
    iterator = iter(iterable)
    first = next(iterator, _SENTINEL)
    if first is _SENTINEL:
        return True
    return all(item == first for item in iterator)


def is_empty(iterable: Iterable[Any]) -> bool:
    """Return True if ``iterable`` yields no element. Consumes at most one.

    Raises:
        InvalidArgumentError: If ``iterable`` is None.
    """
    _require_iterable(iterable)
    return next(iter(iterable), _SENTINEL) is _SENTINEL


def is_not_empty(iterable: Iterable[Any]) -> bool:
    """Return True if ``iterable`` yields at least one element.

    Raises:
        InvalidArgumentError: If ``iterable`` is None.
    """
    return not is_empty(iterable)


def is_null_or_empty(iterable: Iterable[Any] | None) -> bool:
    """Return True if ``iterable`` is None or yields no element."""
    return iterable is None or is_empty(iterable)


# ============================================================================
#                           Eager helpers
# ============================================================================


def for_each(
    iterable: Iterable[T] | None, action: Callable[[T], Any] | None
) -> Iterable[T] | None:
    """Call ``action`` on every element, in order, and return ``iterable``.

    No-op when either argument is None. Note that a one-shot iterator is
    exhausted by the time it is returned.
    """
    if iterable is not None and action is not None:
        for item in iterable:
            action(item)
    return iterable


def join(iterable: Iterable[Any] | None, separator: str) -> str:
    """Join the string forms of the elements with ``separator``.

    ``None`` elements contribute an empty string; a ``None`` iterable yields
    an empty string.
    """
    if iterable is None:
        return ""
    return (separator or "").join(
        "" if item is None else str(item) for item in iterable
    )


def concatenate(strings: Iterable[str | None] | None) -> str:
    """Concatenate strings in order with no separator, skipping None."""
    if strings is None:
        return ""
    return "".join(s for s in strings if s is not None)
