"""Helpers for mutable collections: lists, sets and similar containers.

Sequences (anything with ``append``) grow at the end; sets grow via ``add``.
Bulk operations come in two flavours, taking either positional values
(`add_range`, `remove_range`) or a single iterable (`add_range_from`,
`remove_range_from`).
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, MutableSequence, MutableSet, Sequence, Sized
from typing import Any, TypeVar

from .errors import InvalidArgumentError

T = TypeVar("T")

type Collection[T] = MutableSequence[T] | MutableSet[T]


def _add(collection: Collection[T], value: T) -> None:
    if isinstance(collection, MutableSet):
        collection.add(value)
    else:
        collection.append(value)


def _discard(collection: Collection[T], value: T) -> None:
    if isinstance(collection, MutableSet):
        collection.discard(value)
        return
    try:
        collection.remove(value)
    except ValueError:
        pass  # not present


def add_if_not_contains(collection: Collection[T] | None, value: T) -> bool:
    """Add ``value`` unless the collection already contains it.

    Returns:
        True if the value was added; False if it was already present or
        ``collection`` is None.
    """
    if collection is None or value in collection:
        return False
    _add(collection, value)
    return True


def add_range(collection: Collection[T] | None, *values: T) -> None:
    """Add every positional value to ``collection``."""
    add_range_from(collection, values)


def add_range_from(
    collection: Collection[T] | None, values: Iterable[T] | None
) -> None:
    """Add every element of ``values`` to ``collection``.

    No-op if either argument is None.
    """
    if collection is None or values is None:
        return
    for value in values:
        _add(collection, value)


def remove_range(collection: Collection[T] | None, *values: T) -> None:
    """Remove every positional value from ``collection``."""
    remove_range_from(collection, values)


def remove_range_from(
    collection: Collection[T] | None, values: Iterable[T] | None
) -> None:
    """Remove one occurrence of each element of ``values`` from ``collection``.

    Elements that are not present are ignored. No-op if either argument is
    None.
    """
    if collection is None or values is None:
        return
    for value in values:
        _discard(collection, value)


def is_null_or_empty(collection: Sized | None) -> bool:
    """Return True if ``collection`` is None or has no elements."""
    return collection is None or len(collection) == 0


def chunk_by(source: Sequence[T] | None, chunk_size: int) -> list[list[T]]:
    """Split ``source`` into consecutive chunks of ``chunk_size`` elements.

    Args:
        source: The ordered elements to split. ``None`` yields an empty list.
        chunk_size: Number of elements per chunk; the last chunk may be shorter.

    Returns:
        A list of new lists which, concatenated, reproduce ``source``.

    Raises:
        InvalidArgumentError: If ``chunk_size`` is not a positive integer.
    """
    if chunk_size <= 0:
        raise InvalidArgumentError("chunk_size", f"must be positive, got {chunk_size}")
    if source is None:
        return []
    return [list(source[i : i + chunk_size]) for i in range(0, len(source), chunk_size)]


def clone_all(items: Iterable[T] | None) -> list[T]:
    """Return a new list holding a shallow copy of every element of ``items``."""
    if items is None:
        return []
    return [copy.copy(item) for item in items]


def push(collection: Collection[Any] | None, item: Any) -> Collection[Any] | None:
    """Add ``item`` to ``collection`` and return the collection for chaining."""
    if collection is None:
        return None
    _add(collection, item)
    return collection
