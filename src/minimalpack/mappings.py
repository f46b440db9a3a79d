"""Dictionary helpers with idempotent upsert semantics."""

from collections.abc import Mapping, MutableMapping
from typing import TypeVar

from .errors import InvalidArgumentError

K = TypeVar("K")
V = TypeVar("V")


def _require_key(key: object) -> None:
    if key is None:
        raise InvalidArgumentError("key", "must not be None")


def add_if_not_contains_key(
    mapping: MutableMapping[K, V] | None, key: K, value: V
) -> bool:
    """Insert ``value`` under ``key`` only if the key is not present yet.

    Args:
        mapping: The mapping to update. ``None`` is tolerated.
        key: The key to insert.
        value: The value to store.

    Returns:
        True if the value was inserted, False if the key already existed or
        ``mapping`` is None. An existing value is never changed.

    Raises:
        InvalidArgumentError: If ``key`` is None.
    """
    _require_key(key)
    if mapping is None or key in mapping:
        return False
    mapping[key] = value
    return True


def add_or_update(mapping: MutableMapping[K, V] | None, key: K, value: V) -> V:
    """Store ``value`` under ``key``, overwriting any existing value.

    Returns:
        The stored value (``value`` itself, also when ``mapping`` is None).

    Raises:
        InvalidArgumentError: If ``key`` is None.
    """
    _require_key(key)
    if mapping is not None:
        mapping[key] = value
    return value


def get_value_or_default(mapping: Mapping[K, V] | None, key: K, default: V) -> V:
    """Return the value stored under ``key``, or ``default`` when missing."""
    if mapping is None or key is None:
        return default
    return mapping.get(key, default)


def to_tuples(mapping: Mapping[K, V] | None) -> list[tuple[K, V]]:
    """Return the mapping's ``(key, value)`` pairs in iteration order."""
    if mapping is None:
        return []
    return list(mapping.items())
