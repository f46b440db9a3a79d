"""Helpers for fixed-size arrays and their string representations.

"Array" here means any mutable sequence whose length is not expected to
change: lists, ``bytearray``, ``array.array`` and numpy arrays. The string
helpers produce a compact, human-readable layout::

    [1,	2,	3]

    [[1,	2],
     [3,	4]]

with ``None`` input rendered as ``[]`` and ``None`` elements as empty strings.
"""

from __future__ import annotations

import array
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any

import numpy as np

from .config import ARRAY_ITEM_SEPARATOR, ARRAY_ROW_SEPARATOR, EMPTY_ARRAY
from .errors import InvalidArgumentError


def _zero_of(value: Any) -> Any:
    # int() -> 0, str() -> "", bool() -> False; None for anything needing args
    if value is None:
        return None
    try:
        return type(value)()
    except TypeError:
        return None


def clear_all(arr: MutableSequence[Any] | np.ndarray | None) -> None:
    """Reset every element of ``arr`` to its type's zero value, in place.

    Args:
        arr: The array to clear. ``None`` is a no-op.

    Note:
        - numpy arrays are zeroed with their dtype's zero (``0``, ``False``,
          ``""``); object arrays are filled with ``None``.
        - ``bytearray`` and ``array.array`` are filled with ``0``.
        - For lists, each slot gets ``type(item)()`` when that type can be
          built without arguments, otherwise ``None``.
    """
    if arr is None:
        return
    if isinstance(arr, np.ndarray):
        if arr.dtype == object:
            arr.fill(None)
        else:
            arr[...] = np.zeros((), dtype=arr.dtype)
        return
    if isinstance(arr, (bytearray, array.array)):
        for i in range(len(arr)):
            arr[i] = 0
        return
    for i, item in enumerate(arr):
        arr[i] = _zero_of(item)


def _str_or_empty(value: object) -> str:
    return "" if value is None else str(value)


def join(arr: Iterable[Any] | None, separator: str) -> str:
    """Concatenate the string forms of ``arr``'s elements with ``separator``.

    Args:
        arr: The elements to join. ``None`` yields an empty string.
        separator: Placed between elements only.

    Returns:
        The joined string; ``None`` elements contribute an empty string.
    """
    if arr is None:
        return ""
    return (separator or "").join(_str_or_empty(item) for item in arr)


def _row_string(row: Iterable[Any] | None) -> str:
    if row is None:
        return EMPTY_ARRAY
    return "[" + ARRAY_ITEM_SEPARATOR.join(_str_or_empty(item) for item in row) + "]"


def array_string(arr: Iterable[Any] | None) -> str:
    """Return a simple string representation of a one-dimensional array.

    Example:
        ``array_string([1, None, 3])`` returns ``"[1,\\t,\\t3]"``.
    """
    return _row_string(arr)


def jagged_array_string(rows: Iterable[Iterable[Any] | None] | None) -> str:
    """Return a string representation of an array of arrays.

    Rows may differ in length. Each row is rendered like `array_string` and
    rows are separated by a comma, newline and a single space of indent.
    """
    if rows is None:
        return EMPTY_ARRAY
    return "[" + ARRAY_ROW_SEPARATOR.join(_row_string(row) for row in rows) + "]"


def array2d_string(grid: np.ndarray | Sequence[Sequence[Any]] | None) -> str:
    """Return a string representation of a rectangular two-dimensional array.

    Args:
        grid: A 2-D numpy array or a list of equally long rows.

    Returns:
        The rows laid out as in `jagged_array_string`; ``"[]"`` for ``None``.

    Raises:
        InvalidArgumentError: If ``grid`` is not two-dimensional or its rows
            differ in length.
    """
    if grid is None:
        return EMPTY_ARRAY
    if isinstance(grid, np.ndarray):
        if grid.ndim != 2:
            raise InvalidArgumentError(
                "grid", f"expected 2 dimensions, got {grid.ndim}"
            )
        return jagged_array_string(grid.tolist())
    if any(row is None for row in grid):
        raise InvalidArgumentError("grid", "rows must not be None")
    widths = {len(row) for row in grid}
    if len(widths) > 1:
        raise InvalidArgumentError("grid", "rows must all have the same length")
    return jagged_array_string(grid)
