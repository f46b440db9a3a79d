"""Parse strings into numbers and datetimes with an explicit fallback.

Each parser returns its ``default`` instead of raising when the input is None
or cannot be parsed. Surrounding whitespace is accepted, as with the
builtin constructors, but numbers must be plain ASCII: digit group
underscores (``"1_000"``) and non-ASCII digits count as parse failures.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import TypeVar, overload

D = TypeVar("D")


def _is_plain_number(s: str) -> bool:
    return s.isascii() and "_" not in s


def to_int(s: str | None, default: int = 0) -> int:
    """Parse a base-10 integer, returning ``default`` on failure."""
    if s is None or not _is_plain_number(s):
        return default
    try:
        return int(s)
    except ValueError:
        return default


# Python integers are unbounded, a separate long type is not needed.
to_long = to_int


def to_float(s: str | None, default: float = 0.0) -> float:
    """Parse a floating point number, returning ``default`` on failure.

    Note:
        ``"nan"`` and ``"inf"`` are accepted, as with ``float()``.
    """
    if s is None or not _is_plain_number(s):
        return default
    try:
        return float(s)
    except ValueError:
        return default


to_double = to_float


def to_decimal(s: str | None, default: Decimal | int = 0) -> Decimal:
    """Parse a `decimal.Decimal`, returning ``default`` on failure."""
    if s is not None and _is_plain_number(s):
        try:
            return Decimal(s.strip())
        except InvalidOperation:
            pass
    return default if isinstance(default, Decimal) else Decimal(default)


@overload
def to_datetime(s: str | None) -> datetime | None: ...
@overload
def to_datetime(s: str | None, default: D) -> datetime | D: ...
def to_datetime(s: str | None, default: object = None) -> object:
    """Parse an ISO 8601 date or datetime string.

    Args:
        s: Text such as ``"2024-03-01"`` or ``"2024-03-01T12:30:00+00:00"``.
        default: Value returned when ``s`` is None or cannot be parsed.

    Returns:
        The parsed `datetime` (naive unless ``s`` carries an offset), or
        ``default``.
    """
    if s is None:
        return default
    try:
        return datetime.fromisoformat(s.strip())
    except ValueError:
        return default
