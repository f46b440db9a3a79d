"""Null-safe string helpers.

Every helper here is total: ``None`` (and, for most helpers, blank strings)
produce an empty string, ``False`` or the supplied default instead of an
exception. Case-insensitive comparisons are ordinal: characters are upper-cased
one at a time and compared by code point, independent of the current locale.
"""

from __future__ import annotations

import locale
import logging
import re
from datetime import timedelta

import regex

from .config import get_match_timeout
from .errors import InvalidArgumentError, MatchTimeoutError

logger = logging.getLogger(__name__)

# Languages whose casing rules differ from the Unicode defaults for I/i.
_DOTTED_I_LANGUAGES = frozenset({"tr", "az"})
_DOTTED_LOWER = str.maketrans({"I": "ı", "İ": "i"})
_DOTTED_UPPER = str.maketrans({"i": "İ", "ı": "I"})


# ============================================================================
#                           Null / blank checks
# ============================================================================


def is_null_or_empty(s: str | None) -> bool:
    """Return True if ``s`` is None or the empty string."""
    return not s


def is_null_or_whitespace(s: str | None) -> bool:
    """Return True if ``s`` is None, empty or whitespace only."""
    return s is None or not s.strip()


def if_null_then(s: str | None, alternate: str) -> str:
    """Return ``s`` unless it is None or blank, in which case ``alternate``."""
    if s is None or not s.strip():
        return alternate
    return s


def to_string_safe(value: object) -> str:
    """Return ``str(value)``, or an empty string for None."""
    return "" if value is None else str(value)


def trim_safe(s: str | None) -> str:
    """Strip leading and trailing whitespace; None or blank yields ``""``."""
    if s is None or not s.strip():
        return ""
    return s.strip()


# ============================================================================
#                           Case conversion
# ============================================================================


def _language_of(culture: str | None) -> str:
    """Extract the language subtag from a locale name like ``tr-TR``."""
    if culture is None:
        culture = locale.getlocale(locale.LC_CTYPE)[0] or ""
    return re.split(r"[-_.@]", culture, maxsplit=1)[0].lower()


def to_lower_safe(s: str | None, culture: str | None = None) -> str:
    """Convert ``s`` to lower case using the casing rules of ``culture``.

    Args:
        s: The string to convert.
        culture: Locale name (``"tr-TR"``, ``"en_US.UTF-8"``...). Defaults to
            the process's current ``LC_CTYPE`` locale.

    Returns:
        The lower-cased string, or ``""`` for None or blank input.
    """
    if s is None or not s.strip():
        return ""
    if _language_of(culture) in _DOTTED_I_LANGUAGES:
        s = s.translate(_DOTTED_LOWER)
    return s.lower()


def to_upper_safe(s: str | None, culture: str | None = None) -> str:
    """Convert ``s`` to upper case using the casing rules of ``culture``.

    See `to_lower_safe` for the meaning of ``culture``.
    """
    if s is None or not s.strip():
        return ""
    if _language_of(culture) in _DOTTED_I_LANGUAGES:
        s = s.translate(_DOTTED_UPPER)
    return s.upper()


def to_lower_invariant_safe(s: str | None) -> str:
    """Lower-case ``s`` with the Unicode default rules, ignoring locale."""
    if s is None or not s.strip():
        return ""
    return s.lower()


def to_upper_invariant_safe(s: str | None) -> str:
    """Upper-case ``s`` with the Unicode default rules, ignoring locale."""
    if s is None or not s.strip():
        return ""
    return s.upper()


# ============================================================================
#                           Comparison
# ============================================================================


def _ordinal_upper(s: str) -> str:
    """Upper-case ``s`` one character at a time, keeping its length.

    Characters whose upper case expands to several (``"ß"`` -> ``"SS"``) are
    left unchanged, so matching stays position for position.
    """
    return "".join(_upper_char(c) for c in s)


def _upper_char(c: str) -> str:
    upper = c.upper()
    return upper if len(upper) == 1 else c


def equals_ignore_case(a: str | None, b: str | None) -> bool:
    """Compare two strings ignoring case. Two Nones are equal."""
    if a is None or b is None:
        return a is b
    return len(a) == len(b) and _ordinal_upper(a) == _ordinal_upper(b)


def starts_with_ignore_case(a: str | None, b: str | None) -> bool:
    """Return True if ``a`` starts with ``b``, ignoring case."""
    if a is None or b is None:
        return False
    return _ordinal_upper(a).startswith(_ordinal_upper(b))


def ends_with_ignore_case(a: str | None, b: str | None) -> bool:
    """Return True if ``a`` ends with ``b``, ignoring case."""
    if a is None or b is None:
        return False
    return _ordinal_upper(a).endswith(_ordinal_upper(b))


def contains_ignore_case(s: str | None, value: str | None) -> bool:
    """Return True if ``value`` occurs in ``s``, ignoring case."""
    if s is None or value is None:
        return False
    return _ordinal_upper(value) in _ordinal_upper(s)


def char_equals_ignore_case(a: str | None, b: str | None) -> bool:
    """Compare two single characters ignoring case. Two Nones are equal."""
    if a is None or b is None:
        return a is b
    return _upper_char(a) == _upper_char(b)


# ============================================================================
#                           Slicing and shaping
# ============================================================================


def _require_count(count: int) -> None:
    if count < 0:
        raise InvalidArgumentError("count", f"must not be negative, got {count}")


def remove_first(s: str | None, count: int) -> str:
    """Drop the first ``count`` characters of ``s``.

    Raises:
        InvalidArgumentError: If ``count`` is negative.
    """
    _require_count(count)
    if not s:
        return ""
    return s[count:]


def remove_last(s: str | None, count: int) -> str:
    """Drop the last ``count`` characters of ``s``.

    Raises:
        InvalidArgumentError: If ``count`` is negative.
    """
    _require_count(count)
    if not s:
        return ""
    return s[: max(len(s) - count, 0)]


def remove_first_character(s: str | None) -> str:
    """Drop the first character of ``s``."""
    return remove_first(s, 1)


def remove_last_character(s: str | None) -> str:
    """Drop the last character of ``s``."""
    return remove_last(s, 1)


def reverse(s: str | None) -> str:
    """Return ``s`` with its characters in reverse order."""
    if not s:
        return ""
    return s[::-1]


def surround_with(s: str | None, surrounder: str | None) -> str:
    """Wrap ``s`` between two copies of ``surrounder``."""
    surrounder = surrounder or ""
    return f"{surrounder}{s or ''}{surrounder}"


# ============================================================================
#                           Searching
# ============================================================================


def nth_index_of(s: str | None, match: str | None, occurrence: int) -> int:
    """Return the index of the ``occurrence``-th appearance of ``match`` in ``s``.

    Occurrences are counted from 1 and may overlap, so
    ``nth_index_of("aaa", "aa", 2) == 1``.

    Returns:
        The zero-based index, or -1 if there are fewer occurrences, either
        string is empty or None, or ``occurrence`` is less than 1.
    """
    if not s or not match or occurrence < 1:
        return -1
    index = -1
    for _ in range(occurrence):
        index = s.find(match, index + 1)
        if index == -1:
            return -1
    return index


def occurrence_count(
    s: str | None,
    pattern: str | None,
    match_timeout: float | timedelta | None = None,
) -> int:
    """Count the non-overlapping matches of the regular expression ``pattern``.

    Args:
        s: The text to search.
        pattern: A regular expression (``regex`` module syntax, a superset of
            ``re``).
        match_timeout: Upper bound for the whole search, in seconds or as a
            ``timedelta``. Defaults to `config.get_match_timeout`.

    Returns:
        The number of matches; 0 if either input is empty or None.

    Raises:
        InvalidArgumentError: If ``pattern`` is not a valid expression.
        MatchTimeoutError: If matching did not finish within the timeout.
    """
    if not s or not pattern:
        return 0
    if match_timeout is None:
        timeout = get_match_timeout()
    elif isinstance(match_timeout, timedelta):
        timeout = match_timeout.total_seconds()
    else:
        timeout = float(match_timeout)
    try:
        compiled = regex.compile(pattern)
    except regex.error as e:
        raise InvalidArgumentError("pattern", str(e)) from e
    try:
        return sum(1 for _ in compiled.finditer(s, timeout=timeout))
    except TimeoutError as e:
        logger.debug("Pattern %r timed out after %ss", pattern, timeout)
        raise MatchTimeoutError(pattern, timeout) from e
