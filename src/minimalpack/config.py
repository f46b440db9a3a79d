"""Configuration defaults for minimalpack.

This module centralizes the constants shared by the helpers and the single
environment override the library honours.
"""

import math
import os

from .errors import InvalidConfigError

DEFAULT_MATCH_TIMEOUT = 1.0  # seconds
MATCH_TIMEOUT_ENV = "MINIMALPACK_MATCH_TIMEOUT"  # pragma: no mutate

EMPTY_ARRAY = "[]"
ARRAY_ITEM_SEPARATOR = ",\t"
ARRAY_ROW_SEPARATOR = ",\n "


def get_match_timeout() -> float:
    """Get the default regular expression match timeout.

    Returns:
        The value of `MINIMALPACK_MATCH_TIMEOUT` in seconds when set, otherwise
        `DEFAULT_MATCH_TIMEOUT`.

    Raises:
        InvalidConfigError: If the override is not a positive, finite number.
    """
    if not (raw := os.environ.get(MATCH_TIMEOUT_ENV, "").strip()):
        return DEFAULT_MATCH_TIMEOUT
    try:
        value = float(raw)
    except ValueError as e:
        raise InvalidConfigError(MATCH_TIMEOUT_ENV, raw, "not a number") from e
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfigError(MATCH_TIMEOUT_ENV, raw, "must be a positive number")
    return value
