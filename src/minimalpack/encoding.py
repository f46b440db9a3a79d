"""Base64 and byte conversions for text.

Text is always encoded as UTF-8 before base64 encoding, and decoded base64
payloads are interpreted as UTF-8.
"""

import base64
import binascii

from .errors import InvalidArgumentError


def encode_base64(s: str | None) -> str:
    """Return the base64 encoding of the UTF-8 bytes of ``s``.

    None or blank input yields an empty string.
    """
    if s is None or not s.strip():
        return ""
    return base64.b64encode(s.encode("utf-8")).decode("ascii")


def decode_base64(s: str | None) -> str:
    """Decode a base64 payload holding UTF-8 text.

    Args:
        s: The base64 text. Surrounding whitespace is ignored.

    Returns:
        The decoded text; an empty string for None or blank input.

    Raises:
        InvalidArgumentError: If ``s`` is not valid base64 or does not hold
            UTF-8 text.
    """
    if s is None or not s.strip():
        return ""
    try:
        return base64.b64decode(s.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise InvalidArgumentError(
            "s", f"not a base64 encoded UTF-8 string: {e}"
        ) from e


def bytes_to_base64(data: bytes | bytearray | memoryview | None) -> str:
    """Return the base64 text for ``data``; None or empty yields ``""``."""
    if not data:
        return ""
    return base64.b64encode(data).decode("ascii")


def to_byte_array(s: str | None, encoding: str = "utf-8") -> bytes:
    """Encode ``s`` with ``encoding``; None or empty yields ``b""``."""
    if not s:
        return b""
    return s.encode(encoding or "utf-8")
