"""Helpers shared by the algorithm implementations."""

from __future__ import annotations

from typing import Any, Final

BYTES_LIKE: Final = (bytes, bytearray, memoryview)


def require_bytes(value: Any, what: str) -> bytes:
    """Return ``value`` as ``bytes`` or raise TypeError.

    The content is copied verbatim; nothing is re-encoded.
    """
    if not isinstance(value, BYTES_LIKE):
        raise TypeError(f"{what} must be bytes, not {type(value).__name__}")
    return bytes(value)
