"""Protocol definitions for JWT signing algorithms.

This module defines the structural interface every signing algorithm
satisfies, together with the hash identifiers the keyed variants are
parameterized by.

Using a Protocol allows duck-typing: an external token-assembly layer only
depends on ``name``, ``sign`` and ``verify``, and tests can substitute any
object with the same shape.
"""

from __future__ import annotations

import enum
from typing import Any, Protocol

from cryptography.hazmat.primitives import hashes

# ============================================================================
# Type Aliases
# ============================================================================

type Key = Any
"""Opaque key value. Each algorithm checks the shape it requires at call time."""

type Signature = bytes
"""Raw (not base64url-encoded) signature bytes."""


# ============================================================================
# Hash identifiers
# ============================================================================


class HashFunc(enum.Enum):
    """Hash functions available to the HMAC and RSA algorithm families.

    The value is the ``hashlib`` name, which the stdlib ``hmac`` module
    accepts directly as a digest constructor.
    """

    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def digest_size(self) -> int:
        """Digest length in bytes (32, 48 or 64)."""
        return self.crypto().digest_size

    def crypto(self) -> hashes.HashAlgorithm:
        """Return a fresh ``cryptography`` hash object for this identifier."""
        return _CRYPTO_HASHES[self]()


_CRYPTO_HASHES: dict[HashFunc, type[hashes.HashAlgorithm]] = {
    HashFunc.SHA256: hashes.SHA256,
    HashFunc.SHA384: hashes.SHA384,
    HashFunc.SHA512: hashes.SHA512,
}


# ============================================================================
# Core Protocols
# ============================================================================


class Alg(Protocol):
    """Protocol for JWT signing and verifying algorithms.

    Implementers must be immutable and stateless so that one instance can be
    shared by any number of concurrent callers.

    Note:
        Some algorithms are asymmetric, so verify() receives the exact
        header-and-payload bytes rather than comparing against a sign() result.
    """

    @property
    def name(self) -> str:
        """The JWT "alg" header value, e.g. "HS256" or "none"."""
        ...

    def sign(self, header_and_payload: bytes, key: Key) -> Signature:
        """Sign the exact header-and-payload bytes.

        Args:
            header_and_payload: base64url(header) + b"." + base64url(payload),
                exactly as it will appear in the token. Never re-encoded.
            key: Signing key of the shape the algorithm requires.

        Returns:
            Raw signature bytes.

        Raises:
            InvalidKey: The key is of the wrong type or shape.
        """
        ...

    def verify(
        self, header_and_payload: bytes, signature: Signature, key: Key
    ) -> None:
        """Verify a base64url-decoded signature against the signing input.

        Args:
            header_and_payload: The exact signing input taken from the token.
            signature: Raw signature bytes (already base64url-decoded).
            key: Verification key of the shape the algorithm requires.

        Raises:
            InvalidKey: The key is of the wrong type or shape. Checked first.
            InvalidTokenSignature: The signature does not match.
        """
        ...
