"""Signing and verification errors.

This module defines the exception hierarchy raised by the signing algorithms.
All errors inherit from SigningError to allow catch-all error handling.

Callers tell failure kinds apart by exception class, never by message text.

Security Note:
    Error messages are intentionally generic and never include key material
    or signature bytes.
"""

from __future__ import annotations


class SigningError(Exception):
    """Base exception for all signing and verification failures.

    Every error raised by an algorithm's sign() or verify() is a subclass of
    this type. Application code can catch it to reject a token generically.
    """


class InvalidTokenSignature(SigningError):  # noqa: N818
    """Raised when signature verification fails.

    This occurs when:
    - The header-and-payload bytes were modified after signing
    - The signature bytes were modified or truncated
    - A different key was used to sign than to verify
    - A different algorithm was used to sign than to verify
    - A non-empty signature accompanies an unsecured ("none") token

    Security Note:
        Treat this as "reject the token". Never try to extract partial trust
        from a token whose signature did not verify.
    """


class InvalidKey(SigningError):  # noqa: N818
    """Raised when the key does not fit the algorithm.

    This occurs when:
    - An HMAC algorithm receives something other than a byte sequence
      (a ``str`` secret is rejected, encode it explicitly)
    - An RSA algorithm is asked to sign without an RSA private key
    - An RSA algorithm is asked to verify without an RSA public key
    - The RSA modulus is too small for the configured hash

    The check happens before any cryptographic work, so an invalid key is
    never reported as a signature mismatch.
    """


class UnknownAlgorithm(SigningError):  # noqa: N818
    """Raised when an algorithm name cannot be resolved.

    This occurs when:
    - The name is not one of the registered algorithms
    - The name is registered but excluded by the registry's allowlist
    - "none" is requested from a registry that does not allow unsecured tokens
    """
