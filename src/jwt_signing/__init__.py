"""
JWT signing algorithms.

High-level flow (per token)
---------------------------
1. The token layer builds the signing input:
   ``base64url(header) + b"." + base64url(payload)``.
2. It selects an algorithm by "alg" name (``get_algorithm`` or an
   ``AlgorithmRegistry`` allowlist).
3. ``alg.sign(signing_input, key)`` returns the raw signature, which the token
   layer base64url-encodes as the third segment.
4. On the way back in, ``alg.verify(signing_input, signature, key)`` returns
   ``None`` or raises.

Security notes
--------------
- Signatures are computed over the exact bytes supplied, never a re-encoding.
- Restrict accepted algorithms with an allowlist; "none" is off by default.
- Any ``SigningError`` from verify() means "reject the token".

Example usage
-------------

.. code-block:: python

    from jwt_signing import HS256, InvalidTokenSignature

    signing_input = b"eyJhbGciOiJIUzI1NiJ9.eyJzdWIiOiIxMjM0NTY3ODkwIn0"
    signature = HS256.sign(signing_input, b"secret")

    try:
        HS256.verify(signing_input, signature, b"secret")
    except InvalidTokenSignature:
        ...  # reject
"""

# Algorithms
from .algorithms import (
    HS256,
    HS384,
    HS512,
    NONE,
    RS256,
    RS384,
    RS512,
    HMACAlgorithm,
    NoneAlgorithm,
    RSAAlgorithm,
)

# Errors
from .errors import InvalidKey, InvalidTokenSignature, SigningError, UnknownAlgorithm

# Protocols
from .protocols import Alg, HashFunc, Key, Signature

# Registry
from .registry import ALGORITHMS, AlgorithmRegistry, RegistryOptions, get_algorithm

__all__ = [
    # Errors
    "SigningError",
    "InvalidTokenSignature",
    "InvalidKey",
    "UnknownAlgorithm",
    # Protocols
    "Alg",
    "HashFunc",
    "Key",
    "Signature",
    # Algorithms
    "NoneAlgorithm",
    "HMACAlgorithm",
    "RSAAlgorithm",
    "NONE",
    "HS256",
    "HS384",
    "HS512",
    "RS256",
    "RS384",
    "RS512",
    # Registry
    "ALGORITHMS",
    "AlgorithmRegistry",
    "RegistryOptions",
    "get_algorithm",
]
