"""HMAC-SHA signing algorithms (HS256, HS384, HS512).

Symmetric: the same shared secret signs and verifies. Keys must be ``bytes``
(or ``bytearray``/``memoryview``); a ``str`` secret is rejected rather than
silently encoded, so the caller decides the encoding.
"""

from __future__ import annotations

import hmac
from dataclasses import dataclass

import structlog

from ..errors import InvalidKey, InvalidTokenSignature
from ..protocols import HashFunc, Key, Signature
from ._util import BYTES_LIKE, require_bytes

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class HMACAlgorithm:
    """HMAC over the signing input with a configured SHA-2 hash.

    Attributes:
        name: JWT "alg" value.
        hash_func: Digest used by HMAC.
    """

    name: str
    hash_func: HashFunc

    def _secret(self, key: Key) -> bytes:
        if not isinstance(key, BYTES_LIKE):
            logger.debug("jwt_invalid_key", alg=self.name, key_type=type(key).__name__)
            raise InvalidKey("invalid key")
        return bytes(key)

    def _mac(self, header_and_payload: bytes, secret: bytes) -> bytes:
        message = require_bytes(header_and_payload, "header_and_payload")
        return hmac.digest(secret, message, self.hash_func.value)

    def sign(self, header_and_payload: bytes, key: Key) -> Signature:
        return self._mac(header_and_payload, self._secret(key))

    def verify(
        self, header_and_payload: bytes, signature: Signature, key: Key
    ) -> None:
        expected = self._mac(header_and_payload, self._secret(key))
        # compare_digest runs in time independent of where the first difference is.
        if not isinstance(signature, BYTES_LIKE) or not hmac.compare_digest(
            expected, bytes(signature)
        ):
            logger.debug("jwt_signature_mismatch", alg=self.name)
            raise InvalidTokenSignature("invalid token signature")
