"""RSASSA-PKCS1-v1_5 signing algorithms (RS256, RS384, RS512).

Signing and verifying RS256 tokens works like HMAC, except that a
private/public key pair replaces the shared secret:

    sign   key: RSAPrivateKey
    verify key: RSAPublicKey

Keys come from ``cryptography``. With OpenSSL, for example::

    $ openssl genpkey -algorithm RSA -out private_key.pem -pkeyopt rsa_keygen_bits:2048
    $ openssl rsa -pubout -in private_key.pem -out public_key.pem

and then ``serialization.load_pem_private_key`` /
``serialization.load_pem_public_key``. Loading and storing keys is left to the
caller.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from ..errors import InvalidKey, InvalidTokenSignature
from ..protocols import HashFunc, Key, Signature
from ._util import BYTES_LIKE, require_bytes

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class RSAAlgorithm:
    """PKCS#1 v1.5 signature over the signing input with a SHA-2 hash.

    Attributes:
        name: JWT "alg" value.
        hash_func: Digest signed by the private key.
    """

    name: str
    hash_func: HashFunc

    def _invalid_key(self, key: Key, op: str) -> InvalidKey:
        logger.debug(
            "jwt_invalid_key", alg=self.name, op=op, key_type=type(key).__name__
        )
        return InvalidKey("invalid key")

    def sign(self, header_and_payload: bytes, key: Key) -> Signature:
        if not isinstance(key, rsa.RSAPrivateKey):
            raise self._invalid_key(key, "sign")

        message = require_bytes(header_and_payload, "header_and_payload")
        try:
            return key.sign(message, padding.PKCS1v15(), self.hash_func.crypto())
        except ValueError as e:
            # Modulus too small to hold the DigestInfo for this hash.
            raise self._invalid_key(key, "sign") from e

    def verify(
        self, header_and_payload: bytes, signature: Signature, key: Key
    ) -> None:
        if not isinstance(key, rsa.RSAPublicKey):
            raise self._invalid_key(key, "verify")

        message = require_bytes(header_and_payload, "header_and_payload")
        if not isinstance(signature, BYTES_LIKE):
            logger.debug("jwt_signature_mismatch", alg=self.name)
            raise InvalidTokenSignature("invalid token signature")

        try:
            key.verify(
                bytes(signature), message, padding.PKCS1v15(), self.hash_func.crypto()
            )
        except InvalidSignature as e:
            logger.debug("jwt_signature_mismatch", alg=self.name)
            raise InvalidTokenSignature("invalid token signature") from e
