"""
Built-in signing algorithms.

Each variant is an immutable dataclass satisfying the Alg protocol. The
module-level instances below are the only ones the package creates; they are
shared by every caller.

Not implemented yet:
- ES256, ES384, ES512: ECDSA with P-256/P-384/P-521.
- PS256, PS384, PS512: RSASSA-PSS + MGF1 with SHA-256/384/512.
"""

from ..protocols import Alg, HashFunc
from .hmac_sha import HMACAlgorithm
from .rsa_pkcs1 import RSAAlgorithm
from .unsecured import NoneAlgorithm

# Unsecured JWTs. Keys are ignored.
NONE: Alg = NoneAlgorithm()

# HMAC-SHA. Keys must be bytes.
HS256: Alg = HMACAlgorithm("HS256", HashFunc.SHA256)
HS384: Alg = HMACAlgorithm("HS384", HashFunc.SHA384)
HS512: Alg = HMACAlgorithm("HS512", HashFunc.SHA512)

# RSA PKCS#1 v1.5. Sign with RSAPrivateKey, verify with RSAPublicKey.
RS256: Alg = RSAAlgorithm("RS256", HashFunc.SHA256)
RS384: Alg = RSAAlgorithm("RS384", HashFunc.SHA384)
RS512: Alg = RSAAlgorithm("RS512", HashFunc.SHA512)

__all__ = [
    "HMACAlgorithm",
    "NoneAlgorithm",
    "RSAAlgorithm",
    "NONE",
    "HS256",
    "HS384",
    "HS512",
    "RS256",
    "RS384",
    "RS512",
]
