"""The "none" algorithm for unsecured JWTs.

An unsecured JWT may be fit for client-side use. If the session ID is a
hard-to-guess value and the rest of the payload only drives a client view
(a display name, the last visited page), a signature adds nothing: a user who
edits that data gains nothing from it.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from ..errors import InvalidTokenSignature
from ..protocols import Key, Signature
from ._util import BYTES_LIKE

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class NoneAlgorithm:
    """Unsecured algorithm: empty signatures only, key ignored."""

    name: str = "none"

    def sign(self, header_and_payload: bytes, key: Key = None) -> Signature:
        return b""

    def verify(
        self, header_and_payload: bytes, signature: Signature, key: Key = None
    ) -> None:
        # Any non-empty signature on an unsecured token has been tampered with.
        if not isinstance(signature, BYTES_LIKE) or len(signature) != 0:
            logger.debug("jwt_signature_mismatch", alg=self.name)
            raise InvalidTokenSignature("invalid token signature")
