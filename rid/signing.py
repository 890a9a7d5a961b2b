"""
HMAC signing for identifiers.

A signed identifier is a 20-character identifier followed by the first
8 bytes of HMAC-SHA256(secret, identifier) in lowercase hex: 36 characters
in total, still URL-safe.
"""

from __future__ import annotations

import hashlib
import hmac

SIGNATURE_BYTES = 8
SIGNATURE_LENGTH = SIGNATURE_BYTES * 2


def sign(message: str, secret: str) -> str:
    """Return the truncated hex HMAC-SHA256 of *message* under *secret*.

    Args:
        message: Text to sign, normally an identifier.
        secret: Signing key; any string, encoded as UTF-8 (lone surrogates
            pass through).

    Returns:
        16-character lowercase hex string. Deterministic for a given
        (message, secret) pair.
    """
    mac = hmac.new(
        secret.encode("utf-8", "surrogatepass"),
        message.encode("utf-8", "surrogatepass"),
        hashlib.sha256,
    )
    return mac.digest()[:SIGNATURE_BYTES].hex()
