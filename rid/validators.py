"""
Identifier validators: pure, total functions.

Every validator accepts any input and answers ``True`` or ``False``; wrong
types, empty strings and wrong lengths are ``False``, never an exception.
"""

from __future__ import annotations

import hmac
import re
from typing import Any

from .signing import SIGNATURE_LENGTH, sign

_IDENTIFIER_RE = re.compile(r"[a-zA-Z0-9]+")

SIGNED_BODY_LENGTH = 20
SIGNED_LENGTH = SIGNED_BODY_LENGTH + SIGNATURE_LENGTH


def validate_format(value: Any, expected_len: int) -> bool:
    """Return True if *value* is exactly *expected_len* alphabet characters."""
    if not isinstance(value, str) or isinstance(expected_len, bool):
        return False
    if not isinstance(expected_len, int):
        return False
    if expected_len < 1 or len(value) != expected_len:
        return False
    return _IDENTIFIER_RE.fullmatch(value) is not None


def validate_identifier16(value: Any) -> bool:
    return validate_format(value, 16)


def validate_identifier20(value: Any) -> bool:
    return validate_format(value, 20)


def validate_signed_identifier20(value: Any, secret: str) -> bool:
    """Return True if *value* is a 20-char identifier plus its signature.

    The signature comparison is constant-time.
    """
    if not isinstance(value, str) or not isinstance(secret, str):
        return False
    if len(value) != SIGNED_LENGTH:
        return False
    body, signature = value[:SIGNED_BODY_LENGTH], value[SIGNED_BODY_LENGTH:]
    if not validate_identifier20(body):
        return False
    # compare_digest rejects non-ASCII str; the untrusted side may hold anything.
    return hmac.compare_digest(
        signature.encode("utf-8", "surrogatepass"), sign(body, secret).encode("ascii")
    )
