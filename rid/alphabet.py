"""
The 62-symbol alphabet and the unbiased byte-to-symbol mapping.

A raw byte has 256 values and 256 is not a multiple of 62, so ``byte % 62``
makes the first eight symbols a quarter more likely than the rest. Instead the alphabet is
repeated four times (248 entries): a byte below 248 indexes the table directly,
a byte in [248, 256) is rejected and replaced by a fresh uniform draw.
"""

from __future__ import annotations

import string
from typing import Callable

from .errors import InvalidLengthError

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
ALPHABET_SIZE = len(ALPHABET)

# Largest multiple of 62 that fits in a byte.
EXTENDED_ALPHABET = ALPHABET * 4
REJECTION_THRESHOLD = len(EXTENDED_ALPHABET)


def map_byte(raw: int, redraw: Callable[[], int]) -> str:
    """Map one raw random byte to an alphabet symbol without modulo bias.

    Args:
        raw: Random byte value in [0, 256).
        redraw: Returns a fresh uniform integer in [0, 62); called only when
            *raw* falls in the rejected range [248, 256).

    Returns:
        A single alphabet character.
    """
    if not 0 <= raw <= 0xFF:
        raise ValueError(f"raw byte out of range: {raw}")
    if raw < REJECTION_THRESHOLD:
        return EXTENDED_ALPHABET[raw]
    return ALPHABET[redraw()]


def check_length(n: int) -> int:
    """Return *n* if it is a usable identifier length, else raise."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidLengthError(
            f"identifier length must be an int, got {type(n).__name__}",
            field="n",
        )
    if n < 1:
        raise InvalidLengthError(
            "identifier length must be at least 1", field="n", details={"n": n}
        )
    return n
