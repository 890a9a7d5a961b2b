"""
Public identifier generators.

Three families share one alphabet:

- ``new_identifier*``: fast dual-stream path, the default for most ids.
- ``new_identifier*_crypto``: every symbol from the OS CSPRNG.
- ``new_identifier*_math``: the global ``random`` module. For tests and
  benchmarks only; no uniqueness or security guarantee.

16 characters give about 95.3 bits of entropy: roughly 10**10 ids before
the birthday-bound collision probability reaches 10**-9. 20 characters give
about 119.1 bits.

The default generators below are created once at import and live for the
whole process.
"""

from __future__ import annotations

import random
import re

from .alphabet import ALPHABET, check_length
from .entropy import CryptoGenerator
from .errors import InvalidNumericIdError
from .signing import sign
from .streams import DualStreamGenerator

NUMERIC_ID_MODULUS = 1_000_000_000

_NUMERIC_RE = re.compile(r"[0-9]+")

crypto_generator = CryptoGenerator()
fast_generator = DualStreamGenerator(crypto_generator.source)


# ---------------------------------------------------------------------------
# Fast path
# ---------------------------------------------------------------------------


def new_identifier(n: int) -> str:
    """Generate an *n*-character identifier on the fast path."""
    return fast_generator.generate(n)


def new_identifier16() -> str:
    return fast_generator.generate(16)


def new_identifier20() -> str:
    return fast_generator.generate(20)


def new_signed_identifier20(secret: str) -> str:
    """Generate a 20-character identifier followed by its 16-char signature."""
    identifier = fast_generator.generate(20)
    return identifier + sign(identifier, secret)


# ---------------------------------------------------------------------------
# Crypto path
# ---------------------------------------------------------------------------


def new_identifier_crypto(n: int) -> str:
    """Generate an *n*-character identifier with every symbol from the CSPRNG."""
    return crypto_generator.generate(n)


def new_identifier16_crypto() -> str:
    return crypto_generator.generate(16)


def new_identifier20_crypto() -> str:
    return crypto_generator.generate(20)


def uniform_int63_crypto() -> int:
    """Return a uniform non-negative 63-bit integer from the CSPRNG."""
    return crypto_generator.uniform_int63_crypto()


# ---------------------------------------------------------------------------
# Non-cryptographic substitutes (tests and benchmarks only)
# ---------------------------------------------------------------------------


def new_identifier_math(n: int) -> str:
    check_length(n)
    return "".join(random.choice(ALPHABET) for _ in range(n))


def new_identifier16_math() -> str:
    return new_identifier_math(16)


def new_identifier20_math() -> str:
    return new_identifier_math(20)


# ---------------------------------------------------------------------------
# Numeric ids
# ---------------------------------------------------------------------------


def new_numeric_id() -> str:
    """Generate a decimal id in [0, 1_000_000_000).

    Not zero-padded, so short values occur (about 10% have fewer than nine
    digits). Reduction of a 63-bit draw; the residual bias is below 10**-9.

    Pad before dashing, since ``format_dashed_numeric_id`` needs 9 digits:

        >>> format_dashed_numeric_id(new_numeric_id().zfill(9))  # doctest: +SKIP
        '012-345-678'
    """
    return str(uniform_int63_crypto() % NUMERIC_ID_MODULUS)


def format_dashed_numeric_id(nid: str) -> str:
    """Format a numeric id for display as ``XXX-XXX-XXXX``.

    Args:
        nid: Decimal string of at least 9 digits; 9 and 10 digits are the
            intended inputs, longer tails stay in the last group.

    Returns:
        ``"123-456-789"`` for ``"123456789"``, ``"123-456-7890"`` for
        ``"1234567890"``.

    Raises:
        InvalidNumericIdError: *nid* is not a string of at least 9 digits.
    """
    if not isinstance(nid, str) or not _NUMERIC_RE.fullmatch(nid):
        raise InvalidNumericIdError(
            "numeric id must be a string of digits", field="nid"
        )
    if len(nid) < 9:
        raise InvalidNumericIdError(
            "numeric id must have at least 9 digits",
            field="nid",
            details={"length": len(nid)},
        )
    return f"{nid[:3]}-{nid[3:6]}-{nid[6:]}"
