"""
Cryptographic random source and the pure-crypto identifier generator.

Everything here draws from the operating system CSPRNG through
``random.SystemRandom``, whose bounded draws use rejection sampling on
``getrandbits`` and so carry no modulo bias. There is no shared mutable
state: both classes are safe for any number of concurrent callers.

If the OS source fails there is no safe fallback. The failure is logged and
raised as ``EntropySourceFailure``; it is never retried.
"""

from __future__ import annotations

import random
from typing import Optional

from .alphabet import ALPHABET, ALPHABET_SIZE, check_length
from .errors import EntropySourceFailure
from .logger import get_logger

log = get_logger(__name__)

# Exclusive upper bound for 63-bit draws: the largest signed 64-bit value.
MAX_INT63 = (1 << 63) - 1


class CryptoEntropySource:
    """Uniform integers from the OS CSPRNG.

    Args:
        rng: Object exposing ``randrange``; defaults to a fresh
            ``random.SystemRandom``. Injectable so tests can simulate a
            failing source.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.SystemRandom()

    def _draw(self, upper: int) -> int:
        try:
            return self._rng.randrange(upper)
        except (OSError, NotImplementedError) as exc:
            log.critical(
                "entropy_source_failure",
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise EntropySourceFailure(
                "operating system random source failed",
                details={"error_type": type(exc).__name__},
            ) from exc

    def uniform_int63(self) -> int:
        """Return a uniform non-negative integer below 2**63 - 1."""
        return self._draw(MAX_INT63)

    def uniform_mod62(self) -> int:
        """Return a uniform integer in [0, 62)."""
        return self._draw(ALPHABET_SIZE)


class CryptoGenerator:
    """Identifiers with every symbol drawn straight from the CSPRNG.

    Slower than the dual-stream generator but each symbol is exactly
    uniform. Use it where identifiers double as bearer secrets.
    """

    def __init__(self, source: Optional[CryptoEntropySource] = None) -> None:
        self.source = source if source is not None else CryptoEntropySource()

    def generate(self, n: int) -> str:
        check_length(n)
        draw = self.source.uniform_mod62
        return "".join(ALPHABET[draw()] for _ in range(n))

    def uniform_int63_crypto(self) -> int:
        """Seeding primitive for the fast generator and numeric ids."""
        return self.source.uniform_int63()
