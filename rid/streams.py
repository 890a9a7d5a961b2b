"""
Fast identifier generator: two pseudorandom streams behind one lock.

Stream A feeds even output positions, stream B odd ones, so a weakness in
either stream alone shows up in only half of the symbols. Raw bytes go
through ``map_byte``; rejected bytes are replaced by stream A's own bounded
draw.

Reseeding is opportunistic: when the first byte drawn from *both* streams
in one call is zero (probability 2**-16) both streams are reseeded from the
OS CSPRNG. No timer or counter is involved. This bounds how long a seed
lives only in expectation; treat the fast path as best-effort and use
``CryptoGenerator`` where exact uniformity matters.
"""

from __future__ import annotations

import random
import threading
from functools import partial
from typing import Callable, Optional

from .alphabet import ALPHABET_SIZE, check_length, map_byte
from .entropy import CryptoEntropySource
from .logger import get_logger

log = get_logger(__name__)

StreamFactory = Callable[[int], random.Random]


class DualStreamGenerator:
    """Two seeded streams plus the lock that serializes every draw from them.

    Args:
        entropy: Seed source; defaults to a fresh ``CryptoEntropySource``.
        seed_a: Fixed seed for stream A (tests); drawn from *entropy* if None.
        seed_b: Fixed seed for stream B (tests); drawn from *entropy* if None.
        stream_factory: Builds a stream from a seed. Defaults to
            ``random.Random`` (Mersenne Twister).
    """

    def __init__(
        self,
        entropy: Optional[CryptoEntropySource] = None,
        *,
        seed_a: Optional[int] = None,
        seed_b: Optional[int] = None,
        stream_factory: StreamFactory = random.Random,
    ) -> None:
        self._entropy = entropy if entropy is not None else CryptoEntropySource()
        self._lock = threading.Lock()
        self._stream_a = stream_factory(
            seed_a if seed_a is not None else self._entropy.uniform_int63()
        )
        self._stream_b = stream_factory(
            seed_b if seed_b is not None else self._entropy.uniform_int63()
        )
        self.reseed_count = 0

    def generate(self, n: int) -> str:
        """Return an *n*-symbol identifier. Serialized across all callers."""
        check_length(n)
        half = n // 2 + 1
        with self._lock:
            raw_a = self._stream_a.randbytes(half)
            raw_b = self._stream_b.randbytes(half)
            redraw = partial(self._stream_a.randrange, ALPHABET_SIZE)

            symbols = []
            for i in range(n):
                raw = raw_a[i // 2] if i % 2 == 0 else raw_b[i // 2]
                symbols.append(map_byte(raw, redraw))

            if raw_a[0] == 0 and raw_b[0] == 0:
                self._reseed_locked()
        return "".join(symbols)

    def reseed(self) -> None:
        """Reseed both streams from the crypto source now."""
        with self._lock:
            self._reseed_locked()

    def _reseed_locked(self) -> None:
        self._stream_a.seed(self._entropy.uniform_int63())
        self._stream_b.seed(self._entropy.uniform_int63())
        self.reseed_count += 1
        log.debug("stream_reseeded", reseed_count=self.reseed_count)
