"""Unit tests for rid.streams.DualStreamGenerator (the fast path)."""

from __future__ import annotations

import random
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest
from structlog.testing import capture_logs

from rid.alphabet import ALPHABET
from rid.entropy import CryptoEntropySource
from rid.errors import EntropySourceFailure, InvalidLengthError
from rid.streams import DualStreamGenerator


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class FixedBytesStream(random.Random):
    """Stream whose byte draws are a fixed pattern; integer draws stay random."""

    pattern = b"\x00"

    def randbytes(self, n):
        return (self.pattern * n)[:n]


def _entropy(value: int = 7) -> MagicMock:
    source = MagicMock(spec=CryptoEntropySource)
    source.uniform_int63.return_value = value
    return source


def _stream(seed: int, pattern: bytes) -> FixedBytesStream:
    stream = FixedBytesStream(seed)
    stream.pattern = pattern
    return stream


def _patterned(pattern_a: bytes, pattern_b: bytes, entropy=None) -> DualStreamGenerator:
    streams = iter([_stream(1, pattern_a), _stream(2, pattern_b)])
    return DualStreamGenerator(
        entropy or _entropy(),
        seed_a=1,
        seed_b=2,
        stream_factory=lambda seed: next(streams),
    )


# ---------------------------------------------------------------------------
# Output shape
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("n", [1, 2, 3, 16, 20, 101])
def test_generate_length_and_alphabet(n):
    value = DualStreamGenerator().generate(n)
    assert len(value) == n
    assert set(value) <= set(ALPHABET)


def test_successive_values_differ():
    gen = DualStreamGenerator()
    assert gen.generate(16) != gen.generate(16)


@pytest.mark.parametrize("n", [0, -3, 2.0])
def test_generate_rejects_bad_length(n):
    with pytest.raises(InvalidLengthError):
        DualStreamGenerator().generate(n)


def test_streams_interleave_even_and_odd_positions():
    gen = _patterned(bytes(range(10)), bytes(range(26, 36)))
    # A feeds 0, 2, 4 -> A, B, C; B feeds 1, 3 -> a, b
    assert gen.generate(5) == "AaBbC"


def test_rejected_bytes_redraw_from_stream_a():
    gen = _patterned(b"\xfa", b"\xff")
    twin = random.Random(1)
    expected = "".join(ALPHABET[twin.randrange(62)] for _ in range(12))
    assert gen.generate(12) == expected


# ---------------------------------------------------------------------------
# Seeding
# ---------------------------------------------------------------------------


def test_fixed_seeds_are_reproducible():
    first = DualStreamGenerator(_entropy(), seed_a=11, seed_b=22)
    second = DualStreamGenerator(_entropy(), seed_a=11, seed_b=22)
    assert [first.generate(20) for _ in range(50)] == [
        second.generate(20) for _ in range(50)
    ]


def test_different_seeds_diverge():
    first = DualStreamGenerator(_entropy(), seed_a=11, seed_b=22)
    second = DualStreamGenerator(_entropy(), seed_a=11, seed_b=23)
    assert first.generate(20) != second.generate(20)


def test_unseeded_streams_draw_seeds_from_entropy():
    entropy = _entropy()
    DualStreamGenerator(entropy)
    assert entropy.uniform_int63.call_count == 2


def test_fixed_seeds_skip_entropy():
    entropy = _entropy()
    DualStreamGenerator(entropy, seed_a=1, seed_b=2)
    entropy.uniform_int63.assert_not_called()


def test_construction_fails_without_entropy():
    entropy = MagicMock(spec=CryptoEntropySource)
    entropy.uniform_int63.side_effect = EntropySourceFailure("down")
    with pytest.raises(EntropySourceFailure):
        DualStreamGenerator(entropy)


# ---------------------------------------------------------------------------
# Opportunistic reseed
# ---------------------------------------------------------------------------


def test_reseeds_when_both_first_bytes_are_zero():
    entropy = _entropy()
    gen = _patterned(b"\x00", b"\x00", entropy)

    with capture_logs() as logs:
        assert gen.generate(4) == "AAAA"

    assert gen.reseed_count == 1
    assert entropy.uniform_int63.call_count == 2
    assert [entry["event"] for entry in logs] == ["stream_reseeded"]


@pytest.mark.parametrize(
    "pattern_a, pattern_b",
    [(b"\x00", b"\x01"), (b"\x01", b"\x00"), (b"\x05", b"\x09")],
    ids=["only_a_zero", "only_b_zero", "neither_zero"],
)
def test_no_reseed_unless_both_zero(pattern_a, pattern_b):
    entropy = _entropy()
    gen = _patterned(pattern_a, pattern_b, entropy)
    gen.generate(8)
    assert gen.reseed_count == 0
    entropy.uniform_int63.assert_not_called()


def test_reseed_changes_stream_state():
    entropy = _entropy(value=99)
    gen = DualStreamGenerator(entropy, seed_a=1, seed_b=2)
    gen.reseed()

    fresh = DualStreamGenerator(_entropy(), seed_a=99, seed_b=99)
    assert gen.reseed_count == 1
    assert gen.generate(20) == fresh.generate(20)


# ---------------------------------------------------------------------------
# Concurrency and distribution
# ---------------------------------------------------------------------------


def test_concurrent_callers_get_valid_distinct_ids():
    gen = DualStreamGenerator()
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: gen.generate(20), range(4000)))

    assert len(set(ids)) == len(ids)
    assert all(len(i) == 20 and set(i) <= set(ALPHABET) for i in ids)


def test_symbol_distribution_is_flat():
    """100k single-symbol draws: every symbol within 15% of 1/62.

    Naive ``byte % 62`` would put the first eight symbols about 21% above
    the mean and fail here.
    """
    gen = DualStreamGenerator(_entropy(), seed_a=1234, seed_b=5678)
    samples = 100_000
    counts = Counter(gen.generate(1) for _ in range(samples))
    expected = samples / 62

    assert set(counts) == set(ALPHABET)
    for symbol, count in counts.items():
        assert abs(count - expected) < expected * 0.15, symbol
