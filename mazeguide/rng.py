"""Seedable SplitMix64 random source for reproducible mazes and goal placement."""

from __future__ import annotations

import random
import time
from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

MASK64 = (1 << 64) - 1
GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_MIX1 = 0xBF58476D1CE4E5B9
_MIX2 = 0x94D049BB133111EB


def splitmix64(state: int) -> int:
    """Scramble a 64-bit counter value into a well-mixed output word."""

    z = state & MASK64
    z = ((z ^ (z >> 30)) * _MIX1) & MASK64
    z = ((z ^ (z >> 27)) * _MIX2) & MASK64
    return z ^ (z >> 31)


class SplitMix64(random.Random):
    """Counter-based generator compatible with the :class:`random.Random` API.

    The state advances by a fixed odd increment on every draw and each output
    is the scrambled counter. ``randbelow`` uses multiply-shift rejection so
    bounded draws stay bit-identical for a given seed regardless of the host
    ``random`` implementation. Without a seed the generator is seeded from
    the wall clock and is not reproducible across runs.
    """

    VERSION = "splitmix64-1"

    def __init__(self, seed: Optional[int] = None) -> None:
        self._state = 0
        self.seeded = False
        super().__init__(seed)

    def seed(self, a: Optional[int] = None, version: int = 2) -> None:  # type: ignore[override]
        self.seeded = a is not None
        if a is None:
            a = time.time_ns()
        if not isinstance(a, int):
            raise TypeError("SplitMix64 seeds must be integers")
        self.initial_seed = a & MASK64
        self._state = (self.initial_seed + GOLDEN_GAMMA) & MASK64
        self.gauss_next = None

    def getstate(self) -> Tuple[str, int]:
        return self.VERSION, self._state

    def setstate(self, state: Tuple[str, int]) -> None:
        version, value = state
        if version != self.VERSION:
            raise ValueError(f"Unsupported state version: {version!r}")
        self._state = int(value) & MASK64
        self.gauss_next = None

    def next_u64(self) -> int:
        self._state = (self._state + GOLDEN_GAMMA) & MASK64
        return splitmix64(self._state)

    def random(self) -> float:
        return (self.next_u64() >> 11) * (1.0 / (1 << 53))

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        result = 0
        filled = 0
        while filled < k:
            take = min(64, k - filled)
            result |= (self.next_u64() >> (64 - take)) << filled
            filled += take
        return result

    def randbelow(self, bound: int) -> int:
        """Return a uniform integer in ``[0, bound)``."""

        if bound <= 0:
            raise ValueError("bound must be positive")
        if bound > MASK64:
            return super()._randbelow(bound)
        product = self.next_u64() * bound
        low = product & MASK64
        if low < bound:
            threshold = ((1 << 64) - bound) % bound
            while low < threshold:
                product = self.next_u64() * bound
                low = product & MASK64
        return product >> 64

    def randint_between(self, low: int, high: int) -> int:
        """Return a uniform integer in ``[low, high)``."""

        if high <= low:
            raise ValueError(f"Empty range [{low}, {high})")
        return low + self.randbelow(high - low)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.randbelow(len(seq))]


__all__ = ["SplitMix64", "splitmix64", "GOLDEN_GAMMA", "MASK64"]
