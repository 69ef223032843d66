"""Seedable string-keyed RNG for deterministic galaxy generation."""

import random

_MASK32 = 0xFFFFFFFF
_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619
_MULBERRY_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296


def hash_seed(seed: str) -> int:
    """Hash a seed string into a 32-bit state (FNV-1a over UTF-16 code units).

    Args:
        seed: Arbitrary seed string

    Returns:
        Unsigned 32-bit integer
    """
    h = _FNV_OFFSET
    data = seed.encode("utf-16-le")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = ((h ^ unit) * _FNV_PRIME) & _MASK32
    return h


class GameRNG:
    """Mulberry32 stream keyed by a string seed.

    All randomness used by map generation goes through this class. The output
    sequence is a pure function of the seed and the number of calls made, so
    the same seed always produces the same galaxy on every platform.
    """

    def __init__(self, seed: str):
        """Initialize RNG with given seed.

        Args:
            seed: Seed string. An empty seed is replaced by a random one,
                the only non-deterministic path.
        """
        if not seed:
            seed = str(random.random())
        self.seed = seed
        self.state = hash_seed(seed)

    def random(self) -> float:
        """Return random float in [0.0, 1.0).

        Returns:
            Random float between 0.0 and 1.0
        """
        self.state = (self.state + _MULBERRY_INCREMENT) & _MASK32
        state = self.state
        t = ((state ^ (state >> 15)) * (state | 1)) & _MASK32
        t = ((t + (((t ^ (t >> 7)) * (t | 61)) & _MASK32)) & _MASK32) ^ t
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_POW_32

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive.

        Args:
            a: Lower bound (inclusive)
            b: Upper bound (inclusive)

        Returns:
            Random integer between a and b
        """
        return a + int(self.random() * (b - a + 1))

    def get_state(self) -> int:
        """Get the current stream position for serialization."""
        return self.state

    def set_state(self, state: int) -> None:
        """Resume the stream from a value returned by get_state."""
        self.state = state & _MASK32
