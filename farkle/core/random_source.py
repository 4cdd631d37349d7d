"""Seedable sources of bounded random integers for rolling dice."""
from typing import Optional

import numpy as np


MASK_32 = 0xFFFFFFFF
DEFAULT_STATE = 0xACE1


class RandomSource:
    """Xorshift shift-register generator with 32-bit state.

    Each draw advances the state by exactly one step, so the same seed and
    the same sequence of draws always reproduce the same dice.
    """

    def __init__(self, seed: int = 0):
        self.state = DEFAULT_STATE
        self.seed(seed)

    def seed(self, value: int):
        """Reset the state to the low 32 bits of value.

        A seed whose low 32 bits are all zero keeps the current state, since
        zero is a fixed point of the generator.
        """
        if value < 0:
            raise ValueError(f"Seed must be non-negative, got {value}")
        value &= MASK_32
        if value:
            self.state = value

    def _advance(self) -> int:
        s = self.state
        s ^= s >> 7
        s = (s ^ (s << 9)) & MASK_32
        s ^= s >> 13
        self.state = s
        return s

    def next_random(self, limit: int) -> int:
        """Return an integer in [0, limit)."""
        if limit <= 0:
            raise ValueError(f"Limit must be positive, got {limit}")
        return self._advance() % limit


class NumpyRandomSource:
    """Same contract as RandomSource, backed by numpy's Generator."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def seed(self, value: int):
        if value:
            self._rng = np.random.default_rng(value)

    def next_random(self, limit: int) -> int:
        if limit <= 0:
            raise ValueError(f"Limit must be positive, got {limit}")
        return int(self._rng.integers(0, limit))

    def integers(self, low: int, high: int, size) -> np.ndarray:
        """Vectorised draws for simulations."""
        return self._rng.integers(low, high, size=size)
