"""Source of randomness for the computer player. Injected into the service so tests can fix its output."""

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything able to draw an integer uniformly from [low, high)."""

    def generate_random_int(self, low: int, high: int) -> int:
        """Draw from low (inclusive) up to high (exclusive)."""
        ...


class SystemRandomSource:
    """RandomSource backed by Python's Mersenne Twister. Pass a seed for reproducible games."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def generate_random_int(self, low: int, high: int) -> int:
        return self._rng.randrange(low, high)
