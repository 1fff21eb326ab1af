"""Random number generation utilities."""

import random
from typing import Optional, Tuple

class RandomUtils:
    """Utility functions for random number generation."""

    @staticmethod
    def make_rng(seed: Optional[int] = None) -> random.Random:
        """Create an independent generator; unseeded unless a seed is given."""
        return random.Random(seed)

    @staticmethod
    def roll_range(rng, value_range: Tuple[int, int]) -> int:
        """Roll uniformly within an inclusive (low, high) range.

        ``rng`` is anything with a ``randint`` method, so tests can pass a
        seeded ``random.Random`` or a stub.
        """
        low, high = value_range
        if low > high:
            raise ValueError(f"Invalid range: {low} > {high}")
        return rng.randint(low, high)
