from __future__ import annotations

import random
import string
from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


class Randomizer:
    """
    Seeded random source for every sampled mission attribute. Use to ensure
    reproducible results across runs when a seed is provided.

    All randomness in mission generation goes through one instance, so fixing
    the seed fixes the whole mission (apart from the clock).
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = random.Random(seed)

    def choice(self, options: Sequence[T]) -> T:
        return self.rng.choice(options)

    def uniform(self, low: float, high: float) -> float:
        return self.rng.uniform(low, high)

    def randint(self, low: int, high: int) -> int:
        """Inclusive on both ends, like ``random.randint``."""
        return self.rng.randint(low, high)

    def random(self) -> float:
        return self.rng.random()

    def letters(self, count: int) -> str:
        return "".join(self.rng.choice(string.ascii_uppercase) for _ in range(count))

    def digits(self, count: int) -> str:
        return "".join(self.rng.choice(string.digits) for _ in range(count))

    def weighted_choice(self, weighted: Sequence[Tuple[T, float]]) -> T:
        """
        Cumulative-threshold sample over ``(value, weight)`` pairs.

        Draws one uniform number and returns the first value whose running
        weight total reaches it. Weights are expected to sum to 1; if float
        error leaves the draw above the final total the first value is
        returned.
        """
        if not weighted:
            raise ValueError("weighted_choice needs at least one option")
        draw = self.rng.random()
        cumulative = 0.0
        for value, weight in weighted:
            cumulative += weight
            if draw <= cumulative:
                return value
        return weighted[0][0]
