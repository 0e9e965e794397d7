"""
RNG - Serve Direction
=====================

Picks the horizontal direction of a freshly served ball.
"""

from __future__ import annotations

import random
from typing import Optional


class ServeRng:
    """
    Uniform pick between a leftward and rightward serve.

    Seeded so that tests and environment resets are reproducible.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the serve RNG.

        Args:
            seed: Random seed for reproducibility. Random if None.
        """
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def pick_direction(self, speed: float) -> float:
        """
        Pick a horizontal serve velocity.

        Args:
            speed: Magnitude of the serve.

        Returns:
            Either -speed or +speed with equal probability.
        """
        return self._rng.choice((-speed, speed))

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reseed the generator.

        Args:
            seed: New random seed. Continues the current sequence if None.
        """
        if seed is not None:
            self._seed = seed
            self._rng = random.Random(seed)
