"""
NoiseSource - Seedable random perturbations for the simulation

All randomness used by the models goes through this class so that a given
seed reproduces the exact same trajectory.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class NoiseSource:
    """Thin wrapper over random.Random with the draws the models need."""

    def __init__(self, seed: Optional[int] = 42):
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform(self, lo: float, hi: float) -> float:
        """Uniform draw in [lo, hi)."""
        return lo + (hi - lo) * self._rng.random()

    def jitter(self, half_width: float) -> float:
        """Symmetric draw in [-half_width, half_width)."""
        return self.uniform(-half_width, half_width)

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        return self._rng.random() < probability

    def choice(self, items: Sequence[T]) -> T:
        return items[int(self._rng.random() * len(items))]

    def reset(self) -> None:
        """Restart the sequence from the original seed."""
        self._rng = random.Random(self.seed)


class ZeroNoise(NoiseSource):
    """
    Noise source that never perturbs anything.

    Useful to check the deterministic part of the simplified models.
    """

    def __init__(self):
        super().__init__(seed=0)

    def uniform(self, lo: float, hi: float) -> float:
        return lo

    def jitter(self, half_width: float) -> float:
        return 0.0

    def chance(self, probability: float) -> bool:
        return False
