#!/usr/bin/env python3
"""
Random Source
Seedable pseudorandom generator threaded explicitly through every stochastic GA operation
"""

from typing import Optional, Sequence

import numpy as np

from .common import InvalidConfiguration


class RandomSource:
    """Explicit random number source backed by a numpy Generator

    Each instance keeps its own generator state, so two sources built from the
    same seed produce the same sequence of draws regardless of any other
    randomness used in the process.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize random source

        Args:
            seed: Seed for the underlying generator (None for OS entropy)
        """
        self.seed = seed
        self._generator = np.random.default_rng(seed)

    def random(self) -> float:
        """Uniform draw in [0, 1)"""
        return float(self._generator.random())

    def uniform(self, low: float, high: float, size: Optional[int] = None):
        """Uniform draw(s) in [low, high]"""
        if size is None:
            return float(self._generator.uniform(low, high))
        return self._generator.uniform(low, high, size)

    def gaussian(self, mean: float = 0.0, stddev: float = 1.0, size: Optional[int] = None):
        """Gaussian draw(s) with the given mean and standard deviation"""
        if stddev < 0:
            raise InvalidConfiguration(f"Standard deviation must be non-negative, got {stddev}")
        if size is None:
            return float(self._generator.normal(mean, stddev))
        return self._generator.normal(mean, stddev, size)

    def integers(self, high: int, size: Optional[int] = None):
        """Uniform index draw(s) in [0, high)"""
        if high < 1:
            raise InvalidConfiguration(f"Cannot draw indices from an empty range (high={high})")
        if size is None:
            return int(self._generator.integers(0, high))
        return self._generator.integers(0, high, size)

    def permutation_prefix(self, n: int, k: int) -> np.ndarray:
        """Draw k distinct indices in [0, n) in random order"""
        if k > n:
            raise InvalidConfiguration(f"Cannot draw {k} distinct indices from {n}")
        return self._generator.choice(n, size=k, replace=False)

    def weighted_indices(self, weights: Sequence[float], size: int) -> np.ndarray:
        """Sample indices with replacement according to weights

        Args:
            weights: Non-negative weights, one per index
            size: Number of indices to draw

        Returns:
            Array of drawn indices
        """
        weights = np.asarray(weights, dtype=np.float64)
        if weights.ndim != 1 or weights.size == 0:
            raise InvalidConfiguration("Weights must be a non-empty one-dimensional sequence")
        if np.any(weights < 0) or not np.all(np.isfinite(weights)):
            raise InvalidConfiguration("Weights must be finite and non-negative")
        total = weights.sum()
        if total <= 0:
            raise InvalidConfiguration("Weights must have a positive sum")
        return self._generator.choice(weights.size, size=size, replace=True, p=weights / total)

    def __repr__(self):
        return f"RandomSource(seed={self.seed!r})"
