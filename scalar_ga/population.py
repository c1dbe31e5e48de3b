#!/usr/bin/env python3
"""
GA Population Model
Fixed-size, read-only population of real-valued genomes and its uniform initializer
"""

from typing import Iterable, Iterator, List

import numpy as np

from .common import get_logger, validate_bounds, validate_positive_int, InvalidConfiguration
from .random_source import RandomSource

logger = get_logger(__name__)


class Population:
    """Ordered, immutable collection of genomes representing one generation"""

    def __init__(self, genomes: Iterable[float], generation: int = 0):
        """Initialize population

        Args:
            genomes: Genome values, stored as double-precision floats
            generation: Generation index this population belongs to
        """
        if not isinstance(genomes, np.ndarray):
            genomes = list(genomes)
        values = np.array(genomes, dtype=np.float64)
        if values.ndim != 1:
            raise InvalidConfiguration(f"Genomes must be one-dimensional, got shape {values.shape}")
        values.flags.writeable = False

        self._genomes = values
        self.generation = generation

    @property
    def size(self) -> int:
        return int(self._genomes.size)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[float]:
        return (float(g) for g in self._genomes)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.to_list()[index]
        return float(self._genomes[index])

    def __eq__(self, other) -> bool:
        if isinstance(other, Population):
            other = other._genomes
        try:
            other = np.asarray(other, dtype=np.float64)
        except (TypeError, ValueError):
            return NotImplemented
        return other.shape == self._genomes.shape and bool(np.array_equal(other, self._genomes))

    __hash__ = None

    def as_array(self) -> np.ndarray:
        """Return a writable copy of the genomes"""
        return self._genomes.copy()

    def to_list(self) -> List[float]:
        return [float(g) for g in self._genomes]

    def view(self) -> np.ndarray:
        """Read-only view of the genomes"""
        return self._genomes

    def __repr__(self):
        return f"Population(generation={self.generation}, size={self.size})"


class PopulationInitializer:
    """Creates initial populations by uniform sampling over the search interval"""

    def __init__(self, min_x: float, max_x: float):
        """Initialize population initializer

        Args:
            min_x: Lower bound of the sampling interval
            max_x: Upper bound of the sampling interval
        """
        validate_bounds(min_x, max_x)
        self.min_x = float(min_x)
        self.max_x = float(max_x)

    def create_population(self, size: int, rng: RandomSource,
                          generation: int = 0) -> Population:
        """Create population of independent uniform draws

        Args:
            size: Number of genomes
            rng: Random source for the draws
            generation: Generation index to tag the population with

        Returns:
            New population
        """
        size = validate_positive_int("population_size", size)
        genomes = rng.uniform(self.min_x, self.max_x, size)

        logger.debug(f"Created population of {size} genomes in [{self.min_x}, {self.max_x}]")
        return Population(genomes, generation=generation)
