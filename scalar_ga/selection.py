#!/usr/bin/env python3
"""
Genetic Algorithm Selection Strategies
Parent selection operators sharing one select() contract: tournament and roulette wheel
"""

from abc import ABC, abstractmethod
from typing import List

import numpy as np

from .common import (
    validate_bool, validate_positive_int, InvalidConfiguration, EmptyPopulation,
    DEFAULT_TOURNAMENT_SIZE
)
from .fitness import FitnessFunction
from .population import Population
from .random_source import RandomSource


class SelectionStrategy(ABC):
    """Base class for parent selection strategies"""

    name = "selection"

    def select(self, population: Population, fitness_fn, count: int,
               rng: RandomSource) -> List[float]:
        """Select parents from population, with replacement

        Args:
            population: Population to draw from
            fitness_fn: FitnessFunction or plain callable
            count: Number of parents to select
            rng: Random source for the draws

        Returns:
            List of selected genomes of length count
        """
        if not isinstance(population, Population):
            population = Population(population)
        if len(population) == 0:
            raise EmptyPopulation(f"{self.name} selection invoked on an empty population")
        count = validate_positive_int("count", count)

        return self._select(population, FitnessFunction.wrap(fitness_fn), count, rng)

    def validate_for(self, population_size: int):
        """Check this strategy can run on populations of the given size

        Raises:
            InvalidConfiguration: If the strategy cannot select from such a population
        """

    @abstractmethod
    def _select(self, population: Population, fitness_fn: FitnessFunction, count: int,
                rng: RandomSource) -> List[float]:
        """Strategy-specific selection on validated arguments"""

    def __repr__(self):
        return f"{type(self).__name__}()"


class TournamentSelection(SelectionStrategy):
    """Select the fittest of k randomly drawn individuals, once per parent"""

    name = "tournament"

    def __init__(self, tournament_size: int = DEFAULT_TOURNAMENT_SIZE,
                 with_replacement: bool = True):
        """Initialize tournament selection

        Args:
            tournament_size: Number of participants per tournament (k >= 1)
            with_replacement: Draw participants with replacement; when False the
                participants of one tournament are distinct individuals
        """
        self.tournament_size = validate_positive_int("tournament_size", tournament_size)
        self.with_replacement = validate_bool("with_replacement", with_replacement)

    def validate_for(self, population_size):
        if not self.with_replacement and self.tournament_size > population_size:
            raise InvalidConfiguration(
                f"tournament_size {self.tournament_size} exceeds population size {population_size} "
                f"for tournaments without replacement")

    def _select(self, population, fitness_fn, count, rng):
        self.validate_for(len(population))
        genomes = population.view()
        k = self.tournament_size

        selected = []
        for _ in range(count):
            if self.with_replacement:
                participants = rng.integers(len(population), k)
            else:
                participants = rng.permutation_prefix(len(population), k)

            scores = fitness_fn.evaluate_population(genomes[participants])
            # argmax returns the first maximum, i.e. the earliest draw on ties
            winner = participants[int(np.argmax(scores))]
            selected.append(float(genomes[winner]))

        return selected

    def __repr__(self):
        return (f"TournamentSelection(tournament_size={self.tournament_size}, "
                f"with_replacement={self.with_replacement})")


class RouletteSelection(SelectionStrategy):
    """Fitness-proportionate selection over shifted fitness weights

    Each individual gets weight ``fitness - min(fitness) + 1``, so every weight
    is at least 1 and equal fitness yields a uniform distribution.
    """

    name = "roulette"

    def selection_weights(self, population: Population, fitness_fn) -> np.ndarray:
        """Unnormalized selection weight per individual

        When the weights or their total exceed the float range they are returned
        divided by the largest absolute fitness, which leaves the selection
        probabilities unchanged.
        """
        scores = FitnessFunction.wrap(fitness_fn).evaluate_population(population.view())
        lowest = scores.min()
        with np.errstate(over='ignore'):
            weights = scores - lowest + 1.0
            total = weights.sum()
        if np.isfinite(total):
            return weights

        scale = np.abs(scores).max()
        return (scores / scale - lowest / scale) + 1.0 / scale

    def selection_probabilities(self, population: Population, fitness_fn) -> np.ndarray:
        """Normalized selection probability per individual"""
        if not isinstance(population, Population):
            population = Population(population)
        if len(population) == 0:
            raise EmptyPopulation("roulette selection invoked on an empty population")
        weights = self.selection_weights(population, fitness_fn)
        return weights / weights.sum()

    def _select(self, population, fitness_fn, count, rng):
        weights = self.selection_weights(population, fitness_fn)
        indices = rng.weighted_indices(weights, count)
        genomes = population.view()
        return [float(genomes[i]) for i in indices]


SELECTION_METHODS = {
    TournamentSelection.name: TournamentSelection,
    RouletteSelection.name: RouletteSelection,
}


def create_selection_strategy(method: str,
                              tournament_size: int = DEFAULT_TOURNAMENT_SIZE,
                              with_replacement: bool = True) -> SelectionStrategy:
    """Build a selection strategy by name

    Args:
        method: "tournament" or "roulette"
        tournament_size: Participants per tournament (tournament only)
        with_replacement: Participant sampling mode (tournament only)

    Returns:
        Configured selection strategy
    """
    key = str(method).lower()
    if key not in SELECTION_METHODS:
        valid = ', '.join(sorted(SELECTION_METHODS))
        raise InvalidConfiguration(f"Unknown selection method '{method}' (expected one of: {valid})")

    if key == TournamentSelection.name:
        return TournamentSelection(tournament_size, with_replacement=with_replacement)
    return RouletteSelection()
