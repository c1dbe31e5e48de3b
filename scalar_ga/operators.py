#!/usr/bin/env python3
"""
Genetic Algorithm Operators
Gaussian mutation for real-valued genomes
"""

import math
from typing import Iterable, List

from .common import (
    clamp, validate_bounds, validate_probability, InvalidConfiguration,
    DEFAULT_MUTATION_PROBABILITY, DEFAULT_MUTATION_STDDEV, DEFAULT_MIN_X, DEFAULT_MAX_X
)
from .random_source import RandomSource


def _validate_stddev(step_stddev: float) -> float:
    step_stddev = float(step_stddev)
    if not math.isfinite(step_stddev) or step_stddev < 0:
        raise InvalidConfiguration(f"step_stddev must be finite and non-negative, got {step_stddev}")
    return step_stddev


def mutate(genome: float, mutation_probability: float, min_bound: float, max_bound: float,
           step_stddev: float, rng: RandomSource, clamp_to_bounds: bool = False) -> float:
    """Perturb a genome with zero-mean Gaussian noise

    With probability mutation_probability the genome is shifted by a draw from
    N(0, step_stddev); otherwise it is returned unchanged.

    Args:
        genome: Genome to mutate
        mutation_probability: Probability of applying the perturbation
        min_bound: Lower bound of the search interval
        max_bound: Upper bound of the search interval
        step_stddev: Standard deviation of the perturbation
        rng: Random source for the draws
        clamp_to_bounds: Clamp mutated genomes into [min_bound, max_bound]

    Returns:
        Mutated (or unchanged) genome
    """
    mutation_probability = validate_probability("mutation_probability", mutation_probability)
    validate_bounds(min_bound, max_bound)
    step_stddev = _validate_stddev(step_stddev)
    return _mutate(float(genome), mutation_probability, min_bound, max_bound,
                   step_stddev, rng, clamp_to_bounds)


def _mutate(genome, mutation_probability, min_bound, max_bound, step_stddev, rng, clamp_to_bounds):
    if rng.random() >= mutation_probability:
        return genome

    mutated = genome + rng.gaussian(0.0, step_stddev)
    if clamp_to_bounds:
        mutated = clamp(mutated, min_bound, max_bound)
    return mutated


class GaussianMutation:
    """Mutation operator with hyperparameters validated once at construction"""

    def __init__(self, mutation_probability: float = DEFAULT_MUTATION_PROBABILITY,
                 min_bound: float = DEFAULT_MIN_X, max_bound: float = DEFAULT_MAX_X,
                 step_stddev: float = DEFAULT_MUTATION_STDDEV, clamp_to_bounds: bool = False):
        """Initialize mutation operator

        Args:
            mutation_probability: Probability of mutating each genome
            min_bound: Lower bound of the search interval
            max_bound: Upper bound of the search interval
            step_stddev: Standard deviation of the Gaussian step
            clamp_to_bounds: Clamp mutated genomes into the bounds
        """
        self.mutation_probability = validate_probability("mutation_probability", mutation_probability)
        validate_bounds(min_bound, max_bound)
        self.min_bound = float(min_bound)
        self.max_bound = float(max_bound)
        self.step_stddev = _validate_stddev(step_stddev)
        self.clamp_to_bounds = clamp_to_bounds

    def mutate(self, genome: float, rng: RandomSource) -> float:
        """Mutate a single genome"""
        return _mutate(float(genome), self.mutation_probability, self.min_bound, self.max_bound,
                       self.step_stddev, rng, self.clamp_to_bounds)

    def mutate_all(self, genomes: Iterable[float], rng: RandomSource) -> List[float]:
        """Mutate each genome independently, in order"""
        return [self.mutate(g, rng) for g in genomes]

    def __repr__(self):
        return (f"GaussianMutation(p={self.mutation_probability}, "
                f"bounds=[{self.min_bound}, {self.max_bound}], "
                f"stddev={self.step_stddev}, clamp={self.clamp_to_bounds})")
