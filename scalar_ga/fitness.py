#!/usr/bin/env python3
"""
Genetic Algorithm Fitness Evaluation
Wraps caller-supplied fitness functions and provides built-in one-dimensional landscapes
"""

import math
from enum import Enum
from typing import Callable, Dict, Any, Optional, Sequence

import numpy as np

from .common import InvalidConfiguration


class FitnessFunction:
    """Deterministic mapping from a genome to a real-valued fitness score"""

    def __init__(self, func: Callable[[float], float],
                 batch_func: Optional[Callable[[np.ndarray], Sequence[float]]] = None,
                 name: Optional[str] = None):
        """Initialize fitness function

        Args:
            func: Scalar fitness function, genome -> score
            batch_func: Optional vectorized equivalent of func, array -> scores
            name: Display name (defaults to the function name)
        """
        if not callable(func):
            raise InvalidConfiguration(f"Fitness function must be callable, got {func!r}")
        if batch_func is not None and not callable(batch_func):
            raise InvalidConfiguration(f"Batch fitness function must be callable, got {batch_func!r}")

        self.func = func
        self.batch_func = batch_func
        self.name = name or getattr(func, '__name__', 'fitness')

        # Performance tracking
        self.evaluations = 0

    @classmethod
    def wrap(cls, fitness) -> 'FitnessFunction':
        """Return fitness unchanged if already wrapped, else wrap the callable"""
        if isinstance(fitness, cls):
            return fitness
        return cls(fitness)

    def evaluate(self, genome: float) -> float:
        """Evaluate a single genome"""
        score = float(self.func(float(genome)))
        self.evaluations += 1
        if not math.isfinite(score):
            raise InvalidConfiguration(f"Fitness of genome {genome} is not finite: {score}")
        return score

    __call__ = evaluate

    def evaluate_population(self, genomes: Sequence[float]) -> np.ndarray:
        """Evaluate a batch of genomes

        The result equals element-wise application of evaluate().

        Args:
            genomes: Genomes to evaluate

        Returns:
            Array of fitness scores in genome order
        """
        genomes = np.asarray(genomes, dtype=np.float64)

        if self.batch_func is None:
            scores = np.array([self.func(float(g)) for g in genomes], dtype=np.float64)
        else:
            scores = np.asarray(self.batch_func(genomes), dtype=np.float64)
            if scores.shape != genomes.shape:
                raise InvalidConfiguration(
                    f"Batch fitness returned shape {scores.shape}, expected {genomes.shape}")

        self.evaluations += genomes.size

        if not np.all(np.isfinite(scores)):
            bad = genomes[~np.isfinite(scores)][0]
            raise InvalidConfiguration(f"Fitness of genome {bad} is not finite")
        return scores

    def get_fitness_stats(self) -> Dict[str, Any]:
        """Get evaluation statistics"""
        return {
            'name': self.name,
            'evaluations': self.evaluations,
            'vectorized': self.batch_func is not None
        }

    def reset_tracking(self):
        """Reset evaluation counter"""
        self.evaluations = 0

    def __repr__(self):
        return f"FitnessFunction({self.name!r})"


class FitnessObjective(Enum):
    """Built-in fitness landscapes"""
    IDENTITY = "identity"
    NEGATIVE_SQUARE = "negative_square"
    SINE_WAVE = "sine_wave"
    RASTRIGIN = "rastrigin"


def _identity(x):
    return x


def _negative_square(x):
    return -(x * x)


def _sine_wave(x):
    return x * np.sin(x)


def _rastrigin(x):
    # Negated so the global optimum at x = 0 is a maximum
    return -(10.0 + x * x - 10.0 * np.cos(2.0 * np.pi * x))


LANDSCAPES = {
    FitnessObjective.IDENTITY: _identity,
    FitnessObjective.NEGATIVE_SQUARE: _negative_square,
    FitnessObjective.SINE_WAVE: _sine_wave,
    FitnessObjective.RASTRIGIN: _rastrigin,
}


def get_landscape(name: str) -> FitnessFunction:
    """Build a FitnessFunction for a named built-in landscape

    The landscape functions are numpy ufunc compositions, so the same function
    serves as both the scalar and the batch evaluator.
    """
    try:
        objective = FitnessObjective(str(name).lower())
    except ValueError:
        valid = ', '.join(o.value for o in FitnessObjective)
        raise InvalidConfiguration(f"Unknown landscape '{name}' (expected one of: {valid})")

    func = LANDSCAPES[objective]
    return FitnessFunction(func, batch_func=func, name=objective.value)
