#!/usr/bin/env python3
"""
Genetic Algorithm Run Analysis
Per-generation statistics and whole-run summaries
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List

import numpy as np

from .common import EmptyPopulation
from .fitness import FitnessFunction
from .population import Population


@dataclass
class GenerationStatistics:
    """Fitness and genome statistics for one generation"""
    generation: int
    best_fitness: float
    mean_fitness: float
    worst_fitness: float
    fitness_std: float
    genome_mean: float
    genome_std: float
    best_genome: float

    @classmethod
    def from_population(cls, generation: int, population: Population,
                        fitness_fn) -> 'GenerationStatistics':
        """Compute statistics from a population"""
        if len(population) == 0:
            raise EmptyPopulation("Cannot compute statistics of an empty population")

        genomes = population.view()
        scores = FitnessFunction.wrap(fitness_fn).evaluate_population(genomes)
        best_idx = int(np.argmax(scores))

        return cls(
            generation=generation,
            best_fitness=float(scores[best_idx]),
            mean_fitness=float(np.mean(scores)),
            worst_fitness=float(np.min(scores)),
            fitness_std=float(np.std(scores)),
            genome_mean=float(np.mean(genomes)),
            genome_std=float(np.std(genomes)),
            best_genome=float(genomes[best_idx])
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def summarize_run(statistics: List[GenerationStatistics]) -> Dict[str, Any]:
    """Summarize a sequence of generation statistics

    Args:
        statistics: Statistics ordered by generation

    Returns:
        Summary dictionary (empty if no statistics were recorded)
    """
    if not statistics:
        return {}

    best_per_generation = [s.best_fitness for s in statistics]
    best_overall = max(statistics, key=lambda s: s.best_fitness)

    return {
        'generations': statistics[-1].generation,
        'best_fitness_achieved': best_overall.best_fitness,
        'best_genome_achieved': best_overall.best_genome,
        'best_generation': best_overall.generation,
        'final_best_fitness': best_per_generation[-1],
        'fitness_improvement': best_per_generation[-1] - best_per_generation[0],
        'avg_diversity': float(np.mean([s.genome_std for s in statistics])),
        'best_fitness_progression': best_per_generation,
        'mean_fitness_progression': [s.mean_fitness for s in statistics]
    }
