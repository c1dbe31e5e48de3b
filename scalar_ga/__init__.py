#!/usr/bin/env python3
"""
Scalar Genetic Algorithm Package
Minimal evolutionary optimization over a one-dimensional real-valued search space
"""

# Core components
from .random_source import RandomSource
from .population import Population, PopulationInitializer
from .optimizer import EvolutionEngine, EngineState, GAConfig, GAResults, run_evolution

# Fitness evaluation
from .fitness import FitnessFunction, FitnessObjective, LANDSCAPES, get_landscape

# Genetic operators
from .operators import GaussianMutation, mutate
from .selection import (
    SelectionStrategy, TournamentSelection, RouletteSelection, create_selection_strategy
)

# Analysis components
from .analysis import GenerationStatistics, summarize_run

# Configuration
from .config import RunConfiguration, config_from_dict, load_config, save_config

# Common utilities
from .common import (
    GAError, InvalidConfiguration, EmptyPopulation, setup_logging, get_logger
)

__version__ = "1.0.0"

__all__ = [
    # Core
    'RandomSource',
    'Population',
    'PopulationInitializer',
    'EvolutionEngine',
    'EngineState',
    'GAConfig',
    'GAResults',
    'run_evolution',

    # Fitness
    'FitnessFunction',
    'FitnessObjective',
    'LANDSCAPES',
    'get_landscape',

    # Operators
    'GaussianMutation',
    'mutate',
    'SelectionStrategy',
    'TournamentSelection',
    'RouletteSelection',
    'create_selection_strategy',

    # Analysis
    'GenerationStatistics',
    'summarize_run',

    # Configuration
    'RunConfiguration',
    'config_from_dict',
    'load_config',
    'save_config',

    # Errors and logging
    'GAError',
    'InvalidConfiguration',
    'EmptyPopulation',
    'setup_logging',
    'get_logger',
]
