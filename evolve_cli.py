#!/usr/bin/env python3
"""
Scalar GA Command Line Interface
Runs an evolution over a built-in fitness landscape and reports the result
"""

import argparse
import logging
import sys
from typing import List, Optional

from scalar_ga import (
    EvolutionEngine, InvalidConfiguration, RunConfiguration, config_from_dict,
    load_config, setup_logging, get_logger, FitnessObjective
)

logger = get_logger(__name__)

# Command line values that override config file parameters
OVERRIDES = (
    'landscape',
    'population_size',
    'generations',
    'selection',
    'tournament_size',
    'mutation_probability',
    'mutation_stddev',
    'min_x',
    'max_x',
    'seed',
    'clamp_to_bounds',
    'tournament_with_replacement',
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Scalar Genetic Algorithm - Command Line Interface',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Run configuration file (.json, .yaml or .yml)'
    )

    parser.add_argument(
        '--landscape', '-l',
        choices=[o.value for o in FitnessObjective],
        help='Built-in fitness landscape'
    )

    parser.add_argument(
        '--population-size', '-n',
        type=int,
        help='Number of genomes per generation'
    )

    parser.add_argument(
        '--generations', '-g',
        type=int,
        help='Number of generations to evolve'
    )

    parser.add_argument(
        '--selection', '-s',
        choices=['tournament', 'roulette'],
        help='Parent selection strategy'
    )

    parser.add_argument(
        '--tournament-size', '-k',
        type=int,
        help='Participants per tournament'
    )

    parser.add_argument(
        '--replacement',
        dest='tournament_with_replacement',
        action=argparse.BooleanOptionalAction,
        help='Draw tournament participants with replacement (--no-replacement draws distinct individuals)'
    )

    parser.add_argument(
        '--mutation-probability', '-p',
        type=float,
        help='Probability of mutating each offspring'
    )

    parser.add_argument(
        '--mutation-stddev',
        type=float,
        help='Standard deviation of the Gaussian mutation step'
    )

    parser.add_argument(
        '--min-x',
        type=float,
        help='Lower bound of the search interval'
    )

    parser.add_argument(
        '--max-x',
        type=float,
        help='Upper bound of the search interval'
    )

    parser.add_argument(
        '--seed',
        type=int,
        help='Random seed for a reproducible run'
    )

    parser.add_argument(
        '--clamp',
        dest='clamp_to_bounds',
        action=argparse.BooleanOptionalAction,
        help='Clamp mutated genomes into [min-x, max-x] (--no-clamp turns off a config file setting)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log every generation'
    )

    return parser


def resolve_configuration(args: argparse.Namespace) -> RunConfiguration:
    """Merge config file values with command line overrides"""
    data = load_config(args.config).to_dict() if args.config else {}

    for key in OVERRIDES:
        value = getattr(args, key)
        if value is not None:
            data[key] = value
    if args.verbose:
        data['verbose'] = True

    return config_from_dict(data)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    args = build_parser().parse_args(argv)
    setup_logging(logging.INFO if args.verbose else logging.WARNING)

    try:
        run_config = resolve_configuration(args)
        engine = EvolutionEngine(
            run_config.build_fitness_function(),
            run_config.build_selection_strategy(),
            run_config.ga
        )
    except InvalidConfiguration as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    results = engine.run()

    print(f"Landscape: {run_config.landscape}, selection: {run_config.selection}, "
          f"seed: {run_config.ga.seed}")
    print(f"Best genome: {results.best_genome_overall:.6f} "
          f"(fitness {results.best_fitness_overall:.6f}, generation {results.generation_found})")
    print(f"Final population best: {results.best_genome:.6f} (fitness {results.best_fitness:.6f})")
    print(f"Generations: {results.total_generations}, evaluations: {results.stats['total_evaluations']}, "
          f"time: {results.total_time:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
