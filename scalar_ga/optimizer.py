#!/usr/bin/env python3
"""
Genetic Algorithm Evolution Engine
Generational select-then-mutate loop over a one-dimensional real-valued search space
"""

import math
import numbers
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from .analysis import GenerationStatistics, summarize_run
from .common import (
    get_logger, validate_bool, validate_bounds, validate_positive_int, validate_probability,
    GAError, InvalidConfiguration,
    DEFAULT_POPULATION_SIZE, DEFAULT_GENERATIONS, DEFAULT_MUTATION_PROBABILITY,
    DEFAULT_MUTATION_STDDEV, DEFAULT_MIN_X, DEFAULT_MAX_X
)
from .fitness import FitnessFunction
from .operators import GaussianMutation
from .population import Population, PopulationInitializer
from .random_source import RandomSource
from .selection import SelectionStrategy

logger = get_logger(__name__)


@dataclass
class GAConfig:
    """Configuration for genetic algorithm"""
    population_size: int = DEFAULT_POPULATION_SIZE
    generations: int = DEFAULT_GENERATIONS
    min_x: float = DEFAULT_MIN_X
    max_x: float = DEFAULT_MAX_X
    mutation_probability: float = DEFAULT_MUTATION_PROBABILITY
    mutation_stddev: float = DEFAULT_MUTATION_STDDEV
    seed: Optional[int] = None

    # Clamp mutated genomes into [min_x, max_x]; bounds only shape sampling otherwise
    clamp_to_bounds: bool = False

    # Keep a snapshot of every generation's population in the results
    track_history: bool = False

    verbose: bool = False

    def validate(self):
        """Validate configuration parameters

        Raises:
            InvalidConfiguration: If any parameter is out of range
        """
        validate_positive_int("population_size", self.population_size)
        validate_positive_int("generations", self.generations)
        self.mutation_probability = validate_probability("mutation_probability", self.mutation_probability)
        try:
            min_x, max_x = float(self.min_x), float(self.max_x)
            stddev = float(self.mutation_stddev)
        except (TypeError, ValueError):
            raise InvalidConfiguration(
                f"Bounds and mutation_stddev must be numbers, got "
                f"min_x={self.min_x!r}, max_x={self.max_x!r}, mutation_stddev={self.mutation_stddev!r}")
        validate_bounds(min_x, max_x)
        if not (math.isfinite(stddev) and stddev >= 0):
            raise InvalidConfiguration(f"mutation_stddev must be finite and non-negative, got {self.mutation_stddev}")
        if self.seed is not None and (isinstance(self.seed, bool) or
                                      not isinstance(self.seed, numbers.Integral) or self.seed < 0):
            raise InvalidConfiguration(f"seed must be a non-negative integer, got {self.seed!r}")
        for switch in ("clamp_to_bounds", "track_history", "verbose"):
            validate_bool(switch, getattr(self, switch))

        # Numeric fields are normalized to float
        self.min_x, self.max_x, self.mutation_stddev = min_x, max_x, stddev


@dataclass
class GAResults:
    """Results from a completed evolution run"""
    final_population: Population
    best_genome: float
    best_fitness: float
    best_genome_overall: float
    best_fitness_overall: float
    generation_found: int
    total_generations: int
    total_time: float
    stop_reason: str
    statistics: List[GenerationStatistics]
    population_history: List[Population] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)


class EngineState(Enum):
    """Lifecycle of an evolution engine"""
    INITIALIZED = "initialized"
    EVOLVING = "evolving"
    TERMINATED = "terminated"


class EvolutionEngine:
    """Generational evolution engine

    Each generation selects population_size parents with the configured
    strategy, mutates each parent independently and replaces the whole
    population with the offspring. There is no crossover and no elitism.
    """

    def __init__(self, fitness_function, selection_strategy: SelectionStrategy,
                 config: Optional[GAConfig] = None,
                 random_source: Optional[RandomSource] = None,
                 initial_population: Optional[Sequence[float]] = None):
        """Initialize evolution engine and sample the initial population

        Args:
            fitness_function: FitnessFunction or plain callable genome -> score
            selection_strategy: Parent selection strategy
            config: GA configuration parameters
            random_source: Random source to use instead of one seeded from config.seed
            initial_population: Genomes to start from instead of uniform sampling;
                must contain exactly population_size genomes

        Raises:
            InvalidConfiguration: If any component or parameter is invalid
        """
        self.config = config or GAConfig()
        self.config.validate()

        if not isinstance(selection_strategy, SelectionStrategy):
            raise InvalidConfiguration(
                f"selection_strategy must be a SelectionStrategy, got {selection_strategy!r}")
        selection_strategy.validate_for(self.config.population_size)

        self.fitness_function = FitnessFunction.wrap(fitness_function)
        self.selection_strategy = selection_strategy
        self.random_source = random_source if random_source is not None else RandomSource(self.config.seed)

        self.population_initializer = PopulationInitializer(self.config.min_x, self.config.max_x)
        self.mutation = GaussianMutation(
            mutation_probability=self.config.mutation_probability,
            min_bound=self.config.min_x,
            max_bound=self.config.max_x,
            step_stddev=self.config.mutation_stddev,
            clamp_to_bounds=self.config.clamp_to_bounds
        )

        # Evolution tracking
        self.generation = 0
        self.population_history = []
        self.statistics = []
        self.results = None

        # Performance tracking
        self.start_time = None
        self.generation_times = []

        # Callbacks and cooperative stop
        self.generation_callback = None
        self._stop_requested = False

        if initial_population is None:
            self._population = self.population_initializer.create_population(
                self.config.population_size, self.random_source, generation=0
            )
        else:
            self._population = Population(initial_population, generation=0)
            if len(self._population) != self.config.population_size:
                raise InvalidConfiguration(
                    f"initial_population has {len(self._population)} genomes, "
                    f"expected population_size={self.config.population_size}")
        self._record_generation(self._population)
        self.state = EngineState.INITIALIZED

        logger.debug(f"Initialized engine: N={self.config.population_size}, "
                     f"G={self.config.generations}, selection={self.selection_strategy!r}, "
                     f"mutation={self.mutation!r}, seed={self.random_source.seed}")

    @property
    def population(self) -> Population:
        """Current population (read-only)"""
        return self._population

    def step(self) -> Population:
        """Evolve the population by one generation

        Returns:
            The new population

        Raises:
            GAError: If the run has already terminated
        """
        if self.state is EngineState.TERMINATED:
            raise GAError("Evolution run has already terminated")

        if self.start_time is None:
            self.start_time = time.time()
        self.state = EngineState.EVOLVING
        gen_start_time = time.time()

        parents = self.selection_strategy.select(
            self._population, self.fitness_function, self.config.population_size, self.random_source
        )
        offspring = self.mutation.mutate_all(parents, self.random_source)

        self.generation += 1
        self._population = Population(offspring, generation=self.generation)
        self.generation_times.append(time.time() - gen_start_time)

        stats = self._record_generation(self._population)

        if self.generation_callback:
            self.generation_callback(self.generation, self._population, stats)

        if self.generation >= self.config.generations:
            self._terminate("max_generations")

        return self._population

    def iter_generations(self) -> Iterator[Tuple[int, Population]]:
        """Stream (generation, population) pairs up to the configured generation count

        The current generation is yielded first. A stop requested with
        request_stop() takes effect at the next generation boundary.
        """
        if self.state is EngineState.TERMINATED:
            raise GAError("Evolution run has already terminated")

        yield self.generation, self._population

        while self.state is not EngineState.TERMINATED:
            if self._stop_requested:
                self._terminate("stopped")
                return
            self.step()
            yield self.generation, self._population

    def run(self) -> GAResults:
        """Run evolution to completion

        Returns:
            GAResults with the final population and run statistics
        """
        if self.config.verbose:
            logger.info(f"Starting evolution: population={self.config.population_size}, "
                        f"generations={self.config.generations}, "
                        f"selection={self.selection_strategy.name}")

        for _ in self.iter_generations():
            pass

        if self.config.verbose:
            logger.info(f"Evolution completed: best fitness={self.results.best_fitness_overall:.4f} "
                        f"at x={self.results.best_genome_overall:.4f} "
                        f"(generation {self.results.generation_found}), "
                        f"time={self.results.total_time:.2f}s, reason={self.results.stop_reason}")
        return self.results

    def request_stop(self):
        """Ask the engine to stop at the next generation boundary"""
        self._stop_requested = True

    def set_generation_callback(self, callback: Callable[[int, Population, GenerationStatistics], None]):
        """Set callback invoked after each evolved generation"""
        self.generation_callback = callback

    def _record_generation(self, population: Population) -> GenerationStatistics:
        """Track statistics and optional snapshot for a generation"""
        stats = GenerationStatistics.from_population(self.generation, population, self.fitness_function)
        self.statistics.append(stats)
        if self.config.track_history:
            self.population_history.append(population)

        if self.config.verbose:
            logger.info(f"Gen {self.generation:3d}: Best={stats.best_fitness:.4f}, "
                        f"Avg={stats.mean_fitness:.4f}, x*={stats.best_genome:.4f}, "
                        f"spread={stats.genome_std:.4f}")
        return stats

    def _terminate(self, reason: str):
        """Move to the terminated state and assemble results"""
        self.state = EngineState.TERMINATED
        total_time = time.time() - self.start_time if self.start_time else 0.0

        final_stats = self.statistics[-1]
        best_stats = max(self.statistics, key=lambda s: s.best_fitness)

        summary = summarize_run(self.statistics)
        summary.update({
            'total_evaluations': self.fitness_function.evaluations,
            'avg_generation_time': (sum(self.generation_times) / len(self.generation_times)
                                    if self.generation_times else 0.0),
            'selection': self.selection_strategy.name,
            'seed': self.random_source.seed
        })

        self.results = GAResults(
            final_population=self._population,
            best_genome=final_stats.best_genome,
            best_fitness=final_stats.best_fitness,
            best_genome_overall=best_stats.best_genome,
            best_fitness_overall=best_stats.best_fitness,
            generation_found=best_stats.generation,
            total_generations=self.generation,
            total_time=total_time,
            stop_reason=reason,
            statistics=list(self.statistics),
            population_history=list(self.population_history),
            stats=summary
        )


def run_evolution(fitness_function, selection_strategy: SelectionStrategy,
                  population_size: int, generations: int,
                  min_x: float, max_x: float,
                  mutation_probability: float, mutation_stddev: float,
                  seed: Optional[int] = None, track_history: bool = False,
                  clamp_to_bounds: bool = False) -> GAResults:
    """Configure and run an evolution engine in one call"""
    config = GAConfig(
        population_size=population_size,
        generations=generations,
        min_x=min_x,
        max_x=max_x,
        mutation_probability=mutation_probability,
        mutation_stddev=mutation_stddev,
        seed=seed,
        clamp_to_bounds=clamp_to_bounds,
        track_history=track_history
    )
    return EvolutionEngine(fitness_function, selection_strategy, config).run()
