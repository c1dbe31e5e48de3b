#!/usr/bin/env python3
"""
Common GA Definitions
Shared constants, logging helpers and the exception hierarchy used across the package
"""

import sys
import math
import numbers
import logging

# Common constants
DEFAULT_POPULATION_SIZE = 50
DEFAULT_GENERATIONS = 100
DEFAULT_MUTATION_PROBABILITY = 0.1
DEFAULT_MUTATION_STDDEV = 0.5
DEFAULT_TOURNAMENT_SIZE = 3
DEFAULT_MIN_X = -10.0
DEFAULT_MAX_X = 10.0


def setup_logging(level=logging.INFO):
    """Set up logging configuration"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def get_logger(name: str) -> logging.Logger:
    """Get logger with consistent configuration"""
    return logging.getLogger(name)


# Common exception classes
class GAError(Exception):
    """Base GA exception"""
    pass


class InvalidConfiguration(GAError, ValueError):
    """Invalid strategy, mutation or engine parameters"""
    pass


class EmptyPopulation(InvalidConfiguration):
    """Operation attempted on a population with no individuals"""
    pass


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value to range"""
    return max(min_val, min(max_val, value))


def validate_probability(name: str, value: float) -> float:
    """Check that a probability lies in [0, 1]

    Returns:
        The value as a float
    """
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"{name} must be a number, got {value!r}")
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidConfiguration(f"{name} must be in [0, 1], got {value}")
    return value


def validate_bounds(min_x: float, max_x: float):
    """Check that a search interval is finite and ordered"""
    if not (math.isfinite(min_x) and math.isfinite(max_x)):
        raise InvalidConfiguration(f"Bounds must be finite, got [{min_x}, {max_x}]")
    if min_x > max_x:
        raise InvalidConfiguration(f"min bound {min_x} is greater than max bound {max_x}")


def validate_positive_int(name: str, value) -> int:
    """Check that a count parameter is a positive integer"""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if value < 1:
        raise InvalidConfiguration(f"{name} must be positive, got {value}")
    return value


def validate_bool(name: str, value) -> bool:
    """Check that a switch parameter is a real boolean, not a truthy string"""
    if not isinstance(value, bool):
        raise InvalidConfiguration(f"{name} must be true or false, got {value!r}")
    return value
