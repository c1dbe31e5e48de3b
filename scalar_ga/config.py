#!/usr/bin/env python3
"""
GA Configuration Files
Load and save run configurations as JSON or YAML
"""

import json
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .common import get_logger, validate_bool, InvalidConfiguration, DEFAULT_TOURNAMENT_SIZE
from .fitness import FitnessFunction, get_landscape
from .optimizer import GAConfig
from .selection import SelectionStrategy, create_selection_strategy

logger = get_logger(__name__)

SUPPORTED_FORMATS = {'.json': 'json', '.yaml': 'yaml', '.yml': 'yaml'}

_GA_CONFIG_KEYS = {f.name for f in fields(GAConfig)}


@dataclass
class RunConfiguration:
    """Complete description of an evolution run"""
    ga: GAConfig = field(default_factory=GAConfig)
    selection: str = "tournament"
    tournament_size: int = DEFAULT_TOURNAMENT_SIZE
    tournament_with_replacement: bool = True
    landscape: str = "sine_wave"

    def build_selection_strategy(self) -> SelectionStrategy:
        return create_selection_strategy(
            self.selection, tournament_size=self.tournament_size,
            with_replacement=self.tournament_with_replacement
        )

    def build_fitness_function(self) -> FitnessFunction:
        return get_landscape(self.landscape)

    def validate(self):
        """Validate all parameters eagerly"""
        self.ga.validate()
        validate_bool("tournament_with_replacement", self.tournament_with_replacement)
        self.build_selection_strategy().validate_for(self.ga.population_size)
        self.build_fitness_function()

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self.ga)
        data.update({
            'selection': self.selection,
            'tournament_size': self.tournament_size,
            'tournament_with_replacement': self.tournament_with_replacement,
            'landscape': self.landscape
        })
        return data


def config_from_dict(data: Dict[str, Any]) -> RunConfiguration:
    """Build a run configuration from a flat dictionary

    Args:
        data: Parameter mapping; unspecified parameters keep their defaults

    Returns:
        Validated run configuration
    """
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"Configuration must be a mapping, got {type(data).__name__}")

    run_keys = {f.name for f in fields(RunConfiguration)} - {'ga'}
    unknown = set(data) - _GA_CONFIG_KEYS - run_keys
    if unknown:
        raise InvalidConfiguration(f"Unknown configuration parameters: {', '.join(sorted(unknown))}")

    ga_config = GAConfig(**{k: v for k, v in data.items() if k in _GA_CONFIG_KEYS})
    run_config = RunConfiguration(ga=ga_config, **{k: v for k, v in data.items() if k in run_keys})
    run_config.validate()
    return run_config


def _format_for(path: Path) -> str:
    try:
        return SUPPORTED_FORMATS[path.suffix.lower()]
    except KeyError:
        raise InvalidConfiguration(
            f"Unsupported configuration format '{path.suffix}' (use .json, .yaml or .yml)")


def load_config(path: Union[str, Path]) -> RunConfiguration:
    """Load a run configuration file

    Args:
        path: Path to a .json, .yaml or .yml file

    Returns:
        Validated run configuration
    """
    path = Path(path)
    file_format = _format_for(path)

    if not path.is_file():
        raise InvalidConfiguration(f"Configuration file not found: {path}")

    with open(path, 'r') as f:
        try:
            if file_format == 'json':
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise InvalidConfiguration(f"Could not parse {path}: {e}") from e

    logger.info(f"Loaded configuration from {path}")
    return config_from_dict(data or {})


def save_config(run_config: RunConfiguration, path: Union[str, Path]) -> Path:
    """Save a run configuration file

    Returns:
        Path written
    """
    path = Path(path)
    file_format = _format_for(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        if file_format == 'json':
            json.dump(run_config.to_dict(), f, indent=2)
        else:
            yaml.safe_dump(run_config.to_dict(), f, default_flow_style=False, sort_keys=False)

    logger.info(f"Configuration saved to {path}")
    return path
