"""
Configuration management for the psychrometric engine.

This module provides typed configuration dataclasses for solver tolerances,
process defaults and comfort-zone bands, with support for loading from YAML
or JSON files.

Usage:
    from psychro.core.config import EngineConfig, SolverConfig, load_config

    # Load from file
    config = create_engine_config(load_config("config.yaml"))

    # Or use defaults
    solver = SolverConfig(wet_bulb_max_iterations=200)
"""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Union
import json
import logging

import yaml

from psychro.core.constants import (
    COMFORT_RH_PCT,
    DEFAULT_BYPASS_FACTOR,
    DEFAULT_EVAPORATIVE_EFFECTIVENESS,
    ENTHALPY_MAX_ITERATIONS,
    ENTHALPY_TOLERANCE,
    MIXING_MAX_ITERATIONS,
    MIXING_TOLERANCE,
    STANDARD_PRESSURE_PSIA,
    SUMMER_COMFORT_TEMP_F,
    WET_BULB_MAX_ITERATIONS,
    WET_BULB_TOLERANCE,
    WINTER_COMFORT_TEMP_F,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverConfig:
    """Tolerances and iteration caps for the iterative solvers."""

    wet_bulb_tolerance: float = WET_BULB_TOLERANCE  # lb/lb
    wet_bulb_max_iterations: int = WET_BULB_MAX_ITERATIONS
    enthalpy_tolerance: float = ENTHALPY_TOLERANCE  # BTU/lb
    enthalpy_max_iterations: int = ENTHALPY_MAX_ITERATIONS
    mixing_tolerance: float = MIXING_TOLERANCE  # BTU/lb
    mixing_max_iterations: int = MIXING_MAX_ITERATIONS


@dataclass(frozen=True)
class ComfortBand:
    """Dry-bulb and relative humidity limits for one season."""

    min_temp_f: float
    max_temp_f: float
    min_rh_pct: float = COMFORT_RH_PCT[0]
    max_rh_pct: float = COMFORT_RH_PCT[1]


@dataclass(frozen=True)
class ComfortZoneConfig:
    """Seasonal comfort bands."""

    summer: ComfortBand = field(
        default_factory=lambda: ComfortBand(*SUMMER_COMFORT_TEMP_F)
    )
    winter: ComfortBand = field(
        default_factory=lambda: ComfortBand(*WINTER_COMFORT_TEMP_F)
    )


@dataclass(frozen=True)
class ProcessConfig:
    """Default parameters for the process models."""

    bypass_factor: float = DEFAULT_BYPASS_FACTOR
    evaporative_effectiveness: float = DEFAULT_EVAPORATIVE_EFFECTIVENESS


@dataclass(frozen=True)
class EngineConfig:
    """Complete engine configuration."""

    pressure_psia: float = STANDARD_PRESSURE_PSIA
    allow_approximate: bool = False
    solver: SolverConfig = field(default_factory=SolverConfig)
    processes: ProcessConfig = field(default_factory=ProcessConfig)
    comfort: ComfortZoneConfig = field(default_factory=ComfortZoneConfig)


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a YAML or JSON file.

    Args:
        path: Path to the configuration file

    Returns:
        Dictionary of configuration values

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file format is not supported
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r") as f:
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif path.suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

    logger.debug("Loaded configuration from %s", path)
    return data or {}


def save_config(config: Dict[str, Any], path: Union[str, Path]) -> None:
    """
    Save configuration to a YAML or JSON file.

    Args:
        config: Configuration dictionary
        path: Path to save the file
    """
    path = Path(path)

    with open(path, "w") as f:
        if path.suffix in (".yaml", ".yml"):
            yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)
        elif path.suffix == ".json":
            json.dump(config, f, indent=2)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")


def config_to_dict(config: Any) -> Dict[str, Any]:
    """Convert a dataclass config to a dictionary."""
    return asdict(config)


def create_comfort_config(data: Dict[str, Any]) -> ComfortZoneConfig:
    """Create a ComfortZoneConfig from a dictionary."""
    bands = {}
    for season in ("summer", "winter"):
        if season in data and isinstance(data[season], dict):
            bands[season] = ComfortBand(**data[season])
    return ComfortZoneConfig(**bands)


def create_engine_config(data: Dict[str, Any]) -> EngineConfig:
    """
    Create an EngineConfig from a dictionary, building nested sections.

    Raises:
        TypeError: If data is not a dictionary or contains unknown keys
    """
    if not isinstance(data, dict):
        raise TypeError(f"Expected dict, got {type(data).__name__}")

    data = dict(data)
    if isinstance(data.get("solver"), dict):
        data["solver"] = SolverConfig(**data["solver"])
    if isinstance(data.get("processes"), dict):
        data["processes"] = ProcessConfig(**data["processes"])
    if isinstance(data.get("comfort"), dict):
        data["comfort"] = create_comfort_config(data["comfort"])
    return EngineConfig(**data)


def get_default_config() -> EngineConfig:
    """Get the default engine configuration."""
    return EngineConfig()
