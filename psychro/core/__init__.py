"""Core utilities, constants and errors for the psychrometric engine."""

from psychro.core.config import (
    # Config dataclasses
    SolverConfig,
    ComfortBand,
    ComfortZoneConfig,
    ProcessConfig,
    EngineConfig,
    # Config utilities
    load_config,
    save_config,
    create_engine_config,
    get_default_config,
)
from psychro.core.constants import (
    # Reference conditions
    STANDARD_PRESSURE_PSIA,
    FREEZING_POINT_F,
    # Air properties
    AIR_DENSITY,
    AIR_SPECIFIC_HEAT,
    LATENT_HEAT_VAPORIZATION,
    # Airflow factors
    SENSIBLE_AIRFLOW_FACTOR,
    LATENT_AIRFLOW_FACTOR,
    # Energy conversions
    BTU_PER_KWH,
    BTU_PER_TON_HR,
)
from psychro.core.exceptions import (
    PsychrometricError,
    InvalidInputError,
    MissingPropertyError,
    SupersaturatedStateError,
    ConvergenceError,
)

__all__ = [
    # Config dataclasses
    "SolverConfig",
    "ComfortBand",
    "ComfortZoneConfig",
    "ProcessConfig",
    "EngineConfig",
    # Config utilities
    "load_config",
    "save_config",
    "create_engine_config",
    "get_default_config",
    # Reference conditions
    "STANDARD_PRESSURE_PSIA",
    "FREEZING_POINT_F",
    # Air properties
    "AIR_DENSITY",
    "AIR_SPECIFIC_HEAT",
    "LATENT_HEAT_VAPORIZATION",
    # Airflow factors
    "SENSIBLE_AIRFLOW_FACTOR",
    "LATENT_AIRFLOW_FACTOR",
    # Energy conversions
    "BTU_PER_KWH",
    "BTU_PER_TON_HR",
    # Errors
    "PsychrometricError",
    "InvalidInputError",
    "MissingPropertyError",
    "SupersaturatedStateError",
    "ConvergenceError",
]
