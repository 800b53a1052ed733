"""
Psychrometric calculation engine for moist air in imperial units.

Usage:
    from psychro import calculate_properties, cooling_dehumidification

    room = calculate_properties({"dry_bulb_f": 80.0, "relative_humidity_pct": 60.0})
    coil = cooling_dehumidification(room, coil_temp_f=50.0)
    print(coil.outlet, coil.at_airflow(2000).total_heat)
"""

from psychro.comfort import COMFORT_ZONES, Season, get_comfort_band, is_in_comfort_zone
from psychro.cooling_load import CoolingLoad, calculate_cooling_load
from psychro.core.config import EngineConfig, SolverConfig
from psychro.core.exceptions import (
    ConvergenceError,
    InvalidInputError,
    MissingPropertyError,
    PsychrometricError,
    SupersaturatedStateError,
)
from psychro.engine import PsychrometricEngine
from psychro.physics.properties import BelowValidRange
from psychro.physics.saturation import saturation_pressure
from psychro.processes import (
    ProcessLoad,
    ProcessType,
    PsychrometricProcess,
    cooling_dehumidification,
    evaporative_cooling,
    mix_air_fractions,
    mix_air_streams,
    mixing_process,
    sensible_process,
)
from psychro.state import (
    DewPointInput,
    EnthalpyInput,
    HumidityRatioInput,
    PsychrometricState,
    RelativeHumidityInput,
    StateInput,
    WetBulbInput,
    calculate_properties,
    parse_partial_state,
)

__version__ = "0.1.0"

__all__ = [
    # State
    "PsychrometricState",
    "StateInput",
    "WetBulbInput",
    "RelativeHumidityInput",
    "DewPointInput",
    "HumidityRatioInput",
    "EnthalpyInput",
    "BelowValidRange",
    "calculate_properties",
    "parse_partial_state",
    "saturation_pressure",
    # Processes
    "ProcessType",
    "ProcessLoad",
    "PsychrometricProcess",
    "sensible_process",
    "cooling_dehumidification",
    "evaporative_cooling",
    "mix_air_streams",
    "mix_air_fractions",
    "mixing_process",
    # Loads and comfort
    "CoolingLoad",
    "calculate_cooling_load",
    "Season",
    "COMFORT_ZONES",
    "get_comfort_band",
    "is_in_comfort_zone",
    # Configured engine
    "EngineConfig",
    "SolverConfig",
    "PsychrometricEngine",
    # Errors
    "PsychrometricError",
    "InvalidInputError",
    "MissingPropertyError",
    "SupersaturatedStateError",
    "ConvergenceError",
]
