"""Physics calculations for moist air."""

from psychro.physics.thermal import (
    calculate_air_mass_flow,
    calculate_sensible_heat,
    calculate_latent_heat,
    calculate_total_heat,
    convert_btu_to_kw,
    convert_btu_to_tons,
)
from psychro.physics.saturation import saturation_pressure, saturation_temperature
from psychro.physics.properties import (
    BelowValidRange,
    humidity_ratio_from_partial_pressure,
    partial_pressure_from_humidity_ratio,
    relative_humidity,
    saturation_humidity_ratio,
    dew_point_temperature,
    enthalpy,
    specific_volume,
    humidity_ratio_from_wet_bulb,
    vapor_pressure_deficit,
)
from psychro.physics.solvers import (
    SolverResult,
    wet_bulb_temperature,
    humidity_ratio_from_enthalpy,
    dry_bulb_from_enthalpy,
    check_convergence,
)

__all__ = [
    "calculate_air_mass_flow",
    "calculate_sensible_heat",
    "calculate_latent_heat",
    "calculate_total_heat",
    "convert_btu_to_kw",
    "convert_btu_to_tons",
    "saturation_pressure",
    "saturation_temperature",
    "BelowValidRange",
    "humidity_ratio_from_partial_pressure",
    "partial_pressure_from_humidity_ratio",
    "relative_humidity",
    "saturation_humidity_ratio",
    "dew_point_temperature",
    "enthalpy",
    "specific_volume",
    "humidity_ratio_from_wet_bulb",
    "vapor_pressure_deficit",
    "SolverResult",
    "wet_bulb_temperature",
    "humidity_ratio_from_enthalpy",
    "dry_bulb_from_enthalpy",
    "check_convergence",
]
