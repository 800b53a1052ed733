"""
Closed-form moist air property formulas.

Every function here is a single non-iterative expression from ASHRAE
Fundamentals Chapter 1, in inch-pound units:
- Temperature: °F
- Pressure: psia
- Humidity ratio: lb water / lb dry air
- Enthalpy: BTU/lb dry air
- Specific volume: ft³/lb dry air

The correlation constants are tied to this unit basis; convert inputs before
calling rather than rescaling constants.
"""

from dataclasses import dataclass
import math
from typing import Union

from psychro.core.constants import (
    AIR_SPECIFIC_HEAT,
    DEW_POINT_C14,
    DEW_POINT_C15,
    DEW_POINT_C16,
    DEW_POINT_C17,
    DEW_POINT_C18,
    DEW_POINT_EXPONENT,
    DEW_POINT_ICE_A0,
    DEW_POINT_ICE_A1,
    DEW_POINT_ICE_A2,
    DRY_AIR_GAS_CONSTANT,
    FREEZING_POINT_F,
    KPA_PER_PSI,
    LATENT_HEAT_VAPORIZATION,
    MIN_TEMPERATURE_F,
    MOLECULAR_WEIGHT_RATIO,
    RANKINE_OFFSET,
    STANDARD_PRESSURE_PSIA,
    VAPOR_SPECIFIC_HEAT,
    VOLUME_MOISTURE_FACTOR,
)
from psychro.core.exceptions import InvalidInputError
from psychro.physics.saturation import saturation_pressure

# Vapor pressure at the ice/liquid boundary and at the bottom of the range
_FREEZING_VAPOR_PRESSURE = saturation_pressure(FREEZING_POINT_F)
_MIN_VAPOR_PRESSURE = saturation_pressure(MIN_TEMPERATURE_F)


@dataclass(frozen=True)
class BelowValidRange:
    """
    Dew point marker for vapor pressures below the correlation domain.

    Returned instead of a temperature when the vapor pressure is at or below
    saturation at -100°F (including perfectly dry air). It is not a
    temperature and must not be used in arithmetic.
    """

    vapor_pressure: float
    limit_f: float = MIN_TEMPERATURE_F

    def __str__(self) -> str:
        return f"below {self.limit_f:.0f}°F"


DewPoint = Union[float, BelowValidRange]


def humidity_ratio_from_partial_pressure(
    pv: float, pressure_psia: float = STANDARD_PRESSURE_PSIA
) -> float:
    """
    Humidity ratio from water vapor partial pressure.

    W = 0.621945 × pv / (p - pv)

    Raises:
        InvalidInputError: If pv is not below total pressure
    """
    if pv >= pressure_psia:
        raise InvalidInputError(
            f"Vapor pressure {pv:.4f} psia must be below total pressure {pressure_psia:.4f} psia"
        )
    return MOLECULAR_WEIGHT_RATIO * pv / (pressure_psia - pv)


def partial_pressure_from_humidity_ratio(
    humidity_ratio: float, pressure_psia: float = STANDARD_PRESSURE_PSIA
) -> float:
    """Water vapor partial pressure (psia) from humidity ratio."""
    return pressure_psia * humidity_ratio / (MOLECULAR_WEIGHT_RATIO + humidity_ratio)


def relative_humidity(pv: float, pws: float) -> float:
    """Relative humidity in percent from vapor and saturation pressures."""
    return 100.0 * pv / pws


def saturation_humidity_ratio(temp_f: float, pressure_psia: float = STANDARD_PRESSURE_PSIA) -> float:
    """Humidity ratio of saturated air at temp_f, in lb/lb."""
    return humidity_ratio_from_partial_pressure(saturation_pressure(temp_f), pressure_psia)


def dew_point_temperature(pv: float) -> DewPoint:
    """
    Dew point (frost point below 32°F) from vapor partial pressure.

    Uses the ASHRAE correlations with alpha = ln(pv):
        pv >= pws(32°F): td = C14 + C15·α + C16·α² + C17·α³ + C18·pv^0.1984
        below that:      td = 90.12 + 26.142·α + 0.8927·α²

    Args:
        pv: Water vapor partial pressure in psia

    Returns:
        Dew point in °F, or BelowValidRange when pv is at or below
        saturation at -100°F
    """
    if pv <= _MIN_VAPOR_PRESSURE:
        return BelowValidRange(vapor_pressure=pv)

    alpha = math.log(pv)
    if pv >= _FREEZING_VAPOR_PRESSURE:
        return (
            DEW_POINT_C14
            + DEW_POINT_C15 * alpha
            + DEW_POINT_C16 * alpha**2
            + DEW_POINT_C17 * alpha**3
            + DEW_POINT_C18 * pv**DEW_POINT_EXPONENT
        )
    return DEW_POINT_ICE_A0 + DEW_POINT_ICE_A1 * alpha + DEW_POINT_ICE_A2 * alpha**2


def enthalpy(temp_f: float, humidity_ratio: float) -> float:
    """
    Moist air enthalpy in BTU/lb dry air.

    h = 0.240·t + W·(1061 + 0.444·t)
    """
    return AIR_SPECIFIC_HEAT * temp_f + humidity_ratio * (
        LATENT_HEAT_VAPORIZATION + VAPOR_SPECIFIC_HEAT * temp_f
    )


def specific_volume(
    temp_f: float, humidity_ratio: float, pressure_psia: float = STANDARD_PRESSURE_PSIA
) -> float:
    """
    Moist air specific volume in ft³/lb dry air.

    v = 0.370486·(t + 459.67)·(1 + 1.607858·W) / p
    """
    return (
        DRY_AIR_GAS_CONSTANT
        * (temp_f + RANKINE_OFFSET)
        * (1 + VOLUME_MOISTURE_FACTOR * humidity_ratio)
        / pressure_psia
    )


def humidity_ratio_from_wet_bulb(
    temp_f: float, wet_bulb_f: float, pressure_psia: float = STANDARD_PRESSURE_PSIA
) -> float:
    """
    Humidity ratio from dry-bulb and thermodynamic wet-bulb temperatures.

    Above freezing (wet bulb >= 32°F):
        W = ((1093 - 0.556·twb)·Ws - 0.240·(t - twb)) / (1093 + 0.444·t - twb)
    Below freezing:
        W = ((1220 - 0.04·twb)·Ws - 0.240·(t - twb)) / (1220 + 0.444·t - 0.48·twb)

    where Ws is the saturation humidity ratio at the wet bulb. The result is
    negative for impossible (too dry) combinations; callers validate it.
    """
    ws = saturation_humidity_ratio(wet_bulb_f, pressure_psia)
    depression = temp_f - wet_bulb_f

    if wet_bulb_f >= FREEZING_POINT_F:
        return ((1093 - 0.556 * wet_bulb_f) * ws - AIR_SPECIFIC_HEAT * depression) / (
            1093 + VAPOR_SPECIFIC_HEAT * temp_f - wet_bulb_f
        )
    return ((1220 - 0.04 * wet_bulb_f) * ws - AIR_SPECIFIC_HEAT * depression) / (
        1220 + VAPOR_SPECIFIC_HEAT * temp_f - 0.48 * wet_bulb_f
    )


def vapor_pressure_deficit(temp_f: float, relative_humidity_pct: float) -> float:
    """
    Vapor pressure deficit in psia.

    VPD = pws(t) × (1 - RH/100), the drying power of the air used for
    greenhouse and grow-room climate targets.
    """
    return saturation_pressure(temp_f) * (1 - relative_humidity_pct / 100.0)


def psia_to_kpa(pressure_psia: float) -> float:
    """Convert psia to kPa."""
    return pressure_psia * KPA_PER_PSI
