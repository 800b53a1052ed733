"""
Saturation vapor pressure of water.

Uses the ASHRAE (Hyland-Wexler) correlations in their inch-pound form, with
absolute temperature in degrees Rankine and pressure in psia:

    over ice   (t < 32°F):  ln pws = C1/T + C2 + C3·T + C4·T² + C5·T³ + C6·T⁴ + C7·ln T
    over water (t >= 32°F): ln pws = C8/T + C9 + C10·T + C11·T² + C12·T³ + C13·ln T

Exactly 32°F is evaluated on the liquid-water branch. The two branches agree
there to within 0.02%, so the choice is a convention rather than physics.
"""

import math

from psychro.core.constants import (
    FREEZING_POINT_F,
    MIN_TEMPERATURE_F,
    SATURATION_CORRELATION_MAX_F,
    SATURATION_TEMPERATURE_ITERATIONS,
    ICE_C1,
    ICE_C2,
    ICE_C3,
    ICE_C4,
    ICE_C5,
    ICE_C6,
    ICE_C7,
    RANKINE_OFFSET,
    WATER_C8,
    WATER_C9,
    WATER_C10,
    WATER_C11,
    WATER_C12,
    WATER_C13,
)


def saturation_pressure(temp_f: float) -> float:
    """
    Calculate saturation vapor pressure over ice or liquid water.

    Args:
        temp_f: Temperature in °F (valid -100°F to 200°F)

    Returns:
        Saturation pressure in psia

    Example:
        >>> round(saturation_pressure(50), 4)
        0.1781
    """
    t = temp_f + RANKINE_OFFSET

    if temp_f < FREEZING_POINT_F:
        ln_pws = (
            ICE_C1 / t
            + ICE_C2
            + ICE_C3 * t
            + ICE_C4 * t**2
            + ICE_C5 * t**3
            + ICE_C6 * t**4
            + ICE_C7 * math.log(t)
        )
    else:
        ln_pws = (
            WATER_C8 / t
            + WATER_C9
            + WATER_C10 * t
            + WATER_C11 * t**2
            + WATER_C12 * t**3
            + WATER_C13 * math.log(t)
        )

    return math.exp(ln_pws)


def saturation_temperature(pressure_psia: float) -> float:
    """
    Temperature at which the saturation pressure equals pressure_psia.

    This is the boiling point of water at that total pressure. Found by
    bisection on saturation_pressure over -100°F to 392°F; pressures outside
    that span return the nearer bound.

    Example:
        >>> round(saturation_temperature(14.696), 1)
        212.0
    """
    low, high = MIN_TEMPERATURE_F, SATURATION_CORRELATION_MAX_F
    if pressure_psia <= saturation_pressure(low):
        return low
    if pressure_psia >= saturation_pressure(high):
        return high

    for _ in range(SATURATION_TEMPERATURE_ITERATIONS):
        mid = (low + high) / 2
        if saturation_pressure(mid) < pressure_psia:
            low = mid
        else:
            high = mid
    return (low + high) / 2
