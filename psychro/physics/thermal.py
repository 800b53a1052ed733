"""
Airflow heat transfer calculations.

This module provides the standard-air shortcut formulas used to turn
per-pound psychrometric differences into airflow loads. All calculations
use consistent units:
- Temperature: °F
- Airflow: CFM (cubic feet per minute)
- Humidity ratio: lb water / lb dry air
- Heat: BTU/hr
- Power: kW

Usage:
    from psychro.physics.thermal import calculate_sensible_heat, calculate_air_mass_flow

    mass_flow = calculate_air_mass_flow(cfm=4000, specific_volume=13.9)
    heat = calculate_sensible_heat(cfm=4000, delta_t=22)
"""

from typing import Optional

from psychro.core.constants import (
    AIR_DENSITY,
    BTU_PER_KWH,
    BTU_PER_TON_HR,
    LATENT_AIRFLOW_FACTOR,
    SENSIBLE_AIRFLOW_FACTOR,
    TOTAL_AIRFLOW_FACTOR,
)


def calculate_air_mass_flow(cfm: float, specific_volume: Optional[float] = None) -> float:
    """
    Calculate dry air mass flow rate from volumetric flow.

    Args:
        cfm: Volumetric air flow in cubic feet per minute
        specific_volume: Moist air specific volume in ft³/lb dry air. When
            omitted, standard air density (0.075 lb/ft³) is used.

    Returns:
        Mass flow rate in lb/hr

    Example:
        >>> calculate_air_mass_flow(2000)
        9000.0  # 2000 CFM * 0.075 lb/ft³ * 60 min/hr
    """
    if specific_volume is None:
        return cfm * AIR_DENSITY * 60  # CFM → ft³/hr → lb/hr
    if specific_volume <= 0:
        raise ValueError(f"Specific volume must be positive, got {specific_volume}")
    return cfm * 60 / specific_volume


def calculate_sensible_heat(cfm: float, delta_t: float) -> float:
    """
    Calculate sensible heat transfer for standard air.

    Uses the formula: Q = 1.08 × CFM × ΔT
    where 1.08 = 0.075 lb/ft³ × 60 min/hr × 0.24 BTU/lb·°F

    Args:
        cfm: Volumetric air flow in cubic feet per minute
        delta_t: Temperature difference in °F

    Returns:
        Sensible heat in BTU/hr

    Example:
        >>> calculate_sensible_heat(4000, 22)
        95040.0  # 4000 CFM across a 75°F to 53°F coil
    """
    return SENSIBLE_AIRFLOW_FACTOR * cfm * delta_t


def calculate_latent_heat(cfm: float, delta_w: float) -> float:
    """
    Calculate latent heat transfer for standard air.

    Uses the formula: Q = 4840 × CFM × ΔW

    Args:
        cfm: Volumetric air flow in cubic feet per minute
        delta_w: Humidity ratio difference in lb/lb

    Returns:
        Latent heat in BTU/hr
    """
    return LATENT_AIRFLOW_FACTOR * cfm * delta_w


def calculate_total_heat(cfm: float, delta_h: float) -> float:
    """
    Calculate total heat transfer for standard air from an enthalpy difference.

    Uses the formula: Q = 4.5 × CFM × Δh

    Args:
        cfm: Volumetric air flow in cubic feet per minute
        delta_h: Enthalpy difference in BTU/lb dry air

    Returns:
        Total heat in BTU/hr
    """
    return TOTAL_AIRFLOW_FACTOR * cfm * delta_h


def convert_btu_to_kw(btu: float) -> float:
    """
    Convert BTU/hr to kilowatts.

    Args:
        btu: Power in BTU/hr

    Returns:
        Power in kilowatts
    """
    return btu / BTU_PER_KWH


def convert_btu_to_tons(btu: float) -> float:
    """Convert BTU/hr to tons of refrigeration."""
    return btu / BTU_PER_TON_HR
