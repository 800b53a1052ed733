"""
Physical and engineering constants for psychrometric calculations.

This module centralizes all magic numbers and correlation coefficients used
throughout the engine. Values are in imperial units (°F, psia, lb, BTU) and
follow ASHRAE Handbook - Fundamentals, Chapter 1, unless otherwise noted.

Usage:
    from psychro.core.constants import STANDARD_PRESSURE_PSIA, AIR_SPECIFIC_HEAT

    sensible = AIR_SPECIFIC_HEAT * delta_t  # BTU/lb dry air
"""

# =============================================================================
# Reference Conditions
# =============================================================================

STANDARD_PRESSURE_PSIA: float = 14.696  # psia - standard atmosphere at sea level
RANKINE_OFFSET: float = 459.67  # °F → °R
FREEZING_POINT_F: float = 32.0  # °F - ice/liquid branch boundary

# Operating range of the saturation and dew point correlations
MIN_TEMPERATURE_F: float = -100.0  # °F
MAX_TEMPERATURE_F: float = 200.0  # °F
# Upper limit of the liquid water saturation correlation
SATURATION_CORRELATION_MAX_F: float = 392.0  # °F

# =============================================================================
# Moist Air Properties
# =============================================================================

MOLECULAR_WEIGHT_RATIO: float = 0.621945  # Mw / Mda, water vapor to dry air
AIR_SPECIFIC_HEAT: float = 0.24  # BTU/(lb·°F) - dry air at constant pressure
VAPOR_SPECIFIC_HEAT: float = 0.444  # BTU/(lb·°F) - water vapor at constant pressure
LATENT_HEAT_VAPORIZATION: float = 1061.0  # BTU/lb - hfg of water at 0°F

# Specific volume: v = R_da * T_R * (1 + 1.607858 W) / p, R_da in psia·ft³/(lb·°R)
DRY_AIR_GAS_CONSTANT: float = 0.370486  # (psia·ft³)/(lb·°R)
VOLUME_MOISTURE_FACTOR: float = 1.607858  # 1 / MOLECULAR_WEIGHT_RATIO

AIR_DENSITY: float = 0.075  # lb/ft³ - standard air (70°F, sea level)
GRAINS_PER_LB: float = 7000.0

# =============================================================================
# Airflow Heat Transfer Factors (standard air)
# =============================================================================

# 0.075 lb/ft³ × 60 min/hr × 0.24 BTU/(lb·°F)
SENSIBLE_AIRFLOW_FACTOR: float = 1.08  # BTU/(hr·cfm·°F)
# 0.075 lb/ft³ × 60 min/hr × ~1076 BTU/lb
LATENT_AIRFLOW_FACTOR: float = 4840.0  # BTU/(hr·cfm·lb/lb)
# 0.075 lb/ft³ × 60 min/hr
TOTAL_AIRFLOW_FACTOR: float = 4.5  # BTU/(hr·cfm·BTU/lb)

# =============================================================================
# Energy Conversions
# =============================================================================

BTU_PER_KWH: float = 3412.0  # BTU per kilowatt-hour
BTU_PER_TON_HR: float = 12000.0  # BTU/hr per ton of refrigeration
KPA_PER_PSI: float = 6.894757

# =============================================================================
# Saturation Pressure Correlations (Hyland-Wexler, IP form, T in °R, psia)
# =============================================================================

# Over ice, -148°F to 32°F
ICE_C1: float = -1.0214165e04
ICE_C2: float = -4.8932428e00
ICE_C3: float = -5.3765794e-03
ICE_C4: float = 1.9202377e-07
ICE_C5: float = 3.5575832e-10
ICE_C6: float = -9.0344688e-14
ICE_C7: float = 4.1635019e00

# Over liquid water, 32°F to 392°F
WATER_C8: float = -1.0440397e04
WATER_C9: float = -1.1294650e01
WATER_C10: float = -2.7022355e-02
WATER_C11: float = 1.2890360e-05
WATER_C12: float = -2.4780681e-09
WATER_C13: float = 6.5459673e00

# =============================================================================
# Dew Point Correlations (pw in psia, alpha = ln pw)
# =============================================================================

# 32°F to 200°F
DEW_POINT_C14: float = 100.45
DEW_POINT_C15: float = 33.193
DEW_POINT_C16: float = 2.319
DEW_POINT_C17: float = 0.17074
DEW_POINT_C18: float = 1.2063
DEW_POINT_EXPONENT: float = 0.1984

# Below 32°F
DEW_POINT_ICE_A0: float = 90.12
DEW_POINT_ICE_A1: float = 26.142
DEW_POINT_ICE_A2: float = 0.8927

# =============================================================================
# Solver Defaults
# =============================================================================

WET_BULB_TOLERANCE: float = 1e-5  # lb/lb
WET_BULB_MAX_ITERATIONS: int = 100
WET_BULB_SLOPE_STEP: float = 0.01  # °F - central difference step for dW/dtwb
WET_BULB_CEILING_MARGIN: float = 0.5  # °F - trial wet bulbs stay this far below boiling
SATURATION_TEMPERATURE_ITERATIONS: int = 60  # bisection halvings

ENTHALPY_TOLERANCE: float = 0.01  # BTU/lb
ENTHALPY_MAX_ITERATIONS: int = 50
ENTHALPY_INITIAL_HUMIDITY_RATIO: float = 0.01  # lb/lb

MIXING_TOLERANCE: float = 0.001  # BTU/lb
MIXING_MAX_ITERATIONS: int = 20

# RH above 100% tolerated as numerical noise before a state is flagged
SATURATION_TOLERANCE_PCT: float = 0.5

# =============================================================================
# Process Defaults
# =============================================================================

DEFAULT_BYPASS_FACTOR: float = 0.1
DEFAULT_EVAPORATIVE_EFFECTIVENESS: float = 0.85

# =============================================================================
# Comfort Zone (ASHRAE 55 simplified)
# =============================================================================

SUMMER_COMFORT_TEMP_F: tuple = (73.0, 79.0)
WINTER_COMFORT_TEMP_F: tuple = (68.0, 75.0)
COMFORT_RH_PCT: tuple = (30.0, 60.0)
