"""
Ventilation cooling load and required supply air conditions.

Combines an indoor and outdoor state with an airflow and internal gains:

    m          = cfm × 60 / v_indoor                      (lb/hr)
    Qs         = m × 0.24 × (t_out - t_in) + sensible gains
    Ql         = m × 1061 × (W_out - W_in) + latent gains
    t_supply   = t_in - Qs / (1.08 × cfm)
    W_supply   = W_in - Ql / (4840 × cfm)

Loads are in BTU/hr.
"""

from dataclasses import dataclass
import logging

from psychro.core.constants import AIR_SPECIFIC_HEAT, LATENT_HEAT_VAPORIZATION
from psychro.core.exceptions import InvalidInputError
from psychro.physics.thermal import (
    calculate_air_mass_flow,
    calculate_latent_heat,
    calculate_sensible_heat,
    convert_btu_to_kw,
    convert_btu_to_tons,
)
from psychro.state import PsychrometricState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoolingLoad:
    """Space cooling load and the supply air needed to offset it."""

    sensible_load: float  # BTU/hr
    latent_load: float  # BTU/hr
    total_load: float  # BTU/hr
    required_supply_temp_f: float
    required_supply_humidity_ratio: float

    @property
    def tons(self) -> float:
        return convert_btu_to_tons(self.total_load)

    @property
    def kw(self) -> float:
        return convert_btu_to_kw(self.total_load)

    @property
    def sensible_heat_ratio(self) -> float:
        """Sensible share of the total load (1.0 when there is no load)."""
        if self.total_load == 0:
            return 1.0
        return self.sensible_load / self.total_load


def calculate_cooling_load(
    indoor: PsychrometricState,
    outdoor: PsychrometricState,
    cfm: float,
    sensible_gain_btu_hr: float = 0.0,
    latent_gain_btu_hr: float = 0.0,
) -> CoolingLoad:
    """
    Calculate the cooling load for an airflow and internal gains.

    Args:
        indoor: Space (return air) state
        outdoor: Outdoor air state
        cfm: Airflow in CFM, used both for ventilation and as supply airflow
        sensible_gain_btu_hr: Internal sensible gains (lights, equipment, people)
        latent_gain_btu_hr: Internal latent gains (people, transpiration)

    Returns:
        CoolingLoad with loads and required supply conditions

    Raises:
        InvalidInputError: If cfm is not positive
    """
    if cfm <= 0:
        raise InvalidInputError(f"Airflow must be positive, got {cfm} CFM")

    mass_flow = calculate_air_mass_flow(cfm, indoor.specific_volume)
    ventilation_sensible = (
        mass_flow * AIR_SPECIFIC_HEAT * (outdoor.dry_bulb_f - indoor.dry_bulb_f)
    )
    ventilation_latent = (
        mass_flow * LATENT_HEAT_VAPORIZATION * (outdoor.humidity_ratio - indoor.humidity_ratio)
    )

    sensible_load = ventilation_sensible + sensible_gain_btu_hr
    latent_load = ventilation_latent + latent_gain_btu_hr

    supply_temp = indoor.dry_bulb_f - sensible_load / calculate_sensible_heat(cfm, 1.0)
    supply_humidity_ratio = indoor.humidity_ratio - latent_load / calculate_latent_heat(cfm, 1.0)
    if supply_humidity_ratio < 0:
        logger.warning(
            "Latent load %.0f BTU/hr needs a negative supply humidity ratio at %.0f CFM",
            latent_load,
            cfm,
        )

    logger.debug(
        "Cooling load at %.0f CFM: sensible=%.0f latent=%.0f BTU/hr",
        cfm,
        sensible_load,
        latent_load,
    )
    return CoolingLoad(
        sensible_load=sensible_load,
        latent_load=latent_load,
        total_load=sensible_load + latent_load,
        required_supply_temp_f=supply_temp,
        required_supply_humidity_ratio=supply_humidity_ratio,
    )
