"""
Air-handling process models.

Each model takes a resolved inlet state plus one process parameter and
returns a PsychrometricProcess whose outlet is resolved through the state
module. Processes are immutable values created per call.

Units contract: heat terms are per pound of dry air,
- sensible_heat = 0.24 × ΔT                (BTU/lb)
- latent_heat   = 1061 × ΔW                (BTU/lb)
- total_heat    = sensible_heat + latent_heat, except evaporative cooling
                  where it is 0 by definition (constant enthalpy)
- moisture_change = ΔW                     (lb/lb)
Positive values add heat or moisture to the air. Use
PsychrometricProcess.at_airflow() for BTU/hr at a given CFM.
"""

from dataclasses import dataclass, replace
from enum import Enum
import logging
from typing import ClassVar, Optional

from psychro.core.config import SolverConfig
from psychro.core.constants import (
    AIR_SPECIFIC_HEAT,
    DEFAULT_BYPASS_FACTOR,
    DEFAULT_EVAPORATIVE_EFFECTIVENESS,
    LATENT_HEAT_VAPORIZATION,
)
from psychro.core.exceptions import InvalidInputError
from psychro.physics.properties import saturation_humidity_ratio
from psychro.physics.solvers import check_convergence, dry_bulb_from_enthalpy
from psychro.physics.thermal import calculate_air_mass_flow
from psychro.state import (
    PsychrometricState,
    from_dry_bulb_enthalpy,
    from_dry_bulb_humidity_ratio,
)

logger = logging.getLogger(__name__)


class ProcessType(Enum):
    """Kinds of air-handling process, valued by display name."""

    SENSIBLE_HEATING = "Sensible Heating"
    SENSIBLE_COOLING = "Sensible Cooling"
    COOLING_DEHUMIDIFICATION = "Cooling and Dehumidification"
    EVAPORATIVE_COOLING = "Evaporative Cooling"
    MIXING = "Mixing"


@dataclass(frozen=True)
class ProcessLoad:
    """A process scaled to an airflow, in BTU/hr and lb/hr."""

    cfm: float
    mass_flow: float  # lb dry air/hr
    sensible_heat: float
    latent_heat: float
    total_heat: float
    moisture_rate: float  # lb water/hr, negative when removed


@dataclass(frozen=True)
class PsychrometricProcess:
    """Transition between two resolved states."""

    HEAT_UNITS: ClassVar[str] = "BTU/lb dry air"

    name: str
    process_type: ProcessType
    inlet: PsychrometricState
    outlet: PsychrometricState
    sensible_heat: float
    latent_heat: float
    total_heat: float
    moisture_change: float

    def at_airflow(self, cfm: float) -> ProcessLoad:
        """
        Scale the per-pound process to an airflow.

        Mass flow uses the inlet specific volume: m = cfm × 60 / v.

        Args:
            cfm: Volumetric airflow at inlet conditions

        Returns:
            ProcessLoad in BTU/hr and lb/hr
        """
        if cfm < 0:
            raise InvalidInputError(f"Airflow must be non-negative, got {cfm} CFM")
        mass_flow = calculate_air_mass_flow(cfm, self.inlet.specific_volume)
        return ProcessLoad(
            cfm=cfm,
            mass_flow=mass_flow,
            sensible_heat=mass_flow * self.sensible_heat,
            latent_heat=mass_flow * self.latent_heat,
            total_heat=mass_flow * self.total_heat,
            moisture_rate=mass_flow * self.moisture_change,
        )


def _build_process(
    process_type: ProcessType,
    inlet: PsychrometricState,
    outlet: PsychrometricState,
    total_heat: Optional[float] = None,
) -> PsychrometricProcess:
    sensible = AIR_SPECIFIC_HEAT * (outlet.dry_bulb_f - inlet.dry_bulb_f)
    moisture_change = outlet.humidity_ratio - inlet.humidity_ratio
    latent = LATENT_HEAT_VAPORIZATION * moisture_change
    if total_heat is None:
        total_heat = sensible + latent

    return PsychrometricProcess(
        name=process_type.value,
        process_type=process_type,
        inlet=inlet,
        outlet=outlet,
        sensible_heat=sensible,
        latent_heat=latent,
        total_heat=total_heat,
        moisture_change=moisture_change,
    )


def _check_fraction(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise InvalidInputError(f"{name} must be between 0 and 1, got {value}")


def sensible_process(
    inlet: PsychrometricState,
    target_dry_bulb_f: float,
    *,
    solver: Optional[SolverConfig] = None,
    allow_approximate: bool = False,
) -> PsychrometricProcess:
    """
    Heat or cool air at constant humidity ratio.

    Labelled by the sign of the sensible heat: a target at or above the
    inlet dry bulb is heating (zero heat for no change), below it cooling.

    Raises:
        SupersaturatedStateError: If the target is below the inlet dew point
    """
    outlet = from_dry_bulb_humidity_ratio(
        target_dry_bulb_f,
        inlet.humidity_ratio,
        inlet.pressure_psia,
        solver=solver,
        allow_approximate=allow_approximate,
    )
    if target_dry_bulb_f >= inlet.dry_bulb_f:
        process_type = ProcessType.SENSIBLE_HEATING
    else:
        process_type = ProcessType.SENSIBLE_COOLING
    return _build_process(process_type, inlet, outlet)


def cooling_dehumidification(
    inlet: PsychrometricState,
    coil_temp_f: float,
    bypass_factor: float = DEFAULT_BYPASS_FACTOR,
    *,
    solver: Optional[SolverConfig] = None,
    allow_approximate: bool = False,
) -> PsychrometricProcess:
    """
    Cooling coil with bypass factor.

    The fraction bypass_factor of the air leaves unchanged and the rest
    leaves saturated at the coil temperature; the outlet is their blend in
    dry bulb and humidity ratio. When the coil's saturation humidity ratio
    is at or above the inlet humidity ratio the coil stays dry and the
    process is sensible cooling only.

    Args:
        inlet: Entering air state
        coil_temp_f: Effective coil surface (apparatus dew point) temperature, °F
        bypass_factor: Fraction of air that bypasses the coil, 0-1

    Raises:
        InvalidInputError: If the coil is not colder than the inlet air or
            the bypass factor is outside 0-1
        SupersaturatedStateError: If the blended outlet lies above saturation
    """
    _check_fraction("Bypass factor", bypass_factor)
    if coil_temp_f >= inlet.dry_bulb_f:
        raise InvalidInputError(
            f"Coil temperature {coil_temp_f}°F must be below inlet dry bulb "
            f"{inlet.dry_bulb_f}°F"
        )

    contact = 1.0 - bypass_factor
    outlet_temp = bypass_factor * inlet.dry_bulb_f + contact * coil_temp_f
    coil_humidity_ratio = saturation_humidity_ratio(coil_temp_f, inlet.pressure_psia)

    if coil_humidity_ratio >= inlet.humidity_ratio:
        logger.debug(
            "Coil at %.1f°F is above inlet dew point, no dehumidification", coil_temp_f
        )
        outlet_humidity_ratio = inlet.humidity_ratio
        process_type = ProcessType.SENSIBLE_COOLING
    else:
        outlet_humidity_ratio = (
            bypass_factor * inlet.humidity_ratio + contact * coil_humidity_ratio
        )
        process_type = ProcessType.COOLING_DEHUMIDIFICATION

    outlet = from_dry_bulb_humidity_ratio(
        outlet_temp,
        outlet_humidity_ratio,
        inlet.pressure_psia,
        solver=solver,
        allow_approximate=allow_approximate,
    )
    return _build_process(process_type, inlet, outlet)


def evaporative_cooling(
    inlet: PsychrometricState,
    effectiveness: float = DEFAULT_EVAPORATIVE_EFFECTIVENESS,
    *,
    solver: Optional[SolverConfig] = None,
    allow_approximate: bool = False,
) -> PsychrometricProcess:
    """
    Direct evaporative cooling at constant enthalpy.

    Outlet dry bulb = t - effectiveness × (t - twb). Total heat is zero by
    definition; the sensible drop is traded for a latent gain.
    """
    _check_fraction("Effectiveness", effectiveness)

    outlet_temp = inlet.dry_bulb_f - effectiveness * (inlet.dry_bulb_f - inlet.wet_bulb_f)
    outlet = from_dry_bulb_enthalpy(
        outlet_temp,
        inlet.enthalpy,
        inlet.pressure_psia,
        solver=solver,
        allow_approximate=allow_approximate,
    )
    return _build_process(ProcessType.EVAPORATIVE_COOLING, inlet, outlet, total_heat=0.0)


def _mix_by_mass(
    state1: PsychrometricState,
    mass1: float,
    state2: PsychrometricState,
    mass2: float,
    solver: Optional[SolverConfig],
    allow_approximate: bool,
) -> PsychrometricState:
    if abs(state1.pressure_psia - state2.pressure_psia) > 1e-6:
        raise InvalidInputError(
            f"Cannot mix streams at {state1.pressure_psia} and {state2.pressure_psia} psia"
        )
    total = mass1 + mass2
    if mass1 < 0 or mass2 < 0 or total <= 0:
        raise InvalidInputError("Stream flows must be non-negative with a positive total")

    mixed_enthalpy = (mass1 * state1.enthalpy + mass2 * state2.enthalpy) / total
    mixed_humidity_ratio = (
        mass1 * state1.humidity_ratio + mass2 * state2.humidity_ratio
    ) / total
    initial_temp = (mass1 * state1.dry_bulb_f + mass2 * state2.dry_bulb_f) / total

    solver = solver or SolverConfig()
    result = dry_bulb_from_enthalpy(
        mixed_enthalpy,
        mixed_humidity_ratio,
        initial_temp,
        tolerance=solver.mixing_tolerance,
        max_iterations=solver.mixing_max_iterations,
    )
    converged = check_convergence(result, "dry_bulb_from_enthalpy", allow_approximate)

    mixed = from_dry_bulb_humidity_ratio(
        result.value,
        mixed_humidity_ratio,
        state1.pressure_psia,
        solver=solver,
        allow_approximate=allow_approximate,
    )
    if not converged:
        mixed = replace(mixed, converged=False)
    return mixed


def mix_air_streams(
    state1: PsychrometricState,
    cfm1: float,
    state2: PsychrometricState,
    cfm2: float,
    *,
    solver: Optional[SolverConfig] = None,
    allow_approximate: bool = False,
) -> PsychrometricState:
    """
    Adiabatically mix two air streams given their volumetric flows.

    Dry air mass of each stream is cfm × 60 / v; enthalpy and humidity ratio
    are mass-weighted and the mixed dry bulb is recovered from them.
    """
    if cfm1 < 0 or cfm2 < 0:
        raise InvalidInputError(f"Stream flows must be non-negative, got {cfm1} and {cfm2} CFM")
    mass1 = calculate_air_mass_flow(cfm1, state1.specific_volume)
    mass2 = calculate_air_mass_flow(cfm2, state2.specific_volume)
    return _mix_by_mass(state1, mass1, state2, mass2, solver, allow_approximate)


def mix_air_fractions(
    state1: PsychrometricState,
    fraction1: float,
    state2: PsychrometricState,
    fraction2: float,
    *,
    solver: Optional[SolverConfig] = None,
    allow_approximate: bool = False,
) -> PsychrometricState:
    """
    Mix two streams by dry air mass fraction, e.g. 20% outdoor / 80% return.

    Fractions are normalized, so (1, 4) and (0.2, 0.8) are equivalent.
    """
    return _mix_by_mass(state1, fraction1, state2, fraction2, solver, allow_approximate)


def mixing_process(
    state1: PsychrometricState,
    cfm1: float,
    state2: PsychrometricState,
    cfm2: float,
    *,
    solver: Optional[SolverConfig] = None,
    allow_approximate: bool = False,
) -> PsychrometricProcess:
    """Mix two streams and report the change relative to the first."""
    mixed = mix_air_streams(
        state1, cfm1, state2, cfm2, solver=solver, allow_approximate=allow_approximate
    )
    return _build_process(ProcessType.MIXING, state1, mixed)
