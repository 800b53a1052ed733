"""
Iterative solvers for properties without a closed-form inverse.

Each solver runs a bounded correction loop and returns a SolverResult that
says whether the stopping tolerance was met before the iteration cap. A
capped result is never returned as if it were exact; callers decide whether
an approximate answer is acceptable.

Usage:
    from psychro.physics.solvers import wet_bulb_temperature

    result = wet_bulb_temperature(75.0, 0.0092)
    if result.converged:
        twb = result.value
"""

from dataclasses import dataclass
import logging
from typing import Callable

from psychro.core.constants import (
    AIR_SPECIFIC_HEAT,
    ENTHALPY_INITIAL_HUMIDITY_RATIO,
    ENTHALPY_MAX_ITERATIONS,
    ENTHALPY_TOLERANCE,
    LATENT_HEAT_VAPORIZATION,
    MIXING_MAX_ITERATIONS,
    MIXING_TOLERANCE,
    STANDARD_PRESSURE_PSIA,
    VAPOR_SPECIFIC_HEAT,
    WET_BULB_CEILING_MARGIN,
    WET_BULB_MAX_ITERATIONS,
    WET_BULB_SLOPE_STEP,
    WET_BULB_TOLERANCE,
)
from psychro.core.exceptions import ConvergenceError, InvalidInputError
from psychro.physics.properties import enthalpy, humidity_ratio_from_wet_bulb
from psychro.physics.saturation import saturation_temperature

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverResult:
    """
    Outcome of an iterative solve.

    Attributes:
        value: Final estimate
        iterations: Corrections applied before stopping
        converged: True if |residual| < tolerance was reached within the cap
        residual: Final residual in the solver's own units
    """

    value: float
    iterations: int
    converged: bool
    residual: float


def _solve(
    name: str,
    residual_fn: Callable[[float], float],
    slope_fn: Callable[[float], float],
    initial: float,
    tolerance: float,
    max_iterations: int,
) -> SolverResult:
    """Run x -= r(x) / r'(x) until |r(x)| < tolerance or the cap is hit."""
    x = initial
    for iteration in range(max_iterations):
        residual = residual_fn(x)
        if abs(residual) < tolerance:
            logger.debug("%s converged in %d iterations (x=%.6g)", name, iteration, x)
            return SolverResult(x, iteration, True, residual)

        slope = slope_fn(x)
        if slope <= 0:
            logger.warning("%s stalled at x=%.6g: non-positive slope %.3g", name, x, slope)
            return SolverResult(x, iteration, False, residual)
        x -= residual / slope

    residual = residual_fn(x)
    converged = abs(residual) < tolerance
    if not converged:
        logger.warning(
            "%s hit the %d iteration cap (x=%.6g, residual=%.3g)",
            name,
            max_iterations,
            x,
            residual,
        )
    return SolverResult(x, max_iterations, converged, residual)


def wet_bulb_temperature(
    temp_f: float,
    humidity_ratio: float,
    pressure_psia: float = STANDARD_PRESSURE_PSIA,
    tolerance: float = WET_BULB_TOLERANCE,
    max_iterations: int = WET_BULB_MAX_ITERATIONS,
) -> SolverResult:
    """
    Thermodynamic wet-bulb temperature from dry bulb and humidity ratio.

    Starts at twb = t and corrects the trial wet bulb until the humidity
    ratio implied by the ASHRAE psychrometric relation matches the target
    within tolerance. The correction divides the humidity ratio error by
    the local slope dW/dtwb (central difference), so the loop converges
    in a handful of iterations across -100°F to 200°F.

    Trial wet bulbs are held WET_BULB_CEILING_MARGIN below the boiling point
    at pressure_psia, where saturated air stops existing. Hot air at low
    pressure (195°F at 10 psia) starts from that ceiling instead of t.

    Args:
        temp_f: Dry-bulb temperature in °F
        humidity_ratio: Humidity ratio in lb/lb
        pressure_psia: Total pressure in psia
        tolerance: Stopping tolerance on the humidity ratio error, lb/lb
        max_iterations: Iteration cap

    Returns:
        SolverResult with the wet bulb in °F
    """
    ceiling = saturation_temperature(pressure_psia) - WET_BULB_CEILING_MARGIN

    def residual(twb: float) -> float:
        twb = min(twb, ceiling)
        return humidity_ratio_from_wet_bulb(temp_f, twb, pressure_psia) - humidity_ratio

    def slope(twb: float) -> float:
        step = WET_BULB_SLOPE_STEP
        return (residual(twb + step) - residual(twb - step)) / (2 * step)

    initial = min(temp_f, ceiling)
    return _solve("wet_bulb_temperature", residual, slope, initial, tolerance, max_iterations)


def humidity_ratio_from_enthalpy(
    temp_f: float,
    target_enthalpy: float,
    tolerance: float = ENTHALPY_TOLERANCE,
    max_iterations: int = ENTHALPY_MAX_ITERATIONS,
) -> SolverResult:
    """
    Humidity ratio that gives target_enthalpy at dry bulb temp_f.

    Corrects a humidity-ratio guess (0.01 lb/lb) until the computed enthalpy
    is within tolerance BTU/lb of the target.

    Raises:
        InvalidInputError: If the target is below the enthalpy of dry air at
            temp_f, which no non-negative humidity ratio can reach
    """
    dry_air_enthalpy = enthalpy(temp_f, 0.0)
    if target_enthalpy < dry_air_enthalpy - tolerance:
        raise InvalidInputError(
            f"Enthalpy {target_enthalpy:.3f} BTU/lb is below dry air enthalpy "
            f"{dry_air_enthalpy:.3f} BTU/lb at {temp_f:.2f}°F"
        )

    # dh/dW at constant dry bulb
    moisture_slope = LATENT_HEAT_VAPORIZATION + VAPOR_SPECIFIC_HEAT * temp_f

    return _solve(
        "humidity_ratio_from_enthalpy",
        lambda w: enthalpy(temp_f, w) - target_enthalpy,
        lambda w: moisture_slope,
        ENTHALPY_INITIAL_HUMIDITY_RATIO,
        tolerance,
        max_iterations,
    )


def dry_bulb_from_enthalpy(
    target_enthalpy: float,
    humidity_ratio: float,
    initial_temp_f: float,
    tolerance: float = MIXING_TOLERANCE,
    max_iterations: int = MIXING_MAX_ITERATIONS,
) -> SolverResult:
    """
    Dry bulb that gives target_enthalpy at a fixed humidity ratio.

    Used by air-stream mixing, starting from the mass-weighted dry bulb.
    """
    # dh/dt at constant humidity ratio
    heat_capacity = AIR_SPECIFIC_HEAT + VAPOR_SPECIFIC_HEAT * humidity_ratio

    return _solve(
        "dry_bulb_from_enthalpy",
        lambda t: enthalpy(t, humidity_ratio) - target_enthalpy,
        lambda t: heat_capacity,
        initial_temp_f,
        tolerance,
        max_iterations,
    )


def check_convergence(result: SolverResult, solver: str, allow_approximate: bool = False) -> bool:
    """
    Decide what to do with a solver result.

    Returns:
        True if the result converged, False if it did not but approximate
        results were allowed

    Raises:
        ConvergenceError: If the result did not converge and approximate
            results are not allowed
    """
    if result.converged:
        return True
    if not allow_approximate:
        raise ConvergenceError(solver, result.value, result.iterations, result.residual)
    logger.warning(
        "Accepting approximate %s result %.6g after %d iterations",
        solver,
        result.value,
        result.iterations,
    )
    return False
