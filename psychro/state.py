"""
Moist air state reconstruction.

A caller supplies dry-bulb temperature plus exactly one other property. Each
supported pair is its own input type, so "exactly one alternate property" is
a structural guarantee rather than a runtime check:

    WetBulbInput, RelativeHumidityInput, DewPointInput,
    HumidityRatioInput, EnthalpyInput

calculate_properties() routes the input to its reconstruction path, and
every path ends in the dry-bulb + humidity-ratio path that fills in the
remaining fields of a PsychrometricState.

Usage:
    from psychro.state import RelativeHumidityInput, calculate_properties

    state = calculate_properties(RelativeHumidityInput(75.0, 50.0))
    print(state.humidity_ratio, state.enthalpy)

    # Loose partial states are parsed into one of the input types
    state = calculate_properties({"dry_bulb_f": 95.0, "wet_bulb_f": 75.0})
"""

from dataclasses import asdict, dataclass
import logging
import math
from typing import Any, Callable, Dict, Mapping, Optional, Type, Union

from psychro.core.config import SolverConfig
from psychro.core.constants import (
    GRAINS_PER_LB,
    MAX_TEMPERATURE_F,
    MIN_TEMPERATURE_F,
    SATURATION_TOLERANCE_PCT,
    STANDARD_PRESSURE_PSIA,
)
from psychro.core.exceptions import (
    InvalidInputError,
    MissingPropertyError,
    SupersaturatedStateError,
)
from psychro.physics.properties import (
    BelowValidRange,
    DewPoint,
    dew_point_temperature,
    enthalpy,
    humidity_ratio_from_partial_pressure,
    humidity_ratio_from_wet_bulb,
    partial_pressure_from_humidity_ratio,
    relative_humidity,
    specific_volume,
)
from psychro.physics.saturation import saturation_pressure
from psychro.physics.solvers import (
    check_convergence,
    humidity_ratio_from_enthalpy,
    wet_bulb_temperature,
)

logger = logging.getLogger(__name__)

# Round trip tolerance between stored and re-derived relative humidity
RESOLVED_RH_TOLERANCE_PCT = 0.5


@dataclass(frozen=True)
class PsychrometricState:
    """
    One equilibrium condition of moist air.

    Attributes:
        dry_bulb_f: Dry-bulb temperature, °F
        wet_bulb_f: Thermodynamic wet-bulb temperature, °F
        dew_point_f: Dew point in °F, or BelowValidRange for very dry air
        relative_humidity_pct: Relative humidity, 0-100
        humidity_ratio: lb water / lb dry air
        enthalpy: BTU/lb dry air
        specific_volume: ft³/lb dry air
        pressure_psia: Total pressure, psia
        converged: False only when an approximate solver result was accepted
    """

    dry_bulb_f: float
    wet_bulb_f: float
    dew_point_f: DewPoint
    relative_humidity_pct: float
    humidity_ratio: float
    enthalpy: float
    specific_volume: float
    pressure_psia: float = STANDARD_PRESSURE_PSIA
    converged: bool = True

    @property
    def vapor_pressure(self) -> float:
        """Water vapor partial pressure in psia."""
        return partial_pressure_from_humidity_ratio(self.humidity_ratio, self.pressure_psia)

    @property
    def grains(self) -> float:
        """Humidity ratio in grains of moisture per lb dry air."""
        return self.humidity_ratio * GRAINS_PER_LB

    @property
    def dew_point_in_range(self) -> bool:
        return not isinstance(self.dew_point_f, BelowValidRange)

    @property
    def is_saturated(self) -> bool:
        return self.relative_humidity_pct >= 100.0 - SATURATION_TOLERANCE_PCT

    @property
    def is_resolved(self) -> bool:
        """
        True when every field is populated and mutually consistent.

        Re-deriving relative humidity from humidity ratio and dry bulb must
        reproduce the stored value within 0.5 %RH.
        """
        values = [
            self.dry_bulb_f,
            self.wet_bulb_f,
            self.relative_humidity_pct,
            self.humidity_ratio,
            self.enthalpy,
            self.specific_volume,
        ]
        if self.dew_point_in_range:
            values.append(self.dew_point_f)
        if any(v is None or not math.isfinite(v) for v in values):
            return False
        if self.humidity_ratio < 0:
            return False

        rederived = relative_humidity(self.vapor_pressure, saturation_pressure(self.dry_bulb_f))
        return abs(rederived - self.relative_humidity_pct) <= RESOLVED_RH_TOLERANCE_PCT

    def to_dict(self) -> Dict[str, Any]:
        """Return the state as a plain dictionary."""
        data = asdict(self)
        if not self.dew_point_in_range:
            data["dew_point_f"] = None
        return data

    def __str__(self) -> str:
        dew_point = (
            f"{self.dew_point_f:.1f}°F" if self.dew_point_in_range else str(self.dew_point_f)
        )
        return (
            f"PsychrometricState(DB={self.dry_bulb_f:.1f}°F, WB={self.wet_bulb_f:.1f}°F, "
            f"DP={dew_point}, RH={self.relative_humidity_pct:.1f}%, "
            f"W={self.humidity_ratio:.5f}, h={self.enthalpy:.2f} BTU/lb)"
        )


# =============================================================================
# Input variants
# =============================================================================


@dataclass(frozen=True)
class WetBulbInput:
    dry_bulb_f: float
    wet_bulb_f: float
    pressure_psia: float = STANDARD_PRESSURE_PSIA


@dataclass(frozen=True)
class RelativeHumidityInput:
    dry_bulb_f: float
    relative_humidity_pct: float
    pressure_psia: float = STANDARD_PRESSURE_PSIA


@dataclass(frozen=True)
class DewPointInput:
    dry_bulb_f: float
    dew_point_f: float
    pressure_psia: float = STANDARD_PRESSURE_PSIA


@dataclass(frozen=True)
class HumidityRatioInput:
    dry_bulb_f: float
    humidity_ratio: float
    pressure_psia: float = STANDARD_PRESSURE_PSIA


@dataclass(frozen=True)
class EnthalpyInput:
    dry_bulb_f: float
    enthalpy: float
    pressure_psia: float = STANDARD_PRESSURE_PSIA


StateInput = Union[
    WetBulbInput,
    RelativeHumidityInput,
    DewPointInput,
    HumidityRatioInput,
    EnthalpyInput,
]

# Partial-state key for each input variant's alternate property
ALTERNATE_PROPERTIES: Dict[str, Type] = {
    "wet_bulb_f": WetBulbInput,
    "relative_humidity_pct": RelativeHumidityInput,
    "dew_point_f": DewPointInput,
    "humidity_ratio": HumidityRatioInput,
    "enthalpy": EnthalpyInput,
}


def parse_partial_state(partial: Mapping[str, Any]) -> StateInput:
    """
    Turn a loose partial state into exactly one input variant.

    Args:
        partial: Mapping with dry_bulb_f, one alternate property and an
            optional pressure_psia

    Raises:
        MissingPropertyError: If dry_bulb_f is absent, or if zero or more
            than one alternate property is supplied
        InvalidInputError: If unknown keys are present
    """
    unknown = set(partial) - set(ALTERNATE_PROPERTIES) - {"dry_bulb_f", "pressure_psia"}
    if unknown:
        raise InvalidInputError(f"Unknown state properties: {', '.join(sorted(unknown))}")

    dry_bulb = partial.get("dry_bulb_f")
    if dry_bulb is None:
        raise MissingPropertyError("dry_bulb_f is required")

    supplied = [key for key in ALTERNATE_PROPERTIES if partial.get(key) is not None]
    if not supplied:
        raise MissingPropertyError(
            "One of wet_bulb_f, relative_humidity_pct, dew_point_f, humidity_ratio "
            "or enthalpy is required"
        )
    if len(supplied) > 1:
        raise MissingPropertyError(
            f"Exactly one alternate property is allowed, got {', '.join(supplied)}"
        )

    key = supplied[0]
    pressure = partial.get("pressure_psia")
    if pressure is None:
        pressure = STANDARD_PRESSURE_PSIA
    return ALTERNATE_PROPERTIES[key](float(dry_bulb), float(partial[key]), float(pressure))


# =============================================================================
# Reconstruction paths
# =============================================================================


def _validate_conditions(dry_bulb_f: float, pressure_psia: float) -> None:
    if not MIN_TEMPERATURE_F <= dry_bulb_f <= MAX_TEMPERATURE_F:
        raise InvalidInputError(
            f"Dry bulb {dry_bulb_f}°F is outside {MIN_TEMPERATURE_F:.0f}°F to "
            f"{MAX_TEMPERATURE_F:.0f}°F"
        )
    if pressure_psia <= 0:
        raise InvalidInputError(f"Pressure must be positive, got {pressure_psia} psia")


def _resolve(
    dry_bulb_f: float,
    humidity_ratio: float,
    pressure_psia: float,
    solver: SolverConfig,
    allow_approximate: bool,
    wet_bulb_f: Optional[float] = None,
    dew_point_f: Optional[float] = None,
    converged: bool = True,
) -> PsychrometricState:
    """Fill every field from dry bulb and humidity ratio, keeping known inputs."""
    _validate_conditions(dry_bulb_f, pressure_psia)
    if humidity_ratio < 0:
        raise InvalidInputError(f"Humidity ratio must be non-negative, got {humidity_ratio}")

    pv = partial_pressure_from_humidity_ratio(humidity_ratio, pressure_psia)
    rh = relative_humidity(pv, saturation_pressure(dry_bulb_f))
    if rh > 100.0 + SATURATION_TOLERANCE_PCT:
        raise SupersaturatedStateError(
            f"Humidity ratio {humidity_ratio:.5f} exceeds saturation at {dry_bulb_f:.2f}°F "
            f"(RH {rh:.1f}%)",
            relative_humidity_pct=rh,
        )

    if wet_bulb_f is None:
        result = wet_bulb_temperature(
            dry_bulb_f,
            humidity_ratio,
            pressure_psia,
            tolerance=solver.wet_bulb_tolerance,
            max_iterations=solver.wet_bulb_max_iterations,
        )
        converged = check_convergence(result, "wet_bulb_temperature", allow_approximate) and converged
        wet_bulb_f = result.value

    if dew_point_f is None:
        dew_point_f = dew_point_temperature(pv)

    return PsychrometricState(
        dry_bulb_f=dry_bulb_f,
        wet_bulb_f=wet_bulb_f,
        dew_point_f=dew_point_f,
        relative_humidity_pct=rh,
        humidity_ratio=humidity_ratio,
        enthalpy=enthalpy(dry_bulb_f, humidity_ratio),
        specific_volume=specific_volume(dry_bulb_f, humidity_ratio, pressure_psia),
        pressure_psia=pressure_psia,
        converged=converged,
    )


def from_dry_bulb_humidity_ratio(
    dry_bulb_f: float,
    humidity_ratio: float,
    pressure_psia: float = STANDARD_PRESSURE_PSIA,
    *,
    solver: Optional[SolverConfig] = None,
    allow_approximate: bool = False,
) -> PsychrometricState:
    """Resolve a state from dry bulb and humidity ratio (lb/lb)."""
    return _resolve(
        dry_bulb_f, humidity_ratio, pressure_psia, solver or SolverConfig(), allow_approximate
    )


def from_dry_bulb_relative_humidity(
    dry_bulb_f: float,
    relative_humidity_pct: float,
    pressure_psia: float = STANDARD_PRESSURE_PSIA,
    *,
    solver: Optional[SolverConfig] = None,
    allow_approximate: bool = False,
) -> PsychrometricState:
    """Resolve a state from dry bulb and relative humidity (0-100)."""
    _validate_conditions(dry_bulb_f, pressure_psia)
    if relative_humidity_pct < 0:
        raise InvalidInputError(
            f"Relative humidity must be non-negative, got {relative_humidity_pct}%"
        )
    if relative_humidity_pct > 100:
        raise SupersaturatedStateError(
            f"Relative humidity {relative_humidity_pct}% exceeds saturation",
            relative_humidity_pct=relative_humidity_pct,
        )

    pv = saturation_pressure(dry_bulb_f) * relative_humidity_pct / 100.0
    humidity_ratio = humidity_ratio_from_partial_pressure(pv, pressure_psia)
    return _resolve(
        dry_bulb_f, humidity_ratio, pressure_psia, solver or SolverConfig(), allow_approximate
    )


def from_dry_bulb_wet_bulb(
    dry_bulb_f: float,
    wet_bulb_f: float,
    pressure_psia: float = STANDARD_PRESSURE_PSIA,
    *,
    solver: Optional[SolverConfig] = None,
    allow_approximate: bool = False,
) -> PsychrometricState:
    """Resolve a state from dry-bulb and wet-bulb temperatures."""
    _validate_conditions(dry_bulb_f, pressure_psia)
    if wet_bulb_f > dry_bulb_f:
        raise InvalidInputError(
            f"Wet bulb {wet_bulb_f}°F cannot exceed dry bulb {dry_bulb_f}°F"
        )

    humidity_ratio = humidity_ratio_from_wet_bulb(dry_bulb_f, wet_bulb_f, pressure_psia)
    if humidity_ratio < 0:
        raise InvalidInputError(
            f"Wet bulb {wet_bulb_f}°F is too low for dry bulb {dry_bulb_f}°F "
            "(implies negative humidity ratio)"
        )
    return _resolve(
        dry_bulb_f,
        humidity_ratio,
        pressure_psia,
        solver or SolverConfig(),
        allow_approximate,
        wet_bulb_f=wet_bulb_f,
    )


def from_dry_bulb_dew_point(
    dry_bulb_f: float,
    dew_point_f: float,
    pressure_psia: float = STANDARD_PRESSURE_PSIA,
    *,
    solver: Optional[SolverConfig] = None,
    allow_approximate: bool = False,
) -> PsychrometricState:
    """Resolve a state from dry bulb and dew point."""
    _validate_conditions(dry_bulb_f, pressure_psia)
    if dew_point_f > dry_bulb_f:
        raise SupersaturatedStateError(
            f"Dew point {dew_point_f}°F cannot exceed dry bulb {dry_bulb_f}°F"
        )
    if dew_point_f < MIN_TEMPERATURE_F:
        raise InvalidInputError(
            f"Dew point {dew_point_f}°F is below {MIN_TEMPERATURE_F:.0f}°F"
        )

    humidity_ratio = humidity_ratio_from_partial_pressure(
        saturation_pressure(dew_point_f), pressure_psia
    )
    return _resolve(
        dry_bulb_f,
        humidity_ratio,
        pressure_psia,
        solver or SolverConfig(),
        allow_approximate,
        dew_point_f=dew_point_f,
    )


def from_dry_bulb_enthalpy(
    dry_bulb_f: float,
    enthalpy_btu_lb: float,
    pressure_psia: float = STANDARD_PRESSURE_PSIA,
    *,
    solver: Optional[SolverConfig] = None,
    allow_approximate: bool = False,
) -> PsychrometricState:
    """Resolve a state from dry bulb and enthalpy (BTU/lb dry air)."""
    _validate_conditions(dry_bulb_f, pressure_psia)
    solver = solver or SolverConfig()

    result = humidity_ratio_from_enthalpy(
        dry_bulb_f,
        enthalpy_btu_lb,
        tolerance=solver.enthalpy_tolerance,
        max_iterations=solver.enthalpy_max_iterations,
    )
    converged = check_convergence(result, "humidity_ratio_from_enthalpy", allow_approximate)

    # Targets within tolerance of dry air can land a hair below zero
    humidity_ratio = max(result.value, 0.0)
    return _resolve(
        dry_bulb_f,
        humidity_ratio,
        pressure_psia,
        solver,
        allow_approximate,
        converged=converged,
    )


# =============================================================================
# Dispatcher
# =============================================================================

_PATHS: Dict[Type, Callable[..., PsychrometricState]] = {
    WetBulbInput: lambda i, **kw: from_dry_bulb_wet_bulb(
        i.dry_bulb_f, i.wet_bulb_f, i.pressure_psia, **kw
    ),
    RelativeHumidityInput: lambda i, **kw: from_dry_bulb_relative_humidity(
        i.dry_bulb_f, i.relative_humidity_pct, i.pressure_psia, **kw
    ),
    DewPointInput: lambda i, **kw: from_dry_bulb_dew_point(
        i.dry_bulb_f, i.dew_point_f, i.pressure_psia, **kw
    ),
    HumidityRatioInput: lambda i, **kw: from_dry_bulb_humidity_ratio(
        i.dry_bulb_f, i.humidity_ratio, i.pressure_psia, **kw
    ),
    EnthalpyInput: lambda i, **kw: from_dry_bulb_enthalpy(
        i.dry_bulb_f, i.enthalpy, i.pressure_psia, **kw
    ),
}


def calculate_properties(
    inputs: Union[StateInput, Mapping[str, Any]],
    *,
    solver: Optional[SolverConfig] = None,
    allow_approximate: bool = False,
) -> PsychrometricState:
    """
    Resolve the complete state of moist air.

    Args:
        inputs: One of the input variants, or a partial-state mapping that
            parse_partial_state() accepts
        solver: Solver tolerances and iteration caps
        allow_approximate: Return a state flagged converged=False instead
            of raising when a solver hits its iteration cap

    Returns:
        A resolved PsychrometricState

    Raises:
        MissingPropertyError: If a partial state is incomplete or ambiguous
        InvalidInputError: If the inputs are physically impossible
        ConvergenceError: If a solver did not converge and approximate
            results are not allowed
    """
    if isinstance(inputs, Mapping):
        inputs = parse_partial_state(inputs)

    path = _PATHS.get(type(inputs))
    if path is None:
        raise InvalidInputError(f"Unsupported state input: {type(inputs).__name__}")

    logger.debug("Resolving state from %s", inputs)
    return path(inputs, solver=solver, allow_approximate=allow_approximate)
