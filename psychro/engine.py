"""
Configured front end to the psychrometric functions.

The module-level functions in psychro.state, psychro.processes,
psychro.cooling_load and psychro.comfort are stateless. PsychrometricEngine
binds them to one EngineConfig (site pressure, solver tolerances, process
defaults, comfort bands) so an application can load settings once and call
everything with them.

Usage:
    from psychro.engine import PsychrometricEngine
    from psychro.core.config import create_engine_config, load_config

    engine = PsychrometricEngine.from_config(create_engine_config(load_config("site.yaml")))
    room = engine.resolve(dry_bulb_f=80, relative_humidity_pct=60)
    coil = engine.cooling_dehumidification(room, coil_temp_f=50)
"""

import logging
from typing import Any, Optional, Union

from psychro.comfort import Season, is_in_comfort_zone
from psychro.cooling_load import CoolingLoad, calculate_cooling_load
from psychro.core.config import EngineConfig
from psychro.processes import (
    PsychrometricProcess,
    cooling_dehumidification,
    evaporative_cooling,
    mix_air_fractions,
    mix_air_streams,
    sensible_process,
)
from psychro.state import PsychrometricState, StateInput, calculate_properties

logger = logging.getLogger(__name__)


class PsychrometricEngine:
    """Psychrometric calculations bound to one configuration."""

    @classmethod
    def from_config(cls, config: EngineConfig) -> "PsychrometricEngine":
        """Create an engine from an EngineConfig dataclass.

        Args:
            config: EngineConfig with site and solver settings

        Returns:
            A new PsychrometricEngine instance
        """
        if not isinstance(config, EngineConfig):
            raise TypeError(f"Expected EngineConfig, got {type(config).__name__}")
        return cls(config)

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()
        logger.debug(
            "Engine at %.3f psia (approximate results %s)",
            self.config.pressure_psia,
            "allowed" if self.config.allow_approximate else "rejected",
        )

    @property
    def _solver_kwargs(self) -> dict:
        return {
            "solver": self.config.solver,
            "allow_approximate": self.config.allow_approximate,
        }

    def calculate_properties(self, inputs: StateInput) -> PsychrometricState:
        """Resolve an input variant with this engine's solver settings."""
        return calculate_properties(inputs, **self._solver_kwargs)

    def resolve(self, dry_bulb_f: float, **alternate: Any) -> PsychrometricState:
        """
        Resolve a state from keyword properties at the configured pressure.

        Example:
            engine.resolve(dry_bulb_f=75, relative_humidity_pct=50)
        """
        partial = {"dry_bulb_f": dry_bulb_f, "pressure_psia": self.config.pressure_psia}
        partial.update(alternate)
        return calculate_properties(partial, **self._solver_kwargs)

    def sensible(self, inlet: PsychrometricState, target_dry_bulb_f: float) -> PsychrometricProcess:
        return sensible_process(inlet, target_dry_bulb_f, **self._solver_kwargs)

    def cooling_dehumidification(
        self,
        inlet: PsychrometricState,
        coil_temp_f: float,
        bypass_factor: Optional[float] = None,
    ) -> PsychrometricProcess:
        if bypass_factor is None:
            bypass_factor = self.config.processes.bypass_factor
        return cooling_dehumidification(inlet, coil_temp_f, bypass_factor, **self._solver_kwargs)

    def evaporative_cooling(
        self, inlet: PsychrometricState, effectiveness: Optional[float] = None
    ) -> PsychrometricProcess:
        if effectiveness is None:
            effectiveness = self.config.processes.evaporative_effectiveness
        return evaporative_cooling(inlet, effectiveness, **self._solver_kwargs)

    def mix(
        self,
        state1: PsychrometricState,
        cfm1: float,
        state2: PsychrometricState,
        cfm2: float,
    ) -> PsychrometricState:
        return mix_air_streams(state1, cfm1, state2, cfm2, **self._solver_kwargs)

    def mix_fractions(
        self,
        state1: PsychrometricState,
        fraction1: float,
        state2: PsychrometricState,
        fraction2: float,
    ) -> PsychrometricState:
        return mix_air_fractions(state1, fraction1, state2, fraction2, **self._solver_kwargs)

    def cooling_load(
        self,
        indoor: PsychrometricState,
        outdoor: PsychrometricState,
        cfm: float,
        sensible_gain_btu_hr: float = 0.0,
        latent_gain_btu_hr: float = 0.0,
    ) -> CoolingLoad:
        return calculate_cooling_load(
            indoor, outdoor, cfm, sensible_gain_btu_hr, latent_gain_btu_hr
        )

    def is_in_comfort_zone(
        self, state: PsychrometricState, season: Union[Season, str] = Season.SUMMER
    ) -> bool:
        return is_in_comfort_zone(state, season, self.config.comfort)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(pressure_psia={self.config.pressure_psia})"
