"""ASHRAE 55 seasonal comfort-zone check."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from psychro.core.config import ComfortBand, ComfortZoneConfig
from psychro.core.exceptions import InvalidInputError
from psychro.state import PsychrometricState


class Season(Enum):
    SUMMER = "summer"
    WINTER = "winter"


_DEFAULT_ZONES = ComfortZoneConfig()

COMFORT_ZONES: Mapping[Season, ComfortBand] = MappingProxyType(
    {
        Season.SUMMER: _DEFAULT_ZONES.summer,
        Season.WINTER: _DEFAULT_ZONES.winter,
    }
)


def get_comfort_band(
    season: Union[Season, str] = Season.SUMMER, zones: Optional[ComfortZoneConfig] = None
) -> ComfortBand:
    """Look up the comfort band for a season, from zones or the default table."""
    try:
        season = Season(season)
    except ValueError:
        raise InvalidInputError(f"Unknown season: {season!r}") from None

    if zones is None:
        return COMFORT_ZONES[season]
    return getattr(zones, season.value)


def is_in_comfort_zone(
    state: PsychrometricState,
    season: Union[Season, str] = Season.SUMMER,
    zones: Optional[ComfortZoneConfig] = None,
) -> bool:
    """True if dry bulb and RH are inside the season's band (inclusive)."""
    band = get_comfort_band(season, zones)
    return (
        band.min_temp_f <= state.dry_bulb_f <= band.max_temp_f
        and band.min_rh_pct <= state.relative_humidity_pct <= band.max_rh_pct
    )
