#!/usr/bin/env python3
"""
Command-line psychrometric state calculator.

    psychro --dry-bulb 75 --rh 50
    psychro --dry-bulb 95 --wet-bulb 75 --json
    psychro --dry-bulb 76 --rh 45 --season summer --config site.yaml
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from psychro.core.config import create_engine_config, get_default_config, load_config
from psychro.core.exceptions import PsychrometricError
from psychro.engine import PsychrometricEngine

logger = logging.getLogger(__name__)

# CLI flag → partial state key
_ALTERNATE_FLAGS = {
    "wet_bulb": "wet_bulb_f",
    "rh": "relative_humidity_pct",
    "dew_point": "dew_point_f",
    "humidity_ratio": "humidity_ratio",
    "enthalpy": "enthalpy",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="psychro", description="Resolve the full psychrometric state of moist air."
    )
    parser.add_argument("--dry-bulb", type=float, required=True, help="Dry-bulb temperature, °F")

    alternate = parser.add_mutually_exclusive_group(required=True)
    alternate.add_argument("--wet-bulb", type=float, help="Wet-bulb temperature, °F")
    alternate.add_argument("--rh", type=float, help="Relative humidity, %%")
    alternate.add_argument("--dew-point", type=float, help="Dew point, °F")
    alternate.add_argument("--humidity-ratio", type=float, help="Humidity ratio, lb/lb")
    alternate.add_argument("--enthalpy", type=float, help="Enthalpy, BTU/lb dry air")

    parser.add_argument("--pressure", type=float, help="Total pressure, psia")
    parser.add_argument("--config", help="YAML or JSON engine configuration")
    parser.add_argument("--season", choices=["summer", "winter"], help="Report comfort zone")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the calculator; returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = create_engine_config(load_config(args.config)) if args.config else get_default_config()
    except (OSError, TypeError, ValueError) as e:
        logger.error("Could not load configuration %s: %s", args.config, e)
        return 2

    engine = PsychrometricEngine.from_config(config)
    alternate = {
        key: getattr(args, flag)
        for flag, key in _ALTERNATE_FLAGS.items()
        if getattr(args, flag) is not None
    }
    if args.pressure is not None:
        alternate["pressure_psia"] = args.pressure

    try:
        state = engine.resolve(args.dry_bulb, **alternate)
    except PsychrometricError as e:
        logger.error("Calculation failed: %s", e)
        return 1

    comfortable = engine.is_in_comfort_zone(state, args.season) if args.season else None

    if args.json:
        output = state.to_dict()
        if comfortable is not None:
            output["in_comfort_zone"] = comfortable
        print(json.dumps(output, indent=2))
    else:
        print(state)
        print(f"  Specific volume: {state.specific_volume:.3f} ft³/lb")
        print(f"  Humidity ratio:  {state.grains:.1f} gr/lb")
        if comfortable is not None:
            print(f"  In {args.season} comfort zone: {'yes' if comfortable else 'no'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
