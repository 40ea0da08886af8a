#!/usr/bin/env python3
"""
geomag command line driver.

Prints magnetic elements and NED field vectors for coordinates, and
regenerates the geomagnetic table file from the IGRF reference model.
"""

import argparse
import logging
import sys
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import List, Optional

from . import config as geomag_config
from .api import get_default_model, reset_default_model
from .config import Config, load_config
from .exceptions import ConfigurationError, GeomagError
from .models.location import Location
from .models.magnetic_field import MagneticFieldModel
from .models.sampler import wrap_longitude
from .models.tables import build_igrf_table, reset_default_table, save_table
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)

# Reference locations printed by `geomag demo`
DEMO_POINTS = [
    ("Berlin", 52.5200, 13.4050),
    ("Tehran", 35.6892, 51.3890),
    ("Sydney", -33.8688, 151.2093),
    ("Quito", 0.1807, -78.4678),
    ("NorthPole-ish", 89.0, 0.0),
    ("SouthPole-ish", -89.0, 0.0),
    ("Dateline", 0.0, 179.9),
]

def format_point(model: MagneticFieldModel, name: str, lat: float, lon: float) -> str:
    """Format the field at one coordinate as two report lines."""
    intensity, declination, inclination, inside = model.get_mag_field(lat, lon)
    vector = model.get_earth_field_vector(Location.from_degrees(lat, wrap_longitude(lon)))
    return (
        f"[{name}] lat={lat:.4f} lon={lon:.4f} | Intensity={intensity:.5f} G  "
        f"Decl[deg]={declination:.3f}  Incl[deg]={inclination:.3f}  "
        f"inside:{'true' if inside else 'false'}\n"
        f"    B_ef (N,E,D) = [{vector.north:.6f}, {vector.east:.6f}, {vector.down:.6f}] Gauss"
    )

def cmd_query(args) -> int:
    print(format_point(get_default_model(), "query", args.lat, args.lon))
    return 0

def cmd_demo(args) -> int:
    model = get_default_model()
    for name, lat, lon in DEMO_POINTS:
        print(format_point(model, name, lat, lon))
        print()
    return 0

def cmd_generate(args) -> int:
    config = geomag_config.get_config()
    table_config = replace(config.table)
    if args.step is not None:
        table_config.step_deg = args.step
    if args.epoch is not None:
        table_config.epoch = args.epoch
    errors = geomag_config.validate_config(replace(config, table=table_config))
    if errors:
        raise ConfigurationError(errors)

    path = save_table(build_igrf_table(table_config), args.output)
    print(f"Wrote {path}")
    return 0

def parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date: {value!r}")

def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Geomagnetic field lookup")
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (overrides configuration)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    query = subparsers.add_parser("query", help="Field at one coordinate")
    query.add_argument("lat", type=float, help="Latitude in degrees")
    query.add_argument("lon", type=float, help="Longitude in degrees")
    query.set_defaults(func=cmd_query)

    demo = subparsers.add_parser("demo", help="Field at reference locations")
    demo.set_defaults(func=cmd_demo)

    generate = subparsers.add_parser("generate", help="Write an IGRF table file")
    generate.add_argument("output", type=Path, help="Output .npz path")
    generate.add_argument("--step", type=float, help="Grid step in degrees")
    generate.add_argument("--epoch", type=parse_date, help="Model epoch (YYYY-MM-DD)")
    generate.set_defaults(func=cmd_generate)

    return parser.parse_args(argv)

def apply_config(config: Config):
    """Install a loaded configuration as the process-wide configuration."""
    geomag_config.DEFAULT_CONFIG.table = config.table
    geomag_config.DEFAULT_CONFIG.sampler = config.sampler
    geomag_config.DEFAULT_CONFIG.logging = config.logging
    reset_default_table()
    reset_default_model()

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    try:
        if args.config:
            apply_config(load_config(args.config))

        log_config = geomag_config.get_config().logging
        setup_logging(args.log_level or log_config.level, log_config.log_file)

        return args.func(args)

    except (GeomagError, ValueError) as e:
        logger.error(f"Fatal error: {str(e)}")
        print(f"error: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())
