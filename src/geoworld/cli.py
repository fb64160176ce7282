"""Print a sample World as GeoJSON.

Usage:
    python -m geoworld [--format {geojson,gpx}] [--indent N] [--verbose]

With no arguments, prints one compact GeoJSON FeatureCollection to stdout.
"""

from __future__ import annotations

import argparse
import sys

from loguru import logger
from pydantic import ValidationError

from geoworld.config import Settings
from geoworld.model import Point, Track, Waypoint
from geoworld.world import World

EXPORT_FORMATS = ("geojson", "gpx")


def build_sample_world() -> World:
    """Two waypoints and two tracks around the Columbia River Gorge."""
    w = Waypoint(-121.5, 45.5, 30, "home", "flag")
    w2 = Waypoint(-121.5, 45.6, None, "store", "dot")

    ts1 = [Point(-122, 45), Point(-122, 46), Point(-121, 46)]
    ts2 = [Point(-121, 45), Point(-121, 46)]
    ts3 = [Point(-121, 45.5), Point(-122, 45.5)]

    t = Track([ts1, ts2], "track 1")
    t2 = Track([ts3], "track 2")

    return World("My Data", [w, w2, t, t2])


def configure_logging(cfg: Settings, verbose: bool = False) -> None:
    """Route loguru output to stderr so stdout carries only the document."""
    level = "DEBUG" if (verbose or cfg.debug) else cfg.log_level
    logger.remove()
    logger.add(sys.stderr, level=level)


def load_settings(parser: argparse.ArgumentParser) -> Settings:
    """Read GEOWORLD_* settings, reporting bad values as a usage error."""
    try:
        return Settings()
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors())
        parser.error(f"invalid GEOWORLD_* setting: {fields}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the sample world as GeoJSON")
    parser.add_argument(
        "--format", choices=EXPORT_FORMATS, default=None,
        help="Output format (default: GEOWORLD_DEFAULT_FORMAT or geojson)",
    )
    parser.add_argument(
        "--indent", type=int, default=None,
        help="Pretty-print GeoJSON with this indent",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Log debug output to stderr",
    )
    args = parser.parse_args(argv)
    settings = load_settings(parser)

    configure_logging(settings, verbose=args.verbose)

    fmt = args.format or settings.default_format
    indent = args.indent if args.indent is not None else settings.json_indent

    world = build_sample_world()
    logger.info(f"Exporting {world.name!r} ({len(world)} features) as {fmt}")
    print(world.export(fmt, indent=indent))
    return 0
