"""
Command-line interface for the application.

This module provides the main entry point for the CLI. Commands print JSON
to stdout; errors go to stderr with a non-zero exit code.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, timedelta
from typing import Any

import uvicorn
from pydantic import ValidationError

from bitebrain import __version__
from bitebrain.config import get_settings
from bitebrain.flows.offline import download_region
from bitebrain.flows.outlook import build_outlook
from bitebrain.offline import OfflineMapError
from bitebrain.recommend import Engine, recommend
from bitebrain.reference.species import SPECIES_PROFILES
from bitebrain.schemas import Conditions, Season
from bitebrain.solunar import SolunarCalculator, solunar_day_to_dict
from bitebrain.species import get_species_for_conditions
from bitebrain.spots import get_fishing_spots, get_fishing_spots_in_radius

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="bitebrain",
        description="Fishing pattern recommendations and solunar forecasts",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'recommend' command
    rec_parser = subparsers.add_parser("recommend", help="Recommend fishing patterns")
    rec_parser.add_argument(
        "--season",
        default=Season.SPRING.value,
        help="Season or spawn phase (default: spring)",
    )
    rec_parser.add_argument("--wind", default="light", help="calm|light|moderate|strong")
    rec_parser.add_argument("--wind-mph", type=float, default=None, help="Wind speed in mph")
    rec_parser.add_argument("--temp", type=float, default=65, help="Air temperature °F")
    rec_parser.add_argument("--water-temp", type=float, default=None, help="Water temperature °F")
    rec_parser.add_argument("--clarity", default="clear", help="clear|stained|muddy")
    rec_parser.add_argument("--sky", default=None, help="sunny|cloudy|mixed")
    rec_parser.add_argument(
        "--species",
        action="append",
        default=None,
        help="Target species id (repeatable)",
    )
    rec_parser.add_argument(
        "--simple",
        action="store_true",
        help="Use the simple season/wind/temp engine",
    )

    # 'solunar' command
    sol_parser = subparsers.add_parser("solunar", help="Solunar periods for one or more days")
    sol_parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="First day, YYYY-MM-DD (default: today)",
    )
    sol_parser.add_argument("--days", type=int, default=1, help="Number of days (default: 1)")
    _add_location_args(sol_parser)

    # 'spots' command
    spots_parser = subparsers.add_parser("spots", help="List fishing spots")
    spots_parser.add_argument("--lat", type=float, default=None)
    spots_parser.add_argument("--lng", type=float, default=None)
    spots_parser.add_argument("--radius", type=float, default=50.0, help="Radius in km")

    # 'species' command
    species_parser = subparsers.add_parser("species", help="List species")
    species_parser.add_argument("--season", default=None, help="Only species suited to a season")
    species_parser.add_argument("--water-temp", type=float, default=None)

    # 'refresh' command - build the weekly outlook
    refresh_parser = subparsers.add_parser("refresh", help="Build the weekly outlook")
    refresh_parser.add_argument("--force", action="store_true", help="Rebuild even if fresh")

    # 'offline' command - download a map region
    off_parser = subparsers.add_parser("offline", help="Download an offline map region")
    off_parser.add_argument("north", type=float)
    off_parser.add_argument("south", type=float)
    off_parser.add_argument("east", type=float)
    off_parser.add_argument("west", type=float)
    off_parser.add_argument("--name", required=True, help="Region name")
    off_parser.add_argument("--id", dest="region_id", default=None, help="Region id")
    off_parser.add_argument("--min-zoom", type=int, default=10)
    off_parser.add_argument("--max-zoom", type=int, default=14)

    # 'serve' command - run the HTTP API
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def _add_location_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lat", type=float, default=None, help="Latitude (default: settings)")
    parser.add_argument("--lon", type=float, default=None, help="Longitude (default: settings)")
    parser.add_argument("--timezone", default=None, help="IANA timezone (default: settings)")


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str))


def _slug(name: str) -> str:
    return "-".join(name.lower().split())


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Location: ({settings.lat}, {settings.lon}) {settings.timezone}")
    print(f"Data dir: {settings.data_dir}")
    return 0


def cmd_recommend(args: argparse.Namespace) -> int:
    """Handle the 'recommend' command."""
    try:
        conditions = Conditions(
            season=args.season,
            wind=None if args.wind_mph is not None else args.wind,
            wind_mph=args.wind_mph,
            temp=args.temp,
            water_temp_f=args.water_temp,
            clarity=args.clarity,
            sky=args.sky,
            target_species=args.species,
        )
    except ValidationError as exc:
        print(f"Error: invalid conditions: {exc}", file=sys.stderr)
        return 1

    engine = Engine.SIMPLE if args.simple else Engine.SPECIES
    recommendations = recommend(conditions, engine)
    _print_json([r.model_dump() for r in recommendations])
    return 0


def cmd_solunar(args: argparse.Namespace) -> int:
    """Handle the 'solunar' command."""
    if args.days < 1:
        print("Error: --days must be at least 1", file=sys.stderr)
        return 1

    settings = get_settings()
    calculator = SolunarCalculator(
        args.lat if args.lat is not None else settings.lat,
        args.lon if args.lon is not None else settings.lon,
        args.timezone or settings.timezone,
    )
    start = args.date or date.today()
    days = [calculator.calculate_day(start + timedelta(days=i)) for i in range(args.days)]
    _print_json([solunar_day_to_dict(d) for d in days])
    return 0


def cmd_spots(args: argparse.Namespace) -> int:
    """Handle the 'spots' command."""
    if args.lat is not None and args.lng is not None:
        spots = get_fishing_spots_in_radius(args.lat, args.lng, args.radius)
    elif args.lat is not None or args.lng is not None:
        print("Error: --lat and --lng must be given together", file=sys.stderr)
        return 1
    else:
        spots = get_fishing_spots()
    _print_json([s.model_dump(mode="json") for s in spots])
    return 0


def cmd_species(args: argparse.Namespace) -> int:
    """Handle the 'species' command."""
    if args.season is not None:
        ids = get_species_for_conditions({"season": args.season, "water_temp": args.water_temp})
    else:
        ids = [str(s) for s in SPECIES_PROFILES]
    _print_json(
        [
            {
                "id": species_id,
                "name": SPECIES_PROFILES[species_id].name,
                "scientific_name": SPECIES_PROFILES[species_id].scientific_name,
            }
            for species_id in ids
        ]
    )
    return 0


def cmd_refresh(args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: build the weekly outlook."""
    settings = get_settings()
    print(f"Building outlook for ({settings.lat}, {settings.lon})...", file=sys.stderr)
    outlook = build_outlook(
        lat=settings.lat,
        lon=settings.lon,
        timezone=settings.timezone,
        force=args.force,
    )
    print(f"Done. Outlook for {outlook.get('generated_for', 'unknown date')}.", file=sys.stderr)
    return 0


def cmd_offline(args: argparse.Namespace) -> int:
    """Handle the 'offline' command: download tiles for a region."""
    settings = get_settings()
    if not settings.mapbox_token:
        print("Error: set BITEBRAIN_MAPBOX_TOKEN to download map tiles", file=sys.stderr)
        return 1

    def _progress(completed: int, total: int, key: str) -> None:
        print(f"[{completed}/{total}] {key}", file=sys.stderr)

    try:
        result = download_region(
            region_id=args.region_id or _slug(args.name),
            name=args.name,
            north=args.north,
            south=args.south,
            east=args.east,
            west=args.west,
            min_zoom=args.min_zoom,
            max_zoom=args.max_zoom,
            token=settings.mapbox_token,
            url_template=settings.tile_url_template,
            on_progress=_progress,
        )
    except (OfflineMapError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _print_json(
        {
            "id": result["region"]["id"],
            "total": result["total"],
            "downloaded": result["downloaded"],
            "failed": result["failed"],
        }
    )
    return 0 if result["failed"] == 0 else 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: run the HTTP API with uvicorn."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    print(f"Serving API on http://{settings.api_host}:{port}/ (Ctrl+C to stop)", file=sys.stderr)
    uvicorn.run(
        "bitebrain.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=port,
        log_level="debug" if args.debug else "info",
    )
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    settings = get_settings()
    debug = args.debug or settings.debug
    logging.basicConfig(
        level=logging.DEBUG if debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if debug:
        logger.debug("Debug mode enabled. Settings: %s", settings)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "recommend": cmd_recommend,
        "solunar": cmd_solunar,
        "spots": cmd_spots,
        "species": cmd_species,
        "refresh": cmd_refresh,
        "offline": cmd_offline,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
