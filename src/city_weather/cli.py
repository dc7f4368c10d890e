"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from city_weather import __version__
from city_weather.config import get_settings
from city_weather.datasources.openweather import WeatherError
from city_weather.flows.report import build_report
from city_weather.renderers.report import build_report_text, error_message
from city_weather.schemas import TemperatureUnit

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="city-weather",
        description="Current weather and 5-day forecast for a city",
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

    # 'forecast' command - fetch and print the report
    forecast_parser = subparsers.add_parser("forecast", help="Show weather for a city")
    forecast_parser.add_argument(
        "location",
        type=str,
        help='City name, optionally with country code (e.g. "Paris,FR")',
    )
    forecast_parser.add_argument(
        "--unit",
        type=TemperatureUnit,
        choices=list(TemperatureUnit),
        default=None,
        help="Temperature unit, C or F (default: default_unit from settings)",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def configure_logging(debug: bool = False) -> None:
    """Configure root logging from settings (``--debug`` forces DEBUG)."""
    level = logging.DEBUG if debug else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command."""
    settings = get_settings()
    location = args.location.strip()
    if not location:
        print("Please enter a city name", file=sys.stderr)
        return 1

    unit = args.unit or settings.default_unit
    try:
        report = build_report(location)
    except WeatherError as err:
        logger.debug("Lookup for %r failed", location, exc_info=err)
        print(f"Error: {error_message(err)}", file=sys.stderr)
        return 1

    print(build_report_text(report, unit))
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Provider: {settings.base_url}")
    print(f"Timeout: {settings.timeout_seconds}s")
    print(f"API key: {'set' if settings.api_key.get_secret_value() else 'missing'}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    try:
        get_settings()
    except ValidationError as err:
        print(f"Invalid configuration: {err}", file=sys.stderr)
        return 2

    configure_logging(debug=args.debug)

    commands = {
        "forecast": cmd_forecast,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
