"""Command-line entry point.

Usage:
    weatherdash London
    weatherdash "New York" --units imperial --provider openweathermap

Exit codes:
    0 - Success
    1 - Lookup failed (network, HTTP status, or response decoding)
    2 - Missing or invalid configuration
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from weatherdash._logging import configure_logging
from weatherdash.client import WeatherClient
from weatherdash.config import Settings
from weatherdash.exceptions import WeatherError
from weatherdash.models.provider import Provider
from weatherdash.models.units import UnitSystem
from weatherdash.render import format_reading

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weatherdash",
        description="Fetch and display current weather for a city.",
    )
    parser.add_argument("city", help="City name to fetch weather for")
    parser.add_argument(
        "-u", "--units",
        default=None,
        help="Units: metric or imperial (default: WEATHER_UNITS or metric)",
    )
    parser.add_argument(
        "-p", "--provider",
        choices=[p.value for p in Provider],
        default=None,
        help="Weather provider (default: WEATHER_PROVIDER or weatherapi)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log request timing to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        configure_logging(logging.INFO)

    try:
        settings = Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        print(f"error: invalid configuration\n{exc}", file=sys.stderr)
        return 2

    if args.provider:
        settings = settings.model_copy(update={"provider": Provider(args.provider)})
    units = UnitSystem.parse(args.units) if args.units is not None else settings.units

    print(f"Fetching weather for {args.city}...")
    try:
        with WeatherClient.from_settings(settings) as client:
            reading = client.fetch(args.city, units)
    except WeatherError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print()
    for line in format_reading(reading, units, args.city, settings.provider):
        print(line)
    return 0
