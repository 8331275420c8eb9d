"""Plain-text formatting of a weather reading."""

from __future__ import annotations

from weatherdash.models.provider import Provider
from weatherdash.models.reading import WeatherReading
from weatherdash.models.units import UnitSystem


def format_number(value: float) -> str:
    """Format a reading value without trailing zeros (15.0 -> '15', 6.2 -> '6.2')."""
    return f"{value:g}"


def format_reading(
    reading: WeatherReading,
    units: UnitSystem,
    city: str,
    provider: Provider = Provider.WEATHERAPI,
) -> list[str]:
    """Return the report lines for ``reading``."""
    temp_unit = units.temperature_label
    wind_unit = provider.wind_speed_label(units)
    return [
        "Weather Report",
        f"City: {city}",
        f"Temperature: {format_number(reading.temperature)}{temp_unit}",
        f"Feels like: {format_number(reading.feels_like)}{temp_unit}",
        f"Humidity: {reading.humidity}%",
        f"Conditions: {reading.description}",
        f"Wind speed: {format_number(reading.wind_speed)} {wind_unit}",
        f"Source: {reading.source}",
    ]
