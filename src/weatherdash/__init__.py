"""weatherdash — current weather lookup for a single city."""

from weatherdash.client import AsyncWeatherClient, WeatherClient
from weatherdash.exceptions import (
    WeatherConnectionError,
    WeatherDecodeError,
    WeatherError,
    WeatherHTTPError,
    WeatherTimeoutError,
    WeatherTransportError,
)
from weatherdash.models import Provider, UnitSystem, WeatherReading

__all__ = [
    "AsyncWeatherClient",
    "Provider",
    "UnitSystem",
    "WeatherClient",
    "WeatherConnectionError",
    "WeatherDecodeError",
    "WeatherError",
    "WeatherHTTPError",
    "WeatherReading",
    "WeatherTimeoutError",
    "WeatherTransportError",
]

__version__ = "0.1.0"
