"""Weather data models."""

from weatherdash.models.openweathermap import OpenWeatherMapResponse
from weatherdash.models.provider import Provider
from weatherdash.models.reading import WeatherReading
from weatherdash.models.units import UnitSystem
from weatherdash.models.weatherapi import WeatherApiResponse

__all__ = [
    "OpenWeatherMapResponse",
    "Provider",
    "UnitSystem",
    "WeatherApiResponse",
    "WeatherReading",
]
