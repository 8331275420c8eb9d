"""Supported weather providers."""

from __future__ import annotations

from enum import Enum

from weatherdash.models.units import UnitSystem


class Provider(str, Enum):
    """Weather provider, selected through configuration."""

    WEATHERAPI = "weatherapi"
    OPENWEATHERMAP = "openweathermap"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def default_base_url(self) -> str:
        return _BASE_URLS[self]

    @property
    def endpoint(self) -> str:
        return _ENDPOINTS[self]

    def query_params(self, city: str, api_key: str, units: UnitSystem) -> list[tuple[str, str]]:
        """Build the query string for a current-conditions lookup.

        WeatherAPI.com returns both unit families in one payload, so units only
        travel upstream for OpenWeatherMap.
        """
        if self is Provider.OPENWEATHERMAP:
            return [("q", city), ("appid", api_key), ("units", units.value)]
        return [("key", api_key), ("q", city)]

    def wind_speed_label(self, units: UnitSystem) -> str:
        if units is UnitSystem.IMPERIAL:
            return "mph"
        # OpenWeatherMap reports metric wind in meters per second.
        return "m/s" if self is Provider.OPENWEATHERMAP else "km/h"


_DISPLAY_NAMES = {
    Provider.WEATHERAPI: "WeatherAPI.com",
    Provider.OPENWEATHERMAP: "OpenWeatherMap",
}

_BASE_URLS = {
    Provider.WEATHERAPI: "https://api.weatherapi.com/v1",
    Provider.OPENWEATHERMAP: "https://api.openweathermap.org/data/2.5",
}

_ENDPOINTS = {
    Provider.WEATHERAPI: "/current.json",
    Provider.OPENWEATHERMAP: "/weather",
}
