"""Decode provider payloads and project them into ``WeatherReading``."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from weatherdash.exceptions import WeatherDecodeError
from weatherdash.models.openweathermap import OpenWeatherMapResponse
from weatherdash.models.provider import Provider
from weatherdash.models.reading import WeatherReading
from weatherdash.models.units import UnitSystem
from weatherdash.models.weatherapi import WeatherApiResponse

M = TypeVar("M", bound=BaseModel)


def _decode(model_type: type[M], body: str | bytes) -> M:
    """Validate a raw JSON body against a Pydantic model."""
    try:
        return model_type.model_validate_json(body)
    except ValidationError as exc:
        raise WeatherDecodeError(
            f"Failed to decode {model_type.__name__} response: {exc}"
        ) from exc


def _source(provider: Provider, name: str | None, country: str | None) -> str:
    if not name:
        return provider.display_name
    if country:
        return f"{provider.display_name} - {name}, {country}"
    return f"{provider.display_name} - {name}"


def decode_weatherapi(body: str | bytes) -> WeatherApiResponse:
    return _decode(WeatherApiResponse, body)


def decode_openweathermap(body: str | bytes) -> OpenWeatherMapResponse:
    return _decode(OpenWeatherMapResponse, body)


def project_weatherapi(response: WeatherApiResponse, units: UnitSystem) -> WeatherReading:
    """Pick the Celsius/kph or Fahrenheit/mph fields for the requested units."""
    current = response.current
    location = response.location
    if units is UnitSystem.IMPERIAL:
        temperature, feels_like, wind_speed = current.temp_f, current.feelslike_f, current.wind_mph
    else:
        temperature, feels_like, wind_speed = current.temp_c, current.feelslike_c, current.wind_kph
    return WeatherReading(
        temperature=temperature,
        feels_like=feels_like,
        humidity=current.humidity,
        description=current.condition.text,
        wind_speed=wind_speed,
        source=_source(
            Provider.WEATHERAPI,
            location.name if location else None,
            location.country if location else None,
        ),
    )


def project_openweathermap(
    response: OpenWeatherMapResponse, units: UnitSystem
) -> WeatherReading:
    """Copy values through; OpenWeatherMap already converted them to ``units``."""
    return WeatherReading(
        temperature=response.main.temp,
        feels_like=response.main.feels_like,
        humidity=response.main.humidity,
        description=response.weather[0].description,
        wind_speed=response.wind.speed,
        source=_source(
            Provider.OPENWEATHERMAP,
            response.name,
            response.sys.country if response.sys else None,
        ),
    )


def map_response(provider: Provider, body: str | bytes, units: UnitSystem) -> WeatherReading:
    """Decode a success body from ``provider`` and project it for ``units``."""
    if provider is Provider.OPENWEATHERMAP:
        return project_openweathermap(decode_openweathermap(body), units)
    return project_weatherapi(decode_weatherapi(body), units)
