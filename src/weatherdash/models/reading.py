"""Unified weather reading model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WeatherReading(BaseModel):
    """Current conditions for one location, independent of the provider.

    Temperatures follow the requested unit system. Wind speed is km/h (metric)
    or mph (imperial) for WeatherAPI.com; OpenWeatherMap reports metric wind in
    m/s, see ``Provider.wind_speed_label``.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    temperature: float
    feels_like: float
    humidity: int = Field(ge=0, le=100)
    description: str = Field(min_length=1)
    wind_speed: float
    source: str
