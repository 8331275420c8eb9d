"""WeatherAPI.com ``current.json`` response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WeatherApiLocation(BaseModel):
    """Resolved location block."""

    model_config = ConfigDict(frozen=True, strict=True)

    name: str | None = None
    region: str | None = None
    country: str | None = None


class WeatherApiCondition(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    text: str = Field(min_length=1)


class WeatherApiCurrent(BaseModel):
    """Current conditions with both Celsius/Fahrenheit and kph/mph fields."""

    model_config = ConfigDict(frozen=True, strict=True)

    temp_c: float
    temp_f: float
    feelslike_c: float
    feelslike_f: float
    humidity: int = Field(ge=0, le=100)
    condition: WeatherApiCondition
    wind_kph: float
    wind_mph: float


class WeatherApiResponse(BaseModel):
    """Top-level ``current.json`` payload."""

    model_config = ConfigDict(frozen=True, strict=True)

    location: WeatherApiLocation | None = None
    current: WeatherApiCurrent
