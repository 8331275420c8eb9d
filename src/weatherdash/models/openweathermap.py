"""OpenWeatherMap ``/weather`` response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OpenWeatherMapMain(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    temp: float
    feels_like: float
    humidity: int = Field(ge=0, le=100)


class OpenWeatherMapCondition(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    description: str = Field(min_length=1)


class OpenWeatherMapWind(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    speed: float


class OpenWeatherMapSys(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    country: str | None = None


class OpenWeatherMapResponse(BaseModel):
    """Current weather payload; values arrive in the units requested upstream."""

    model_config = ConfigDict(frozen=True, strict=True)

    name: str | None = None
    sys: OpenWeatherMapSys | None = None
    main: OpenWeatherMapMain
    weather: list[OpenWeatherMapCondition] = Field(min_length=1)
    wind: OpenWeatherMapWind
