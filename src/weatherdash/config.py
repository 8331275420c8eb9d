"""Runtime settings loaded from the environment or a ``.env`` file."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weatherdash.models.provider import Provider
from weatherdash.models.units import UnitSystem


class Settings(BaseSettings):
    """Weather lookup settings (``WEATHER_*`` environment variables)."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str = Field(min_length=1)
    provider: Provider = Provider.WEATHERAPI
    units: UnitSystem = UnitSystem.METRIC
    base_url: str | None = None
    timeout: float = 30.0

    @field_validator("units", mode="before")
    @classmethod
    def _parse_units(cls, value: object) -> UnitSystem:
        return UnitSystem.parse(value)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()  # type: ignore[call-arg]
