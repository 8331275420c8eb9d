"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from weatherdash.config import Settings, get_settings
from weatherdash.models import Provider, UnitSystem


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("API_KEY", "PROVIDER", "UNITS", "BASE_URL", "TIMEOUT"):
        monkeypatch.delenv(f"WEATHER_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.setenv("WEATHER_API_KEY", "abc")
        settings = Settings()
        assert settings.api_key == "abc"
        assert settings.provider is Provider.WEATHERAPI
        assert settings.units is UnitSystem.METRIC
        assert settings.base_url is None
        assert settings.timeout == 30.0

    def test_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("WEATHER_API_KEY", "abc")
        monkeypatch.setenv("WEATHER_PROVIDER", "openweathermap")
        monkeypatch.setenv("WEATHER_UNITS", "Imperial")
        monkeypatch.setenv("WEATHER_TIMEOUT", "5")
        settings = Settings()
        assert settings.provider is Provider.OPENWEATHERMAP
        assert settings.units is UnitSystem.IMPERIAL
        assert settings.timeout == 5.0

    def test_unknown_units_fall_back_to_metric(self, monkeypatch) -> None:
        monkeypatch.setenv("WEATHER_API_KEY", "abc")
        monkeypatch.setenv("WEATHER_UNITS", "kelvin")
        assert Settings().units is UnitSystem.METRIC

    def test_dotenv_file(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("WEATHER_API_KEY=from-file\n", encoding="utf-8")
        assert Settings().api_key == "from-file"

    def test_api_key_required(self) -> None:
        with pytest.raises(ValidationError):
            Settings()

    def test_empty_api_key_rejected(self, monkeypatch) -> None:
        monkeypatch.setenv("WEATHER_API_KEY", "")
        with pytest.raises(ValidationError):
            Settings()

    def test_unknown_provider_rejected(self, monkeypatch) -> None:
        monkeypatch.setenv("WEATHER_API_KEY", "abc")
        monkeypatch.setenv("WEATHER_PROVIDER", "darksky")
        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self, monkeypatch) -> None:
        monkeypatch.setenv("WEATHER_API_KEY", "abc")
        assert get_settings() is get_settings()
