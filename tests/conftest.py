"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import pytest

WEATHERAPI_URL = "https://api.weatherapi.com/v1/current.json"
OPENWEATHERMAP_URL = "https://api.openweathermap.org/data/2.5/weather"
API_KEY = "test-key"


SAMPLE_WEATHERAPI = {
    "location": {"name": "London", "country": "UK"},
    "current": {
        "temp_c": 15.0,
        "temp_f": 59.0,
        "feelslike_c": 14.0,
        "feelslike_f": 57.2,
        "humidity": 80,
        "condition": {"text": "Cloudy"},
        "wind_kph": 10.0,
        "wind_mph": 6.2,
    },
}

# Trimmed copy of a real current.json payload, extra fields included.
SAMPLE_WEATHERAPI_FULL = {
    "location": {
        "name": "Paris",
        "region": "Ile-de-France",
        "country": "France",
        "lat": 48.87,
        "lon": 2.33,
        "tz_id": "Europe/Paris",
        "localtime": "2024-05-01 14:00",
    },
    "current": {
        "last_updated": "2024-05-01 13:45",
        "temp_c": 18.0,
        "temp_f": 64.4,
        "is_day": 1,
        "condition": {
            "text": "Partly cloudy",
            "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png",
            "code": 1003,
        },
        "wind_mph": 8.1,
        "wind_kph": 13.0,
        "wind_dir": "SW",
        "pressure_mb": 1015.0,
        "humidity": 55,
        "cloud": 50,
        "feelslike_c": 18.0,
        "feelslike_f": 64.4,
        "uv": 4.0,
    },
}

SAMPLE_OPENWEATHERMAP = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [{"id": 804, "main": "Clouds", "description": "overcast clouds", "icon": "04d"}],
    "main": {
        "temp": 15.3,
        "feels_like": 14.8,
        "temp_min": 14.1,
        "temp_max": 16.2,
        "pressure": 1012,
        "humidity": 77,
    },
    "wind": {"speed": 4.1, "deg": 240},
    "sys": {"country": "GB", "sunrise": 1714536000, "sunset": 1714589000},
    "name": "London",
    "cod": 200,
}

SAMPLE_WEATHERAPI_ERROR = '{"error":{"code":1006,"message":"No matching location found."}}'
SAMPLE_WEATHERAPI_MISSING_Q = '{"error":{"code":1003,"message":"Parameter q is missing."}}'


@pytest.fixture
def api_key() -> str:
    return API_KEY
