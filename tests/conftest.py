"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import Mock

import pytest

from city_weather.config import get_settings
from city_weather.datasources.openweather import WeatherClient


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from the developer's environment and .env file."""
    monkeypatch.setenv("CITY_WEATHER_API_KEY", "test-key")
    monkeypatch.delenv("CITY_WEATHER_TIMEZONE", raising=False)
    monkeypatch.delenv("CITY_WEATHER_DEFAULT_UNIT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _make_response(status_code: int = 200, payload: Any = None) -> Mock:
    resp = Mock()
    resp.status_code = status_code
    resp.json.return_value = payload
    return resp


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    """Factory for stand-ins of ``requests.Response``."""
    return _make_response


@pytest.fixture
def session() -> Mock:
    return Mock()


@pytest.fixture
def client(session: Mock) -> WeatherClient:
    return WeatherClient(
        api_key="test-key",
        base_url="https://api.example.test/data/2.5",
        session=session,
    )


@pytest.fixture
def current_payload() -> dict[str, Any]:
    """Trimmed ``/weather`` body for Paris."""
    return {
        "coord": {"lon": 2.35, "lat": 48.85},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "main": {"temp": 21.4, "feels_like": 20.9, "humidity": 48, "pressure": 1017},
        "name": "Paris",
        "cod": 200,
    }


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    """Trimmed ``/forecast`` body: two slots."""
    return {
        "cod": "200",
        "cnt": 2,
        "list": [
            {
                "dt": 1718582400,
                "main": {"temp": 17.2, "humidity": 70},
                "weather": [{"main": "Clouds", "description": "broken clouds"}],
                "dt_txt": "2024-06-17 00:00:00",
            },
            {
                "dt": 1718593200,
                "main": {"temp": 15.8, "humidity": 75},
                "weather": [{"main": "Rain", "description": "light rain"}],
                "dt_txt": "2024-06-17 03:00:00",
            },
        ],
        "city": {"name": "Paris", "country": "FR", "timezone": 7200},
    }
