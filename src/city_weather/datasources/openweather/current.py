"""Current conditions from the OpenWeatherMap ``/weather`` endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from city_weather.datasources.openweather.client import CURRENT_ENDPOINT
from city_weather.datasources.openweather.errors import DecodingError
from city_weather.datasources.openweather.models import CurrentWeatherResponse
from city_weather.schemas import CurrentConditions

if TYPE_CHECKING:
    from city_weather.datasources.openweather.client import WeatherClient


def fetch_current(client: WeatherClient, location: str) -> CurrentConditions:
    """
    Fetch the current weather for a location.

    Args:
        client: Configured provider client.
        location: City name, optionally with country code (``"Paris,FR"``).

    Returns:
        A fresh ``CurrentConditions`` snapshot (Celsius).
    """
    payload = client.get_json(CURRENT_ENDPOINT, location)
    try:
        body = CurrentWeatherResponse.model_validate(payload)
    except ValidationError as exc:
        raise DecodingError(
            f"Unexpected current weather payload: {exc.error_count()} errors"
        ) from exc

    condition = body.weather[0]
    return CurrentConditions(
        location_name=body.name,
        temperature_c=body.main.temp,
        humidity_percent=body.main.humidity,
        condition_main=condition.main,
        condition_description=condition.description,
    )
