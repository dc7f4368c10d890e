"""5-day / 3-hour forecast from the OpenWeatherMap ``/forecast`` endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from city_weather.datasources.openweather.client import FORECAST_ENDPOINT
from city_weather.datasources.openweather.errors import DecodingError
from city_weather.datasources.openweather.models import ForecastResponse
from city_weather.schemas import ForecastEntry

if TYPE_CHECKING:
    from city_weather.datasources.openweather.client import WeatherClient


def fetch_forecast(client: WeatherClient, location: str) -> list[ForecastEntry]:
    """
    Fetch the raw 3-hour forecast slots for a location.

    The provider caps the list (normally 40 slots covering 5 days).  Slots
    are returned in provider order; grouping into days is done by
    ``analysis.daily_forecast``.
    """
    payload = client.get_json(FORECAST_ENDPOINT, location)
    try:
        body = ForecastResponse.model_validate(payload)
    except ValidationError as exc:
        raise DecodingError(f"Unexpected forecast payload: {exc.error_count()} errors") from exc

    return [
        ForecastEntry(
            timestamp=item.dt,
            temperature_c=item.main.temp,
            condition_main=item.weather[0].main,
            condition_description=item.weather[0].description,
        )
        for item in body.items
    ]
