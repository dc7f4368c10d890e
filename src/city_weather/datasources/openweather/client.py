"""OpenWeatherMap API client: URLs, request construction, error classification.

API docs:
  - Current weather: https://openweathermap.org/current
  - 5 day / 3 hour forecast: https://openweathermap.org/forecast5

The client is a plain value built once with its configuration (API key,
base URL, timeout).  It holds no per-request state, so one instance can
serve any number of independent lookups.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote, urlencode

import requests

from city_weather.datasources.openweather.errors import (
    DecodingError,
    NetworkUnavailable,
    error_for_status,
)
from city_weather.services.http import DEFAULT_TIMEOUT, create_session

if TYPE_CHECKING:
    from city_weather.config import Settings

logger = logging.getLogger(__name__)

OPENWEATHER_API = "https://api.openweathermap.org/data/2.5"

CURRENT_ENDPOINT = "weather"
FORECAST_ENDPOINT = "forecast"

# Always fetch Celsius; conversion is a display concern
UNITS = "metric"


class WeatherClient:
    """Issues single, unretried GETs against the provider and classifies failures."""

    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_API,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or create_session(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> WeatherClient:
        """Build a client from application settings."""
        return cls(
            api_key=settings.api_key.get_secret_value(),
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
        )

    def build_url(self, endpoint: str, location: str) -> str:
        """Full request URL with the location percent-encoded into the query."""
        query = urlencode(
            {"q": location, "appid": self.api_key, "units": UNITS},
            quote_via=quote,
        )
        return f"{self.base_url}/{endpoint}?{query}"

    def get_json(self, endpoint: str, location: str) -> Any:
        """
        GET ``endpoint`` for ``location`` and return the decoded JSON body.

        Args:
            endpoint: ``"weather"`` or ``"forecast"``.
            location: Free-text city, optionally qualified (``"Paris,FR"``).

        Raises:
            ValueError: ``location`` is empty or whitespace.
            WeatherError: one of the classified failures (see ``errors``).
        """
        location = location.strip()
        if not location:
            raise ValueError("location must not be empty")

        logger.debug("GET /%s q=%r", endpoint, location)
        try:
            resp = self.session.get(self.build_url(endpoint, location), timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Request to /%s failed: %s", endpoint, type(exc).__name__)
            raise NetworkUnavailable(f"Cannot reach weather provider: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            err = error_for_status(resp.status_code, location)
            logger.warning("/%s returned HTTP %d (%s)", endpoint, resp.status_code, err.kind)
            raise err

        try:
            return resp.json()
        except ValueError as exc:
            raise DecodingError(f"Response from /{endpoint} is not valid JSON") from exc
