"""OpenWeatherMap data source.

Fetches current conditions and the 5-day / 3-hour forecast for a city
(API key required).

Public API:
  - client: WeatherClient, API URL and endpoint constants
  - current: fetch_current (``/weather``)
  - forecast: fetch_forecast (``/forecast``)
  - errors: WeatherError and its closed set of subclasses
"""

from city_weather.datasources.openweather.client import OPENWEATHER_API, WeatherClient
from city_weather.datasources.openweather.current import fetch_current
from city_weather.datasources.openweather.errors import (
    DecodingError,
    ErrorKind,
    InvalidCredentials,
    LocationNotFound,
    NetworkUnavailable,
    ProviderError,
    WeatherError,
)
from city_weather.datasources.openweather.forecast import fetch_forecast

__all__ = [
    "OPENWEATHER_API",
    "DecodingError",
    "ErrorKind",
    "InvalidCredentials",
    "LocationNotFound",
    "NetworkUnavailable",
    "ProviderError",
    "WeatherClient",
    "WeatherError",
    "fetch_current",
    "fetch_forecast",
]
