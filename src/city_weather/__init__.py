"""City Weather - current conditions and a 5-day forecast for any city.

Architecture::

    datasources/   External APIs (OpenWeatherMap current + 3-hour forecast)
    analysis/      Pure logic (3-hour slots -> daily high/low summaries)
    renderers/     Pure data -> text (report card, forecast rows, error messages)
    flows/         Prefect orchestration (fetch both, aggregate, return report)
    services/      Shared utilities (HTTP session with timeout, no retries)

Data flow: datasources -> analysis -> flows (WeatherReport) -> renderers -> cli
"""

__version__ = "0.1.0"

from city_weather.config import Settings
from city_weather.schemas import (
    CurrentConditions,
    DailyForecast,
    ForecastEntry,
    TemperatureUnit,
    WeatherReport,
)

__all__ = [
    "CurrentConditions",
    "DailyForecast",
    "ForecastEntry",
    "Settings",
    "TemperatureUnit",
    "WeatherReport",
    "__version__",
]
