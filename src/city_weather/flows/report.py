"""
Prefect flow that builds a weather report for one location.

Fetches current conditions and the 3-hour forecast, reduces the forecast to
daily summaries and returns both together.  If either fetch fails the error
propagates and nothing is returned: the report is all-or-nothing.

Run locally:
    python -m city_weather.flows.report "Paris,FR"
"""

from __future__ import annotations

import sys
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from city_weather.analysis.daily_forecast import aggregate_daily
from city_weather.config import get_settings
from city_weather.datasources import openweather
from city_weather.schemas import (
    CurrentConditions,
    DailyForecast,
    ForecastEntry,
    WeatherReport,
)


@task(name="fetch-current", cache_policy=NO_CACHE)
def fetch_current(client: openweather.WeatherClient, location: str) -> CurrentConditions:
    """Fetch current conditions (single attempt)."""
    return openweather.fetch_current(client, location)


@task(name="fetch-forecast", cache_policy=NO_CACHE)
def fetch_forecast(client: openweather.WeatherClient, location: str) -> list[ForecastEntry]:
    """Fetch raw 3-hour forecast slots (single attempt)."""
    return openweather.fetch_forecast(client, location)


@task(name="aggregate-forecast", cache_policy=NO_CACHE)
def aggregate_forecast(
    entries: list[ForecastEntry], now: datetime, timezone: str | None = None
) -> list[DailyForecast]:
    """Reduce forecast slots to at most five future days."""
    tz = ZoneInfo(timezone) if timezone else None
    return aggregate_daily(entries, now, tz)


@flow(name="weather-report", log_prints=True)
def build_report(location: str, now: datetime | None = None) -> WeatherReport:
    """
    Fetch and aggregate weather for ``location``.

    Args:
        location: City name, optionally with country code (``"Paris,FR"``).
        now: Reference instant for excluding today (default: current time).

    Raises:
        ValueError: ``location`` is blank.
        WeatherError: the first fetch failure; the other result is discarded.
    """
    settings = get_settings()
    client = openweather.WeatherClient.from_settings(settings)
    fetched_at = now or datetime.now(UTC)

    print(f"Fetching weather for {location!r}...")
    current = fetch_current(client, location)
    entries = fetch_forecast(client, location)
    daily = aggregate_forecast(entries, fetched_at, settings.timezone)
    print(f"Got {len(entries)} forecast slots -> {len(daily)} days for {current.location_name}")

    return WeatherReport(
        location=location.strip(),
        current=current,
        daily=daily,
        fetched_at=fetched_at,
    )


if __name__ == "__main__":
    report = build_report(sys.argv[1] if len(sys.argv) > 1 else "London,GB")
    print(f"Flow complete: {report}")
