"""Text rendering for the current conditions card and the 5-day forecast."""

from __future__ import annotations

from typing import TYPE_CHECKING

from city_weather.datasources.openweather.errors import ErrorKind, WeatherError
from city_weather.renderers import render_template
from city_weather.renderers.weather_utils import condition_icon, format_temperature

if TYPE_CHECKING:
    from city_weather.schemas import (
        CurrentConditions,
        DailyForecast,
        TemperatureUnit,
        WeatherReport,
    )

ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_CREDENTIALS: "Invalid API key. Check CITY_WEATHER_API_KEY",
    ErrorKind.LOCATION_NOT_FOUND: "City not found. Try format like Paris,FR",
    ErrorKind.PROVIDER_ERROR: "Server error. Try again later",
    ErrorKind.NETWORK_UNAVAILABLE: "No internet connection",
    ErrorKind.DECODING_ERROR: "Data parsing error",
}


def error_message(err: WeatherError) -> str:
    """Human-readable message for a client failure."""
    message = ERROR_MESSAGES[err.kind]
    if err.kind is ErrorKind.PROVIDER_ERROR and err.status_code is not None:
        return f"{message} (HTTP {err.status_code})"
    return message


def build_current_text(current: CurrentConditions, unit: TemperatureUnit) -> str:
    """Render the current conditions card."""
    return render_template(
        "current.txt.j2",
        location_name=current.location_name,
        temperature=format_temperature(current.temperature_c, unit),
        description=current.condition_description.title(),
        humidity=current.humidity_percent,
        icon=condition_icon(current.condition_main),
        condition_main=current.condition_main,
    )


def build_forecast_text(daily: list[DailyForecast], unit: TemperatureUnit) -> str:
    """Render one row per forecast day: weekday, icon, description, low, high."""
    rows = [
        {
            "day": day.date.strftime("%a"),
            "icon": condition_icon(day.condition_main),
            "description": day.condition_description.title(),
            "low": format_temperature(day.temp_low_c, unit, with_unit=False),
            "high": format_temperature(day.temp_high_c, unit, with_unit=False),
        }
        for day in daily
    ]
    return render_template("forecast.txt.j2", rows=rows, unit=unit.value)


def build_report_text(report: WeatherReport, unit: TemperatureUnit) -> str:
    """Render the full report: current card followed by the forecast."""
    return render_template(
        "report.txt.j2",
        current_text=build_current_text(report.current, unit),
        forecast_text=build_forecast_text(report.daily, unit),
    )
