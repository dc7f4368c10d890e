"""
Domain models for city weather.

Pydantic models for data coming back from the weather provider and for the
aggregated records handed to renderers.  These define the canonical schema -
the OpenWeatherMap client normalizes API responses to these.

All records are frozen value objects: created fresh per fetch or per
aggregation call, never mutated, never shared.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Units
# =============================================================================


class TemperatureUnit(StrEnum):
    """Display unit for temperatures. Stored values are always Celsius."""

    FAHRENHEIT = "F"
    CELSIUS = "C"


# =============================================================================
# Current conditions
# =============================================================================


class CurrentConditions(BaseModel):
    """Snapshot of the weather right now at a location."""

    model_config = ConfigDict(frozen=True)

    location_name: str
    temperature_c: float
    humidity_percent: int = Field(..., ge=0, le=100)
    condition_main: str = Field(..., description="Category, e.g. Clear, Rain")
    condition_description: str


# =============================================================================
# Forecast
# =============================================================================


class ForecastEntry(BaseModel):
    """One 3-hour slot from the provider's 5-day forecast."""

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(..., description="Unix seconds (UTC)")
    temperature_c: float
    condition_main: str
    condition_description: str


class DailyForecast(BaseModel):
    """Single day summary reduced from the 3-hour forecast slots."""

    model_config = ConfigDict(frozen=True)

    date: date
    temp_high_c: float
    temp_low_c: float
    condition_main: str
    condition_description: str


class WeatherReport(BaseModel):
    """Current conditions and the daily forecast, presented together."""

    model_config = ConfigDict(frozen=True)

    location: str
    current: CurrentConditions
    daily: list[DailyForecast] = Field(default_factory=list)
    fetched_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
