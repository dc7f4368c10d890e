"""
Application settings.

Values come from environment variables prefixed with ``CITY_WEATHER_`` and an
optional ``.env`` file in the working directory, e.g.::

    CITY_WEATHER_API_KEY=abc123
    CITY_WEATHER_TIMEZONE=Europe/Paris
"""

from __future__ import annotations

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from city_weather.schemas import TemperatureUnit


class Settings(BaseSettings):
    """Process-wide, read-only configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CITY_WEATHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "city-weather"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Provider
    api_key: SecretStr = SecretStr("")
    base_url: str = "https://api.openweathermap.org/data/2.5"
    timeout_seconds: float = Field(default=3.0, gt=0)

    # Presentation
    timezone: str | None = Field(
        default=None, description="IANA zone for day boundaries (default: system local)"
    )
    default_unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str | None) -> str | None:
        """Reject zone names the tz database does not know."""
        if not value:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown time zone {value!r}") from exc
        return value


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
