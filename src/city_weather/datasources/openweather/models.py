"""Wire shapes of the OpenWeatherMap responses we consume.

Only the fields we read are declared; anything else in the payload is
ignored.  Validation failures here become ``DecodingError`` in the client.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Wire(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class TempBlock(_Wire):
    """The ``main`` object of a forecast slot: temperature (already metric)."""

    temp: float


class MainBlock(TempBlock):
    """The ``main`` object of current conditions: adds humidity."""

    humidity: int = Field(..., ge=0, le=100)


class WeatherBlock(_Wire):
    """One item of the ``weather`` array."""

    main: str
    description: str


class CurrentWeatherResponse(_Wire):
    """Body of ``GET /weather``."""

    name: str
    main: MainBlock
    weather: list[WeatherBlock] = Field(..., min_length=1)


class ForecastItem(_Wire):
    """One 3-hour slot in ``GET /forecast``."""

    dt: int
    main: TempBlock
    weather: list[WeatherBlock] = Field(..., min_length=1)


class City(_Wire):
    name: str


class ForecastResponse(_Wire):
    """Body of ``GET /forecast``."""

    items: list[ForecastItem] = Field(..., alias="list")
    city: City
