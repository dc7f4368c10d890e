"""Weather utility functions for renderers.

Pure conversion functions with no external dependencies.
"""

from __future__ import annotations

from city_weather.schemas import TemperatureUnit

# Keyed by the provider's lower-cased ``weather.main`` category
CONDITION_ICONS: dict[str, str] = {
    "clear": "\u2600\ufe0f",
    "clouds": "\u2601\ufe0f",
    "rain": "\U0001f327\ufe0f",
    "snow": "\U0001f328\ufe0f",
    "thunderstorm": "\u26c8\ufe0f",
    "drizzle": "\U0001f326\ufe0f",
    "mist": "\U0001f32b\ufe0f",
    "fog": "\U0001f32b\ufe0f",
}
DEFAULT_ICON = "\u26c5"


def c_to_f(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def convert_temperature(celsius: float, unit: TemperatureUnit) -> float:
    """Express a stored Celsius value in the display unit."""
    if unit is TemperatureUnit.FAHRENHEIT:
        return c_to_f(celsius)
    return celsius


def format_temperature(celsius: float, unit: TemperatureUnit, *, with_unit: bool = True) -> str:
    """Whole degrees, truncated toward zero, e.g. ``71°F`` or ``21°``."""
    degrees = int(convert_temperature(celsius, unit))
    return f"{degrees}°{unit.value}" if with_unit else f"{degrees}°"


def condition_icon(condition_main: str) -> str:
    """Icon for a provider condition category (case-insensitive)."""
    return CONDITION_ICONS.get(condition_main.lower(), DEFAULT_ICON)
