"""Closed error taxonomy for the OpenWeatherMap client.

Every failure the client can surface is one of the ``WeatherError``
subclasses below; callers match on the class or on ``err.kind`` and never
see raw ``requests`` or pydantic exceptions.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """What went wrong, as seen by the caller."""

    INVALID_CREDENTIALS = "invalid_credentials"
    LOCATION_NOT_FOUND = "location_not_found"
    PROVIDER_ERROR = "provider_error"
    NETWORK_UNAVAILABLE = "network_unavailable"
    DECODING_ERROR = "decoding_error"


class WeatherError(Exception):
    """Base class for every client failure."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidCredentials(WeatherError):
    """HTTP 401: API key missing or rejected."""

    kind = ErrorKind.INVALID_CREDENTIALS


class LocationNotFound(WeatherError):
    """HTTP 404: no matching location."""

    kind = ErrorKind.LOCATION_NOT_FOUND


class ProviderError(WeatherError):
    """Any other non-2xx status."""

    kind = ErrorKind.PROVIDER_ERROR


class NetworkUnavailable(WeatherError):
    """Connectivity failure or timeout before a response arrived."""

    kind = ErrorKind.NETWORK_UNAVAILABLE


class DecodingError(WeatherError):
    """Response body is not JSON or does not match the expected shape."""

    kind = ErrorKind.DECODING_ERROR


def error_for_status(status_code: int, location: str) -> WeatherError:
    """Map a non-2xx HTTP status to its error class."""
    if status_code == 401:
        return InvalidCredentials("API key missing or rejected", status_code=status_code)
    if status_code == 404:
        return LocationNotFound(f"No location matching {location!r}", status_code=status_code)
    return ProviderError(f"Provider returned HTTP {status_code}", status_code=status_code)
