"""
Shared HTTP client factory.

Provides a pre-configured ``requests.Session`` with an explicit retry policy
and a default timeout injected into every request.  The weather client builds
its session here with ``NO_RETRY``: a failed request surfaces immediately and
is classified by the caller, never retried behind its back.

Usage::

    from city_weather.services.http import create_session

    s = create_session(timeout=3.0)
    resp = s.get("https://api.example.com/v1/data")
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from city_weather import __version__

#: One attempt per request. Status codes are left to the caller.
NO_RETRY = Retry(
    total=0,
    connect=0,
    read=0,
    status=0,
    raise_on_status=False,
)

DEFAULT_TIMEOUT = 3.0  # seconds

USER_AGENT = f"city-weather/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``NO_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s
