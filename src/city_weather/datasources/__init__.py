"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, request + error handling
    ├── errors.py         # Exceptions surfaced to callers
    ├── models.py         # Pydantic models for API response shapes
    └── {feature}.py      # Fetch functions (one per endpoint)

Fetch functions take a configured client and return domain records from
``city_weather.schemas``::

    from city_weather.datasources import openweather

    client = openweather.WeatherClient(api_key="...")
    now = openweather.fetch_current(client, "Paris,FR")
"""
