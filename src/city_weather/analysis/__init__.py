"""Pure transformations over data source records.

Dependency rule: analysis/ imports from ``city_weather.schemas`` only.
It never fetches data or produces text.

Modules:
  - daily_forecast: 3-hour forecast slots -> up to 5 daily summaries
"""

from city_weather.analysis.daily_forecast import FORECAST_DAYS, aggregate_daily

__all__ = ["FORECAST_DAYS", "aggregate_daily"]
