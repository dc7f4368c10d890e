"""Reduce 3-hour forecast slots to daily high/low/condition summaries.

The provider returns ~40 slots spanning today plus the next five days.
Slots are bucketed by calendar day in a given time zone, today and any past
days are dropped, and each remaining day becomes one ``DailyForecast``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, date, datetime, tzinfo
from typing import TYPE_CHECKING

from city_weather.schemas import DailyForecast

if TYPE_CHECKING:
    from collections.abc import Iterable

    from city_weather.schemas import ForecastEntry

FORECAST_DAYS = 5


@dataclass
class _DayBucket:
    """Everything seen for one calendar day, in input order."""

    first: ForecastEntry
    temps: list[float] = field(default_factory=list)


def day_of(moment: datetime, tz: tzinfo | None = None) -> date:
    """
    Calendar day of ``moment`` in ``tz``.

    ``tz=None`` means the system local zone, resolved per instant so each
    moment gets the UTC offset (DST or not) in force at that moment.
    Naive datetimes are read as wall time in the zone.
    """
    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(tz).date()


def aggregate_daily(
    entries: Iterable[ForecastEntry],
    now: datetime,
    tz: tzinfo | None = None,
    *,
    days: int = FORECAST_DAYS,
) -> list[DailyForecast]:
    """
    Group forecast slots into future calendar days.

    Args:
        entries: Raw forecast slots, in provider order.
        now: The fetch instant; its calendar day and earlier are excluded.
        tz: Zone that defines day boundaries (default: system local).
        days: Maximum number of days to return.

    Returns:
        At most ``days`` summaries, ascending by date, all strictly after
        today.  High/low are the max/min slot temperatures of the day; the
        condition is taken from the first slot of that day in input order.
    """
    today = day_of(now, tz)

    buckets: dict[date, _DayBucket] = {}
    for entry in entries:
        entry_day = day_of(datetime.fromtimestamp(entry.timestamp, UTC), tz)
        if entry_day <= today:
            continue
        bucket = buckets.setdefault(entry_day, _DayBucket(first=entry))
        bucket.temps.append(entry.temperature_c)

    return [
        DailyForecast(
            date=day,
            temp_high_c=max(buckets[day].temps),
            temp_low_c=min(buckets[day].temps),
            condition_main=buckets[day].first.condition_main,
            condition_description=buckets[day].first.condition_description,
        )
        for day in sorted(buckets)[:days]
    ]
