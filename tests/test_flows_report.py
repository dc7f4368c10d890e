"""
Tests for the report flow module.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from typing import TYPE_CHECKING, Any
from unittest.mock import Mock, patch

import pytest

from city_weather.datasources.openweather import (
    InvalidCredentials,
    LocationNotFound,
    NetworkUnavailable,
    WeatherClient,
)
from city_weather.flows import report
from city_weather.schemas import CurrentConditions, ForecastEntry, WeatherReport

if TYPE_CHECKING:
    from collections.abc import Callable

NOW = datetime(2024, 6, 16, 0, 0, tzinfo=UTC)

CURRENT = CurrentConditions(
    location_name="Paris",
    temperature_c=21.4,
    humidity_percent=48,
    condition_main="Clear",
    condition_description="clear sky",
)

ENTRIES = [
    ForecastEntry(
        timestamp=int(datetime(2024, 6, 16, 12, tzinfo=UTC).timestamp()),
        temperature_c=25.0,
        condition_main="Clear",
        condition_description="clear sky",
    ),
    ForecastEntry(
        timestamp=int(datetime(2024, 6, 17, 6, tzinfo=UTC).timestamp()),
        temperature_c=10.0,
        condition_main="Clouds",
        condition_description="few clouds",
    ),
    ForecastEntry(
        timestamp=int(datetime(2024, 6, 17, 15, tzinfo=UTC).timestamp()),
        temperature_c=18.0,
        condition_main="Clear",
        condition_description="clear sky",
    ),
]


class TestFetchTasks:
    """Tasks delegate to the data source."""

    @patch("city_weather.flows.report.openweather.fetch_current")
    def test_fetch_current(self, mock_fetch: Mock) -> None:
        mock_fetch.return_value = CURRENT
        client = WeatherClient("k", session=Mock())

        result = report.fetch_current(client, "Paris")

        assert result == CURRENT
        mock_fetch.assert_called_once_with(client, "Paris")

    @patch("city_weather.flows.report.openweather.fetch_forecast")
    def test_fetch_forecast(self, mock_fetch: Mock) -> None:
        mock_fetch.return_value = ENTRIES
        client = WeatherClient("k", session=Mock())

        result = report.fetch_forecast(client, "Paris")

        assert result == ENTRIES
        mock_fetch.assert_called_once_with(client, "Paris")


class TestAggregateTask:
    def test_utc(self) -> None:
        result = report.aggregate_forecast(ENTRIES, NOW, "UTC")
        assert [d.date for d in result] == [date(2024, 6, 17)]
        assert (result[0].temp_low_c, result[0].temp_high_c) == (10.0, 18.0)
        assert result[0].condition_main == "Clouds"


class TestBuildReport:
    """The flow returns both results together or raises."""

    @patch("city_weather.flows.report.openweather.fetch_forecast")
    @patch("city_weather.flows.report.openweather.fetch_current")
    def test_build_report(
        self, mock_current: Mock, mock_forecast: Mock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CITY_WEATHER_TIMEZONE", "UTC")
        mock_current.return_value = CURRENT
        mock_forecast.return_value = ENTRIES

        result = report.build_report.fn(" Paris,FR ", now=NOW)

        assert result.location == "Paris,FR"
        assert result.current == CURRENT
        assert [d.date for d in result.daily] == [date(2024, 6, 17)]
        assert result.fetched_at == NOW

    @patch("city_weather.flows.report.openweather.fetch_forecast")
    @patch("city_weather.flows.report.openweather.fetch_current")
    def test_client_built_from_settings(
        self, mock_current: Mock, mock_forecast: Mock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CITY_WEATHER_API_KEY", "from-env")
        monkeypatch.setenv("CITY_WEATHER_TIMEOUT_SECONDS", "2.5")
        mock_current.return_value = CURRENT
        mock_forecast.return_value = []

        report.build_report.fn("Paris", now=NOW)

        client = mock_current.call_args.args[0]
        assert isinstance(client, WeatherClient)
        assert client.api_key == "from-env"
        assert client.timeout == 2.5
        assert mock_forecast.call_args.args[0] is client

    @patch("city_weather.flows.report.openweather.fetch_forecast")
    @patch("city_weather.flows.report.openweather.fetch_current")
    def test_current_failure_discards_forecast(
        self, mock_current: Mock, mock_forecast: Mock
    ) -> None:
        mock_current.side_effect = InvalidCredentials("bad key", status_code=401)
        mock_forecast.return_value = ENTRIES

        with pytest.raises(InvalidCredentials):
            report.build_report.fn("Paris", now=NOW)

    @patch("city_weather.flows.report.openweather.fetch_forecast")
    @patch("city_weather.flows.report.openweather.fetch_current")
    def test_forecast_failure_discards_current(
        self, mock_current: Mock, mock_forecast: Mock
    ) -> None:
        mock_current.return_value = CURRENT
        mock_forecast.side_effect = NetworkUnavailable("timed out")

        with pytest.raises(NetworkUnavailable):
            report.build_report.fn("Paris", now=NOW)

    def test_end_to_end_with_mock_session(
        self,
        make_response: Callable[..., Mock],
        current_payload: dict[str, Any],
        forecast_payload: dict[str, Any],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Real client and decoding; only the HTTP session is faked."""
        monkeypatch.setenv("CITY_WEATHER_TIMEZONE", "UTC")
        session = Mock()
        session.get.side_effect = [
            make_response(200, current_payload),
            make_response(200, forecast_payload),
        ]

        with patch(
            "city_weather.datasources.openweather.client.create_session", return_value=session
        ):
            result = report.build_report.fn("Paris", now=NOW)

        assert result.current.location_name == "Paris"
        assert len(result.daily) == 1
        assert result.daily[0].temp_high_c == 17.2
        assert result.daily[0].temp_low_c == 15.8
        assert result.daily[0].condition_description == "broken clouds"
        urls = [c.args[0] for c in session.get.call_args_list]
        assert "/weather?" in urls[0]
        assert "/forecast?" in urls[1]

    @patch("city_weather.flows.report.openweather.fetch_current")
    def test_not_found_propagates(self, mock_current: Mock) -> None:
        mock_current.side_effect = LocationNotFound("nope", status_code=404)
        with pytest.raises(LocationNotFound):
            report.build_report.fn("Atlantis", now=NOW)


class TestWeatherReport:
    def test_default_fetched_at_is_aware_utc(self) -> None:
        before = datetime.now(UTC)
        result = WeatherReport(location="Paris", current=CURRENT)
        assert result.fetched_at.tzinfo is not None
        assert result.fetched_at.utcoffset() == timedelta(0)
        assert before <= result.fetched_at <= datetime.now(UTC)

    def test_default_comparable_with_flow_timestamp(self) -> None:
        assert WeatherReport(location="Paris", current=CURRENT).fetched_at > NOW
