"""Tests for the weather tools: aggregation, gateway translation, dispatch."""

import pytest

from travel_core.config import Settings
from travel_core.weather import (
    WeatherService,
    build_registry,
    most_common_description,
    round_half_up,
    summarize_forecast,
)


JAN_1_2024 = 1704067200  # 2024-01-01T00:00:00Z
THREE_HOURS = 3 * 3600


def _slice(dt: int, temp: float, humidity: int = 70, wind: float = 3.0,
           description: str = "clear sky") -> dict:
    return {
        "dt": dt,
        "main": {"temp": temp, "humidity": humidity},
        "weather": [{"description": description}],
        "wind": {"speed": wind},
    }


def _five_day_payload(days: int = 6) -> dict:
    entries = [
        _slice(JAN_1_2024 + i * THREE_HOURS, temp=float(i % 8) - 2.0)
        for i in range(days * 8)
    ]
    return {"city": {"name": "Oslo", "country": "NO"}, "list": entries}


# =============================================================================
# Forecast aggregation
# =============================================================================
def test_summarize_single_day() -> None:
    entries = [
        _slice(JAN_1_2024, 10.04, humidity=70, wind=3.0, description="rain"),
        _slice(JAN_1_2024 + THREE_HOURS, 14.25, humidity=71, wind=4.0, description="rain"),
        _slice(JAN_1_2024 + 2 * THREE_HOURS, 12.0, humidity=72, wind=4.2, description="clouds"),
    ]
    [day] = summarize_forecast(entries, 5)

    assert day.date == "2024-01-01"
    assert day.temp_min == 10.0
    assert day.temp_max == 14.3
    assert day.description == "rain"
    assert day.humidity == 71
    assert day.wind_speed == 3.7


@pytest.mark.parametrize("requested, expected", [(1, 1), (3, 3), (5, 5)])
def test_summarize_truncates_to_requested_days(requested: int, expected: int) -> None:
    days = summarize_forecast(_five_day_payload()["list"], requested)
    assert len(days) == expected
    assert [d.date for d in days] == [f"2024-01-0{n}" for n in range(1, expected + 1)]
    assert all(d.temp_min <= d.temp_max for d in days)


def test_summarize_never_exceeds_available_dates() -> None:
    assert len(summarize_forecast(_five_day_payload(days=2)["list"], 5)) == 2
    assert summarize_forecast([], 3) == []


def test_summarize_buckets_by_utc_date() -> None:
    entries = [
        _slice(JAN_1_2024 - THREE_HOURS, 1.0),  # 2023-12-31T21:00Z
        _slice(JAN_1_2024, 2.0),
    ]
    assert [d.date for d in summarize_forecast(entries, 5)] == ["2023-12-31", "2024-01-01"]


def test_most_common_tie_goes_to_last_tied_label() -> None:
    assert most_common_description(["clear", "rain", "clear", "rain"]) == "rain"
    assert most_common_description(["rain", "clear", "clear", "rain"]) == "rain"
    assert most_common_description(["snow", "clear", "clear"]) == "clear"
    assert most_common_description([]) is None


def test_missing_descriptions_become_unknown() -> None:
    entry = _slice(JAN_1_2024, 5.0)
    entry["weather"] = []
    [day] = summarize_forecast([entry], 1)
    assert day.description == "Unknown"


def test_round_half_up() -> None:
    assert round_half_up(70.5) == 71
    assert round_half_up(2.25, 1) == 2.3
    assert round_half_up(-2.5) == -2


# =============================================================================
# Dispatch through the registry
# =============================================================================
@pytest.mark.asyncio
@pytest.mark.parametrize("tool, args", [
    ("get_current_weather", {"location": "London"}),
    ("get_weather_forecast", {"location": "London", "days": 2}),
    ("search_locations", {"query": "London"}),
])
async def test_missing_credential_fails_before_network(upstream, tool, args) -> None:
    registry = build_registry(WeatherService(Settings(), client=upstream.client))

    response = await registry.dispatch(tool, args)

    assert response.is_error
    assert "OPENWEATHER_API_KEY" in response.text
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_current_weather(settings, upstream) -> None:
    upstream.route("/data/2.5/weather", json={
        "name": "London",
        "sys": {"country": "GB"},
        "main": {"temp": 11.26, "humidity": 81},
        "weather": [{"description": "light rain"}],
        "wind": {"speed": 4.1},
    })
    registry = build_registry(WeatherService(settings, client=upstream.client))

    response = await registry.dispatch("get_current_weather", {"location": "London"})

    assert not response.is_error
    assert "**Current Weather for London, GB**" in response.text
    assert "11.3°C" in response.text
    assert "light rain" in response.text
    assert "81%" in response.text
    assert "4.1 m/s" in response.text

    params = upstream.requests[0].url.params
    assert params["q"] == "London"
    assert params["units"] == "metric"
    assert params["appid"] == "test-key"


@pytest.mark.asyncio
async def test_kelvin_requests_standard_units(settings, upstream) -> None:
    upstream.route("/data/2.5/weather", json={
        "name": "Oslo",
        "sys": {"country": "NO"},
        "main": {"temp": 270.0, "humidity": 60},
        "weather": [{"description": "snow"}],
        "wind": {"speed": 2},
    })
    registry = build_registry(WeatherService(settings, client=upstream.client))

    response = await registry.dispatch("get_current_weather", {"location": "Oslo", "units": "kelvin"})

    assert upstream.requests[0].url.params["units"] == "standard"
    assert "270.0K" in response.text


@pytest.mark.asyncio
async def test_forecast_not_found(settings, upstream) -> None:
    upstream.route("/data/2.5/forecast", status=404, json={"cod": "404", "message": "city not found"})
    registry = build_registry(WeatherService(settings, client=upstream.client))

    response = await registry.dispatch("get_weather_forecast", {"location": "Nowhere12345", "days": 3})

    assert response.is_error
    assert 'Location "Nowhere12345" not found' in response.text


@pytest.mark.asyncio
async def test_forecast_provider_error_carries_status(settings, upstream) -> None:
    upstream.route("/data/2.5/forecast", status=401)
    registry = build_registry(WeatherService(settings, client=upstream.client))

    response = await registry.dispatch("get_weather_forecast", {"location": "London"})

    assert response.text == "Error: Weather API error: 401 Unauthorized"


@pytest.mark.asyncio
async def test_forecast_transport_failure(settings, upstream) -> None:
    upstream.fail("/data/2.5/forecast")
    registry = build_registry(WeatherService(settings, client=upstream.client))

    response = await registry.dispatch("get_weather_forecast", {"location": "London"})

    assert response.is_error
    assert "Weather API request failed" in response.text


@pytest.mark.asyncio
async def test_forecast_success(settings, upstream) -> None:
    upstream.route("/data/2.5/forecast", json=_five_day_payload())
    registry = build_registry(WeatherService(settings, client=upstream.client))

    response = await registry.dispatch(
        "get_weather_forecast", {"location": "Oslo", "days": 4, "units": "imperial"}
    )

    assert response.text.startswith("**4-Day Weather Forecast for Oslo, NO**")
    assert response.text.count("**Day ") == 4
    assert "**Day 4 - 2024-01-04**" in response.text
    assert "mph" in response.text
    assert "°F" in response.text


@pytest.mark.asyncio
async def test_forecast_rejects_out_of_range_days(settings, upstream) -> None:
    registry = build_registry(WeatherService(settings, client=upstream.client))

    response = await registry.dispatch("get_weather_forecast", {"location": "Oslo", "days": 6})

    assert response.text == "Error: Invalid arguments for get_weather_forecast: days: Input should be less than or equal to 5"
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_search_locations_empty_is_not_an_error(settings, upstream) -> None:
    upstream.route("/geo/1.0/direct", json=[])
    registry = build_registry(WeatherService(settings, client=upstream.client))

    response = await registry.dispatch("search_locations", {"query": "", "limit": 5})

    assert not response.is_error
    assert response.text == 'No locations found for "". Please try a different search term.'


@pytest.mark.asyncio
async def test_search_locations_lists_matches(settings, upstream) -> None:
    upstream.route("/geo/1.0/direct", json=[
        {"name": "Springfield", "state": "Illinois", "country": "US", "lat": 39.7990175, "lon": -89.6439575},
        {"name": "Springfield", "country": "AU", "lat": -33.95, "lon": 151.0},
    ])
    registry = build_registry(WeatherService(settings, client=upstream.client))

    response = await registry.dispatch("search_locations", {"query": "Springfield", "limit": 2})

    assert '**Found 2 location(s) for "Springfield":**' in response.text
    assert "1. **Springfield, Illinois, US**" in response.text
    assert "39.7990, -89.6440" in response.text
    assert "2. **Springfield, AU**" in response.text
    assert upstream.requests[0].url.params["limit"] == "2"


@pytest.mark.asyncio
async def test_search_locations_provider_error(settings, upstream) -> None:
    upstream.route("/geo/1.0/direct", status=503)
    registry = build_registry(WeatherService(settings, client=upstream.client))

    response = await registry.dispatch("search_locations", {"query": "Paris"})

    assert response.text == "Error: Geocoding API error: 503 Service Unavailable"
