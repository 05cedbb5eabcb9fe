# =============================================================================
# travel_core/weather.py  —  Weather Tools (current, forecast, place search)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Implements the three weather operations on top of OpenWeatherGateway and
#   declares their tool contracts.
#
# THE ONE PIECE OF REAL LOGIC: FORECAST AGGREGATION
#   OpenWeather's /forecast returns ~40 entries, one every 3 hours.  Callers
#   want days, so summarize_forecast():
#     1. buckets entries by UTC calendar date, in the order dates appear
#     2. for the first N dates computes
#          min / max temperature
#          the most frequent condition description
#          mean humidity (integer) and mean wind speed (one decimal)
#
#   Ties for "most frequent" go to the LAST description among the tied
#   ones once the list is stably sorted by frequency.  In practice that is
#   the tied label whose final occurrence comes latest in the day.
# =============================================================================

import logging
import math
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Literal, Optional

import httpx
from pydantic import Field

from travel_core import formatting
from travel_core.config import Settings
from travel_core.models import DailyForecast, ForecastSeries, PlaceCandidate, WeatherSnapshot
from travel_core.registry import ToolRegistry
from travel_core.schema import ToolArguments, ToolDescriptor
from travel_core.weather_gateway import OpenWeatherGateway


logger = logging.getLogger(__name__)


# =============================================================================
# Tool contracts
# =============================================================================
Units = Literal["metric", "imperial", "kelvin"]

_UNITS_DESCRIPTION = "Temperature units (metric=Celsius, imperial=Fahrenheit, kelvin=Kelvin)"


class CurrentWeatherArgs(ToolArguments):
    location: str = Field(
        description="City name, state code and country code divided by comma "
        "(e.g., 'London,UK' or 'New York,NY,US')",
    )
    units: Units = Field("metric", description=_UNITS_DESCRIPTION)


class ForecastArgs(ToolArguments):
    location: str = Field(
        description="City name, state code and country code divided by comma",
    )
    days: int = Field(3, ge=1, le=5, description="Number of days for forecast (1-5)")
    units: Units = Field("metric", description=_UNITS_DESCRIPTION)


class SearchLocationsArgs(ToolArguments):
    query: str = Field(description="Location search query (city, state, country)")
    limit: int = Field(5, ge=1, le=10, description="Maximum number of results to return")


CURRENT_WEATHER_TOOL = ToolDescriptor(
    name="get_current_weather",
    description="Get current weather information for a specific location",
    arguments=CurrentWeatherArgs,
)

FORECAST_TOOL = ToolDescriptor(
    name="get_weather_forecast",
    description="Get weather forecast for a specific location",
    arguments=ForecastArgs,
)

SEARCH_LOCATIONS_TOOL = ToolDescriptor(
    name="search_locations",
    description="Search for locations by name to get accurate coordinates",
    arguments=SearchLocationsArgs,
)


# =============================================================================
# Service
# =============================================================================
class WeatherService:
    """The weather server's domain handlers."""

    def __init__(
        self,
        settings: Settings,
        client: Optional[httpx.AsyncClient] = None,
        gateway: Optional[OpenWeatherGateway] = None,
    ):
        self.settings = settings
        self.gateway = gateway or OpenWeatherGateway(settings, client=client)

    async def get_current_weather(self, args: CurrentWeatherArgs) -> str:
        location, units = args.location, args.units
        data = await self.gateway.current(location, units)
        snapshot = parse_current(data, units)
        logger.info("Current weather for %s: %s", snapshot.location, snapshot.description)
        return formatting.format_current_weather(snapshot)

    async def get_weather_forecast(self, args: ForecastArgs) -> str:
        location, days, units = args.location, args.days, args.units
        data = await self.gateway.forecast(location, units)
        city = data.get("city", {})
        series = ForecastSeries(
            location=f"{city.get('name', location)}, {city.get('country', '')}".rstrip(", "),
            units=units,
            days=summarize_forecast(data.get("list", []), days),
        )
        logger.info("Forecast for %s: %d day(s)", series.location, len(series.days))
        return formatting.format_forecast(series)

    async def search_locations(self, args: SearchLocationsArgs) -> str:
        query, limit = args.query, args.limit
        results = await self.gateway.geocode(query, limit)
        candidates = [parse_place(item) for item in results]
        if not candidates:
            return f'No locations found for "{query}". Please try a different search term.'
        return formatting.format_places(query, candidates)


def build_registry(service: WeatherService) -> ToolRegistry:
    registry = ToolRegistry("weather-mcp-server")
    registry.register(CURRENT_WEATHER_TOOL, service.get_current_weather)
    registry.register(FORECAST_TOOL, service.get_weather_forecast)
    registry.register(SEARCH_LOCATIONS_TOOL, service.search_locations)
    return registry


# =============================================================================
# Payload mapping
# =============================================================================
def parse_current(data: dict[str, Any], units: str) -> WeatherSnapshot:
    """Map an OpenWeather /weather payload to a WeatherSnapshot."""
    weather = data.get("weather") or [{}]
    return WeatherSnapshot(
        location=f"{data['name']}, {data.get('sys', {}).get('country', '')}".rstrip(", "),
        temperature=round_half_up(data["main"]["temp"], 1),
        description=weather[0].get("description", "Unknown"),
        humidity=data["main"]["humidity"],
        wind_speed=data.get("wind", {}).get("speed", 0),
        units=units,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


def parse_place(item: dict[str, Any]) -> PlaceCandidate:
    return PlaceCandidate(
        name=item["name"],
        country=item.get("country", ""),
        state=item.get("state"),
        lat=float(item["lat"]),
        lon=float(item["lon"]),
    )


def summarize_forecast(entries: list[dict[str, Any]], days: int) -> list[DailyForecast]:
    """Aggregate 3-hour forecast slices into at most ``days`` daily records.

    Args:
        entries: The provider's ``list`` array; each entry has ``dt`` (epoch
            seconds), ``main.temp``, ``main.humidity``, ``weather[0].description``
            and ``wind.speed``.
        days: Maximum number of days to return.

    Returns:
        One DailyForecast per distinct UTC date, in encounter order, truncated
        to ``days``.
    """
    buckets: dict[str, list[dict[str, Any]]] = {}
    for entry in entries:
        day = datetime.fromtimestamp(entry["dt"], tz=timezone.utc).date().isoformat()
        buckets.setdefault(day, []).append(entry)

    result = []
    for day, slices in list(buckets.items())[:days]:
        temps = [s["main"]["temp"] for s in slices]
        descriptions = [
            (s.get("weather") or [{}])[0].get("description")
            for s in slices
        ]
        descriptions = [d for d in descriptions if d]
        humidity = sum(s["main"]["humidity"] for s in slices) / len(slices)
        wind = sum(s.get("wind", {}).get("speed", 0) for s in slices) / len(slices)

        result.append(DailyForecast(
            date=day,
            temp_min=round_half_up(min(temps), 1),
            temp_max=round_half_up(max(temps), 1),
            description=most_common_description(descriptions) or "Unknown",
            humidity=int(round_half_up(humidity)),
            wind_speed=round_half_up(wind, 1),
        ))
    return result


def most_common_description(descriptions: list[str]) -> Optional[str]:
    """Most frequent label; ties resolve to the last one after a stable sort."""
    if not descriptions:
        return None
    counts = Counter(descriptions)
    return sorted(descriptions, key=counts.__getitem__)[-1]


def round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
