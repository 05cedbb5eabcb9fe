# =============================================================================
# travel_core/weather_gateway.py  —  OpenWeather HTTP Gateway
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps the three outbound calls the weather server makes:
#     - GET /data/2.5/weather     current conditions
#     - GET /data/2.5/forecast    5 days in 3-hour slices
#     - GET /geo/1.0/direct       forward geocoding
#
#   and translates HTTP outcomes into domain errors:
#     - missing API key  → MissingCredentialError (no request is made)
#     - 404 on weather/forecast → LocationNotFoundError
#     - any other non-2xx → ProviderError carrying the status
#     - transport failure → ProviderError without a status
#
#   No retries and no timeout beyond httpx's default.  A slow provider just
#   delays that one response.
# =============================================================================

import logging
from typing import Any, Optional

import httpx

from travel_core.config import Settings
from travel_core.errors import (
    LocationNotFoundError,
    MissingCredentialError,
    ProviderError,
)


logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = (
    "OpenWeather API key not configured. "
    "Please set OPENWEATHER_API_KEY environment variable."
)

# OpenWeather calls Kelvin output "standard".
_PROVIDER_UNITS = {"metric": "metric", "imperial": "imperial", "kelvin": "standard"}


class OpenWeatherGateway:
    """Thin async client for the OpenWeather REST API."""

    def __init__(self, settings: Settings, client: Optional[httpx.AsyncClient] = None):
        self._settings = settings
        self._client = client

    @property
    def configured(self) -> bool:
        return bool(self._settings.openweather_api_key)

    def require_credential(self) -> None:
        if not self.configured:
            raise MissingCredentialError(MISSING_KEY_MESSAGE)

    async def current(self, location: str, units: str) -> dict[str, Any]:
        self.require_credential()
        response = await self._get(
            f"{self._settings.openweather_base_url}/weather",
            {"q": location, "units": _PROVIDER_UNITS[units]},
        )
        self._raise_for_weather_status(response, location)
        return response.json()

    async def forecast(self, location: str, units: str) -> dict[str, Any]:
        self.require_credential()
        response = await self._get(
            f"{self._settings.openweather_base_url}/forecast",
            {"q": location, "units": _PROVIDER_UNITS[units]},
        )
        self._raise_for_weather_status(response, location)
        return response.json()

    async def geocode(self, query: str, limit: int) -> list[dict[str, Any]]:
        self.require_credential()
        response = await self._get(
            f"{self._settings.openweather_geo_url}/direct",
            {"q": query, "limit": limit},
        )
        if not response.is_success:
            raise ProviderError(
                f"Geocoding API error: {response.status_code} {response.reason_phrase}",
                status=response.status_code,
            )
        return response.json() or []

    async def _get(self, url: str, params: dict[str, Any]) -> httpx.Response:
        params = {**params, "appid": self._settings.openweather_api_key}
        logger.debug("GET %s q=%r", url, params.get("q"))
        try:
            if self._client is not None:
                return await self._client.get(url, params=params)
            async with httpx.AsyncClient() as client:
                return await client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise ProviderError(f"Weather API request failed: {exc}") from exc

    @staticmethod
    def _raise_for_weather_status(response: httpx.Response, location: str) -> None:
        if response.is_success:
            return
        if response.status_code == 404:
            raise LocationNotFoundError(location)
        raise ProviderError(
            f"Weather API error: {response.status_code} {response.reason_phrase}",
            status=response.status_code,
        )
