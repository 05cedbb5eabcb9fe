# =============================================================================
# travel_core/geocoding.py  —  Location Resolution for the Accommodation Server
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a free-text location into approximate coordinates.  It NEVER
#   fails; there are three tiers:
#
#     1. OpenCage forward geocoding, if OPENCAGE_API_KEY is configured
#     2. A fixed table of major cities (case-insensitive exact name match)
#     3. A hard-coded default (New York City)
#
#   A missing key, network error, non-2xx status, empty result or a payload
#   of the wrong shape all drop through to the next tier.
# =============================================================================

import logging
from typing import Optional

import httpx

from travel_core.config import Settings
from travel_core.models import Coordinates


logger = logging.getLogger(__name__)

CITY_COORDINATES: dict[str, Coordinates] = {
    "paris": Coordinates(48.8566, 2.3522),
    "london": Coordinates(51.5074, -0.1278),
    "new york": Coordinates(40.7128, -74.0060),
    "tokyo": Coordinates(35.6762, 139.6503),
    "barcelona": Coordinates(41.3851, 2.1734),
    "amsterdam": Coordinates(52.3676, 4.9041),
    "berlin": Coordinates(52.5200, 13.4050),
    "rome": Coordinates(41.9028, 12.4964),
    "lisbon": Coordinates(38.7223, -9.1393),
    "prague": Coordinates(50.0755, 14.4378),
    "sydney": Coordinates(-33.8688, 151.2093),
    "san francisco": Coordinates(37.7749, -122.4194),
}

DEFAULT_COORDINATES = CITY_COORDINATES["new york"]


class LocationResolver:
    """Resolve a location name to coordinates with graceful fallback."""

    def __init__(self, settings: Settings, client: Optional[httpx.AsyncClient] = None):
        self._settings = settings
        self._client = client

    async def resolve(self, location: str) -> Coordinates:
        if self._settings.opencage_api_key:
            coords = await self._lookup(location)
            if coords is not None:
                return coords
        return lookup_city(location)

    async def _lookup(self, location: str) -> Optional[Coordinates]:
        params = {"q": location, "key": self._settings.opencage_api_key, "limit": 1}
        url = self._settings.opencage_geocode_url
        try:
            if self._client is not None:
                response = await self._client.get(url, params=params)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(url, params=params)
            if not response.is_success:
                logger.warning("Geocoding %r returned HTTP %s", location, response.status_code)
                return None
            results = response.json().get("results") or []
            if not results:
                return None
            geometry = results[0]["geometry"]
            return Coordinates(lat=float(geometry["lat"]), lng=float(geometry["lng"]))
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Geocoding error for %r: %s", location, exc)
        except (KeyError, IndexError, TypeError, AttributeError) as exc:
            logger.warning("Unexpected geocoding payload for %r: %r", location, exc)
        return None


def lookup_city(location: str) -> Coordinates:
    """Coordinates from the built-in city table, else the default pair."""
    return CITY_COORDINATES.get(location.strip().lower(), DEFAULT_COORDINATES)
