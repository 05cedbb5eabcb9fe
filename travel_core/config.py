# =============================================================================
# travel_core/config.py  —  Runtime Settings
# =============================================================================
#
# Both servers read their credentials ONCE at startup and carry them around
# as an immutable Settings value.  Services receive it in their constructor;
# nothing reads os.environ after that.
#
# ENVIRONMENT VARIABLES:
#   OPENWEATHER_API_KEY   Required for every weather tool.
#   OPENCAGE_API_KEY      Optional; improves accommodation geocoding.
#   MCP_LOG_LEVEL         Logging level for the server process (default INFO).
#
# The server entry points call python-dotenv's load_dotenv() before
# Settings.from_env(), so a local .env file works too.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional


OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
OPENWEATHER_GEO_URL = "https://api.openweathermap.org/geo/1.0"
OPENCAGE_GEOCODE_URL = "https://api.opencagedata.com/geocode/v1/json"


@dataclass(frozen=True)
class Settings:
    """Immutable process configuration shared by a server's services."""

    openweather_api_key: str = ""
    opencage_api_key: str = ""
    log_level: str = "INFO"
    openweather_base_url: str = OPENWEATHER_BASE_URL
    openweather_geo_url: str = OPENWEATHER_GEO_URL
    opencage_geocode_url: str = OPENCAGE_GEOCODE_URL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables (or any mapping)."""
        env = os.environ if environ is None else environ
        return cls(
            openweather_api_key=env.get("OPENWEATHER_API_KEY", "").strip(),
            opencage_api_key=env.get("OPENCAGE_API_KEY", "").strip(),
            log_level=env.get("MCP_LOG_LEVEL", "INFO").upper(),
        )
