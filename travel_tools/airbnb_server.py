# =============================================================================
# travel_tools/airbnb_server.py  —  Accommodation FastMCP Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the three accommodation tools over MCP:
#     - search_airbnb_listings
#     - get_listing_details
#     - search_neighborhoods
#
#   Listings and neighborhoods are synthetic (travel_core.listings); no
#   credential is required.  OPENCAGE_API_KEY, if set, gives better
#   coordinates.
#
#   Tool parameter names on the wire are camelCase (priceMin, propertyType,
#   listingId, ...); travel_core.accommodation maps them to Python names.
#
# RUNNING THIS SERVER:
#   airbnb-mcp-server                  (console script, stdio)
#   python -m travel_tools.airbnb_server --list-tools
# =============================================================================

from dotenv import load_dotenv
from fastmcp import FastMCP

from travel_core.accommodation import AccommodationService, build_registry
from travel_core.config import Settings
from travel_tools.common import configure_logging, main as run_main, register_tools

load_dotenv()

settings = Settings.from_env()
configure_logging(settings, "airbnb")

registry = build_registry(AccommodationService(settings))

mcp = FastMCP("airbnb-mcp-server")
register_tools(mcp, registry)


def main() -> None:
    run_main(mcp, registry)


if __name__ == "__main__":
    main()
