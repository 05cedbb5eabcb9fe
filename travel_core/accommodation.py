# =============================================================================
# travel_core/accommodation.py  —  Accommodation Tools
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Implements the accommodation server's three operations and declares
#   their tool contracts:
#     - search_airbnb_listings  location + filters → synthetic listings
#     - get_listing_details     listing id → one seed-derived listing
#     - search_neighborhoods    location → popular districts
#
#   None of them needs a credential.  Coordinates come from
#   LocationResolver, which always answers.
# =============================================================================

import logging
import random
from typing import Annotated, Literal, Optional

import httpx
from pydantic import Field

from travel_core import formatting
from travel_core.config import Settings
from travel_core.geocoding import LocationResolver
from travel_core.listings import ListingFilters, ListingGenerator
from travel_core.registry import ToolRegistry
from travel_core.schema import ToolArguments, ToolDescriptor


logger = logging.getLogger(__name__)

PropertyTypeFilter = Literal["any", "apartment", "house", "unique", "hotel"]
IsoDate = Annotated[str, Field(pattern=r"^\d{4}-\d{2}-\d{2}$")]
Price = Annotated[float, Field(ge=0)]


# =============================================================================
# Tool contracts
# =============================================================================
class SearchListingsArgs(ToolArguments):
    location: str = Field(
        description="City or location to search for Airbnb listings "
        "(e.g., 'Paris', 'New York', 'Tokyo')",
    )
    checkin: Optional[IsoDate] = Field(None, description="Check-in date in YYYY-MM-DD format")
    checkout: Optional[IsoDate] = Field(None, description="Check-out date in YYYY-MM-DD format")
    guests: int = Field(2, ge=1, le=16, description="Number of guests")
    price_min: Optional[Price] = Field(
        None, alias="priceMin", description="Minimum price per night in local currency",
    )
    price_max: Optional[Price] = Field(
        None, alias="priceMax", description="Maximum price per night in local currency",
    )
    property_type: PropertyTypeFilter = Field(
        "any", alias="propertyType", description="Type of property to search for",
    )
    instant_book: bool = Field(
        False, alias="instantBook",
        description="Only show properties available for instant booking",
    )


class ListingDetailsArgs(ToolArguments):
    listing_id: str = Field(alias="listingId", description="Airbnb listing ID")


class SearchNeighborhoodsArgs(ToolArguments):
    location: str = Field(description="City or location to search for neighborhoods")
    limit: int = Field(
        10, ge=1, le=20, description="Maximum number of neighborhoods to return",
    )


SEARCH_LISTINGS_TOOL = ToolDescriptor(
    name="search_airbnb_listings",
    description="Search for Airbnb listings in a specific location with filters",
    arguments=SearchListingsArgs,
)

LISTING_DETAILS_TOOL = ToolDescriptor(
    name="get_listing_details",
    description="Get detailed information about a specific Airbnb listing",
    arguments=ListingDetailsArgs,
)

SEARCH_NEIGHBORHOODS_TOOL = ToolDescriptor(
    name="search_neighborhoods",
    description="Search for popular neighborhoods in a city with accommodation information",
    arguments=SearchNeighborhoodsArgs,
)


# =============================================================================
# Service
# =============================================================================
class AccommodationService:
    """The accommodation server's domain handlers."""

    def __init__(
        self,
        settings: Settings,
        rng: Optional[random.Random] = None,
        client: Optional[httpx.AsyncClient] = None,
        generator: Optional[ListingGenerator] = None,
        resolver: Optional[LocationResolver] = None,
    ):
        self.settings = settings
        self.generator = generator or ListingGenerator(rng=rng)
        self.resolver = resolver or LocationResolver(settings, client=client)

    async def search_listings(self, args: SearchListingsArgs) -> str:
        location = args.location
        filters = ListingFilters(
            guests=args.guests,
            price_min=args.price_min,
            price_max=args.price_max,
            property_type=args.property_type,
            instant_book=args.instant_book,
            checkin=args.checkin,
            checkout=args.checkout,
        )
        coordinates = await self.resolver.resolve(location)
        listings = self.generator.search(location, coordinates, filters)
        logger.info("Generated %d listing(s) for %s", len(listings), location)

        if not listings:
            return (
                f"No Airbnb listings found in {location} with the specified criteria. "
                "Try adjusting your filters or search for a different location."
            )
        return formatting.format_listings(location, filters, listings)

    async def get_listing_details(self, args: ListingDetailsArgs) -> str:
        listing = self.generator.detail(args.listing_id)
        return formatting.format_listing_detail(listing)

    async def search_neighborhoods(self, args: SearchNeighborhoodsArgs) -> str:
        location, limit = args.location, args.limit
        coordinates = await self.resolver.resolve(location)
        neighborhoods = self.generator.neighborhoods(location, coordinates, limit)

        if not neighborhoods:
            return f"No neighborhood data found for {location}. Please try a different location."
        return formatting.format_neighborhoods(location, neighborhoods)


def build_registry(service: AccommodationService) -> ToolRegistry:
    registry = ToolRegistry("airbnb-mcp-server")
    registry.register(SEARCH_LISTINGS_TOOL, service.search_listings)
    registry.register(LISTING_DETAILS_TOOL, service.get_listing_details)
    registry.register(SEARCH_NEIGHBORHOODS_TOOL, service.search_neighborhoods)
    return registry
