# =============================================================================
# travel_core/listings.py  —  Synthetic Listing & Neighborhood Generator
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   There is no public Airbnb API, so the accommodation server invents its
#   data.  This module synthesizes listings and neighborhoods for a location
#   and applies the caller's search filters.
#
# REJECTION-PASS FILTERING:
#   search() draws a batch of 5–12 candidates.  A candidate that fails ANY
#   active filter (guest capacity, price floor/ceiling, property category,
#   instant book) is dropped and NOT replaced.  The result can therefore be
#   smaller than the batch, or empty.
#
# SEED-DERIVED vs INDEPENDENT FIELDS (listing details):
#   detail() parses the number between the first and second underscore of
#   a listing id ("listing_3_1718..." → 3) and feeds it to random.Random.
#   Everything drawn from that seeded generator is stable for a given id:
#     property type, pricing, room counts, ratings, host flags, availability
#   Amenities, host name and image count come from the generator's own
#   unseeded RNG and differ between calls for the same id.
# =============================================================================

import re
import random
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from travel_core.models import (
    Availability,
    Coordinates,
    HostProfile,
    ListingLocation,
    ListingPricing,
    ListingRecord,
    NeighborhoodRecord,
    PropertyDetails,
    RatingBreakdown,
)


# -----------------------------------------------------------------------------
# Vocabularies
# -----------------------------------------------------------------------------
# Property type → search category accepted by the propertyType filter.
PROPERTY_CATEGORIES: dict[str, str] = {
    "Apartment": "apartment",
    "House": "house",
    "Condo": "apartment",
    "Loft": "unique",
    "Studio": "apartment",
    "Townhouse": "house",
    "Tiny Home": "unique",
    "Boutique Hotel": "hotel",
}
PROPERTY_TYPES = list(PROPERTY_CATEGORIES)

AMENITIES = [
    "WiFi", "Kitchen", "Air conditioning", "Heating", "Washer", "Dryer",
    "TV", "Hot tub", "Pool", "Gym", "Parking", "Breakfast",
    "Pet friendly", "Smoke alarm", "Carbon monoxide alarm", "Fire extinguisher",
    "First aid kit", "Laptop friendly workspace", "Hair dryer", "Iron",
    "Shampoo", "Essentials", "Hangers", "Bed linens", "Extra pillows and blankets",
]

FIRST_NAMES = ["Alex", "Jordan", "Casey", "Morgan", "Taylor", "Cameron", "Riley", "Jamie"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis"]

GENERIC_NEIGHBORHOODS = [
    "Downtown", "Old Town", "Central District", "Riverside", "Historic Quarter",
    "Arts District", "Financial District", "Garden District", "Marina", "Uptown",
]

CITY_NEIGHBORHOODS: dict[str, list[str]] = {
    "paris": ["Marais", "Montmartre", "Saint-Germain", "Latin Quarter", "Champs-Élysées"],
    "london": ["Covent Garden", "Shoreditch", "Camden", "Notting Hill", "Borough"],
    "new york": ["SoHo", "Greenwich Village", "Chelsea", "Lower East Side", "Tribeca"],
    "tokyo": ["Shibuya", "Shinjuku", "Harajuku", "Ginza", "Asakusa"],
    "barcelona": ["Gothic Quarter", "El Raval", "Eixample", "Gràcia", "El Born"],
}

NEIGHBORHOOD_FEATURES = [
    "charming cafes and local markets",
    "historic architecture and cultural sites",
    "vibrant nightlife and entertainment",
    "excellent restaurants and shopping",
    "beautiful parks and green spaces",
    "art galleries and museums",
    "traditional atmosphere and local charm",
    "modern amenities and convenience",
]

NEIGHBORHOOD_HIGHLIGHTS = [
    "Great restaurants", "Shopping", "Nightlife", "Museums", "Parks",
    "Public transport", "Historic sites", "Local markets", "Art galleries",
    "Cafes", "Entertainment", "Safe area", "Family-friendly", "Pet-friendly",
]

CLEANING_FEE = 50
DEFAULT_STAY_NIGHTS = 7
DETAIL_CITY = "Sample City"
DETAIL_NEIGHBORHOOD = "Central District"
DETAIL_COORDINATES = Coordinates(40.7128, -74.0060)


@dataclass(frozen=True)
class ListingFilters:
    """Search constraints; None / "any" / False mean "not filtered"."""

    guests: int = 2
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    property_type: str = "any"
    instant_book: bool = False
    checkin: Optional[str] = None
    checkout: Optional[str] = None

    def stay_nights(self) -> Optional[int]:
        """Nights between check-in and check-out, if both are given."""
        if not (self.checkin and self.checkout):
            return None
        try:
            nights = (
                datetime.strptime(self.checkout, "%Y-%m-%d")
                - datetime.strptime(self.checkin, "%Y-%m-%d")
            ).days
        except ValueError:
            return DEFAULT_STAY_NIGHTS
        return nights if nights > 0 else DEFAULT_STAY_NIGHTS


def neighborhood_names(location: str) -> list[str]:
    """City-specific neighborhood names, or the generic list."""
    return list(CITY_NEIGHBORHOODS.get(location.strip().lower(), GENERIC_NEIGHBORHOODS))


def listing_seed(listing_id: str) -> int:
    """Numeric token between the first and second underscore, default 1."""
    parts = listing_id.split("_")
    match = re.match(r"\s*[+-]?\d+", parts[1]) if len(parts) > 1 else None
    seed = int(match.group()) if match else 0
    return seed or 1


class ListingGenerator:
    """Synthesizes accommodation data.

    Args:
        rng: Source of independent randomness.  Pass a seeded
            random.Random for reproducible searches.
        clock: Returns epoch seconds; used to stamp listing ids.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.rng = rng or random.Random()
        self._clock = clock

    # =========================================================================
    # Listing search
    # =========================================================================
    def search(
        self,
        location: str,
        coordinates: Coordinates,
        filters: ListingFilters,
    ) -> list[ListingRecord]:
        rng = self.rng
        names = neighborhood_names(location)
        stamp = int(self._clock() * 1000)
        nights = filters.stay_nights()
        batch = rng.randint(5, 12)

        listings = []
        for i in range(batch):
            property_type = rng.choice(PROPERTY_TYPES)
            bedrooms = rng.randint(1, 4)
            bathrooms = rng.randint(1, 3)
            base_price = rng.randint(50, 249)

            if bedrooms * 2 < filters.guests:
                continue
            if filters.price_min is not None and base_price < filters.price_min:
                continue
            if filters.price_max is not None and base_price > filters.price_max:
                continue
            if (filters.property_type != "any"
                    and PROPERTY_CATEGORIES[property_type] != filters.property_type):
                continue

            instant_book = rng.random() > 0.6
            if filters.instant_book and not instant_book:
                continue

            neighborhood = names[i % len(names)]
            listings.append(ListingRecord(
                id=f"listing_{i + 1}_{stamp}",
                title=f"{property_type} in {neighborhood}",
                location=ListingLocation(
                    city=location,
                    neighborhood=neighborhood,
                    coordinates=self._jitter(coordinates, 0.1),
                ),
                pricing=ListingPricing(
                    base_price=base_price,
                    total_price=base_price * nights + CLEANING_FEE if nights else None,
                ),
                details=PropertyDetails(
                    property_type=property_type,
                    bedrooms=bedrooms,
                    bathrooms=bathrooms,
                    guests=bedrooms * 2,
                    beds=bedrooms + rng.randint(0, 1),
                ),
                amenities=self._amenities(),
                host=HostProfile(
                    name=self._host_name(),
                    is_superhost=rng.random() > 0.7,
                    response_rate=rng.randint(80, 99),
                ),
                ratings=_ratings(rng, low=3.5, review_range=(10, 209)),
                availability=Availability(
                    instant_book=instant_book,
                    minimum_stay=rng.randint(1, 3),
                ),
                images=[f"image_{n + 1}.jpg" for n in range(rng.randint(5, 14))],
                description=(
                    f"Beautiful {property_type.lower()} located in the heart of "
                    f"{neighborhood}. Perfect for travelers looking to experience "
                    f"the best of {location}."
                ),
            ))
        return listings

    # =========================================================================
    # Listing detail
    # =========================================================================
    def detail(self, listing_id: str) -> ListingRecord:
        derived = random.Random(listing_seed(listing_id))

        property_type = derived.choice(PROPERTY_TYPES)
        bedrooms = derived.randint(1, 3)
        base_price = 80 + derived.randint(0, 119)
        offset = derived.randint(0, 99) / 1000

        return ListingRecord(
            id=listing_id,
            title=f"Stunning {property_type} with Amazing Views",
            location=ListingLocation(
                city=DETAIL_CITY,
                neighborhood=DETAIL_NEIGHBORHOOD,
                coordinates=Coordinates(
                    DETAIL_COORDINATES.lat + offset,
                    DETAIL_COORDINATES.lng + offset,
                ),
            ),
            pricing=ListingPricing(
                base_price=base_price,
                total_price=base_price * DEFAULT_STAY_NIGHTS + 75,
            ),
            details=PropertyDetails(
                property_type=property_type,
                bedrooms=bedrooms,
                bathrooms=derived.randint(1, 2),
                guests=bedrooms * 2,
                beds=bedrooms + derived.randint(0, 1),
            ),
            host=HostProfile(
                name=self._host_name(),
                is_superhost=derived.random() < 1 / 3,
                response_rate=derived.randint(85, 99),
            ),
            ratings=_ratings(derived, low=4.0, review_range=(50, 199)),
            availability=Availability(
                instant_book=derived.random() < 0.5,
                minimum_stay=derived.randint(1, 3),
            ),
            amenities=self._amenities(),
            images=[
                f"detailed_image_{n + 1}.jpg"
                for n in range(self.rng.randint(6, 12))
            ],
            description=(
                f"This {property_type.lower()} offers the perfect blend of comfort "
                "and style. Located in a prime area, you'll have easy access to "
                "local attractions, restaurants, and transportation. The space "
                "features modern amenities and thoughtful touches to make your "
                "stay memorable."
            ),
        )

    # =========================================================================
    # Neighborhoods
    # =========================================================================
    def neighborhoods(
        self,
        location: str,
        coordinates: Coordinates,
        limit: int,
    ) -> list[NeighborhoodRecord]:
        rng = self.rng
        result = []
        for name in neighborhood_names(location)[:limit]:
            result.append(NeighborhoodRecord(
                name=name,
                city=location,
                description=(
                    f"{name} is a vibrant neighborhood known for its "
                    f"{rng.choice(NEIGHBORHOOD_FEATURES)}."
                ),
                average_price=rng.randint(75, 224),
                listing_count=rng.randint(25, 224),
                coordinates=self._jitter(coordinates, 0.05),
                highlights=rng.sample(NEIGHBORHOOD_HIGHLIGHTS, rng.randint(3, 6)),
            ))
        return result

    # -------------------------------------------------------------------------
    # Independent fields
    # -------------------------------------------------------------------------
    def _amenities(self) -> list[str]:
        return self.rng.sample(AMENITIES, self.rng.randint(8, 17))

    def _host_name(self) -> str:
        return f"{self.rng.choice(FIRST_NAMES)} {self.rng.choice(LAST_NAMES)}"

    def _jitter(self, coordinates: Coordinates, span: float) -> Coordinates:
        return Coordinates(
            lat=coordinates.lat + (self.rng.random() - 0.5) * span,
            lng=coordinates.lng + (self.rng.random() - 0.5) * span,
        )


def _ratings(rng: random.Random, low: float, review_range: tuple[int, int]) -> RatingBreakdown:
    def score() -> float:
        return round(rng.uniform(low, 5.0), 1)

    return RatingBreakdown(
        overall=score(),
        accuracy=score(),
        cleanliness=score(),
        communication=score(),
        location=score(),
        value=score(),
        review_count=rng.randint(*review_range),
    )
