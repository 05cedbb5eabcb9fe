# =============================================================================
# travel_core/models.py  —  Data Models (the "nouns" of both servers)
# =============================================================================
#
# These dataclasses define the shape of every record the two servers hand
# around.  They carry no behavior beyond a couple of display helpers.
#
# LIFETIME:
#   Every record here lives for exactly one tool call.  Listings and
#   neighborhoods are synthesized per request; weather records are mapped
#   from an upstream payload per request.  Nothing is persisted.
# =============================================================================

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Coordinates:
    """A latitude/longitude pair in WGS84 degrees."""

    lat: float
    lng: float


# =============================================================================
# Accommodation records
# =============================================================================

@dataclass
class ListingLocation:
    city: str
    neighborhood: str
    coordinates: Coordinates


@dataclass
class ListingPricing:
    base_price: int                    # Nightly rate
    currency: str = "USD"
    total_price: Optional[int] = None  # Only when both stay dates are known


@dataclass
class PropertyDetails:
    property_type: str                 # "Apartment", "Loft", ...
    bedrooms: int
    bathrooms: int
    guests: int                        # Always 2 x bedrooms
    beds: int


@dataclass
class HostProfile:
    name: str
    is_superhost: bool
    response_rate: int                 # Percent, 0-100


@dataclass
class RatingBreakdown:
    """Six sub-scores in [1.0, 5.0] (one decimal) plus a review count."""

    overall: float
    accuracy: float
    cleanliness: float
    communication: float
    location: float
    value: float
    review_count: int

    def scores(self) -> dict[str, float]:
        return {
            "overall": self.overall,
            "accuracy": self.accuracy,
            "cleanliness": self.cleanliness,
            "communication": self.communication,
            "location": self.location,
            "value": self.value,
        }


@dataclass
class Availability:
    instant_book: bool
    minimum_stay: int                  # Nights


# -----------------------------------------------------------------------------
# ListingRecord — one synthetic accommodation listing
# -----------------------------------------------------------------------------
@dataclass
class ListingRecord:
    """A single accommodation listing, created fresh for one response."""

    id: str                            # "listing_3_1718000000000"
    title: str
    location: ListingLocation
    pricing: ListingPricing
    details: PropertyDetails
    host: HostProfile
    ratings: RatingBreakdown
    availability: Availability
    description: str
    amenities: list[str] = field(default_factory=list)
    images: list[str] = field(default_factory=list)


# -----------------------------------------------------------------------------
# NeighborhoodRecord — a district summary for neighborhood discovery
# -----------------------------------------------------------------------------
@dataclass
class NeighborhoodRecord:
    name: str
    city: str
    description: str
    average_price: int
    listing_count: int
    coordinates: Coordinates
    highlights: list[str] = field(default_factory=list)


# =============================================================================
# Weather records
# =============================================================================

@dataclass
class WeatherSnapshot:
    """Current conditions for one location as reported by the provider."""

    location: str                      # "London, GB"
    temperature: float
    description: str                   # "light rain"
    humidity: int                      # Percent
    wind_speed: float
    units: str                         # metric | imperial | kelvin
    timestamp: str                     # UTC ISO-8601, time of the lookup


@dataclass
class DailyForecast:
    """One calendar day aggregated from the provider's 3-hour slices."""

    date: str                          # ISO format: "2025-07-15"
    temp_min: float
    temp_max: float
    description: str                   # Most frequent condition that day
    humidity: int                      # Mean, rounded
    wind_speed: float                  # Mean, one decimal


@dataclass
class ForecastSeries:
    location: str
    units: str
    days: list[DailyForecast] = field(default_factory=list)


@dataclass
class PlaceCandidate:
    """A geocoding match returned by place search."""

    name: str
    country: str
    lat: float
    lon: float
    state: Optional[str] = None

    @property
    def display_name(self) -> str:
        if self.state:
            return f"{self.name}, {self.state}, {self.country}"
        return f"{self.name}, {self.country}"
