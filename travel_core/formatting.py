# =============================================================================
# travel_core/formatting.py  —  Markdown Rendering of Tool Results
# =============================================================================
#
# Pure presentation: every function takes a domain record and returns the
# Markdown text that goes back to the MCP client.  No I/O, no randomness.
# =============================================================================

from datetime import datetime

from travel_core.listings import ListingFilters
from travel_core.models import (
    ForecastSeries,
    ListingRecord,
    NeighborhoodRecord,
    PlaceCandidate,
    WeatherSnapshot,
)


_TEMP_SUFFIX = {"metric": "°C", "imperial": "°F", "kelvin": "K"}
_WIND_SUFFIX = {"metric": "m/s", "imperial": "mph", "kelvin": "m/s"}

MAX_AMENITIES_SHOWN = 10


def _money(amount: float) -> str:
    return f"${int(amount)}" if float(amount).is_integer() else f"${amount:.2f}"


def _per_night(listing: ListingRecord) -> str:
    pricing = listing.pricing
    if pricing.currency == "USD":
        return f"{_money(pricing.base_price)}/night"
    return f"{_money(pricing.base_price)}/night ({pricing.currency})"


# =============================================================================
# Weather
# =============================================================================
def format_current_weather(snapshot: WeatherSnapshot) -> str:
    temp = _TEMP_SUFFIX[snapshot.units]
    wind = _WIND_SUFFIX[snapshot.units]
    updated = datetime.fromisoformat(snapshot.timestamp).strftime("%Y-%m-%d %H:%M UTC")
    return (
        f"**Current Weather for {snapshot.location}**\n\n"
        f"🌡️ **Temperature:** {snapshot.temperature}{temp}\n"
        f"🌤️ **Condition:** {snapshot.description}\n"
        f"💧 **Humidity:** {snapshot.humidity}%\n"
        f"💨 **Wind Speed:** {snapshot.wind_speed} {wind}\n\n"
        f"*Updated: {updated}*"
    )


def format_forecast(series: ForecastSeries) -> str:
    temp = _TEMP_SUFFIX[series.units]
    wind = _WIND_SUFFIX[series.units]
    lines = [f"**{len(series.days)}-Day Weather Forecast for {series.location}**", ""]
    for index, day in enumerate(series.days, start=1):
        lines += [
            f"**Day {index} - {day.date}**",
            f"🌡️ **Temperature:** {day.temp_min}{temp} - {day.temp_max}{temp}",
            f"🌤️ **Condition:** {day.description}",
            f"💧 **Humidity:** {day.humidity}%",
            f"💨 **Wind Speed:** {day.wind_speed} {wind}",
            "",
        ]
    return "\n".join(lines).strip()


def format_places(query: str, places: list[PlaceCandidate]) -> str:
    lines = [f'**Found {len(places)} location(s) for "{query}":**', ""]
    for index, place in enumerate(places, start=1):
        lines += [
            f"{index}. **{place.display_name}**",
            f"   📍 Coordinates: {place.lat:.4f}, {place.lon:.4f}",
            "",
        ]
    return "\n".join(lines).strip()


# =============================================================================
# Accommodation
# =============================================================================
def format_listings(location: str, filters: ListingFilters, listings: list[ListingRecord]) -> str:
    lines = [f"**Found {len(listings)} Airbnb listings in {location}**", ""]

    if filters.checkin and filters.checkout:
        lines.append(f"📅 **Dates:** {filters.checkin} to {filters.checkout}")
    lines.append(f"👥 **Guests:** {filters.guests}")
    if filters.price_min is not None or filters.price_max is not None:
        if filters.price_min is not None and filters.price_max is not None:
            price_range = f"{_money(filters.price_min)} - {_money(filters.price_max)}"
        elif filters.price_min is not None:
            price_range = f"{_money(filters.price_min)}+"
        else:
            price_range = f"Up to {_money(filters.price_max)}"
        lines.append(f"💰 **Price Range:** {price_range} per night")
    if filters.property_type != "any":
        lines.append(f"🏠 **Property Type:** {filters.property_type}")
    if filters.instant_book:
        lines.append("⚡ **Instant Book Only**")
    lines += ["", "---", ""]

    for index, listing in enumerate(listings, start=1):
        details = listing.details
        lines += [
            f"**{index}. {listing.title}**",
            f"📍 {listing.location.neighborhood}, {listing.location.city}",
            f"💰 {_per_night(listing)}",
            f"🏠 {details.property_type} • {details.bedrooms} bed • "
            f"{details.bathrooms} bath • {details.guests} guests",
            f"⭐ {listing.ratings.overall:.1f} ({listing.ratings.review_count} reviews)",
            f"👤 Host: {listing.host.name}" + (" ⭐ Superhost" if listing.host.is_superhost else ""),
        ]
        if listing.pricing.total_price is not None:
            lines.append(f"🧾 Total: {_money(listing.pricing.total_price)} (including fees)")
        if listing.availability.instant_book:
            lines.append("⚡ Instant Book Available")
        lines += [f"🔗 ID: {listing.id}", ""]

    lines.append("*Use 'get_listing_details' with a listing ID for more information.*")
    return "\n".join(lines)


def format_listing_detail(listing: ListingRecord) -> str:
    coords = listing.location.coordinates
    details = listing.details
    ratings = listing.ratings
    host = listing.host

    lines = [
        f"**{listing.title}**",
        "",
        f"📍 **Location:** {listing.location.neighborhood}, {listing.location.city}",
        f"📊 **Coordinates:** {coords.lat:.4f}, {coords.lng:.4f}",
        "",
        "💰 **Pricing:**",
        f"• Base price: {_per_night(listing)}",
    ]
    if listing.pricing.total_price is not None:
        lines.append(f"• Total price: {_money(listing.pricing.total_price)} (including fees)")
    lines += [
        "",
        "🏠 **Property Details:**",
        f"• Type: {details.property_type}",
        f"• Bedrooms: {details.bedrooms}",
        f"• Bathrooms: {details.bathrooms}",
        f"• Beds: {details.beds}",
        f"• Max guests: {details.guests}",
        "",
        "⭐ **Ratings:**",
        f"• Overall: {ratings.overall:.1f}/5 ({ratings.review_count} reviews)",
    ]
    for label, score in list(ratings.scores().items())[1:]:
        lines.append(f"• {label.capitalize()}: {score:.1f}/5")
    lines += [
        "",
        "👤 **Host Information:**",
        f"• Name: {host.name}" + (" ⭐ Superhost" if host.is_superhost else ""),
        f"• Response rate: {host.response_rate}%",
        "",
        "📋 **Availability:**",
        f"• Instant book: {'Yes ⚡' if listing.availability.instant_book else 'No'}",
        f"• Minimum stay: {listing.availability.minimum_stay} night(s)",
        "",
        "✨ **Amenities:**",
    ]
    lines += [f"• {amenity}" for amenity in listing.amenities[:MAX_AMENITIES_SHOWN]]
    if len(listing.amenities) > MAX_AMENITIES_SHOWN:
        lines.append(f"• ...and {len(listing.amenities) - MAX_AMENITIES_SHOWN} more")
    lines += [
        "",
        f"📝 **Description:**\n{listing.description}",
        "",
        f"🖼️ **Images:** {len(listing.images)} photos available",
    ]
    return "\n".join(lines)


def format_neighborhoods(location: str, neighborhoods: list[NeighborhoodRecord]) -> str:
    lines = [f"**Popular neighborhoods in {location} for Airbnb stays:**", ""]
    for index, hood in enumerate(neighborhoods, start=1):
        lines += [
            f"**{index}. {hood.name}**",
            f"📍 {hood.city}",
            f"💰 Average price: {_money(hood.average_price)}/night",
            f"🏠 Available listings: {hood.listing_count}",
            f"📊 Coordinates: {hood.coordinates.lat:.4f}, {hood.coordinates.lng:.4f}",
            f"📝 {hood.description}",
        ]
        if hood.highlights:
            lines.append(f"✨ **Highlights:** {', '.join(hood.highlights)}")
        lines.append("")
    return "\n".join(lines).strip()
