"""Offline flight, hotel and activity search over the mock inventory."""
from __future__ import annotations

import asyncio
import calendar
import logging
import re
from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence, Union

from src.services.travel_search.mock_data import (
    COUNTRY_CITIES,
    MOCK_ACTIVITIES,
    MOCK_FLIGHTS,
    MOCK_HOTELS,
)
from src.services.travel_search.schemas import (
    Activity,
    ActivitySearchResult,
    FlightSearchResult,
    Hotel,
    HotelSearchResult,
    SearchCriteria,
    TravelSearchResult,
)

logger = logging.getLogger(__name__)

AIRPORT_CODES = {
    "new york": "JFK",
    "nyc": "JFK",
    "jfk": "JFK",
    "paris": "CDG",
    "france": "CDG",
    "cdg": "CDG",
    "rome": "FCO",
    "italy": "FCO",
    "fco": "FCO",
    "tokyo": "NRT",
    "japan": "NRT",
    "nrt": "NRT",
    "los angeles": "LAX",
    "la": "LAX",
    "lax": "LAX",
}
DEFAULT_AIRPORT = "JFK"

HOTEL_BUDGET_NIGHTS = 5
ACTIVITY_BUDGET_SHARE = 0.3
ACTIVITY_BUDGET_COUNT = 3

KNOWN_DESTINATIONS = ("paris", "rome", "tokyo", "japan", "italy", "france")
PREFERENCE_KEYWORDS = ("food", "culture", "history", "art", "romantic", "family", "adventure", "luxury", "budget")

_BUDGET_PATTERN = re.compile(r"\$(\d+(?:,\d+)?)")
_TRAVELERS_PATTERN = re.compile(r"(\d+)\s+(?:people|person|traveler|guest)", re.IGNORECASE)
_NEXT_MONTH_PATTERN = re.compile(r"next month", re.IGNORECASE)
_DAYS_PATTERN = re.compile(r"(\d+)\s+days?", re.IGNORECASE)
_WEEKS_PATTERN = re.compile(r"(\d+)\s+weeks?", re.IGNORECASE)


def get_airport_code(location: str) -> str:
    """Resolve a city, country or airport name to the IATA code used by the mock flights."""

    return AIRPORT_CODES.get(location.strip().lower(), DEFAULT_AIRPORT)


def _matches_destination(record: Union[Hotel, Activity], destination: str) -> bool:
    normalized = destination.strip().lower()
    city = COUNTRY_CITIES.get(normalized, normalized)
    record_city = record.city.lower()
    return (
        city in record_city
        or record_city in normalized
        or normalized in record.location.lower()
        or normalized in record.id
    )


def _matches_preferences(activity: Activity, preferences: Sequence[str]) -> bool:
    for pref in preferences:
        pref = pref.lower()
        if any(pref in tag.lower() or tag.lower() in pref for tag in activity.tags):
            return True
        if pref in activity.type or pref in activity.name.lower():
            return True
    return False


async def search_flights(criteria: SearchCriteria) -> FlightSearchResult:
    """Filter mock flights by route and budget, cheapest first."""

    flights = list(MOCK_FLIGHTS)

    if criteria.destination:
        dest_code = get_airport_code(criteria.destination)
        flights = [flight for flight in flights if flight.destination == dest_code]

    if criteria.origin:
        origin_code = get_airport_code(criteria.origin)
        flights = [flight for flight in flights if flight.origin == origin_code]

    if criteria.budget:
        flights = [flight for flight in flights if flight.price <= criteria.budget]

    flights.sort(key=lambda flight: flight.price)
    return FlightSearchResult(flights=flights, total_results=len(flights), search_criteria=criteria)


async def search_hotels(criteria: SearchCriteria) -> HotelSearchResult:
    """Filter mock hotels by destination and nightly budget, best value first."""

    hotels = list(MOCK_HOTELS)

    if criteria.destination:
        hotels = [hotel for hotel in hotels if _matches_destination(hotel, criteria.destination)]

    if criteria.budget:
        max_price_per_night = criteria.budget / HOTEL_BUDGET_NIGHTS
        hotels = [hotel for hotel in hotels if hotel.price_per_night <= max_price_per_night]

    # value = stars per hundred dollars a night
    hotels.sort(key=lambda hotel: hotel.rating / (hotel.price_per_night / 100), reverse=True)
    return HotelSearchResult(hotels=hotels, total_results=len(hotels), search_criteria=criteria)


async def search_activities(criteria: SearchCriteria) -> ActivitySearchResult:
    """Filter mock activities by destination, interests and budget, best rated first."""

    activities = list(MOCK_ACTIVITIES)

    if criteria.destination:
        activities = [
            activity for activity in activities if _matches_destination(activity, criteria.destination)
        ]

    if criteria.preferences:
        activities = [
            activity for activity in activities if _matches_preferences(activity, criteria.preferences)
        ]

    if criteria.budget:
        max_price = criteria.budget * ACTIVITY_BUDGET_SHARE / ACTIVITY_BUDGET_COUNT
        activities = [activity for activity in activities if activity.price <= max_price]

    activities.sort(key=lambda activity: activity.rating, reverse=True)
    return ActivitySearchResult(
        activities=activities, total_results=len(activities), search_criteria=criteria
    )


async def search_travel(criteria: SearchCriteria) -> TravelSearchResult:
    """Run the three searches concurrently and bundle the results."""

    try:
        flights, hotels, activities = await asyncio.gather(
            search_flights(criteria),
            search_hotels(criteria),
            search_activities(criteria),
        )
    except Exception as exc:
        logger.error(f"Travel search error: {str(exc)}", exc_info=True)
        return TravelSearchResult(
            flights=FlightSearchResult(search_criteria=criteria),
            hotels=HotelSearchResult(search_criteria=criteria),
            activities=ActivitySearchResult(search_criteria=criteria),
            success=False,
            error="Failed to search travel options",
        )

    logger.info(
        "Travel search for %s: %d flights, %d hotels, %d activities",
        criteria.destination or "any destination",
        flights.total_results,
        hotels.total_results,
        activities.total_results,
    )
    return TravelSearchResult(flights=flights, hotels=hotels, activities=activities)


def _add_months(day: date, months: int) -> date:
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def _parse_count(raw: str) -> Optional[int]:
    """Integer value of a captured digit run, or None when it is too large to use."""
    try:
        value = int(raw)
        float(value)
    except (ValueError, OverflowError):
        logger.warning("Ignoring out-of-range number of %d digits in travel request", len(raw))
        return None
    return value


def parse_travel_request(message: str, *, today: Optional[date] = None) -> SearchCriteria:
    """Pull destination, budget, party size, interests and dates out of free text."""

    today = today or date.today()
    lowered = message.lower()

    destination = next((dest for dest in KNOWN_DESTINATIONS if dest in lowered), None)

    budget = None
    budget_match = _BUDGET_PATTERN.search(message)
    if budget_match:
        budget = _parse_count(budget_match.group(1).replace(",", ""))

    travelers = None
    travelers_match = _TRAVELERS_PATTERN.search(message)
    if travelers_match:
        travelers = _parse_count(travelers_match.group(1)) or None

    preferences = [keyword for keyword in PREFERENCE_KEYWORDS if keyword in lowered]

    check_in = None
    check_out = None
    try:
        if _NEXT_MONTH_PATTERN.search(message):
            check_in = _add_months(today, 1)
        else:
            days_match = _DAYS_PATTERN.search(message)
            weeks_match = _WEEKS_PATTERN.search(message)
            nights = None
            if days_match:
                nights = _parse_count(days_match.group(1))
            elif weeks_match:
                weeks = _parse_count(weeks_match.group(1))
                nights = weeks * 7 if weeks is not None else None
            if nights is not None:
                # trips start a week from today
                check_in = today + timedelta(days=7)
                check_out = check_in + timedelta(days=nights)
    except (OverflowError, ValueError):
        logger.warning("Travel dates out of range for request; leaving them unset")
        check_in = None
        check_out = None

    return SearchCriteria(
        destination=destination,
        budget=budget,
        travelers=travelers,
        preferences=preferences,
        check_in=check_in,
        check_out=check_out,
    )


def generate_itinerary(
    destination: str,
    days: int,
    hotels: Sequence[Hotel],
    activities: Sequence[Activity],
) -> str:
    """Render a markdown day-by-day itinerary with two activities per day."""

    top_activities = list(activities)[: days * 2]
    lines: List[str] = [f"## {days}-Day {destination} Itinerary", ""]

    if hotels:
        hotel = hotels[0]
        lines.extend(
            [
                f"**🏨 Recommended Hotel:** {hotel.name}",
                f"📍 {hotel.location}",
                f"⭐ {hotel.rating:g}/5 stars • ${hotel.price_per_night:g}/night",
                hotel.description,
                "",
            ]
        )

    for day in range(1, days + 1):
        lines.append(f"### Day {day}")
        day_activities = top_activities[(day - 1) * 2 : day * 2]
        if not day_activities:
            lines.extend([f"**Free Day**: Explore {destination} at your own pace", ""])
            continue
        for index, activity in enumerate(day_activities):
            time_slot = "🌅 Morning" if index == 0 else "🌆 Evening"
            lines.extend(
                [
                    f"**{time_slot}: {activity.name}**",
                    f"📍 {activity.location} • {activity.duration} • ${activity.price:g}",
                    f"⭐ {activity.rating:g}/5 • {activity.description}",
                    f"⏰ {activity.operating_hours}",
                    "",
                ]
            )

    return "\n".join(lines)


def _format_lines(items: Iterable[str]) -> str:
    return "\n".join(f"- {item}" for item in items) or "- none"


def format_search_context(results: TravelSearchResult, *, limit: int = 5) -> str:
    """Compact inventory listing that can be appended to the system prompt."""

    flights = _format_lines(
        f"{flight.airline} {flight.flight_number} {flight.origin}->{flight.destination}, "
        f"{flight.duration}, {flight.stops} stops, ${flight.price:g}"
        for flight in results.flights.flights[:limit]
    )
    hotels = _format_lines(
        f"{hotel.name} ({hotel.category}, {hotel.rating:g} stars), {hotel.location}, "
        f"${hotel.price_per_night:g}/night"
        for hotel in results.hotels.hotels[:limit]
    )
    activities = _format_lines(
        f"{activity.name} ({activity.type}), {activity.location}, {activity.duration}, ${activity.price:g}"
        for activity in results.activities.activities[:limit]
    )
    return f"Flights:\n{flights}\nHotels:\n{hotels}\nActivities:\n{activities}"
