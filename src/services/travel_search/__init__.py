"""Offline travel search over a small mock inventory.

Public API:
    - search_flights / search_hotels / search_activities / search_travel:
      async filters over the mock flights, hotels and activities
    - parse_travel_request: free text to SearchCriteria
    - generate_itinerary: markdown itinerary from search results
    - format_search_context: inventory block for the chat system prompt
    - create_travel_search_tools: LangChain tool wrappers
"""
from src.services.travel_search.client import (
    format_search_context,
    generate_itinerary,
    get_airport_code,
    parse_travel_request,
    search_activities,
    search_flights,
    search_hotels,
    search_travel,
)
from src.services.travel_search.schemas import (
    Activity,
    Flight,
    Hotel,
    SearchCriteria,
    TravelSearchResult,
)
from src.services.travel_search.tools import create_travel_search_tools

__all__ = [
    "format_search_context",
    "generate_itinerary",
    "get_airport_code",
    "parse_travel_request",
    "search_activities",
    "search_flights",
    "search_hotels",
    "search_travel",
    "Activity",
    "Flight",
    "Hotel",
    "SearchCriteria",
    "TravelSearchResult",
    "create_travel_search_tools",
]
