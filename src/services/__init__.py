"""Service integrations for trip planning.

- Travel search: offline flight, hotel and activity lookup over a mock
  inventory, used to ground replies when ``TRIP_USE_MOCK_DATA`` is set

Each service module exports:
    - search functions returning Pydantic result models
    - create_*_tools: Factory to create LangChain tools from the searches
    - Input schemas: Pydantic models for tool parameters

Example Usage:
    >>> from src.services.travel_search import SearchCriteria, search_travel
    >>> results = await search_travel(SearchCriteria(destination="Rome", budget=3000))
"""

from src.services.travel_search import (
    SearchCriteria,
    TravelSearchResult,
    create_travel_search_tools,
    parse_travel_request,
    search_travel,
)

__all__ = [
    "SearchCriteria",
    "TravelSearchResult",
    "create_travel_search_tools",
    "parse_travel_request",
    "search_travel",
]
