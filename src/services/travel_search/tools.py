from typing import Any, Dict, List

from langchain_core.tools import StructuredTool

from src.services.travel_search.client import (
    search_activities,
    search_flights,
    search_hotels,
    search_travel,
)
from src.services.travel_search.schemas import SearchCriteria


def create_travel_search_tools() -> List[StructuredTool]:
    """Expose the mock inventory searches as LangChain tools."""

    async def _flights(**kwargs) -> Dict[str, Any]:
        result = await search_flights(SearchCriteria(**kwargs))
        return result.model_dump(mode="json")

    async def _hotels(**kwargs) -> Dict[str, Any]:
        result = await search_hotels(SearchCriteria(**kwargs))
        return result.model_dump(mode="json")

    async def _activities(**kwargs) -> Dict[str, Any]:
        result = await search_activities(SearchCriteria(**kwargs))
        return result.model_dump(mode="json")

    async def _travel(**kwargs) -> Dict[str, Any]:
        result = await search_travel(SearchCriteria(**kwargs))
        return result.model_dump(mode="json")

    return [
        StructuredTool.from_function(
            name="search_flights_tool",
            description="Search the flight inventory by origin, destination and budget.",
            coroutine=_flights,
            args_schema=SearchCriteria,
        ),
        StructuredTool.from_function(
            name="search_hotels_tool",
            description="Search the hotel inventory by destination and total budget.",
            coroutine=_hotels,
            args_schema=SearchCriteria,
        ),
        StructuredTool.from_function(
            name="search_activities_tool",
            description="Search activities by destination, interests and budget.",
            coroutine=_activities,
            args_schema=SearchCriteria,
        ),
        StructuredTool.from_function(
            name="search_travel_tool",
            description="Search flights, hotels and activities in one call.",
            coroutine=_travel,
            args_schema=SearchCriteria,
        ),
    ]
