"""Pydantic data models for the conversational trip planner.

The language model answers either in prose or with a single JSON object. When
it returns JSON the object carries a ``type`` discriminator:

- ``trip_plan``: a complete plan with flights, hotels, a day-by-day itinerary
  and a cost summary
- ``follow_up``: a partial plan that only carries the sections the user asked
  to change

The wire format uses camelCase keys (``flightNumber``, ``pricePerNight``,
``totalCost``); every model accepts both the alias and the Python field name.
"""
from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.core.types import NonNegMoney, Rating


class WireModel(BaseModel):
    """Base class for models exchanged with the language model and the browser."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FlightOption(WireModel):
    """Single flight suggested by the planner."""
    id: Optional[str] = None
    airline: str
    flight_number: Optional[str] = Field(default=None, alias="flightNumber")
    route: Optional[str] = None
    departure_time: Optional[str] = Field(default=None, alias="departureTime")
    arrival_time: Optional[str] = Field(default=None, alias="arrivalTime")
    duration: Optional[str] = None
    price: Optional[NonNegMoney] = None
    stops: int = Field(default=0, ge=0)


class HotelOption(WireModel):
    """Hotel suggestion with nightly price and amenities."""
    id: Optional[str] = None
    name: str
    location: Optional[str] = None
    rating: Optional[Rating] = None
    price_per_night: Optional[NonNegMoney] = Field(default=None, alias="pricePerNight")
    amenities: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    category: Optional[str] = None


class ItineraryActivity(WireModel):
    """Activity scheduled on one itinerary day."""
    name: str
    time: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None
    cost: Optional[NonNegMoney] = None
    category: Optional[str] = None


class DayItinerary(WireModel):
    """One day of the itinerary."""
    day: int = Field(ge=1)
    title: Optional[str] = None
    description: Optional[str] = None
    activities: List[ItineraryActivity] = Field(default_factory=list)


class TotalCost(WireModel):
    """Cost summary per section plus the overall total."""
    flights: NonNegMoney = 0
    hotels: NonNegMoney = 0
    activities: NonNegMoney = 0
    total: NonNegMoney = 0


class TripPlan(WireModel):
    """Complete trip plan rendered next to the chat."""
    type: Literal["trip_plan"] = "trip_plan"
    destination: str
    duration: Optional[str] = None
    budget: Optional[str] = None
    travelers: Optional[int] = Field(default=None, ge=1)
    flights: List[FlightOption] = Field(default_factory=list)
    hotels: List[HotelOption] = Field(default_factory=list)
    itinerary: List[DayItinerary] = Field(default_factory=list)
    total_cost: Optional[TotalCost] = Field(default=None, alias="totalCost")


class FollowUpPlan(WireModel):
    """Partial plan returned when the user refines an existing trip."""
    type: Literal["follow_up"] = "follow_up"
    destination: Optional[str] = None
    flights: Optional[List[FlightOption]] = None
    hotels: Optional[List[HotelOption]] = None
    itinerary: Optional[List[DayItinerary]] = None
    total_cost: Optional[TotalCost] = Field(default=None, alias="totalCost")
    message: Optional[str] = None


class AssistantReply(BaseModel):
    """Assistant output after the streamed text has been reassembled."""
    kind: Literal["text", "trip_plan", "follow_up"]
    text: str
    trip_plan: Optional[TripPlan] = None
    follow_up: Optional[FollowUpPlan] = None


class ChatHistoryMessage(BaseModel):
    """Earlier chat message as sent back by the browser."""
    sender: Optional[str] = Field(default=None, description="\"user\" for the traveller; anything else is the assistant")
    content: Any = None

    model_config = ConfigDict(extra="ignore")


__all__ = [
    "WireModel",
    "FlightOption",
    "HotelOption",
    "ItineraryActivity",
    "DayItinerary",
    "TotalCost",
    "TripPlan",
    "FollowUpPlan",
    "AssistantReply",
    "ChatHistoryMessage",
]
