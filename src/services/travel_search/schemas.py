from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from src.core.types import NonNegMoney, Rating


class Flight(BaseModel):
    """Flight record in the mock inventory."""

    id: str
    airline: str
    flight_number: str
    origin: str = Field(..., description="Origin airport IATA code")
    destination: str = Field(..., description="Destination airport IATA code")
    departure_time: str
    arrival_time: str
    duration: str
    price: NonNegMoney
    cabin_class: Literal["economy", "premium", "business", "first"] = "economy"
    stops: int = Field(default=0, ge=0)
    aircraft: Optional[str] = None


class Hotel(BaseModel):
    """Hotel record in the mock inventory."""

    id: str
    name: str
    city: str
    location: str
    rating: Rating
    price_per_night: NonNegMoney
    amenities: List[str] = Field(default_factory=list)
    description: str = ""
    category: Literal["budget", "mid-range", "luxury"]
    review_count: int = 0
    review_score: float = 0.0


class Activity(BaseModel):
    """Activity record in the mock inventory."""

    id: str
    name: str
    type: Literal["attraction", "restaurant", "tour", "entertainment", "shopping"]
    city: str
    location: str
    price: NonNegMoney
    duration: str
    rating: Rating
    description: str = ""
    tags: List[str] = Field(default_factory=list)
    operating_hours: str = ""
    booking_required: bool = False


class SearchCriteria(BaseModel):
    """Filters applied to the mock inventory."""

    destination: Optional[str] = Field(None, description="City or country to search in")
    origin: Optional[str] = Field(None, description="Departure city or airport code")
    check_in: Optional[date] = Field(None, description="Check-in date (YYYY-MM-DD)")
    check_out: Optional[date] = Field(None, description="Check-out date (YYYY-MM-DD)")
    budget: Optional[NonNegMoney] = Field(None, description="Total budget in USD")
    travelers: Optional[int] = Field(None, ge=1, description="Number of travelers")
    preferences: List[str] = Field(default_factory=list, description="Interests such as food or art")


class FlightSearchResult(BaseModel):
    flights: List[Flight] = Field(default_factory=list)
    total_results: int = 0
    search_criteria: SearchCriteria


class HotelSearchResult(BaseModel):
    hotels: List[Hotel] = Field(default_factory=list)
    total_results: int = 0
    search_criteria: SearchCriteria


class ActivitySearchResult(BaseModel):
    activities: List[Activity] = Field(default_factory=list)
    total_results: int = 0
    search_criteria: SearchCriteria


class TravelSearchResult(BaseModel):
    """Combined flights, hotels and activities lookup."""

    flights: FlightSearchResult
    hotels: HotelSearchResult
    activities: ActivitySearchResult
    success: bool = True
    error: Optional[str] = None
