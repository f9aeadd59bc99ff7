"""Tests for merging follow-up replies into the displayed trip plan."""
from __future__ import annotations

import pytest

from src.core.reducer import merge_trip_plan
from src.core.schemas import (
    DayItinerary,
    FlightOption,
    FollowUpPlan,
    HotelOption,
    TotalCost,
    TripPlan,
)


def _existing_plan() -> TripPlan:
    return TripPlan(
        destination="Rome, Italy",
        duration="2 days",
        flights=[FlightOption(airline="ITA Airways", flight_number="AZ 608", price=1356)],
        hotels=[HotelOption(name="Hotel Hassler Roma", price_per_night=850)],
        itinerary=[
            DayItinerary(day=1, title="Ancient Rome"),
            DayItinerary(day=2, title="Vatican"),
        ],
        total_cost=TotalCost(flights=2712, hotels=1700, activities=300, total=4712),
    )


def test_hotels_follow_up_only_replaces_hotels():
    existing = _existing_plan()
    update = FollowUpPlan(
        hotels=[HotelOption(name="The RomeHello", price_per_night=89)],
        flights=[FlightOption(airline="Delta Air Lines", price=1278)],
        total_cost=TotalCost(flights=2712, hotels=178, activities=300, total=3190),
    )

    merged = merge_trip_plan(existing, update, "hotels")

    assert [hotel.name for hotel in merged.hotels] == ["The RomeHello"]
    # flights were sent too but are outside the targeted section
    assert merged.flights[0].airline == "ITA Airways"
    assert merged.itinerary == existing.itinerary
    assert merged.total_cost.total == 3190
    # the existing plan is untouched
    assert existing.hotels[0].name == "Hotel Hassler Roma"


def test_activities_follow_up_replaces_itinerary():
    update = FollowUpPlan(itinerary=[DayItinerary(day=1, title="Food tour"), DayItinerary(day=2, title="Forum")])

    merged = merge_trip_plan(_existing_plan(), update, "activities")

    assert [day.title for day in merged.itinerary] == ["Food tour", "Forum"]
    assert merged.hotels[0].name == "Hotel Hassler Roma"
    # no cost summary in the update keeps the old one
    assert merged.total_cost.total == 4712


def test_multiple_replaces_every_section_present():
    update = FollowUpPlan(
        flights=[FlightOption(airline="Delta Air Lines", price=1278)],
        hotels=[HotelOption(name="Hotel Artemide", price_per_night=220)],
    )

    merged = merge_trip_plan(_existing_plan(), update, "multiple")

    assert merged.flights[0].airline == "Delta Air Lines"
    assert merged.hotels[0].name == "Hotel Artemide"
    assert len(merged.itinerary) == 2


def test_general_follow_up_changes_nothing():
    existing = _existing_plan()
    update = FollowUpPlan(hotels=[HotelOption(name="Hotel Artemide")])

    assert merge_trip_plan(existing, update, "general") is existing


def test_complete_plan_for_general_request_replaces_plan():
    new_plan = TripPlan(destination="Tokyo, Japan")

    assert merge_trip_plan(_existing_plan(), new_plan, "general") is new_plan


def test_complete_plan_for_targeted_request_merges_section():
    new_plan = TripPlan(
        destination="Rome, Italy",
        hotels=[HotelOption(name="Hotel Artemide")],
        flights=[],
    )

    merged = merge_trip_plan(_existing_plan(), new_plan, "hotels")

    assert merged.hotels[0].name == "Hotel Artemide"
    assert merged.flights[0].airline == "ITA Airways"


@pytest.mark.parametrize("target", ["hotels", "flights", "activities", "multiple", "general"])
def test_missing_update_keeps_existing(target):
    existing = _existing_plan()

    assert merge_trip_plan(existing, None, target) is existing


def test_no_existing_plan():
    new_plan = TripPlan(destination="Paris, France")

    assert merge_trip_plan(None, new_plan, "hotels") is new_plan
    assert merge_trip_plan(None, FollowUpPlan(hotels=[]), "hotels") is None
    assert merge_trip_plan(None, None, "general") is None


def test_complete_plan_for_multiple_keeps_sections_it_leaves_out():
    existing = _existing_plan()
    new_plan = TripPlan(destination="Rome, Italy", hotels=[HotelOption(name="Hotel Artemide")])

    merged = merge_trip_plan(existing, new_plan, "multiple")

    assert [hotel.name for hotel in merged.hotels] == ["Hotel Artemide"]
    assert merged.flights == existing.flights
    assert merged.itinerary == existing.itinerary
    assert merged.total_cost == existing.total_cost


def test_complete_plan_parsed_from_reply_keeps_missing_sections():
    existing = _existing_plan()
    new_plan = TripPlan.model_validate(
        {
            "type": "trip_plan",
            "destination": "Rome, Italy",
            "itinerary": [{"day": 1, "title": "Trastevere"}],
            "totalCost": {"total": 3000},
        }
    )

    merged = merge_trip_plan(existing, new_plan, "flights")

    # flights were not sent, so nothing in the targeted section changes
    assert merged is existing

    merged = merge_trip_plan(existing, new_plan, "activities")

    assert [day.title for day in merged.itinerary] == ["Trastevere"]
    assert merged.hotels == existing.hotels
    assert merged.flights == existing.flights
    assert merged.total_cost.total == 3000
