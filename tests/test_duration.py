"""Tests for requested trip duration extraction and the itinerary length check."""
from __future__ import annotations

import logging

import pytest

from src.core.duration import build_duration_instruction, check_itinerary_length, extract_requested_days
from src.core.schemas import DayItinerary, TripPlan


@pytest.mark.parametrize(
    "message, expected",
    [
        ("Plan a 7-day trip to Tokyo", 7),
        ("Plan a trip to Tokyo", None),
        ("3 days in Rome please", 3),
        ("a 1 day layover", 1),
        ("10 day trip to Paris, budget $2000", 10),
        ("We have 5DAYS", 5),
        ("", None),
    ],
)
def test_extract_requested_days(message, expected):
    assert extract_requested_days(message) == expected


def test_first_number_followed_by_day_wins():
    assert extract_requested_days("2 people, 4 days, $3000") == 4


def test_duration_instruction_mentions_day_count():
    instruction = build_duration_instruction(7)

    assert "7-day trip" in instruction
    assert "exactly 7 days" in instruction


def _plan_with_days(count: int) -> TripPlan:
    return TripPlan(
        destination="Tokyo, Japan",
        itinerary=[DayItinerary(day=index, title=f"Day {index}") for index in range(1, count + 1)],
    )


def test_matching_itinerary_passes():
    assert check_itinerary_length(3, _plan_with_days(3)) is True


def test_no_requested_days_always_passes():
    assert check_itinerary_length(None, _plan_with_days(2)) is True


def test_mismatch_is_logged_and_reported(caplog):
    plan = _plan_with_days(5)

    with caplog.at_level(logging.WARNING, logger="src.core.duration"):
        assert check_itinerary_length(7, plan) is False

    assert "requested 7 days, received 5" in caplog.text
    # the plan is reported, not repaired
    assert len(plan.itinerary) == 5


def test_oversized_day_count_is_ignored(caplog):
    with caplog.at_level(logging.WARNING, logger="src.core.duration"):
        assert extract_requested_days("9" * 5000 + " days") is None

    assert "unparseable day count" in caplog.text
