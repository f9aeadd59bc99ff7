"""Tests for follow-up routing: intent classifier, follow-up gate and loading states."""
from __future__ import annotations

import pytest

from src.core.query_detection import (
    GENERAL_LOADING_MESSAGE,
    MULTI_SECTION_LOADING_MESSAGE,
    QueryAnalysis,
    analyze_query,
    create_section_loading_states,
    get_target_section,
    is_follow_up_query,
    select_loading_message,
)


def test_hotel_follow_up_scenario():
    """A cheaper-hotel request is a follow-up that targets the hotels section."""
    message = "find me a cheaper hotel"

    assert is_follow_up_query(message, True) is True

    analysis = analyze_query(message)
    assert analysis.intent == "hotel"
    assert analysis.target_section == "hotels"
    assert analysis.confidence == pytest.approx(3 / 5)
    assert analysis.keywords == ["hotel", "cheaper hotel"]
    assert "cheaper" in analysis.loading_message or "budget" in analysis.loading_message


def test_flight_follow_up_scenario():
    analysis = analyze_query("show me a direct flight option")

    assert analysis.intent == "flight"
    assert analysis.target_section == "flights"
    assert analysis.keywords == ["flight", "direct flight"]
    assert analysis.loading_message == "✈️ Looking for alternative flights..."


def test_fresh_request_is_never_a_follow_up():
    message = "Plan me a trip to Paris"

    assert is_follow_up_query(message, False) is False
    # the classifier still answers, but the gate has the final say
    assert analyze_query(message).target_section == "activities"


@pytest.mark.parametrize(
    "message",
    [
        "find me a cheaper hotel",
        "change the dates",
        "switch to another airline",
        "",
        "   ",
    ],
)
def test_gate_requires_existing_trip_plan(message):
    assert is_follow_up_query(message, False) is False


@pytest.mark.parametrize(
    "message, expected",
    [
        ("Plan me a trip to Paris", False),
        ("What's the weather like there?", False),
        ("Can you UPDATE the flights", True),
        ("upgrade my room", True),
        ("I bought a new gadget", True),  # "gadget" contains "get"
    ],
)
def test_gate_matches_trigger_substrings(message, expected):
    assert is_follow_up_query(message, True) is expected


def test_multi_word_phrases_weigh_more():
    """Equal word counts: "different hotel" scores 2 on top of "hotel"."""
    weighted = analyze_query("I want a different hotel")
    plain = analyze_query("I want a nice hotel")

    assert weighted.intent == plain.intent == "hotel"
    assert weighted.confidence == pytest.approx(3 / 5)
    assert plain.confidence == pytest.approx(1 / 5)
    assert weighted.confidence > plain.confidence
    assert weighted.loading_message == "🏨 Finding alternative hotels..."


def test_low_confidence_update_targets_every_section():
    """"update" overrides a weak match to a whole-plan refresh."""
    analysis = analyze_query("please update my plan")

    assert is_follow_up_query("please update my plan", True) is True
    assert analysis.intent == "multiple"
    assert analysis.target_section == "multiple"
    assert analysis.loading_message == MULTI_SECTION_LOADING_MESSAGE
    assert analysis.confidence == pytest.approx(0.25)
    # keywords of the underlying best match are kept
    assert analysis.keywords == ["plan"]


def test_general_fallback_applies_after_multi_section_override():
    analysis = analyze_query("anything new")

    assert analysis.confidence == 0
    assert analysis.intent == "general"
    assert analysis.target_section == "general"
    assert analysis.loading_message == GENERAL_LOADING_MESSAGE


@pytest.mark.parametrize("message", ["", "   ", "hello there", "12345 !!!", "?"])
def test_messages_without_keywords_fall_back_to_general(message):
    analysis = analyze_query(message)

    assert analysis.intent == "general"
    assert analysis.target_section == "general"
    assert analysis.confidence == 0
    assert analysis.keywords == []
    assert analysis.loading_message == GENERAL_LOADING_MESSAGE


def test_earlier_category_wins_ties():
    analysis = analyze_query("hotel flight")

    assert analysis.confidence == pytest.approx(0.5)
    assert analysis.intent == "hotel"


def test_substring_matching_is_not_word_aware():
    analysis = analyze_query("the hotelier was rude")

    assert analysis.intent == "hotel"
    assert analysis.keywords == ["hotel"]


def test_confidence_can_exceed_one_for_short_messages():
    analysis = analyze_query("cheaper hotel")

    assert analysis.confidence == pytest.approx(1.5)
    assert analysis.target_section == "hotels"


def test_analysis_is_case_insensitive_and_deterministic():
    lower = analyze_query("find me a cheaper hotel")
    upper = analyze_query("FIND ME A CHEAPER HOTEL")

    assert lower == upper
    assert analyze_query("show me luxury hotels") == analyze_query("show me luxury hotels")


@pytest.mark.parametrize(
    "message, intent, target",
    [
        ("show me luxury hotels", "hotel", "hotels"),
        ("any better hotel options?", "hotel", "hotels"),
        ("find hotels under $200", "hotel", "hotels"),
        ("find cheaper flights", "flight", "flights"),
        ("show alternative flight options", "flight", "flights"),
        ("find flights with different airlines", "flight", "flights"),
        ("add more activities", "activity", "activities"),
        ("find things to do", "activity", "activities"),
        ("add restaurants to the plan", "activity", "activities"),
        ("make it cheaper", "budget", "multiple"),
        ("find budget options", "budget", "multiple"),
        ("save money on this trip", "budget", "multiple"),
        ("change the dates", "date", "multiple"),
        ("reschedule for different dates", "date", "multiple"),
    ],
)
def test_example_queries(message, intent, target):
    analysis = analyze_query(message)

    assert analysis.intent == intent
    assert analysis.target_section == target


def test_budget_intent_prefers_budget_copy():
    analysis = analyze_query("make it cheaper")

    assert analysis.confidence == pytest.approx(1 / 3)
    assert analysis.loading_message == "💰 Checking budget options..."


def test_luxury_request_prefers_luxury_copy():
    analysis = analyze_query("show me luxury hotels")

    assert analysis.loading_message == "🏨 Searching for better hotels..."


def test_loading_message_defaults_to_first_entry():
    messages = ("first", "second")

    assert select_loading_message(messages, "nothing special") == "first"
    assert select_loading_message(messages, "something cheap") == "first"
    assert select_loading_message(("a", "budget b"), "cheap please") == "budget b"


@pytest.mark.parametrize(
    "intent, section",
    [
        ("hotel", "hotels"),
        ("flight", "flights"),
        ("activity", "activities"),
        ("date", "multiple"),
        ("budget", "multiple"),
        ("general", "general"),
        ("multiple", "general"),
    ],
)
def test_target_section_mapping(intent, section):
    assert get_target_section(intent) == section


def test_result_is_immutable():
    analysis = analyze_query("find me a cheaper hotel")

    with pytest.raises(Exception):
        analysis.intent = "flight"


def test_analysis_serialises_with_camel_case_aliases():
    payload = analyze_query("find me a cheaper hotel").model_dump(by_alias=True)

    assert payload["targetSection"] == "hotels"
    assert payload["loadingMessage"] == "🏨 Finding cheaper hotel options..."
    assert QueryAnalysis.model_validate(payload).target_section == "hotels"


class TestSectionLoadingStates:
    """Expansion of a target section into per-section loading indicators."""

    def test_multiple_expands_to_all_sections(self):
        states = create_section_loading_states("multiple", "ignored")

        assert [state.section for state in states] == ["hotels", "flights", "activities"]
        assert all(state.is_loading for state in states)
        assert [state.message for state in states] == [
            "🏨 Updating hotels...",
            "✈️ Updating flights...",
            "🎯 Updating activities...",
        ]

    @pytest.mark.parametrize("section", ["hotels", "flights", "activities"])
    def test_single_section_carries_loading_message(self, section):
        states = create_section_loading_states(section, "Working on it")

        assert len(states) == 1
        assert states[0].section == section
        assert states[0].is_loading is True
        assert states[0].message == "Working on it"

    def test_general_yields_no_states(self):
        assert create_section_loading_states("general", "anything") == []

    def test_states_serialise_with_is_loading_alias(self):
        state = create_section_loading_states("hotels", "msg")[0]

        assert state.model_dump(by_alias=True) == {
            "section": "hotels",
            "isLoading": True,
            "message": "msg",
        }
