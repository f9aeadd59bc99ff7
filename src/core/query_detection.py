"""Keyword based routing for follow-up messages.

When a trip plan is already on screen, short messages such as
"find me a cheaper hotel" should only refresh one part of it. The helpers in
this module decide whether a message is a follow-up at all, which section it
targets and which loading copy the UI shows while the model answers.

Matching is done on raw substrings of the lower-cased message, so "hotelier"
counts as "hotel". Categories are scored in the order of ``QUERY_PATTERNS``
and only a strictly higher confidence replaces the current best, so earlier
categories win ties.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from src.core.types import PlanSection, QueryIntent, TargetSection

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QueryPattern:
    """Trigger phrases and loading copy owned by one intent category."""

    keywords: Tuple[str, ...]
    loading_messages: Tuple[str, ...]


QUERY_PATTERNS: Tuple[Tuple[QueryIntent, QueryPattern], ...] = (
    (
        "hotel",
        QueryPattern(
            keywords=(
                "hotel", "hotels", "accommodation", "stay", "room", "lodge", "resort", "inn",
                "cheaper hotel", "different hotel", "luxury hotel", "budget hotel",
                "better hotel", "another hotel", "hotel options", "place to stay",
            ),
            loading_messages=(
                "🏨 Searching for better hotels...",
                "🏨 Finding cheaper hotel options...",
                "🏨 Looking for luxury accommodations...",
                "🏨 Updating hotel recommendations...",
                "🏨 Finding alternative hotels...",
            ),
        ),
    ),
    (
        "flight",
        QueryPattern(
            keywords=(
                "flight", "flights", "plane", "airline", "fly", "departure", "arrival",
                "cheaper flight", "different flight", "direct flight", "connecting flight",
                "earlier flight", "later flight", "flight options", "alternative flight",
            ),
            loading_messages=(
                "✈️ Looking for alternative flights...",
                "✈️ Searching for cheaper flights...",
                "✈️ Finding direct flight options...",
                "✈️ Updating flight recommendations...",
                "✈️ Checking different airlines...",
            ),
        ),
    ),
    (
        "activity",
        QueryPattern(
            keywords=(
                "activity", "activities", "things to do", "attractions", "tour", "tours",
                "museum", "restaurant", "food", "dining", "sightseeing", "entertainment",
                "add activities", "more activities", "different activities", "itinerary",
                "schedule", "plan", "visit", "explore", "experience",
            ),
            loading_messages=(
                "🎯 Finding new activities...",
                "🎯 Adding more experiences...",
                "🎯 Updating your itinerary...",
                "🎯 Discovering local attractions...",
                "🎯 Planning better activities...",
            ),
        ),
    ),
    (
        "budget",
        QueryPattern(
            keywords=(
                "budget", "cheaper", "expensive", "cost", "price", "affordable", "money",
                "save money", "reduce cost", "lower price", "budget options", "economical",
            ),
            loading_messages=(
                "💰 Checking budget options...",
                "💰 Finding cheaper alternatives...",
                "💰 Optimizing your budget...",
                "💰 Looking for savings...",
                "💰 Updating cost estimates...",
            ),
        ),
    ),
    (
        "date",
        QueryPattern(
            keywords=(
                "date", "dates", "time", "when", "schedule", "calendar", "day", "week",
                "change date", "different date", "reschedule", "move trip", "postpone",
            ),
            loading_messages=(
                "📅 Updating travel dates...",
                "📅 Checking new availability...",
                "📅 Rescheduling your trip...",
                "📅 Finding options for new dates...",
                "📅 Adjusting your schedule...",
            ),
        ),
    ),
)

TARGET_SECTIONS: Dict[str, TargetSection] = {
    "hotel": "hotels",
    "flight": "flights",
    "activity": "activities",
    "date": "multiple",
    "budget": "multiple",
}

MULTI_SECTION_KEYWORDS: Tuple[str, ...] = ("change", "update", "modify", "adjust", "new")

FOLLOW_UP_INDICATORS: Tuple[str, ...] = (
    "find", "get", "show", "change", "update", "modify", "adjust",
    "different", "another", "alternative", "better", "cheaper",
    "add", "remove", "replace", "switch", "upgrade",
)

MULTI_SECTION_THRESHOLD = 0.3
GENERAL_THRESHOLD = 0.1

DEFAULT_LOADING_MESSAGE = "🔍 Processing your request..."
MULTI_SECTION_LOADING_MESSAGE = "🔄 Updating your trip plan..."
GENERAL_LOADING_MESSAGE = "🤔 Understanding your request..."

MULTI_SECTION_LOADING_STATES: Tuple[Tuple[PlanSection, str], ...] = (
    ("hotels", "🏨 Updating hotels..."),
    ("flights", "✈️ Updating flights..."),
    ("activities", "🎯 Updating activities..."),
)

# (message triggers, loading message markers), checked in order
_MESSAGE_PREFERENCES: Tuple[Tuple[Tuple[str, ...], Tuple[str, ...]], ...] = (
    (("cheap", "budget"), ("cheaper", "budget")),
    (("luxury", "premium"), ("luxury", "better")),
    (("different", "alternative"), ("alternative", "different")),
)

EXAMPLE_QUERIES: Dict[str, Tuple[str, ...]] = {
    "hotel": (
        "find me a cheaper hotel",
        "show me luxury hotels",
        "I want a different hotel",
        "any better hotel options?",
        "find hotels under $200",
    ),
    "flight": (
        "get me a direct flight",
        "find cheaper flights",
        "show alternative flight options",
        "I need an earlier flight",
        "find flights with different airlines",
    ),
    "activity": (
        "add more activities",
        "find things to do",
        "show me museums",
        "add restaurants to the plan",
        "what else can we visit?",
    ),
    "budget": (
        "make it cheaper",
        "reduce the cost",
        "find budget options",
        "save money on this trip",
    ),
    "date": (
        "change the dates",
        "move the trip to next month",
        "reschedule for different dates",
    ),
}


class QueryAnalysis(BaseModel):
    """Routing decision produced for a single follow-up message."""

    intent: QueryIntent = Field(description="Winning intent category")
    confidence: float = Field(ge=0, description="Matched keyword weight over message word count")
    target_section: TargetSection = Field(
        alias="targetSection", description="Trip plan section the message is about"
    )
    loading_message: str = Field(alias="loadingMessage", description="UI copy shown while loading")
    keywords: List[str] = Field(default_factory=list, description="Matched trigger phrases")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SectionLoadingState(BaseModel):
    """Loading indicator for one section of the displayed trip plan."""

    section: PlanSection
    is_loading: bool = Field(default=True, alias="isLoading")
    message: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)


def get_target_section(intent: str) -> TargetSection:
    """Map an intent category onto the plan section it refreshes."""

    return TARGET_SECTIONS.get(intent, "general")


def select_loading_message(messages: Tuple[str, ...], query: str) -> str:
    """Pick the loading message that best fits the wording of ``query``.

    Falls back to the first message of the pool so the choice stays
    deterministic.
    """
    for triggers, markers in _MESSAGE_PREFERENCES:
        if any(trigger in query for trigger in triggers):
            for message in messages:
                if any(marker in message for marker in markers):
                    return message
    return messages[0]


def analyze_query(query: str) -> QueryAnalysis:
    """Classify which trip plan section a follow-up message targets."""

    lower_query = query.lower()
    word_count = len(lower_query.split()) or 1

    best_intent: QueryIntent = "general"
    best_confidence = 0.0
    best_message = DEFAULT_LOADING_MESSAGE
    best_keywords: List[str] = []

    for intent, pattern in QUERY_PATTERNS:
        weight = 0
        matched: List[str] = []
        for keyword in pattern.keywords:
            if keyword in lower_query:
                # multi-word phrases weigh one per word
                weight += len(keyword.split(" "))
                matched.append(keyword)

        confidence = weight / word_count
        if confidence > best_confidence:
            best_intent = intent
            best_confidence = confidence
            best_message = select_loading_message(pattern.loading_messages, lower_query)
            best_keywords = matched

    target_section = get_target_section(best_intent)

    has_multi_section_intent = any(keyword in lower_query for keyword in MULTI_SECTION_KEYWORDS)
    if has_multi_section_intent and best_confidence < MULTI_SECTION_THRESHOLD:
        best_intent = "multiple"
        target_section = "multiple"
        best_message = MULTI_SECTION_LOADING_MESSAGE

    if best_confidence < GENERAL_THRESHOLD:
        best_intent = "general"
        target_section = "general"
        best_message = GENERAL_LOADING_MESSAGE

    logger.debug(
        "Query analysed: intent=%s confidence=%.3f keywords=%s",
        best_intent,
        best_confidence,
        best_keywords,
    )
    return QueryAnalysis(
        intent=best_intent,
        confidence=best_confidence,
        target_section=target_section,
        loading_message=best_message,
        keywords=best_keywords,
    )


def is_follow_up_query(query: str, has_existing_trip_plan: bool) -> bool:
    """Return True when ``query`` refines an existing plan instead of starting a new one."""

    if not has_existing_trip_plan:
        return False
    lower_query = query.lower()
    return any(indicator in lower_query for indicator in FOLLOW_UP_INDICATORS)


def create_section_loading_states(
    target_section: TargetSection,
    loading_message: str,
) -> List[SectionLoadingState]:
    """Expand a target section into the per-section loading indicators."""

    if target_section == "multiple":
        return [
            SectionLoadingState(section=section, is_loading=True, message=message)
            for section, message in MULTI_SECTION_LOADING_STATES
        ]
    if target_section in ("hotels", "flights", "activities"):
        return [SectionLoadingState(section=target_section, is_loading=True, message=loading_message)]
    return []
