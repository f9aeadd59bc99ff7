from typing import Any, Dict, List, Literal, Optional, Tuple
import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.core.query_detection import QueryAnalysis, SectionLoadingState
from src.core.schemas import ChatHistoryMessage, FollowUpPlan, TripPlan
from src.services.travel_search.schemas import SearchCriteria

logger = logging.getLogger(__name__)


class ChatRequest(BaseModel):
    """Request payload for a single chat turn."""

    message: str = Field(default="", description="Latest user message")
    conversation_history: List[ChatHistoryMessage] = Field(
        default_factory=list,
        alias="conversationHistory",
        description="Earlier messages, oldest first.",
    )
    has_trip_plan: bool = Field(
        default=False,
        alias="hasTripPlan",
        description="Whether a trip plan is already displayed next to the chat.",
    )
    current_plan: Optional[TripPlan] = Field(
        default=None,
        alias="currentPlan",
        description="Trip plan currently displayed; follow-up replies are merged into it.",
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("conversation_history", mode="before")
    @classmethod
    def _drop_invalid_history(cls, value: Any) -> List[ChatHistoryMessage]:
        """Skip null or malformed history entries instead of rejecting the turn."""
        if not isinstance(value, list):
            return []
        history = []
        for item in value:
            if item is None:
                continue
            try:
                history.append(ChatHistoryMessage.model_validate(item))
            except ValidationError:
                logger.debug("Skipping malformed history entry: %r", item)
        return history

    @property
    def has_existing_trip_plan(self) -> bool:
        return self.has_trip_plan or self.current_plan is not None


class QueryAnalysisRequest(BaseModel):
    """Request payload used to preview how a message will be routed."""

    message: str = Field(default="", description="Message to analyse")
    has_trip_plan: bool = Field(default=False, alias="hasTripPlan")

    model_config = ConfigDict(populate_by_name=True)


class QueryAnalysisResponse(BaseModel):
    """Routing decision for a message."""

    is_follow_up: bool = Field(..., alias="isFollowUp")
    analysis: QueryAnalysis
    loading_states: List[SectionLoadingState] = Field(default_factory=list, alias="loadingStates")

    model_config = ConfigDict(populate_by_name=True)


class ChatCompletionResponse(BaseModel):
    """Full, non-streamed reply to a chat turn."""

    kind: Literal["text", "trip_plan", "follow_up"] = Field(..., description="Shape of the reply")
    text: str = Field(..., description="Raw reply text or the confirmation shown in the chat")
    is_follow_up: bool = Field(default=False, alias="isFollowUp")
    analysis: Optional[QueryAnalysis] = None
    trip_plan: Optional[TripPlan] = Field(default=None, alias="tripPlan")
    follow_up: Optional[FollowUpPlan] = Field(default=None, alias="followUp")
    merged_plan: Optional[TripPlan] = Field(
        default=None,
        alias="mergedPlan",
        description="Current plan after applying the reply to the targeted section",
    )
    itinerary_matches_request: bool = Field(default=True, alias="itineraryMatchesRequest")

    model_config = ConfigDict(populate_by_name=True)


class SearchRequest(BaseModel):
    """Request payload for the inventory search."""

    criteria: Optional[SearchCriteria] = Field(
        default=None, description="Explicit filters; takes precedence over message"
    )
    message: Optional[str] = Field(
        default=None, description="Free text parsed into filters when criteria is missing"
    )


class ExampleQueriesResponse(BaseModel):
    examples: Dict[str, Tuple[str, ...]]
