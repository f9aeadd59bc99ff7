from dataclasses import dataclass, field
from typing import AsyncIterator, List, Optional
import logging

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from src.api.schemas import ChatCompletionResponse, ChatRequest
from src.api.response_builder import _reply_to_response
from src.core.config import ApiSettings
from src.core.duration import build_duration_instruction, check_itinerary_length, extract_requested_days
from src.core.post_processing import looks_truncated, parse_assistant_reply
from src.core.prompts import follow_up_focus_prompt, mock_data_prompt, travel_agent_system_prompt
from src.core.query_detection import (
    QueryAnalysis,
    SectionLoadingState,
    analyze_query,
    create_section_loading_states,
    is_follow_up_query,
)
from src.core.reducer import merge_trip_plan
from src.services.travel_search import format_search_context, parse_travel_request, search_travel

logger = logging.getLogger(__name__)

REQUIRED_SETTINGS = ["openai_api_key"]

FOCUS_SECTIONS = {
    "hotels": '"hotels"',
    "flights": '"flights"',
    "activities": '"itinerary"',
    "multiple": '"hotels", "flights" and "itinerary"',
}


def _ensure_configuration(settings: ApiSettings) -> None:
    missing = [name for name in REQUIRED_SETTINGS if not getattr(settings, name)]
    if missing:
        joined = ", ".join(missing)
        raise RuntimeError(f"Missing required environment variables for chat service: {joined}")


@dataclass(slots=True)
class ChatTurn:
    """Routing decision taken once, before the model is called."""

    message: str
    is_follow_up: bool
    analysis: QueryAnalysis
    loading_states: List[SectionLoadingState] = field(default_factory=list)
    requested_days: Optional[int] = None


class ChatService:
    """Container for the chat model and the per-turn request pipeline.

    Each turn is routed through the follow-up gate and the intent classifier
    before the system prompt is assembled, so the caller knows which plan
    section to refresh while the reply is still streaming.
    """

    def __init__(self, settings: ApiSettings, llm: Optional[BaseChatModel] = None) -> None:
        self.settings = settings
        if llm is None:
            _ensure_configuration(settings)
            llm = ChatOpenAI(
                model=settings.openai_model,
                temperature=settings.temperature,
                max_tokens=settings.max_tokens,
                api_key=settings.ensure("openai_api_key"),
                streaming=True,
            )
        self.llm = llm

    def __repr__(self) -> str:
        llm_name = getattr(self.llm, "model_name", None) or type(self.llm).__name__
        return (
            f"ChatService(llm='{llm_name}', history_limit={self.settings.history_limit}, "
            f"use_mock_data={self.settings.use_mock_data})"
        )

    def prepare(self, request: ChatRequest) -> ChatTurn:
        """Decide how the turn is routed: fresh planning request or follow-up refinement."""

        message = request.message.strip()
        if not message:
            raise ValueError("Valid message content is required")

        follow_up = is_follow_up_query(message, request.has_existing_trip_plan)
        analysis = analyze_query(message)
        loading_states = (
            create_section_loading_states(analysis.target_section, analysis.loading_message)
            if follow_up
            else []
        )
        requested_days = extract_requested_days(message)

        logger.info(
            "Chat turn prepared: follow_up=%s target=%s requested_days=%s",
            follow_up,
            analysis.target_section,
            requested_days,
        )
        return ChatTurn(
            message=message,
            is_follow_up=follow_up,
            analysis=analysis,
            loading_states=loading_states,
            requested_days=requested_days,
        )

    async def build_system_prompt(self, turn: ChatTurn) -> str:
        prompt = travel_agent_system_prompt
        if turn.requested_days:
            prompt += build_duration_instruction(turn.requested_days)

        sections = FOCUS_SECTIONS.get(turn.analysis.target_section)
        if turn.is_follow_up and sections:
            prompt += follow_up_focus_prompt.format(
                target_section=turn.analysis.target_section,
                sections=sections,
            )

        if self.settings.use_mock_data:
            criteria = parse_travel_request(turn.message)
            results = await search_travel(criteria)
            if results.success:
                prompt += mock_data_prompt.format(inventory=format_search_context(results))
        return prompt

    async def build_messages(self, turn: ChatTurn, request: ChatRequest) -> List[BaseMessage]:
        """System prompt, sanitised recent history, then the current message."""

        messages: List[BaseMessage] = [SystemMessage(content=await self.build_system_prompt(turn))]

        history = request.conversation_history[-self.settings.history_limit:] if self.settings.history_limit else []
        for item in history:
            if not isinstance(item.content, str) or not item.content.strip():
                continue
            content = item.content.strip()
            if item.sender == "user":
                messages.append(HumanMessage(content=content))
            else:
                messages.append(AIMessage(content=content))

        messages.append(HumanMessage(content=turn.message))
        return messages

    async def stream_reply(self, turn: ChatTurn, request: ChatRequest) -> AsyncIterator[str]:
        """Yield reply text chunks as the model produces them."""

        messages = await self.build_messages(turn, request)
        full_response: List[str] = []
        async for chunk in self.llm.astream(messages):
            content = chunk.content if isinstance(chunk.content, str) else ""
            if content:
                full_response.append(content)
                yield content
        self._inspect_reply(turn, "".join(full_response))

    def _inspect_reply(self, turn: ChatTurn, text: str) -> bool:
        """Log reply diagnostics; returns whether the itinerary length matches the request."""

        logger.info("Complete reply length: %d", len(text))
        if looks_truncated(text):
            logger.warning("Reply appears to be truncated JSON; consider raising OPENAI_MAX_TOKENS")
            return True
        reply = parse_assistant_reply(text)
        if reply.trip_plan is not None:
            return check_itinerary_length(turn.requested_days, reply.trip_plan)
        return True

    async def complete(self, request: ChatRequest) -> ChatCompletionResponse:
        """Run a full turn and return the parsed reply, merged into the current plan."""

        turn = self.prepare(request)
        messages = await self.build_messages(turn, request)
        chunks: List[str] = []
        async for chunk in self.llm.astream(messages):
            if isinstance(chunk.content, str):
                chunks.append(chunk.content)
        text = "".join(chunks)

        matches_request = self._inspect_reply(turn, text)
        reply = parse_assistant_reply(text)

        merged_plan = None
        update = reply.trip_plan or reply.follow_up
        if update is not None:
            target = turn.analysis.target_section if turn.is_follow_up else "general"
            merged_plan = merge_trip_plan(request.current_plan, update, target)

        return _reply_to_response(
            reply,
            is_follow_up=turn.is_follow_up,
            analysis=turn.analysis,
            merged_plan=merged_plan,
            itinerary_matches_request=matches_request,
        )

    async def close(self) -> None:
        """Release the HTTP clients held by the chat model, if it exposes them."""

        async_client = getattr(self.llm, "root_async_client", None)
        if async_client is not None:
            await async_client.close()
        sync_client = getattr(self.llm, "root_client", None)
        if sync_client is not None:
            sync_client.close()
        logger.info("Chat service closed")
