import json
import logging
from typing import Any, Dict, Iterable, Optional

from src.api.schemas import ChatCompletionResponse
from src.core.post_processing import describe_trip_plan
from src.core.schemas import AssistantReply, TripPlan

logger = logging.getLogger(__name__)

SSE_PREFIX = "data: "
SSE_DONE = "[DONE]"
EMPTY_REPLY_TEXT = (
    "I received your request, but I'm having trouble processing it right now. Please try again."
)


def format_sse(payload: Dict[str, Any]) -> str:
    """Encode one server-sent event frame."""
    return f"{SSE_PREFIX}{json.dumps(payload, ensure_ascii=False)}\n\n"


def format_sse_done() -> str:
    return f"{SSE_PREFIX}{SSE_DONE}\n\n"


def collect_sse_content(lines: Iterable[str]) -> str:
    """Reassemble the streamed text from ``data:`` frames.

    Malformed frames and frames without content are skipped.
    """
    accumulated = []
    for line in lines:
        if not line.startswith(SSE_PREFIX):
            continue
        body = line[len(SSE_PREFIX):].strip()
        if body == SSE_DONE:
            break
        try:
            data = json.loads(body)
        except json.JSONDecodeError:
            logger.debug("Skipping malformed SSE frame: %r", body)
            continue
        if isinstance(data, dict) and isinstance(data.get("content"), str):
            accumulated.append(data["content"])
    return "".join(accumulated)


def _reply_text(reply: AssistantReply) -> str:
    if reply.kind == "trip_plan" and reply.trip_plan is not None:
        return describe_trip_plan(reply.trip_plan)
    if reply.kind == "follow_up" and reply.follow_up is not None and reply.follow_up.message:
        return reply.follow_up.message
    return reply.text or EMPTY_REPLY_TEXT


def _reply_to_response(
    reply: AssistantReply,
    *,
    is_follow_up: bool,
    analysis: Optional[Any],
    merged_plan: Optional[TripPlan],
    itinerary_matches_request: bool,
) -> ChatCompletionResponse:
    return ChatCompletionResponse(
        kind=reply.kind,
        text=_reply_text(reply),
        is_follow_up=is_follow_up,
        analysis=analysis,
        trip_plan=reply.trip_plan,
        follow_up=reply.follow_up,
        merged_plan=merged_plan,
        itinerary_matches_request=itinerary_matches_request,
    )
