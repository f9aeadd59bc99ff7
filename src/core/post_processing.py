import json
import logging
import re
from typing import Any, Dict, Optional

from pydantic import ValidationError

from src.core.schemas import AssistantReply, FollowUpPlan, TripPlan

logger = logging.getLogger(__name__)

_CODE_BLOCK_PATTERN = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL)


def strip_code_fences(text: str) -> str:
    """Return the body of a fenced ```json block, or the stripped text."""
    match = _CODE_BLOCK_PATTERN.search(text)
    if match:
        return match.group(1).strip()
    return text.strip()


def looks_truncated(text: str) -> bool:
    """True when the reply opens a JSON object that never closes."""
    stripped = text.strip()
    return stripped.startswith("{") and not stripped.endswith("}")


def _extract_json_object(text: str) -> Optional[Dict[str, Any]]:
    candidate = strip_code_fences(text)
    if not candidate.startswith("{"):
        return None
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as exc:
        logger.debug("Assistant reply is not valid JSON: %s", exc)
        return None
    if not isinstance(data, dict):
        return None
    return data


def parse_assistant_reply(text: str) -> AssistantReply:
    """Turn the reassembled model output into a structured reply.

    JSON objects typed ``trip_plan`` or ``follow_up`` are validated into their
    models; anything else, including invalid payloads, is kept as plain text.
    """
    data = _extract_json_object(text)
    if data is None:
        return AssistantReply(kind="text", text=text)

    reply_type = data.get("type")
    try:
        if reply_type == "trip_plan":
            return AssistantReply(kind="trip_plan", text=text, trip_plan=TripPlan.model_validate(data))
        if reply_type == "follow_up":
            return AssistantReply(kind="follow_up", text=text, follow_up=FollowUpPlan.model_validate(data))
    except ValidationError as exc:
        logger.warning("Discarding %s payload that failed validation: %s", reply_type, exc)
        return AssistantReply(kind="text", text=text)

    logger.debug("JSON reply with unsupported type %r treated as text", reply_type)
    return AssistantReply(kind="text", text=text)


def describe_trip_plan(plan: TripPlan) -> str:
    """Short confirmation line shown in the chat once a plan arrives."""
    duration = plan.duration or f"{len(plan.itinerary)} days"
    return (
        f"I've created a {duration} itinerary for {plan.destination}! Check out your trip plan "
        "on the right. Let me know if you'd like me to adjust anything."
    )
