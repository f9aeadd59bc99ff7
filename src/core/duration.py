"""Trip duration helpers: reading the requested day count and checking the reply against it."""
from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

from src.core.schemas import TripPlan

logger = logging.getLogger(__name__)

DURATION_PATTERNS: Tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d+)\s*days?", re.IGNORECASE),
    re.compile(r"(\d+)\s*day\s*trip", re.IGNORECASE),
    re.compile(r"(\d+)\s*-?\s*day", re.IGNORECASE),
)


def extract_requested_days(message: str) -> Optional[int]:
    """Return the number of days asked for in ``message``, if any."""

    for pattern in DURATION_PATTERNS:
        match = pattern.search(message)
        if match:
            try:
                return int(match.group(1))
            except ValueError:
                # digit run longer than the interpreter will convert
                logger.warning("Ignoring unparseable day count of %d digits", len(match.group(1)))
                return None
    return None


def build_duration_instruction(days: int) -> str:
    """System prompt addendum pinning the itinerary to ``days`` days."""

    return (
        f"\n\nHey! The user specifically asked for a {days}-day trip, so make sure your "
        f"itinerary covers exactly {days} days of awesome activities!"
    )


def check_itinerary_length(requested_days: Optional[int], trip_plan: TripPlan) -> bool:
    """Report whether the itinerary covers the requested number of days.

    A mismatch is logged and reported; the plan itself is left untouched.
    """
    if not requested_days:
        return True

    actual_days = len(trip_plan.itinerary)
    if actual_days != requested_days:
        logger.warning(
            "Itinerary length mismatch for %s: requested %d days, received %d",
            trip_plan.destination,
            requested_days,
            actual_days,
        )
        return False
    return True
