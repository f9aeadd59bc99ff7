from typing import Dict, Optional, Tuple, Union
import logging

from src.core.schemas import FollowUpPlan, TripPlan
from src.core.types import TargetSection

logger = logging.getLogger(__name__)

# target section -> plan fields it may overwrite
SECTION_FIELDS: Dict[str, Tuple[str, ...]] = {
    "hotels": ("hotels",),
    "flights": ("flights",),
    "activities": ("itinerary",),
    "multiple": ("hotels", "flights", "itinerary"),
    "general": (),
}


def merge_trip_plan(
    existing: Optional[TripPlan],
    update: Optional[Union[TripPlan, FollowUpPlan]],
    target_section: TargetSection,
) -> Optional[TripPlan]:
    """Apply a follow-up reply to the plan on screen, touching only the targeted sections."""

    if update is None:
        return existing
    if existing is None:
        if isinstance(update, TripPlan):
            logger.info("Reducer: No existing plan, using new plan")
            return update
        logger.info("Reducer: Follow-up reply without an existing plan; nothing to merge")
        return None

    if isinstance(update, TripPlan) and target_section == "general":
        logger.info("Reducer: Complete plan received for a general request; replacing plan")
        return update

    # a full plan defaults missing sections to empty lists; only sent ones count
    sent = update.model_fields_set if isinstance(update, TripPlan) else None

    changes = {}
    for field in SECTION_FIELDS.get(target_section, ()):
        if sent is not None and field not in sent:
            continue
        value = getattr(update, field, None)
        if value is None:
            continue
        changes[field] = value

    if update.total_cost is not None and changes:
        changes["total_cost"] = update.total_cost

    logger.info(
        "Reducer: Merging %s into plan for %s (target=%s)",
        sorted(changes) or "nothing",
        existing.destination,
        target_section,
    )
    if not changes:
        return existing
    return existing.model_copy(update=changes)
