"""Shared type aliases used across the planner modules."""
from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field

NonNegMoney = Annotated[float, Field(ge=0)]
Rating = Annotated[float, Field(ge=0, le=5)]

QueryIntent = Literal["hotel", "flight", "activity", "budget", "date", "general", "multiple"]
TargetSection = Literal["hotels", "flights", "activities", "multiple", "general"]
PlanSection = Literal["hotels", "flights", "activities"]
