"""Pytest configuration for the trip planner chat project."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path so that import src works under pytest.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.api.dependencies import get_chat_service  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_chat_service_cache():
    """Drop the cached chat service so settings from one test never leak into another."""
    get_chat_service.cache_clear()
    yield
    get_chat_service.cache_clear()
