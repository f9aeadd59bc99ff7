"""Tests for environment-driven settings."""
from __future__ import annotations

import pytest

from src.core.config import DEFAULT_CORS_ORIGINS, ApiSettings


def test_from_env_defaults(monkeypatch):
    for name in (
        "OPENAI_API_KEY",
        "OPENAI_MODEL",
        "OPENAI_TEMPERATURE",
        "OPENAI_MAX_TOKENS",
        "CHAT_HISTORY_LIMIT",
        "TRIP_USE_MOCK_DATA",
        "SENTRY_DSN",
        "CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = ApiSettings.from_env()

    assert settings.openai_api_key is None
    assert settings.openai_model == "gpt-4o"
    assert settings.max_tokens == 10000
    assert settings.history_limit == 10
    assert settings.use_mock_data is False
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS


def test_from_env_reads_overrides(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("OPENAI_TEMPERATURE", "0.2")
    monkeypatch.setenv("CHAT_HISTORY_LIMIT", "4")
    monkeypatch.setenv("TRIP_USE_MOCK_DATA", "Yes")
    monkeypatch.setenv("CORS_ORIGINS", "https://trips.example.com, http://localhost:5173,")

    settings = ApiSettings.from_env()

    assert settings.ensure("openai_api_key") == "sk-test"
    assert settings.temperature == 0.2
    assert settings.history_limit == 4
    assert settings.use_mock_data is True
    assert settings.cors_origins == ["https://trips.example.com", "http://localhost:5173"]


def test_ensure_fails_fast_on_missing_value():
    with pytest.raises(RuntimeError, match="openai_api_key"):
        ApiSettings().ensure("openai_api_key")
