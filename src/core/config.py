"""Configuration helpers for API keys and environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:3001"]

_TRUTHY = {"1", "true", "yes", "on"}


def _split_csv(raw: Optional[str]) -> List[str]:
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(slots=True)
class ApiSettings:
    """Centralised container for the chat model credentials and tuning knobs."""

    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o"
    temperature: float = 0.7
    max_tokens: int = 10000
    history_limit: int = 10
    use_mock_data: bool = False
    sentry_dsn: Optional[str] = None
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    @classmethod
    def from_env(cls) -> "ApiSettings":
        """Load settings from environment variables."""

        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY"),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o"),
            temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.7")),
            max_tokens=int(os.getenv("OPENAI_MAX_TOKENS", "10000")),
            history_limit=int(os.getenv("CHAT_HISTORY_LIMIT", "10")),
            use_mock_data=os.getenv("TRIP_USE_MOCK_DATA", "").strip().lower() in _TRUTHY,
            sentry_dsn=os.getenv("SENTRY_DSN"),
            cors_origins=_split_csv(os.getenv("CORS_ORIGINS")),
        )

    def ensure(self, field: str) -> str:
        """Return the requested field and fail fast if it is missing."""

        value = getattr(self, field)
        if not value:
            raise RuntimeError(f"Missing configuration value: {field}")
        return value
