"""
Central configuration for cook-import.

Constants below are the defaults; Settings picks up overrides from the
environment (and .env, once the CLI has loaded it).
"""

from __future__ import annotations

import os
from dataclasses import dataclass

# Anthropic
ANTHROPIC_API_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"
CLAUDE_MODEL = "claude-sonnet-4-20250514"

# OpenAI
OPENAI_MODEL = "gpt-3.5-turbo"
OPENAI_SMOKE_TEST_MODEL = "gpt-4"

MAX_TOKENS = 1000
SMOKE_TEST_MAX_TOKENS = 10

# Seconds, for fetching recipe pages
REQUEST_TIMEOUT = 30

_TRUTHY = {"1", "true", "yes", "on"}


def _get(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _flag(name: str) -> bool:
    return (_get(name, "") or "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    anthropic_api_key: str | None = None
    openai_api_key: str | None = None
    claude_model: str = CLAUDE_MODEL
    openai_model: str = OPENAI_MODEL
    openai_smoke_test: bool = False
    max_tokens: int = MAX_TOKENS
    log_level: str = "INFO"
    log_file: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current process environment."""
        return cls(
            anthropic_api_key=_get("ANTHROPIC_API_KEY"),
            openai_api_key=_get("OPENAI_API_KEY"),
            claude_model=_get("ANTHROPIC_MODEL", CLAUDE_MODEL),
            openai_model=_get("OPENAI_MODEL", OPENAI_MODEL),
            openai_smoke_test=_flag("OPENAI_SMOKE_TEST"),
            log_level=_get("LOG_LEVEL", "INFO"),
            log_file=_get("LOG_FILE"),
        )
