from typing import Any, Dict, Optional

import openai
import requests
from openai import OpenAI

from .config import (
    ANTHROPIC_API_URL,
    ANTHROPIC_VERSION,
    CLAUDE_MODEL,
    MAX_TOKENS,
    OPENAI_MODEL,
    OPENAI_SMOKE_TEST_MODEL,
    SMOKE_TEST_MAX_TOKENS,
)
from .errors import (
    ApiStatusError,
    MalformedResponseError,
    MissingCredentialError,
    TransportError,
)
from .logging_config import get_logger
from .prompts import SMOKE_TEST_PROMPT

logger = get_logger(__name__)


class ClaudeClient:
    """Client for the Anthropic Messages API."""

    provider = "Claude"

    def __init__(
        self,
        api_key: str = None,
        model: str = CLAUDE_MODEL,
        max_tokens: int = MAX_TOKENS,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        if not api_key:
            raise MissingCredentialError(
                "ANTHROPIC_API_KEY must be set in the environment"
            )

        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.session = session or requests.Session()
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        return {
            "x-api-key": self.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }

    def convert(self, prompt: str) -> str:
        """Send the prompt as a single user message and return the reply text."""
        body = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        logger.info(
            "Sending prompt to Claude (%s) - Length: %s characters", self.model, len(prompt)
        )

        try:
            response = self.session.post(
                ANTHROPIC_API_URL, headers=self._headers(), json=body, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"Claude API request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise ApiStatusError(self.provider, response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Failed to parse Claude response: {e}") from e

        return _extract_text(data, ("content", 0, "text"), self.provider)


class OpenAIClient:
    """Client for the OpenAI Chat Completions API."""

    provider = "OpenAI"

    def __init__(
        self,
        api_key: str = None,
        model: str = OPENAI_MODEL,
        max_tokens: int = MAX_TOKENS,
        client: Optional[OpenAI] = None,
    ):
        if not api_key:
            raise MissingCredentialError("OPENAI_API_KEY must be set in the environment")

        self.model = model
        self.max_tokens = max_tokens
        # One request per call; failures surface instead of being retried
        self.client = client or OpenAI(api_key=api_key, max_retries=0)

    def _complete(self, prompt: str, model: str, max_tokens: int) -> str:
        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens,
            )
        except openai.APIStatusError as e:
            raise ApiStatusError(self.provider, e.status_code, e.response.text) from e
        except openai.APIResponseValidationError as e:
            raise MalformedResponseError(f"Failed to parse OpenAI response: {e}") from e
        except openai.APIConnectionError as e:
            raise TransportError(f"OpenAI API request failed: {e}") from e
        except ValueError as e:
            # 2xx with a body that claims to be JSON but does not parse
            raise MalformedResponseError(f"Failed to parse OpenAI response: {e}") from e

        return _extract_text(response, ("choices", 0, "message", "content"), self.provider)

    def convert(self, prompt: str) -> str:
        """Send the prompt as a single user message and return the reply text."""
        logger.info(
            "Sending prompt to OpenAI (%s) - Length: %s characters", self.model, len(prompt)
        )
        return self._complete(prompt, self.model, self.max_tokens)

    def smoke_test(self) -> str:
        """Ask the API for a short greeting to check that the key and endpoint work."""
        logger.info("Testing OpenAI API with %s...", OPENAI_SMOKE_TEST_MODEL)
        reply = self._complete(SMOKE_TEST_PROMPT, OPENAI_SMOKE_TEST_MODEL, SMOKE_TEST_MAX_TOKENS)
        logger.info("OpenAI API test response: %s", reply)
        return reply


def _extract_text(payload: Any, path: tuple, provider: str) -> str:
    """Walk ``path`` through a decoded response (dicts, lists or SDK objects)."""
    node = payload
    for key in path:
        try:
            if isinstance(key, int):
                node = node[key]
            elif isinstance(node, dict):
                node = node[key]
            else:
                node = getattr(node, key)
        except (KeyError, IndexError, TypeError, AttributeError):
            node = None
        if node is None:
            raise MalformedResponseError(
                f"Failed to extract content from {provider} response"
            )

    if not isinstance(node, str):
        raise MalformedResponseError(f"Failed to extract content from {provider} response")
    return node


__all__ = ["ClaudeClient", "OpenAIClient"]
