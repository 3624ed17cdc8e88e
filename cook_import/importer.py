"""Fetch a recipe and, depending on the provider, convert it to Cooklang."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Protocol

from .config import Settings
from .errors import CookImportError, ImportStepError
from .extractors import WebExtractor
from .llm_client import ClaudeClient, OpenAIClient
from .logging_config import get_logger
from .models import Provider, RecipeData
from .prompts import build_prompt

logger = get_logger(__name__)


class RecipeFetcher(Protocol):
    def fetch(self, url: str) -> RecipeData: ...


def default_claude_client(settings: Settings) -> ClaudeClient:
    return ClaudeClient(
        api_key=settings.anthropic_api_key,
        model=settings.claude_model,
        max_tokens=settings.max_tokens,
    )


def default_openai_client(settings: Settings) -> OpenAIClient:
    return OpenAIClient(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        max_tokens=settings.max_tokens,
    )


@contextmanager
def _step(description: str) -> Iterator[None]:
    """Attach the failing step to any import error raised inside the block."""
    try:
        yield
    except CookImportError as e:
        logger.warning("Step failed (%s): %s", description, e)
        raise ImportStepError(description, e) from e


class RecipeImporter:
    """Runs one import: fetch, then skip, or build a prompt and call a provider."""

    def __init__(
        self,
        settings: Settings,
        fetcher: RecipeFetcher | None = None,
        claude_factory: Callable[[Settings], ClaudeClient] = default_claude_client,
        openai_factory: Callable[[Settings], OpenAIClient] = default_openai_client,
    ):
        self.settings = settings
        self.fetcher = fetcher or WebExtractor()
        self.claude_factory = claude_factory
        self.openai_factory = openai_factory
        self._handlers: dict[Provider, Callable[[str], str]] = {
            Provider.SKIP: self._run_skip,
            Provider.CLAUDE: self._run_claude,
            Provider.OPENAI: self._run_openai,
        }

    def run(self, url: str, provider: Provider) -> str:
        """Import the recipe at ``url`` and return the text to print."""
        handler = self._handlers[provider]
        return handler(url)

    def _fetch(self, url: str) -> RecipeData:
        logger.info("Step 1: Fetching recipe data...")
        with _step("fetch recipe data"):
            recipe = self.fetcher.fetch(url)

        logger.info("Step 1 successful. Recipe name: %s", recipe.name)
        logger.info("Ingredients length: %s", len(recipe.ingredients))
        logger.info("Instructions length: %s", len(recipe.instructions))
        return recipe

    def _run_skip(self, url: str) -> str:
        logger.info("Fetching recipe without conversion from: %s", url)
        return self._fetch(url).to_text()

    def _run_claude(self, url: str) -> str:
        logger.info("Importing recipe with Claude conversion from: %s", url)
        # Fails on a missing key before anything goes over the network
        client = self.claude_factory(self.settings)

        recipe = self._fetch(url)

        logger.info("Step 2: Converting recipe with Claude...")
        with _step("convert recipe with Claude"):
            converted = client.convert(build_prompt(Provider.CLAUDE, recipe))

        logger.info("Claude conversion successful")
        return converted

    def _run_openai(self, url: str) -> str:
        logger.info("Importing recipe with OpenAI conversion from: %s", url)
        client = self.openai_factory(self.settings)

        recipe = self._fetch(url)

        logger.info("Step 2: Converting recipe with OpenAI...")
        if self.settings.openai_smoke_test:
            with _step("check OpenAI API"):
                client.smoke_test()
            logger.info("OpenAI API test successful")

        with _step("convert recipe with OpenAI"):
            converted = client.convert(build_prompt(Provider.OPENAI, recipe))

        logger.info("OpenAI conversion successful")
        return converted


__all__ = ["RecipeImporter", "default_claude_client", "default_openai_client"]
