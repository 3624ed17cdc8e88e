import json
from typing import Any, Iterable, Optional

import requests
from bs4 import BeautifulSoup
from recipe_scrapers import scrape_html

from ..config import REQUEST_TIMEOUT
from ..errors import FetchError
from ..logging_config import get_logger
from ..models import RecipeData

logger = get_logger(__name__)


class WebExtractor:
    """Fetch a recipe page and pull out its name, ingredients and instructions."""

    def __init__(self, timeout: int = REQUEST_TIMEOUT, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'
        })

    def fetch(self, url: str) -> RecipeData:
        """Fetch ``url`` and extract the recipe it contains."""
        logger.info("Fetching recipe page: %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"Failed to fetch URL {url}: {e}") from e

        html = response.text
        logger.debug("Retrieved %.1fKB of HTML from %s", len(html) / 1024, url)

        recipe = self._extract_with_scrapers(html, url)
        if recipe is None:
            recipe = self.extract_from_html(html)
        if recipe is None:
            raise FetchError(f"No recipe found at {url}")

        logger.info("Extracted recipe '%s' from %s", recipe.name, url)
        return recipe

    def _extract_with_scrapers(self, html: str, url: str) -> Optional[RecipeData]:
        """Run the page through recipe-scrapers, falling back to schema.org for unknown sites."""
        try:
            scraper = scrape_html(html, org_url=url, supported_only=False)
            name = scraper.title()
            ingredients = scraper.ingredients()
            instructions = scraper.instructions()
        except Exception as e:
            logger.warning("recipe-scrapers could not parse %s: %s", url, e)
            return None

        if not name or not (ingredients or instructions):
            logger.warning("recipe-scrapers returned an incomplete recipe for %s", url)
            return None

        return RecipeData(
            name=name.strip(),
            ingredients="\n".join(i.strip() for i in ingredients),
            instructions=instructions.strip(),
        )

    def extract_from_html(self, html: str) -> Optional[RecipeData]:
        """Look for JSON-LD structured data, then for Recipe microdata."""
        soup = BeautifulSoup(html, 'html.parser')

        for script in soup.find_all('script', type='application/ld+json'):
            try:
                data = json.loads(script.string or script.get_text())
            except (TypeError, ValueError):
                continue
            recipe_data = self._find_recipe_object(data)
            if recipe_data is not None:
                recipe = self._format_structured_recipe(recipe_data)
                if recipe is not None:
                    return recipe

        return self._extract_microdata(soup)

    def _find_recipe_object(self, data: Any) -> Optional[dict]:
        """Search a JSON-LD document (object, list or @graph) for a Recipe."""
        if isinstance(data, list):
            for item in data:
                found = self._find_recipe_object(item)
                if found is not None:
                    return found
            return None

        if not isinstance(data, dict):
            return None

        schema_type = data.get('@type')
        types = schema_type if isinstance(schema_type, list) else [schema_type]
        if 'Recipe' in types:
            return data

        if '@graph' in data:
            return self._find_recipe_object(data['@graph'])

        return None

    def _format_structured_recipe(self, data: dict) -> Optional[RecipeData]:
        """Turn a schema.org Recipe object into RecipeData."""
        name = _clean(data.get('name'))
        if not name:
            return None

        ingredients = data.get('recipeIngredient') or data.get('ingredients') or []
        if isinstance(ingredients, str):
            ingredients = [ingredients]

        instructions = list(_flatten_instructions(data.get('recipeInstructions')))

        return RecipeData.from_lists(
            name,
            [_clean(ing) for ing in ingredients if _clean(ing)],
            instructions,
        )

    def _extract_microdata(self, soup: BeautifulSoup) -> Optional[RecipeData]:
        recipe_card = soup.find(['div', 'article', 'section'], itemtype=lambda x: x and 'Recipe' in x)
        if not recipe_card:
            return None

        title = recipe_card.find(itemprop='name')
        if not title:
            return None

        ingredients = [
            ing.get_text(strip=True)
            for ing in recipe_card.find_all(itemprop=['recipeIngredient', 'ingredients'])
        ]
        instructions = [
            inst.get_text(strip=True)
            for inst in recipe_card.find_all(itemprop='recipeInstructions')
        ]

        return RecipeData.from_lists(title.get_text(strip=True), ingredients, instructions)


def _clean(value: Any) -> str:
    if value is None:
        return ''
    return ' '.join(str(value).split())


def _flatten_instructions(instructions: Any) -> Iterable[str]:
    """Yield instruction lines from strings, HowToStep and HowToSection entries."""
    if not instructions:
        return
    if isinstance(instructions, str):
        for line in instructions.splitlines():
            if line.strip():
                yield line.strip()
        return
    if isinstance(instructions, dict):
        instructions = [instructions]

    for inst in instructions:
        if isinstance(inst, dict):
            if inst.get('@type') == 'HowToSection' or 'itemListElement' in inst:
                yield from _flatten_instructions(inst.get('itemListElement'))
                continue
            text = _clean(inst.get('text', inst.get('name', '')))
        else:
            text = _clean(inst)
        if text:
            yield text


__all__ = ["WebExtractor"]
