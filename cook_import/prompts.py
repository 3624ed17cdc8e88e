"""Prompt templates for converting recipes to Cooklang."""
from __future__ import annotations

from .models import Provider, RecipeData

# Literal Cooklang braces are doubled because the templates go through str.format.
CLAUDE_PROMPT_TEMPLATE = """\
As a distinguished Cooklang Converter, your primary task is
    to transform recipes provided by the user into the structured
    Cooklang recipe markup format.

    Ingredients

    To define an ingredient, use the @ symbol. If the ingredient's
    name contains multiple words, indicate the end of the name with {{}}.

    Example:
        Then add @salt and @ground black pepper{{}} to taste.

    To indicate the quantity of an item, place the quantity inside {{}} after the name.

    Example:
        Poke holes in @potato{{2}}.

    To use a unit of an item, such as weight or volume, add a % between
    the quantity and unit.

    Example:
        Place @bacon strips{{1%kg}} on a baking sheet and glaze with @syrup{{1/2%tbsp}}.

    Many recipes involve repetitive ingredient preparations, such as peeling or chopping. To simplify this, you can define these common preparations directly within the ingredient reference using shorthand syntax:

    Example:
        Mix @onion{{1}}(peeled and finely chopped) and @garlic{{2%cloves}}(peeled and minced) into paste.

    Cookware

    You can define any necessary cookware with # symbol. If the cookware's
    name contains multiple words, indicate the end of the name with {{}}. For cookware it is especially important that you only use # the first time it is mentioned or else cooklang will create a cookware list with repeated items.

    Example:
        Place the potatoes into a #pot.
        Mash the potatoes with a #potato masher{{}}.

    Timer

    You can define a timer using ~.

    Example:
        Lay the potatoes on a #baking sheet{{}} and place into the #oven{{}}. Bake for ~{{25%minutes}}.

    Timers can have a name too.

    Example:
        Boil @eggs{{2}} for ~eggs{{3%minutes}}.

    User will give you a classical recipe representation when ingredients listed first
    and then method text.

    Final result shouldn't have original ingredient list, you need to
    incorporate each ingredient and quantities into method's text following
    Cooklang conventions.

    Ensure the original recipe's words are preserved, modifying only
    ingredients and cookware according to Cooklang syntax. Don't convert
    temperature.

    Separate each step with two new lines.

    Recipe Name: {name}

    Ingredients:
    {ingredients}

    Instructions:
    {instructions}"""

OPENAI_PROMPT_TEMPLATE = """\
Convert this recipe to Cooklang format. Cooklang is a markup language for recipes that uses @ingredient{{amount}} for ingredients, #cookware for cookware, and ~time{{minutes}} for timers.

Recipe Name: {name}

Ingredients:
{ingredients}

Instructions:
{instructions}

Please convert this to proper Cooklang format with ingredients marked as @ingredient{{amount}}, cookware as #cookware, and timers as ~timer{{time}}. Return only the converted recipe."""

PROMPT_TEMPLATES = {
    Provider.CLAUDE: CLAUDE_PROMPT_TEMPLATE,
    Provider.OPENAI: OPENAI_PROMPT_TEMPLATE,
}

SMOKE_TEST_PROMPT = "Say hello"


def build_prompt(provider: Provider, recipe: RecipeData) -> str:
    """Fill the provider's template with the recipe fields, verbatim."""
    try:
        template = PROMPT_TEMPLATES[provider]
    except KeyError as exc:
        raise ValueError(f"No prompt template for provider '{provider.value}'") from exc

    return template.format(
        name=recipe.name,
        ingredients=recipe.ingredients,
        instructions=recipe.instructions,
    )


__all__ = [
    "CLAUDE_PROMPT_TEMPLATE",
    "OPENAI_PROMPT_TEMPLATE",
    "SMOKE_TEST_PROMPT",
    "build_prompt",
]
