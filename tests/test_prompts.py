import pytest

from cook_import.models import Provider, RecipeData
from cook_import.prompts import build_prompt
from tests.conftest import TEA


def test_claude_prompt_describes_markup_rules():
    prompt = build_prompt(Provider.CLAUDE, TEA)

    assert "@ground black pepper{} to taste" in prompt
    assert "@bacon strips{1%kg}" in prompt
    assert "only use # the first time it is mentioned" in prompt
    assert "~eggs{3%minutes}" in prompt
    assert prompt.endswith(
        "Recipe Name: Tea\n\n    Ingredients:\n    water, tea leaves\n\n"
        "    Instructions:\n    Boil water. Steep leaves."
    )


def test_openai_prompt_describes_markup_rules():
    prompt = build_prompt(Provider.OPENAI, TEA)

    assert prompt.startswith("Convert this recipe to Cooklang format.")
    assert "@ingredient{amount}" in prompt
    assert "~timer{time}" in prompt
    assert "Recipe Name: Tea\n\nIngredients:\nwater, tea leaves\n\nInstructions:\nBoil water. Steep leaves." in prompt
    assert prompt.endswith("Return only the converted recipe.")


@pytest.mark.parametrize("provider", [Provider.CLAUDE, Provider.OPENAI])
def test_recipe_text_passes_through_unescaped(provider):
    recipe = RecipeData(
        name="Odd {name}",
        ingredients='1 cup "flour" {sifted} <b>',
        instructions="Mix 100% of it & bake {0}.",
    )
    prompt = build_prompt(provider, recipe)

    assert "Odd {name}" in prompt
    assert '1 cup "flour" {sifted} <b>' in prompt
    assert "Mix 100% of it & bake {0}." in prompt


def test_skip_has_no_template():
    with pytest.raises(ValueError):
        build_prompt(Provider.SKIP, TEA)
