from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Provider(str, Enum):
    """How a fetched recipe is turned into output."""

    SKIP = "skip"
    CLAUDE = "claude"
    OPENAI = "openai"

    @classmethod
    def from_flags(cls, skip_conversion: bool = False, use_claude: bool = False) -> Provider:
        """Pick the provider from CLI flags. Skipping wins; OpenAI is the default."""
        if skip_conversion:
            return cls.SKIP
        if use_claude:
            return cls.CLAUDE
        return cls.OPENAI


class RecipeData(BaseModel):
    """Fields extracted from a recipe page, kept as raw text blocks."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="The name of the recipe")
    ingredients: str = Field(description="Ingredient lines, one per line")
    instructions: str = Field(description="Instruction steps, one per line")

    @classmethod
    def from_lists(
        cls, name: str, ingredients: list[str], instructions: list[str]
    ) -> RecipeData:
        return cls(
            name=name,
            ingredients="\n".join(ingredients),
            instructions="\n".join(instructions),
        )

    def to_text(self) -> str:
        """Render the recipe as-is, without any Cooklang conversion."""
        return (
            f"{self.name}\n\n[Ingredients]\n{self.ingredients}"
            f"\n\n[Instructions]\n{self.instructions}"
        )
