"""Ingredient enumeration via a generative AI model."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from dish_nutrition.domain.ingredients import IngredientsResult
from dish_nutrition.errors import UpstreamError, ValidationError
from dish_nutrition.services.parser import parse_ingredients

_PROMPT_TEMPLATE = (
    "Give me the all the ingredients required to cook 1kg of {dish} "
    "with specific quantities. \n"
    "For each ingredient, list the name followed by the quantity and any notes.\n"
    "Format each ingredient on a new line with a plus sign or bullet point."
)


class AIClient(Protocol):
    """Interface for a text-in, text-out language model."""

    async def generate(self, prompt: str) -> str:
        """Return the model's completion for prompt."""


def build_ingredients_prompt(dish: str) -> str:
    """Return the prompt asking for a dish's ingredients and quantities."""
    return _PROMPT_TEMPLATE.format(dish=dish)


@dataclass
class IngredientService:
    """Asks the AI model for a dish's ingredients and parses the reply."""

    client: AIClient
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__)
    )

    async def get_ingredients(self, dish: str | None) -> IngredientsResult:
        """Return the raw AI reply and the ingredients parsed from it."""
        if not dish or not dish.strip():
            raise ValidationError("dishName is required")
        dish = dish.strip()
        try:
            raw_text = await self.client.generate(build_ingredients_prompt(dish))
        except Exception as exc:
            self.logger.exception("AI ingredient request failed", extra={"dish": dish})
            raise UpstreamError() from exc

        ingredients = parse_ingredients(raw_text, logger=self.logger)
        self.logger.info(
            "AI listed %s ingredients for %s", len(ingredients), dish
        )
        return IngredientsResult(dish=dish, raw_text=raw_text, ingredients=ingredients)
