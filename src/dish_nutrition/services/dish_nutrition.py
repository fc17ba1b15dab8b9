"""Dish nutrition calculation from AI-listed ingredients."""

import asyncio
import logging
from dataclasses import dataclass, field

from dish_nutrition.domain.ingredients import Ingredient
from dish_nutrition.domain.nutrition import (
    DishNutritionResult,
    FoodRecord,
    IngredientNutrition,
)
from dish_nutrition.services.aggregator import calculate_total_nutrition
from dish_nutrition.services.estimator import (
    DEFAULT_GRAMS,
    estimate_nutrition,
    estimate_quantity,
)
from dish_nutrition.services.foods import FoodRepository
from dish_nutrition.services.ingredients import IngredientService
from dish_nutrition.services.units import convert_to_grams

_STOP_WORDS = frozenset(
    {"fresh", "dried", "chopped", "sliced", "a", "the", "and", "or"}
)


@dataclass
class DishNutritionService:
    """Resolves each ingredient against the food table, estimating misses."""

    ingredient_service: IngredientService
    repository: FoodRepository
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__)
    )

    async def calculate(self, dish: str | None) -> DishNutritionResult:
        """Estimate nutrition for 1 kg of a dish."""
        listed = await self.ingredient_service.get_ingredients(dish)
        # gather keeps input order regardless of completion order.
        resolved = await asyncio.gather(
            *(self.resolve_ingredient(item) for item in listed.ingredients)
        )
        items = list(resolved)
        return DishNutritionResult(
            dish=listed.dish,
            total_nutrition=calculate_total_nutrition(items),
            ingredients=items,
            raw_ingredients_response=listed.raw_text,
        )

    async def resolve_ingredient(self, ingredient: Ingredient) -> IngredientNutrition:
        """Look up one ingredient, falling back to heuristic estimates."""
        record = await asyncio.to_thread(self.match_food, ingredient.name)
        if record is None:
            self.logger.debug("No food match for %s; estimating", ingredient.name)
            return IngredientNutrition(
                ingredient=ingredient,
                matched_food=None,
                quantity_in_grams=estimate_quantity(ingredient),
                nutrition=estimate_nutrition(ingredient),
            )

        grams = convert_to_grams(ingredient.quantity, ingredient.unit, record.food_name)
        if grams is None:
            grams = DEFAULT_GRAMS
            self.logger.warning(
                "Using default %sg for %s due to unit conversion failure",
                DEFAULT_GRAMS,
                ingredient.name,
            )
        return IngredientNutrition(
            ingredient=ingredient,
            matched_food=record.food_name,
            quantity_in_grams=grams,
            nutrition=record.per_100g.scaled(grams / 100),
        )

    def match_food(self, name: str) -> FoodRecord | None:
        """Find a food by full name, then last word, then any significant word."""
        food_name = name.lower().strip()
        if not food_name:
            return None
        record = self.repository.find_by_name(food_name)
        if record is not None:
            return record

        words = food_name.split()
        record = self.repository.find_by_name(words[-1])
        if record is not None:
            return record

        for word in words:
            if word in _STOP_WORDS:
                continue
            record = self.repository.find_containing(word)
            if record is not None:
                return record
        return None
