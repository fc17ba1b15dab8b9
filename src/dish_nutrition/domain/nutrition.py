"""Nutrition domain models."""

import math
from dataclasses import asdict, dataclass

from dish_nutrition.domain.ingredients import Ingredient


@dataclass(frozen=True)
class NutritionFacts:
    """Macronutrient values for some weight of food."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbohydrates_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float = 0.0
    sugar_g: float = 0.0

    def scaled(self, factor: float) -> "NutritionFacts":
        """Return the values multiplied by factor, rounded to one decimal."""
        return NutritionFacts(
            calories=round_one(self.calories * factor),
            protein_g=round_one(self.protein_g * factor),
            carbohydrates_g=round_one(self.carbohydrates_g * factor),
            fat_g=round_one(self.fat_g * factor),
            fiber_g=round_one(self.fiber_g * factor),
            sugar_g=round_one(self.sugar_g * factor),
        )

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class FoodRecord:
    """A food table row normalized to per-100g nutrition facts."""

    food_name: str
    per_100g: NutritionFacts
    row: dict[str, object]


@dataclass(frozen=True)
class IngredientNutrition:
    """An ingredient with its resolved weight and nutrition."""

    ingredient: Ingredient
    matched_food: str | None
    quantity_in_grams: float
    nutrition: NutritionFacts | None

    def to_dict(self) -> dict[str, object]:
        """Return the JSON shape used by the HTTP API."""
        return {
            "ingredient": self.ingredient.name,
            "quantity": self.ingredient.quantity,
            "unit": self.ingredient.unit,
            "rawDescription": self.ingredient.raw_description,
            "matched_food": self.matched_food,
            "quantityInGrams": self.quantity_in_grams,
            "nutrition": self.nutrition.to_dict() if self.nutrition else None,
        }


@dataclass(frozen=True)
class TotalNutrition:
    """Dish totals with the share of ingredients that had nutrition."""

    facts: NutritionFacts
    ingredient_match_rate: str

    def to_dict(self) -> dict[str, object]:
        return {
            **self.facts.to_dict(),
            "ingredient_match_rate": self.ingredient_match_rate,
        }


@dataclass(frozen=True)
class DishNutritionResult:
    """Nutrition estimate for a whole dish."""

    dish: str
    total_nutrition: TotalNutrition
    ingredients: list[IngredientNutrition]
    raw_ingredients_response: str

    def to_dict(self) -> dict[str, object]:
        """Return the JSON shape used by the HTTP API."""
        return {
            "dish": self.dish,
            "totalNutrition": self.total_nutrition.to_dict(),
            "ingredients": [item.to_dict() for item in self.ingredients],
            "rawIngredientsResponse": self.raw_ingredients_response,
        }


def round_one(value: float) -> float:
    """Round to one decimal place, halves rounding up."""
    return math.floor(value * 10 + 0.5) / 10
