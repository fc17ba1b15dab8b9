"""Serving-size rescaling for food and dish nutrition."""

import math

from dish_nutrition.domain.nutrition import FoodRecord, NutritionFacts, round_one

DEFAULT_SERVING_SIZE = 150
DEFAULT_SERVING_NAME = "katori"
# Dish estimates describe the ingredients for 1 kg of the cooked dish.
DISH_BATCH_GRAMS = 1000
FOOD_BASIS_GRAMS = 100


def convert_nutrition_by_weight(
    facts: NutritionFacts, from_grams: float, to_grams: float
) -> NutritionFacts:
    """Rescale facts from one weight to another; calories become whole."""
    if from_grams == 0:
        return facts
    scaled = facts.scaled(to_grams / from_grams)
    unrounded_calories = facts.calories * to_grams / from_grams
    return NutritionFacts(
        calories=float(math.floor(unrounded_calories + 0.5)),
        protein_g=scaled.protein_g,
        carbohydrates_g=scaled.carbohydrates_g,
        fat_g=scaled.fat_g,
        fiber_g=scaled.fiber_g,
        sugar_g=scaled.sugar_g,
    )


def serving_size_text(grams: float, name: str = DEFAULT_SERVING_NAME) -> str:
    """Describe a serving, e.g. '150g (1 katori)'."""
    return f"{_format_grams(grams)}g (1 {name})"


def per_serving_from_food(
    record: FoodRecord, grams: float = DEFAULT_SERVING_SIZE
) -> dict[str, object]:
    """Per-serving nutrition for a food stored per 100 g."""
    facts = convert_nutrition_by_weight(record.per_100g, FOOD_BASIS_GRAMS, grams)
    return _serving_payload(facts, grams)


def per_serving_from_dish(
    totals: NutritionFacts, grams: float = DEFAULT_SERVING_SIZE
) -> dict[str, object]:
    """Per-serving nutrition for a dish estimated per 1 kg batch."""
    facts = convert_nutrition_by_weight(totals, DISH_BATCH_GRAMS, grams)
    return _serving_payload(facts, grams)


def _serving_payload(facts: NutritionFacts, grams: float) -> dict[str, object]:
    return {
        **facts.to_dict(),
        "serving_size_g": grams,
        "serving_size": serving_size_text(grams),
    }


def _format_grams(grams: float) -> str:
    rounded = round_one(grams)
    if rounded == int(rounded):
        return str(int(rounded))
    return str(rounded)
