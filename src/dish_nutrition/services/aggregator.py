"""Sum per-ingredient nutrition into dish totals."""

from collections.abc import Sequence

from dish_nutrition.domain.nutrition import (
    IngredientNutrition,
    NutritionFacts,
    TotalNutrition,
    round_one,
)


def calculate_total_nutrition(items: Sequence[IngredientNutrition]) -> TotalNutrition:
    """Sum nutrition across ingredients and report how many contributed."""
    calories = protein = carbs = fat = fiber = sugar = 0.0
    with_nutrition = 0
    for item in items:
        facts = item.nutrition
        if facts is None:
            continue
        with_nutrition += 1
        calories += facts.calories or 0
        protein += facts.protein_g or 0
        carbs += facts.carbohydrates_g or 0
        fat += facts.fat_g or 0
        fiber += facts.fiber_g or 0
        sugar += facts.sugar_g or 0

    return TotalNutrition(
        facts=NutritionFacts(
            calories=round_one(calories),
            protein_g=round_one(protein),
            carbohydrates_g=round_one(carbs),
            fat_g=round_one(fat),
            fiber_g=round_one(fiber),
            sugar_g=round_one(sugar),
        ),
        ingredient_match_rate=f"{with_nutrition}/{len(items)}",
    )
