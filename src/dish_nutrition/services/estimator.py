"""Heuristic weight and nutrition estimates for unmatched ingredients."""

from dish_nutrition.domain.ingredients import Ingredient
from dish_nutrition.domain.nutrition import NutritionFacts

DEFAULT_GRAMS = 50.0

# (keywords, grams per unit of quantity); first match wins.
_GRAMS_PER_QUANTITY: tuple[tuple[tuple[str, ...], float], ...] = (
    (("spice", "salt", "pepper", "powder", "masala"), 5),
    (("oil", "sauce", "vinegar"), 15),
    (("onion", "tomato", "vegetable", "fruit"), 100),
    (("rice", "flour", "grain"), 180),
    (("cheese", "paneer", "tofu"), 200),
)
_GENERIC_GRAMS_PER_QUANTITY = 50.0

GENERIC_PROFILE = NutritionFacts(
    calories=50,
    protein_g=2,
    carbohydrates_g=5,
    fat_g=2,
    fiber_g=1,
    sugar_g=1,
)

# Per-100g profiles; first match replaces the generic profile.
_PROFILES: tuple[tuple[tuple[str, ...], NutritionFacts], ...] = (
    (
        ("oil", "butter", "ghee"),
        NutritionFacts(calories=900, fat_g=100),
    ),
    (
        ("spice", "masala", "powder"),
        NutritionFacts(
            calories=30, protein_g=1, carbohydrates_g=5, fat_g=1, fiber_g=3
        ),
    ),
    (
        ("vegetable", "onion", "tomato"),
        NutritionFacts(
            calories=40,
            protein_g=1,
            carbohydrates_g=8,
            fat_g=0.5,
            fiber_g=2,
            sugar_g=3,
        ),
    ),
    (
        ("paneer", "cheese"),
        NutritionFacts(
            calories=300, protein_g=20, carbohydrates_g=4, fat_g=25, sugar_g=1
        ),
    ),
    (
        ("rice", "grain", "flour"),
        NutritionFacts(
            calories=350, protein_g=7, carbohydrates_g=80, fat_g=1, fiber_g=2
        ),
    ),
    (
        ("sugar", "honey", "jaggery"),
        NutritionFacts(calories=400, carbohydrates_g=100, sugar_g=100),
    ),
)


def estimate_quantity(ingredient: Ingredient) -> float:
    """Guess the ingredient weight in grams from its name and quantity."""
    if not ingredient.quantity:
        return DEFAULT_GRAMS
    name = ingredient.name.lower()
    for keywords, grams in _GRAMS_PER_QUANTITY:
        if _mentions(name, keywords):
            return ingredient.quantity * grams
    return ingredient.quantity * _GENERIC_GRAMS_PER_QUANTITY


def profile_for(name: str) -> NutritionFacts:
    """Return the per-100g profile for an ingredient name."""
    lowered = name.lower()
    for keywords, profile in _PROFILES:
        if _mentions(lowered, keywords):
            return profile
    return GENERIC_PROFILE


def estimate_nutrition(ingredient: Ingredient) -> NutritionFacts:
    """Estimate nutrition for the guessed weight of an ingredient."""
    grams = estimate_quantity(ingredient)
    return profile_for(ingredient.name).scaled(grams / 100)


def _mentions(name: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in name for keyword in keywords)
