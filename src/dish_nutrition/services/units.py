"""Convert ingredient quantities to grams."""

from collections.abc import Mapping
from types import MappingProxyType

GENERIC_GRAMS_PER_UNIT: Mapping[str, float] = MappingProxyType(
    {
        "g": 1,
        "gram": 1,
        "kg": 1000,
        "kilogram": 1000,
        "oz": 28.35,
        "ounce": 28.35,
        "lb": 453.592,
        "pound": 453.592,
        "tbsp": 15,
        "tablespoon": 15,
        "tsp": 5,
        "teaspoon": 5,
        "cup": 240,
        "ml": 1,
        "milliliter": 1,
        "l": 1000,
        "liter": 1000,
        "piece": 50,
        "pc": 50,
        "pinch": 0.5,
        "dash": 0.5,
    }
)

# Keys are matched as substrings of the food name, in this order.
FOOD_GRAMS_PER_UNIT: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        "onion": {"medium": 110, "large": 150, "small": 70, "clove": 5, "whole": 110},
        "tomato": {"medium": 123, "large": 182, "small": 91, "whole": 123},
        "potato": {"medium": 213, "large": 295, "small": 170, "whole": 213},
        "carrot": {"medium": 61, "large": 72, "small": 50, "whole": 61},
        "garlic": {"clove": 5, "head": 50, "bulb": 50},
        "ginger": {"inch": 15, "piece": 30},
        "salt": {
            "tbsp": 17,
            "tsp": 5.7,
            "tablespoon": 17,
            "teaspoon": 5.7,
            "pinch": 0.5,
        },
        "pepper": {
            "tbsp": 7,
            "tsp": 2.3,
            "tablespoon": 7,
            "teaspoon": 2.3,
            "pinch": 0.5,
        },
        "cumin": {
            "tbsp": 7.5,
            "tsp": 2.5,
            "tablespoon": 7.5,
            "teaspoon": 2.5,
            "pinch": 0.5,
        },
        "turmeric": {
            "tbsp": 7,
            "tsp": 2.3,
            "tablespoon": 7,
            "teaspoon": 2.3,
            "pinch": 0.5,
        },
        "cheese": {"cup": 250, "slice": 30, "tablespoon": 15},
        "paneer": {"cup": 200, "block": 200, "piece": 50},
        "milk": {"cup": 245, "tablespoon": 15},
        "rice": {"cup": 185},
        "flour": {"cup": 125},
        "butter": {
            "tbsp": 13.5,
            "tsp": 4.7,
            "tablespoon": 13.5,
            "teaspoon": 4.7,
            "stick": 113,
        },
        "oil": {"tbsp": 13.5, "tsp": 4.5, "tablespoon": 13.5, "teaspoon": 4.5},
    }
)

SIZE_GRAMS: Mapping[str, float] = MappingProxyType(
    {
        "medium": 100,
        "large": 150,
        "small": 70,
        "handful": 30,
        "bunch": 100,
    }
)


def normalize_unit(unit: str | None) -> str:
    """Lowercase a unit and drop one trailing plural 's'."""
    if not unit:
        return ""
    lowered = unit.lower()
    return lowered[:-1] if lowered.endswith("s") else lowered


def convert_to_grams(
    quantity: float | None, unit: str | None, food_name: str
) -> float | None:
    """Return the weight in grams, or None when it cannot be determined.

    Food-specific rates are consulted before the generic table, so a
    tablespoon of oil weighs less than a tablespoon of water.
    """
    if quantity is None:
        return None

    normalized = normalize_unit(unit)
    rate = food_rate(food_name, normalized)
    if rate is None:
        rate = GENERIC_GRAMS_PER_UNIT.get(normalized)
    if rate is None:
        rate = SIZE_GRAMS.get(normalized)
    if rate is None:
        return None
    return quantity * rate


def food_rate(food_name: str, unit: str) -> float | None:
    """Return grams per unit for the first keyword in food_name defining unit."""
    lowered = food_name.lower()
    for keyword, rates in FOOD_GRAMS_PER_UNIT.items():
        if keyword in lowered and unit in rates:
            return rates[unit]
    return None
