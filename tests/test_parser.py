"""Tests for the ingredient text parser."""

import pytest

from dish_nutrition.services.parser import (
    determine_unit,
    extract_quantity_and_unit,
    parse_ingredients,
)
from tests.conftest import PANEER_BUTTER_MASALA


def test_bulleted_bold_entries() -> None:
    ingredients = parse_ingredients(PANEER_BUTTER_MASALA)

    assert [(i.name, i.quantity, i.unit) for i in ingredients] == [
        ("Paneer", 200, "g"),
        ("Butter", 2, "tbsp"),
    ]
    assert ingredients[0].raw_description == "200g"


def test_bulleted_bold_with_star_bullets_and_notes() -> None:
    text = (
        "Here is what you need:\n"
        "* **Onion:** 2-3 medium, finely chopped\n"
        "* **Ginger:** 1/2 inch piece\n"
        "* **Salt:** to taste\n"
        "* **Water:** as needed\n"
    )

    ingredients = parse_ingredients(text)

    assert [(i.name, i.quantity, i.unit) for i in ingredients] == [
        ("Onion", 2.5, "medium"),
        ("Ginger", 0.5, "inch"),
        ("Salt", None, "to taste"),
        ("Water", None, "as needed"),
    ]


def test_double_plus_entries() -> None:
    text = "++Tomato:++ 3 medium\n++Cumin:++ 1 teaspoon"

    ingredients = parse_ingredients(text)

    assert [(i.name, i.quantity, i.unit) for i in ingredients] == [
        ("Tomato", 3, "medium"),
        ("Cumin", 1, "tsp"),
    ]


def test_bold_only_entries() -> None:
    text = "**Rice:** 2 cups\n**Ghee:** 1 tbsp"

    ingredients = parse_ingredients(text)

    assert [(i.name, i.quantity, i.unit) for i in ingredients] == [
        ("Rice", 2, "cup"),
        ("Ghee", 1, "tbsp"),
    ]


def test_line_heuristic_fallback() -> None:
    text = (
        "Ingredients for dal\n"
        "\n"
        "Toor dal: 200 grams\n"
        "Onion - 2 medium\n"
        "Salt\n"
        "**Oil**: 3 tbsp\n"
    )

    ingredients = parse_ingredients(text)

    assert [(i.name, i.quantity, i.unit) for i in ingredients] == [
        ("Toor dal", 200, "g"),
        ("Onion", 2, "medium"),
        ("Oil", 3, "tbsp"),
    ]


def test_line_heuristic_handles_mangled_dash() -> None:
    ingredients = parse_ingredients("Green chillies â€“ 4 small")

    assert len(ingredients) == 1
    assert ingredients[0].name == "Green chillies"
    assert ingredients[0].quantity == 4
    assert ingredients[0].unit == "small"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "I'm sorry, I can't help with that.",
        "A rich, creamy curry best served hot",
    ],
)
def test_unrecognized_text_yields_empty_list(text: str) -> None:
    assert parse_ingredients(text) == []


def test_parsing_is_repeatable() -> None:
    text = "+ **Onion:** 2 large\n+ **Garlic:** 4 cloves\n+ **Salt:** to taste"

    assert parse_ingredients(text) == parse_ingredients(text)


@pytest.mark.parametrize(("low", "high"), [(2, 3), (1, 4), (10, 25)])
def test_ranges_collapse_to_mean(low: int, high: int) -> None:
    quantity, _ = extract_quantity_and_unit(f"{low}-{high} pieces")

    assert quantity == (low + high) / 2


@pytest.mark.parametrize(("numerator", "denominator"), [(1, 2), (3, 4), (1, 3)])
def test_fractions_collapse_to_quotient(numerator: int, denominator: int) -> None:
    quantity, _ = extract_quantity_and_unit(f"{numerator}/{denominator} cup")

    assert quantity == numerator / denominator


@pytest.mark.parametrize(
    ("description", "quantity", "unit"),
    [("1-1/2 cups", 0.75, "cup"), ("2-3/4 tsp", 1.375, "tsp")],
)
def test_ranges_with_fractional_bound(
    description: str, quantity: float, unit: str
) -> None:
    assert extract_quantity_and_unit(description) == (quantity, unit)


def test_fractional_range_in_ai_reply_does_not_raise() -> None:
    ingredients = parse_ingredients("+ **Flour:** 1-1/2 cups\n+ **Salt:** to taste")

    assert [(i.name, i.quantity, i.unit) for i in ingredients] == [
        ("Flour", 0.75, "cup"),
        ("Salt", None, "to taste"),
    ]


def test_line_heuristic_takes_first_integer_on_line() -> None:
    ingredients = parse_ingredients("Step 1: 200 g paneer")

    assert ingredients[0].name == "Step 1"
    assert ingredients[0].quantity == 1
    assert ingredients[0].unit == "g"


def test_decimal_quantity() -> None:
    assert extract_quantity_and_unit("1.5 cups") == (1.5, "cup")


def test_missing_number_gives_no_quantity() -> None:
    assert extract_quantity_and_unit("a handful") == (None, "")


@pytest.mark.parametrize(
    ("description", "unit"),
    [
        ("2 tbsp", "tbsp"),
        ("2 tablespoons", "tbsp"),
        ("2 tbsp (30g)", "tbsp"),
        ("1 teaspoon", "tsp"),
        ("500 g", "g"),
        ("500 g paneer from a 1 kg block", "g"),
        ("250 grams", "g"),
        ("1 kg", "kg"),
        ("1kg", "kg"),
        ("8 oz", "oz"),
        ("200 ml", "ml"),
        ("4 cloves", "clove"),
        ("1 cup", "cup"),
        ("2 Large", "large"),
        ("1 small", "small"),
        ("1 inch piece", "inch"),
        ("3", ""),
    ],
)
def test_determine_unit(description: str, unit: str) -> None:
    assert determine_unit(description) == unit
