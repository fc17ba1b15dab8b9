"""Parse ingredient lists out of free-form AI responses.

The model is asked to return one ingredient per line, but the markup it uses
varies between calls. Each strategy below recognizes one layout and the
first strategy that finds anything wins, so the parser degrades to an empty
list rather than failing on text it does not understand.
"""

import logging
import re
from collections.abc import Callable, Sequence

from dish_nutrition.domain.ingredients import Ingredient

_logger = logging.getLogger(__name__)

_BULLETED_BOLD = re.compile(
    r"[+*]\s+\*\*([^:]+):\*\*\s+(.*?)(?=\n[+*]|\n*\Z)", re.S
)
_DOUBLE_PLUS = re.compile(r"\+\+([^:]+):\+\+\s+(.*?)(?=\n\+\+|\Z)", re.S)
_BOLD_ONLY = re.compile(r"\*\*([^:]+):\*\*\s+(.*?)(?=\n\*\*|\Z)", re.S)

# One combined pattern so "2-3" and "1/2" are single tokens.
_QUANTITY = re.compile(r"\d+\.\d+|\d+(?:-\d+)?(?:/\d+)?")
_FIRST_INTEGER = re.compile(r"\d+")
# "â€“" is how an en dash shows up after a bad UTF-8 round trip.
_LINE_DELIMITER = re.compile(r":|â€“|–|-")
_GRAM_AMOUNT = re.compile(r"\b\d+\s*g\b")
_GRAM_SUFFIX = re.compile(r"\d+g")

_UNIT_KEYWORDS: tuple[str, ...] = (
    "kg",
    "oz",
    "ml",
    "clove",
    "cup",
    "medium",
    "large",
    "small",
    "inch",
)

TO_TASTE = "to taste"
AS_NEEDED = "as needed"

Strategy = Callable[[str], list[Ingredient]]


def parse_ingredients(
    text: str, logger: logging.Logger | None = None
) -> list[Ingredient]:
    """Return the ingredients found in text, in order of appearance."""
    log = logger or _logger
    if not text:
        return []
    for strategy in STRATEGIES:
        ingredients = strategy(text)
        if ingredients:
            log.debug(
                "Parsed %s ingredients with %s", len(ingredients), strategy.__name__
            )
            return ingredients
    log.debug("No ingredient pattern recognized in AI response")
    return []


def extract_quantity_and_unit(description: str) -> tuple[float | None, str]:
    """Extract a numeric quantity and a unit token from a quantity phrase."""
    lowered = description.lower()
    if TO_TASTE in lowered:
        return None, TO_TASTE
    if AS_NEEDED in lowered:
        return None, AS_NEEDED

    match = _QUANTITY.search(description)
    if match is None:
        return None, ""
    return _to_number(match.group(0)), determine_unit(description)


def determine_unit(description: str) -> str:
    """Return the first unit keyword found in description, or ''."""
    lowered = description.lower()
    if "tablespoon" in lowered or "tbsp" in lowered:
        return "tbsp"
    if "teaspoon" in lowered or "tsp" in lowered:
        return "tsp"
    if (
        _GRAM_AMOUNT.search(lowered)
        or "gram" in lowered
        or (_GRAM_SUFFIX.search(lowered) and "kg" not in lowered)
    ):
        return "g"
    for unit in _UNIT_KEYWORDS:
        if unit in lowered:
            return unit
    return ""


def _to_number(token: str) -> float:
    if "-" in token:
        low, high = token.split("-", 1)
        return (_fraction(low) + _fraction(high)) / 2
    return _fraction(token)


def _fraction(token: str) -> float:
    if "/" in token:
        numerator, denominator = token.split("/", 1)
        # A zero denominator has no amount; keep the numerator.
        if float(denominator) == 0:
            return float(numerator)
        return float(numerator) / float(denominator)
    return float(token)


def _from_matches(pattern: re.Pattern[str], text: str) -> list[Ingredient]:
    ingredients = []
    for match in pattern.finditer(text):
        name = match.group(1).strip()
        description = match.group(2).strip()
        quantity, unit = extract_quantity_and_unit(description)
        ingredients.append(
            Ingredient(
                name=name,
                quantity=quantity,
                unit=unit,
                raw_description=description,
            )
        )
    return ingredients


def bulleted_bold(text: str) -> list[Ingredient]:
    """Match `+ **Name:** amount` and `* **Name:** amount` bullets."""
    return _from_matches(_BULLETED_BOLD, text)


def double_plus(text: str) -> list[Ingredient]:
    """Match `++Name:++ amount` entries."""
    return _from_matches(_DOUBLE_PLUS, text)


def bold_only(text: str) -> list[Ingredient]:
    """Match `**Name:** amount` entries without a bullet."""
    return _from_matches(_BOLD_ONLY, text)


def line_heuristic(text: str) -> list[Ingredient]:
    """Treat `name: amount` or `name - amount` lines with a digit as ingredients."""
    ingredients = []
    for line in text.split("\n"):
        if not line.strip() or "ingredients" in line.lower():
            continue
        # Quantity is the first integer anywhere on the line, name included.
        number = _FIRST_INTEGER.search(line)
        if number is None:
            continue
        parts = _LINE_DELIMITER.split(line)
        if len(parts) < 2:
            continue
        name = parts[0].replace("*", "").strip()
        description = ":".join(parts[1:]).strip()
        quantity = float(number.group(0))
        ingredients.append(
            Ingredient(
                name=name,
                quantity=quantity or None,
                unit=determine_unit(description),
                raw_description=description,
            )
        )
    return ingredients


STRATEGIES: Sequence[Strategy] = (
    bulleted_bold,
    double_plus,
    bold_only,
    line_heuristic,
)
