"""Ingredient domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Ingredient:
    """An ingredient line extracted from AI-generated text."""

    name: str
    quantity: float | None
    unit: str
    raw_description: str

    def to_dict(self) -> dict[str, object]:
        """Return the JSON shape used by the HTTP API."""
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "rawDescription": self.raw_description,
        }


@dataclass(frozen=True)
class IngredientsResult:
    """Raw AI text and the ingredients parsed from it."""

    dish: str
    raw_text: str
    ingredients: list[Ingredient]
