"""Services for looking up foods in the nutrition table."""

from dataclasses import dataclass
from typing import Protocol

from dish_nutrition.domain.nutrition import FoodRecord
from dish_nutrition.errors import NotFoundError, ValidationError


class FoodRepository(Protocol):
    """Read-only interface to the per-100g food nutrition table."""

    def find_by_name(self, name: str) -> FoodRecord | None:
        """Return the food whose name equals name, ignoring case."""

    def find_containing(self, fragment: str) -> FoodRecord | None:
        """Return the first food whose name contains fragment, ignoring case."""

    def suggest_names(self, prefix: str, limit: int) -> list[str]:
        """Return up to limit food names starting with prefix, ordered by name."""


@dataclass
class FoodService:
    """Application service for direct food lookups and autocomplete."""

    repository: FoodRepository
    suggestion_limit: int = 10

    def get_food(self, name: str | None) -> FoodRecord:
        """Return a food by exact name or raise NotFoundError."""
        if not name or not name.strip():
            raise ValidationError("food_data is required")
        record = self.repository.find_by_name(name.strip())
        if record is None:
            raise NotFoundError("food_data not found")
        return record

    def suggestions(self, query: str | None) -> list[str]:
        """Return food names for autocomplete."""
        if not query or not query.strip():
            raise ValidationError("Query parameter is required")
        return self.repository.suggest_names(query.strip(), self.suggestion_limit)
