"""Supabase implementation of the food nutrition table."""

from dataclasses import dataclass

from supabase import Client

from dish_nutrition.domain.nutrition import FoodRecord, NutritionFacts
from dish_nutrition.services.foods import FoodRepository

_KJ_PER_KCAL = 4.184


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed, read-only access to the food table."""

    client: Client
    table: str = "food_data"

    def find_by_name(self, name: str) -> FoodRecord | None:
        """Return the food whose name equals name, ignoring case."""
        response = (
            self.client.table(self.table)
            .select("*")
            .ilike("food_name", _escape_like(name))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food_row(response.data[0])

    def find_containing(self, fragment: str) -> FoodRecord | None:
        """Return the first food whose name contains fragment."""
        response = (
            self.client.table(self.table)
            .select("*")
            .ilike("food_name", f"%{_escape_like(fragment)}%")
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food_row(response.data[0])

    def suggest_names(self, prefix: str, limit: int) -> list[str]:
        """Return food names starting with prefix, ordered by name."""
        response = (
            self.client.table(self.table)
            .select("food_name")
            .ilike("food_name", f"{_escape_like(prefix)}%")
            .order("food_name")
            .limit(limit)
            .execute()
        )
        return [str(row["food_name"]) for row in response.data or []]


def parse_food_row(row: dict[str, object]) -> FoodRecord:
    """Parse a food table row into a domain model.

    The table has been loaded from more than one source, so several nutrients
    exist under two column names. Energy prefers kcal and falls back to kJ.
    """
    calories = _first_number(row, "energy_kcal", "calories")
    if calories is None:
        kilojoules = _first_number(row, "energy_kj")
        calories = kilojoules / _KJ_PER_KCAL if kilojoules is not None else 0.0
    return FoodRecord(
        food_name=str(row.get("food_name", "")),
        per_100g=NutritionFacts(
            calories=calories,
            protein_g=_first_number(row, "protein_g") or 0.0,
            carbohydrates_g=_first_number(row, "carbohydrates_g", "carb_g") or 0.0,
            fat_g=_first_number(row, "fat_g") or 0.0,
            fiber_g=_first_number(row, "fiber_g", "fibre_g") or 0.0,
            sugar_g=_first_number(row, "sugar_g", "freesugar_g") or 0.0,
        ),
        row=row,
    )


def _first_number(row: dict[str, object], *columns: str) -> float | None:
    for column in columns:
        value = row.get(column)
        if value is None or value == "":
            continue
        try:
            return float(value)
        except (TypeError, ValueError):
            continue
    return None


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so user text matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
