"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from dish_nutrition.adapters.supabase_food_repository import parse_food_row
from dish_nutrition.config import Settings
from dish_nutrition.containers import AppContainer
from dish_nutrition.domain.nutrition import FoodRecord
from dish_nutrition.services.dish_nutrition import DishNutritionService
from dish_nutrition.services.foods import FoodRepository, FoodService
from dish_nutrition.services.ingredients import AIClient, IngredientService

PANEER_BUTTER_MASALA = "+ **Paneer:** 200g\n+ **Butter:** 2 tbsp"


def food_row(name: str, **values: float) -> dict[str, object]:
    row: dict[str, object] = {
        "food_name": name,
        "energy_kcal": 0,
        "protein_g": 0,
        "carb_g": 0,
        "fat_g": 0,
        "fibre_g": 0,
        "sugar_g": 0,
    }
    row.update(values)
    return row


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food table for tests."""

    rows: list[dict[str, object]] = field(default_factory=list)
    name_queries: list[str] = field(default_factory=list)
    contains_queries: list[str] = field(default_factory=list)

    def find_by_name(self, name: str) -> FoodRecord | None:
        self.name_queries.append(name)
        for row in self.rows:
            if str(row["food_name"]).lower() == name.lower():
                return parse_food_row(row)
        return None

    def find_containing(self, fragment: str) -> FoodRecord | None:
        self.contains_queries.append(fragment)
        for row in self.rows:
            if fragment.lower() in str(row["food_name"]).lower():
                return parse_food_row(row)
        return None

    def suggest_names(self, prefix: str, limit: int) -> list[str]:
        names = sorted(
            str(row["food_name"])
            for row in self.rows
            if str(row["food_name"]).lower().startswith(prefix.lower())
        )
        return names[:limit]


@dataclass
class FakeAIClient(AIClient):
    """Fake AI client returning a fixed reply and recording prompts."""

    reply: str = PANEER_BUTTER_MASALA
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        gemini_api_key="gemini-key",
        environment="test",
    )


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository(
        rows=[
            food_row(
                "Paneer",
                energy_kcal=265,
                protein_g=18.3,
                carb_g=1.2,
                fat_g=20.8,
                sugar_g=1.2,
            ),
            food_row("Butter", energy_kcal=717, protein_g=0.9, fat_g=81.1),
            food_row(
                "Onion",
                energy_kcal=40,
                protein_g=1.1,
                carb_g=9.3,
                fat_g=0.1,
                fibre_g=1.7,
                sugar_g=4.2,
            ),
            food_row("Basmati Rice", energy_kcal=360, protein_g=7.1, carb_g=79),
        ]
    )


@pytest.fixture
def ai_client() -> FakeAIClient:
    return FakeAIClient()


@pytest.fixture
def container(
    settings: Settings,
    food_repository: InMemoryFoodRepository,
    ai_client: FakeAIClient,
) -> AppContainer:
    ingredient_service = IngredientService(client=ai_client)
    dish_nutrition_service = DishNutritionService(
        ingredient_service=ingredient_service,
        repository=food_repository,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        food_service=FoodService(food_repository),
        ingredient_service=ingredient_service,
        dish_nutrition_service=dish_nutrition_service,
        close_resources=close_resources,
    )
