"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from dish_nutrition.adapters.gemini_client import HttpxGeminiClient
from dish_nutrition.adapters.openai_text_client import OpenAITextClient
from dish_nutrition.adapters.supabase_food_repository import SupabaseFoodRepository
from dish_nutrition.config import Settings
from dish_nutrition.services.dish_nutrition import DishNutritionService
from dish_nutrition.services.foods import FoodService
from dish_nutrition.services.ingredients import IngredientService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_service: FoodService
    ingredient_service: IngredientService
    dish_nutrition_service: DishNutritionService
    close_resources: Callable[[], Awaitable[None]]


def build_ai_client(settings: Settings) -> HttpxGeminiClient | OpenAITextClient:
    """Create the AI client selected by settings.ai_provider."""
    provider = settings.ai_provider.strip().lower()
    if provider == "gemini":
        if not settings.gemini_api_key:
            raise ValueError("GEMINI_API_KEY is required when AI_PROVIDER=gemini")
        return HttpxGeminiClient.create(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
        )
    if provider == "openai":
        if not settings.openai_api_key:
            raise ValueError("OPENAI_API_KEY is required when AI_PROVIDER=openai")
        return OpenAITextClient.create(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
        )
    raise ValueError(f"Unsupported AI provider: {settings.ai_provider}")


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_repository = SupabaseFoodRepository(
        supabase_client, table=resolved_settings.food_table
    )
    ai_client = build_ai_client(resolved_settings)
    food_service = FoodService(
        repository=food_repository,
        suggestion_limit=resolved_settings.suggestion_limit,
    )
    ingredient_service = IngredientService(client=ai_client)
    dish_nutrition_service = DishNutritionService(
        ingredient_service=ingredient_service,
        repository=food_repository,
    )

    async def close_resources() -> None:
        await ai_client.close()

    return AppContainer(
        settings=resolved_settings,
        food_service=food_service,
        ingredient_service=ingredient_service,
        dish_nutrition_service=dish_nutrition_service,
        close_resources=close_resources,
    )
