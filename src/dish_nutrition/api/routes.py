"""Nutrition API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from dish_nutrition.api.models import CalculateNutritionRequest, IngredientsRequest
from dish_nutrition.domain.ingredients import IngredientsResult
from dish_nutrition.services.serving import per_serving_from_dish, per_serving_from_food

if TYPE_CHECKING:
    from dish_nutrition.containers import AppContainer

router = APIRouter(prefix="/api", tags=["nutrition"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.post("/calculate-nutrition")
async def calculate_nutrition(
    body: CalculateNutritionRequest, request: Request
) -> dict[str, object]:
    """Estimate nutrition for 1 kg of a dish from AI-listed ingredients."""
    container = _container(request)
    result = await container.dish_nutrition_service.calculate(body.dish_name)
    payload = result.to_dict()
    if body.serving_size:
        payload["perServing"] = per_serving_from_dish(
            result.total_nutrition.facts, body.serving_size
        )
    return payload


@router.get("/nutrition")
def get_nutrition(
    request: Request,
    food_data: str | None = None,
    serving_size: float | None = Query(default=None, gt=0),
) -> dict[str, object]:
    """Return the stored per-100g row for a food."""
    container = _container(request)
    record = container.food_service.get_food(food_data)
    payload = dict(record.row)
    if serving_size:
        payload["perServing"] = per_serving_from_food(record, serving_size)
    return payload


@router.get("/suggestions")
def get_suggestions(
    request: Request, query: str | None = None
) -> list[dict[str, str]]:
    """Return food names starting with query, for autocomplete."""
    container = _container(request)
    names = container.food_service.suggestions(query)
    return [{"food_name": name} for name in names]


@router.get("/get-ingredients")
async def get_ingredients_by_query(
    request: Request,
    dish_name: str | None = Query(default=None, alias="dishName"),
) -> dict[str, object]:
    """Ask the AI model for a dish's ingredients."""
    container = _container(request)
    result = await container.ingredient_service.get_ingredients(dish_name)
    return _ingredients_payload(result)


@router.post("/get-ingredients")
async def post_ingredients(
    body: IngredientsRequest, request: Request
) -> dict[str, object]:
    """Ask the AI model for a dish's ingredients."""
    container = _container(request)
    result = await container.ingredient_service.get_ingredients(body.dish_name)
    return _ingredients_payload(result)


def _ingredients_payload(result: IngredientsResult) -> dict[str, object]:
    return {
        "dish": result.dish,
        "rawIngredients": result.raw_text,
        "ingredients": [ingredient.to_dict() for ingredient in result.ingredients],
    }
