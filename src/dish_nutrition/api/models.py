"""Request models for the HTTP API."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CalculateNutritionRequest(BaseModel):
    """Body of POST /api/calculate-nutrition."""

    model_config = ConfigDict(populate_by_name=True)

    dish_name: str | None = Field(default=None, alias="dishName")
    serving_size: float | None = Field(default=None, alias="servingSize", gt=0)


class IngredientsRequest(BaseModel):
    """Body of POST /api/get-ingredients."""

    dish_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("dishName", "sabziName", "dish_name"),
    )
