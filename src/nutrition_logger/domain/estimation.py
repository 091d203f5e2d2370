"""Request and response models for external nutrition estimation."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class IngredientEstimateRequest:
    """Nutrition lookup for a quantity of a named ingredient."""

    name: str
    unit: str
    quantity: float


@dataclass(frozen=True)
class DishEstimateRequest:
    """Nutrition lookup for a number of servings of a dish."""

    name: str
    servings: float


@dataclass(frozen=True)
class LabelImageRequest:
    """Nutrition extraction from a base64-encoded label photo."""

    image_base64: str


@dataclass(frozen=True)
class MealPhotoRequest:
    """Calorie estimate for a base64-encoded photo of a meal."""

    image_base64: str


class EstimatedNutrition(BaseModel):
    """Nutrition values returned by the estimation service."""

    model_config = ConfigDict(allow_inf_nan=False)

    calories: float = Field(ge=0.0)
    protein: float | None = Field(default=None, ge=0.0)
    carbs: float | None = Field(default=None, ge=0.0)
    fat: float | None = Field(default=None, ge=0.0)
