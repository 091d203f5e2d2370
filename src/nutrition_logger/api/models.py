"""Request bodies for the HTTP API."""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from nutrition_logger.domain.nutrition import MealIngredient, NutritionInfo


class NutritionBody(BaseModel):
    """Nutrition values in a request."""

    calories: float = Field(ge=0.0)
    protein: float | None = Field(default=None, ge=0.0)
    carbs: float | None = Field(default=None, ge=0.0)
    fat: float | None = Field(default=None, ge=0.0)

    def to_domain(self) -> NutritionInfo:
        return NutritionInfo(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
        )


class IngredientEstimateBody(BaseModel):
    """Ingredient estimation request."""

    name: str = Field(min_length=1)
    unit: str = Field(min_length=1)
    quantity: float = Field(gt=0.0)


class DishEstimateBody(BaseModel):
    """Dish estimation request."""

    name: str = Field(min_length=1)
    servings: float = Field(default=1.0, gt=0.0)


class LabelImageBody(BaseModel):
    """Nutrition label image request."""

    image_base64: str = Field(min_length=1)


class MealPhotoBody(BaseModel):
    """Meal photo to estimate and log."""

    image_base64: str = Field(min_length=1)
    day: date
    image_uri: str | None = None
    name: str = Field(default="Photo meal", min_length=1)


class CustomIngredientBody(BaseModel):
    """Catalog ingredient to estimate and save."""

    name: str = Field(min_length=1)
    unit: str = Field(min_length=1)


class ScaleQuantityBody(BaseModel):
    """Quantity edit for a single ingredient."""

    quantity: float
    nutrition: NutritionBody
    new_quantity: float
    candidate: NutritionBody | None = None
    epsilon: float = Field(default=0.1, ge=0.0)


class MealIngredientBody(BaseModel):
    """Meal ingredient in a request."""

    id: str
    name: str
    unit: str
    quantity: float
    nutrition: NutritionBody
    ingredient_id: str | None = None

    def to_domain(self) -> MealIngredient:
        return MealIngredient(
            id=self.id,
            name=self.name,
            unit=self.unit,
            quantity=self.quantity,
            nutrition=self.nutrition.to_domain(),
            ingredient_id=self.ingredient_id,
        )


class ServingsBody(BaseModel):
    """Servings rescale of an original ingredient snapshot."""

    ingredients: list[MealIngredientBody]
    multiplier: float


class GoalsBody(BaseModel):
    """Body metrics for goal calculation."""

    weight: float
    height: float
    age: float
    gender: Literal["male", "female"]
    activity_level: Literal[
        "sedentary",
        "lightly active",
        "moderately active",
        "very active",
        "extra active",
    ]
    goal: Literal["lose weight", "gain weight", "maintain", "build muscle"]
