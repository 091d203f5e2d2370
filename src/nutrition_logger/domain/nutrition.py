"""Domain models for ingredients, dishes and meals."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class NutritionInfo:
    """Calories and optional macronutrients in grams."""

    calories: float
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None


@dataclass(frozen=True)
class Ingredient:
    """Catalog ingredient with nutrition per the unit's base quantity."""

    id: str
    name: str
    unit: str
    nutrition: NutritionInfo


@dataclass(frozen=True)
class MealIngredient:
    """Ingredient as used in a dish or meal, nutrition scaled to quantity."""

    id: str
    name: str
    unit: str
    quantity: float
    nutrition: NutritionInfo
    ingredient_id: str | None = None


@dataclass
class Dish:
    """Named group of meal ingredients."""

    id: str
    name: str
    ingredients: list[MealIngredient] = field(default_factory=list)

    @property
    def total_calories(self) -> float:
        return sum(item.nutrition.calories for item in self.ingredients)


@dataclass
class Meal:
    """A logged meal with loose ingredients and dishes."""

    id: str
    name: str
    day: date
    ingredients: list[MealIngredient] = field(default_factory=list)
    dishes: list[Dish] = field(default_factory=list)
    image_uri: str | None = None

    @property
    def total_calories(self) -> float:
        loose = sum(item.nutrition.calories for item in self.ingredients)
        return loose + sum(dish.total_calories for dish in self.dishes)
