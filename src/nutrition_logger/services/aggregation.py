"""Nutrition totals for dishes, meals and days."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from nutrition_logger.domain.nutrition import Dish, Meal, NutritionInfo

ZERO_NUTRITION = NutritionInfo(calories=0.0, protein=0.0, carbs=0.0, fat=0.0)


@dataclass(frozen=True)
class DaySummary:
    """Meals and totals for a single day."""

    day: date
    meals: list[Meal]
    meal_count: int
    totals: NutritionInfo


def aggregate(nutritions: Iterable[NutritionInfo]) -> NutritionInfo:
    """Sum nutrition values, treating missing macros as zero."""
    calories = protein = carbs = fat = 0.0
    for nutrition in nutritions:
        calories += nutrition.calories
        protein += nutrition.protein or 0.0
        carbs += nutrition.carbs or 0.0
        fat += nutrition.fat or 0.0
    return NutritionInfo(calories=calories, protein=protein, carbs=carbs, fat=fat)


def dish_nutrition(dish: Dish) -> NutritionInfo:
    """Total nutrition of a dish's ingredients."""
    return aggregate(item.nutrition for item in dish.ingredients)


def meal_nutrition(meal: Meal) -> NutritionInfo:
    """Total nutrition of a meal's loose ingredients and dishes."""
    loose = aggregate(item.nutrition for item in meal.ingredients)
    return aggregate([loose, *(dish_nutrition(dish) for dish in meal.dishes)])


def day_nutrition(meals: Iterable[Meal]) -> NutritionInfo:
    """Total nutrition across meals."""
    return aggregate(meal_nutrition(meal) for meal in meals)


def summarize_day(meals: Iterable[Meal], day: date) -> DaySummary:
    """Summarize the meals logged on a given day."""
    day_meals = [meal for meal in meals if meal.day == day]
    return DaySummary(
        day=day,
        meals=day_meals,
        meal_count=len(day_meals),
        totals=day_nutrition(day_meals),
    )


def summarize_last_days(
    meals: list[Meal], today: date, days: int = 7
) -> list[DaySummary]:
    """Summaries for ``days`` consecutive days ending today, newest first."""
    return [
        summarize_day(meals, today - timedelta(days=offset)) for offset in range(days)
    ]


def summarize_all_days(meals: list[Meal]) -> list[DaySummary]:
    """Summaries for every day with a logged meal, newest first."""
    days = sorted({meal.day for meal in meals}, reverse=True)
    return [summarize_day(meals, day) for day in days]


def round_for_display(nutrition: NutritionInfo, digits: int = 2) -> NutritionInfo:
    """Round totals for presentation only."""
    return NutritionInfo(
        calories=round(nutrition.calories, digits),
        protein=round(nutrition.protein or 0.0, digits),
        carbs=round(nutrition.carbs or 0.0, digits),
        fat=round(nutrition.fat or 0.0, digits),
    )
