"""Daily calorie and macro targets from body metrics."""

import math

from nutrition_logger.domain.errors import ValidationError
from nutrition_logger.domain.goals import (
    ActivityLevel,
    Gender,
    GoalType,
    NutritionGoals,
)
from nutrition_logger.services.macros import calories_from_grams, grams_from_calories

BMR_ADJUSTMENT = 0.9

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    "sedentary": 1.15,
    "lightly active": 1.3,
    "moderately active": 1.45,
    "very active": 1.6,
    "extra active": 1.75,
}

ACTIVITY_PROTEIN_PER_KG: dict[str, float] = {
    "sedentary": 1.0,
    "lightly active": 1.2,
    "moderately active": 1.4,
    "very active": 1.6,
    "extra active": 1.8,
}

GOAL_CALORIE_FACTORS: dict[str, float] = {
    "lose weight": 0.85,
    "gain weight": 1.08,
    "build muscle": 1.05,
    "maintain": 1.0,
}


def calculate_goals(  # noqa: PLR0913
    weight: float,
    height: float,
    age: float,
    gender: Gender,
    activity_level: ActivityLevel,
    goal: GoalType,
) -> NutritionGoals:
    """Compute daily targets using an adjusted Mifflin-St Jeor estimate."""
    values = (weight, height, age)
    if any(
        isinstance(value, bool)
        or not isinstance(value, int | float)
        or not math.isfinite(value)
        or value <= 0
        for value in values
    ):
        raise ValidationError("Weight, height and age must be positive numbers")

    base_bmr = 10 * weight + 6.25 * height - 5 * age
    base_bmr += 5 if gender == "male" else -161
    bmr = base_bmr * BMR_ADJUSTMENT
    tdee = bmr * ACTIVITY_MULTIPLIERS.get(activity_level, 1.3)
    calories = _round(tdee * GOAL_CALORIE_FACTORS.get(goal, 1.0))

    protein = _round(weight * _protein_per_kg(activity_level, goal))
    fat_ratio = 0.3 if goal == "lose weight" else 0.25
    fat = _round(grams_from_calories("fat", calories * fat_ratio))
    remaining = (
        calories
        - calories_from_grams("protein", protein)
        - calories_from_grams("fat", fat)
    )
    carbs = max(0, _round(grams_from_calories("carbs", remaining)))

    return NutritionGoals(
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        weight=weight,
        height=height,
        age=age,
        gender=gender,
        activity_level=activity_level,
        goal=goal,
    )


def _protein_per_kg(activity_level: ActivityLevel, goal: GoalType) -> float:
    base = ACTIVITY_PROTEIN_PER_KG.get(activity_level, 1.2)
    if goal == "lose weight":
        return max(base, 1.3)
    if goal == "gain weight":
        return max(base + 0.2, 1.6)
    if goal == "build muscle":
        return max(base + 0.4, 1.8)
    return base


def _round(value: float) -> int:
    return math.floor(value + 0.5)
