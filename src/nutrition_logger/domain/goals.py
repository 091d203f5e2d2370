"""Domain models for daily nutrition goals."""

from dataclasses import dataclass
from typing import Literal

ActivityLevel = Literal[
    "sedentary",
    "lightly active",
    "moderately active",
    "very active",
    "extra active",
]
GoalType = Literal["lose weight", "gain weight", "maintain", "build muscle"]
Gender = Literal["male", "female"]


@dataclass(frozen=True)
class NutritionGoals:
    """Daily calorie and macro targets with the inputs they came from."""

    calories: int
    protein: int
    carbs: int
    fat: int
    weight: float
    height: float
    age: float
    gender: Gender
    activity_level: ActivityLevel
    goal: GoalType
