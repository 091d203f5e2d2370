"""Calorie and macronutrient gram conversions."""

from types import MappingProxyType
from typing import Literal

MacroKind = Literal["protein", "carbs", "fat"]

KCAL_PER_GRAM: MappingProxyType[str, float] = MappingProxyType(
    {
        "protein": 4.0,
        "carbs": 4.0,
        "fat": 9.0,
    }
)


def grams_from_calories(kind: MacroKind, calories: float) -> float:
    """Return grams of a macro that provide the given calories."""
    return calories / KCAL_PER_GRAM[kind]


def calories_from_grams(kind: MacroKind, grams: float) -> float:
    """Return calories supplied by grams of a macro."""
    return grams * KCAL_PER_GRAM[kind]
