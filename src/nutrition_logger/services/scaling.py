"""Keep ingredient quantity and nutrition consistent during edits."""

import math
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import uuid4

from nutrition_logger.domain.errors import ValidationError
from nutrition_logger.domain.nutrition import Ingredient, MealIngredient, NutritionInfo

DEFAULT_OVERRIDE_EPSILON = 0.1

_PER_HUNDRED_UNITS = frozenset({"g", "grams", "oz", "ml"})


class Portion(Protocol):
    """Anything carrying a quantity and the nutrition for that quantity."""

    @property
    def quantity(self) -> float: ...

    @property
    def nutrition(self) -> NutritionInfo: ...


@dataclass(frozen=True)
class QuantifiedNutrition:
    """Nutrition recorded for a specific quantity."""

    quantity: float
    nutrition: NutritionInfo


def scale_by_quantity(original: Portion, new_quantity: float) -> NutritionInfo:
    """Scale nutrition proportionally from the original quantity."""
    target = require_positive(new_quantity, "quantity")
    base = require_positive(original.quantity, "original quantity")
    return multiply_nutrition(original.nutrition, target / base)


def resolve_edit(
    original: Portion,
    new_quantity: float,
    candidate: NutritionInfo,
    epsilon: float = DEFAULT_OVERRIDE_EPSILON,
) -> NutritionInfo:
    """Pick the stored nutrition for a quantity edit.

    A candidate that departs from proportional scaling by more than
    ``epsilon`` on any field is a manual override and is kept verbatim.
    """
    scaled = scale_by_quantity(original, new_quantity)
    if any(
        abs(expected - actual) > epsilon
        for expected, actual in zip(
            _fields(scaled), _fields(candidate), strict=True
        )
    ):
        return candidate
    return scaled


def rescale_servings(
    original_components: Iterable[MealIngredient], multiplier: float
) -> list[MealIngredient]:
    """Scale a captured snapshot of components by a servings multiplier."""
    factor = require_positive(multiplier, "multiplier")
    return [
        replace(
            component,
            quantity=component.quantity * factor,
            nutrition=multiply_nutrition(component.nutrition, factor),
        )
        for component in original_components
    ]


def multiply_nutrition(nutrition: NutritionInfo, factor: float) -> NutritionInfo:
    """Multiply every field, counting missing macros as zero."""
    return NutritionInfo(
        calories=nutrition.calories * factor,
        protein=(nutrition.protein or 0.0) * factor,
        carbs=(nutrition.carbs or 0.0) * factor,
        fat=(nutrition.fat or 0.0) * factor,
    )


def base_quantity_for_unit(unit: str) -> float:
    """Return the quantity catalog nutrition is defined for."""
    if unit.strip().lower() in _PER_HUNDRED_UNITS:
        return 100.0
    return 1.0


def portion_from_catalog(ingredient: Ingredient, quantity: float) -> MealIngredient:
    """Create a meal ingredient from a catalog entry at a given quantity."""
    amount = require_positive(quantity, "quantity")
    factor = amount / base_quantity_for_unit(ingredient.unit)
    return MealIngredient(
        id=str(uuid4()),
        ingredient_id=ingredient.id,
        name=ingredient.name,
        unit=ingredient.unit,
        quantity=amount,
        nutrition=multiply_nutrition(ingredient.nutrition, factor),
    )


def parse_quantity(raw: str) -> float:
    """Parse user-entered text into a positive quantity."""
    try:
        value = float(raw.strip())
    except (AttributeError, ValueError) as exc:
        raise ValidationError(f"Invalid quantity: {raw!r}") from exc
    return require_positive(value, "quantity")


def require_positive(value: object, label: str) -> float:
    """Return ``value`` as a float or raise ``ValidationError``."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValidationError(f"{label} must be a number")
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(f"{label} must be a finite number greater than 0")
    return float(value)


def _fields(nutrition: NutritionInfo) -> tuple[float, float, float, float]:
    return (
        nutrition.calories,
        nutrition.protein or 0.0,
        nutrition.carbs or 0.0,
        nutrition.fat or 0.0,
    )
