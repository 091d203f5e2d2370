"""Expand dish templates into estimated meal ingredients."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from nutrition_logger.domain.nutrition import MealIngredient, NutritionInfo
from nutrition_logger.domain.templates import DishTemplate, TemplateComponent
from nutrition_logger.services.macros import grams_from_calories

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class IngredientTemplateExpander:
    """Turns a template plus total dish nutrition into itemized ingredients."""

    clock: Callable[[], datetime] = field(default=_utc_now)

    def expand(
        self,
        template: DishTemplate,
        total_nutrition: NutritionInfo,
        dish_name: str,
    ) -> list[MealIngredient]:
        """Split total nutrition across the template's components."""
        id_prefix = str(int(self.clock().timestamp() * 1000))
        if not template.components:
            _logger.info("Template %s has no components; using estimate", template.id)
            return [
                MealIngredient(
                    id=f"{id_prefix}0",
                    name=f"{dish_name} (estimated)",
                    unit="serving",
                    quantity=1,
                    nutrition=total_nutrition,
                )
            ]
        return [
            _expand_component(component, total_nutrition, f"{id_prefix}{index}")
            for index, component in enumerate(template.components)
        ]


def _expand_component(
    component: TemplateComponent, total: NutritionInfo, ingredient_id: str
) -> MealIngredient:
    calories = float(round_half_up(total.calories * component.calorie_share))
    ratio = component.macro_ratio
    nutrition = NutritionInfo(
        calories=calories,
        protein=round_half_up(
            grams_from_calories("protein", calories * ratio.protein), 1
        ),
        carbs=round_half_up(grams_from_calories("carbs", calories * ratio.carbs), 1),
        fat=round_half_up(grams_from_calories("fat", calories * ratio.fat), 1),
    )
    return MealIngredient(
        id=ingredient_id,
        name=component.name,
        unit=component.unit,
        quantity=component.base_quantity,
        nutrition=nutrition,
    )


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for non-negative values."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor
