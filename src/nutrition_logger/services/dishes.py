"""Dish and photo meal creation and editing."""

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from uuid import uuid4

from nutrition_logger.domain.estimation import DishEstimateRequest, MealPhotoRequest
from nutrition_logger.domain.nutrition import (
    Dish,
    Meal,
    MealIngredient,
    NutritionInfo,
)
from nutrition_logger.domain.templates import DishTemplate
from nutrition_logger.services.classifier import resolve_template
from nutrition_logger.services.estimation import EstimationGateway
from nutrition_logger.services.expander import IngredientTemplateExpander
from nutrition_logger.services.scaling import (
    require_positive,
    rescale_servings,
    resolve_edit,
    scale_by_quantity,
)

_logger = logging.getLogger(__name__)

_PHOTO_TEMPLATE = DishTemplate(id="photo", components=())


@dataclass
class DishService:
    """Builds dishes from estimates and applies ingredient edits."""

    gateway: EstimationGateway
    expander: IngredientTemplateExpander = field(
        default_factory=IngredientTemplateExpander
    )

    async def create_quick_dish(self, name: str, servings: float) -> Dish:
        """Estimate a dish by name and itemize it into ingredients."""
        servings_count = require_positive(servings, "servings")
        total = await self.gateway.estimate_dish(
            DishEstimateRequest(name=name, servings=servings_count)
        )
        template = resolve_template(name)
        ingredients = self.expander.expand(template, total, name)
        _logger.info(
            "Quick dish %r classified as %s with %s ingredients",
            name,
            template.id,
            len(ingredients),
        )
        return Dish(id=str(uuid4()), name=name, ingredients=ingredients)

    async def create_photo_meal(
        self,
        image_base64: str,
        day: date,
        image_uri: str | None = None,
        name: str = "Photo meal",
    ) -> Meal:
        """Log a meal from a photo as a single estimated serving."""
        total = await self.gateway.estimate_meal_photo(
            MealPhotoRequest(image_base64=image_base64)
        )
        ingredients = self.expander.expand(_PHOTO_TEMPLATE, total, name)
        _logger.info("Photo meal on %s estimated at %s kcal", day, total.calories)
        return Meal(
            id=str(uuid4()),
            name=name,
            day=day,
            ingredients=ingredients,
            image_uri=image_uri,
        )

    def add_ingredient(self, dish: Dish, ingredient: MealIngredient) -> Dish:
        """Append an ingredient to a dish."""
        dish.ingredients.append(ingredient)
        return dish

    def remove_ingredient(self, dish: Dish, ingredient_id: str) -> Dish:
        """Remove an ingredient from a dish by id."""
        dish.ingredients = [
            item for item in dish.ingredients if item.id != ingredient_id
        ]
        return dish

    def update_ingredient_quantity(
        self,
        dish: Dish,
        ingredient_id: str,
        new_quantity: float,
        candidate: NutritionInfo | None = None,
        auto_scale: bool = True,
    ) -> Dish | None:
        """Change an ingredient's quantity and settle its nutrition.

        With auto-scale on, nutrition follows the quantity unless the
        candidate is a deliberate manual override. With it off, the
        candidate (or the current nutrition) is kept as entered.
        """
        for index, item in enumerate(dish.ingredients):
            if item.id != ingredient_id:
                continue
            if auto_scale and candidate is None:
                nutrition = scale_by_quantity(item, new_quantity)
            elif auto_scale:
                nutrition = resolve_edit(item, new_quantity, candidate)
            else:
                require_positive(new_quantity, "quantity")
                nutrition = candidate or item.nutrition
            dish.ingredients[index] = replace(
                item, quantity=float(new_quantity), nutrition=nutrition
            )
            return dish
        return None


@dataclass
class ServingsEditor:
    """Rescales a dish from the snapshot taken when editing started."""

    dish: Dish
    snapshot: tuple[MealIngredient, ...] = ()
    multiplier: float = 1.0

    def __post_init__(self) -> None:
        if not self.snapshot:
            self.snapshot = tuple(self.dish.ingredients)

    def set_servings(self, multiplier: float) -> Dish:
        """Apply a servings multiplier relative to the original snapshot."""
        self.dish.ingredients = rescale_servings(self.snapshot, multiplier)
        self.multiplier = float(multiplier)
        return self.dish
