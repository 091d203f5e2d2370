"""Services for the user's ingredient and dish catalog."""

from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from nutrition_logger.domain.estimation import (
    IngredientEstimateRequest,
    LabelImageRequest,
)
from nutrition_logger.domain.nutrition import Dish, Ingredient, MealIngredient
from nutrition_logger.services.estimation import EstimationGateway
from nutrition_logger.services.scaling import (
    base_quantity_for_unit,
    portion_from_catalog,
)


class LibraryRepository(Protocol):
    """Persistence interface for saved ingredients and dishes."""

    def save_ingredient(self, ingredient: Ingredient) -> Ingredient:
        """Create or replace an ingredient and return it."""

    def get_ingredient(self, ingredient_id: str) -> Ingredient | None:
        """Return an ingredient by id, if present."""

    def list_ingredients(self) -> list[Ingredient]:
        """Return all saved ingredients."""

    def save_dish(self, dish: Dish) -> Dish:
        """Create or replace a dish and return it."""

    def get_dish(self, dish_id: str) -> Dish | None:
        """Return a dish by id, if present."""

    def list_dishes(self) -> list[Dish]:
        """Return all saved dishes."""

    def delete_dish(self, dish_id: str) -> bool:
        """Delete a dish and report whether it existed."""


@dataclass
class LibraryService:
    """Application service for catalog operations."""

    repository: LibraryRepository
    gateway: EstimationGateway

    async def add_custom_ingredient(self, name: str, unit: str) -> Ingredient:
        """Estimate nutrition for the unit's base quantity and save it."""
        request = IngredientEstimateRequest(
            name=name, unit=unit, quantity=base_quantity_for_unit(unit)
        )
        nutrition = await self.gateway.estimate_ingredient(request)
        return self.repository.save_ingredient(
            Ingredient(id=str(uuid4()), name=name, unit=unit, nutrition=nutrition)
        )

    async def add_label_ingredient(
        self, name: str, unit: str, image_base64: str
    ) -> Ingredient:
        """Save an ingredient using nutrition read from a label photo."""
        nutrition = await self.gateway.extract_label(
            LabelImageRequest(image_base64=image_base64)
        )
        return self.repository.save_ingredient(
            Ingredient(id=str(uuid4()), name=name, unit=unit, nutrition=nutrition)
        )

    def use_ingredient(
        self, ingredient_id: str, quantity: float
    ) -> MealIngredient | None:
        """Create a meal ingredient from a saved ingredient."""
        ingredient = self.repository.get_ingredient(ingredient_id)
        if ingredient is None:
            return None
        return portion_from_catalog(ingredient, quantity)

    def list_ingredients(self) -> list[Ingredient]:
        """Return saved ingredients sorted by name."""
        return sorted(
            self.repository.list_ingredients(), key=lambda item: item.name.lower()
        )

    def save_dish(self, dish: Dish) -> Dish:
        """Persist a dish."""
        return self.repository.save_dish(dish)

    def list_dishes(self) -> list[Dish]:
        """Return saved dishes."""
        return self.repository.list_dishes()

    def delete_dish(self, dish_id: str) -> bool:
        """Delete a saved dish."""
        return self.repository.delete_dish(dish_id)
