"""Session-scoped in-memory catalog storage."""

from dataclasses import dataclass, field

from nutrition_logger.domain.nutrition import Dish, Ingredient
from nutrition_logger.services.library import LibraryRepository


@dataclass
class InMemoryLibraryRepository(LibraryRepository):
    """Keeps ingredients and dishes in dictionaries keyed by id."""

    ingredients: dict[str, Ingredient] = field(default_factory=dict)
    dishes: dict[str, Dish] = field(default_factory=dict)

    def save_ingredient(self, ingredient: Ingredient) -> Ingredient:
        self.ingredients[ingredient.id] = ingredient
        return ingredient

    def get_ingredient(self, ingredient_id: str) -> Ingredient | None:
        return self.ingredients.get(ingredient_id)

    def list_ingredients(self) -> list[Ingredient]:
        return list(self.ingredients.values())

    def save_dish(self, dish: Dish) -> Dish:
        self.dishes[dish.id] = dish
        return dish

    def get_dish(self, dish_id: str) -> Dish | None:
        return self.dishes.get(dish_id)

    def list_dishes(self) -> list[Dish]:
        return list(self.dishes.values())

    def delete_dish(self, dish_id: str) -> bool:
        return self.dishes.pop(dish_id, None) is not None
