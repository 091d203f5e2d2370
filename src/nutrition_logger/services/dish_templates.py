"""Hand-authored dish templates keyed by template id."""

from types import MappingProxyType

from nutrition_logger.domain.templates import (
    DishTemplate,
    MacroRatio,
    TemplateComponent,
)

GENERIC_TEMPLATE_ID = "generic"

_PROTEIN = MacroRatio(protein=0.6, carbs=0.0, fat=0.4)
_LEAN_PROTEIN = MacroRatio(protein=0.7, carbs=0.05, fat=0.25)
_STARCH = MacroRatio(protein=0.12, carbs=0.8, fat=0.08)
_VEGETABLE = MacroRatio(protein=0.2, carbs=0.7, fat=0.1)
_SAUCE = MacroRatio(protein=0.05, carbs=0.25, fat=0.7)
_CHEESE = MacroRatio(protein=0.3, carbs=0.05, fat=0.65)
_DAIRY = MacroRatio(protein=0.25, carbs=0.3, fat=0.45)
_FAT = MacroRatio(protein=0.0, carbs=0.0, fat=1.0)
_MIXED = MacroRatio(protein=0.25, carbs=0.45, fat=0.3)


def _component(
    name: str, unit: str, base_quantity: float, ratio: MacroRatio, share: float
) -> TemplateComponent:
    return TemplateComponent(
        name=name,
        unit=unit,
        base_quantity=base_quantity,
        macro_ratio=ratio,
        calorie_share=share,
    )


_TEMPLATES: dict[str, DishTemplate] = {
    "pasta": DishTemplate(
        id="pasta",
        components=(
            _component("Pasta", "g", 100, _STARCH, 0.5),
            _component("Pasta sauce", "g", 80, _SAUCE, 0.25),
            _component("Parmesan", "g", 15, _CHEESE, 0.1),
            _component("Olive oil", "tbsp", 1, _FAT, 0.15),
        ),
    ),
    "pizza": DishTemplate(
        id="pizza",
        components=(
            _component("Pizza dough", "g", 120, _STARCH, 0.45),
            _component("Mozzarella", "g", 60, _CHEESE, 0.3),
            _component("Tomato sauce", "g", 50, _VEGETABLE, 0.1),
            _component("Toppings", "g", 40, _MIXED, 0.15),
        ),
    ),
    "risotto": DishTemplate(
        id="risotto",
        components=(
            _component("Arborio rice", "g", 80, _STARCH, 0.5),
            _component("Butter", "tbsp", 1, _FAT, 0.2),
            _component("Parmesan", "g", 20, _CHEESE, 0.15),
            _component("Stock", "ml", 250, _VEGETABLE, 0.15),
        ),
    ),
    "taco": DishTemplate(
        id="taco",
        components=(
            _component("Tortillas", "piece", 2, _STARCH, 0.35),
            _component("Seasoned meat", "g", 90, _PROTEIN, 0.4),
            _component("Cheese", "g", 20, _CHEESE, 0.15),
            _component("Salsa", "g", 40, _VEGETABLE, 0.1),
        ),
    ),
    "burrito": DishTemplate(
        id="burrito",
        components=(
            _component("Flour tortilla", "piece", 1, _STARCH, 0.3),
            _component("Rice", "g", 100, _STARCH, 0.2),
            _component("Beans", "g", 80, _VEGETABLE, 0.15),
            _component("Filling meat", "g", 100, _PROTEIN, 0.25),
            _component("Cheese", "g", 20, _CHEESE, 0.1),
        ),
    ),
    "burger": DishTemplate(
        id="burger",
        components=(
            _component("Burger bun", "piece", 1, _STARCH, 0.3),
            _component("Beef patty", "g", 120, _PROTEIN, 0.45),
            _component("Cheese slice", "piece", 1, _CHEESE, 0.1),
            _component("Sauce", "tbsp", 1, _SAUCE, 0.1),
            _component("Lettuce and tomato", "g", 40, _VEGETABLE, 0.05),
        ),
    ),
    "sandwich": DishTemplate(
        id="sandwich",
        components=(
            _component("Bread", "piece", 2, _STARCH, 0.45),
            _component("Filling", "g", 80, _LEAN_PROTEIN, 0.3),
            _component("Cheese", "g", 20, _CHEESE, 0.15),
            _component("Spread", "tbsp", 1, _SAUCE, 0.1),
        ),
    ),
    "steak": DishTemplate(
        id="steak",
        components=(
            _component("Steak", "g", 200, _PROTEIN, 0.6),
            _component("Potatoes", "g", 150, _STARCH, 0.25),
            _component("Butter", "tbsp", 1, _FAT, 0.15),
        ),
    ),
    "sushi": DishTemplate(
        id="sushi",
        components=(
            _component("Sushi rice", "g", 150, _STARCH, 0.6),
            _component("Raw fish", "g", 80, _LEAN_PROTEIN, 0.3),
            _component("Nori", "piece", 2, _VEGETABLE, 0.05),
            _component("Soy sauce", "tbsp", 1, _VEGETABLE, 0.05),
        ),
    ),
    "noodles": DishTemplate(
        id="noodles",
        components=(
            _component("Noodles", "g", 120, _STARCH, 0.5),
            _component("Broth", "ml", 300, _MIXED, 0.15),
            _component("Protein", "g", 80, _LEAN_PROTEIN, 0.25),
            _component("Vegetables", "g", 60, _VEGETABLE, 0.1),
        ),
    ),
    "curry": DishTemplate(
        id="curry",
        components=(
            _component("Rice", "g", 150, _STARCH, 0.4),
            _component("Curry sauce", "g", 150, _SAUCE, 0.3),
            _component("Protein", "g", 100, _LEAN_PROTEIN, 0.2),
            _component("Vegetables", "g", 80, _VEGETABLE, 0.1),
        ),
    ),
    "stir_fry": DishTemplate(
        id="stir_fry",
        components=(
            _component("Rice", "g", 150, _STARCH, 0.4),
            _component("Protein", "g", 100, _LEAN_PROTEIN, 0.3),
            _component("Vegetables", "g", 100, _VEGETABLE, 0.15),
            _component("Cooking oil", "tbsp", 1, _FAT, 0.15),
        ),
    ),
    "salad": DishTemplate(
        id="salad",
        components=(
            _component("Mixed greens", "g", 100, _VEGETABLE, 0.1),
            _component("Protein topping", "g", 100, _LEAN_PROTEIN, 0.4),
            _component("Dressing", "tbsp", 2, _SAUCE, 0.3),
            _component("Toppings", "g", 30, _MIXED, 0.2),
        ),
    ),
    "soup": DishTemplate(
        id="soup",
        components=(
            _component("Broth", "ml", 300, _MIXED, 0.3),
            _component("Vegetables", "g", 100, _VEGETABLE, 0.25),
            _component("Protein", "g", 60, _LEAN_PROTEIN, 0.25),
            _component("Bread", "piece", 1, _STARCH, 0.2),
        ),
    ),
    "pancakes": DishTemplate(
        id="pancakes",
        components=(
            _component("Pancakes", "piece", 3, _STARCH, 0.6),
            _component("Syrup", "tbsp", 2, MacroRatio(0.0, 1.0, 0.0), 0.25),
            _component("Butter", "tbsp", 1, _FAT, 0.15),
        ),
    ),
    "eggs": DishTemplate(
        id="eggs",
        components=(
            _component("Eggs", "piece", 2, _PROTEIN, 0.45),
            _component("Toast", "piece", 2, _STARCH, 0.35),
            _component("Butter", "tbsp", 1, _FAT, 0.2),
        ),
    ),
    "oatmeal": DishTemplate(
        id="oatmeal",
        components=(
            _component("Oats", "g", 50, _STARCH, 0.5),
            _component("Milk", "ml", 200, _DAIRY, 0.3),
            _component("Fruit", "g", 80, _VEGETABLE, 0.2),
        ),
    ),
}

TEMPLATES: MappingProxyType[str, DishTemplate] = MappingProxyType(_TEMPLATES)


def generic_template(dish_name: str) -> DishTemplate:
    """Return the fallback template with the first component named after the dish."""
    label = " ".join(dish_name.split())
    first_name = f"{label} main component" if label else "Main component"
    return DishTemplate(
        id=GENERIC_TEMPLATE_ID,
        components=(
            _component(first_name, "g", 150, _MIXED, 0.5),
            _component("Side", "g", 100, _STARCH, 0.3),
            _component("Sauce", "ml", 30, _SAUCE, 0.2),
        ),
    )
