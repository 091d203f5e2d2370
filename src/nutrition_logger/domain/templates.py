"""Dish template models used by the classifier and expander."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroRatio:
    """Fractional split of a component's calories across macros."""

    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class TemplateComponent:
    """Typical component of a dish category."""

    name: str
    unit: str
    base_quantity: float
    macro_ratio: MacroRatio
    calorie_share: float


@dataclass(frozen=True)
class DishTemplate:
    """Ordered decomposition of a dish into components."""

    id: str
    components: tuple[TemplateComponent, ...]
