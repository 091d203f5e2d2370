"""Keyword-based dish classification into templates."""

from dataclasses import dataclass

from nutrition_logger.domain.templates import DishTemplate
from nutrition_logger.services.dish_templates import (
    GENERIC_TEMPLATE_ID,
    TEMPLATES,
    generic_template,
)


@dataclass(frozen=True)
class TemplateRule:
    """Keywords that select a specific template inside a category."""

    keywords: tuple[str, ...]
    template_id: str


@dataclass(frozen=True)
class CategoryRule:
    """Category keywords with ordered sub-template rules."""

    category: str
    keywords: tuple[str, ...]
    templates: tuple[TemplateRule, ...]
    default_template_id: str


# Evaluated top to bottom; the first matching category wins.
CLASSIFICATION_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        category="italian",
        keywords=(
            "pasta",
            "spaghetti",
            "carbonara",
            "lasagna",
            "penne",
            "fettuccine",
            "linguine",
            "ravioli",
            "pizza",
            "risotto",
        ),
        templates=(
            TemplateRule(
                (
                    "pasta",
                    "carbonara",
                    "spaghetti",
                    "lasagna",
                    "penne",
                    "fettuccine",
                    "linguine",
                    "ravioli",
                ),
                "pasta",
            ),
            TemplateRule(("pizza",), "pizza"),
            TemplateRule(("risotto",), "risotto"),
        ),
        default_template_id="pasta",
    ),
    CategoryRule(
        category="mexican",
        keywords=(
            "taco",
            "burrito",
            "quesadilla",
            "enchilada",
            "nachos",
            "fajita",
        ),
        templates=(
            TemplateRule(("burrito", "enchilada"), "burrito"),
            TemplateRule(("taco", "quesadilla", "nachos", "fajita"), "taco"),
        ),
        default_template_id="taco",
    ),
    CategoryRule(
        category="american",
        keywords=("burger", "sandwich", "hot dog", "steak", "bbq", "wrap"),
        templates=(
            TemplateRule(("burger", "hot dog"), "burger"),
            TemplateRule(("steak", "bbq"), "steak"),
            TemplateRule(("sandwich", "wrap"), "sandwich"),
        ),
        default_template_id="burger",
    ),
    CategoryRule(
        category="asian",
        keywords=(
            "sushi",
            "ramen",
            "pho",
            "noodle",
            "pad thai",
            "curry",
            "stir fry",
            "stir-fry",
            "fried rice",
            "teriyaki",
        ),
        templates=(
            TemplateRule(("sushi",), "sushi"),
            TemplateRule(("ramen", "pho", "noodle", "pad thai"), "noodles"),
            TemplateRule(("curry",), "curry"),
        ),
        default_template_id="stir_fry",
    ),
    CategoryRule(
        category="salad",
        keywords=("salad",),
        templates=(),
        default_template_id="salad",
    ),
    CategoryRule(
        category="soup",
        keywords=("soup", "stew", "chowder", "broth", "chili"),
        templates=(),
        default_template_id="soup",
    ),
    CategoryRule(
        category="breakfast",
        keywords=(
            "pancake",
            "waffle",
            "french toast",
            "omelet",
            "omelette",
            "scrambled",
            "eggs",
            "oatmeal",
            "porridge",
        ),
        templates=(
            TemplateRule(("pancake", "waffle", "french toast"), "pancakes"),
            TemplateRule(("oatmeal", "porridge"), "oatmeal"),
            TemplateRule(("omelet", "omelette", "scrambled", "eggs"), "eggs"),
        ),
        default_template_id="eggs",
    ),
)


def classify(
    dish_name: str, rules: tuple[CategoryRule, ...] = CLASSIFICATION_RULES
) -> str:
    """Return the template id for a dish name."""
    text = dish_name.lower()
    for rule in rules:
        if not _matches(text, rule.keywords):
            continue
        for template_rule in rule.templates:
            if _matches(text, template_rule.keywords):
                return template_rule.template_id
        return rule.default_template_id
    return GENERIC_TEMPLATE_ID


def resolve_template(dish_name: str) -> DishTemplate:
    """Classify a dish name and return its template."""
    template_id = classify(dish_name)
    template = TEMPLATES.get(template_id)
    if template is None:
        return generic_template(dish_name)
    return template


def _matches(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)
