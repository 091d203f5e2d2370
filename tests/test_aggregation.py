"""Tests for nutrition aggregation."""

from datetime import date

import pytest

from nutrition_logger.domain.nutrition import Dish, Meal, NutritionInfo
from nutrition_logger.services.aggregation import (
    aggregate,
    day_nutrition,
    dish_nutrition,
    meal_nutrition,
    round_for_display,
    summarize_all_days,
    summarize_day,
    summarize_last_days,
)
from tests.conftest import make_ingredient

DAY = date(2026, 10, 17)


def _meals() -> list[Meal]:
    breakfast = Meal(
        id="m1",
        name="Breakfast",
        day=DAY,
        ingredients=[make_ingredient("a", calories=110.1, protein=3.3, fat=None)],
        dishes=[
            Dish(
                id="d1",
                name="Oatmeal",
                ingredients=[
                    make_ingredient("b", calories=150.7, carbs=27.1),
                    make_ingredient("c", calories=60.2, protein=None),
                ],
            )
        ],
    )
    dinner = Meal(
        id="m2",
        name="Dinner",
        day=DAY,
        dishes=[
            Dish(
                id="d2",
                name="Curry",
                ingredients=[make_ingredient("d", calories=420.4, fat=18.2)],
            )
        ],
    )
    yesterday = Meal(
        id="m3",
        name="Snack",
        day=date(2026, 10, 16),
        ingredients=[make_ingredient("e", calories=90)],
    )
    return [breakfast, dinner, yesterday]


def _leaves(meals: list[Meal]) -> list[NutritionInfo]:
    leaves = []
    for meal in meals:
        leaves.extend(item.nutrition for item in meal.ingredients)
        for dish in meal.dishes:
            leaves.extend(item.nutrition for item in dish.ingredients)
    return leaves


def test_aggregate_treats_missing_macros_as_zero() -> None:
    total = aggregate([NutritionInfo(calories=100), NutritionInfo(100, protein=2)])

    assert total == NutritionInfo(calories=200, protein=2, carbs=0, fat=0)


def test_aggregate_empty() -> None:
    assert aggregate([]) == NutritionInfo(calories=0, protein=0, carbs=0, fat=0)


def test_hierarchical_totals_match_flat_totals() -> None:
    meals = [meal for meal in _meals() if meal.day == DAY]

    nested = day_nutrition(meals)
    flat = aggregate(_leaves(meals))

    assert nested.calories == pytest.approx(flat.calories)
    assert nested.protein == pytest.approx(flat.protein)
    assert nested.carbs == pytest.approx(flat.carbs)
    assert nested.fat == pytest.approx(flat.fat)


def test_dish_total_matches_total_calories() -> None:
    dish = _meals()[0].dishes[0]

    assert dish_nutrition(dish).calories == pytest.approx(dish.total_calories)


def test_meal_includes_loose_ingredients_and_dishes() -> None:
    meal = _meals()[0]

    assert meal_nutrition(meal).calories == pytest.approx(110.1 + 150.7 + 60.2)
    assert meal.total_calories == pytest.approx(321.0)


def test_summarize_day_filters_by_day() -> None:
    summary = summarize_day(_meals(), DAY)

    assert summary.meal_count == 2
    assert summary.totals.calories == pytest.approx(741.4)


def test_summarize_last_days_includes_empty_days() -> None:
    summaries = summarize_last_days(_meals(), DAY, days=3)

    assert [s.day for s in summaries] == [
        DAY,
        date(2026, 10, 16),
        date(2026, 10, 15),
    ]
    assert summaries[2].meal_count == 0
    assert summaries[2].totals.calories == 0


def test_summarize_all_days_newest_first() -> None:
    summaries = summarize_all_days(_meals())

    assert [s.day for s in summaries] == [DAY, date(2026, 10, 16)]


def test_round_for_display() -> None:
    rounded = round_for_display(NutritionInfo(calories=10.456, protein=1.004))

    assert rounded == NutritionInfo(calories=10.46, protein=1.0, carbs=0, fat=0)
