"""Tests for nutrition goal calculation."""

import pytest

from nutrition_logger.domain.errors import ValidationError
from nutrition_logger.services.goals import calculate_goals
from nutrition_logger.services.macros import calories_from_grams


def test_maintain_goals_for_active_male() -> None:
    goals = calculate_goals(70, 175, 30, "male", "moderately active", "maintain")

    assert goals.calories == 2152
    assert goals.protein == 98
    assert goals.fat == 60
    assert goals.carbs == 305


def test_weight_loss_goals_for_sedentary_female() -> None:
    goals = calculate_goals(60, 165, 25, "female", "sedentary", "lose weight")

    assert goals.calories == 1183
    assert goals.protein == 78
    assert goals.fat == 39
    assert goals.carbs == 130


def test_build_muscle_raises_protein_floor() -> None:
    goals = calculate_goals(80, 180, 28, "male", "sedentary", "build muscle")

    assert goals.protein == 144
    assert goals.goal == "build muscle"


def test_carbs_never_negative() -> None:
    goals = calculate_goals(200, 100, 90, "female", "sedentary", "lose weight")

    assert goals.carbs >= 0


@pytest.mark.parametrize("bad", [0, -70, float("nan"), float("inf")])
def test_invalid_metrics_rejected(bad: float) -> None:
    with pytest.raises(ValidationError):
        calculate_goals(bad, 175, 30, "male", "sedentary", "maintain")


def test_macro_targets_account_for_calories() -> None:
    goals = calculate_goals(70, 175, 30, "male", "moderately active", "maintain")

    macro_calories = (
        calories_from_grams("protein", goals.protein)
        + calories_from_grams("carbs", goals.carbs)
        + calories_from_grams("fat", goals.fat)
    )
    assert macro_calories == pytest.approx(goals.calories, abs=2)
