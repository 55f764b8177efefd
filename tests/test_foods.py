"""Tests for food domain models."""

import dataclasses

import pytest

from max_calorie.domain.errors import InvalidFoodItemError
from max_calorie.domain.foods import FoodItem, FoodTotals, sum_food_vector


def test_sum_of_empty_list_is_zero() -> None:
    assert sum_food_vector([]) == FoodTotals(weight=0, calories=0)


def test_sum_adds_weight_and_calories(trivial_foods) -> None:
    totals = sum_food_vector(trivial_foods)

    assert totals.weight == 14
    assert totals.calories == 25


def test_food_item_is_immutable(corn) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        corn.calories = 0


@pytest.mark.parametrize(
    ("description", "weight"),
    [("", 1.0), ("rice", 0.0), ("rice", -2.0), ("rice", float("nan"))],
)
def test_food_item_rejects_invalid_fields(description: str, weight: float) -> None:
    with pytest.raises(InvalidFoodItemError):
        FoodItem(description, weight, 10.0)


def test_food_item_allows_negative_calories() -> None:
    food = FoodItem("mystery", 1.0, -5.0)

    assert food.calories == -5.0
