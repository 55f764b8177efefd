"""Catalog filtering ahead of optimization."""

import logging

from max_calorie.domain.errors import InvalidArgumentError
from max_calorie.domain.foods import FoodVector

_logger = logging.getLogger(__name__)


def filter_food_vector(
    source: FoodVector,
    min_calories: float,
    max_calories: float,
    total_size: int,
) -> FoodVector:
    """Return the first ``total_size`` foods whose calories fit the bounds.

    Both bounds are inclusive. Foods with zero or negative calories never
    match, whatever the bounds. Source order is preserved.
    """
    if total_size <= 0:
        _logger.warning("Rejected filter with invalid total size: %s", total_size)
        raise InvalidArgumentError(f"total_size must be positive, got {total_size}")

    selected: FoodVector = []
    for food in source:
        if len(selected) >= total_size:
            break
        if food.calories > 0 and min_calories <= food.calories <= max_calories:
            selected.append(food)
    return selected
