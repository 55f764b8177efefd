"""Exact 0/1 knapsack solvers maximizing calories under a weight budget."""

import logging
import math
from enum import Enum

from max_calorie.domain.errors import InvalidArgumentError, SearchSpaceTooLargeError
from max_calorie.domain.foods import FoodVector, sum_food_vector

MAX_EXHAUSTIVE_ITEMS = 64

_logger = logging.getLogger(__name__)


class Strategy(Enum):
    """Available solving strategies."""

    EXHAUSTIVE = "exhaustive"
    DYNAMIC = "dynamic"


def exhaustive_max_calories(foods: FoodVector, total_weight: float) -> FoodVector:
    """Search every subset for the most calories within ``total_weight``.

    Subsets are enumerated as bitmasks in ascending order and only a strictly
    better subset replaces the current best, so the first optimum wins. Items
    come back in catalog order.
    """
    if math.isnan(total_weight):
        raise InvalidArgumentError("total_weight must be a number, got nan")
    n = len(foods)
    if n >= MAX_EXHAUSTIVE_ITEMS:
        raise SearchSpaceTooLargeError(
            f"Exhaustive search supports fewer than {MAX_EXHAUSTIVE_ITEMS} "
            f"items, got {n}"
        )
    _logger.debug("Exhaustive search over %s items (%s subsets)", n, 1 << n)

    best: FoodVector = []
    best_calories = 0.0
    for mask in range(1 << n):
        candidate = [foods[j] for j in range(n) if (mask >> j) & 1]
        totals = sum_food_vector(candidate)
        if totals.weight > total_weight:
            continue
        if not best or totals.calories > best_calories:
            best = candidate
            best_calories = totals.calories
    return best


def dynamic_max_calories(foods: FoodVector, total_weight: int) -> FoodVector:
    """Solve the knapsack by tabulation over integer capacities.

    Capacity and remaining-capacity columns use integer truncation, so
    fractional weights are only approximated. Selected items come back in
    reverse catalog order, the order in which backtracking finds them.
    """
    if not math.isfinite(total_weight):
        raise InvalidArgumentError(
            f"total_weight must be a finite number, got {total_weight!r}"
        )
    capacity = int(total_weight)
    if capacity < 0:
        raise InvalidArgumentError(f"total_weight must be non-negative, got {capacity}")
    n = len(foods)
    _logger.debug("Dynamic programming over %s items, capacity %s", n, capacity)

    table = [[0.0] * (capacity + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        food = foods[i - 1]
        previous = table[i - 1]
        current = table[i]
        for w in range(1, capacity + 1):
            without = previous[w]
            if food.weight <= w:
                with_food = food.calories + previous[int(w - food.weight)]
                current[w] = with_food if with_food > without else without
            else:
                current[w] = without

    best: FoodVector = []
    w = capacity
    for i in range(n, 0, -1):
        if table[i][w] == table[i - 1][w]:
            continue
        food = foods[i - 1]
        best.append(food)
        w = int(w - food.weight)
    return best


def solve(strategy: Strategy, foods: FoodVector, total_weight: float) -> FoodVector:
    """Dispatch to the solver for ``strategy``."""
    if strategy is Strategy.EXHAUSTIVE:
        return exhaustive_max_calories(foods, total_weight)
    if strategy is Strategy.DYNAMIC:
        return dynamic_max_calories(foods, int(total_weight))
    raise InvalidArgumentError(f"Unknown strategy: {strategy!r}")
