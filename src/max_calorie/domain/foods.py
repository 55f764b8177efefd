"""Food domain models."""

from dataclasses import dataclass

from max_calorie.domain.errors import InvalidFoodItemError


@dataclass(frozen=True)
class FoodItem:
    """One food item available for purchase.

    Weight is in ounces and must be positive. Calories are not validated here;
    the catalog loader decides which values it accepts.
    """

    description: str
    weight: float
    calories: float

    def __post_init__(self) -> None:
        if not self.description:
            raise InvalidFoodItemError("Food description must be non-empty")
        if not self.weight > 0:
            raise InvalidFoodItemError(
                f"Food weight must be positive, got {self.weight!r}"
            )


FoodVector = list[FoodItem]


@dataclass(frozen=True)
class FoodTotals:
    """Total weight and calories of a food list."""

    weight: float
    calories: float


def sum_food_vector(foods: FoodVector) -> FoodTotals:
    """Return the total weight and calories of a food list."""
    total_weight = 0.0
    total_calories = 0.0
    for food in foods:
        total_weight += food.weight
        total_calories += food.calories
    return FoodTotals(weight=total_weight, calories=total_calories)
