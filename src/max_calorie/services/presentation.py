"""Human-readable rendering of food lists."""

from max_calorie.domain.foods import FoodVector, sum_food_vector

HEADER = "*** food Vector ***"
EMPTY_MESSAGE = "[empty food list]"


def format_food_vector(foods: FoodVector) -> str:
    """Render each food followed by the grand totals."""
    lines = [HEADER]
    if not foods:
        lines.append(EMPTY_MESSAGE)
        return "\n".join(lines)

    for food in foods:
        lines.append(
            f"Ye olde {food.description} ==> "
            f"Weight of {food.weight:g} ounces; calories = {food.calories:g}"
        )
    totals = sum_food_vector(foods)
    lines.append(f"> Grand total weight: {totals.weight:g} ounces")
    lines.append(f"> Grand total calories: {totals.calories:g}")
    return "\n".join(lines)


def print_food_vector(foods: FoodVector) -> None:
    """Print a food list and its totals to standard output."""
    print(format_food_vector(foods))
