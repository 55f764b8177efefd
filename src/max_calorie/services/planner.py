"""Meal planning service combining catalog, filter and solvers."""

import logging
import math
from dataclasses import dataclass, field
from typing import Protocol

from max_calorie.domain.foods import FoodTotals, FoodVector, sum_food_vector
from max_calorie.services.filtering import filter_food_vector
from max_calorie.services.solvers import MAX_EXHAUSTIVE_ITEMS, Strategy, solve

_logger = logging.getLogger(__name__)


class CatalogRepository(Protocol):
    """Source of food catalog records."""

    def load(self) -> FoodVector:
        """Return every valid food item in catalog order."""


@dataclass(frozen=True)
class MealPlan:
    """Result of one solver run."""

    strategy: Strategy
    budget: float
    candidates: FoodVector
    foods: FoodVector
    totals: FoodTotals


@dataclass(frozen=True)
class CrossCheck:
    """Outcome of running both strategies on the same candidates."""

    exhaustive: MealPlan
    dynamic: MealPlan

    @property
    def agrees(self) -> bool:
        """Whether both strategies found the same calorie total."""
        return math.isclose(
            self.exhaustive.totals.calories,
            self.dynamic.totals.calories,
            abs_tol=1e-9,
        )


@dataclass
class PlannerService:
    """Service that picks the highest-calorie foods within a weight budget."""

    repository: CatalogRepository
    exhaustive_limit: int = 20
    _catalog: FoodVector | None = field(default=None, init=False, repr=False)

    def load_catalog(self) -> FoodVector:
        """Load the catalog once and reuse it afterwards."""
        if self._catalog is None:
            self._catalog = self.repository.load()
            _logger.info("Catalog ready with %s foods", len(self._catalog))
        return self._catalog

    def candidates(
        self,
        strategy: Strategy,
        min_calories: float | None = None,
        max_calories: float | None = None,
        limit: int | None = None,
    ) -> FoodVector:
        """Return the foods a solver should consider."""
        catalog = self.load_catalog()
        if strategy is Strategy.EXHAUSTIVE and limit is None:
            limit = min(self.exhaustive_limit, MAX_EXHAUSTIVE_ITEMS - 1)
        if min_calories is None and max_calories is None and limit is None:
            return list(catalog)
        return filter_food_vector(
            catalog,
            min_calories if min_calories is not None else 0,
            max_calories if max_calories is not None else math.inf,
            limit if limit is not None else len(catalog),
        )

    def plan(
        self,
        budget: float,
        strategy: Strategy = Strategy.DYNAMIC,
        min_calories: float | None = None,
        max_calories: float | None = None,
        limit: int | None = None,
    ) -> MealPlan:
        """Solve for the best foods within ``budget`` ounces."""
        candidates = self.candidates(strategy, min_calories, max_calories, limit)
        foods = solve(strategy, candidates, budget)
        totals = sum_food_vector(foods)
        _logger.info(
            "Planned %s: %s of %s foods, %s oz, %s calories",
            strategy.value,
            len(foods),
            len(candidates),
            totals.weight,
            totals.calories,
        )
        return MealPlan(
            strategy=strategy,
            budget=budget,
            candidates=candidates,
            foods=foods,
            totals=totals,
        )

    def cross_check(
        self,
        budget: float,
        min_calories: float | None = None,
        max_calories: float | None = None,
        limit: int | None = None,
    ) -> CrossCheck:
        """Run both strategies on the same candidates and compare them."""
        candidates = self.candidates(
            Strategy.EXHAUSTIVE, min_calories, max_calories, limit
        )
        plans = {}
        for strategy in Strategy:
            foods = solve(strategy, candidates, budget)
            plans[strategy] = MealPlan(
                strategy=strategy,
                budget=budget,
                candidates=candidates,
                foods=foods,
                totals=sum_food_vector(foods),
            )
        result = CrossCheck(
            exhaustive=plans[Strategy.EXHAUSTIVE], dynamic=plans[Strategy.DYNAMIC]
        )
        if not result.agrees:
            _logger.warning(
                "Strategies disagree: exhaustive=%s dynamic=%s",
                result.exhaustive.totals.calories,
                result.dynamic.totals.calories,
            )
        return result
