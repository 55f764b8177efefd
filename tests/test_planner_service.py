"""Tests for the planner service."""

import pytest

from max_calorie.domain.errors import SearchSpaceTooLargeError
from max_calorie.domain.foods import FoodItem
from max_calorie.services.planner import PlannerService
from max_calorie.services.solvers import Strategy
from tests.conftest import InMemoryCatalogRepository


def test_plan_dynamic_uses_whole_catalog(trivial_foods, corn, pasta) -> None:
    service = PlannerService(InMemoryCatalogRepository(trivial_foods))

    plan = service.plan(14, Strategy.DYNAMIC)

    assert plan.candidates == trivial_foods
    assert plan.foods == [pasta, corn]
    assert plan.totals.weight == 14
    assert plan.totals.calories == 25


def test_plan_exhaustive_keeps_catalog_order(trivial_foods, corn, pasta) -> None:
    service = PlannerService(InMemoryCatalogRepository(trivial_foods))

    plan = service.plan(14, Strategy.EXHAUSTIVE)

    assert plan.foods == [corn, pasta]


def test_plan_applies_calorie_filter(trivial_foods, corn) -> None:
    service = PlannerService(InMemoryCatalogRepository(trivial_foods))

    plan = service.plan(14, Strategy.DYNAMIC, min_calories=10)

    assert plan.candidates == [corn]
    assert plan.foods == [corn]


def test_catalog_is_loaded_once(trivial_foods) -> None:
    repository = InMemoryCatalogRepository(trivial_foods)
    service = PlannerService(repository)

    service.plan(10, Strategy.DYNAMIC)
    service.plan(10, Strategy.EXHAUSTIVE)

    assert repository.load_calls == 1


def test_exhaustive_candidates_are_bounded_by_default() -> None:
    foods = [FoodItem(f"food {i}", 1, i + 1) for i in range(70)]
    service = PlannerService(InMemoryCatalogRepository(foods), exhaustive_limit=12)

    plan = service.plan(3, Strategy.EXHAUSTIVE)

    assert len(plan.candidates) == 12
    assert [food.description for food in plan.foods] == [
        "food 9",
        "food 10",
        "food 11",
    ]


def test_exhaustive_with_explicit_large_limit_fails() -> None:
    foods = [FoodItem(f"food {i}", 1, 1) for i in range(70)]
    service = PlannerService(InMemoryCatalogRepository(foods))

    with pytest.raises(SearchSpaceTooLargeError):
        service.plan(3, Strategy.EXHAUSTIVE, limit=64)


def test_cross_check_agrees_on_integral_weights(trivial_foods) -> None:
    service = PlannerService(InMemoryCatalogRepository(trivial_foods))

    result = service.cross_check(14)

    assert result.agrees
    assert result.exhaustive.totals.calories == 25
    assert result.dynamic.candidates == result.exhaustive.candidates


def test_cross_check_reports_fractional_disagreement() -> None:
    foods = [FoodItem("first", 2.5, 10), FoodItem("second", 2.5, 10)]
    service = PlannerService(InMemoryCatalogRepository(foods))

    result = service.cross_check(5)

    assert not result.agrees
    assert result.exhaustive.totals.calories == 20
    assert result.dynamic.totals.calories == 10
