"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from max_calorie.services.planner import CatalogRepository
from max_calorie.config import Settings
from max_calorie.domain.foods import FoodItem, FoodVector

SAMPLE_CATALOG = """\
description^weight^calories
refried spicy beans^4.5^120
diet soda^12^0
Idaho bread^2^150
chicken breast^6^280
butter^1^100
olive oil^1^119
rice^8^360
spinach^3^20
"""


@dataclass
class InMemoryCatalogRepository(CatalogRepository):
    """In-memory catalog repository for tests."""

    foods: FoodVector = field(default_factory=list)
    load_calls: int = 0

    def load(self) -> FoodVector:
        self.load_calls += 1
        return list(self.foods)


@pytest.fixture
def corn() -> FoodItem:
    return FoodItem("test whole corn", 10, 20.0)


@pytest.fixture
def pasta() -> FoodItem:
    return FoodItem("test pasta", 4, 5.0)


@pytest.fixture
def trivial_foods(corn: FoodItem, pasta: FoodItem) -> FoodVector:
    return [corn, pasta]


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "food.csv"
    path.write_text(SAMPLE_CATALOG, encoding="utf-8")
    return path


@pytest.fixture
def settings(catalog_file: Path) -> Settings:
    return Settings(catalog_path=str(catalog_file), log_level="WARNING")


@pytest.fixture(autouse=True)
def _reset_app_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("max_calorie")
    logger.handlers.clear()
    logger.propagate = True
