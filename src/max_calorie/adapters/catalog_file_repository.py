"""Caret-delimited food catalog files."""

import logging
import math
from dataclasses import dataclass
from pathlib import Path

from max_calorie.domain.errors import (
    CatalogFormatError,
    CatalogLoadError,
    InvalidFoodItemError,
)
from max_calorie.domain.foods import FoodItem, FoodVector
from max_calorie.services.planner import CatalogRepository

DELIMITER = "^"
FIELD_COUNT = 3

_logger = logging.getLogger(__name__)


@dataclass
class CatalogFileRepository(CatalogRepository):
    """Catalog stored as a caret-delimited text file with a header row.

    Rows with the wrong field count abort the load. Rows with unusable
    numbers are skipped.
    """

    path: Path

    def load(self) -> FoodVector:
        """Parse the catalog file into food items."""
        try:
            with open(self.path, encoding="utf-8") as handle:
                lines = [line.rstrip("\n") for line in handle]
        except (OSError, UnicodeDecodeError) as exc:
            _logger.error(
                "Failed to load food database; cannot open file: %s", self.path
            )
            raise CatalogLoadError(f"Cannot open food database: {self.path}") from exc

        foods: FoodVector = []
        for line_number, line in enumerate(lines, start=1):
            if line_number == 1:
                continue
            fields = _split_fields(line)
            if len(fields) != FIELD_COUNT:
                _logger.error(
                    "Failed to load food database: invalid field count at line %s",
                    line_number,
                )
                raise CatalogFormatError(line_number, FIELD_COUNT, len(fields), line)
            food = _parse_food(fields)
            if food is None:
                _logger.info("Skipping invalid food at line %s: %s", line_number, line)
                continue
            foods.append(food)

        _logger.info("Loaded %s foods from %s", len(foods), self.path)
        return foods


def _split_fields(line: str) -> list[str]:
    """Split a row, treating a trailing delimiter as a terminator."""
    if not line:
        return []
    fields = line.split(DELIMITER)
    if fields[-1] == "":
        fields.pop()
    return fields


def _parse_number(raw: str) -> float | None:
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _parse_food(fields: list[str]) -> FoodItem | None:
    """Build a food item from row fields, or ``None`` if any value is invalid."""
    description, weight_field, calories_field = fields
    weight = _parse_number(weight_field)
    calories = _parse_number(calories_field)
    if weight is None or calories is None or calories < 0:
        return None
    try:
        return FoodItem(description=description, weight=weight, calories=calories)
    except InvalidFoodItemError:
        return None
