"""Exception hierarchy for the max calorie planner."""


class MaxCalorieError(Exception):
    """Base class for all planner errors."""


class InvalidArgumentError(MaxCalorieError, ValueError):
    """Raised when an operation receives an argument outside its contract."""


class InvalidFoodItemError(MaxCalorieError, ValueError):
    """Raised when a food item is constructed with invalid fields."""


class SearchSpaceTooLargeError(MaxCalorieError, ValueError):
    """Raised when exhaustive search is asked to enumerate too many items."""


class CatalogLoadError(MaxCalorieError):
    """Raised when a food catalog cannot be loaded."""


class CatalogFormatError(CatalogLoadError):
    """Raised when a catalog row has the wrong number of fields."""

    def __init__(self, line_number: int, expected: int, actual: int, line: str):
        super().__init__(
            f"Invalid field count at line {line_number}; "
            f"want {expected} but got {actual}"
        )
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        self.line = line
