"""Command-line entry point for the max calorie planner."""

import argparse
import logging
import sys
from collections.abc import Sequence

from max_calorie.app_logging import configure_logging
from max_calorie.config import Settings
from max_calorie.containers import build_container
from max_calorie.domain.errors import InvalidArgumentError, MaxCalorieError
from max_calorie.services.planner import MealPlan
from max_calorie.services.presentation import format_food_vector
from max_calorie.services.solvers import Strategy

BANNER = "Max Calorie Planner"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``max-calorie`` command."""
    parser = argparse.ArgumentParser(
        prog="max-calorie",
        description="Pick the foods with the most calories within a weight budget.",
    )
    parser.add_argument("--catalog", help="caret-delimited food catalog file")
    parser.add_argument(
        "--budget", type=float, required=True, help="maximum total weight in ounces"
    )
    parser.add_argument("--strategy", choices=[strategy.value for strategy in Strategy])
    parser.add_argument("--min-calories", type=float)
    parser.add_argument("--max-calories", type=float)
    parser.add_argument("--limit", type=int, help="maximum number of candidate foods")
    parser.add_argument(
        "--compare",
        action="store_true",
        help="run both strategies and report whether they agree",
    )
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS)
    return parser


def _format_plan(plan: MealPlan) -> str:
    return (
        f"Strategy: {plan.strategy.value} "
        f"(budget {plan.budget:g} oz, {len(plan.candidates)} candidates)\n"
        f"{format_food_vector(plan.foods)}"
    )


def _resolve_strategy(raw: str) -> Strategy:
    try:
        return Strategy(raw.strip().lower())
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown strategy: {raw}") from exc


def main(argv: Sequence[str] | None = None, settings: Settings | None = None) -> int:
    """Run the planner and print the chosen foods."""
    args = build_parser().parse_args(argv)
    resolved_settings = settings or Settings()
    if args.catalog:
        resolved_settings = resolved_settings.model_copy(
            update={"catalog_path": args.catalog}
        )
    configure_logging(args.log_level or resolved_settings.log_level)
    container = build_container(resolved_settings)
    planner = container.planner_service

    min_calories = (
        args.min_calories
        if args.min_calories is not None
        else resolved_settings.min_calories
    )
    max_calories = (
        args.max_calories
        if args.max_calories is not None
        else resolved_settings.max_calories
    )

    print(BANNER)
    try:
        if args.compare:
            check = planner.cross_check(
                args.budget, min_calories, max_calories, args.limit
            )
            print(_format_plan(check.exhaustive))
            print(_format_plan(check.dynamic))
            print("Strategies agree" if check.agrees else "Strategies disagree")
            return 0
        strategy = _resolve_strategy(args.strategy or resolved_settings.strategy)
        plan = planner.plan(
            args.budget, strategy, min_calories, max_calories, args.limit
        )
    except MaxCalorieError as exc:
        _logger.error("%s", exc)
        return 1
    print(_format_plan(plan))
    return 0


if __name__ == "__main__":
    sys.exit(main())
