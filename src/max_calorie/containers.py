"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from max_calorie.adapters.catalog_file_repository import CatalogFileRepository
from max_calorie.config import Settings
from max_calorie.services.planner import CatalogRepository, PlannerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_repository: CatalogRepository
    planner_service: PlannerService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog_repository = CatalogFileRepository(Path(resolved_settings.catalog_path))
    planner_service = PlannerService(
        repository=catalog_repository,
        exhaustive_limit=resolved_settings.exhaustive_limit,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog_repository=catalog_repository,
        planner_service=planner_service,
    )
