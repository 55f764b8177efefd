"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Planner settings loaded from environment variables."""

    catalog_path: str = "food.csv"
    strategy: str = "dynamic"
    min_calories: float = 1
    max_calories: float = 2500
    exhaustive_limit: int = 20
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="MAX_CALORIE_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

