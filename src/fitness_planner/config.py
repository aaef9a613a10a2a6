"""Configuration settings for the Fitness Planner."""

from pathlib import Path
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings

from .models.workouts import FocusMode


PACKAGE_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Calculator behaviour
    clamp_negative_carbs: bool = True

    # Plan generation
    focus_mode: FocusMode = FocusMode.PARITY  # "parity" ignores body focus, "focused" applies it
    random_seed: Optional[int] = None  # Set for reproducible exercise selection

    # Input bounds enforced at the API/CLI boundary
    min_age: int = 15
    max_age: int = 100
    min_height_cm: float = 100.0
    max_height_cm: float = 250.0
    min_weight_kg: float = 30.0
    max_weight_kg: float = 300.0
    min_duration: int = 20  # minutes per session
    max_duration: int = 180

    class Config:
        env_prefix = "FITNESS_PLANNER_"
        env_file = str(PACKAGE_ROOT / ".env")
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
