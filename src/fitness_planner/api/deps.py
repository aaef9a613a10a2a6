"""Dependency injection for API routes."""

from functools import lru_cache

from ..config import get_settings
from ..services.macro_service import MacroService
from ..services.plan_service import WorkoutPlanService


@lru_cache
def get_macro_service() -> MacroService:
    """Get the macro service instance."""
    return MacroService(settings=get_settings())


@lru_cache
def get_plan_service() -> WorkoutPlanService:
    """Get the workout plan service instance."""
    return WorkoutPlanService(settings=get_settings())
