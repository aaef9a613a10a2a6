"""Services for nutrition targets and workout planning."""

from .base import BaseService
from .macro_service import MacroService
from .plan_service import WorkoutPlanService

__all__ = [
    # Base classes
    "BaseService",
    # API services
    "MacroService",
    "WorkoutPlanService",
]
