"""API routes."""

from . import macros, workouts

__all__ = ["macros", "workouts"]
