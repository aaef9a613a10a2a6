"""
Custom exceptions for the Fitness Planner.

This module defines a hierarchy of exceptions that provide clear error
handling throughout the application. Each exception includes:
- A descriptive message
- An error code for API responses
- HTTP status code mapping
- Optional details for debugging
"""

import math
from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent API error responses."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # Nutrition errors
    INVALID_BIOMETRICS = "INVALID_BIOMETRICS"

    # Plan errors
    PLAN_VALIDATION_ERROR = "PLAN_VALIDATION_ERROR"
    PLAN_GENERATION_FAILED = "PLAN_GENERATION_FAILED"

    # Catalog errors
    EXERCISE_GROUP_NOT_FOUND = "EXERCISE_GROUP_NOT_FOUND"


class FitnessPlannerError(Exception):
    """
    Base exception for all Fitness Planner errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        status_code: HTTP status code for API responses
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API response."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


# ============================================================================
# Validation Errors (400)
# ============================================================================

class ValidationError(FitnessPlannerError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCode.VALIDATION_ERROR,
            status_code=400,
            details=error_details,
        )


class InvalidBiometricsError(ValidationError):
    """Raised when biometric inputs cannot produce meaningful targets."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if value is not None:
            # inf/nan are not valid JSON numbers
            if isinstance(value, float) and not math.isfinite(value):
                value = str(value)
            error_details["value"] = value
        super().__init__(message=message, field=field, details=error_details)
        self.code = ErrorCode.INVALID_BIOMETRICS


class PlanValidationError(ValidationError):
    """Raised when workout preferences cannot produce a plan."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, field=field, details=details)
        self.code = ErrorCode.PLAN_VALIDATION_ERROR


# ============================================================================
# Not Found Errors (404)
# ============================================================================

class NotFoundError(FitnessPlannerError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        message = f"{resource_type} '{resource_id}' not found"
        error_details = details or {}
        error_details["resource_type"] = resource_type
        error_details["resource_id"] = resource_id
        super().__init__(
            message=message,
            code=ErrorCode.NOT_FOUND,
            status_code=404,
            details=error_details,
        )


class MuscleGroupNotFoundError(NotFoundError):
    """Raised when the exercise catalog has no such muscle group."""

    def __init__(self, group: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            resource_type="Muscle group",
            resource_id=group,
            details=details,
        )
        self.code = ErrorCode.EXERCISE_GROUP_NOT_FOUND


# ============================================================================
# Plan Generation Errors (500)
# ============================================================================

class PlanGenerationError(FitnessPlannerError):
    """Raised when plan generation fails."""

    def __init__(
        self,
        message: str,
        archetype: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if archetype:
            error_details["archetype"] = archetype
        super().__init__(
            message=message,
            code=ErrorCode.PLAN_GENERATION_FAILED,
            status_code=500,
            details=error_details,
        )
