"""
Exception handlers for the FastAPI application.

Every error leaves the API in the same envelope:

    {"error": {"code": "...", "message": "...", "details": {...}}}

with ``details`` omitted when empty.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..exceptions import ErrorCode, FitnessPlannerError

logger = logging.getLogger("fitness_planner.api")


def _error_response(exc: FitnessPlannerError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _summarize_validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors to field/message/type triples."""
    return [
        {
            # Drop the "body"/"query"/"path" prefix pydantic puts first
            "field": ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]


async def fitness_planner_error_handler(
    request: Request,
    exc: FitnessPlannerError,
) -> JSONResponse:
    """Handle all FitnessPlannerError exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{exc!r} on {request.method} {request.url.path}")
    else:
        logger.debug(f"{exc!r} on {request.method} {request.url.path}")
    return _error_response(exc)


async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Report schema violations as 422 with one entry per failing field."""
    error = FitnessPlannerError(
        "Request validation failed",
        code=ErrorCode.VALIDATION_ERROR,
        status_code=422,
        details={"errors": _summarize_validation_errors(exc)},
    )
    return _error_response(error)


async def generic_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Log anything unexpected and hide its details from the client."""
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    return _error_response(FitnessPlannerError("An unexpected error occurred"))


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(FitnessPlannerError, fitness_planner_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    # Must stay last; catches every Exception type
    app.add_exception_handler(Exception, generic_exception_handler)
