"""FastAPI application for the Fitness Planner."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import get_settings
from .logging_config import configure_logging
from .api.routes import macros, workouts
from .api.exception_handlers import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Starting Fitness Planner v{__version__}")
    logger.info(
        f"Focus mode: {settings.focus_mode.value}, clamp negative carbs: {settings.clamp_negative_carbs}"
    )
    yield
    logger.info("Shutting down Fitness Planner")


app = FastAPI(
    title="Fitness Planner API",
    description="Nutrition targets and weekly strength plans",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(macros.router, prefix="/api/v1/macros", tags=["macros"])
app.include_router(workouts.router, prefix="/api/v1/workouts", tags=["workouts"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Fitness Planner API",
        "version": __version__,
        "status": "healthy",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
