"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from price_solver import __version__
from price_solver.app_context import get_app_context
from price_solver.config.settings import get_settings
from price_solver.config.logging_config import setup_logging
from price_solver.api.routers import assets_router, conversion_router, history_router
from price_solver.core.exceptions import AppError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: restore the saved history for this session
    setup_logging()
    context = get_app_context()
    if not context.is_initialized:
        context.initialize()
    logger.info("History loaded with %d record(s)", len(context.history.ledger))
    yield
    # Shutdown (every mutation is already persisted)


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Cross-asset price solver for gold, silver and bitcoin",
    version=__version__,
    lifespan=lifespan,
)

# Include routers
app.include_router(assets_router)
app.include_router(conversion_router)
app.include_router(history_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=400,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "docs": "/docs",
    }
