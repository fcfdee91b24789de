"""API routers package."""

from price_solver.api.routers.assets import router as assets_router
from price_solver.api.routers.conversion import router as conversion_router
from price_solver.api.routers.history import router as history_router

__all__ = [
    "assets_router",
    "conversion_router",
    "history_router",
]
