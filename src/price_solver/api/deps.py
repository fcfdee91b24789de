"""Dependency injection for FastAPI."""

from fastapi import Depends

from price_solver.app_context import AppContext, get_app_context
from price_solver.config.settings import Settings, get_settings
from price_solver.services import CalculatorService, HistoryService


def get_context() -> AppContext:
    """Provide the application context."""
    return get_app_context()


def get_app_settings() -> Settings:
    """Provide the current settings."""
    return get_settings()


def get_calculator_service(
    context: AppContext = Depends(get_context),
) -> CalculatorService:
    """Provide CalculatorService instance."""
    return context.calculator


def get_history_service(
    context: AppContext = Depends(get_context),
) -> HistoryService:
    """Provide the session's HistoryService."""
    return context.history
