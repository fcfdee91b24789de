"""Domain layer - pure business models with no external dependencies."""

from price_solver.domain.models import Asset, HistoryRecord
from price_solver.domain.views import CalculationInput, Calculation

__all__ = [
    "Asset",
    "HistoryRecord",
    "CalculationInput",
    "Calculation",
]
