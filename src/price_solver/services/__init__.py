"""Service layer - business logic orchestration."""

from price_solver.services.conversion_engine import convert
from price_solver.services.calculator_service import CalculatorService
from price_solver.services.history_ledger import HistoryLedger, HISTORY_CAPACITY
from price_solver.services.history_service import HistoryService, SNAPSHOT_KEY

__all__ = [
    "convert",
    "CalculatorService",
    "HistoryLedger",
    "HISTORY_CAPACITY",
    "HistoryService",
    "SNAPSHOT_KEY",
]
