"""Application context for in-process service management.

Provides a centralized way to access all services. The HTTP API uses the
global context; tests build their own against a temporary data directory.
"""

from pathlib import Path
from typing import Optional

from price_solver.config.settings import Settings, set_settings, get_settings
from price_solver.repositories.sqlalchemy.database import (
    init_db,
    init_db_with_path,
    reset_database,
    get_session_factory,
)
from price_solver.repositories.sqlalchemy import SqlAlchemySnapshotStore
from price_solver.services import CalculatorService, HistoryService


class AppContext:
    """
    Application context providing in-process access to all services.

    The history service is created once per context so the ledger lives for
    the whole session; it is loaded from the snapshot store on first use.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        """
        Initialize application context.

        Args:
            data_dir: Optional data directory. If not provided, uses default.
        """
        self._data_dir = data_dir
        self._initialized = False

        # Service instances (lazy initialized)
        self._store: Optional[SqlAlchemySnapshotStore] = None
        self._calculator: Optional[CalculatorService] = None
        self._history_service: Optional[HistoryService] = None

    def initialize(self, data_dir: Optional[Path] = None) -> None:
        """
        Initialize or reinitialize the application with a data directory.

        Args:
            data_dir: Data directory path. Uses default if not provided.
        """
        if data_dir:
            self._data_dir = data_dir

        # Update global settings, keeping everything but the data directory
        settings = get_settings()
        if self._data_dir is not None:
            settings = settings.model_copy(update={"data_dir": self._data_dir})
        set_settings(settings)

        # Reset and reinitialize database
        reset_database()
        if settings.database_url:
            init_db()
        else:
            init_db_with_path(settings.get_data_dir() / "price_solver.db")

        # Reset service instances to force recreation
        self._store = None
        self._calculator = None
        self._history_service = None

        self._initialized = True

    @property
    def is_initialized(self) -> bool:
        """Check if context is initialized."""
        return self._initialized

    @property
    def data_dir(self) -> Path:
        """Get the current data directory."""
        return get_settings().get_data_dir()

    @property
    def settings(self) -> Settings:
        return get_settings()

    @property
    def store(self) -> SqlAlchemySnapshotStore:
        """Get the snapshot store."""
        if self._store is None:
            if not self._initialized:
                self.initialize()
            self._store = SqlAlchemySnapshotStore(get_session_factory())
        return self._store

    @property
    def calculator(self) -> CalculatorService:
        """Get the CalculatorService instance."""
        if self._calculator is None:
            settings = get_settings()
            self._calculator = CalculatorService(
                default_precision=settings.default_precision,
                default_exchange_rate=settings.default_exchange_rate,
            )
        return self._calculator

    @property
    def history(self) -> HistoryService:
        """Get the HistoryService instance, loading the ledger on first access."""
        if self._history_service is None:
            self._history_service = HistoryService(store=self.store)
            self._history_service.load()
        return self._history_service

    def close(self) -> None:
        """Clean up resources."""
        self._history_service = None
        self._store = None
        reset_database()
        self._initialized = False


# Global application context (singleton for the API process)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set the global application context."""
    global _app_context
    _app_context = context
