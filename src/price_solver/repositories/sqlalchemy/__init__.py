"""SQLAlchemy repository implementations."""

from price_solver.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    init_db,
    init_db_with_path,
    reset_database,
    Base,
)
from price_solver.repositories.sqlalchemy.snapshot_store import SqlAlchemySnapshotStore

__all__ = [
    "get_engine",
    "get_session_factory",
    "init_db",
    "init_db_with_path",
    "reset_database",
    "Base",
    "SqlAlchemySnapshotStore",
]
