"""SQLAlchemy implementation of SnapshotStore."""

import logging
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from price_solver.repositories.sqlalchemy.orm_models import SnapshotORM

logger = logging.getLogger(__name__)


class SqlAlchemySnapshotStore:
    """SQLAlchemy-backed key/text store, one row per snapshot key."""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def read(self, key: str) -> Optional[str]:
        """Return the stored payload for ``key``, or None if absent."""
        db = self._session_factory()
        try:
            orm_snapshot = db.get(SnapshotORM, key)
            return orm_snapshot.payload if orm_snapshot else None
        finally:
            db.close()

    def write(self, key: str, text: str) -> bool:
        """Insert or replace the payload for ``key``."""
        db = self._session_factory()
        try:
            orm_snapshot = db.get(SnapshotORM, key)
            if orm_snapshot:
                orm_snapshot.payload = text
            else:
                db.add(SnapshotORM(key=key, payload=text))
            db.commit()
            return True
        except SQLAlchemyError:
            db.rollback()
            logger.warning("Failed to write snapshot %r", key, exc_info=True)
            return False
        finally:
            db.close()
