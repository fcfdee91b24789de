"""History service: owns the session ledger and keeps its snapshot current."""

import logging
from typing import Callable, Optional

from price_solver.core.timezone import now_millis
from price_solver.domain.models import HistoryRecord
from price_solver.domain.views import Calculation
from price_solver.repositories.protocols import SnapshotStore
from price_solver.services.calculator_service import CalculatorService
from price_solver.services.history_ledger import (
    HISTORY_CAPACITY,
    HistoryLedger,
    decode_snapshot,
    encode_snapshot,
)

logger = logging.getLogger(__name__)

SNAPSHOT_KEY = "price-solver-history-v1"


class HistoryService:
    """
    Service for the saved-calculation history.

    The ledger is loaded once from the snapshot store and every mutation
    (save, clear) is followed by exactly one persist. Storage failures are
    logged and dropped: a failed load starts an empty ledger, a failed
    persist leaves the in-memory ledger as the only copy.
    """

    def __init__(
        self,
        store: SnapshotStore,
        clock: Callable[[], int] = now_millis,
        key: str = SNAPSHOT_KEY,
        capacity: int = HISTORY_CAPACITY,
    ):
        self._store = store
        self._clock = clock
        self._key = key
        self._capacity = capacity
        self._ledger = HistoryLedger(capacity=capacity)

    @property
    def ledger(self) -> HistoryLedger:
        """The current ledger."""
        return self._ledger

    def load(self) -> HistoryLedger:
        """
        Restore the ledger from the most recent snapshot.

        A missing, unreadable or malformed snapshot yields an empty ledger.
        """
        records: tuple[HistoryRecord, ...] = ()
        try:
            text = self._store.read(self._key)
            if text:
                records = decode_snapshot(text, capacity=self._capacity)
        except Exception:
            logger.warning("Could not restore history from %r; starting empty", self._key, exc_info=True)
            records = ()

        self._ledger = HistoryLedger(records=records, capacity=self._capacity)
        logger.info("Loaded %d history record(s)", len(self._ledger))
        return self._ledger

    def save(self, calculation: Calculation) -> Optional[HistoryRecord]:
        """
        Append a calculation to the history.

        Returns None without touching the ledger when the calculation has no
        result.
        """
        record = CalculatorService.to_record(calculation, timestamp=self._clock())
        if record is None:
            return None

        self._ledger = self._ledger.append(record)
        self.persist()
        return record

    def clear(self) -> None:
        """Remove every record."""
        self._ledger = self._ledger.clear()
        self.persist()

    def list_records(self, newest_first: bool = True) -> list[HistoryRecord]:
        """Records in display order (newest first) or insertion order."""
        if newest_first:
            return self._ledger.newest_first()
        return list(self._ledger.records)

    def persist(self) -> bool:
        """
        Write the current ledger to the store.

        Failures are logged and discarded; there is no retry.
        """
        try:
            ok = self._store.write(self._key, encode_snapshot(self._ledger, capacity=self._capacity))
        except Exception:
            logger.warning("Failed to persist history to %r", self._key, exc_info=True)
            return False
        if not ok:
            logger.warning("Snapshot store rejected history write for %r", self._key)
        return bool(ok)
