"""Repository protocol definitions (interfaces)."""

from price_solver.repositories.protocols.snapshot_store import SnapshotStore

__all__ = [
    "SnapshotStore",
]
