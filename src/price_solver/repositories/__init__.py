"""Repository layer - data access abstractions and implementations."""

from price_solver.repositories.protocols import SnapshotStore

__all__ = [
    "SnapshotStore",
]
