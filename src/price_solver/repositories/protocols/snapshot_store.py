"""Snapshot store protocol."""

from typing import Protocol, Optional


class SnapshotStore(Protocol):
    """
    Interface for the local key/text storage facility.

    Both operations are best-effort. ``read`` may raise; ``write`` reports
    failure by returning False.
    """

    def read(self, key: str) -> Optional[str]:
        """Return the text stored under ``key``, or None if absent."""
        ...

    def write(self, key: str, text: str) -> bool:
        """Store ``text`` under ``key``; return True on success."""
        ...
