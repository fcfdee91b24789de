"""Core utilities and shared functionality."""

from price_solver.core.timezone import (
    now_millis,
    from_millis,
    get_timezone,
    UTC,
)
from price_solver.core.exceptions import (
    AppError,
    NoResultError,
    SnapshotFormatError,
)

__all__ = [
    "now_millis",
    "from_millis",
    "get_timezone",
    "UTC",
    "AppError",
    "NoResultError",
    "SnapshotFormatError",
]
