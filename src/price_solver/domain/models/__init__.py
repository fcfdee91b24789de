"""Domain models package."""

from price_solver.domain.models.enums import (
    Asset,
    ASSET_LABELS,
    ASSET_UNITS,
    ASSET_PRESETS,
)
from price_solver.domain.models.history import HistoryRecord

__all__ = [
    "Asset",
    "ASSET_LABELS",
    "ASSET_UNITS",
    "ASSET_PRESETS",
    "HistoryRecord",
]
