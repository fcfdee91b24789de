"""History record domain model."""

from dataclasses import dataclass
from typing import Optional

from price_solver.domain.models.enums import Asset


@dataclass(frozen=True)
class HistoryRecord:
    """
    A saved conversion.

    Created only by an explicit save; never mutated afterwards. Removed only
    when the whole ledger is cleared or when it falls off the front of a full
    ledger.
    """

    timestamp: int  # epoch milliseconds
    source_asset: Asset
    target_asset: Asset
    source_value: float
    result_value: float
    precision: int
    exchange_rate: float

    def __post_init__(self) -> None:
        if isinstance(self.source_asset, str) and not isinstance(self.source_asset, Asset):
            object.__setattr__(self, "source_asset", Asset(self.source_asset))
        if isinstance(self.target_asset, str) and not isinstance(self.target_asset, Asset):
            object.__setattr__(self, "target_asset", Asset(self.target_asset))

    @property
    def thb_value(self) -> Optional[float]:
        """Result converted to THB at the rate used when it was saved."""
        if self.exchange_rate > 0:
            return self.result_value * self.exchange_rate
        return None
