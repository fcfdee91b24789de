"""View models for calculator inputs and outputs."""

from dataclasses import dataclass, replace
from typing import Optional, Union

from price_solver.domain.models.enums import Asset

RawNumber = Union[str, int, float, None]


@dataclass(frozen=True)
class CalculationInput:
    """Raw calculator inputs as collected by the presentation layer."""

    source_asset: Asset = Asset.BITCOIN
    target_asset: Asset = Asset.GOLD
    value: RawNumber = None
    precision: RawNumber = None
    exchange_rate: RawNumber = None

    def swapped(self) -> "CalculationInput":
        """Return the same inputs with source and target assets exchanged."""
        return replace(
            self,
            source_asset=self.target_asset,
            target_asset=self.source_asset,
        )


@dataclass(frozen=True)
class Calculation:
    """Outcome of one calculator evaluation."""

    source_asset: Asset
    target_asset: Asset
    source_value: Optional[float]
    result: Optional[float]
    rounded_result: Optional[float]
    precision: int
    exchange_rate: float
    thb_value: Optional[float] = None

    @property
    def has_result(self) -> bool:
        """Return True if the calculation produced a displayable result."""
        return self.rounded_result is not None
