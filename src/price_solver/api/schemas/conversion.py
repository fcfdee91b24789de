"""Pydantic schemas for conversion endpoints."""

from typing import Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, field_validator

from price_solver.domain.models.enums import Asset
from price_solver.domain.views import Calculation, CalculationInput
from price_solver.services.formatting import format_number, format_optional


class ConversionRequest(BaseModel):
    """Request schema for a calculator evaluation (raw form values)."""

    source_asset: Asset = Field(default=Asset.BITCOIN, description="Asset whose price is given")
    target_asset: Asset = Field(default=Asset.GOLD, description="Asset whose price is wanted")
    value: Optional[Union[StrictFloat, StrictInt, str]] = Field(
        default=None,
        description="Price of the source asset, as entered",
    )
    precision: Optional[Union[StrictInt, StrictFloat, str]] = Field(
        default=None,
        description="Decimal places for the result (truncated, clamped to 0-8)",
    )
    exchange_rate: Optional[Union[StrictFloat, StrictInt, str]] = Field(
        default=None,
        description="USD -> THB rate; 0 or empty hides the THB value",
    )

    @field_validator("value", "precision", "exchange_rate", mode="before")
    @classmethod
    def booleans_as_text(cls, v):
        """Keep JSON booleans as text so they parse as invalid input, not 1/0."""
        if isinstance(v, bool):
            return str(v).lower()
        return v

    def to_input(self) -> CalculationInput:
        return CalculationInput(
            source_asset=self.source_asset,
            target_asset=self.target_asset,
            value=self.value,
            precision=self.precision,
            exchange_rate=self.exchange_rate,
        )


class ConversionResponse(BaseModel):
    """Response schema for a calculator evaluation."""

    source_asset: Asset
    target_asset: Asset
    source_unit: str
    target_unit: str
    source_value: Optional[float] = None
    result: Optional[float] = None
    rounded_result: Optional[float] = None
    precision: int
    exchange_rate: float
    thb_value: Optional[float] = None
    formatted_result: Optional[str] = None
    formatted_thb: Optional[str] = None
    formatted_exchange_rate: str

    @classmethod
    def from_calculation(cls, calculation: Calculation) -> "ConversionResponse":
        p = calculation.precision
        return cls(
            source_asset=calculation.source_asset,
            target_asset=calculation.target_asset,
            source_unit=calculation.source_asset.unit,
            target_unit=calculation.target_asset.unit,
            source_value=calculation.source_value,
            result=calculation.result,
            rounded_result=calculation.rounded_result,
            precision=p,
            exchange_rate=calculation.exchange_rate,
            thb_value=calculation.thb_value,
            formatted_result=format_optional(calculation.rounded_result, p, p),
            formatted_thb=format_optional(calculation.thb_value, p, p),
            formatted_exchange_rate=format_number(calculation.exchange_rate),
        )
