"""Pydantic schemas for history endpoints."""

from typing import Optional

from pydantic import BaseModel

from price_solver.domain.models import HistoryRecord
from price_solver.domain.models.enums import Asset
from price_solver.services.formatting import (
    format_number,
    format_optional,
    format_timestamp,
)


class HistoryRecordResponse(BaseModel):
    """Response schema for a single saved calculation."""

    timestamp: int
    source_asset: Asset
    target_asset: Asset
    source_value: float
    result_value: float
    precision: int
    exchange_rate: float
    thb_value: Optional[float] = None
    formatted_time: str
    formatted_source: str
    formatted_result: str
    formatted_thb: Optional[str] = None

    @classmethod
    def from_record(cls, record: HistoryRecord, timezone: str) -> "HistoryRecordResponse":
        return cls(
            timestamp=record.timestamp,
            source_asset=record.source_asset,
            target_asset=record.target_asset,
            source_value=record.source_value,
            result_value=record.result_value,
            precision=record.precision,
            exchange_rate=record.exchange_rate,
            thb_value=record.thb_value,
            formatted_time=format_timestamp(record.timestamp, timezone),
            formatted_source=f"{format_number(record.source_value)} {record.source_asset.unit}",
            formatted_result=f"{format_number(record.result_value)} {record.target_asset.unit}",
            formatted_thb=format_optional(record.thb_value),
        )


class HistoryListResponse(BaseModel):
    """Response schema for listing history."""

    records: list[HistoryRecordResponse]
    count: int
    capacity: int
