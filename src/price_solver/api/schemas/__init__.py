"""Pydantic schemas for API request/response."""

from price_solver.api.schemas.assets import AssetResponse, AssetListResponse
from price_solver.api.schemas.conversion import ConversionRequest, ConversionResponse
from price_solver.api.schemas.history import HistoryRecordResponse, HistoryListResponse

__all__ = [
    "AssetResponse",
    "AssetListResponse",
    "ConversionRequest",
    "ConversionResponse",
    "HistoryRecordResponse",
    "HistoryListResponse",
]
