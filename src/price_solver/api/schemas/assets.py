"""Pydantic schemas for asset endpoints."""

from pydantic import BaseModel

from price_solver.domain.models.enums import Asset


class AssetResponse(BaseModel):
    """Response schema for a single asset."""

    code: Asset
    name: str
    label: str
    unit: str
    presets: list[int]

    @classmethod
    def from_asset(cls, asset: Asset) -> "AssetResponse":
        return cls(
            code=asset,
            name=asset.name.lower(),
            label=asset.label,
            unit=asset.unit,
            presets=list(asset.presets),
        )


class AssetListResponse(BaseModel):
    """Response schema for listing assets."""

    assets: list[AssetResponse]
    count: int
