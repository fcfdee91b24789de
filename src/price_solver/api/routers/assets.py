"""Asset catalogue endpoints."""

from fastapi import APIRouter

from price_solver.api.schemas import AssetResponse, AssetListResponse
from price_solver.domain.models import Asset

router = APIRouter(prefix="/assets", tags=["assets"])


@router.get("", response_model=AssetListResponse)
def list_assets() -> AssetListResponse:
    """List the priced assets with their units, labels and presets."""
    assets = [AssetResponse.from_asset(a) for a in Asset]
    return AssetListResponse(assets=assets, count=len(assets))
