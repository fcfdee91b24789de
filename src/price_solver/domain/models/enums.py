"""Enumerations for domain models."""

from enum import Enum


class Asset(str, Enum):
    """Assets priced against one another, tagged by a single letter."""

    GOLD = "G"  # USD per troy ounce
    SILVER = "S"  # USD per troy ounce
    BITCOIN = "B"  # USD per coin

    @property
    def label(self) -> str:
        """Human readable label, e.g. 'Gold (XAU)'."""
        return ASSET_LABELS[self]

    @property
    def unit(self) -> str:
        """Display unit of the asset's price."""
        return ASSET_UNITS[self]

    @property
    def presets(self) -> tuple[int, ...]:
        """Sample input values offered for this asset."""
        return ASSET_PRESETS[self]


ASSET_LABELS: dict[Asset, str] = {
    Asset.GOLD: "Gold (XAU)",
    Asset.SILVER: "Silver (XAG)",
    Asset.BITCOIN: "Bitcoin (BTC)",
}

ASSET_UNITS: dict[Asset, str] = {
    Asset.GOLD: "USD/oz",
    Asset.SILVER: "USD/oz",
    Asset.BITCOIN: "USD",
}

ASSET_PRESETS: dict[Asset, tuple[int, ...]] = {
    Asset.BITCOIN: (30000, 50000, 65000, 100000),
    Asset.GOLD: (1600, 1800, 2000, 2200),
    Asset.SILVER: (15, 20, 25, 30),
}
