"""Stablecoin asset registry."""

import logging
from typing import Iterable, Optional

from reflect.core.models import Asset

logger = logging.getLogger(__name__)


# Stablecoins known to the protocol, keyed by index
KNOWN_STABLECOINS: dict[int, Asset] = {
    0: Asset(index=0, symbol="USDC+", name="USDC+"),
}


class AssetRegistry:
    """Resolves stablecoin indices to enabled assets."""

    def __init__(self, assets: Iterable[Asset]):
        self._assets: dict[int, Asset] = {asset.index: asset for asset in assets}

    @classmethod
    def from_indices(cls, indices: Iterable[int]) -> "AssetRegistry":
        """Build a registry enabling only the given known indices."""
        assets = []
        for index in indices:
            asset = KNOWN_STABLECOINS.get(index)
            if asset is None:
                logger.warning(f"Ignoring unknown stablecoin index in config: {index}")
                continue
            assets.append(asset)
        return cls(assets)

    def get(self, index: Optional[int]) -> Optional[Asset]:
        """Return the enabled asset for an index, or None."""
        if index is None:
            return None
        asset = self._assets.get(index)
        if asset is None or not asset.enabled:
            return None
        return asset

    def enabled(self) -> list[Asset]:
        """Enabled assets ordered by index."""
        return sorted(
            (asset for asset in self._assets.values() if asset.enabled),
            key=lambda asset: asset.index,
        )

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.get(index) is not None
