"""Rate service for exchange rate, APY and supply cap queries.

Wraps a RateProvider with asset checks, range checks and a bounded timeout.
Provider failures of any kind surface as UpstreamUnavailable.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

from reflect.core.assets import AssetRegistry
from reflect.core.models import ApySnapshot, Asset, ExchangeRateSnapshot, SupplyCap
from reflect.core.validation import validate_days
from reflect.errors import AssetNotFound, ReflectError, UpstreamUnavailable
from reflect.providers.base import RateProvider

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RateService:
    """Read-only access to rates, APY and supply caps.

    This is a READ-ONLY service that does not build any transactions.
    """

    def __init__(
        self,
        provider: RateProvider,
        registry: AssetRegistry,
        timeout: float = 5.0,
        max_history_days: int = 365,
    ):
        self.provider = provider
        self.registry = registry
        self.timeout = timeout
        self.max_history_days = max_history_days

    def require_asset(self, stablecoin_index: int) -> Asset:
        """Resolve an enabled asset or raise AssetNotFound."""
        asset = self.registry.get(stablecoin_index)
        if asset is None:
            raise AssetNotFound(stablecoin_index)
        return asset

    async def _call(
        self, query: str, fetch: Callable[..., Awaitable[T]], *args: Any
    ) -> T:
        """Run a provider query under the configured timeout."""
        try:
            return await asyncio.wait_for(fetch(*args), timeout=self.timeout)
        except ReflectError:
            raise
        except asyncio.TimeoutError:
            logger.error(
                f"{self.provider.name} {query}{args} timed out after {self.timeout}s"
            )
            raise UpstreamUnavailable(f"{query} timed out")
        except Exception as e:
            logger.error(
                f"{self.provider.name} {query}{args} failed: {type(e).__name__}: {e}"
            )
            raise UpstreamUnavailable(f"{query} failed: {e}") from e

    @staticmethod
    def _found(value: Optional[T], stablecoin_index: int) -> T:
        if value is None:
            raise AssetNotFound(stablecoin_index)
        return value

    async def current_rate(self, stablecoin_index: int) -> ExchangeRateSnapshot:
        """Get the current exchange rate of a stablecoin."""
        self.require_asset(stablecoin_index)
        rate = await self._call("current_rate", self.provider.current_rate, stablecoin_index)
        return self._found(rate, stablecoin_index)

    async def historical_rates(
        self, stablecoin_index: int, days: int
    ) -> list[ExchangeRateSnapshot]:
        """Get exchange rates of the last ``days`` days, newest last."""
        self.require_asset(stablecoin_index)
        validate_days(days, self.max_history_days)
        return await self._call(
            "historical_rates", self.provider.historical_rates, stablecoin_index, days
        )

    async def current_apy(self, stablecoin_index: int) -> ApySnapshot:
        """Get the current APY of a stablecoin."""
        self.require_asset(stablecoin_index)
        apy = await self._call("current_apy", self.provider.current_apy, stablecoin_index)
        return self._found(apy, stablecoin_index)

    async def historical_apy(self, stablecoin_index: int, days: int) -> list[ApySnapshot]:
        """Get APY snapshots of the last ``days`` days, newest last."""
        self.require_asset(stablecoin_index)
        validate_days(days, self.max_history_days)
        return await self._call(
            "historical_apy", self.provider.historical_apy, stablecoin_index, days
        )

    async def supply_cap(self, stablecoin_index: int) -> SupplyCap:
        """Get the supply cap of a stablecoin."""
        self.require_asset(stablecoin_index)
        cap = await self._call("supply_cap", self.provider.supply_cap, stablecoin_index)
        return self._found(cap, stablecoin_index)

    async def _for_all(self, query: str, fetch: Callable[[int], Awaitable[Optional[T]]]) -> list[T]:
        """Run a per-asset query for every enabled asset.

        An enabled asset the provider does not know is an upstream
        inconsistency, not a 404.
        """
        assets = self.registry.enabled()
        tasks = [
            asyncio.ensure_future(self._call(query, fetch, asset.index)) for asset in assets
        ]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            # first failure wins; siblings are cancelled and reaped
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        missing = [asset.index for asset, result in zip(assets, results) if result is None]
        if missing:
            logger.error(f"{self.provider.name} has no {query} for enabled stablecoins {missing}")
            raise UpstreamUnavailable(f"{query} missing for {missing}")
        return list(results)

    async def all_rates(self) -> list[ExchangeRateSnapshot]:
        """Latest exchange rate of every enabled stablecoin."""
        return await self._for_all("current_rate", self.provider.current_rate)

    async def all_apy(self) -> list[ApySnapshot]:
        """Current APY of every enabled stablecoin."""
        return await self._for_all("current_apy", self.provider.current_apy)

    async def all_supply_caps(self) -> list[SupplyCap]:
        """Supply cap of every enabled stablecoin."""
        return await self._for_all("supply_cap", self.provider.supply_cap)
