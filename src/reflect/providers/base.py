"""Rate provider base interface."""

from abc import ABC, abstractmethod
from typing import Optional

from reflect.core.models import ApySnapshot, ExchangeRateSnapshot, SupplyCap


class RateProvider(ABC):
    """Abstract source of exchange rates, APY and supply caps.

    Implementations return None when a stablecoin is unknown to them and raise
    on any other failure. Callers apply their own timeout.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        raise NotImplementedError()

    @abstractmethod
    async def current_rate(self, stablecoin_index: int) -> Optional[ExchangeRateSnapshot]:
        """Get the latest exchange rate of a stablecoin."""
        raise NotImplementedError()

    @abstractmethod
    async def historical_rates(
        self, stablecoin_index: int, days: int
    ) -> list[ExchangeRateSnapshot]:
        """Get exchange rates of the last ``days`` days, newest last."""
        raise NotImplementedError()

    @abstractmethod
    async def current_apy(self, stablecoin_index: int) -> Optional[ApySnapshot]:
        """Get the latest APY of a stablecoin."""
        raise NotImplementedError()

    @abstractmethod
    async def historical_apy(self, stablecoin_index: int, days: int) -> list[ApySnapshot]:
        """Get APY snapshots of the last ``days`` days, newest last."""
        raise NotImplementedError()

    @abstractmethod
    async def supply_cap(self, stablecoin_index: int) -> Optional[SupplyCap]:
        """Get the supply cap of a stablecoin."""
        raise NotImplementedError()
