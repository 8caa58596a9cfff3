"""In-memory rate provider with deterministic data (dev/test)."""

from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence, TypeVar

from reflect.core.models import ApySnapshot, ExchangeRateSnapshot, SupplyCap
from reflect.providers.base import RateProvider


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00")).astimezone(timezone.utc)


# Reference protocol data for USDC+ (index 0), oldest first
DEFAULT_RATES: dict[int, list[ExchangeRateSnapshot]] = {
    0: [
        ExchangeRateSnapshot(
            id=104135,
            stablecoin_index=0,
            base_value_bps=1016733625,
            receipt_value_bps=1016733625,
            timestamp=_ts("2025-12-18T17:46:10.274Z"),
        ),
        ExchangeRateSnapshot(
            id=104137,
            stablecoin_index=0,
            base_value_bps=1016728666,
            receipt_value_bps=1016728667,
            timestamp=_ts("2025-12-18T17:47:08.161Z"),
        ),
        ExchangeRateSnapshot(
            id=105511,
            stablecoin_index=0,
            base_value_bps=1016789908,
            receipt_value_bps=1016791576,
            timestamp=_ts("2025-12-19T17:04:08.502Z"),
        ),
    ],
}

DEFAULT_APY: dict[int, list[ApySnapshot]] = {
    0: [
        ApySnapshot(stablecoin_index=0, apy_bps=525, timestamp=_ts("2023-11-07T05:31:56Z")),
        ApySnapshot(stablecoin_index=0, apy_bps=224, timestamp=_ts("2025-12-19T16:55:42.407Z")),
    ],
}

# index -> (cap, current supply)
DEFAULT_SUPPLY: dict[int, tuple[int, int]] = {
    0: (1_000_000_000, 500_000_000),
}

T = TypeVar("T", ExchangeRateSnapshot, ApySnapshot)


def _window(snapshots: Sequence[T], days: int) -> list[T]:
    """Snapshots within ``days`` of the newest one, newest last."""
    if not snapshots:
        return []
    ordered = sorted(snapshots, key=lambda s: s.timestamp)
    since = ordered[-1].timestamp - timedelta(days=days)
    return [s for s in ordered if s.timestamp >= since]


class InMemoryRateProvider(RateProvider):
    """Rate provider serving fixed snapshots.

    Output depends only on the constructor arguments, which makes it the
    provider of choice for tests and local development.
    """

    def __init__(
        self,
        rates: Optional[dict[int, list[ExchangeRateSnapshot]]] = None,
        apy: Optional[dict[int, list[ApySnapshot]]] = None,
        supply: Optional[dict[int, tuple[int, int]]] = None,
    ):
        self._rates = DEFAULT_RATES if rates is None else rates
        self._apy = DEFAULT_APY if apy is None else apy
        self._supply = DEFAULT_SUPPLY if supply is None else supply

    @property
    def name(self) -> str:
        return "memory"

    async def current_rate(self, stablecoin_index: int) -> Optional[ExchangeRateSnapshot]:
        history = _window(self._rates.get(stablecoin_index, []), days=0)
        return history[-1] if history else None

    async def historical_rates(
        self, stablecoin_index: int, days: int
    ) -> list[ExchangeRateSnapshot]:
        return _window(self._rates.get(stablecoin_index, []), days)

    async def current_apy(self, stablecoin_index: int) -> Optional[ApySnapshot]:
        history = _window(self._apy.get(stablecoin_index, []), days=0)
        return history[-1] if history else None

    async def historical_apy(self, stablecoin_index: int, days: int) -> list[ApySnapshot]:
        return _window(self._apy.get(stablecoin_index, []), days)

    async def supply_cap(self, stablecoin_index: int) -> Optional[SupplyCap]:
        figures = self._supply.get(stablecoin_index)
        if figures is None:
            return None
        cap, current = figures
        return SupplyCap.from_supply(stablecoin_index, cap, current)
