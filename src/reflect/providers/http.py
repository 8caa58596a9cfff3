"""HTTP rate provider backed by the upstream protocol data API.

The upstream answers with ``{"success": bool, "data": ...}`` envelopes.
A 404 means the stablecoin is unknown; any other failure is raised.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import httpx

from reflect.core.models import ApySnapshot, ExchangeRateSnapshot, SupplyCap
from reflect.providers.base import RateProvider

logger = logging.getLogger(__name__)


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _parse_rate(item: dict) -> ExchangeRateSnapshot:
    return ExchangeRateSnapshot(
        id=int(item["id"]),
        stablecoin_index=int(item["stablecoin"]),
        base_value_bps=int(item["base_usd_value_bps"]),
        receipt_value_bps=int(item["receipt_usd_value_bps"]),
        timestamp=_parse_timestamp(item["timestamp"]),
    )


def _parse_apy(item: dict) -> ApySnapshot:
    return ApySnapshot(
        stablecoin_index=int(item["index"]),
        apy_bps=int(item["apy"]),
        timestamp=_parse_timestamp(item["timestamp"]),
    )


class HttpRateProvider(RateProvider):
    """Rate provider querying the upstream REST API."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize HTTP provider.

        Args:
            base_url: Upstream API base URL
            api_key: Optional API key sent as ``x-api-key``
            timeout: Per-request HTTP timeout in seconds
            transport: Custom httpx transport (tests)
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    @property
    def name(self) -> str:
        return "http"

    async def _get(self, path: str, params: Optional[dict] = None) -> Optional[Any]:
        """GET an upstream path and return the envelope's data (None on 404)."""
        headers = {"x-api-key": self.api_key} if self.api_key else {}
        async with httpx.AsyncClient(
            timeout=self.timeout, headers=headers, transport=self.transport
        ) as client:
            response = await client.get(f"{self.base_url}{path}", params=params)

        if response.status_code == 404:
            logger.debug(f"Upstream 404 for {path}")
            return None
        response.raise_for_status()

        body = response.json()
        if not body.get("success", False):
            raise ValueError(f"Upstream reported failure for {path}: {body.get('message')}")
        return body.get("data")

    async def current_rate(self, stablecoin_index: int) -> Optional[ExchangeRateSnapshot]:
        data = await self._get(f"/stablecoins/{stablecoin_index}/exchange-rate")
        return _parse_rate(data) if data else None

    async def historical_rates(
        self, stablecoin_index: int, days: int
    ) -> list[ExchangeRateSnapshot]:
        data = await self._get(
            f"/stablecoins/{stablecoin_index}/exchange-rates/historical",
            params={"days": days},
        )
        rates = [_parse_rate(item) for item in data or []]
        return sorted(rates, key=lambda r: r.timestamp)

    async def current_apy(self, stablecoin_index: int) -> Optional[ApySnapshot]:
        data = await self._get(f"/stablecoins/{stablecoin_index}/apy")
        return _parse_apy(data) if data else None

    async def historical_apy(self, stablecoin_index: int, days: int) -> list[ApySnapshot]:
        data = await self._get(
            f"/stablecoins/{stablecoin_index}/apy/historical",
            params={"days": days},
        )
        snapshots = [_parse_apy(item) for item in data or []]
        return sorted(snapshots, key=lambda s: s.timestamp)

    async def supply_cap(self, stablecoin_index: int) -> Optional[SupplyCap]:
        data = await self._get(f"/stablecoins/{stablecoin_index}/supply-cap")
        if not data:
            return None
        return SupplyCap.from_supply(
            stablecoin_index,
            cap=int(data["supplyCap"]),
            current_supply=int(data["currentSupply"]),
        )
