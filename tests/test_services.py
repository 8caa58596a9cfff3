"""Tests for rate, quote and transaction services."""

import asyncio
from typing import Optional

import pytest

from reflect.core.assets import AssetRegistry
from reflect.core.models import (
    Asset,
    Cluster,
    OperationKind,
    OperationRequest,
    SupplyCap,
    TransactionDescriptor,
)
from reflect.errors import (
    AssetNotFound,
    InvalidAmount,
    InvalidRange,
    MissingField,
    UpstreamUnavailable,
)
from reflect.providers.memory import InMemoryRateProvider
from reflect.web.services.quote_service import QuoteService
from reflect.web.services.rate_service import RateService


class BrokenProvider(InMemoryRateProvider):
    """Provider whose rate lookups raise."""

    async def current_rate(self, stablecoin_index: int):
        raise ConnectionError("connection refused")


class SlowProvider(InMemoryRateProvider):
    """Provider whose APY lookups never finish in time."""

    async def current_apy(self, stablecoin_index: int):
        await asyncio.sleep(5)
        return None


class ForgetfulProvider(InMemoryRateProvider):
    """Provider that knows no supply caps."""

    async def supply_cap(self, stablecoin_index: int) -> Optional[SupplyCap]:
        return None


class HalfDownProvider(InMemoryRateProvider):
    """Provider failing for index 0 while index 1 hangs."""

    def __init__(self):
        super().__init__()
        self.cancelled = False

    async def current_rate(self, stablecoin_index: int):
        if stablecoin_index == 0:
            raise ConnectionError("connection refused")
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            self.cancelled = True
            raise


class TestRateService:
    """Tests for RateService."""

    @pytest.mark.asyncio
    async def test_current_rate(self, rate_service):
        rate = await rate_service.current_rate(0)

        assert rate.id == 105511
        assert rate.base_value_bps == 1016789908

    @pytest.mark.asyncio
    async def test_historical_rates_newest_last(self, rate_service):
        rates = await rate_service.historical_rates(0, days=7)

        assert [r.id for r in rates] == [104135, 104137, 105511]
        assert rates == sorted(rates, key=lambda r: r.timestamp)

    @pytest.mark.asyncio
    async def test_historical_rates_zero_days(self, rate_service):
        with pytest.raises(InvalidRange):
            await rate_service.historical_rates(0, days=0)

    @pytest.mark.asyncio
    async def test_historical_rates_too_many_days(self, rate_service):
        with pytest.raises(InvalidRange):
            await rate_service.historical_rates(0, days=366)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("days", [0, -1, 366])
    async def test_historical_apy_out_of_range(self, rate_service, days):
        with pytest.raises(InvalidRange):
            await rate_service.historical_apy(0, days=days)

    @pytest.mark.asyncio
    async def test_historical_apy_window(self, provider, registry):
        service = RateService(provider, registry, max_history_days=365 * 3)

        recent = await service.historical_apy(0, days=365)
        everything = await service.historical_apy(0, days=365 * 3)

        assert [s.apy_bps for s in recent] == [224]
        assert [s.apy_bps for s in everything] == [525, 224]

    @pytest.mark.asyncio
    async def test_supply_cap_invariant(self, rate_service):
        cap = await rate_service.supply_cap(0)

        assert cap.remaining + cap.current_supply == cap.cap
        assert 0 <= cap.utilization_percent <= 100

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "query",
        ["current_rate", "current_apy", "supply_cap"],
    )
    async def test_unknown_asset(self, rate_service, query):
        with pytest.raises(AssetNotFound):
            await getattr(rate_service, query)(99)

    @pytest.mark.asyncio
    async def test_unknown_asset_checked_before_range(self, rate_service):
        with pytest.raises(AssetNotFound):
            await rate_service.historical_rates(99, days=0)

    @pytest.mark.asyncio
    async def test_provider_error_is_upstream_unavailable(self, registry):
        service = RateService(BrokenProvider(), registry)

        with pytest.raises(UpstreamUnavailable) as exc_info:
            await service.current_rate(0)

        assert "connection refused" not in exc_info.value.message
        assert exc_info.value.http_status == 500

    @pytest.mark.asyncio
    async def test_provider_timeout_is_upstream_unavailable(self, registry):
        service = RateService(SlowProvider(), registry, timeout=0.05)

        with pytest.raises(UpstreamUnavailable):
            await service.current_apy(0)

    @pytest.mark.asyncio
    async def test_inconsistent_supply_is_upstream_unavailable(self, registry):
        provider = InMemoryRateProvider(supply={0: (100, 150)})
        service = RateService(provider, registry)

        with pytest.raises(UpstreamUnavailable):
            await service.supply_cap(0)

    @pytest.mark.asyncio
    async def test_provider_missing_enabled_asset(self, registry):
        service = RateService(InMemoryRateProvider(rates={}), registry)

        with pytest.raises(AssetNotFound):
            await service.current_rate(0)

    @pytest.mark.asyncio
    async def test_all_supply_caps(self, rate_service):
        caps = await rate_service.all_supply_caps()

        assert [c.stablecoin_index for c in caps] == [0]

    @pytest.mark.asyncio
    async def test_all_rates_cancels_pending_lookups(self):
        provider = HalfDownProvider()
        registry = AssetRegistry(
            [
                Asset(index=0, symbol="USDC+", name="USDC+"),
                Asset(index=1, symbol="USDT+", name="USDT+"),
            ]
        )
        service = RateService(provider, registry, timeout=10.0)

        with pytest.raises(UpstreamUnavailable):
            await service.all_rates()

        assert provider.cancelled is True

    @pytest.mark.asyncio
    async def test_all_supply_caps_missing_upstream(self, registry):
        service = RateService(ForgetfulProvider(), registry)

        with pytest.raises(UpstreamUnavailable):
            await service.all_supply_caps()


class TestQuoteService:
    """Tests for QuoteService."""

    @pytest.mark.asyncio
    async def test_get_quote(self, quote_service):
        quote = await quote_service.get_quote(
            OperationRequest(stablecoin_index=0, amount=1_000_000, operation="mint")
        )

        assert quote.fee == 1000
        assert quote.net == 999000
        assert quote.base_value_bps == 1016789908

    @pytest.mark.asyncio
    async def test_invalid_amount_never_reaches_provider(self, registry):
        service = QuoteService(RateService(BrokenProvider(), registry), registry)

        with pytest.raises(InvalidAmount):
            await service.get_quote(
                OperationRequest(stablecoin_index=0, amount=-100, operation="mint")
            )

    @pytest.mark.asyncio
    async def test_upstream_failure(self, registry):
        service = QuoteService(RateService(BrokenProvider(), registry), registry)

        with pytest.raises(UpstreamUnavailable):
            await service.get_quote(
                OperationRequest(stablecoin_index=0, amount=100, operation="redeem")
            )

    @pytest.mark.asyncio
    async def test_idempotent(self, quote_service):
        request = OperationRequest(stablecoin_index=0, amount=31_337, operation="burn")

        assert await quote_service.get_quote(request) == await quote_service.get_quote(request)


class TestTransactionService:
    """Tests for TransactionService."""

    def mint_request(self, **params) -> OperationRequest:
        defaults = {"signer": "wallet", "minimumReceived": 999000}
        defaults.update(params)
        return OperationRequest(
            stablecoin_index=0,
            amount=1_000_000,
            operation=OperationKind.MINT.value,
            params=defaults,
            required=("signer", "minimumReceived"),
        )

    @pytest.mark.asyncio
    async def test_build_mint(self, transaction_service):
        descriptor = await transaction_service.build_operation(self.mint_request())

        assert descriptor.instruction == "mint_stablecoin"
        assert descriptor.cluster is Cluster.MAINNET
        assert descriptor.payload["signer"] == "wallet"
        assert descriptor.payload["minimum_received"] == 999000
        assert descriptor.payload["expected_amount"] == 999000

    @pytest.mark.asyncio
    async def test_cluster_override(self, transaction_service):
        descriptor = await transaction_service.build_operation(
            self.mint_request(), Cluster.DEVNET
        )

        decoded = TransactionDescriptor.decode(descriptor.encode())
        assert decoded.cluster is Cluster.DEVNET

    @pytest.mark.asyncio
    async def test_slippage_rejected(self, transaction_service):
        with pytest.raises(InvalidAmount, match="minimumReceived"):
            await transaction_service.build_operation(self.mint_request(minimumReceived=999001))

    @pytest.mark.asyncio
    async def test_missing_signer(self, transaction_service):
        with pytest.raises(MissingField, match="signer"):
            await transaction_service.build_operation(self.mint_request(signer=None))

    @pytest.mark.asyncio
    async def test_descriptor_is_deterministic(self, transaction_service):
        first = await transaction_service.build_operation(self.mint_request())
        second = await transaction_service.build_operation(self.mint_request())

        assert first.encode() == second.encode()

    def test_build_claim(self, transaction_service):
        descriptor = transaction_service.build_claim(0, "claimant")

        assert descriptor.instruction == "claim_rewards"

    def test_build_claim_unknown_asset(self, transaction_service):
        with pytest.raises(AssetNotFound):
            transaction_service.build_claim(5, "claimant")
