"""FastAPI dependencies wiring settings, provider and services.

Tests swap the provider through ``app.dependency_overrides[get_rate_provider]``.
"""

from fastapi import Depends

from reflect.config import Settings, get_settings
from reflect.core.assets import AssetRegistry
from reflect.providers.base import RateProvider
from reflect.providers.factory import get_rate_provider
from reflect.web.services.quote_service import QuoteService
from reflect.web.services.rate_service import RateService
from reflect.web.services.transaction_service import TransactionService


def get_asset_registry(settings: Settings = Depends(get_settings)) -> AssetRegistry:
    return AssetRegistry.from_indices(settings.stablecoin_indices)


def get_rate_service(
    provider: RateProvider = Depends(get_rate_provider),
    registry: AssetRegistry = Depends(get_asset_registry),
    settings: Settings = Depends(get_settings),
) -> RateService:
    return RateService(
        provider,
        registry,
        timeout=settings.provider_timeout_seconds,
        max_history_days=settings.max_history_days,
    )


def get_quote_service(
    rates: RateService = Depends(get_rate_service),
    registry: AssetRegistry = Depends(get_asset_registry),
    settings: Settings = Depends(get_settings),
) -> QuoteService:
    return QuoteService(rates, registry, fee_bps=settings.fee_bps)


def get_transaction_service(
    quotes: QuoteService = Depends(get_quote_service),
    registry: AssetRegistry = Depends(get_asset_registry),
    settings: Settings = Depends(get_settings),
) -> TransactionService:
    return TransactionService(quotes, registry, default_cluster=settings.cluster)
