"""Pytest configuration and fixtures."""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ["RATE_PROVIDER"] = "memory"
os.environ["FEE_BPS"] = "10"
os.environ["CLUSTER"] = "mainnet"
os.environ["ENABLED_STABLECOINS"] = "0"

from reflect.api.app import create_app
from reflect.config import get_settings
from reflect.core.assets import AssetRegistry
from reflect.providers.factory import get_rate_provider, reset_rate_provider
from reflect.providers.memory import InMemoryRateProvider
from reflect.web.services.quote_service import QuoteService
from reflect.web.services.rate_service import RateService
from reflect.web.services.transaction_service import TransactionService


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings and provider singleton for every test."""
    get_settings.cache_clear()
    reset_rate_provider()
    yield
    get_settings.cache_clear()
    reset_rate_provider()


@pytest.fixture
def registry() -> AssetRegistry:
    return AssetRegistry.from_indices([0])


@pytest.fixture
def provider() -> InMemoryRateProvider:
    return InMemoryRateProvider()


@pytest.fixture
def rate_service(provider, registry) -> RateService:
    return RateService(provider, registry, timeout=1.0, max_history_days=365)


@pytest.fixture
def quote_service(rate_service, registry) -> QuoteService:
    return QuoteService(rate_service, registry, fee_bps=10)


@pytest.fixture
def transaction_service(quote_service, registry) -> TransactionService:
    return TransactionService(quote_service, registry)


@pytest.fixture
def test_app(provider):
    """Create test application backed by the given provider."""
    app = create_app()
    app.dependency_overrides[get_rate_provider] = lambda: provider
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
