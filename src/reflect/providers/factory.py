"""Provider factory for creating the rate provider."""

import logging

from reflect.config import get_settings
from reflect.providers.base import RateProvider
from reflect.providers.http import HttpRateProvider
from reflect.providers.memory import InMemoryRateProvider

logger = logging.getLogger(__name__)

# Singleton instance
_provider_instance: RateProvider | None = None


def get_rate_provider() -> RateProvider:
    """Get the configured rate provider.

    Provider is selected based on RATE_PROVIDER environment variable:
    - memory (default): deterministic in-memory data
    - http: upstream protocol data API at RATE_API_URL

    Returns:
        Configured RateProvider instance
    """
    global _provider_instance

    if _provider_instance is not None:
        return _provider_instance

    settings = get_settings()
    provider_name = settings.rate_provider.lower()

    if provider_name == "http":
        _provider_instance = HttpRateProvider(
            base_url=settings.rate_api_url,
            api_key=settings.rate_api_key,
            timeout=settings.provider_timeout_seconds,
        )
    else:
        if provider_name != "memory":
            logger.warning(f"Unknown RATE_PROVIDER '{provider_name}', using memory")
        _provider_instance = InMemoryRateProvider()

    logger.info(f"Rate provider: {_provider_instance.name}")
    return _provider_instance


def reset_rate_provider() -> None:
    """Reset provider instance (useful for testing)."""
    global _provider_instance
    _provider_instance = None
