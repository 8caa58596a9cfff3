"""Rate, APY and supply-cap providers."""

from reflect.providers.base import RateProvider
from reflect.providers.factory import get_rate_provider, reset_rate_provider
from reflect.providers.http import HttpRateProvider
from reflect.providers.memory import InMemoryRateProvider

__all__ = [
    "RateProvider",
    "HttpRateProvider",
    "InMemoryRateProvider",
    "get_rate_provider",
    "reset_rate_provider",
]
