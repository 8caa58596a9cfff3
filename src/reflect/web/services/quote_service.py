"""Quote service for mint, redeem and burn quotes.

This service computes quotes but does NOT build or execute transactions.
"""

import logging

from reflect.core.assets import AssetRegistry
from reflect.core.engine import DEFAULT_FEE_BPS, compute_quote
from reflect.core.models import OperationRequest, Quote, ValidatedRequest
from reflect.core.validation import validate
from reflect.web.services.rate_service import RateService

logger = logging.getLogger(__name__)


class QuoteService:
    """Service for computing fee quotes against the current exchange rate."""

    def __init__(
        self,
        rates: RateService,
        registry: AssetRegistry,
        fee_bps: int = DEFAULT_FEE_BPS,
    ):
        self.rates = rates
        self.registry = registry
        self.fee_bps = fee_bps

    async def quote_validated(self, request: ValidatedRequest) -> Quote:
        """Quote an already validated request.

        Raises:
            UpstreamUnavailable: rate could not be fetched
        """
        rate = await self.rates.current_rate(request.asset.index)
        quote = compute_quote(request, rate, self.fee_bps)
        logger.info(
            f"Quote {quote.operation.value} {quote.gross} of {request.asset.symbol}: "
            f"fee {quote.fee}, net {quote.net} ({self.fee_bps} bps)"
        )
        return quote

    async def get_quote(self, request: OperationRequest) -> Quote:
        """Validate and quote a request.

        Args:
            request: Decoded quote request

        Returns:
            Quote

        Raises:
            ReflectError: validation failure or upstream failure
        """
        validated = validate(request, self.registry)
        return await self.quote_validated(validated)
