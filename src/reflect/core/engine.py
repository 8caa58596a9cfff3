"""Quote engine: fee computation for mint, redeem and burn."""

from typing import Optional

from reflect.core.models import (
    BPS_DENOMINATOR,
    ExchangeRateSnapshot,
    Quote,
    ValidatedRequest,
)
from reflect.errors import InvalidAmount

DEFAULT_FEE_BPS = 10  # 0.1%


def compute_fee(amount: int, fee_bps: int = DEFAULT_FEE_BPS) -> int:
    """Fee for an amount, rounded down to the smallest unit."""
    return amount * fee_bps // BPS_DENOMINATOR


def compute_quote(
    request: ValidatedRequest,
    rate: ExchangeRateSnapshot,
    fee_bps: int = DEFAULT_FEE_BPS,
) -> Quote:
    """Compute a quote for a validated request.

    Mint, redeem and burn share one formula: ``fee = floor(amount * fee_bps /
    10000)`` and ``net = amount - fee``. The rate snapshot is recorded on the
    quote but does not enter the arithmetic.

    Args:
        request: Validated operation request
        rate: Current exchange rate of the asset
        fee_bps: Fee schedule in basis points

    Returns:
        Quote
    """
    fee = compute_fee(request.amount, fee_bps)
    return Quote(
        stablecoin_index=request.asset.index,
        operation=request.operation,
        gross=request.amount,
        fee=fee,
        net=request.amount - fee,
        fee_bps=fee_bps,
        base_value_bps=rate.base_value_bps,
        receipt_value_bps=rate.receipt_value_bps,
        rate_timestamp=rate.timestamp,
    )


def check_minimum_received(quote: Quote, minimum_received: Optional[int]) -> None:
    """Reject a quote whose net amount is below the caller's slippage bound.

    Raises:
        InvalidAmount: quote.net < minimum_received
    """
    if minimum_received is not None and quote.net < minimum_received:
        raise InvalidAmount("minimumReceived", "exceeds quoted amount")
