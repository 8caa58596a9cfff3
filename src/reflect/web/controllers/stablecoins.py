"""Stablecoin API endpoints: quotes, transactions, rates, APY, supply caps.

Transaction endpoints prepare unsigned transactions for client-side signing.
NO signing or broadcasting happens server-side.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from reflect.core.assets import AssetRegistry
from reflect.core.models import Cluster, OperationKind
from reflect.web.contracts.envelope import ApiResponse, ok
from reflect.web.contracts.quotes import QuoteData, QuoteRequest
from reflect.web.contracts.rates import (
    ApyData,
    ExchangeRateData,
    StablecoinInfo,
    SupplyCapData,
)
from reflect.web.contracts.transactions import StablecoinTransactionRequest, TransactionData
from reflect.web.dependencies import (
    get_asset_registry,
    get_quote_service,
    get_rate_service,
    get_transaction_service,
)
from reflect.web.services.quote_service import QuoteService
from reflect.web.services.rate_service import RateService
from reflect.web.services.transaction_service import TransactionService

router = APIRouter(prefix="/stablecoins", tags=["stablecoins"])

DEFAULT_RATE_HISTORY_DAYS = 7
DEFAULT_APY_HISTORY_DAYS = 365


@router.get("", response_model=ApiResponse[list[StablecoinInfo]])
async def get_available_stablecoins(
    registry: AssetRegistry = Depends(get_asset_registry),
):
    """Get list of enabled stablecoins."""
    return ok([StablecoinInfo.from_asset(asset) for asset in registry.enabled()])


@router.post("/quote", response_model=ApiResponse[QuoteData])
async def get_mint_redeem_quote(
    request: QuoteRequest,
    quotes: QuoteService = Depends(get_quote_service),
):
    """Get a mint, redeem or burn quote.

    This is a READ-ONLY operation - no transactions are built.
    """
    quote = await quotes.get_quote(request.to_operation_request())
    return ok(QuoteData.from_quote(quote))


@router.post("/mint/tx", response_model=ApiResponse[TransactionData])
async def generate_mint_transaction(
    request: StablecoinTransactionRequest,
    cluster: Optional[Cluster] = Query(None, description="mainnet or devnet"),
    transactions: TransactionService = Depends(get_transaction_service),
):
    """Build an unsigned mint transaction.

    The client must sign and broadcast the returned transaction.
    """
    descriptor = await transactions.build_operation(
        request.to_operation_request(OperationKind.MINT), cluster
    )
    return ok(TransactionData.from_descriptor(descriptor))


@router.post("/burn/tx", response_model=ApiResponse[TransactionData])
async def generate_burn_transaction(
    request: StablecoinTransactionRequest,
    cluster: Optional[Cluster] = Query(None, description="mainnet or devnet"),
    transactions: TransactionService = Depends(get_transaction_service),
):
    """Build an unsigned burn transaction."""
    descriptor = await transactions.build_operation(
        request.to_operation_request(OperationKind.BURN), cluster
    )
    return ok(TransactionData.from_descriptor(descriptor))


@router.get("/exchange-rates", response_model=ApiResponse[list[ExchangeRateData]])
async def get_latest_exchange_rates(rates: RateService = Depends(get_rate_service)):
    """Latest exchange rate of every enabled stablecoin."""
    snapshots = await rates.all_rates()
    return ok([ExchangeRateData.from_snapshot(s) for s in snapshots])


@router.get("/apy", response_model=ApiResponse[list[ApyData]])
async def get_all_apy(rates: RateService = Depends(get_rate_service)):
    """Current APY of every enabled stablecoin."""
    snapshots = await rates.all_apy()
    return ok([ApyData.from_snapshot(s) for s in snapshots])


@router.get("/supply-caps", response_model=ApiResponse[list[SupplyCapData]])
async def get_supply_caps(rates: RateService = Depends(get_rate_service)):
    """Supply cap of every enabled stablecoin."""
    caps = await rates.all_supply_caps()
    return ok([SupplyCapData.from_supply_cap(c) for c in caps])


@router.get("/{index}/exchange-rate", response_model=ApiResponse[ExchangeRateData])
async def get_exchange_rate(index: int, rates: RateService = Depends(get_rate_service)):
    """Current exchange rate of one stablecoin."""
    return ok(ExchangeRateData.from_snapshot(await rates.current_rate(index)))


@router.get(
    "/{index}/exchange-rates/historical",
    response_model=ApiResponse[list[ExchangeRateData]],
)
async def get_historical_exchange_rates(
    index: int,
    days: int = Query(DEFAULT_RATE_HISTORY_DAYS, description="Days of history"),
    rates: RateService = Depends(get_rate_service),
):
    """Exchange rates of the last ``days`` days, newest last."""
    snapshots = await rates.historical_rates(index, days)
    return ok([ExchangeRateData.from_snapshot(s) for s in snapshots])


@router.get("/{index}/apy", response_model=ApiResponse[ApyData])
async def get_specific_apy(index: int, rates: RateService = Depends(get_rate_service)):
    """Current APY of one stablecoin."""
    return ok(ApyData.from_snapshot(await rates.current_apy(index)))


@router.get("/{index}/apy/historical", response_model=ApiResponse[list[ApyData]])
async def get_historical_apy(
    index: int,
    days: int = Query(DEFAULT_APY_HISTORY_DAYS, description="Days of history"),
    rates: RateService = Depends(get_rate_service),
):
    """APY snapshots of the last ``days`` days, newest last."""
    snapshots = await rates.historical_apy(index, days)
    return ok([ApyData.from_snapshot(s) for s in snapshots])


@router.get("/{index}/supply-cap", response_model=ApiResponse[SupplyCapData])
async def get_supply_cap(index: int, rates: RateService = Depends(get_rate_service)):
    """Supply cap of one stablecoin."""
    return ok(SupplyCapData.from_supply_cap(await rates.supply_cap(index)))
