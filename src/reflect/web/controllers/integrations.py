"""Integration partner API endpoints.

Whitelabel issuers use these to prepare mint, redeem and claim transactions
for their users. Transactions are returned unsigned.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from reflect.config import Settings, get_settings
from reflect.core.models import Cluster
from reflect.web.contracts.envelope import ApiResponse, ok
from reflect.web.contracts.rates import ExchangeRateData, IntegrationConfigData
from reflect.web.contracts.transactions import (
    ClaimRequest,
    IntegrationMintRequest,
    IntegrationRedeemRequest,
    TransactionData,
)
from reflect.web.dependencies import get_rate_service, get_transaction_service
from reflect.web.services.rate_service import RateService
from reflect.web.services.transaction_service import TransactionService

router = APIRouter(prefix="/integrations", tags=["integrations"])


@router.post("/mint/tx", response_model=ApiResponse[TransactionData])
async def generate_integration_mint_tx(
    request: IntegrationMintRequest,
    cluster: Optional[Cluster] = Query(None, description="mainnet or devnet"),
    transactions: TransactionService = Depends(get_transaction_service),
):
    """Build an unsigned integration mint transaction for a recipient."""
    descriptor = await transactions.build_operation(request.to_operation_request(), cluster)
    return ok(TransactionData.from_descriptor(descriptor))


@router.post("/redeem/tx", response_model=ApiResponse[TransactionData])
async def generate_redemption_tx(
    request: IntegrationRedeemRequest,
    cluster: Optional[Cluster] = Query(None, description="mainnet or devnet"),
    transactions: TransactionService = Depends(get_transaction_service),
):
    """Build an unsigned integration redemption transaction for a holder."""
    descriptor = await transactions.build_operation(request.to_operation_request(), cluster)
    return ok(TransactionData.from_descriptor(descriptor))


@router.post("/claim/tx", response_model=ApiResponse[TransactionData])
async def generate_claim_tx(
    request: ClaimRequest,
    cluster: Optional[Cluster] = Query(None, description="mainnet or devnet"),
    transactions: TransactionService = Depends(get_transaction_service),
):
    """Build an unsigned claim transaction."""
    descriptor = transactions.build_claim(request.stablecoin_index, request.claimant, cluster)
    return ok(TransactionData.from_descriptor(descriptor))


@router.get("/exchange-rate", response_model=ApiResponse[ExchangeRateData])
async def get_current_exchange_rate(
    stablecoin: int = Query(0, description="Stablecoin index"),
    rates: RateService = Depends(get_rate_service),
):
    """Current exchange rate for integration pricing."""
    return ok(ExchangeRateData.from_snapshot(await rates.current_rate(stablecoin)))


@router.get("/config", response_model=ApiResponse[IntegrationConfigData])
async def get_integration_config(settings: Settings = Depends(get_settings)):
    """Fee schedule and cluster applied to integration transactions."""
    return ok(
        IntegrationConfigData(
            fee_bps=settings.fee_bps,
            cluster=settings.cluster,
            stablecoins=settings.stablecoin_indices,
        )
    )
