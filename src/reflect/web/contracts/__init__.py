"""Request and response contracts for the web layer.

These Pydantic models define the API interface for web clients.
Requests accept camelCase and snake_case names; responses are camelCase.
"""

from reflect.web.contracts.envelope import (
    ApiResponse,
    CamelModel,
    ErrorResponse,
    ok,
)
from reflect.web.contracts.quotes import (
    QuoteData,
    QuoteRequest,
    RateInfo,
)
from reflect.web.contracts.rates import (
    ApyData,
    ExchangeRateData,
    IntegrationConfigData,
    StablecoinInfo,
    SupplyCapData,
)
from reflect.web.contracts.transactions import (
    ClaimRequest,
    IntegrationMintRequest,
    IntegrationRedeemRequest,
    StablecoinTransactionRequest,
    TransactionData,
)

__all__ = [
    # Envelope
    "ApiResponse",
    "CamelModel",
    "ErrorResponse",
    "ok",
    # Quote contracts
    "QuoteData",
    "QuoteRequest",
    "RateInfo",
    # Read contracts
    "ApyData",
    "ExchangeRateData",
    "IntegrationConfigData",
    "StablecoinInfo",
    "SupplyCapData",
    # Transaction contracts
    "ClaimRequest",
    "IntegrationMintRequest",
    "IntegrationRedeemRequest",
    "StablecoinTransactionRequest",
    "TransactionData",
]
