"""Quote request and response contracts."""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field, StrictInt

from reflect.core.models import OperationRequest, Quote
from reflect.web.contracts.envelope import CamelModel


class QuoteRequest(BaseModel):
    """Request for a mint, redeem or burn quote.

    Fields are optional at this level so that missing or non-positive values
    reach the validation layer and get its error messages.
    """

    stablecoin_index: Optional[StrictInt] = Field(
        None,
        validation_alias=AliasChoices("stablecoinIndex", "stablecoin_index", "asset"),
        description="Index of the stablecoin (0 = USDC+)",
    )
    deposit_amount: Optional[StrictInt] = Field(
        None,
        validation_alias=AliasChoices("depositAmount", "deposit_amount", "amount"),
        description="Amount in the smallest unit; must be positive",
    )
    operation: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("operation", "type"),
        description="mint, redeem or burn",
    )

    def to_operation_request(self) -> OperationRequest:
        return OperationRequest(
            stablecoin_index=self.stablecoin_index,
            amount=self.deposit_amount,
            operation=self.operation,
        )


class RateInfo(CamelModel):
    """Exchange rate a quote was computed at."""

    base_value_bps: int
    receipt_value_bps: int
    timestamp: datetime


class QuoteData(CamelModel):
    """Quote details."""

    stablecoin_index: int
    operation: str
    gross: int = Field(..., description="Requested amount")
    fee: int = Field(..., description="Fee in the smallest unit")
    net: int = Field(..., description="Amount after fee")
    fee_bps: int
    rate: RateInfo

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteData":
        return cls(
            stablecoin_index=quote.stablecoin_index,
            operation=quote.operation.value,
            gross=quote.gross,
            fee=quote.fee,
            net=quote.net,
            fee_bps=quote.fee_bps,
            rate=RateInfo(
                base_value_bps=quote.base_value_bps,
                receipt_value_bps=quote.receipt_value_bps,
                timestamp=quote.rate_timestamp,
            ),
        )
