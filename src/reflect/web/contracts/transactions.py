"""Transaction contracts for non-custodial operations.

These contracts define unsigned transactions that clients sign locally.
NO signing or broadcasting happens server-side.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field, StrictInt

from reflect.core.models import OperationKind, OperationRequest, TransactionDescriptor
from reflect.web.contracts.envelope import CamelModel


class StablecoinTransactionRequest(BaseModel):
    """Request to build a stablecoin mint or burn transaction.

    Accepts both camelCase and snake_case field names.
    """

    stablecoin_index: Optional[StrictInt] = Field(
        None, validation_alias=AliasChoices("stablecoinIndex", "stablecoin_index")
    )
    deposit_amount: Optional[StrictInt] = Field(
        None, validation_alias=AliasChoices("depositAmount", "deposit_amount")
    )
    signer: Optional[str] = Field(None, description="User wallet address")
    minimum_received: Optional[StrictInt] = Field(
        None,
        validation_alias=AliasChoices("minimumReceived", "minimum_received"),
        description="Minimum amount to receive (slippage protection)",
    )
    collateral_mint: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("collateralMint", "collateral_mint"),
        description="Collateral mint address",
    )

    def to_operation_request(self, operation: OperationKind) -> OperationRequest:
        return OperationRequest(
            stablecoin_index=self.stablecoin_index,
            amount=self.deposit_amount,
            operation=operation.value,
            params={
                "signer": self.signer,
                "minimumReceived": self.minimum_received,
                "collateralMint": self.collateral_mint,
            },
            required=("signer", "minimumReceived"),
        )


class IntegrationMintRequest(BaseModel):
    """Request to build an integration mint transaction."""

    stablecoin_index: Optional[StrictInt] = Field(
        0, validation_alias=AliasChoices("stablecoinIndex", "stablecoin_index")
    )
    amount: Optional[StrictInt] = Field(None, description="Amount in the smallest unit")
    recipient: Optional[str] = Field(None, description="Recipient wallet address")
    minimum_received: Optional[StrictInt] = Field(
        None, validation_alias=AliasChoices("minimumReceived", "minimum_received")
    )

    def to_operation_request(self) -> OperationRequest:
        return OperationRequest(
            stablecoin_index=self.stablecoin_index,
            amount=self.amount,
            operation=OperationKind.MINT.value,
            amount_field="amount",
            params={"recipient": self.recipient, "minimumReceived": self.minimum_received},
            required=("recipient",),
        )


class IntegrationRedeemRequest(BaseModel):
    """Request to build an integration redemption transaction."""

    stablecoin_index: Optional[StrictInt] = Field(
        0, validation_alias=AliasChoices("stablecoinIndex", "stablecoin_index")
    )
    amount: Optional[StrictInt] = Field(None, description="Amount in the smallest unit")
    holder: Optional[str] = Field(None, description="Holder wallet address")
    minimum_received: Optional[StrictInt] = Field(
        None, validation_alias=AliasChoices("minimumReceived", "minimum_received")
    )

    def to_operation_request(self) -> OperationRequest:
        return OperationRequest(
            stablecoin_index=self.stablecoin_index,
            amount=self.amount,
            operation=OperationKind.REDEEM.value,
            amount_field="amount",
            params={"holder": self.holder, "minimumReceived": self.minimum_received},
            required=("holder",),
        )


class ClaimRequest(BaseModel):
    """Request to build an integration claim transaction."""

    stablecoin_index: Optional[StrictInt] = Field(
        0, validation_alias=AliasChoices("stablecoinIndex", "stablecoin_index")
    )
    claimant: Optional[str] = Field(None, description="Claimant wallet address")


class TransactionData(CamelModel):
    """An unsigned transaction for client-side signing.

    The client is responsible for:
    1. Signing this transaction with their private key
    2. Broadcasting the signed transaction to the network
    """

    transaction: str = Field(..., description="Opaque encoded transaction")
    operation: str
    cluster: str
    description: Optional[str] = Field(None, description="Human-readable description")

    @classmethod
    def from_descriptor(cls, descriptor: TransactionDescriptor) -> "TransactionData":
        return cls(
            transaction=descriptor.encode(),
            operation=descriptor.operation,
            cluster=descriptor.cluster.value,
            description=descriptor.description,
        )
