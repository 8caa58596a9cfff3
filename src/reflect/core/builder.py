"""Transaction builder for preparing unsigned operation descriptors.

This module builds descriptors for client-side signing.
NO signing or broadcasting happens here - this is non-custodial.
"""

import logging
from typing import Any, Mapping, Optional

from reflect.core.models import Cluster, OperationKind, Quote, TransactionDescriptor
from reflect.errors import UnsupportedOperation

logger = logging.getLogger(__name__)


# Program instruction per operation
INSTRUCTIONS: dict[OperationKind, str] = {
    OperationKind.MINT: "mint_stablecoin",
    OperationKind.REDEEM: "redeem_stablecoin",
    OperationKind.BURN: "burn_stablecoin",
}
CLAIM_INSTRUCTION = "claim_rewards"


class TransactionBuilder:
    """Builds unsigned transaction descriptors.

    This builder NEVER:
    - Accesses private keys
    - Signs transactions
    - Broadcasts transactions

    It holds no state besides the target cluster; every descriptor it returns
    is owned by the caller.
    """

    def __init__(self, cluster: Cluster = Cluster.MAINNET):
        self.cluster = Cluster(cluster)

    def build(
        self,
        quote: Quote,
        operation: Any,
        parties: Optional[Mapping[str, Any]] = None,
    ) -> TransactionDescriptor:
        """Build a descriptor for an accepted quote.

        Args:
            quote: Accepted quote
            operation: Operation kind (mint, redeem, burn)
            parties: Signer/recipient/holder and other operation parameters

        Returns:
            TransactionDescriptor for the client to sign

        Raises:
            UnsupportedOperation: operation has no instruction
        """
        # Re-checked here: new operation kinds may reach the builder
        # before validation knows about them.
        instruction = INSTRUCTIONS.get(operation) if isinstance(operation, OperationKind) else None
        if instruction is None:
            logger.warning(f"Refusing to build descriptor for operation {operation!r}")
            raise UnsupportedOperation(operation)

        payload = {
            "stablecoin_index": quote.stablecoin_index,
            "amount": quote.gross,
            "fee": quote.fee,
            "expected_amount": quote.net,
            "fee_bps": quote.fee_bps,
            "base_value_bps": quote.base_value_bps,
            "receipt_value_bps": quote.receipt_value_bps,
        }
        for name, value in sorted((parties or {}).items()):
            if value is not None:
                payload[name] = value

        descriptor = TransactionDescriptor(
            operation=operation.value,
            instruction=instruction,
            cluster=self.cluster,
            payload=payload,
            description=(
                f"{operation.value.capitalize()} {quote.gross} units of stablecoin "
                f"{quote.stablecoin_index} (fee {quote.fee}, expected {quote.net})"
            ),
        )
        logger.debug(f"Built {instruction} descriptor on {self.cluster.value}")
        return descriptor

    def build_claim(self, stablecoin_index: int, claimant: str) -> TransactionDescriptor:
        """Build an integration claim descriptor.

        Args:
            stablecoin_index: Stablecoin whose rewards are claimed
            claimant: Claimant wallet address

        Returns:
            TransactionDescriptor for the client to sign
        """
        return TransactionDescriptor(
            operation="claim",
            instruction=CLAIM_INSTRUCTION,
            cluster=self.cluster,
            payload={"stablecoin_index": stablecoin_index, "claimant": claimant},
            description=f"Claim rewards of stablecoin {stablecoin_index} for {claimant[:10]}...",
        )
