"""Transaction service: validate, quote and build unsigned descriptors.

NO signing or broadcasting happens here - clients sign and broadcast.
"""

import logging
from typing import Optional

from pydantic.alias_generators import to_snake

from reflect.core.assets import AssetRegistry
from reflect.core.builder import TransactionBuilder
from reflect.core.engine import check_minimum_received
from reflect.core.models import Cluster, OperationRequest, TransactionDescriptor
from reflect.core.validation import validate, validate_claim
from reflect.web.services.quote_service import QuoteService

logger = logging.getLogger(__name__)


class TransactionService:
    """Prepares unsigned mint, redeem, burn and claim transactions."""

    def __init__(
        self,
        quotes: QuoteService,
        registry: AssetRegistry,
        default_cluster: Cluster = Cluster.MAINNET,
    ):
        self.quotes = quotes
        self.registry = registry
        self.default_cluster = Cluster(default_cluster)

    def _builder(self, cluster: Optional[Cluster]) -> TransactionBuilder:
        return TransactionBuilder(cluster or self.default_cluster)

    async def build_operation(
        self,
        request: OperationRequest,
        cluster: Optional[Cluster] = None,
    ) -> TransactionDescriptor:
        """Build a mint, redeem or burn descriptor.

        The request is validated and quoted first; a quote whose net amount
        falls below ``minimumReceived`` is rejected.

        Raises:
            ReflectError: validation, slippage or upstream failure
        """
        validated = validate(request, self.registry)
        quote = await self.quotes.quote_validated(validated)
        check_minimum_received(quote, validated.minimum_received)

        parties = {to_snake(name): value for name, value in validated.params.items()}
        descriptor = self._builder(cluster).build(quote, validated.operation, parties)
        logger.info(
            f"Prepared {descriptor.instruction} for stablecoin {quote.stablecoin_index} "
            f"on {descriptor.cluster.value}"
        )
        return descriptor

    def build_claim(
        self,
        stablecoin_index: Optional[int],
        claimant: Optional[str],
        cluster: Optional[Cluster] = None,
    ) -> TransactionDescriptor:
        """Build an integration claim descriptor.

        Raises:
            AssetNotFound: unknown stablecoin index
            MissingField: claimant absent
        """
        asset, claimant = validate_claim(stablecoin_index, claimant, self.registry)
        return self._builder(cluster).build_claim(asset.index, claimant)
