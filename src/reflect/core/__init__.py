"""Pure quote and transaction-construction logic.

Nothing in this package performs I/O. Rates are passed in by the caller; see
reflect.providers for where they come from.
"""

from reflect.core.assets import AssetRegistry, KNOWN_STABLECOINS
from reflect.core.builder import TransactionBuilder
from reflect.core.engine import DEFAULT_FEE_BPS, check_minimum_received, compute_quote
from reflect.core.models import (
    ApySnapshot,
    Asset,
    Cluster,
    ExchangeRateSnapshot,
    OperationKind,
    OperationRequest,
    Quote,
    SupplyCap,
    TransactionDescriptor,
    ValidatedRequest,
)
from reflect.core.validation import parse_operation, validate, validate_claim, validate_days

__all__ = [
    # Models
    "ApySnapshot",
    "Asset",
    "Cluster",
    "ExchangeRateSnapshot",
    "OperationKind",
    "OperationRequest",
    "Quote",
    "SupplyCap",
    "TransactionDescriptor",
    "ValidatedRequest",
    # Assets
    "AssetRegistry",
    "KNOWN_STABLECOINS",
    # Validation
    "parse_operation",
    "validate",
    "validate_claim",
    "validate_days",
    # Quoting
    "DEFAULT_FEE_BPS",
    "check_minimum_received",
    "compute_quote",
    # Building
    "TransactionBuilder",
]
