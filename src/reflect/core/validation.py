"""Request validation for quote and transaction operations.

Rules run in a fixed order and the first failure wins:

1. amount present and > 0
2. stablecoin index present and resolves to an enabled asset
3. operation present and one of mint, redeem or burn
4. required operation parameters present and non-empty
5. minimumReceived, when given, is not negative
"""

from typing import Any, Optional

from reflect.core.assets import AssetRegistry
from reflect.core.models import Asset, OperationKind, OperationRequest, ValidatedRequest
from reflect.errors import (
    AssetNotFound,
    InvalidAmount,
    InvalidRange,
    MissingField,
    UnsupportedOperation,
)


def parse_operation(operation: Any) -> OperationKind:
    """Parse an operation name into an OperationKind.

    Raises:
        UnsupportedOperation: for anything other than mint, redeem or burn
    """
    if isinstance(operation, OperationKind):
        return operation
    if isinstance(operation, str):
        try:
            return OperationKind(operation.strip().lower())
        except ValueError:
            pass
    raise UnsupportedOperation(operation)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate(request: OperationRequest, registry: AssetRegistry) -> ValidatedRequest:
    """Validate an operation request.

    Args:
        request: Decoded request
        registry: Enabled stablecoins

    Returns:
        ValidatedRequest with the resolved asset and operation

    Raises:
        MissingField: amount, stablecoin index, operation or a required
            parameter is absent
        InvalidAmount: amount <= 0, or minimumReceived < 0
        AssetNotFound: unknown or disabled stablecoin index
        UnsupportedOperation: unknown operation name
    """
    if request.amount is None:
        raise MissingField(request.amount_field)
    if request.amount <= 0:
        raise InvalidAmount(request.amount_field)

    if request.stablecoin_index is None:
        raise MissingField("stablecoinIndex")
    asset = registry.get(request.stablecoin_index)
    if asset is None:
        raise AssetNotFound(request.stablecoin_index)

    if _is_blank(request.operation):
        raise MissingField("operation")
    operation = parse_operation(request.operation)

    for name in request.required:
        if _is_blank(request.params.get(name)):
            raise MissingField(name)

    minimum = request.params.get("minimumReceived")
    if minimum is not None and minimum < 0:
        raise InvalidAmount("minimumReceived", "must not be negative")

    params = {
        name: value.strip() if isinstance(value, str) else value
        for name, value in request.params.items()
        if not _is_blank(value)
    }

    return ValidatedRequest(
        asset=asset,
        amount=request.amount,
        operation=operation,
        params=params,
    )


def validate_claim(
    stablecoin_index: Optional[int], claimant: Optional[str], registry: AssetRegistry
) -> tuple[Asset, str]:
    """Validate a claim request (no amount involved).

    Raises:
        MissingField: stablecoin index or claimant absent
        AssetNotFound: unknown or disabled stablecoin index
    """
    if stablecoin_index is None:
        raise MissingField("stablecoinIndex")
    asset = registry.get(stablecoin_index)
    if asset is None:
        raise AssetNotFound(stablecoin_index)
    if _is_blank(claimant):
        raise MissingField("claimant")
    return asset, claimant.strip()


def validate_days(days: int, max_days: int) -> int:
    """Validate a historical range in days.

    Raises:
        InvalidRange: days < 1 or days > max_days
    """
    if days < 1:
        raise InvalidRange("days must be at least 1")
    if days > max_days:
        raise InvalidRange(f"days must not exceed {max_days}")
    return days
