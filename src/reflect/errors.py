"""Error taxonomy for quote and transaction construction.

Every failure the service reports maps to one of these classes. Client errors
(400/404) carry a stable, user-facing message. Server errors (500) carry a
generic message; the underlying cause is logged, never returned.
"""

from typing import Optional

INVALID_REQUEST_PREFIX = "Invalid request data"
ASSET_NOT_FOUND_MESSAGE = "Stablecoin with the specified index not found"
UPSTREAM_UNAVAILABLE_MESSAGE = "Upstream data provider unavailable"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class ReflectError(Exception):
    """Base class for all service errors."""

    code: str = "INTERNAL"
    http_status: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def is_client_error(self) -> bool:
        return self.http_status < 500

    def to_response(self) -> dict:
        """Render the uniform error envelope."""
        return {"success": False, "message": self.message}


class InvalidAmount(ReflectError):
    """Amount is zero, negative, or violates a slippage bound."""

    code = "INVALID_AMOUNT"
    http_status = 400

    def __init__(self, field: str = "depositAmount", reason: str = "must be positive"):
        self.field = field
        super().__init__(f"{INVALID_REQUEST_PREFIX}: {field} {reason}")


class AssetNotFound(ReflectError):
    """Stablecoin index does not resolve to a known, enabled asset."""

    code = "ASSET_NOT_FOUND"
    http_status = 404

    def __init__(self, index: Optional[int] = None):
        self.index = index
        super().__init__(ASSET_NOT_FOUND_MESSAGE)


class MissingField(ReflectError):
    """A parameter required by the operation is absent or empty."""

    code = "MISSING_FIELD"
    http_status = 400

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{INVALID_REQUEST_PREFIX}: {field} is required")


class InvalidRange(ReflectError):
    """Historical range outside the accepted bounds."""

    code = "INVALID_RANGE"
    http_status = 400

    def __init__(self, reason: str = "days must be at least 1"):
        super().__init__(f"{INVALID_REQUEST_PREFIX}: {reason}")


class UnsupportedOperation(ReflectError):
    """Operation kind outside mint/redeem/burn."""

    code = "UNSUPPORTED_OPERATION"
    http_status = 400

    def __init__(self, operation: object):
        self.operation = operation
        super().__init__(f"{INVALID_REQUEST_PREFIX}: unsupported operation '{operation}'")


class UpstreamUnavailable(ReflectError):
    """Rate/APY/supply provider failed, timed out, or returned bad data."""

    code = "UPSTREAM_UNAVAILABLE"
    http_status = 500

    def __init__(self, detail: str = ""):
        # detail is for logs only
        self.detail = detail
        super().__init__(UPSTREAM_UNAVAILABLE_MESSAGE)


class InternalError(ReflectError):
    """Unexpected failure inside the service."""

    code = "INTERNAL"
    http_status = 500

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(INTERNAL_ERROR_MESSAGE)
