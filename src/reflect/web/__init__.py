"""Web boundary layer for the quote and transaction API.

This layer CAN import from:
   - core/ (validation, quoting, descriptor building)
   - providers/ (read-only rate data)
   - config (settings)

All operations in this layer are read-only or prepare data for
client-side signing (non-custodial).
"""

__all__ = [
    "contracts",
    "services",
    "controllers",
]
