"""HTTP controllers for web API endpoints.

SECURITY: These controllers MUST NOT:
- Access private keys
- Sign or broadcast transactions

All operations are read-only or prepare data for client-side signing.
"""

from reflect.web.controllers.integrations import router as integrations_router
from reflect.web.controllers.stablecoins import router as stablecoins_router

__all__ = [
    "integrations_router",
    "stablecoins_router",
]
