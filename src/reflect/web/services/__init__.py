"""Web services orchestrating validation, providers and the quote engine.

SECURITY: These services MUST NOT:
- Access private keys
- Sign or broadcast transactions

These services CAN:
- Query rate, APY and supply data from the configured provider
- Compute quotes
- Prepare unsigned transactions for client signing
"""

from reflect.web.services.quote_service import QuoteService
from reflect.web.services.rate_service import RateService
from reflect.web.services.transaction_service import TransactionService

__all__ = [
    "QuoteService",
    "RateService",
    "TransactionService",
]
