"""Repository interfaces for provider connections.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from socialconnect.domain.repository.account_connection import (
    AccountConnectionRepository,
)
from socialconnect.domain.repository.request_token import (
    PendingRequestTokenRepository,
)
from socialconnect.domain.repository.transaction import TransactionManager

__all__ = [
    "AccountConnectionRepository",
    "PendingRequestTokenRepository",
    "TransactionManager",
]
