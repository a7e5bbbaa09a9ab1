"""In-memory repository implementations for testing."""

from .account_connection import InMemoryAccountConnectionRepository
from .request_token import InMemoryPendingRequestTokenRepository
from .transaction import InMemoryTransactionManager

__all__ = [
    "InMemoryAccountConnectionRepository",
    "InMemoryPendingRequestTokenRepository",
    "InMemoryTransactionManager",
]
