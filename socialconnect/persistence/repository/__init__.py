"""PostgreSQL repository implementations."""

from socialconnect.persistence.repository.account_connection import (
    PostgresAccountConnectionRepository,
)
from socialconnect.persistence.repository.request_token import (
    PostgresPendingRequestTokenRepository,
)
from socialconnect.persistence.repository.transaction import (
    SqlAlchemyTransactionManager,
)

__all__ = [
    "PostgresAccountConnectionRepository",
    "PostgresPendingRequestTokenRepository",
    "SqlAlchemyTransactionManager",
]
