"""Mock persistence providers for testing."""

from dishka import Scope, provide

from socialconnect.domain.repository import (
    AccountConnectionRepository,
    PendingRequestTokenRepository,
    TransactionManager,
)
from socialconnect.persistence.repository.inmemory import (
    InMemoryAccountConnectionRepository,
    InMemoryPendingRequestTokenRepository,
    InMemoryTransactionManager,
)
from socialconnect.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across HTTP requests within one test.
    Each test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_account_connection_repository(self) -> AccountConnectionRepository:
        """Provide in-memory account connection repository."""
        return InMemoryAccountConnectionRepository()

    @provide(scope=Scope.APP)
    def get_pending_request_token_repository(self) -> PendingRequestTokenRepository:
        """Provide in-memory pending request token repository."""
        return InMemoryPendingRequestTokenRepository()

    @provide(scope=Scope.APP)
    def get_transaction_manager(self) -> TransactionManager:
        """Provide in-memory transaction manager."""
        return InMemoryTransactionManager()
