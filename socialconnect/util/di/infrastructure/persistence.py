"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from socialconnect.config import Settings
from socialconnect.domain.repository import (
    AccountConnectionRepository,
    PendingRequestTokenRepository,
    TransactionManager,
)
from socialconnect.persistence.database import create_engine, create_session_factory
from socialconnect.persistence.repository import (
    PostgresAccountConnectionRepository,
    PostgresPendingRequestTokenRepository,
    SqlAlchemyTransactionManager,
)
from socialconnect.util.di.base import ProviderBase
from socialconnect.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_account_connection_repository(
        self, session: AsyncSession
    ) -> AccountConnectionRepository:
        """Provide AccountConnection repository."""
        return PostgresAccountConnectionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_pending_request_token_repository(
        self, session: AsyncSession
    ) -> PendingRequestTokenRepository:
        """Provide PendingRequestToken repository."""
        return PostgresPendingRequestTokenRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        """Provide transaction manager on the request session."""
        return SqlAlchemyTransactionManager(session)
