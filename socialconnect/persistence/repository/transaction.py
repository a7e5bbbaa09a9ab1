"""Transaction scope implementation using SQLAlchemy sessions."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from socialconnect.domain.repository.transaction import TransactionManager


class SqlAlchemyTransactionManager(TransactionManager):
    """Transaction scopes on the request's session.

    The request session usually has a transaction open already (it is
    committed at the end of the request), so scopes opened inside it become
    SAVEPOINTs.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[None]:
        if self.session.in_transaction():
            async with self.session.begin_nested():
                yield
        else:
            async with self.session.begin():
                yield
