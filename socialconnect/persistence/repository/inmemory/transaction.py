"""In-memory transaction manager for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from socialconnect.domain.repository.transaction import TransactionManager


class InMemoryTransactionManager(TransactionManager):
    """Records transaction scopes instead of talking to a database."""

    def __init__(self) -> None:
        self.active = 0
        self.committed = 0
        self.rolled_back = 0

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[None]:
        self.active += 1
        try:
            yield
        except BaseException:
            self.rolled_back += 1
            raise
        else:
            self.committed += 1
        finally:
            self.active -= 1
