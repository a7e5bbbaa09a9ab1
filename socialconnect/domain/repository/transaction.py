"""Transaction scope interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Opens an explicit transaction scope around a unit of work.

    The scope is released on every exit path: committed when the block
    completes, rolled back when it raises.
    """

    @abstractmethod
    def begin(self) -> AbstractAsyncContextManager[None]:
        """Open a transaction scope.

        Usage:
            async with transactions.begin():
                ...
        """
        pass
