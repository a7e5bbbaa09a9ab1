"""Pending request token repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from socialconnect.domain.model.request_token import PendingRequestToken


class PendingRequestTokenRepository(ABC):
    """Holds request tokens between the authorize redirect and the callback."""

    @abstractmethod
    async def save(self, pending: PendingRequestToken) -> PendingRequestToken:
        """Store a pending request token, keyed by its token value."""
        pass

    @abstractmethod
    async def pop(self, token_value: str) -> Optional[PendingRequestToken]:
        """Remove and return the pending token with the given value.

        Returns:
            The pending token if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete_expired(self, issued_before: datetime) -> int:
        """Remove pending tokens issued before the given time.

        Returns:
            Number of tokens removed
        """
        pass
