"""In-memory pending request token repository for testing."""

from datetime import datetime
from typing import Optional

from socialconnect.domain.model.request_token import PendingRequestToken
from socialconnect.domain.repository.request_token import (
    PendingRequestTokenRepository,
)


class InMemoryPendingRequestTokenRepository(PendingRequestTokenRepository):
    """In-memory implementation of PendingRequestTokenRepository for testing."""

    def __init__(self) -> None:
        self._pending: dict[str, PendingRequestToken] = {}

    async def save(self, pending: PendingRequestToken) -> PendingRequestToken:
        """Save pending request token."""
        self._pending[pending.token.value] = pending
        return pending

    async def pop(self, token_value: str) -> Optional[PendingRequestToken]:
        """Remove and return pending request token."""
        return self._pending.pop(token_value, None)

    async def delete_expired(self, issued_before: datetime) -> int:
        """Remove pending tokens issued before the cutoff."""
        expired = [
            value
            for value, pending in self._pending.items()
            if pending.created_at < issued_before
        ]
        for value in expired:
            del self._pending[value]
        return len(expired)
