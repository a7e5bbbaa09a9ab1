"""Pending request token entity."""

from datetime import datetime, timedelta, timezone

from pydantic import Field

from socialconnect.domain.model.common import DomainModel
from socialconnect.domain.value import AccountId, OAuthToken


class PendingRequestToken(DomainModel):
    """Request token issued to an account, awaiting the provider callback.

    The secret never leaves the server; the callback only carries the
    token value and verifier, so the secret is looked up here.
    """

    account_id: AccountId
    provider: str
    token: OAuthToken
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def is_expired(self, ttl: timedelta, now: datetime | None = None) -> bool:
        """Whether the user took longer than ``ttl`` to come back."""
        return self.created_at + ttl <= (now or datetime.now(timezone.utc))
