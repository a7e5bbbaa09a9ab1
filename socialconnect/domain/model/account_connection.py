"""Account connection entity.

Links a local account to its account on an external service provider.
"""

from datetime import datetime, timezone

from pydantic import Field

from socialconnect.domain.model.common import DomainModel
from socialconnect.domain.value import AccountId, ConnectionId, OAuthToken


def _now() -> datetime:
    return datetime.now(timezone.utc)


class AccountConnection(DomainModel):
    """Persisted link between a local account and a provider account.

    At most one connection exists per (account_id, provider). Connecting
    again replaces the token and profile data of the existing record.
    """

    id: ConnectionId
    account_id: AccountId
    provider: str
    access_token: OAuthToken
    provider_account_id: str  # Stable id on the provider (e.g. screen name)
    profile_url: str | None = None
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)
