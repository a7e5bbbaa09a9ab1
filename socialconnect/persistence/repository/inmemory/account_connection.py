"""In-memory account connection repository for testing."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from socialconnect.domain.model.account_connection import AccountConnection
from socialconnect.domain.repository.account_connection import (
    AccountConnectionRepository,
)
from socialconnect.domain.value import AccountId, ConnectionId, OAuthToken


class InMemoryAccountConnectionRepository(AccountConnectionRepository):
    """In-memory implementation of AccountConnectionRepository for testing."""

    def __init__(self) -> None:
        self._connections: dict[tuple[AccountId, str], AccountConnection] = {}

    async def add_connection(
        self,
        account_id: AccountId,
        provider: str,
        access_token: OAuthToken,
        provider_account_id: str,
        profile_url: str | None,
    ) -> AccountConnection:
        """Create the connection, or update the existing one in place."""
        now = datetime.now(timezone.utc)
        key = (account_id, provider)
        existing = self._connections.get(key)

        if existing:
            connection = existing.model_copy(
                update={
                    "access_token": access_token,
                    "provider_account_id": provider_account_id,
                    "profile_url": profile_url,
                    "updated_at": now,
                }
            )
        else:
            connection = AccountConnection(
                id=ConnectionId(uuid4()),
                account_id=account_id,
                provider=provider,
                access_token=access_token,
                provider_account_id=provider_account_id,
                profile_url=profile_url,
                created_at=now,
                updated_at=now,
            )

        self._connections[key] = connection
        return connection

    async def is_connected(self, account_id: AccountId, provider: str) -> bool:
        """Check if a connection exists."""
        return (account_id, provider) in self._connections

    async def disconnect(self, account_id: AccountId, provider: str) -> None:
        """Remove the connection, if any."""
        self._connections.pop((account_id, provider), None)

    async def get_access_token(
        self, account_id: AccountId, provider: str
    ) -> Optional[OAuthToken]:
        """Get the stored access token."""
        connection = self._connections.get((account_id, provider))
        return connection.access_token if connection else None

    async def get_account_connections(
        self, account_id: AccountId, provider: str
    ) -> list[AccountConnection]:
        """Get the account's connections to the provider."""
        connection = self._connections.get((account_id, provider))
        return [connection] if connection else []

    async def get_provider_account_id(
        self, account_id: AccountId, provider: str
    ) -> Optional[str]:
        """Get the provider-side account id."""
        connection = self._connections.get((account_id, provider))
        return connection.provider_account_id if connection else None
