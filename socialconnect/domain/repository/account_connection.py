"""Account connection repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from socialconnect.domain.model.account_connection import AccountConnection
from socialconnect.domain.value import AccountId, OAuthToken


class AccountConnectionRepository(ABC):
    """Repository for AccountConnection entity.

    Connections are keyed by (account_id, provider). Implementations must
    keep at most one record per key: adding a connection for a key that is
    already connected updates that record in place.
    """

    @abstractmethod
    async def add_connection(
        self,
        account_id: AccountId,
        provider: str,
        access_token: OAuthToken,
        provider_account_id: str,
        profile_url: str | None,
    ) -> AccountConnection:
        """Create the connection, or update it if one already exists.

        Args:
            account_id: Local account identifier
            provider: Provider name
            access_token: Access token granted by the provider
            provider_account_id: The account's id on the provider
            profile_url: Public profile URL on the provider

        Returns:
            The stored connection
        """
        pass

    @abstractmethod
    async def is_connected(self, account_id: AccountId, provider: str) -> bool:
        """Check whether a connection exists for the account and provider."""
        pass

    @abstractmethod
    async def disconnect(self, account_id: AccountId, provider: str) -> None:
        """Delete the connection. Does nothing if there is none."""
        pass

    @abstractmethod
    async def get_access_token(
        self, account_id: AccountId, provider: str
    ) -> Optional[OAuthToken]:
        """Get the stored access token.

        Returns:
            The access token if connected, None otherwise
        """
        pass

    @abstractmethod
    async def get_account_connections(
        self, account_id: AccountId, provider: str
    ) -> list[AccountConnection]:
        """Get all connections for the account and provider (zero or one)."""
        pass

    @abstractmethod
    async def get_provider_account_id(
        self, account_id: AccountId, provider: str
    ) -> Optional[str]:
        """Get the provider-side account id.

        Returns:
            The provider account id if connected, None otherwise
        """
        pass
