"""Provider capability interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from socialconnect.domain.value import OAuthToken

S = TypeVar("S")


class ServiceApi(ABC, Generic[S]):
    """Provider-specific capabilities, implemented once per provider.

    ``S`` is the typed API client ("service operations") for the provider.
    """

    @abstractmethod
    def create_service_operations(self, access_token: OAuthToken | None) -> S:
        """Build the API client.

        Args:
            access_token: Token for authorized calls, or None for an
                anonymous client limited to public endpoints
        """
        pass

    @abstractmethod
    async def fetch_provider_account_id(self, operations: S) -> str:
        """Ask the provider for the id of the account the client acts for."""
        pass

    @abstractmethod
    def build_provider_profile_url(self, provider_account_id: str, operations: S) -> str:
        """Build the URL of the account's public profile on the provider."""
        pass
