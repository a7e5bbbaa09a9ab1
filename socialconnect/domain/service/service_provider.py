"""Service provider connection orchestration."""

from typing import Generic, Optional, TypeVar

import logfire

from socialconnect.domain.error import AccountNotResolvedError
from socialconnect.domain.model.account_connection import AccountConnection
from socialconnect.domain.repository import (
    AccountConnectionRepository,
    TransactionManager,
)
from socialconnect.domain.service.account_resolver import AccountIdResolver
from socialconnect.domain.service.base import Service
from socialconnect.domain.service.oauth_client import OAuthClient
from socialconnect.domain.service.service_api import ServiceApi
from socialconnect.domain.value import (
    AccountId,
    AuthorizedRequestToken,
    OAuthToken,
    ProviderParameters,
)

S = TypeVar("S")


class ServiceProvider(Service, Generic[S]):
    """Connects the current account to one OAuth 1.0a service provider.

    The flow is: fetch a request token, send the user to the authorize URL,
    exchange the approved request token for an access token, ask the
    provider who the user is, then store the connection.

    Nothing is persisted until every preceding step has succeeded, and
    errors from the transport, provider API and repository propagate
    unchanged.
    """

    def __init__(
        self,
        parameters: ProviderParameters,
        service_api: ServiceApi[S],
        oauth_client: OAuthClient,
        connection_repository: AccountConnectionRepository,
        account_id_resolver: AccountIdResolver,
        transactions: TransactionManager,
    ) -> None:
        """Initialize service provider.

        Args:
            parameters: Provider identity, credentials and endpoints
            service_api: Provider capabilities (client factory, account lookup)
            oauth_client: OAuth 1.0a transport
            connection_repository: Connection store
            account_id_resolver: Resolves the current local account
            transactions: Transaction scope for reads of stored tokens
        """
        self.parameters = parameters
        self.service_api = service_api
        self.oauth_client = oauth_client
        self.connection_repository = connection_repository
        self.account_id_resolver = account_id_resolver
        self.transactions = transactions

    # provider metadata

    @property
    def name(self) -> str:
        return self.parameters.name

    @property
    def display_name(self) -> str:
        return self.parameters.display_name

    @property
    def api_key(self) -> str:
        return self.parameters.api_key

    @property
    def app_id(self) -> int | None:
        return self.parameters.app_id

    @property
    def secret(self) -> str:
        """The API key secret. Not for display."""
        return self.parameters.secret

    # connection management

    async def fetch_new_request_token(self, callback_url: str | None = None) -> OAuthToken:
        """Obtain a request token to start the authorization flow.

        Args:
            callback_url: Where the provider redirects after the user approves

        Returns:
            Request token value and secret
        """
        with logfire.span(
            "service_provider.fetch_new_request_token",
            provider=self.name,
            callback_url=callback_url,
        ):
            request_token = await self.oauth_client.fetch_request_token(
                self.parameters, callback_url
            )
            logfire.info("Request token issued", provider=self.name)
            return request_token

    def build_authorize_url(self, request_token: str) -> str:
        """Build the provider URL where the user approves the request token."""
        return self.parameters.authorize_url.expand(request_token)

    async def exchange_for_access_token(
        self, request_token: AuthorizedRequestToken
    ) -> OAuthToken:
        """Exchange an approved request token for an access token."""
        with logfire.span(
            "service_provider.exchange_for_access_token", provider=self.name
        ):
            access_token = await self.oauth_client.fetch_access_token(
                self.parameters, request_token
            )
            logfire.info("Access token granted", provider=self.name)
            return access_token

    async def connect(self, request_token: AuthorizedRequestToken) -> OAuthToken:
        """Complete the flow and store the connection for the current account.

        Args:
            request_token: Request token approved by the user, with verifier

        Returns:
            The access token granted by the provider

        Raises:
            AccountNotResolvedError: If no local account is signed in
        """
        account_id = self._require_account_id()
        with logfire.span(
            "service_provider.connect", provider=self.name, account_id=str(account_id)
        ):
            access_token = await self.exchange_for_access_token(request_token)
            operations = self.service_api.create_service_operations(access_token)
            provider_account_id = await self.service_api.fetch_provider_account_id(
                operations
            )
            profile_url = self.service_api.build_provider_profile_url(
                provider_account_id, operations
            )
            await self.connection_repository.add_connection(
                account_id,
                self.name,
                access_token,
                provider_account_id,
                profile_url,
            )
            logfire.info(
                "Account connected",
                provider=self.name,
                account_id=str(account_id),
                provider_account_id=provider_account_id,
            )
            return access_token

    async def add_connection(self, access_token: str, provider_account_id: str) -> None:
        """Store a connection for an access token obtained elsewhere.

        The provider is not asked for the account id; the caller supplies it.

        Args:
            access_token: Access token value
            provider_account_id: The account's id on the provider

        Raises:
            AccountNotResolvedError: If no local account is signed in
        """
        account_id = self._require_account_id()
        with logfire.span(
            "service_provider.add_connection",
            provider=self.name,
            account_id=str(account_id),
            provider_account_id=provider_account_id,
        ):
            oauth_access_token = OAuthToken(value=access_token)
            operations = self.service_api.create_service_operations(oauth_access_token)
            await self.connection_repository.add_connection(
                account_id,
                self.name,
                oauth_access_token,
                provider_account_id,
                self.service_api.build_provider_profile_url(
                    provider_account_id, operations
                ),
            )
            logfire.info(
                "Connection added", provider=self.name, account_id=str(account_id)
            )

    async def is_connected(self) -> bool:
        """Check whether the current account is connected to this provider."""
        account_id = self.account_id_resolver.resolve_account_id()
        if account_id is None:
            return False
        return await self.connection_repository.is_connected(account_id, self.name)

    async def disconnect(self) -> None:
        """Remove the current account's connection. Safe to call repeatedly."""
        account_id = self.account_id_resolver.resolve_account_id()
        if account_id is None:
            return
        with logfire.span(
            "service_provider.disconnect",
            provider=self.name,
            account_id=str(account_id),
        ):
            await self.connection_repository.disconnect(account_id, self.name)
            logfire.info(
                "Account disconnected", provider=self.name, account_id=str(account_id)
            )

    async def get_service_operations(self) -> S:
        """Build an API client for the current account.

        Anonymous callers and accounts without a connection get a client
        with no access token, limited to the provider's public API.
        """
        account_id = self.account_id_resolver.resolve_account_id()
        if account_id is None:
            return self.service_api.create_service_operations(None)

        async with self.transactions.begin():
            access_token = None
            if await self.connection_repository.is_connected(account_id, self.name):
                access_token = await self.connection_repository.get_access_token(
                    account_id, self.name
                )
            return self.service_api.create_service_operations(access_token)

    def get_service_operations_for(self, access_token: OAuthToken | None) -> S:
        """Build an API client from a token that is not (yet) stored."""
        return self.service_api.create_service_operations(access_token)

    async def get_connections(self) -> list[AccountConnection]:
        """Get the current account's connections to this provider."""
        account_id = self.account_id_resolver.resolve_account_id()
        if account_id is None:
            return []
        return await self.connection_repository.get_account_connections(
            account_id, self.name
        )

    # additional finders

    async def get_provider_account_id(self) -> Optional[str]:
        """Get the current account's id on the provider, if connected."""
        account_id = self.account_id_resolver.resolve_account_id()
        if account_id is None:
            return None
        return await self.connection_repository.get_provider_account_id(
            account_id, self.name
        )

    # internal helpers

    def _require_account_id(self) -> AccountId:
        account_id = self.account_id_resolver.resolve_account_id()
        if account_id is None:
            raise AccountNotResolvedError(self.name)
        return account_id
