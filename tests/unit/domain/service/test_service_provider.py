"""Unit tests for ServiceProvider."""

import pytest

from socialconnect.adapter.oauth import MockOAuthClient, OAuthTransportError
from socialconnect.adapter.twitter import (
    MockTwitterServiceApi,
    MockTwitterTemplate,
    TwitterApiError,
    TwitterOperations,
)
from socialconnect.domain.error import AccountNotResolvedError
from socialconnect.domain.repository import (
    AccountConnectionRepository,
    TransactionManager,
)
from socialconnect.domain.service import OAuthClient, ServiceProvider
from socialconnect.domain.value import AuthorizedRequestToken, OAuthToken
from socialconnect.persistence.repository.inmemory import (
    InMemoryAccountConnectionRepository,
    InMemoryTransactionManager,
)
from tests.conftest import make_service_provider
from tests.di import TEST_ACCOUNT_ID
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

APPROVED = AuthorizedRequestToken(value="rt1", secret="rs1", verifier="v1")


class FailingOAuthClient(MockOAuthClient):
    """OAuth client whose access token exchange is rejected."""

    async def fetch_access_token(self, parameters, request_token):
        raise OAuthTransportError("Token request rejected by twitter")


class FailingTwitterServiceApi(MockTwitterServiceApi):
    """Twitter capabilities whose account lookup fails."""

    async def fetch_provider_account_id(self, operations):
        raise TwitterApiError("Twitter API request failed: 503")


class ExplodingTwitterServiceApi(MockTwitterServiceApi):
    """Twitter capabilities that cannot build a client."""

    def create_service_operations(self, access_token):
        raise TwitterApiError("Client construction failed")


class BrokenConnectionRepository(InMemoryAccountConnectionRepository):
    """Connection store whose writes fail."""

    def __init__(self, error: Exception) -> None:
        super().__init__()
        self.error = error

    async def add_connection(self, *args, **kwargs):
        raise self.error


class TestProviderMetadata:
    """Tests for provider metadata accessors."""

    @pytest.mark.asyncio
    async def test_exposes_configured_parameters(self, unit_env):
        """Metadata should come straight from the provider parameters."""
        provider = await unit_env.get(ServiceProvider[TwitterOperations])

        assert provider.name == "twitter"
        assert provider.display_name == "Twitter"
        assert provider.api_key == "K"
        assert provider.secret == "S"
        assert provider.app_id == 1234


class TestAuthorizationFlow:
    """Tests for request token and authorize URL steps."""

    @pytest.mark.asyncio
    async def test_fetch_new_request_token_passes_callback(self, unit_env):
        """Request token should be fetched with the given callback URL."""
        provider = await unit_env.get(ServiceProvider[TwitterOperations])
        oauth_client = await unit_env.get(OAuthClient)

        token = await provider.fetch_new_request_token("https://app/cb")

        assert token == OAuthToken(value="rt1", secret="rs1")
        assert oauth_client.callback_urls == ["https://app/cb"]

    @pytest.mark.asyncio
    async def test_build_authorize_url_substitutes_token(self, unit_env):
        """Authorize URL should be the template with the token substituted."""
        provider = await unit_env.get(ServiceProvider[TwitterOperations])

        assert provider.build_authorize_url("rt1") == "https://p.example/auth?token=rt1"

    @pytest.mark.asyncio
    async def test_build_authorize_url_encodes_token(self, unit_env):
        """Reserved characters in the token should be percent-encoded."""
        provider = await unit_env.get(ServiceProvider[TwitterOperations])

        url = provider.build_authorize_url("a&b=c")

        assert url == "https://p.example/auth?token=a%26b%3Dc"

    @pytest.mark.asyncio
    async def test_exchange_for_access_token(self, unit_env):
        """Exchange should return the provider's access token."""
        provider = await unit_env.get(ServiceProvider[TwitterOperations])
        oauth_client = await unit_env.get(OAuthClient)

        access_token = await provider.exchange_for_access_token(APPROVED)

        assert access_token == OAuthToken(value="at1", secret="as1")
        assert oauth_client.exchanged == [APPROVED]


class TestConnect:
    """Tests for connect method."""

    @pytest.mark.asyncio
    async def test_full_connection_scenario(self, unit_env):
        """Connecting should store the token, account id and profile URL."""
        # Arrange
        provider = await unit_env.get(ServiceProvider[TwitterOperations])
        repo = await unit_env.get(AccountConnectionRepository)

        request_token = await provider.fetch_new_request_token("https://app/cb")
        assert provider.build_authorize_url(request_token.value) == (
            "https://p.example/auth?token=rt1"
        )

        # Act
        access_token = await provider.connect(
            AuthorizedRequestToken(
                value=request_token.value,
                secret=request_token.secret,
                verifier="v1",
            )
        )

        # Assert
        assert access_token == OAuthToken(value="at1", secret="as1")
        assert await provider.is_connected() is True
        assert await provider.get_provider_account_id() == "acct-42"

        connections = await repo.get_account_connections(TEST_ACCOUNT_ID, "twitter")
        assert len(connections) == 1
        connection = connections[0]
        assert connection.account_id == TEST_ACCOUNT_ID
        assert connection.provider == "twitter"
        assert connection.access_token == OAuthToken(value="at1", secret="as1")
        assert connection.provider_account_id == "acct-42"
        assert connection.profile_url == "https://twitter.com/acct-42"

    @pytest.mark.asyncio
    async def test_connect_twice_updates_existing_connection(self, unit_env):
        """A second connect should replace the stored token, not add a record."""
        provider = await unit_env.get(ServiceProvider[TwitterOperations])
        oauth_client = await unit_env.get(OAuthClient)

        await provider.connect(APPROVED)
        first = (await provider.get_connections())[0]

        oauth_client.access_token = OAuthToken(value="at2", secret="as2")
        await provider.connect(APPROVED)

        connections = await provider.get_connections()
        assert len(connections) == 1
        assert connections[0].id == first.id
        assert connections[0].created_at == first.created_at
        assert connections[0].access_token == OAuthToken(value="at2", secret="as2")

    @pytest.mark.asyncio
    async def test_connect_without_account_raises(self):
        """Connecting with no signed-in account should fail before any call."""
        oauth_client = MockOAuthClient()
        repo = InMemoryAccountConnectionRepository()
        provider = make_service_provider(
            account_id=None, oauth_client=oauth_client, connection_repository=repo
        )

        with pytest.raises(AccountNotResolvedError):
            await provider.connect(APPROVED)

        assert oauth_client.exchanged == []
        assert await repo.is_connected(TEST_ACCOUNT_ID, "twitter") is False

    @pytest.mark.asyncio
    async def test_connect_rejected_exchange_stores_nothing(self):
        """A rejected token exchange should propagate and store nothing."""
        repo = InMemoryAccountConnectionRepository()
        provider = make_service_provider(
            oauth_client=FailingOAuthClient(), connection_repository=repo
        )

        with pytest.raises(OAuthTransportError):
            await provider.connect(APPROVED)

        assert await repo.get_account_connections(TEST_ACCOUNT_ID, "twitter") == []

    @pytest.mark.asyncio
    async def test_connect_failed_account_lookup_stores_nothing(self):
        """A failed provider account lookup should propagate and store nothing."""
        repo = InMemoryAccountConnectionRepository()
        provider = make_service_provider(
            service_api=FailingTwitterServiceApi(), connection_repository=repo
        )

        with pytest.raises(TwitterApiError):
            await provider.connect(APPROVED)

        assert await repo.is_connected(TEST_ACCOUNT_ID, "twitter") is False


    @pytest.mark.asyncio
    async def test_connect_client_construction_failure_stores_nothing(self):
        """A failure building the API client should propagate and store nothing."""
        repo = InMemoryAccountConnectionRepository()
        provider = make_service_provider(
            service_api=ExplodingTwitterServiceApi(), connection_repository=repo
        )

        with pytest.raises(TwitterApiError, match="Client construction failed"):
            await provider.connect(APPROVED)

        assert await repo.get_account_connections(TEST_ACCOUNT_ID, "twitter") == []

    @pytest.mark.asyncio
    async def test_connect_repository_error_propagates_unchanged(self):
        """A storage failure should reach the caller as the same exception."""
        error = RuntimeError("database unavailable")
        repo = BrokenConnectionRepository(error)
        provider = make_service_provider(connection_repository=repo)

        with pytest.raises(RuntimeError) as exc_info:
            await provider.connect(APPROVED)

        assert exc_info.value is error
        assert await repo.is_connected(TEST_ACCOUNT_ID, "twitter") is False


class TestAddConnection:
    """Tests for add_connection method."""

    @pytest.mark.asyncio
    async def test_add_connection_stores_token_without_secret(self, unit_env):
        """Imported access tokens should be stored with no secret."""
        provider = await unit_env.get(ServiceProvider[TwitterOperations])
        oauth_client = await unit_env.get(OAuthClient)

        await provider.add_connection("imported-token", "someone")

        connection = (await provider.get_connections())[0]
        assert connection.access_token == OAuthToken(value="imported-token")
        assert connection.provider_account_id == "someone"
        assert connection.profile_url == "https://twitter.com/someone"
        assert oauth_client.exchanged == []

    @pytest.mark.asyncio
    async def test_add_connection_without_account_raises(self):
        """Adding a connection with no signed-in account should fail."""
        provider = make_service_provider(account_id=None)

        with pytest.raises(AccountNotResolvedError):
            await provider.add_connection("imported-token", "someone")


    @pytest.mark.asyncio
    async def test_add_connection_repository_error_propagates_unchanged(self):
        """A storage failure should reach the caller as the same exception."""
        error = RuntimeError("database unavailable")
        repo = BrokenConnectionRepository(error)
        provider = make_service_provider(connection_repository=repo)

        with pytest.raises(RuntimeError) as exc_info:
            await provider.add_connection("imported-token", "someone")

        assert exc_info.value is error
        assert await repo.is_connected(TEST_ACCOUNT_ID, "twitter") is False


class TestDisconnect:
    """Tests for disconnect and connection queries."""

    @pytest.mark.asyncio
    async def test_disconnect_removes_connection(self, unit_env):
        """Disconnecting should remove the stored connection."""
        provider = await unit_env.get(ServiceProvider[TwitterOperations])
        await provider.connect(APPROVED)

        await provider.disconnect()

        assert await provider.is_connected() is False
        assert await provider.get_connections() == []
        assert await provider.get_provider_account_id() is None

    @pytest.mark.asyncio
    async def test_disconnect_is_idempotent(self, unit_env):
        """Disconnecting twice, or with no connection, should not fail."""
        provider = await unit_env.get(ServiceProvider[TwitterOperations])

        await provider.disconnect()
        await provider.connect(APPROVED)
        await provider.disconnect()
        await provider.disconnect()

        assert await provider.is_connected() is False

    @pytest.mark.asyncio
    async def test_queries_for_anonymous_caller(self):
        """Anonymous callers are never connected and disconnect is a no-op."""
        repo = InMemoryAccountConnectionRepository()
        await repo.add_connection(
            TEST_ACCOUNT_ID, "twitter", OAuthToken(value="at1"), "acct-42", None
        )
        provider = make_service_provider(account_id=None, connection_repository=repo)

        assert await provider.is_connected() is False
        assert await provider.get_connections() == []
        assert await provider.get_provider_account_id() is None

        await provider.disconnect()
        assert await repo.is_connected(TEST_ACCOUNT_ID, "twitter") is True


class TestGetServiceOperations:
    """Tests for API client construction."""

    @pytest.mark.asyncio
    async def test_connected_account_gets_authorized_client(self, unit_env):
        """A connected account's client should carry the stored token."""
        provider = await unit_env.get(ServiceProvider[TwitterOperations])
        transactions = await unit_env.get(TransactionManager)
        await provider.connect(APPROVED)

        operations = await provider.get_service_operations()

        assert isinstance(operations, MockTwitterTemplate)
        assert operations.is_authorized() is True
        assert operations.access_token == OAuthToken(value="at1", secret="as1")
        assert await operations.get_profile_id() == "acct-42"
        assert transactions.committed == 1
        assert transactions.active == 0

    @pytest.mark.asyncio
    async def test_unconnected_account_gets_anonymous_client(self, unit_env):
        """An account with no connection should get an anonymous client."""
        provider = await unit_env.get(ServiceProvider[TwitterOperations])

        operations = await provider.get_service_operations()

        assert operations.is_authorized() is False

    @pytest.mark.asyncio
    async def test_anonymous_caller_skips_transaction(self):
        """Anonymous callers get an anonymous client without touching storage."""
        transactions = InMemoryTransactionManager()
        provider = make_service_provider(account_id=None, transactions=transactions)

        operations = await provider.get_service_operations()

        assert operations.is_authorized() is False
        assert transactions.committed == 0
        assert transactions.rolled_back == 0

    @pytest.mark.asyncio
    async def test_failure_rolls_back_transaction(self):
        """An error while building the client should roll back the scope."""
        transactions = InMemoryTransactionManager()
        provider = make_service_provider(
            service_api=ExplodingTwitterServiceApi(), transactions=transactions
        )

        with pytest.raises(TwitterApiError):
            await provider.get_service_operations()

        assert transactions.rolled_back == 1
        assert transactions.committed == 0
        assert transactions.active == 0

    @pytest.mark.asyncio
    async def test_get_service_operations_for_token(self, unit_env):
        """A client can be built for an unstored token, or anonymously."""
        provider = await unit_env.get(ServiceProvider[TwitterOperations])

        authorized = provider.get_service_operations_for(OAuthToken(value="x"))
        anonymous = provider.get_service_operations_for(None)

        assert authorized.is_authorized() is True
        assert anonymous.is_authorized() is False
        assert await provider.is_connected() is False
