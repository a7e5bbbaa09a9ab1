"""Twitter API client and provider capabilities.

Calls the Twitter REST API v1.1, signed with OAuth 1.0a when an access
token is available and anonymously otherwise.
"""

from typing import Any

import httpx
import logfire
from authlib.integrations.httpx_client import AsyncOAuth1Client

from socialconnect.adapter.error import ProviderError
from socialconnect.domain.service.service_api import ServiceApi
from socialconnect.domain.value import OAuthToken

PROFILE_URL_BASE = "https://twitter.com/"


class TwitterApiError(ProviderError):
    """Twitter API error."""

    pass


class TwitterOperations:
    """Typed Twitter API surface used by the rest of the application."""

    def is_authorized(self) -> bool:
        """Whether calls are made on behalf of a user."""
        raise NotImplementedError

    async def get_profile_id(self) -> str:
        """Get the authorized user's screen name.

        Raises:
            TwitterApiError: If the client is anonymous or the call fails
        """
        raise NotImplementedError

    async def get_user_profile(self, screen_name: str) -> dict[str, Any]:
        """Get a public user profile by screen name."""
        raise NotImplementedError


class TwitterTemplate(TwitterOperations):
    """Twitter API client.

    A new HTTP client is opened per call, so instances can be shared
    across tasks.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        access_token: OAuthToken | None = None,
        api_base_url: str = "https://api.twitter.com/1.1",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Twitter API client.

        Args:
            api_key: Consumer key
            api_secret: Consumer secret
            access_token: User access token, or None for anonymous calls
            api_base_url: REST API base URL
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.api_key = api_key
        self.api_secret = api_secret
        self.access_token = access_token
        self.api_base_url = api_base_url.rstrip("/")
        self.transport = transport

    def is_authorized(self) -> bool:
        return self.access_token is not None

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {"timeout": 30.0}
        if self.transport is not None:
            kwargs["transport"] = self.transport
        if self.access_token is None:
            return httpx.AsyncClient(**kwargs)
        return AsyncOAuth1Client(
            self.api_key,
            client_secret=self.api_secret,
            token=self.access_token.value,
            token_secret=self.access_token.secret,
            **kwargs,
        )

    async def _get(self, path: str, params: dict[str, str] | None = None) -> dict:
        url = f"{self.api_base_url}/{path}"
        try:
            async with self._client() as client:
                response = await client.get(url, params=params)
        except httpx.HTTPError as e:
            logfire.error("Twitter API HTTP error", path=path, error=str(e))
            raise TwitterApiError(f"HTTP error calling {path}: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "Twitter API request failed",
                path=path,
                status_code=response.status_code,
                error=response.text,
            )
            raise TwitterApiError(
                f"Twitter API request failed: {response.status_code}"
            )

        return response.json()

    async def get_profile_id(self) -> str:
        if not self.is_authorized():
            raise TwitterApiError("Authorization is required to look up the profile id")

        result = await self._get("account/verify_credentials.json")
        screen_name = result.get("screen_name")
        if not screen_name:
            raise TwitterApiError("verify_credentials response has no screen_name")
        return screen_name

    async def get_user_profile(self, screen_name: str) -> dict[str, Any]:
        return await self._get("users/show.json", params={"screen_name": screen_name})


class TwitterServiceApi(ServiceApi[TwitterOperations]):
    """Twitter provider capabilities."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        api_base_url: str = "https://api.twitter.com/1.1",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.api_secret = api_secret
        self.api_base_url = api_base_url
        self.transport = transport

    def create_service_operations(
        self, access_token: OAuthToken | None
    ) -> TwitterOperations:
        return TwitterTemplate(
            self.api_key,
            self.api_secret,
            access_token=access_token,
            api_base_url=self.api_base_url,
            transport=self.transport,
        )

    async def fetch_provider_account_id(self, operations: TwitterOperations) -> str:
        return await operations.get_profile_id()

    def build_provider_profile_url(
        self, provider_account_id: str, operations: TwitterOperations
    ) -> str:
        return f"{PROFILE_URL_BASE}{provider_account_id}"


class MockTwitterTemplate(TwitterOperations):
    """Mock Twitter client returning deterministic data."""

    def __init__(self, access_token: OAuthToken | None, profile_id: str) -> None:
        self.access_token = access_token
        self.profile_id = profile_id

    def is_authorized(self) -> bool:
        return self.access_token is not None

    async def get_profile_id(self) -> str:
        if not self.is_authorized():
            raise TwitterApiError("Authorization is required to look up the profile id")
        return self.profile_id

    async def get_user_profile(self, screen_name: str) -> dict[str, Any]:
        return {"screen_name": screen_name, "name": "Mock Twitter User"}


class MockTwitterServiceApi(TwitterServiceApi):
    """Mock Twitter capabilities for testing.

    Never makes network calls; every authorized client reports the same
    profile id.
    """

    def __init__(self, profile_id: str = "acct-42"):
        """Initialize mock without real consumer credentials."""
        # Don't call super().__init__() - mock doesn't need real config
        self.profile_id = profile_id

    def create_service_operations(
        self, access_token: OAuthToken | None
    ) -> TwitterOperations:
        return MockTwitterTemplate(access_token, self.profile_id)
