"""OAuth 1.0a transport implementation.

Signs token requests with HMAC-SHA1 in the ``Authorization`` header
(RFC 5849) using authlib's httpx integration.
"""

import httpx
import logfire
from authlib.integrations.httpx_client import AsyncOAuth1Client, OAuthError

from socialconnect.adapter.error import ProviderError
from socialconnect.domain.service.oauth_client import OAuthClient
from socialconnect.domain.value import (
    AuthorizedRequestToken,
    OAuthToken,
    ProviderParameters,
)


OUT_OF_BAND_CALLBACK = "oob"


class OAuthTransportError(ProviderError):
    """Token request failed or the provider returned an unusable response."""

    pass


class RealOAuthClient(OAuthClient):
    """OAuth 1.0a client that talks to the provider's token endpoints.

    A new authlib client is built for every call; nothing is cached between
    requests.
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize OAuth client.

        Args:
            transport: Optional httpx transport (tests pass a MockTransport)
            timeout: Request timeout in seconds
        """
        self.transport = transport
        self.timeout = timeout

    def _client(
        self,
        parameters: ProviderParameters,
        token: str | None = None,
        token_secret: str | None = None,
        redirect_uri: str | None = None,
    ) -> AsyncOAuth1Client:
        kwargs = {"timeout": self.timeout}
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return AsyncOAuth1Client(
            parameters.api_key,
            client_secret=parameters.secret,
            token=token,
            token_secret=token_secret,
            redirect_uri=redirect_uri,
            **kwargs,
        )

    async def fetch_request_token(
        self, parameters: ProviderParameters, callback_url: str | None = None
    ) -> OAuthToken:
        """Obtain temporary credentials with a signed POST.

        Raises:
            OAuthTransportError: If the request fails or the response
                lacks oauth_token/oauth_token_secret
        """
        url = parameters.request_token_url
        logfire.info(
            "Requesting OAuth request token",
            provider=parameters.name,
            url=url,
        )
        # Out-of-band when there is no callback (RFC 5849 section 2.1)
        async with self._client(
            parameters, redirect_uri=callback_url or OUT_OF_BAND_CALLBACK
        ) as client:
            token = await self._fetch(client, url, parameters.name, verifier=None)
        return token

    async def fetch_access_token(
        self, parameters: ProviderParameters, request_token: AuthorizedRequestToken
    ) -> OAuthToken:
        """Exchange the authorized request token with a signed POST.

        Raises:
            OAuthTransportError: If the request fails or the response
                lacks oauth_token/oauth_token_secret
        """
        url = parameters.access_token_url
        logfire.info(
            "Exchanging OAuth request token for access token",
            provider=parameters.name,
            url=url,
        )
        async with self._client(
            parameters,
            token=request_token.value,
            token_secret=request_token.secret,
        ) as client:
            token = await self._fetch(
                client, url, parameters.name, verifier=request_token.verifier
            )
        return token

    async def _fetch(
        self,
        client: AsyncOAuth1Client,
        url: str,
        provider: str,
        verifier: str | None,
    ) -> OAuthToken:
        try:
            if verifier is None:
                response = await client.fetch_request_token(url)
            else:
                response = await client.fetch_access_token(url, verifier=verifier)
        except (OAuthError, ValueError) as e:
            logfire.error(
                "OAuth token request rejected",
                provider=provider,
                url=url,
                error=str(e),
            )
            raise OAuthTransportError(f"Token request rejected by {provider}: {e}") from e
        except httpx.HTTPError as e:
            logfire.error(
                "OAuth token request HTTP error",
                provider=provider,
                url=url,
                error=str(e),
            )
            raise OAuthTransportError(f"HTTP error during token request: {e}") from e

        value = response.get("oauth_token")
        secret = response.get("oauth_token_secret")
        if not value or not secret:
            logfire.error("Invalid token response", provider=provider, url=url)
            raise OAuthTransportError(f"Invalid token response from {provider}")

        return OAuthToken(value=value, secret=secret)


class MockOAuthClient(OAuthClient):
    """Mock OAuth client for testing.

    Returns deterministic tokens without making network calls, and records
    the calls it received.
    """

    def __init__(
        self,
        request_token: OAuthToken | None = None,
        access_token: OAuthToken | None = None,
    ):
        """Initialize mock client without real OAuth configuration."""
        self.request_token = request_token or OAuthToken(value="rt1", secret="rs1")
        self.access_token = access_token or OAuthToken(value="at1", secret="as1")
        self.callback_urls: list[str | None] = []
        self.exchanged: list[AuthorizedRequestToken] = []

    async def fetch_request_token(
        self, parameters: ProviderParameters, callback_url: str | None = None
    ) -> OAuthToken:
        """Return the configured request token."""
        self.callback_urls.append(callback_url)
        return self.request_token

    async def fetch_access_token(
        self, parameters: ProviderParameters, request_token: AuthorizedRequestToken
    ) -> OAuthToken:
        """Return the configured access token."""
        self.exchanged.append(request_token)
        return self.access_token
