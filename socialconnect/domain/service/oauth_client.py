"""OAuth 1.0a transport port."""

from socialconnect.domain.value import (
    AuthorizedRequestToken,
    OAuthToken,
    ProviderParameters,
)


class OAuthClient:
    """Signs and sends the two OAuth 1.0a token requests.

    Implementations build a new signing client for every call from the
    provider parameters, so they hold no per-user state.
    """

    async def fetch_request_token(
        self, parameters: ProviderParameters, callback_url: str | None = None
    ) -> OAuthToken:
        """Obtain temporary credentials from the request-token endpoint.

        Args:
            parameters: Provider endpoints and consumer credentials
            callback_url: Where the provider redirects after approval

        Returns:
            Request token value and secret
        """
        raise NotImplementedError

    async def fetch_access_token(
        self, parameters: ProviderParameters, request_token: AuthorizedRequestToken
    ) -> OAuthToken:
        """Exchange an authorized request token for an access token.

        Args:
            parameters: Provider endpoints and consumer credentials
            request_token: Approved request token with its verifier

        Returns:
            Access token value and secret
        """
        raise NotImplementedError
