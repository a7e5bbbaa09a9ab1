"""Twitter infrastructure providers."""

from dishka import Scope, provide

from socialconnect.adapter.oauth import RealOAuthClient
from socialconnect.adapter.twitter import TwitterOperations, TwitterServiceApi
from socialconnect.config import Settings
from socialconnect.domain.service import OAuthClient, ServiceApi
from socialconnect.domain.value import ProviderParameters
from socialconnect.util.error import ConfigurationError
from socialconnect.util.di.base import ProviderBase

PLACEHOLDER_CREDENTIAL = "CHANGE_ME_IN_PRODUCTION"


class TwitterProvider(ProviderBase):
    """Twitter component base."""

    __mock_component__ = "twitter"


class ProdTwitterProvider(TwitterProvider):
    """Production Twitter provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_provider_parameters(self, settings: Settings) -> ProviderParameters:
        """Provide Twitter provider parameters.

        Raises:
            ConfigurationError: If Twitter consumer credentials are not configured
        """
        twitter = settings.providers.twitter
        if settings.environment == "production":
            if twitter.api_key == PLACEHOLDER_CREDENTIAL:
                raise ConfigurationError("Twitter API key must be configured")
            if twitter.secret == PLACEHOLDER_CREDENTIAL:
                raise ConfigurationError("Twitter API secret must be configured")

        return ProviderParameters(
            name=twitter.name,
            display_name=twitter.display_name,
            api_key=twitter.api_key,
            secret=twitter.secret,
            app_id=twitter.app_id,
            request_token_url=twitter.request_token_url,
            access_token_url=twitter.access_token_url,
            authorize_url=twitter.authorize_url,
        )

    @provide(scope=Scope.APP)
    def get_oauth_client(self) -> OAuthClient:
        """Provide OAuth 1.0a transport."""
        return RealOAuthClient()

    @provide(scope=Scope.APP)
    def get_twitter_service_api(
        self, parameters: ProviderParameters, settings: Settings
    ) -> ServiceApi[TwitterOperations]:
        """Provide Twitter capabilities."""
        return TwitterServiceApi(
            api_key=parameters.api_key,
            api_secret=parameters.secret,
            api_base_url=settings.providers.twitter.api_base_url,
        )
