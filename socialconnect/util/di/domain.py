"""Domain layer DI providers."""

from dishka import Scope, provide

from socialconnect.adapter.twitter import TwitterOperations
from socialconnect.config import AuthSettings
from socialconnect.domain.repository import (
    AccountConnectionRepository,
    TransactionManager,
)
from socialconnect.domain.service import (
    AccountIdResolver,
    JWTService,
    OAuthClient,
    ServiceApi,
    ServiceProvider,
)
from socialconnect.domain.value import ProviderParameters
from socialconnect.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_twitter_service_provider(
        self,
        parameters: ProviderParameters,
        service_api: ServiceApi[TwitterOperations],
        oauth_client: OAuthClient,
        connection_repository: AccountConnectionRepository,
        account_id_resolver: AccountIdResolver,
        transactions: TransactionManager,
    ) -> ServiceProvider[TwitterOperations]:
        """Provide the Twitter connection orchestrator for this request."""
        return ServiceProvider(
            parameters=parameters,
            service_api=service_api,
            oauth_client=oauth_client,
            connection_repository=connection_repository,
            account_id_resolver=account_id_resolver,
            transactions=transactions,
        )
