"""Application layer DI providers."""

from datetime import timedelta

from dishka import Scope, provide

from socialconnect.adapter.twitter import TwitterOperations
from socialconnect.application.usecase.connection import (
    BeginConnectionUseCase,
    CancelConnectionUseCase,
    CompleteConnectionUseCase,
    DisconnectUseCase,
    GetConnectionStatusUseCase,
)
from socialconnect.config import Settings
from socialconnect.domain.repository import PendingRequestTokenRepository
from socialconnect.domain.service import AccountIdResolver, ServiceProvider
from socialconnect.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_begin_connection_use_case(
        self,
        service_provider: ServiceProvider[TwitterOperations],
        account_id_resolver: AccountIdResolver,
        request_token_repository: PendingRequestTokenRepository,
        settings: Settings,
    ) -> BeginConnectionUseCase:
        """Provide begin connection use case."""
        return BeginConnectionUseCase(
            service_provider=service_provider,
            account_id_resolver=account_id_resolver,
            request_token_repository=request_token_repository,
            request_token_ttl=_request_token_ttl(settings),
        )

    @provide(scope=Scope.REQUEST)
    def get_complete_connection_use_case(
        self,
        service_provider: ServiceProvider[TwitterOperations],
        account_id_resolver: AccountIdResolver,
        request_token_repository: PendingRequestTokenRepository,
        settings: Settings,
    ) -> CompleteConnectionUseCase:
        """Provide complete connection use case."""
        return CompleteConnectionUseCase(
            service_provider=service_provider,
            account_id_resolver=account_id_resolver,
            request_token_repository=request_token_repository,
            request_token_ttl=_request_token_ttl(settings),
        )

    @provide(scope=Scope.REQUEST)
    def get_cancel_connection_use_case(
        self,
        service_provider: ServiceProvider[TwitterOperations],
        account_id_resolver: AccountIdResolver,
        request_token_repository: PendingRequestTokenRepository,
    ) -> CancelConnectionUseCase:
        """Provide cancel connection use case."""
        return CancelConnectionUseCase(
            service_provider=service_provider,
            account_id_resolver=account_id_resolver,
            request_token_repository=request_token_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_disconnect_use_case(
        self,
        service_provider: ServiceProvider[TwitterOperations],
        account_id_resolver: AccountIdResolver,
    ) -> DisconnectUseCase:
        """Provide disconnect use case."""
        return DisconnectUseCase(
            service_provider=service_provider,
            account_id_resolver=account_id_resolver,
        )

    @provide(scope=Scope.REQUEST)
    def get_connection_status_use_case(
        self, service_provider: ServiceProvider[TwitterOperations]
    ) -> GetConnectionStatusUseCase:
        """Provide get connection status use case."""
        return GetConnectionStatusUseCase(service_provider=service_provider)


def _request_token_ttl(settings: Settings) -> timedelta:
    return timedelta(minutes=settings.providers.request_token_ttl_minutes)
