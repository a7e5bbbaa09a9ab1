"""Session infrastructure providers (current account resolution)."""

from dishka import Scope, provide
from fastapi import Request

from socialconnect.config import AuthSettings
from socialconnect.domain.service import (
    AccountIdResolver,
    JWTAccountIdResolver,
    JWTService,
)
from socialconnect.util.di.base import ProviderBase


class SessionProvider(ProviderBase):
    """Session component base."""

    __mock_component__ = "session"


class ProdSessionProvider(SessionProvider):
    """Production session provider reading the JWT auth cookie."""

    __is_mock__ = False

    @provide(scope=Scope.REQUEST)
    def get_account_id_resolver(
        self, request: Request, jwt_service: JWTService, auth_settings: AuthSettings
    ) -> AccountIdResolver:
        """Provide resolver for the account that sent the request."""
        return JWTAccountIdResolver(
            jwt_service=jwt_service,
            token=request.cookies.get(auth_settings.cookie_name),
        )
