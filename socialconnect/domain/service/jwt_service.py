"""JWT token domain service.

Tokens are issued by the hosting application; this service only verifies
them.
"""

from uuid import UUID

import logfire

from socialconnect.config import AuthSettings
from socialconnect.domain.service.account_resolver import AccountIdResolver
from socialconnect.domain.value import AccountId
from socialconnect.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_account_id_from_token(self, token: str | None) -> AccountId | None:
        """Extract the account ID from a JWT token without raising.

        Missing, invalid or expired tokens are treated as anonymous.

        Args:
            token: JWT token string (optional)

        Returns:
            Account ID if token is valid, None otherwise
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return AccountId(UUID(payload.user_id))
        except (JWTError, ValueError) as e:
            logfire.debug(
                "JWT verification failed, treating as anonymous", error=str(e)
            )
            return None


class JWTAccountIdResolver(AccountIdResolver):
    """Resolves the account from the JWT carried by the current request."""

    def __init__(self, jwt_service: JWTService, token: str | None) -> None:
        self.jwt_service = jwt_service
        self.token = token
        self._resolved = False
        self._account_id: AccountId | None = None

    def resolve_account_id(self) -> AccountId | None:
        # Verified once per request
        if not self._resolved:
            self._account_id = self.jwt_service.get_account_id_from_token(self.token)
            self._resolved = True
        return self._account_id
