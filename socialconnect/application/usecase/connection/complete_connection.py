"""Complete connection use case."""

from datetime import timedelta

import logfire
from pydantic import BaseModel

from socialconnect.application.usecase.base import BaseUseCase
from socialconnect.domain.error import (
    AccountNotResolvedError,
    NotAuthorizedError,
    NotFoundError,
)
from socialconnect.domain.repository import PendingRequestTokenRepository
from socialconnect.domain.service import AccountIdResolver, ServiceProvider
from socialconnect.domain.value import AuthorizedRequestToken


class CompleteConnectionRequest(BaseModel):
    """Parameters of the provider's callback redirect."""

    oauth_token: str
    oauth_verifier: str


class CompleteConnectionResponse(BaseModel):
    """Complete connection response."""

    provider: str
    provider_account_id: str | None


class CompleteConnectionUseCase(BaseUseCase):
    """Use case for finishing the OAuth dance after the user approved."""

    def __init__(
        self,
        service_provider: ServiceProvider,
        account_id_resolver: AccountIdResolver,
        request_token_repository: PendingRequestTokenRepository,
        request_token_ttl: timedelta = timedelta(minutes=15),
    ) -> None:
        self.service_provider = service_provider
        self.account_id_resolver = account_id_resolver
        self.request_token_repository = request_token_repository
        self.request_token_ttl = request_token_ttl

    async def execute(
        self, request: CompleteConnectionRequest
    ) -> CompleteConnectionResponse:
        """Execute complete connection flow.

        Steps:
        1. Consume the pending request token named by the callback
        2. Check it was issued to the signed-in account
        3. Connect with the token secret and verifier

        Raises:
            AccountNotResolvedError: If no local account is signed in
            NotFoundError: If the request token is unknown, already used or expired
            NotAuthorizedError: If the request token belongs to another account
        """
        provider = self.service_provider.name
        account_id = self.account_id_resolver.resolve_account_id()
        if account_id is None:
            raise AccountNotResolvedError(provider)

        pending = await self.request_token_repository.pop(request.oauth_token)
        if pending is None or pending.provider != provider:
            raise NotFoundError("Request token", request.oauth_token)

        if pending.is_expired(self.request_token_ttl):
            logfire.info(
                "Expired request token", provider=provider, account_id=str(account_id)
            )
            raise NotFoundError("Request token", request.oauth_token)

        if pending.account_id != account_id:
            logfire.warn(
                "Request token used by another account",
                provider=provider,
                account_id=str(account_id),
            )
            raise NotAuthorizedError("request token", request.oauth_token, str(account_id))

        await self.service_provider.connect(
            AuthorizedRequestToken(
                value=pending.token.value,
                secret=pending.token.secret or "",
                verifier=request.oauth_verifier,
            )
        )

        return CompleteConnectionResponse(
            provider=provider,
            provider_account_id=await self.service_provider.get_provider_account_id(),
        )
