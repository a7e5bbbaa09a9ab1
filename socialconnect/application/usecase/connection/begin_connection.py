"""Begin connection use case."""

from datetime import datetime, timedelta, timezone

import logfire
from pydantic import BaseModel

from socialconnect.application.usecase.base import BaseUseCase
from socialconnect.domain.error import AccountNotResolvedError
from socialconnect.domain.model import PendingRequestToken
from socialconnect.domain.repository import PendingRequestTokenRepository
from socialconnect.domain.service import AccountIdResolver, ServiceProvider


class BeginConnectionRequest(BaseModel):
    """Begin connection request."""

    callback_url: str


class BeginConnectionResponse(BaseModel):
    """Begin connection response."""

    provider: str
    authorization_url: str


class BeginConnectionUseCase(BaseUseCase):
    """Use case for starting the OAuth dance with a provider.

    Obtains a request token, remembers it for the signed-in account and
    returns the URL where the user approves access.
    """

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

    async def execute(self, request: BeginConnectionRequest) -> BeginConnectionResponse:
        """Execute begin connection flow.

        Raises:
            AccountNotResolvedError: If no local account is signed in
        """
        provider = self.service_provider.name
        account_id = self.account_id_resolver.resolve_account_id()
        if account_id is None:
            raise AccountNotResolvedError(provider)

        # Sweep tokens from flows the user abandoned
        await self.request_token_repository.delete_expired(
            datetime.now(timezone.utc) - self.request_token_ttl
        )

        request_token = await self.service_provider.fetch_new_request_token(
            request.callback_url
        )
        await self.request_token_repository.save(
            PendingRequestToken(
                account_id=account_id,
                provider=provider,
                token=request_token,
            )
        )

        logfire.info(
            "Connection started", provider=provider, account_id=str(account_id)
        )

        return BeginConnectionResponse(
            provider=provider,
            authorization_url=self.service_provider.build_authorize_url(
                request_token.value
            ),
        )
