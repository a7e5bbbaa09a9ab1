"""Cancel connection use case."""

import logfire
from pydantic import BaseModel

from socialconnect.application.usecase.base import BaseUseCase
from socialconnect.domain.repository import PendingRequestTokenRepository
from socialconnect.domain.service import AccountIdResolver, ServiceProvider


class CancelConnectionRequest(BaseModel):
    """Request token named by a denied callback."""

    oauth_token: str


class CancelConnectionUseCase(BaseUseCase):
    """Use case for dropping a pending request token the user declined.

    Only the account that started the flow can discard its token; anything
    else is left to expire.
    """

    def __init__(
        self,
        service_provider: ServiceProvider,
        account_id_resolver: AccountIdResolver,
        request_token_repository: PendingRequestTokenRepository,
    ) -> None:
        self.service_provider = service_provider
        self.account_id_resolver = account_id_resolver
        self.request_token_repository = request_token_repository

    async def execute(self, request: CancelConnectionRequest) -> bool:
        """Discard the pending token.

        Returns:
            True if a pending token of the signed-in account was removed
        """
        account_id = self.account_id_resolver.resolve_account_id()
        if account_id is None:
            return False

        pending = await self.request_token_repository.pop(request.oauth_token)
        if pending is None:
            return False

        if (
            pending.account_id != account_id
            or pending.provider != self.service_provider.name
        ):
            await self.request_token_repository.save(pending)
            return False

        logfire.info(
            "Connection cancelled",
            provider=self.service_provider.name,
            account_id=str(account_id),
        )
        return True
