"""Disconnect use case."""

from pydantic import BaseModel

from socialconnect.application.usecase.base import BaseUseCase
from socialconnect.domain.error import AccountNotResolvedError
from socialconnect.domain.service import AccountIdResolver, ServiceProvider


class DisconnectResponse(BaseModel):
    """Disconnect response."""

    provider: str
    connected: bool


class DisconnectUseCase(BaseUseCase):
    """Use case for removing the signed-in account's connection."""

    def __init__(
        self,
        service_provider: ServiceProvider,
        account_id_resolver: AccountIdResolver,
    ) -> None:
        self.service_provider = service_provider
        self.account_id_resolver = account_id_resolver

    async def execute(self, request: None = None) -> DisconnectResponse:
        """Execute disconnect.

        Raises:
            AccountNotResolvedError: If no local account is signed in
        """
        if self.account_id_resolver.resolve_account_id() is None:
            raise AccountNotResolvedError(self.service_provider.name)

        await self.service_provider.disconnect()
        return DisconnectResponse(
            provider=self.service_provider.name,
            connected=await self.service_provider.is_connected(),
        )
